"""Global configuration and constants for the widget engines."""

from __future__ import annotations

import os
from typing import Final

# Chart geometry (SVG viewBox is 200x200)
CHART_CENTER: Final = 100
OUTER_RADIUS: Final = 90
DEFAULT_THICKNESS: Final = 20

# Fallback slice colours: hsl(<hue>, 70%, 55%)
FALLBACK_SATURATION: Final = 70
FALLBACK_LIGHTNESS: Final = 55

SLICE_CSS_CLASS: Final = "donut-slice"

LOG_LEVEL: Final = os.environ.get("WIDGETKIT_LOG_LEVEL", "WARNING")
