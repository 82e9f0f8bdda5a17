"""Donut/pie chart slice layout (headless).

Turns a label -> quantity mapping into ordered slices with resolved colours
and SVG path data. No rendering backend is imported here; ``widgetkit.views``
paints the slices with Qt.
"""

from .geometry import build_path, inner_radius_for  # noqa: F401
from .layout import SliceLayout, build_slices, total_value  # noqa: F401
from .palette import ColorResolver, generate_color  # noqa: F401
from .types import ChartClickEventArgs, ChartInput, Slice  # noqa: F401
