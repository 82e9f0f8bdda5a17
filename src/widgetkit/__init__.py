"""widgetkit public API.

Curated, intentionally small surface: the two headless engines, their view
models and the event bus they publish on. Qt widgets live in
``widgetkit.views`` and are not imported here (no implicit PyQt6 import).
"""

from __future__ import annotations

import logging

from .config import settings
from .services.event_bus import Event, EventBus, WidgetEvent  # noqa: F401
from .selection import SelectionState, SourceKind  # noqa: F401
from .charting import (  # noqa: F401
    ChartClickEventArgs,
    ChartInput,
    Slice,
    SliceLayout,
    build_path,
    build_slices,
)
from .viewmodels import CheckBoxListViewModel, DonutChartViewModel  # noqa: F401

__version__ = "0.1.0"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply ``level`` (default ``settings.LOG_LEVEL``) to the package logger."""
    logger = logging.getLogger(__name__)
    value = level if level is not None else settings.LOG_LEVEL
    if isinstance(value, str):
        value = logging.getLevelName(value.upper())
        if not isinstance(value, int):
            value = logging.WARNING
    logger.setLevel(value)
    return logger
