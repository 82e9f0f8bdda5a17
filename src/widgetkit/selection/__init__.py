"""Checkbox selection engine (headless)."""

from .source import SourceKind, default_accessor  # noqa: F401
from .state import SelectionState  # noqa: F401
