"""Core charting types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from widgetkit.config.settings import DEFAULT_THICKNESS, SLICE_CSS_CLASS

from .geometry import build_path


@dataclass(frozen=True)
class ChartInput:
    """Parameters a donut/pie chart is built from.

    Attributes:
        data: Label -> quantity. Zero and negative quantities never become slices.
        include_labels: Optional allow-list; ``None`` means every label.
        status_colors: Explicit label -> colour overrides (highest priority).
        default_colors: Palette cycled for labels without an override.
        is_donut: Donut (True) or pie (False).
        thickness: Ring width, only used for donuts.
        title / inner_title: Host captions; ``inner_title`` is the centre click payload.
    """

    data: Optional[Mapping[str, int]] = None
    include_labels: Optional[Sequence[str]] = None
    status_colors: Optional[Mapping[str, str]] = None
    default_colors: Optional[Sequence[str]] = None
    is_donut: bool = True
    thickness: int = DEFAULT_THICKNESS
    title: Optional[str] = None
    inner_title: Optional[str] = None


@dataclass(frozen=True)
class Slice:
    """A single slice of a donut or pie chart.

    ``path_data`` is derived from the geometry on construction.
    """

    label: str
    value: int
    start_angle: float
    sweep_angle: float
    outer_radius: float
    inner_radius: float
    color: str
    path_data: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "path_data",
            build_path(self.start_angle, self.sweep_angle, self.outer_radius, self.inner_radius),
        )

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def css_class(self) -> str:
        return SLICE_CSS_CLASS


@dataclass(frozen=True)
class ChartClickEventArgs:
    slice_label: Optional[str]
