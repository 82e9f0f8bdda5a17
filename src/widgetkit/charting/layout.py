"""Slice layout: label -> quantity mapping to ordered slice geometry.

``build_slices`` is a pure function; ``SliceLayout`` keeps the last-built
slice list for one chart instance. Slices are always rebuilt in full.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from widgetkit.config.settings import OUTER_RADIUS

from .geometry import inner_radius_for
from .palette import ColorResolver
from .types import ChartInput, Slice

__all__ = ["build_slices", "total_value", "SliceLayout"]

log = logging.getLogger(__name__)


def _filtered_entries(chart: ChartInput) -> List[Tuple[str, int]]:
    allowed = set(chart.include_labels) if chart.include_labels is not None else None
    return [
        (label, value)
        for label, value in chart.data.items()
        if (allowed is None or label in allowed) and value > 0
    ]


def build_slices(chart: ChartInput) -> List[Slice]:
    if not chart.data:
        return []

    entries = _filtered_entries(chart)
    total = sum(value for _, value in entries)
    if total < 1:
        log.debug("no positive values after filtering (%d labels)", len(chart.data))
        return []

    inner = inner_radius_for(chart.is_donut, chart.thickness)
    colors = ColorResolver(chart.status_colors, chart.default_colors)
    slices: List[Slice] = []
    start_angle = 0.0
    for label, value in entries:
        sweep = value / total * 360.0
        slices.append(
            Slice(
                label=label,
                value=value,
                start_angle=start_angle,
                sweep_angle=sweep,
                outer_radius=OUTER_RADIUS,
                inner_radius=inner,
                color=colors.resolve(label),
            )
        )
        start_angle += sweep
    log.debug("built %d slices (total=%d, inner_radius=%d)", len(slices), total, inner)
    return slices


def total_value(slices: List[Slice]) -> int:
    return sum(s.value for s in slices)


class SliceLayout:
    """Holds the slices most recently built for a chart."""

    def __init__(self, chart: ChartInput | None = None) -> None:
        self.chart = chart or ChartInput()
        self.slices: List[Slice] = build_slices(self.chart)

    def rebuild(self, chart: ChartInput | None = None) -> List[Slice]:
        if chart is not None:
            self.chart = chart
        self.slices = build_slices(self.chart)
        return self.slices

    @property
    def total_value(self) -> int:
        return total_value(self.slices)

    @property
    def inner_radius(self) -> int:
        return inner_radius_for(self.chart.is_donut, self.chart.thickness)

    def slice_for(self, label: str) -> Slice | None:
        for s in self.slices:
            if s.label == label:
                return s
        return None
