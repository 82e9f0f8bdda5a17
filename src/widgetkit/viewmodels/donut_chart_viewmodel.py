"""ViewModel for the donut/pie chart widget.

Every parameter change rebuilds the slices in full and publishes
``WidgetEvent.SLICES_REBUILT``. Clicks are forwarded as
``ChartClickEventArgs`` on ``SLICE_CLICKED`` / ``CENTER_CLICKED``.
"""

from __future__ import annotations

import dataclasses
from typing import Any, List, Optional

from widgetkit.charting import ChartClickEventArgs, ChartInput, Slice, SliceLayout
from widgetkit.services.event_bus import EventBus, WidgetEvent

__all__ = ["DonutChartViewModel"]


class DonutChartViewModel:
    def __init__(self, chart: ChartInput | None = None, *, bus: EventBus | None = None) -> None:
        self.bus = bus or EventBus()
        self._layout = SliceLayout()
        self.set_input(chart or ChartInput())

    @property
    def chart(self) -> ChartInput:
        return self._layout.chart

    @property
    def slices(self) -> List[Slice]:
        return self._layout.slices

    @property
    def total_value(self) -> int:
        return self._layout.total_value

    @property
    def inner_radius(self) -> int:
        return self._layout.inner_radius

    def set_input(self, chart: ChartInput) -> List[Slice]:
        slices = self._layout.rebuild(chart)
        self.bus.publish(WidgetEvent.SLICES_REBUILT, list(slices))
        return slices

    def set_parameters(self, **params: Any) -> List[Slice]:
        """Replace selected ``ChartInput`` fields (e.g. ``data=...``) and rebuild."""
        return self.set_input(dataclasses.replace(self.chart, **params))

    def slice_clicked(self, label: str) -> ChartClickEventArgs:
        args = ChartClickEventArgs(slice_label=label)
        self.bus.publish(WidgetEvent.SLICE_CLICKED, args)
        return args

    def center_clicked(self) -> Optional[ChartClickEventArgs]:
        if not self.chart.is_donut:
            return None
        args = ChartClickEventArgs(slice_label=self.chart.inner_title)
        self.bus.publish(WidgetEvent.CENTER_CLICKED, args)
        return args
