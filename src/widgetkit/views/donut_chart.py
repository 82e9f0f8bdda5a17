"""Qt donut/pie chart bound to ``DonutChartViewModel``.

Slices are painted in the same 200x200 coordinate box the SVG path data uses,
scaled to fit the widget. Qt measures arc angles counter-clockwise, so slice
angles (clockwise, y down) are negated when building painter paths.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional, Tuple

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QTransform
from PyQt6.QtWidgets import QWidget

from widgetkit.charting import Slice
from widgetkit.config.settings import CHART_CENTER
from widgetkit.services.event_bus import WidgetEvent
from widgetkit.viewmodels import DonutChartViewModel

__all__ = ["DonutChartWidget", "to_qcolor", "slice_path"]

_HSL_RE = re.compile(r"hsl\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)")
_BOX = 2 * CHART_CENTER


def to_qcolor(text: str) -> QColor:
    """QColor from '#RRGGBB', an SVG colour name or 'hsl(h, s%, l%)'."""
    m = _HSL_RE.fullmatch(text.strip())
    if m:
        h, s, lum = (int(g) for g in m.groups())
        return QColor.fromHsl(h % 360, round(s * 255 / 100), round(lum * 255 / 100))
    return QColor(text)


def _circle(radius: float) -> QRectF:
    return QRectF(CHART_CENTER - radius, CHART_CENTER - radius, 2 * radius, 2 * radius)


def slice_path(s: Slice) -> QPainterPath:
    outer = _circle(s.outer_radius)
    path = QPainterPath()
    if s.inner_radius <= 0:
        path.moveTo(CHART_CENTER, CHART_CENTER)
        path.arcTo(outer, -s.start_angle, -s.sweep_angle)
    else:
        path.arcMoveTo(outer, -s.start_angle)
        path.arcTo(outer, -s.start_angle, -s.sweep_angle)
        path.arcTo(_circle(s.inner_radius), -s.end_angle, s.sweep_angle)
    path.closeSubpath()
    return path


class DonutChartWidget(QWidget):
    slice_clicked = pyqtSignal(str)
    center_clicked = pyqtSignal(str)

    def __init__(self, viewmodel: DonutChartViewModel, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("donutChart")
        self.setMinimumSize(120, 120)
        self._vm = viewmodel
        self._paths: List[Tuple[Slice, QPainterPath]] = []
        self._rebuild_paths()
        bus, sub = viewmodel.bus, viewmodel.bus.subscribe(
            WidgetEvent.SLICES_REBUILT, self._on_slices_rebuilt
        )
        self._sub = sub
        # Bound methods are unusable once the C++ object is gone.
        self.destroyed.connect(lambda *_: bus.unsubscribe(sub))  # type: ignore

    @property
    def viewmodel(self) -> DonutChartViewModel:
        return self._vm

    def slice_paths(self) -> List[Tuple[Slice, QPainterPath]]:
        return list(self._paths)

    def chart_transform(self) -> QTransform:
        side = min(self.width(), self.height())
        scale = side / _BOX if side > 0 else 1.0
        t = QTransform()
        t.translate((self.width() - side) / 2, (self.height() - side) / 2)
        t.scale(scale, scale)
        return t

    def closeEvent(self, event):  # noqa: N802 - Qt override
        self._vm.bus.unsubscribe(self._sub)
        super().closeEvent(event)

    # Painting ---------------------------------------------------------
    def paintEvent(self, event):  # noqa: N802 - Qt override
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setTransform(self.chart_transform())
            painter.setPen(Qt.PenStyle.NoPen)
            for s, path in self._paths:
                painter.fillPath(path, to_qcolor(s.color))
        finally:
            painter.end()

    # Interaction ------------------------------------------------------
    def mousePressEvent(self, event):  # noqa: N802 - Qt override
        if event.button() == Qt.MouseButton.LeftButton:
            inverted, ok = self.chart_transform().inverted()
            if ok and self.handle_click(inverted.map(event.position())):
                return
        super().mousePressEvent(event)

    def handle_click(self, point: QPointF) -> bool:
        """Dispatch a click given in chart coordinates; True when consumed."""
        for s, path in self._paths:
            if path.contains(point):
                self._vm.slice_clicked(s.label)
                self.slice_clicked.emit(s.label)
                return True
        inner = self._vm.inner_radius
        if self._vm.chart.is_donut and inner > 0:
            dist = math.hypot(point.x() - CHART_CENTER, point.y() - CHART_CENTER)
            if dist < inner:
                args = self._vm.center_clicked()
                self.center_clicked.emit((args.slice_label if args else None) or "")
                return True
        return False

    def _rebuild_paths(self) -> None:
        self._paths = [(s, slice_path(s)) for s in self._vm.slices]

    def _on_slices_rebuilt(self, _evt) -> None:
        self._rebuild_paths()
        self.update()
