"""Qt checkbox list bound to ``CheckBoxListViewModel``.

Selections are seeded on the first ``showEvent``; user check changes are
forwarded to the view model and the item check states are refreshed from the
view model's rows.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from widgetkit.services.event_bus import Event, WidgetEvent
from widgetkit.viewmodels import CheckBoxListViewModel

__all__ = ["CheckBoxListWidget"]


class CheckBoxListWidget(QWidget):
    selection_changed = pyqtSignal(list)  # selected keys

    def __init__(self, viewmodel: CheckBoxListViewModel, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("checkBoxList")
        self._vm = viewmodel
        self._first_render = True
        self._syncing = False
        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        self.list = QListWidget(self)
        self.list.setObjectName("checkBoxListItems")
        lay.addWidget(self.list)
        self.list.itemChanged.connect(self._on_item_changed)  # type: ignore
        bus, sub = viewmodel.bus, viewmodel.bus.subscribe(
            WidgetEvent.SELECTED_VALUES_CHANGED, self._on_values_changed
        )
        self._sub = sub
        # Bound methods are unusable once the C++ object is gone.
        self.destroyed.connect(lambda *_: bus.unsubscribe(sub))  # type: ignore
        self.refresh()

    @property
    def viewmodel(self) -> CheckBoxListViewModel:
        return self._vm

    # Qt lifecycle -----------------------------------------------------
    def showEvent(self, event):  # noqa: N802 - Qt override
        super().showEvent(event)
        first = self._first_render
        self._first_render = False
        if self._vm.on_after_render(first):
            self.refresh()

    def closeEvent(self, event):  # noqa: N802 - Qt override
        self._vm.bus.unsubscribe(self._sub)
        super().closeEvent(event)

    # Rendering --------------------------------------------------------
    def refresh(self) -> None:
        rows = self._vm.rows()
        self._syncing = True
        try:
            if self.list.count() != len(rows):
                self.list.clear()
                for row in rows:
                    item = QListWidgetItem(row.label)
                    item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                    item.setData(Qt.ItemDataRole.UserRole, row.key)
                    self.list.addItem(item)
            for i, row in enumerate(rows):
                item = self.list.item(i)
                item.setText(row.label)
                item.setData(Qt.ItemDataRole.UserRole, row.key)
                item.setCheckState(
                    Qt.CheckState.Checked if row.checked else Qt.CheckState.Unchecked
                )
        finally:
            self._syncing = False

    def checked_keys(self) -> list[str]:
        out = []
        for i in range(self.list.count()):
            item = self.list.item(i)
            if item.checkState() == Qt.CheckState.Checked:
                out.append(item.data(Qt.ItemDataRole.UserRole))
        return out

    # Handlers ---------------------------------------------------------
    def _on_item_changed(self, item: QListWidgetItem) -> None:
        if self._syncing:
            return
        checked = item.checkState() == Qt.CheckState.Checked
        self._vm.toggle_value(item.data(Qt.ItemDataRole.UserRole), item.text(), checked)

    def _on_values_changed(self, evt: Event) -> None:
        self.refresh()
        self.selection_changed.emit(list(evt.payload))
