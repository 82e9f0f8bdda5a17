import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6 import sip  # noqa: E402
from PyQt6.QtCore import Qt  # noqa: E402

from widgetkit.services.event_bus import WidgetEvent  # noqa: E402
from widgetkit.viewmodels import CheckBoxListViewModel  # noqa: E402
from widgetkit.views import CheckBoxListWidget  # noqa: E402


def test_rows_rendered_unchecked_before_first_show(qapp):
    vm = CheckBoxListViewModel(["A", "B", "C"], unchecked_initially=["B"])
    w = CheckBoxListWidget(vm)
    assert w.list.count() == 3
    assert w.checked_keys() == []
    assert [w.list.item(i).text() for i in range(3)] == ["A", "B", "C"]


def test_first_show_seeds_selection(qapp):
    vm = CheckBoxListViewModel(["A", "B", "C"], unchecked_initially=["B"])
    w = CheckBoxListWidget(vm)
    w.show()
    assert vm.selected_values == ["A", "C"]
    assert w.checked_keys() == ["A", "C"]
    w.hide()
    w.show()
    assert vm.selected_values == ["A", "C"]
    w.close()


def test_user_check_forwards_to_viewmodel(qapp):
    vm = CheckBoxListViewModel(["A", "B", "C"], unchecked_initially=["B"])
    w = CheckBoxListWidget(vm)
    w.show()
    emitted = []
    w.selection_changed.connect(emitted.append)
    w.list.item(1).setCheckState(Qt.CheckState.Checked)
    assert vm.selected_values == ["A", "C", "B"]
    assert vm.selected_map == {"A": 0, "C": 0, "B": 0}
    assert emitted[-1] == ["A", "C", "B"]
    w.list.item(0).setCheckState(Qt.CheckState.Unchecked)
    assert vm.selected_values == ["C", "B"]
    assert w.checked_keys() == ["B", "C"]
    w.close()


def test_external_toggle_refreshes_items(qapp):
    vm = CheckBoxListViewModel({"x": 1, "y": 2})
    w = CheckBoxListWidget(vm)
    vm.toggle_value("y", "y", True)
    assert w.checked_keys() == ["y"]


def test_close_and_destroy_release_bus_subscription(qapp):
    vm = CheckBoxListViewModel(["A", "B"])
    w = CheckBoxListWidget(vm)
    assert vm.bus.subscriber_count(WidgetEvent.SELECTED_VALUES_CHANGED) == 1
    w.close()
    assert vm.bus.subscriber_count(WidgetEvent.SELECTED_VALUES_CHANGED) == 0

    other = CheckBoxListWidget(vm)
    sip.delete(other)
    assert vm.bus.subscriber_count(WidgetEvent.SELECTED_VALUES_CHANGED) == 0
