# Shared fixtures. Qt widget tests run headless on the offscreen platform.
# pytest-qt supplies the 'qapp' fixture when installed; otherwise a minimal
# fallback creates the QApplication (tests skip if PyQt6 itself is missing).

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from widgetkit.services.event_bus import EventBus, WidgetEvent  # noqa: E402

try:  # If pytest-qt present, its qapp fixture is used
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover

    @pytest.fixture(scope="session")
    def qapp():  # type: ignore
        widgets = pytest.importorskip("PyQt6.QtWidgets")
        return widgets.QApplication.instance() or widgets.QApplication(sys.argv)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    """Collect (event name, payload) tuples for every widget event on ``bus``."""
    seen = []
    for evt in WidgetEvent:
        bus.subscribe(evt, lambda e: seen.append((e.name, e.payload)))
    return seen
