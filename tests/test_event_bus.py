import logging

from widgetkit.services.event_bus import MAX_ERRORS, EventBus, WidgetEvent


def test_subscribe_and_publish_order():
    bus = EventBus()
    order = []

    def h1(e):
        order.append(("h1", e.name))

    def h2(e):
        order.append(("h2", e.name))

    bus.subscribe(WidgetEvent.SELECTED_MAP_CHANGED, h1)
    bus.subscribe(WidgetEvent.SELECTED_MAP_CHANGED, h2)
    bus.publish(WidgetEvent.SELECTED_MAP_CHANGED, {"A": 0})
    assert order == [
        ("h1", WidgetEvent.SELECTED_MAP_CHANGED.value),
        ("h2", WidgetEvent.SELECTED_MAP_CHANGED.value),
    ]


def test_once_subscription():
    bus = EventBus()
    calls = []
    bus.subscribe(WidgetEvent.SLICES_REBUILT, lambda e: calls.append(e.name), once=True)
    bus.publish(WidgetEvent.SLICES_REBUILT)
    bus.publish(WidgetEvent.SLICES_REBUILT)
    assert calls == [WidgetEvent.SLICES_REBUILT.value]


def test_unsubscribe():
    bus = EventBus()
    calls = []
    sub = bus.subscribe("custom", lambda e: calls.append(e.payload))
    bus.publish("custom", 1)
    bus.unsubscribe(sub)
    bus.publish("custom", 2)
    assert calls == [1]
    assert bus.subscriber_count("custom") == 0
    assert not sub.active


def test_error_isolation():
    bus = EventBus()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    def good(_):
        order.append("good")

    bus.subscribe("custom", bad)
    bus.subscribe("custom", good)
    bus.publish("custom", 123)
    # Both handlers executed despite error
    assert order == ["bad", "good"]
    assert len(bus.errors) == 1
    assert isinstance(bus.errors[0][1], RuntimeError)


def test_string_and_enum_names_share_a_channel():
    bus = EventBus()
    got = []
    bus.subscribe("slice_clicked", lambda e: got.append(e.payload))
    bus.publish(WidgetEvent.SLICE_CLICKED, "A")
    assert got == ["A"]
    assert bus.subscriber_count(WidgetEvent.SLICE_CLICKED) == 1


def test_handler_failure_is_logged(caplog):
    bus = EventBus()

    def bad(_):
        raise ValueError("broken observer")

    bus.subscribe(WidgetEvent.SLICE_CLICKED, bad)
    with caplog.at_level(logging.ERROR, logger="widgetkit.services.event_bus"):
        bus.publish(WidgetEvent.SLICE_CLICKED, "A")
    assert "handler failed for slice_clicked" in caplog.text
    assert "broken observer" in caplog.text


def test_recorded_errors_are_bounded():
    bus = EventBus()

    def bad(e):
        raise RuntimeError(e.payload)

    bus.subscribe("custom", bad)
    for i in range(MAX_ERRORS + 5):
        bus.publish("custom", i)
    errors = bus.errors
    assert len(errors) == MAX_ERRORS
    assert errors[0][0].payload == 5
    assert errors[-1][0].payload == MAX_ERRORS + 4
