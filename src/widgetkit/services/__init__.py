"""Shared infrastructure services (headless)."""

from .event_bus import Event, EventBus, Subscription, WidgetEvent  # noqa: F401
