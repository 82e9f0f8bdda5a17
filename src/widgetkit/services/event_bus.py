"""EventBus core.

Lightweight synchronous publish/subscribe mechanism with typed events.
Widget engines and view models publish change notifications here instead of
holding direct references to their host.

Goals:
 - Decouple engines from the host layer (no Qt dependency)
 - Safe error isolation: one failing handler doesn't break the publish cycle
 - Allow one-shot (once) subscriptions
 - Provide unsubscribe handles
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Deque, Dict, List, Protocol

__all__ = [
    "WidgetEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

log = logging.getLogger(__name__)

# Most recent handler failures kept for inspection.
MAX_ERRORS = 50


class WidgetEvent(str, Enum):  # Using str subclass for easier JSON/UI usage
    SELECTED_VALUES_CHANGED = "selected_values_changed"
    SELECTED_TEXTS_CHANGED = "selected_texts_changed"
    SELECTED_MAP_CHANGED = "selected_map_changed"
    SLICES_REBUILT = "slices_rebuilt"
    SLICE_CLICKED = "slice_clicked"
    CENTER_CLICKED = "center_clicked"


@dataclass
class Event:
    name: str  # matches WidgetEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | WidgetEvent) -> str:
    return name.value if isinstance(name, WidgetEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Thread-safety: the subscription table is guarded by a re-entrant lock.
    Handlers are invoked while the lock is NOT held (copy-first strategy) so
    handlers can subscribe/unsubscribe recursively without deadlock.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: Deque[tuple[Event, BaseException]] = deque(maxlen=MAX_ERRORS)

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(
        self, name: str | WidgetEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = _key(name)
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if not bucket:
                return
            for i, existing in enumerate(bucket):
                if existing is sub:
                    bucket.pop(i)
                    break
            if not bucket:
                self._subs.pop(sub.event, None)
        sub.active = False

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | WidgetEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        to_remove: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - capture any handler failure
                log.exception("handler failed for %s", key)
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    to_remove.append(sub)
        if to_remove:
            with self._lock:
                bucket = self._subs.get(key)
                if bucket:
                    self._subs[key] = [s for s in bucket if s not in to_remove]
                    if not self._subs[key]:
                        self._subs.pop(key, None)
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | WidgetEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
