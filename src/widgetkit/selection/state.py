"""Selection-state engine for multi-select checkbox lists.

Keeps three views of one selection in sync:

 - ``selected_keys``: unique keys in selection order (first-selected-first)
 - ``selected_labels``: display labels, index-aligned with the keys
 - ``selected_map``: ``{key: int}`` whose values depend on the source kind
   (see ``selection.source``)

Every rebuild hands out a *fresh* map object. Assigning ``selected_map`` only
notifies when the assigned object is a different instance, so a host that
echoes the map it received back into the engine does not trigger a
notification loop.

Notifications are published on ``bus`` (``WidgetEvent.SELECTED_*``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from widgetkit.services.event_bus import EventBus, WidgetEvent

from .source import Accessor, SourceKind, iter_items, materialize, resolve_accessors

__all__ = ["SelectionState"]

log = logging.getLogger(__name__)


class SelectionState:
    def __init__(
        self,
        kind: SourceKind | str,
        source: Any = None,
        *,
        key_of: Accessor | None = None,
        label_of: Accessor | None = None,
        selected_keys: Iterable[str] | None = None,
        selected_labels: Iterable[str] | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.kind = SourceKind(kind)
        self._source = materialize(source)
        self._key_of, self._label_of = resolve_accessors(self.kind, key_of, label_of)
        self.selected_keys: List[str] = list(selected_keys or ())
        self.selected_labels: List[str] = list(selected_labels or ())
        self._selected_map: Dict[str, int] = {}
        self._seeded = False
        self.bus = bus or EventBus()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def source(self) -> Any:
        return self._source

    @source.setter
    def source(self, value: Any) -> None:
        # Replacing the data never re-seeds; the next rebuild uses it.
        self._source = materialize(value)

    @property
    def seeded(self) -> bool:
        return self._seeded

    @property
    def selected_map(self) -> Dict[str, int]:
        return self._selected_map

    @selected_map.setter
    def selected_map(self, value: Optional[Dict[str, int]]) -> None:
        if value is self._selected_map:
            return
        self._selected_map = value if value is not None else {}
        self.bus.publish(WidgetEvent.SELECTED_MAP_CHANGED, self._selected_map)

    def is_selected(self, key: str) -> bool:
        return key in self.selected_keys

    def key_of(self, item: Any) -> str:
        return self._key_of(item)

    def label_of(self, item: Any) -> str:
        return self._label_of(item)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def seed_initial(
        self,
        excluded_labels: Iterable[str] | None = None,
        *,
        items: Any = None,
        key_of: Accessor | None = None,
        label_of: Accessor | None = None,
    ) -> bool:
        """Select every item whose label is not excluded.

        Runs once per engine; later calls return ``False`` and leave the state
        untouched. Exclusions compare labels case-insensitively. Values/texts
        notifications fire only for the views that actually changed.
        """
        if self._seeded:
            log.debug("seed_initial ignored: already seeded")
            return False
        self._seeded = True

        excluded = {str(label).casefold() for label in (excluded_labels or ())}
        key_fn = key_of or self._key_of
        label_fn = label_of or self._label_of
        before_keys = list(self.selected_keys)
        before_labels = list(self.selected_labels)

        for item in iter_items(self._source if items is None else items):
            label = label_fn(item)
            key = key_fn(item)
            if label.casefold() in excluded:
                continue
            self._add(key, label)

        log.debug(
            "seeded %d of %d keys (%d excluded labels)",
            len(self.selected_keys) - len(before_keys),
            len(self.selected_keys),
            len(excluded),
        )
        self.rebuild_map()
        if self.selected_keys != before_keys:
            self._publish_values()
        if self.selected_labels != before_labels:
            self._publish_texts()
        return True

    def toggle(self, key: str, label: str, checked: bool) -> None:
        """Add (``checked``) or remove a key/label pair, then notify.

        Removal is by value on each sequence independently; absent values are
        ignored.
        """
        if checked:
            self._add(key, label)
        else:
            if key in self.selected_keys:
                self.selected_keys.remove(key)
            if label in self.selected_labels:
                self.selected_labels.remove(label)
        self._check_aligned()
        self.rebuild_map()
        self._emit_all()

    def select_all(self) -> None:
        for item in iter_items(self._source):
            self._add(self._key_of(item), self._label_of(item))
        self._check_aligned()
        self.rebuild_map()
        self._emit_all()

    def clear_all(self) -> None:
        self.selected_keys.clear()
        self.selected_labels.clear()
        self.rebuild_map()
        self._emit_all()

    def rebuild_map(self) -> Dict[str, int]:
        if self.kind is SourceKind.STRINGS:
            new_map = {k: 0 for k in self.selected_keys}
        elif self.kind is SourceKind.MAPPING:
            lookup = dict(self._source or {})
            new_map = {k: lookup[k] for k in self.selected_keys if k in lookup}
        else:
            new_map = {k: i for i, k in enumerate(self.selected_keys)}
        self.selected_map = new_map
        return new_map

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _add(self, key: str, label: str) -> None:
        if key not in self.selected_keys:
            self.selected_keys.append(key)
        if label not in self.selected_labels:
            self.selected_labels.append(label)

    def _check_aligned(self) -> None:
        if len(self.selected_keys) != len(self.selected_labels):
            log.warning(
                "selection out of sync: %d keys vs %d labels",
                len(self.selected_keys),
                len(self.selected_labels),
            )

    def _publish_values(self) -> None:
        self.bus.publish(WidgetEvent.SELECTED_VALUES_CHANGED, list(self.selected_keys))

    def _publish_texts(self) -> None:
        self.bus.publish(WidgetEvent.SELECTED_TEXTS_CHANGED, list(self.selected_labels))

    def _emit_all(self) -> None:
        self._publish_values()
        self._publish_texts()
