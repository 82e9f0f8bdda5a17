"""ViewModel for the checkbox list widget.

Wraps a ``SelectionState`` with the host-facing lifecycle: seeding happens on
the first render (not at construction) so the host can finish binding
parameters first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from widgetkit.selection import SelectionState, SourceKind
from widgetkit.selection.source import Accessor, iter_items, materialize
from widgetkit.services.event_bus import EventBus

__all__ = ["CheckBoxListViewModel", "CheckBoxRow"]


@dataclass(frozen=True)
class CheckBoxRow:
    key: str
    label: str
    checked: bool


class CheckBoxListViewModel:
    def __init__(
        self,
        data: Any = None,
        *,
        text_field: Accessor | None = None,
        value_field: Accessor | None = None,
        unchecked_initially: Optional[Iterable[str]] = None,
        selected_values: Optional[Iterable[str]] = None,
        selected_texts: Optional[Iterable[str]] = None,
        kind: SourceKind | str | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.data = materialize(data) if data is not None else []
        self.unchecked_initially = list(unchecked_initially) if unchecked_initially else None
        self.state = SelectionState(
            kind or SourceKind.detect(self.data),
            self.data,
            key_of=value_field,
            label_of=text_field,
            selected_keys=selected_values,
            selected_labels=selected_texts,
            bus=bus,
        )
        self._initialized = False

    @property
    def bus(self) -> EventBus:
        return self.state.bus

    @property
    def selected_values(self) -> List[str]:
        return self.state.selected_keys

    @property
    def selected_texts(self) -> List[str]:
        return self.state.selected_labels

    @property
    def selected_map(self) -> Dict[str, int]:
        return self.state.selected_map

    def set_data(self, data: Any) -> None:
        self.data = materialize(data) if data is not None else []
        self.state.source = self.data

    def on_after_render(self, first_render: bool) -> bool:
        """Seed selections on the first render only; returns True when seeded."""
        if not first_render or self._initialized:
            return False
        self._initialized = True
        return self.state.seed_initial(self.unchecked_initially)

    def toggle_value(self, value: str, text: str, changed: Any) -> None:
        # Only a real boolean True counts as checked.
        is_checked = changed is True
        self.state.toggle(value, text, is_checked)

    def rows(self) -> List[CheckBoxRow]:
        out: List[CheckBoxRow] = []
        for item in iter_items(self.data):
            key = self.state.key_of(item)
            out.append(
                CheckBoxRow(
                    key=key,
                    label=self.state.label_of(item),
                    checked=self.state.is_selected(key),
                )
            )
        return out
