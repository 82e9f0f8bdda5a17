"""Source shapes accepted by the selection engine.

A checkbox list can be fed three kinds of data and the shape decides what the
selected map holds:

 - ``STRINGS``: a sequence of plain strings; map values are always 0.
 - ``MAPPING``: a ``{key: int}`` mapping; map values are copied from it.
 - ``OBJECTS``: arbitrary records read through accessor functions; map values
   are positions in the current selection order.

The kind is fixed when the engine is constructed (``SourceKind.detect`` is a
convenience for hosts that don't want to name it explicitly).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Tuple

__all__ = [
    "SourceKind",
    "Accessor",
    "default_accessor",
    "iter_items",
    "materialize",
    "resolve_accessors",
]

Accessor = Callable[[Any], str]


class SourceKind(str, Enum):
    STRINGS = "strings"
    MAPPING = "mapping"
    OBJECTS = "objects"

    @classmethod
    def detect(cls, source: Any) -> "SourceKind":
        if isinstance(source, Mapping):
            return cls.MAPPING
        items = list(source or ())
        if all(isinstance(i, str) for i in items):
            return cls.STRINGS
        return cls.OBJECTS


def default_accessor(item: Any) -> str:
    """Fallback key/label: the item's own string form ('' for None)."""
    return "" if item is None else str(item)


def _pair_key(pair: Tuple[str, int]) -> str:
    return pair[0]


def materialize(source: Any) -> Any:
    """Mappings pass through; any other iterable becomes a list so it can be
    walked more than once (generators would otherwise be exhausted)."""
    if source is None or isinstance(source, Mapping):
        return source
    return list(source)


def iter_items(source: Any) -> Iterable[Any]:
    """Return the items the accessors are applied to.

    Mappings yield ``(key, value)`` pairs in insertion order.
    """
    if source is None:
        return ()
    if isinstance(source, Mapping):
        return list(source.items())
    return list(source)


def resolve_accessors(
    kind: SourceKind, key_of: Accessor | None, label_of: Accessor | None
) -> tuple[Accessor, Accessor]:
    fallback = _pair_key if kind is SourceKind.MAPPING else default_accessor
    return key_of or fallback, label_of or fallback
