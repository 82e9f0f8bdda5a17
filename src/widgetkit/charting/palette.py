"""Slice colour resolution.

Priority for each label, in encounter order:

 1. ``status_colors[label]`` verbatim (does not consume a palette slot)
 2. ``default_colors`` cycled with a shared index that only advances here
 3. a generated ``hsl(H, 70%, 55%)`` whose hue is seeded from the label text

The generated hue depends only on the label: the seed is a SHA-256 digest of
the UTF-8 text, so the same label gets the same colour in every process
(``hash()`` is salted per interpreter and cannot be used).
"""

from __future__ import annotations

import hashlib
import random
from typing import Mapping, Optional, Sequence

from widgetkit.config.settings import FALLBACK_LIGHTNESS, FALLBACK_SATURATION

__all__ = ["ColorResolver", "generate_color", "stable_seed"]


def stable_seed(text: str) -> int:
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def generate_color(label: str) -> str:
    hue = random.Random(stable_seed(label)).randrange(0, 360)
    return f"hsl({hue}, {FALLBACK_SATURATION}%, {FALLBACK_LIGHTNESS}%)"


class ColorResolver:
    """Resolves colours for one slice build; create a fresh resolver per build."""

    def __init__(
        self,
        status_colors: Optional[Mapping[str, str]] = None,
        default_colors: Optional[Sequence[str]] = None,
    ) -> None:
        self._status = status_colors or {}
        self._palette = list(default_colors or ())
        self._index = 0

    def resolve(self, label: str) -> str:
        if label in self._status:
            return self._status[label]
        if self._palette:
            color = self._palette[self._index % len(self._palette)]
            self._index += 1
            return color
        return generate_color(label)
