# -*- coding: utf-8 -*-
"""Random sources and the shuffle primitive."""
from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence
from typing import Optional, Protocol, TypeVar

from .errors import RandomSourceExhausted

T = TypeVar("T")


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def shuffle(items: MutableSequence[T], rng: RandomSource) -> MutableSequence[T]:
    """Fisher-Yates shuffle in place; returns ``items`` for chaining.

    Walks the boundary from the last index down to 1 and swaps it with a
    uniformly drawn index in ``[0, boundary]``, so a list of n items takes
    n - 1 draws.
    """
    for boundary in range(len(items) - 1, 0, -1):
        index = rng.randrange(boundary + 1)
        items[boundary], items[index] = items[index], items[boundary]
    return items


class ScriptedRandom:
    """Deterministic source that replays a fixed list of draws.

    Each ``randrange(stop)`` consumes the next value. Running out, or a value
    outside ``[0, stop)``, raises :class:`RandomSourceExhausted`.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def randrange(self, stop: int) -> int:
        if self._pos >= len(self._values):
            raise RandomSourceExhausted(f"no scripted value left after {self._pos} draws")
        value = self._values[self._pos]
        if not 0 <= value < stop:
            raise RandomSourceExhausted(f"scripted value {value} outside [0, {stop})")
        self._pos += 1
        return value
