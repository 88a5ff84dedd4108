"""Finite supply (bank) of resource or number tokens drawn without replacement."""

from __future__ import annotations

import collections
import random
import typing
from collections.abc import Mapping

T = typing.TypeVar('T')


class Supply(typing.Generic[T]):
    """A countable multiset.  Each remaining unit is an equally likely draw.

    Drawing from an empty supply is not an error: :meth:`draw` returns None
    and the caller substitutes its own absence value.
    """

    def __init__(self, counts: Mapping[T, int]) -> None:
        self._counts: collections.Counter[T] = collections.Counter(
            {item: count for item, count in counts.items() if count > 0}
        )

    def __len__(self) -> int:
        return self._counts.total()

    def count(self, item: T) -> int:
        """Return how many units of ``item`` remain."""
        return self._counts[item]

    def draw(self, rng: random.Random) -> T | None:
        """Remove and return one unit, weighted by remaining count."""
        remaining = len(self)
        if remaining == 0:
            return None
        pick = rng.randrange(remaining)
        items = iter(self._counts.items())
        item, count = next(items)
        while pick >= count:
            pick -= count
            item, count = next(items)
        self._counts[item] -= 1
        if self._counts[item] == 0:
            del self._counts[item]
        return item
