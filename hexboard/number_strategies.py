"""Number-token placement strategies.

Two interchangeable ways of putting number tokens on an already populated
board:

* :class:`SpiralNumberStrategy` walks a fixed inward spiral and hands out a
  fixed token sequence, skipping the desert.  The result depends only on
  where the desert landed.
* :class:`RandomNumberStrategy` draws from the standard token supply for each
  productive tile.

Both reset every tile to the unset number first, so re-running a strategy on
a board replaces the previous assignment.
"""

from __future__ import annotations

import enum
import logging
import random
import typing

from .models.board import UNSET_NUMBER, Board
from .models.position import GridPosition, position_key
from .supply import Supply

logger = logging.getLogger(__name__)


class NumberMethod(enum.StrEnum):
    """Selector for the built-in number strategies."""

    SPIRAL = 'spiral'
    RANDOM = 'random'


# Standard number-token distribution (18 tokens for 18 non-desert tiles).
NUMBER_TOKEN_COUNTS: dict[int, int] = {
    2: 1,
    3: 2,
    4: 2,
    5: 2,
    6: 2,
    8: 2,
    9: 2,
    10: 2,
    11: 2,
    12: 1,
}

# Inward spiral over the 19 standard positions: outer ring from the
# south-west corner, then the inner ring, then the centre.
SPIRAL_ORDER: list[GridPosition] = [
    GridPosition(q=q, r=r)
    for q, r in [
        # Ring 2 (12 tiles)
        (-2, 2),
        (-1, 2),
        (0, 2),
        (1, 1),
        (2, 0),
        (2, -1),
        (2, -2),
        (1, -2),
        (0, -2),
        (-1, -1),
        (-2, 0),
        (-2, 1),
        # Ring 1 (6 tiles)
        (-1, 1),
        (0, 1),
        (1, 0),
        (1, -1),
        (0, -1),
        (-1, 0),
        # Centre
        (0, 0),
    ]
]

# Fixed token sequence laid along SPIRAL_ORDER (one per productive tile).
SPIRAL_NUMBERS: list[int] = [5, 2, 6, 3, 8, 10, 9, 12, 11, 4, 8, 10, 9, 4, 5, 6, 3, 11]


class NumberStrategy(typing.Protocol):
    """Assigns number tokens to every tile on a board, in place."""

    def assign(self, board: Board, rng: random.Random) -> None: ...


def _reset_numbers(board: Board) -> None:
    for tile in board.get_tiles():
        tile.number = UNSET_NUMBER


class SpiralNumberStrategy:
    """Lay a fixed token sequence along a fixed spiral, skipping the desert."""

    def __init__(
        self,
        order: typing.Sequence[GridPosition] = tuple(SPIRAL_ORDER),
        numbers: typing.Sequence[int] = tuple(SPIRAL_NUMBERS),
    ) -> None:
        self.order = list(order)
        self.numbers = list(numbers)

    def assign(self, board: Board, rng: random.Random) -> None:
        """Assign tokens.  ``rng`` is unused; the layout is deterministic."""
        _reset_numbers(board)
        index = 0
        for position in self.order:
            tile = board.get_tile(position)
            if tile is None or not tile.is_productive:
                continue
            if index >= len(self.numbers):
                logger.warning(
                    'Spiral sequence exhausted; tile %s left unset',
                    position_key(position),
                )
                continue
            tile.number = self.numbers[index]
            index += 1


class RandomNumberStrategy:
    """Draw a token for each productive tile from a finite supply."""

    def __init__(self, counts: typing.Mapping[int, int] | None = None) -> None:
        self.counts = dict(NUMBER_TOKEN_COUNTS if counts is None else counts)

    def assign(self, board: Board, rng: random.Random) -> None:
        _reset_numbers(board)
        supply = Supply(self.counts)
        for tile in board.get_tiles():
            if not tile.is_productive:
                continue
            number = supply.draw(rng)
            if number is None:
                logger.warning(
                    'Number supply exhausted; tile %s left unset',
                    position_key(tile.position),
                )
                continue
            tile.number = number


def strategy_for(method: NumberMethod | str) -> NumberStrategy:
    """Return the built-in strategy for ``method``.

    Raises:
        ValueError: if ``method`` does not name a known strategy.
    """
    match NumberMethod(method):
        case NumberMethod.SPIRAL:
            return SpiralNumberStrategy()
        case NumberMethod.RANDOM:
            return RandomNumberStrategy()
    raise ValueError(f'Unsupported number method: {method!r}')
