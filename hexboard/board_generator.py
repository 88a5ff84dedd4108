"""Hex board generation algorithm.

Generates the standard 19-tile board: every axial position within two steps
of the centre receives a terrain drawn from the finite resource supply, and
number tokens are then placed by the selected :mod:`number_strategies`
strategy.  The blocker starts on the desert.
"""

from __future__ import annotations

import logging
import random

import common.settings

from .models.board import Board, Resource, Tile
from .models.position import GridPosition
from .number_strategies import NumberMethod, NumberStrategy, strategy_for
from .supply import Supply

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Board constants
# ---------------------------------------------------------------------------

BOARD_RADIUS = 2

# Standard terrain distribution (must sum to the 19 standard positions).
RESOURCE_COUNTS: dict[Resource, int] = {
    Resource.FOREST: 4,
    Resource.HILLS: 3,
    Resource.FIELD: 4,
    Resource.PASTURE: 4,
    Resource.MOUNTAIN: 3,
    Resource.DESERT: 1,
}

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def board_positions(radius: int = BOARD_RADIUS) -> list[GridPosition]:
    """Return every position with |q|, |r|, |s| <= ``radius`` in (q, r) order."""
    return [
        GridPosition(q=q, r=r)
        for q in range(-radius, radius + 1)
        for r in range(-radius, radius + 1)
        if abs(-q - r) <= radius
    ]


def generate_board(
    method: NumberMethod | NumberStrategy | str | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Generate and return a randomised standard board.

    Args:
        method: Number-token strategy, or the name of a built-in one.  Defaults
            to the HEXBOARD_NUMBER_METHOD setting.
        seed: Optional integer seed for reproducible boards.  Ignored when
            ``rng`` is given.  Defaults to the HEXBOARD_SEED setting.
        rng: Optional random source to draw from.

    Returns:
        A fully populated :class:`Board` with the blocker on the desert.
    """
    rng = _resolve_rng(seed, rng)
    strategy = _resolve_strategy(method)

    board = Board()
    supply = Supply(RESOURCE_COUNTS)
    for position in board_positions():
        resource = supply.draw(rng) or Resource.NONE
        board.add_tile(Tile(resource=resource, position=position))

    strategy.assign(board, rng)

    desert = next(
        (t for t in board.get_tiles() if t.resource == Resource.DESERT), None
    )
    if desert is not None:
        board.move_blocker(desert.position)

    logger.info(
        'Generated board with %d tiles using %s',
        len(board.tiles),
        type(strategy).__name__,
    )
    return board


def assign_numbers(
    board: Board,
    method: NumberMethod | NumberStrategy | str | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> None:
    """Re-assign every number token on ``board`` in place with ``method``."""
    strategy = _resolve_strategy(method)
    strategy.assign(board, _resolve_rng(seed, rng))
    logger.info('Re-assigned number tokens using %s', type(strategy).__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _resolve_rng(seed: int | None, rng: random.Random | None) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed if seed is not None else common.settings.SEED)


def _resolve_strategy(
    method: NumberMethod | NumberStrategy | str | None,
) -> NumberStrategy:
    if method is None:
        method = common.settings.NUMBER_METHOD
    if isinstance(method, str):
        return strategy_for(method)
    return method
