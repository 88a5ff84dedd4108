"""JSON serialization helpers for board models.

Provides thin wrappers around Pydantic's built-in serialization so that a
presentation layer can take a read-only snapshot of a board without
depending on Pydantic internals.

Board snapshots record each road owner as an index into ``players`` as well
as by value, so restoring a board hands every road back to the same player
even when several players share a name.
"""

from __future__ import annotations

import json
import typing

import pydantic

from .board import Board
from .position import position_key


def serialize_model(model: pydantic.BaseModel) -> dict[str, typing.Any]:
    """Return a JSON-serializable dict representation of any Pydantic model."""
    return model.model_dump(mode='json')


def serialize_to_json(model: pydantic.BaseModel) -> str:
    """Serialize any Pydantic model to a compact JSON string."""
    return model.model_dump_json()


def serialize_board(board: Board) -> dict[str, typing.Any]:
    """Return a JSON-serializable snapshot of ``board``.

    Each road entry carries an ``owner_index`` naming its owner's slot in
    ``players`` (None when the owner is not one of the board's players).
    """
    data = serialize_model(board)
    for key, road in board.roads.items():
        data['roads'][key]['owner_index'] = next(
            (i for i, player in enumerate(board.players) if player is road.owner),
            None,
        )
    return data


def deserialize_board(data: dict[str, typing.Any]) -> Board:
    """Deserialize a plain dict into a Board instance.

    The snapshot is validated field by field, then replayed through the
    Board's own mutators so a restored board obeys the same placement rules
    as one built by hand.

    Raises:
        ValueError: if a map key disagrees with its entry's position, a road
            or settlement borders no tile, a road's ``owner_index`` is out of
            range, or the blocker is not on a tile.
    """
    snapshot = Board.model_validate(data)
    board = Board()

    for key, tile in snapshot.tiles.items():
        _require_key_matches(key, position_key(tile.position))
        board.add_tile(tile)
    for player in snapshot.players:
        board.add_player(player)
    for key, settlement in snapshot.settlements.items():
        _require_key_matches(key, position_key(settlement.position))
        board.add_settlement(settlement)

    raw_roads = data.get('roads') or {}
    for key, road in snapshot.roads.items():
        _require_key_matches(key, position_key(road.position))
        owner_index = raw_roads[key].get('owner_index')
        if owner_index is not None:
            if not isinstance(owner_index, int) or not (
                0 <= owner_index < len(board.players)
            ):
                raise ValueError(
                    f'Road {key} names owner {owner_index}, but the board has '
                    f'{len(board.players)} player(s).'
                )
            road.owner = board.players[owner_index]
        board.add_road(road)

    if snapshot.blocker is not None:
        board.move_blocker(snapshot.blocker)
    return board


def board_to_json(board: Board) -> str:
    """Convert a Board to a JSON string."""
    return json.dumps(serialize_board(board), separators=(',', ':'))


def board_from_json(json_str: str) -> Board:
    """Parse a JSON string back into a Board instance."""
    return deserialize_board(json.loads(json_str))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_key_matches(key: str, expected: str) -> None:
    if key != expected:
        raise ValueError(f'Entry stored under {key} is positioned at {expected}.')
