"""Hex board data models.

Defines the resource tiles, settlements, roads, and the Board that indexes
them by tagged position key (see :func:`position.position_key`).
"""

from __future__ import annotations

import enum
import logging

import pydantic

from .player import Player
from .position import EdgePosition, GridPosition, VertexPosition, position_key

logger = logging.getLogger(__name__)


class Resource(enum.StrEnum):
    """Terrain type of a tile.  NONE marks a slot that could not be filled."""

    FOREST = 'forest'
    HILLS = 'hills'
    FIELD = 'field'
    PASTURE = 'pasture'
    MOUNTAIN = 'mountain'
    DESERT = 'desert'
    NONE = 'none'


class SettlementTier(enum.StrEnum):
    """Settlement or upgraded city."""

    SETTLEMENT = 'settlement'
    CITY = 'city'


UNSET_NUMBER = 0


def number_pips(number: int) -> int:
    """Return the probability dot count printed on a number token (0 if unset)."""
    if number < 2 or number > 12:
        return 0
    return 6 - abs(7 - number)


class Tile(pydantic.BaseModel):
    """A single terrain hex.  ``number`` and ``position`` change after creation."""

    resource: Resource
    number: int = UNSET_NUMBER  # 2–12; 0 while unset and always 0 on the desert
    position: GridPosition

    @property
    def is_productive(self) -> bool:
        """True for tiles that should carry a number token."""
        return self.resource not in (Resource.DESERT, Resource.NONE)

    @property
    def pips(self) -> int:
        return number_pips(self.number)


class Settlement(pydantic.BaseModel):
    """A settlement or city placed on a vertex."""

    position: VertexPosition
    tier: SettlementTier = SettlementTier.SETTLEMENT

    def upgrade(self) -> None:
        """Upgrade to a city.  Has no effect on a city."""
        if self.tier == SettlementTier.SETTLEMENT:
            self.tier = SettlementTier.CITY


class Road(pydantic.BaseModel):
    """A road placed on an edge.  ``owner`` refers to a player; it is not owned."""

    position: EdgePosition
    owner: Player


class Board(pydantic.BaseModel):
    """The complete board: tiles, settlements, roads, players and the blocker.

    Tiles, settlements and roads are keyed by :func:`position_key`.  Adding
    an entity at an occupied key replaces the previous one; this is the
    intended insert policy, not an error.
    """

    tiles: dict[str, Tile] = pydantic.Field(default_factory=dict)
    settlements: dict[str, Settlement] = pydantic.Field(default_factory=dict)
    roads: dict[str, Road] = pydantic.Field(default_factory=dict)
    players: list[Player] = pydantic.Field(default_factory=list)
    blocker: GridPosition | None = None  # must sit on a tile when set

    # ------------------------------------------------------------------
    # Tiles
    # ------------------------------------------------------------------

    def add_tile(self, tile: Tile) -> None:
        """Insert ``tile`` at its position, replacing any tile already there."""
        key = position_key(tile.position)
        if key in self.tiles:
            logger.debug('Replacing tile at %s', key)
        self.tiles[key] = tile

    def get_tile(self, position: GridPosition) -> Tile | None:
        """Return the tile at ``position``, or None if the slot is empty."""
        return self.tiles.get(position_key(position))

    def get_tiles(self) -> list[Tile]:
        """Return every tile in insertion order."""
        return list(self.tiles.values())

    def has_tile(self, position: GridPosition) -> bool:
        return position_key(position) in self.tiles

    # ------------------------------------------------------------------
    # Settlements and roads
    # ------------------------------------------------------------------

    def add_settlement(self, settlement: Settlement) -> None:
        """Insert ``settlement``, replacing any settlement on the same vertex.

        Raises:
            ValueError: if no tile on the board touches the vertex.
        """
        self._require_on_board(settlement.position)
        key = position_key(settlement.position)
        if key in self.settlements:
            logger.debug('Replacing settlement at %s', key)
        self.settlements[key] = settlement

    def get_settlement(self, position: VertexPosition) -> Settlement | None:
        return self.settlements.get(position_key(position))

    def add_road(self, road: Road) -> None:
        """Insert ``road``, replacing any road on the same edge.

        Raises:
            ValueError: if no tile on the board touches the edge.
        """
        self._require_on_board(road.position)
        key = position_key(road.position)
        if key in self.roads:
            logger.debug('Replacing road at %s', key)
        self.roads[key] = road

    def get_road(self, position: EdgePosition) -> Road | None:
        return self.roads.get(position_key(position))

    def _require_on_board(self, position: EdgePosition | VertexPosition) -> None:
        if not any(self.has_tile(t) for t in position.tiles()):
            raise ValueError(
                f'{position_key(position)} does not border any tile on the board.'
            )

    # ------------------------------------------------------------------
    # Players and blocker
    # ------------------------------------------------------------------

    def add_player(self, player: Player) -> None:
        self.players.append(player)

    def get_players(self) -> list[Player]:
        return self.players

    def move_blocker(self, position: GridPosition) -> None:
        """Place the blocker on the tile at ``position``.

        Raises:
            ValueError: if there is no tile at ``position``.
        """
        if not self.has_tile(position):
            raise ValueError(f'No tile at {position_key(position)} for the blocker.')
        self.blocker = position

    # ------------------------------------------------------------------
    # Whole-board operations
    # ------------------------------------------------------------------

    def rotate_board(self, pivot: GridPosition, rotations: int) -> None:
        """Rotate every entity on the board about ``pivot`` by ``rotations`` × 60°.

        All new positions are computed into fresh maps before anything on the
        board is touched, then the maps are swapped in and each entity's
        stored position is rewritten.  This mutates the board; take a
        :meth:`copy` first for a non-destructive rotation.
        """
        tile_moves = [
            (tile, tile.position.rotate(pivot, rotations))
            for tile in self.tiles.values()
        ]
        settlement_moves = [
            (settlement, settlement.position.rotate(pivot, rotations))
            for settlement in self.settlements.values()
        ]
        road_moves = [
            (road, road.position.rotate(pivot, rotations))
            for road in self.roads.values()
        ]
        blocker = (
            self.blocker.rotate(pivot, rotations) if self.blocker is not None else None
        )

        tiles = {position_key(pos): tile for tile, pos in tile_moves}
        settlements = {position_key(pos): item for item, pos in settlement_moves}
        roads = {position_key(pos): item for item, pos in road_moves}

        for tile, tile_position in tile_moves:
            tile.position = tile_position
        for settlement, vertex_position in settlement_moves:
            settlement.position = vertex_position
        for road, edge_position in road_moves:
            road.position = edge_position
        self.tiles = tiles
        self.settlements = settlements
        self.roads = roads
        self.blocker = blocker
        logger.debug(
            'Rotated %d tiles about %s by %d step(s)',
            len(tiles),
            position_key(pivot),
            rotations,
        )

    def copy(self) -> Board:  # type: ignore[override]
        """Return a deep copy of the board.

        Tiles, settlements, roads, players and the blocker are all duplicated.
        Road owners in the copy refer to the copied players.
        """
        return self.model_copy(deep=True)
