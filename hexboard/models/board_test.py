"""Unit tests for board data models."""

from __future__ import annotations

import unittest

from hexboard.models import board
from hexboard.models.player import Player
from hexboard.models.position import (
    EdgePosition,
    GridPosition,
    VertexPosition,
    position_key,
)

ORIGIN = GridPosition(q=0, r=0)


def _make_board() -> board.Board:
    """Return the two-tile board used by the rotation example."""
    b = board.Board()
    b.add_tile(board.Tile(resource=board.Resource.FOREST, number=6, position=ORIGIN))
    b.add_tile(
        board.Tile(resource=board.Resource.DESERT, position=GridPosition(q=1, r=0))
    )
    return b


class TestResource(unittest.TestCase):
    """Tests for the Resource enum."""

    def test_values(self) -> None:
        """Resource covers the five terrains, the desert and the absence value."""
        self.assertEqual(
            {r.value for r in board.Resource},
            {'forest', 'hills', 'field', 'pasture', 'mountain', 'desert', 'none'},
        )


class TestTile(unittest.TestCase):
    """Tests for Tile."""

    def test_number_defaults_to_unset(self) -> None:
        """A new tile has number 0."""
        tile = board.Tile(resource=board.Resource.HILLS, position=ORIGIN)
        self.assertEqual(tile.number, board.UNSET_NUMBER)

    def test_is_productive(self) -> None:
        """Desert and NONE tiles are not productive."""
        self.assertTrue(
            board.Tile(resource=board.Resource.FIELD, position=ORIGIN).is_productive
        )
        for resource in (board.Resource.DESERT, board.Resource.NONE):
            self.assertFalse(board.Tile(resource=resource, position=ORIGIN).is_productive)

    def test_pips(self) -> None:
        """Pip counts follow 6 - |7 - n| and are 0 when unset."""
        self.assertEqual(board.number_pips(6), 5)
        self.assertEqual(board.number_pips(8), 5)
        self.assertEqual(board.number_pips(2), 1)
        self.assertEqual(board.number_pips(12), 1)
        tile = board.Tile(resource=board.Resource.DESERT, position=ORIGIN)
        self.assertEqual(tile.pips, 0)

    def test_number_and_position_mutable(self) -> None:
        """Number and position can be changed after construction."""
        tile = board.Tile(resource=board.Resource.PASTURE, position=ORIGIN)
        tile.number = 9
        tile.position = GridPosition(q=1, r=1)
        self.assertEqual(tile.number, 9)
        self.assertEqual(tile.position, GridPosition(q=1, r=1))


class TestSettlement(unittest.TestCase):
    """Tests for Settlement."""

    def test_defaults_to_settlement(self) -> None:
        settlement = board.Settlement(position=VertexPosition(q=0, r=0, v=0))
        self.assertEqual(settlement.tier, board.SettlementTier.SETTLEMENT)

    def test_upgrade_is_one_way_and_idempotent(self) -> None:
        """upgrade() turns a settlement into a city and leaves a city alone."""
        settlement = board.Settlement(position=VertexPosition(q=0, r=0, v=0))
        settlement.upgrade()
        self.assertEqual(settlement.tier, board.SettlementTier.CITY)
        settlement.upgrade()
        self.assertEqual(settlement.tier, board.SettlementTier.CITY)


class TestBoardTiles(unittest.TestCase):
    """Tests for Board tile insert and lookup."""

    def test_get_tile(self) -> None:
        """get_tile finds a tile by value-equal position."""
        b = _make_board()
        tile = b.get_tile(GridPosition(q=0, r=0))
        assert tile is not None
        self.assertEqual(tile.resource, board.Resource.FOREST)

    def test_get_tile_miss_returns_none(self) -> None:
        """Looking up an empty slot returns None."""
        self.assertIsNone(_make_board().get_tile(GridPosition(q=5, r=5)))

    def test_add_tile_overwrites(self) -> None:
        """Adding at an occupied position replaces the tile."""
        b = _make_board()
        b.add_tile(board.Tile(resource=board.Resource.MOUNTAIN, number=3, position=ORIGIN))
        self.assertEqual(len(b.get_tiles()), 2)
        tile = b.get_tile(ORIGIN)
        assert tile is not None
        self.assertEqual(tile.resource, board.Resource.MOUNTAIN)

    def test_get_tiles_in_insertion_order(self) -> None:
        b = _make_board()
        self.assertEqual(
            [t.position for t in b.get_tiles()], [ORIGIN, GridPosition(q=1, r=0)]
        )


class TestBoardPieces(unittest.TestCase):
    """Tests for settlements, roads, players and the blocker."""

    def setUp(self) -> None:
        self.board = _make_board()
        self.alice = Player(name='Alice')
        self.board.add_player(self.alice)

    def test_add_and_get_settlement(self) -> None:
        vertex = VertexPosition(q=0, r=0, v=1)
        self.board.add_settlement(board.Settlement(position=vertex))
        self.assertIsNotNone(self.board.get_settlement(vertex))
        self.assertIsNone(self.board.get_settlement(VertexPosition(q=0, r=0, v=0)))

    def test_settlement_on_neighbouring_owner_accepted(self) -> None:
        """A corner owned by an off-board hex is fine if it touches a tile."""
        # Bottom corner of (0, 0), owned by (-1, 1) which is not on the board.
        vertex = ORIGIN.vertices()[3]
        self.board.add_settlement(board.Settlement(position=vertex))
        self.assertIn(position_key(vertex), self.board.settlements)

    def test_dangling_settlement_rejected(self) -> None:
        """A vertex touching no tile raises ValueError."""
        with self.assertRaises(ValueError):
            self.board.add_settlement(
                board.Settlement(position=VertexPosition(q=4, r=4, v=0))
            )

    def test_add_and_get_road(self) -> None:
        edge = EdgePosition(q=0, r=0, e=2)
        self.board.add_road(board.Road(position=edge, owner=self.alice))
        road = self.board.get_road(edge)
        assert road is not None
        self.assertIs(road.owner, self.alice)

    def test_dangling_road_rejected(self) -> None:
        """An edge touching no tile raises ValueError."""
        with self.assertRaises(ValueError):
            self.board.add_road(
                board.Road(position=EdgePosition(q=-4, r=0, e=0), owner=self.alice)
            )

    def test_edge_and_vertex_keys_distinct(self) -> None:
        """A road and a settlement with the same numbers are stored separately."""
        self.board.add_road(
            board.Road(position=EdgePosition(q=0, r=0, e=1), owner=self.alice)
        )
        self.board.add_settlement(
            board.Settlement(position=VertexPosition(q=0, r=0, v=1))
        )
        self.assertEqual(len(self.board.roads), 1)
        self.assertEqual(len(self.board.settlements), 1)

    def test_players_in_order(self) -> None:
        self.board.add_player(Player(name='Bob'))
        self.assertEqual([p.name for p in self.board.get_players()], ['Alice', 'Bob'])

    def test_move_blocker(self) -> None:
        self.board.move_blocker(GridPosition(q=1, r=0))
        self.assertEqual(self.board.blocker, GridPosition(q=1, r=0))

    def test_move_blocker_off_board_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.board.move_blocker(GridPosition(q=2, r=2))
        self.assertIsNone(self.board.blocker)


class TestRotateBoard(unittest.TestCase):
    """Tests for Board.rotate_board."""

    def test_example_rotation(self) -> None:
        """One step about (0, 0) moves the desert from (1, 0) to (1, -1)."""
        b = _make_board()
        b.rotate_board(ORIGIN, 1)
        centre = b.get_tile(ORIGIN)
        desert = b.get_tile(GridPosition(q=1, r=-1))
        assert centre is not None and desert is not None
        self.assertEqual(centre.resource, board.Resource.FOREST)
        self.assertEqual(centre.number, 6)
        self.assertEqual(desert.resource, board.Resource.DESERT)
        self.assertEqual(desert.position, GridPosition(q=1, r=-1))
        self.assertIsNone(b.get_tile(GridPosition(q=1, r=0)))

    def test_round_trip(self) -> None:
        """Rotating +1 then -1 restores every tile."""
        b = _make_board()
        before = {k: t.resource for k, t in b.tiles.items()}
        b.rotate_board(ORIGIN, 1)
        b.rotate_board(ORIGIN, -1)
        self.assertEqual({k: t.resource for k, t in b.tiles.items()}, before)
        for key, tile in b.tiles.items():
            self.assertEqual(position_key(tile.position), key)

    def test_pieces_and_blocker_rotate(self) -> None:
        """Settlements, roads and the blocker move with the tiles."""
        b = _make_board()
        alice = Player(name='Alice')
        edge = EdgePosition(q=0, r=0, e=2)  # between (0, 0) and (1, 0)
        vertex = VertexPosition(q=0, r=0, v=1)
        b.add_road(board.Road(position=edge, owner=alice))
        b.add_settlement(board.Settlement(position=vertex))
        b.move_blocker(GridPosition(q=1, r=0))

        b.rotate_board(ORIGIN, 1)

        self.assertEqual(b.blocker, GridPosition(q=1, r=-1))
        # The road now joins (0, 0) and (1, -1): the north-east side of the centre.
        road = b.get_road(EdgePosition(q=0, r=0, e=1))
        assert road is not None
        self.assertEqual(road.position, EdgePosition(q=0, r=0, e=1))
        for key, settlement in b.settlements.items():
            self.assertEqual(position_key(settlement.position), key)
            self.assertEqual(settlement.position, vertex.rotate(ORIGIN, 1))


class TestCopy(unittest.TestCase):
    """Tests for Board.copy."""

    def test_tiles_are_independent(self) -> None:
        """Changing a tile on the copy leaves the original untouched."""
        original = _make_board()
        clone = original.copy()
        clone_tile = clone.get_tile(ORIGIN)
        assert clone_tile is not None
        clone_tile.number = 11
        original_tile = original.get_tile(ORIGIN)
        assert original_tile is not None
        self.assertEqual(original_tile.number, 6)

    def test_rotating_copy_leaves_original(self) -> None:
        """A copy can be rotated without moving the original."""
        original = _make_board()
        clone = original.copy()
        clone.rotate_board(ORIGIN, 3)
        self.assertIsNotNone(original.get_tile(GridPosition(q=1, r=0)))
        self.assertIsNotNone(clone.get_tile(GridPosition(q=-1, r=0)))

    def test_full_deep_copy(self) -> None:
        """Players, roads and settlements are copied; road owners follow."""
        original = _make_board()
        alice = Player(name='Alice')
        original.add_player(alice)
        original.add_road(
            board.Road(position=EdgePosition(q=0, r=0, e=2), owner=alice)
        )
        original.add_settlement(
            board.Settlement(position=VertexPosition(q=0, r=0, v=0))
        )
        clone = original.copy()

        self.assertEqual(len(clone.players), 1)
        self.assertIsNot(clone.players[0], alice)
        clone_road = next(iter(clone.roads.values()))
        self.assertIs(clone_road.owner, clone.players[0])

        next(iter(clone.settlements.values())).upgrade()
        self.assertEqual(
            next(iter(original.settlements.values())).tier,
            board.SettlementTier.SETTLEMENT,
        )


if __name__ == '__main__':
    unittest.main()
