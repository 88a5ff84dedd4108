"""Hex grid coordinate models.

Tiles are addressed with axial coordinates (q, r).  The third cube
coordinate is always derived as s = -q - r, so the invariant q + r + s == 0
cannot be broken.  See
https://www.redblobgames.com/grids/hexagons/#coordinates-axial for background.

Hexes are pointy-topped.  The six neighbour directions in order are::

    0: (+1,  0)   east
    1: (+1, -1)   north-east
    2: ( 0, -1)   north-west
    3: (-1,  0)   west
    4: (-1, +1)   south-west
    5: ( 0, +1)   south-east

Edge and vertex ownership
-------------------------
Every edge is shared by two hexes and every vertex by three.  To give each
one a single address, a hex *owns* three of its six sides and two of its six
corners; the rest belong to a neighbour::

    EdgePosition(q, r, 0)     north-west side
    EdgePosition(q, r, 1)     north-east side
    EdgePosition(q, r, 2)     east side
    VertexPosition(q, r, 0)   top corner
    VertexPosition(q, r, 1)   top-right corner

Example: the west side of (0, 0) is EdgePosition(-1, 0, 2), the east side of
its west neighbour.  The bottom corner of (0, 0) is VertexPosition(-1, 1, 1),
the top-right corner of its south-west neighbour.

Keys
----
Each model carries an explicit ``kind`` tag, and :func:`position_key` matches
on it to build a tagged string key (``grid:q,r``, ``edge:q,r,e``,
``vertex:q,r,v``).  An edge and a vertex sharing (q, r) and a discriminator
value therefore never collide.
"""

from __future__ import annotations

import enum
import typing

import pydantic


class PositionKind(enum.StrEnum):
    """Tag identifying which kind of board position a model addresses."""

    GRID = 'grid'
    EDGE = 'edge'
    VERTEX = 'vertex'


# Six neighbour directions in axial space, indexed 0–5.
HEX_DIRECTIONS: list[tuple[int, int]] = [
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
]

EDGES_PER_TILE = 3
VERTICES_PER_TILE = 2

# Owner of corner i of a hex: (dq, dr) offset of the owning hex and its v index.
# Corners run clockwise from the top: top, top-right, bottom-right, bottom,
# bottom-left, top-left.
_CORNER_OWNERS: list[tuple[int, int, int]] = [
    (0, 0, 0),
    (0, 0, 1),
    (0, 1, 0),
    (-1, 1, 1),
    (-1, 1, 0),
    (-1, 0, 1),
]


def _rotate_offset(q: int, r: int, rotations: int) -> tuple[int, int]:
    """Rotate an axial offset about the origin by ``rotations`` × 60°."""
    s = -q - r
    for _ in range(rotations % 6):
        q, r, s = -s, -q, -r
    return q, r


class GridPosition(pydantic.BaseModel):
    """Axial coordinates of a hex tile.  Immutable; equality is on (q, r)."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal['grid'] = 'grid'
    q: int
    r: int

    @property
    def s(self) -> int:
        """The derived third cube coordinate."""
        return -self.q - self.r

    def neighbor(self, direction: int) -> GridPosition:
        """Return the adjacent position in ``direction`` (0–5, see HEX_DIRECTIONS)."""
        dq, dr = HEX_DIRECTIONS[direction % 6]
        return GridPosition(q=self.q + dq, r=self.r + dr)

    def neighbors(self) -> list[GridPosition]:
        """Return the 6 neighbouring positions in direction order, east first."""
        return [
            GridPosition(q=self.q + dq, r=self.r + dr) for dq, dr in HEX_DIRECTIONS
        ]

    def distance(self, other: GridPosition) -> int:
        """Return the number of hex steps between this position and ``other``."""
        return max(
            abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s)
        )

    def rotate(self, pivot: GridPosition, rotations: int) -> GridPosition:
        """Rotate about ``pivot`` by ``rotations`` × 60°.

        Positive values turn in direction order (east towards north-east),
        negative values turn the other way.  Any integer is accepted and is
        reduced modulo 6.  The result is always a new instance, even for a
        zero rotation.
        """
        dq, dr = _rotate_offset(self.q - pivot.q, self.r - pivot.r, rotations)
        return GridPosition(q=pivot.q + dq, r=pivot.r + dr)

    def edge(self, direction: int) -> EdgePosition:
        """Return the canonical address of the side facing ``direction``."""
        direction %= 6
        if direction < 3:
            return EdgePosition(q=self.q, r=self.r, e=2 - direction)
        other = self.neighbor(direction)
        return EdgePosition(q=other.q, r=other.r, e=5 - direction)

    def edges(self) -> list[EdgePosition]:
        """Return all 6 sides of this hex in direction order."""
        return [self.edge(direction) for direction in range(6)]

    def owned_edges(self) -> list[EdgePosition]:
        """Return the 3 sides addressed by this hex's own coordinates."""
        return [
            EdgePosition(q=self.q, r=self.r, e=e) for e in range(EDGES_PER_TILE)
        ]

    def vertices(self) -> list[VertexPosition]:
        """Return all 6 corners of this hex, clockwise from the top."""
        return [
            VertexPosition(q=self.q + dq, r=self.r + dr, v=v)
            for dq, dr, v in _CORNER_OWNERS
        ]

    def owned_vertices(self) -> list[VertexPosition]:
        """Return the 2 corners addressed by this hex's own coordinates."""
        return [
            VertexPosition(q=self.q, r=self.r, v=v) for v in range(VERTICES_PER_TILE)
        ]


class EdgePosition(pydantic.BaseModel):
    """A hex side, addressed by its owning hex and a side index ``e`` in 0–2."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal['edge'] = 'edge'
    q: int
    r: int
    e: int = pydantic.Field(ge=0, lt=EDGES_PER_TILE)

    @property
    def tile(self) -> GridPosition:
        """The hex that owns this edge."""
        return GridPosition(q=self.q, r=self.r)

    def tiles(self) -> list[GridPosition]:
        """Return the 2 hexes that share this edge, owner first."""
        owner = self.tile
        return [owner, owner.neighbor(2 - self.e)]

    def rotate(self, pivot: GridPosition, rotations: int) -> EdgePosition:
        """Rotate about ``pivot`` and return the canonical address of the result."""
        first, second = (t.rotate(pivot, rotations) for t in self.tiles())
        for direction in range(6):
            if first.neighbor(direction) == second:
                return first.edge(direction)
        raise ValueError(f'Edge {self} does not join two adjacent hexes.')


class VertexPosition(pydantic.BaseModel):
    """A hex corner, addressed by its owning hex and a corner index ``v`` in 0–1."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal['vertex'] = 'vertex'
    q: int
    r: int
    v: int = pydantic.Field(ge=0, lt=VERTICES_PER_TILE)

    @property
    def tile(self) -> GridPosition:
        """The hex that owns this vertex."""
        return GridPosition(q=self.q, r=self.r)

    def tiles(self) -> list[GridPosition]:
        """Return the 3 hexes that meet at this vertex, owner first."""
        owner = self.tile
        return [owner, owner.neighbor(2 - self.v), owner.neighbor(1 - self.v)]

    def rotate(self, pivot: GridPosition, rotations: int) -> VertexPosition:
        """Rotate about ``pivot`` and return the canonical address of the result."""
        rotated = {t.rotate(pivot, rotations) for t in self.tiles()}
        anchor = next(iter(rotated))
        for vertex in anchor.vertices():
            if set(vertex.tiles()) == rotated:
                return vertex
        raise ValueError(f'Vertex {self} does not join three adjacent hexes.')


AnyPosition = typing.Annotated[
    GridPosition | EdgePosition | VertexPosition,
    pydantic.Field(discriminator='kind'),
]

_position_adapter: pydantic.TypeAdapter[GridPosition | EdgePosition | VertexPosition] = (
    pydantic.TypeAdapter(AnyPosition)
)


def position_key(position: GridPosition | EdgePosition | VertexPosition) -> str:
    """Return the tagged map key for any board position."""
    match position.kind:
        case PositionKind.GRID:
            fields: tuple[int, ...] = (position.q, position.r)
        case PositionKind.EDGE:
            fields = (position.q, position.r, position.e)  # type: ignore[union-attr]
        case PositionKind.VERTEX:
            fields = (position.q, position.r, position.v)  # type: ignore[union-attr]
        case _:
            raise ValueError(f'Unknown position kind: {position.kind!r}')
    return f'{position.kind}:' + ','.join(str(value) for value in fields)


def parse_key(key: str) -> GridPosition | EdgePosition | VertexPosition:
    """Decode a key produced by :func:`position_key` back into its position."""
    kind, sep, body = key.partition(':')
    if not sep:
        raise ValueError(f'Malformed position key: {key!r}')
    values = [int(part) for part in body.split(',')]
    match kind:
        case PositionKind.GRID:
            names: tuple[str, ...] = ('q', 'r')
        case PositionKind.EDGE:
            names = ('q', 'r', 'e')
        case PositionKind.VERTEX:
            names = ('q', 'r', 'v')
        case _:
            raise ValueError(f'Unknown position kind in key: {key!r}')
    if len(values) != len(names):
        raise ValueError(f'Malformed position key: {key!r}')
    position = _position_adapter.validate_python(
        {'kind': kind, **dict(zip(names, values))}
    )
    if position_key(position) != key:
        raise ValueError(f'Non-canonical position key: {key!r}')
    return position
