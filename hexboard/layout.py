"""Pointy-top hex geometry: axial coordinates to pixels and back.

Pure functions for a presentation layer; nothing here draws.  ``size`` is the
hex radius (centre to corner) in pixels and (0, 0) maps to the origin.
"""

from __future__ import annotations

import math

from .models.position import GridPosition, VertexPosition

SQRT3 = math.sqrt(3.0)

Point = tuple[float, float]


def axial_to_pixel(position: GridPosition, size: float) -> Point:
    """Return the pixel centre of the hex at ``position``."""
    x = size * SQRT3 * (position.q + position.r / 2)
    y = size * 1.5 * position.r
    return x, y


def pixel_to_axial(x: float, y: float, size: float) -> GridPosition:
    """Return the hex containing pixel (x, y)."""
    q = (SQRT3 / 3 * x - y / 3) / size
    r = (2 / 3 * y) / size
    return axial_round(q, r)


def axial_round(q: float, r: float) -> GridPosition:
    """Round fractional axial coordinates to the nearest hex."""
    s = -q - r
    rq, rr, rs = round(q), round(r), round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    return GridPosition(q=int(rq), r=int(rr))


def hex_corners(position: GridPosition, size: float) -> list[Point]:
    """Return the 6 corner points, clockwise on screen from the top corner."""
    cx, cy = axial_to_pixel(position, size)
    corners = []
    for i in range(6):
        angle = math.radians(60 * i - 90)
        corners.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return corners


def vertex_to_pixel(vertex: VertexPosition, size: float) -> Point:
    """Return the pixel location of a vertex (top or top-right corner of its owner)."""
    return hex_corners(vertex.tile, size)[vertex.v]
