"""Conversion between continuous world positions and hex coordinates.

Hexes use the pointy-top layout. In 3D the vertical axis is ``y`` and the
ground plane is ``(x, z)``; a 2D position ``(x, y)`` is read as ``(x, z)``.
Height is ignored when snapping a position to a cell.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from hexworld.config import get_settings
from hexworld.coordinates import CubeCoordinate

SQRT3 = math.sqrt(3.0)


@dataclass(frozen=True, slots=True)
class Vector2:
    """A position on a flat 2D plane."""

    x: float
    y: float

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)


@dataclass(frozen=True, slots=True)
class Vector3:
    """A 3D position with ``y`` pointing up."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def __truediv__(self, divisor: float) -> Vector3:
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor)


Position = Vector2 | Vector3 | Sequence[float]


def _resolve_hex_size(hex_size: float | None) -> float:
    size = get_settings().hex_size if hex_size is None else hex_size
    if size <= 0:
        msg = f"hex_size must be positive, got {size}"
        raise ValueError(msg)
    return size


def _ground_plane(position: Position) -> tuple[float, float]:
    """Return the horizontal ``(x, z)`` components of a position."""
    if isinstance(position, Vector3):
        return position.x, position.z
    if isinstance(position, Vector2):
        return position.x, position.y
    if len(position) == 3:
        return position[0], position[2]
    if len(position) == 2:
        return position[0], position[1]
    msg = f"Expected a 2D or 3D position, got {len(position)} components"
    raise ValueError(msg)


def cube_round(q: float, r: float, s: float) -> CubeCoordinate:
    """
    Round fractional cube coordinates to the nearest valid hex.

    Each component is rounded independently; the one that moved the most is
    then recomputed from the other two so that q + r + s = 0 holds exactly.
    On equal errors q is kept, and r is recomputed in preference to s, so a
    point on a cell edge always snaps the same way.

    Args:
        q: Fractional q component
        r: Fractional r component
        s: Fractional s component

    Returns:
        The nearest CubeCoordinate
    """
    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > s_diff and q_diff > r_diff:
        rq = -rr - rs
    elif s_diff > r_diff:
        pass  # s is dropped; q and r already satisfy the constraint
    else:
        # ties between r and s recompute r
        rr = -rq - rs

    return CubeCoordinate(rq, rr)


def world_to_hex(position: Position, hex_size: float | None = None) -> CubeCoordinate:
    """
    Find the hex containing a world position.

    Args:
        position: A Vector2, a Vector3, or a plain 2- or 3-sequence
        hex_size: World size of a hex; defaults to ``Settings.hex_size``

    Returns:
        The coordinate of the cell that contains the position

    Raises:
        ValueError: If hex_size is not positive or the position has the
            wrong number of components

    Example:
        >>> world_to_hex(Vector2(0.0, 0.0))
        CubeCoordinate(q=0, r=0)
    """
    size = _resolve_hex_size(hex_size)
    x, z = _ground_plane(position)

    q = (SQRT3 / 3.0 * x + z / 3.0) / size
    r = (-2.0 / 3.0 * z) / size

    return cube_round(q, r, -q - r)


def hex_to_world(coordinate: CubeCoordinate, hex_size: float | None = None) -> Vector3:
    """
    Return the centre of a hex on the ground plane.

    Uses the same pointy-top basis that world_to_hex inverts:
        x = sqrt(3) * (q + r / 2) * size
        z = -1.5 * r * size
    """
    size = _resolve_hex_size(hex_size)
    x = SQRT3 * (coordinate.q + coordinate.r / 2.0) * size
    z = -1.5 * coordinate.r * size
    return Vector3(x, 0.0, z)


def hex_to_world_2d(coordinate: CubeCoordinate, hex_size: float | None = None) -> Vector2:
    """Return the centre of a hex as a flat ``(x, y)`` position."""
    centre = hex_to_world(coordinate, hex_size)
    return Vector2(centre.x, centre.z)
