"""
Cube coordinate algebra for hex grids.

A hex cell is addressed by cube coordinates (q, r, s) with the constraint
q + r + s = 0. Only q and r are stored (axial form); s is always derived,
so a coordinate can never hold an inconsistent third component.

Directions:
-----------
The six unit steps to adjacent cells are built from three axis vectors:

    DIR_Q = (0, -1)
    DIR_R = (1, 0)
    DIR_S = (-1, 1)

and enumerated in the fixed order

    DIR_Q, -DIR_S, DIR_R, -DIR_Q, DIR_S, -DIR_R

Ring walks and direction rotation index into this order positionally, so it
must not change.

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hexworld.config import get_settings
from hexworld.exceptions import InvalidCoordinateError, InvalidDirectionError

logger = logging.getLogger(__name__)

DIRECTION_COUNT = 6


@dataclass(frozen=True, slots=True)
class CubeCoordinate:
    """
    An immutable hex cell in cube coordinates.

    Attributes:
        q: First axial component
        r: Second axial component

    The third component ``s`` is derived as ``-q - r``. Equality and hashing
    only look at ``(q, r)``, which is all the identity a valid coordinate has.

    Example:
        >>> a = CubeCoordinate(1, 0)
        >>> b = CubeCoordinate(0, 1)
        >>> a + b
        CubeCoordinate(q=1, r=1)
        >>> (a + b).s
        -2
    """

    q: int
    r: int

    @classmethod
    def from_cube(cls, q: int, r: int, s: int) -> CubeCoordinate:
        """
        Build a coordinate from all three cube components.

        Args:
            q: Cube q component
            r: Cube r component
            s: Cube s component

        Returns:
            The coordinate (q, r)

        Raises:
            InvalidCoordinateError: If q + r + s != 0
        """
        if q + r + s != 0:
            raise InvalidCoordinateError(q, r, s)
        return cls(q, r)

    @property
    def s(self) -> int:
        """The implicit third cube component."""
        return -self.q - self.r

    def __hash__(self) -> int:
        """Make CubeCoordinate hashable for use in sets and dicts."""
        return hash((self.q, self.r))

    def __str__(self) -> str:
        return f"{self.q}|{self.r}"

    # --- Arithmetic ---------------------------------------------------------

    def add(self, other: CubeCoordinate) -> CubeCoordinate:
        """Componentwise sum."""
        return CubeCoordinate(self.q + other.q, self.r + other.r)

    def subtract(self, other: CubeCoordinate) -> CubeCoordinate:
        """Componentwise difference."""
        return CubeCoordinate(self.q - other.q, self.r - other.r)

    def scale(self, factor: int) -> CubeCoordinate:
        """Scale both axial components by an integer factor."""
        return CubeCoordinate(self.q * factor, self.r * factor)

    def negate(self) -> CubeCoordinate:
        """Point reflection through the origin."""
        return CubeCoordinate(-self.q, -self.r)

    def equals(self, other: object) -> bool:
        """Return True if ``other`` is a coordinate with the same q and r."""
        return self == other

    def __add__(self, other: object) -> CubeCoordinate:
        if not isinstance(other, CubeCoordinate):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> CubeCoordinate:
        if not isinstance(other, CubeCoordinate):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: object) -> CubeCoordinate:
        if not isinstance(factor, int):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> CubeCoordinate:
        return self.negate()

    # --- Measurements -------------------------------------------------------

    def to_cube(self) -> tuple[int, int, int]:
        """Return the ``(q, r, s)`` triple."""
        return self.q, self.r, self.s

    def length(self) -> int:
        """Hex distance from the origin."""
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance_to(self, other: CubeCoordinate) -> int:
        """Hex distance to ``other``."""
        return self.subtract(other).length()


def hex_distance(a: CubeCoordinate, b: CubeCoordinate) -> int:
    """
    Calculate the distance between two hexes.

    The distance is the minimum number of steps between adjacent cells:
        distance = (|dq| + |dr| + |ds|) / 2

    The sum is always even because dq + dr + ds = 0.

    Args:
        a: First hex coordinate
        b: Second hex coordinate

    Returns:
        The distance between the two hexes (non-negative integer)

    Example:
        >>> hex_distance(CubeCoordinate(0, 0), CubeCoordinate(2, 1))
        3
    """
    return a.distance_to(b)


DIR_Q = CubeCoordinate(0, -1)
DIR_R = CubeCoordinate(1, 0)
DIR_S = CubeCoordinate(-1, 1)

# Canonical direction order, built once and shared by every caller
DIRECTIONS: tuple[CubeCoordinate, ...] = (DIR_Q, -DIR_S, DIR_R, -DIR_Q, DIR_S, -DIR_R)


def direction_at(index: int) -> CubeCoordinate:
    """
    Return the canonical direction at ``index``.

    Out-of-range indices are clamped into ``[0, 5]`` rather than rejected, so
    ``direction_at(9)`` is the last direction and ``direction_at(-3)`` the
    first. Set ``HEXWORLD_STRICT_DIRECTION_INDEX`` to make them an error.

    Raises:
        InvalidDirectionError: If strict indexing is enabled and the index is
            outside ``[0, 5]``
    """
    clamped = min(max(index, 0), DIRECTION_COUNT - 1)
    if clamped != index:
        if get_settings().strict_direction_index:
            msg = f"Direction index must be in [0, {DIRECTION_COUNT - 1}], got {index}"
            raise InvalidDirectionError(msg)
        logger.debug("direction index %s clamped to %s", index, clamped)
    return DIRECTIONS[clamped]


def rotate_direction(direction: CubeCoordinate, amount: int) -> CubeCoordinate:
    """
    Rotate a canonical direction by ``amount`` sixth-turns.

    Positive amounts step forward through the canonical order, negative
    amounts step backward, and both wrap, so rotating by 6 is the identity
    and rotating by -1 equals rotating by 5.

    Args:
        direction: One of the six canonical directions
        amount: Number of steps through the canonical order

    Returns:
        The rotated canonical direction

    Raises:
        InvalidDirectionError: If ``direction`` is not canonical

    Example:
        >>> rotate_direction(DIR_Q, 2)
        CubeCoordinate(q=1, r=0)
    """
    if direction not in DIRECTIONS:
        msg = f"{direction!r} is not one of the six canonical directions"
        raise InvalidDirectionError(msg)
    index = DIRECTIONS.index(direction)
    return DIRECTIONS[(index + amount) % DIRECTION_COUNT]
