"""Hex-grid coordinates, tile maps and spatial queries for tile-based worlds.

The package exposes:

* :class:`CubeCoordinate` and the canonical direction helpers (see :mod:`coordinates`).
* Conversion between world positions and hexes (see :mod:`world`).
* Pure shape generators such as rings, lines and areas (see :mod:`shapes`).
* :class:`HexMap`, a sparse coordinate-keyed container (see :mod:`hex_map`).
"""

from .config import Settings, get_settings
from .coordinates import (
    DIR_Q,
    DIR_R,
    DIR_S,
    DIRECTION_COUNT,
    DIRECTIONS,
    CubeCoordinate,
    direction_at,
    hex_distance,
    rotate_direction,
)
from .exceptions import HexError, InvalidCoordinateError, InvalidDirectionError, TileNotFoundError
from .hex_map import HexMap, IntHexMap
from .shapes import (
    area_by_distance,
    line,
    line_between,
    neighbors,
    rectangle,
    ring,
    spiral,
    triangle,
)
from .world import Vector2, Vector3, cube_round, hex_to_world, hex_to_world_2d, world_to_hex

__all__ = [
    "DIRECTIONS",
    "DIRECTION_COUNT",
    "DIR_Q",
    "DIR_R",
    "DIR_S",
    "CubeCoordinate",
    "HexError",
    "HexMap",
    "IntHexMap",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "Settings",
    "TileNotFoundError",
    "Vector2",
    "Vector3",
    "area_by_distance",
    "cube_round",
    "direction_at",
    "get_settings",
    "hex_distance",
    "hex_to_world",
    "hex_to_world_2d",
    "line",
    "line_between",
    "neighbors",
    "rectangle",
    "ring",
    "rotate_direction",
    "spiral",
    "triangle",
    "world_to_hex",
]
