"""
Shape queries over the hex grid.

Every function here is pure: it takes coordinates and sizes and returns a
fresh list of CubeCoordinate values. Nothing is looked up in a map, so the
results can be fed to any HexMap (or none).

Shapes:
-------
- neighbors: the 6 adjacent cells, in canonical direction order
- rectangle: an axial bounding box, (2n + 1)^2 cells
- line / line_between: straight runs of cells
- ring: cells at exactly distance n, 6n cells
- triangle: a wedge of rows growing by one cell each
- area_by_distance / spiral: cells within distance n, 3n^2 + 3n + 1 cells
"""

from __future__ import annotations

from hexworld.coordinates import (
    DIR_S,
    DIRECTION_COUNT,
    DIRECTIONS,
    CubeCoordinate,
    direction_at,
    hex_distance,
    rotate_direction,
)
from hexworld.world import hex_to_world, world_to_hex


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def neighbors(coordinate: CubeCoordinate) -> list[CubeCoordinate]:
    """
    Find all 6 adjacent hexes to the given hex.

    The result follows the canonical direction order, so ``neighbors(c)[i]``
    is ``c + DIRECTIONS[i]``.

    Example:
        >>> neighbors(CubeCoordinate(0, 0))[0]
        CubeCoordinate(q=0, r=-1)
    """
    return [coordinate + direction for direction in DIRECTIONS]


def rectangle(center: CubeCoordinate, range_: int) -> list[CubeCoordinate]:
    """
    Return every ``center + (x, y)`` with x and y each in ``[-range_, range_]``.

    This is a box in axial space, which on screen is a rhombus rather than a
    hex-shaped disk; use area_by_distance for the latter.

    Raises:
        ValueError: If range_ is negative
    """
    _require_non_negative("range_", range_)

    hexes = []
    for q in range(-range_, range_ + 1):
        for r in range(-range_, range_ + 1):
            hexes.append(center + CubeCoordinate(q, r))
    return hexes


def line(origin: CubeCoordinate, direction: CubeCoordinate, length: int) -> list[CubeCoordinate]:
    """
    Walk ``length`` cells from ``origin`` along ``direction``.

    ``direction`` does not have to be a unit step; a scaled direction yields
    a line that skips cells.

    Args:
        origin: First cell of the line
        direction: Step added between consecutive cells
        length: Number of cells to return

    Returns:
        ``[origin, origin + direction, ..., origin + direction * (length - 1)]``

    Raises:
        ValueError: If length is negative
    """
    _require_non_negative("length", length)
    return [origin + direction * i for i in range(length)]


def line_between(start: CubeCoordinate, end: CubeCoordinate) -> list[CubeCoordinate]:
    """
    Draw a line of cells from ``start`` to ``end`` inclusive.

    The two cell centres are interpolated in world space in ``distance + 1``
    evenly spaced samples and each sample is snapped back to a hex. When two
    samples snap to the same cell, the cell appears twice.

    Returns:
        An empty list when start and end are the same cell
    """
    distance = hex_distance(start, end)
    if distance < 1:
        return []

    start_pos = hex_to_world(start, hex_size=1.0)
    end_pos = hex_to_world(end, hex_size=1.0)
    step = (end_pos - start_pos) / distance

    return [world_to_hex(start_pos + step * i, hex_size=1.0) for i in range(distance + 1)]


def ring(center: CubeCoordinate, radius: int) -> list[CubeCoordinate]:
    """
    Return the cells at exactly ``radius`` steps from ``center``.

    The walk starts at ``center + DIR_S * radius`` and takes ``radius`` steps
    along each canonical direction in order. Radius 0 is the center alone.

    Raises:
        ValueError: If radius is negative
    """
    _require_non_negative("radius", radius)
    if radius == 0:
        return [center]

    hexes = []
    current = center + DIR_S * radius
    for i in range(DIRECTION_COUNT):
        step = direction_at(i)
        for _ in range(radius):
            hexes.append(current)
            current = current + step
    return hexes


def spiral(center: CubeCoordinate, radius: int) -> list[CubeCoordinate]:
    """Return the rings 0 through ``radius`` around ``center``, innermost first."""
    _require_non_negative("radius", radius)

    hexes = []
    for n in range(radius + 1):
        hexes.extend(ring(center, n))
    return hexes


def triangle(center: CubeCoordinate, direction: CubeCoordinate, range_: int) -> list[CubeCoordinate]:
    """
    Return a triangular wedge of cells anchored at ``center``.

    The first edge is ``line(center, direction, range_)``. From the i-th cell
    of that edge a row of ``i + 1`` cells runs along ``direction`` rotated by
    two sixth-turns, giving ``range_ * (range_ + 1) / 2`` cells in total.

    Args:
        center: Tip of the wedge
        direction: A canonical direction for the first edge
        range_: Number of rows

    Raises:
        ValueError: If range_ is negative
        InvalidDirectionError: If direction is not canonical
    """
    row_direction = rotate_direction(direction, 2)
    edge = line(center, direction, range_)

    hexes = []
    for i, point in enumerate(edge):
        hexes.extend(line(point, row_direction, i + 1))
    return hexes


def area_by_distance(center: CubeCoordinate, range_: int) -> list[CubeCoordinate]:
    """
    Find all hexes within range_ of the center hex (inclusive).

    The number of hexes follows the formula: 3n^2 + 3n + 1

    Raises:
        ValueError: If range_ is negative

    Example:
        >>> len(area_by_distance(CubeCoordinate(0, 0), 1))
        7
    """
    _require_non_negative("range_", range_)

    hexes = []
    for x in range(-range_, range_ + 1):
        # y bounds shrink with |x| to keep the shape hexagonal
        for y in range(max(-range_, -x - range_), min(range_, -x + range_) + 1):
            hexes.append(center + CubeCoordinate(x, y))
    return hexes
