"""Coordinate-keyed tile storage."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from hexworld.coordinates import CubeCoordinate
from hexworld.exceptions import TileNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HexMap(Generic[T]):
    """Store one payload per hex cell.

    Any coordinate is a valid key, including negative and far-away ones; the
    map is sparse and unbounded. Instances are not synchronized, so callers
    sharing one across threads must lock around mutations.
    """

    def __init__(self) -> None:
        self._tiles: dict[CubeCoordinate, T] = {}

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._tiles

    def set(self, coordinate: CubeCoordinate, value: T) -> None:
        """Store ``value`` at ``coordinate``, replacing any previous tile."""

        self._tiles[coordinate] = value

    def get(self, coordinate: CubeCoordinate) -> T:
        """Return the tile at ``coordinate``.

        Raises:
            TileNotFoundError: If nothing is stored there. Guard with
                tile_exists or use try_get when absence is expected.
        """

        try:
            return self._tiles[coordinate]
        except KeyError:
            raise TileNotFoundError(coordinate) from None

    def try_get(self, coordinate: CubeCoordinate) -> tuple[T | None, bool]:
        """Return ``(value, True)`` if a tile exists, else ``(None, False)``."""

        if coordinate in self._tiles:
            return self._tiles[coordinate], True
        return None, False

    def tile_exists(self, coordinate: CubeCoordinate) -> bool:
        return coordinate in self._tiles

    def get_all(self) -> list[T]:
        """Return every stored value in a new list."""

        return list(self._tiles.values())

    def select(self, coordinates: Iterable[CubeCoordinate]) -> dict[CubeCoordinate, T]:
        """Return the stored tiles among ``coordinates``, in iteration order.

        Pairs naturally with the shape queries, e.g.
        ``tiles.select(ring(center, 2))``.
        """

        return {c: self._tiles[c] for c in coordinates if c in self._tiles}

    def clear(self) -> None:
        """Remove every tile; the map stays usable."""

        logger.debug("clearing hex map with %d tiles", len(self._tiles))
        self._tiles.clear()


# Map whose tiles are plain integers (terrain ids, heights, ...)
IntHexMap = HexMap[int]
