"""Tests for the coordinate-keyed tile map."""

import logging

import pytest

from hexworld.coordinates import CubeCoordinate
from hexworld.exceptions import HexError, TileNotFoundError
from hexworld.hex_map import HexMap, IntHexMap


@pytest.fixture
def tiles() -> HexMap[str]:
    hex_map: HexMap[str] = HexMap()
    hex_map.set(CubeCoordinate(0, 0), "village")
    hex_map.set(CubeCoordinate(1, 0), "forest")
    hex_map.set(CubeCoordinate(-1, 1), "forest")
    return hex_map


class TestSetAndGet:
    def test_set_then_get(self) -> None:
        hex_map: HexMap[str] = HexMap()
        hex_map.set(CubeCoordinate(2, 3), "grass")
        assert hex_map.get(CubeCoordinate(2, 3)) == "grass"
        assert hex_map.tile_exists(CubeCoordinate(2, 3))

    def test_set_overwrites(self, tiles: HexMap[str]) -> None:
        tiles.set(CubeCoordinate(0, 0), "ruins")
        assert tiles.get(CubeCoordinate(0, 0)) == "ruins"
        assert len(tiles) == 3

    def test_lookup_uses_value_equality(self, tiles: HexMap[str]) -> None:
        """A coordinate built another way finds the same tile."""
        key = CubeCoordinate.from_cube(1, 0, -1)
        assert tiles.get(key) == "forest"

    def test_any_coordinate_is_a_key(self) -> None:
        hex_map: HexMap[int] = HexMap()
        far = CubeCoordinate(-1_000_000, 999_999)
        hex_map.set(far, 7)
        assert hex_map.get(far) == 7

    def test_get_missing_raises(self, tiles: HexMap[str]) -> None:
        missing = CubeCoordinate(9, 9)
        with pytest.raises(TileNotFoundError, match="9, r=9") as exc_info:
            tiles.get(missing)
        assert exc_info.value.coordinate == missing

    def test_missing_tile_error_is_key_error(self, tiles: HexMap[str]) -> None:
        with pytest.raises(KeyError):
            tiles.get(CubeCoordinate(9, 9))
        with pytest.raises(HexError):
            tiles.get(CubeCoordinate(9, 9))


class TestTryGet:
    def test_try_get_present(self, tiles: HexMap[str]) -> None:
        assert tiles.try_get(CubeCoordinate(1, 0)) == ("forest", True)

    def test_try_get_absent_does_not_raise(self, tiles: HexMap[str]) -> None:
        assert tiles.try_get(CubeCoordinate(5, -5)) == (None, False)

    def test_try_get_distinguishes_stored_none(self) -> None:
        hex_map: HexMap[str | None] = HexMap()
        hex_map.set(CubeCoordinate(0, 0), None)
        assert hex_map.try_get(CubeCoordinate(0, 0)) == (None, True)


class TestQueries:
    def test_tile_exists(self, tiles: HexMap[str]) -> None:
        assert tiles.tile_exists(CubeCoordinate(-1, 1))
        assert not tiles.tile_exists(CubeCoordinate(1, -1))
        assert CubeCoordinate(-1, 1) in tiles

    def test_get_all_includes_duplicate_values(self, tiles: HexMap[str]) -> None:
        assert sorted(tiles.get_all()) == ["forest", "forest", "village"]

    def test_get_all_returns_a_copy(self, tiles: HexMap[str]) -> None:
        values = tiles.get_all()
        values.clear()
        assert len(tiles.get_all()) == 3

    def test_select_keeps_only_stored_tiles(self, tiles: HexMap[str]) -> None:
        query = [CubeCoordinate(5, 5), CubeCoordinate(1, 0), CubeCoordinate(0, 0)]
        assert tiles.select(query) == {
            CubeCoordinate(1, 0): "forest",
            CubeCoordinate(0, 0): "village",
        }
        assert list(tiles.select(query)) == [CubeCoordinate(1, 0), CubeCoordinate(0, 0)]

    def test_empty_map(self) -> None:
        hex_map: HexMap[str] = HexMap()
        assert len(hex_map) == 0
        assert hex_map.get_all() == []
        assert hex_map.try_get(CubeCoordinate(0, 0)) == (None, False)


class TestClear:
    def test_clear_removes_everything(self, tiles: HexMap[str]) -> None:
        keys = [CubeCoordinate(0, 0), CubeCoordinate(1, 0), CubeCoordinate(-1, 1)]
        tiles.clear()
        assert not any(tiles.tile_exists(k) for k in keys)
        assert tiles.get_all() == []

    def test_map_usable_after_clear(self, tiles: HexMap[str]) -> None:
        tiles.clear()
        tiles.set(CubeCoordinate(2, 3), "grass")
        assert tiles.get(CubeCoordinate(2, 3)) == "grass"
        assert len(tiles) == 1

    def test_clear_is_logged(self, tiles: HexMap[str], caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="hexworld.hex_map"):
            tiles.clear()
        assert "clearing hex map with 3 tiles" in caplog.text


class TestIntHexMap:
    def test_int_map_alias(self) -> None:
        heights = IntHexMap()
        heights.set(CubeCoordinate(0, 0), 12)
        assert isinstance(heights, HexMap)
        assert heights.get(CubeCoordinate(0, 0)) == 12

    def test_maps_are_independent(self) -> None:
        first = IntHexMap()
        second = IntHexMap()
        first.set(CubeCoordinate(1, 1), 1)
        assert not second.tile_exists(CubeCoordinate(1, 1))
