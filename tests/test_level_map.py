"""
Tests for LevelMap stacking, searching, region copy and serialization.
"""

import numpy as np

from cclevels.levels import LevelMap, Point
from cclevels.tiles import Tile, tile_name
from cclevels.utils.binary import DataStream


def test_new_map_is_empty():
    level_map = LevelMap()

    assert level_map.fg.shape == (32, 32)
    assert not level_map.fg.any()
    assert not level_map.bg.any()


def test_push_then_pop_restores_previous_tile():
    level_map = LevelMap()
    level_map.set_fg(3, 4, Tile.ICE)

    level_map.push((3, 4), Tile.BLOCK)
    assert level_map.get_fg(3, 4) == Tile.BLOCK
    assert level_map.get_bg(3, 4) == Tile.ICE

    assert level_map.pop((3, 4)) == Tile.BLOCK
    assert level_map.get_fg(3, 4) == Tile.ICE
    assert level_map.get_bg(3, 4) == Tile.FLOOR


def test_second_push_discards_background():
    level_map = LevelMap()
    level_map.set_fg(0, 0, Tile.WATER)

    level_map.push((0, 0), Tile.BLOCK)
    level_map.push((0, 0), Tile.BUG_N)

    assert level_map.pop((0, 0)) == Tile.BUG_N
    assert level_map.pop((0, 0)) == Tile.BLOCK
    assert level_map.pop((0, 0)) == Tile.FLOOR


def test_pop_empty_cell_returns_floor():
    level_map = LevelMap()

    assert level_map.pop((31, 31)) == Tile.FLOOR


def test_find_next_without_match():
    level_map = LevelMap()

    assert level_map.find_next((0, 0), Tile.CHIP) == Point(-1, -1)


def test_find_next_single_match_from_any_start():
    level_map = LevelMap()
    level_map.set_fg(10, 20, Tile.CHIP)

    for start in [(0, 0), (9, 20), (11, 20), (31, 31), (15, 25)]:
        assert level_map.find_next(start, Tile.CHIP) == (10, 20)


def test_find_next_matches_background_layer():
    level_map = LevelMap()
    level_map.set_bg(2, 3, Tile.TRAP)

    assert level_map.find_next((0, 0), Tile.TRAP) == (2, 3)


def test_find_next_skips_start_cell():
    level_map = LevelMap()
    level_map.set_fg(5, 5, Tile.EXIT)

    assert level_map.find_next((5, 5), Tile.EXIT) == (-1, -1)


def test_find_next_cycles_between_matches():
    level_map = LevelMap()
    level_map.set_fg(1, 1, Tile.TELEPORT)
    level_map.set_fg(30, 30, Tile.TELEPORT)

    assert level_map.find_next((1, 1), Tile.TELEPORT) == (30, 30)
    assert level_map.find_next((30, 30), Tile.TELEPORT) == (1, 1)


def test_find_next_wraps_rows():
    level_map = LevelMap()
    level_map.set_fg(0, 6, Tile.HINT)

    assert level_map.find_next((31, 5), Tile.HINT) == (0, 6)


def test_copy_region_copies_both_layers():
    source = LevelMap()
    source.set_fg(2, 3, Tile.WALL)
    source.set_bg(3, 3, Tile.TRAP_BUTTON)

    dest = LevelMap()
    dest.copy_region(source, (2, 3), (10, 10), 2, 1)

    assert dest.get_fg(10, 10) == Tile.WALL
    assert dest.get_bg(11, 10) == Tile.TRAP_BUTTON
    assert np.count_nonzero(dest.fg) + np.count_nonzero(dest.bg) == 2


def test_copy_region_clips_at_map_edge():
    source = LevelMap()
    source.fg[:, :] = Tile.WALL

    dest = LevelMap()
    dest.copy_region(source, (0, 0), (30, 29), 5, 5)

    assert np.count_nonzero(dest.fg) == 2 * 3
    assert dest.get_fg(31, 31) == Tile.WALL
    assert dest.get_fg(29, 31) == Tile.FLOOR


def test_copy_region_clips_negative_destination():
    source = LevelMap()
    source.fg[:, :] = Tile.WALL
    source.set_fg(2, 1, Tile.CHIP)

    dest = LevelMap()
    dest.copy_region(source, (0, 0), (-2, -1), 5, 5)

    assert np.count_nonzero(dest.fg) == 3 * 4
    assert dest.get_fg(0, 0) == Tile.CHIP
    assert dest.get_fg(2, 3) == Tile.WALL
    assert dest.get_fg(3, 0) == Tile.FLOOR
    assert dest.get_fg(0, 4) == Tile.FLOOR


def test_copy_region_clips_negative_source():
    source = LevelMap()
    source.set_fg(0, 0, Tile.EXIT)
    source.set_bg(1, 0, Tile.TRAP)

    dest = LevelMap()
    dest.copy_region(source, (-3, -2), (10, 10), 5, 5)

    assert dest.get_fg(13, 12) == Tile.EXIT
    assert dest.get_bg(14, 12) == Tile.TRAP
    assert np.count_nonzero(dest.fg) + np.count_nonzero(dest.bg) == 2


def test_copy_region_entirely_outside_copies_nothing():
    source = LevelMap()
    source.fg[:, :] = Tile.WALL

    dest = LevelMap()
    dest.copy_region(source, (0, 0), (-5, 3), 5, 5)
    dest.copy_region(source, (40, 0), (0, 0), 5, 5)

    assert not dest.fg.any()


def test_copy_is_independent():
    level_map = LevelMap()
    level_map.set_fg(1, 1, Tile.CHIP)

    duplicate = level_map.copy()
    duplicate.set_fg(1, 1, Tile.FLOOR)

    assert level_map.get_fg(1, 1) == Tile.CHIP
    assert duplicate != level_map


def test_read_and_write_report_sizes():
    level_map = LevelMap()
    level_map.set_fg(0, 0, Tile.PLAYER_S)
    level_map.set_bg(0, 0, Tile.EXIT)
    level_map.fg[10, :] = Tile.WALL

    stream = DataStream()
    written = level_map.write(stream)
    assert written == len(stream.getvalue())

    stream.seek(0)
    restored = LevelMap()
    assert restored.read(stream) == written
    assert restored == level_map


def test_tile_names():
    assert tile_name(0x6C) == "PLAYER_N"
    assert tile_name(0xF0) == "0xF0"
    assert Tile.TANK_E.is_creature()
    assert not Tile.TRAP.is_creature()
