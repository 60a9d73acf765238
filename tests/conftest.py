"""
Shared fixtures for the cclevels test suite.
"""

import struct

import pytest

from cclevels.levels import LevelData
from cclevels.tiles import Tile
from cclevels.utils import close_logging, init_logging
from cclevels.utils.binary import encode_rle

EMPTY_LAYER = struct.pack('<H', len(encode_rle(bytes(1024)))) + encode_rle(bytes(1024))


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path):
    """Send log output of every test to a temporary file."""
    init_logging(tmp_path / "test.log")
    yield
    close_logging()


@pytest.fixture
def sample_level():
    """A level using every optional field and some map tiles."""
    level = LevelData(level_num=4, timer=250, chips=11,
                      name="Sample", hint="Push the block", password="QWER")
    level.map.set_fg(0, 0, Tile.WALL)
    level.map.set_fg(5, 7, Tile.PLAYER_S)
    level.map.push((9, 9), Tile.BLOCK)
    level.map.set_bg(31, 31, Tile.EXIT)
    level.connect_trap((1, 2), (3, 4))
    level.connect_trap((1, 2), (5, 6))
    level.connect_cloner((7, 8), (9, 10))
    level.add_mover((11, 12))
    level.add_mover((13, 14))
    return level


@pytest.fixture
def raw_level():
    """
    Build raw level bytes with an empty map around the given field section.

    Sizes default to the correct values; pass level_size / field_size to
    corrupt them.
    """
    def build(fields: bytes = b"", level_size=None, field_size=None,
              marker: int = 1, clipboard: bool = False) -> bytes:
        body = struct.pack('<HHHH', 1, 100, 5, marker) + EMPTY_LAYER + EMPTY_LAYER
        body += struct.pack('<H', len(fields) if field_size is None else field_size) + fields
        if clipboard:
            return body
        return struct.pack('<H', len(body) if level_size is None else level_size) + body

    return build
