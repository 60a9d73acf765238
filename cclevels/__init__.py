"""
cclevels - reader and writer for tile-based puzzle game levelsets.

Usage:
    from cclevels import Levelset, LevelData, Tile

    levelset = Levelset.load("CHIPS.DAT")
    level = levelset[0]
    level.map.push((5, 5), Tile.BLOCK)
    levelset.save("CHIPS_EDITED.DAT")
"""

from .constants import LevelsetMagic, FieldType
from .errors import LevelsetFormatError
from .levels import (
    Point,
    Trap,
    Clone,
    LevelMap,
    LevelData,
    Levelset,
    random_password,
    LevelsetFormat,
    classify,
)
from .tiles import Tile, tile_name
from .utils.binary import DataStream

__version__ = "0.1.0"
