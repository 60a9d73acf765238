"""
Levelset codec

- data_types: Point, Trap and Clone link records
- level_map: LevelMap, the 32x32 two-layer tile grid
- level_data: LevelData, one level and its tagged field format
- levelset: Levelset container and random_password
- sniffer: classify, container format detection

Usage:
    from cclevels.levels import Levelset, classify, LevelsetFormat

    if classify("CHIPS.DAT") == LevelsetFormat.RECOGNIZED_CONTAINER:
        levelset = Levelset.load("CHIPS.DAT")
"""

from .data_types import Point, Trap, Clone, NO_POINT
from .level_map import LevelMap
from .level_data import LevelData
from .levelset import Levelset, random_password
from .sniffer import LevelsetFormat, classify

__all__ = [
    'Point',
    'Trap',
    'Clone',
    'NO_POINT',
    'LevelMap',
    'LevelData',
    'Levelset',
    'random_password',
    'LevelsetFormat',
    'classify',
]
