"""
Constants of the levelset file format.

Consolidates magic numbers shared by the stream, map, level and levelset
modules.
"""

from enum import IntEnum

# Map dimensions (tiles)
MAP_WIDTH = 32
MAP_HEIGHT = 32
MAP_CELLS = MAP_WIDTH * MAP_HEIGHT

EMPTY_TILE = 0

# Marker preceding the two RLE layers of every level
MAP_DATA_MARKER = 1

# RLE run introducer and longest run a single triple can describe
RLE_RUN_MARKER = 0xFF
RLE_MAX_RUN = 255

# Password bytes are stored XOR'd with this key
PASSWORD_XOR_KEY = 0x99

# Byte size of one list element in the optional fields
TRAP_ENTRY_SIZE = 10
CLONE_ENTRY_SIZE = 8
MOVER_ENTRY_SIZE = 2

# Tag byte + length byte
FIELD_HEADER_SIZE = 2
MAX_FIELD_SIZE = 0xFF

# Bytes per u16
WORD_SIZE = 2

PASSWORD_LENGTH = 4


class LevelsetMagic(IntEnum):
    """Container magic, selecting the target engine/ruleset."""
    MS = 0x0002AAAC
    LYNX = 0x0102AAAC
    PG = 0x0003AAAC
    LYNX_PG = 0x0103AAAC


DEFAULT_MAGIC = LevelsetMagic.MS

# Names accepted on the command line and in config files
MAGIC_NAMES = {
    'ms': LevelsetMagic.MS,
    'lynx': LevelsetMagic.LYNX,
    'pg': LevelsetMagic.PG,
    'lynxpg': LevelsetMagic.LYNX_PG,
}


class FieldType(IntEnum):
    """Tag byte of an optional level field."""
    NAME = 3
    TRAPS = 4
    CLONERS = 5
    PASSWORD = 6
    HINT = 7
    MOVERS = 10
