"""
Tile codes used in levelset maps.

The codec stores tiles as opaque bytes; this enum names the standard codes
so callers and tests do not have to spell out hex values.
"""

from enum import IntEnum


class Tile(IntEnum):
    FLOOR = 0x00
    WALL = 0x01
    CHIP = 0x02
    WATER = 0x03
    FIRE = 0x04
    INVISIBLE_WALL = 0x05
    BARRIER_N = 0x06
    BARRIER_W = 0x07
    BARRIER_S = 0x08
    BARRIER_E = 0x09
    BLOCK = 0x0A
    DIRT = 0x0B
    ICE = 0x0C
    FORCE_S = 0x0D
    BLOCK_N = 0x0E
    BLOCK_W = 0x0F
    BLOCK_S = 0x10
    BLOCK_E = 0x11
    FORCE_N = 0x12
    FORCE_E = 0x13
    FORCE_W = 0x14
    EXIT = 0x15
    DOOR_BLUE = 0x16
    DOOR_RED = 0x17
    DOOR_GREEN = 0x18
    DOOR_YELLOW = 0x19
    ICE_SE = 0x1A
    ICE_SW = 0x1B
    ICE_NW = 0x1C
    ICE_NE = 0x1D
    BLUE_WALL_FAKE = 0x1E
    BLUE_WALL_REAL = 0x1F
    UNUSED_20 = 0x20
    THIEF = 0x21
    SOCKET = 0x22
    TOGGLE_BUTTON = 0x23
    CLONE_BUTTON = 0x24
    TOGGLE_WALL = 0x25
    TOGGLE_FLOOR = 0x26
    TRAP_BUTTON = 0x27
    TANK_BUTTON = 0x28
    TELEPORT = 0x29
    BOMB = 0x2A
    TRAP = 0x2B
    APPEARING_WALL = 0x2C
    GRAVEL = 0x2D
    POPUP_WALL = 0x2E
    HINT = 0x2F
    BARRIER_SE = 0x30
    CLONER = 0x31
    FORCE_RANDOM = 0x32
    PLAYER_SPLASH = 0x33
    PLAYER_FIRE = 0x34
    PLAYER_BURNT = 0x35
    PLAYER_EXIT = 0x36
    EXIT_END_GAME = 0x37
    UNUSED_38 = 0x38
    UNUSED_39 = 0x39
    EXIT_EXTRA_1 = 0x3A
    EXIT_EXTRA_2 = 0x3B
    PLAYER_SWIM_N = 0x3C
    PLAYER_SWIM_W = 0x3D
    PLAYER_SWIM_S = 0x3E
    PLAYER_SWIM_E = 0x3F
    BUG_N = 0x40
    BUG_W = 0x41
    BUG_S = 0x42
    BUG_E = 0x43
    FIREBALL_N = 0x44
    FIREBALL_W = 0x45
    FIREBALL_S = 0x46
    FIREBALL_E = 0x47
    BALL_N = 0x48
    BALL_W = 0x49
    BALL_S = 0x4A
    BALL_E = 0x4B
    TANK_N = 0x4C
    TANK_W = 0x4D
    TANK_S = 0x4E
    TANK_E = 0x4F
    GLIDER_N = 0x50
    GLIDER_W = 0x51
    GLIDER_S = 0x52
    GLIDER_E = 0x53
    TEETH_N = 0x54
    TEETH_W = 0x55
    TEETH_S = 0x56
    TEETH_E = 0x57
    WALKER_N = 0x58
    WALKER_W = 0x59
    WALKER_S = 0x5A
    WALKER_E = 0x5B
    BLOB_N = 0x5C
    BLOB_W = 0x5D
    BLOB_S = 0x5E
    BLOB_E = 0x5F
    CRAWLER_N = 0x60
    CRAWLER_W = 0x61
    CRAWLER_S = 0x62
    CRAWLER_E = 0x63
    KEY_BLUE = 0x64
    KEY_RED = 0x65
    KEY_GREEN = 0x66
    KEY_YELLOW = 0x67
    FLIPPERS = 0x68
    FIRE_BOOTS = 0x69
    ICE_SKATES = 0x6A
    FORCE_BOOTS = 0x6B
    PLAYER_N = 0x6C
    PLAYER_W = 0x6D
    PLAYER_S = 0x6E
    PLAYER_E = 0x6F

    def is_creature(self) -> bool:
        # Monsters, blocks and the player in all four directions
        return (Tile.BUG_N <= self <= Tile.CRAWLER_E
                or Tile.PLAYER_N <= self <= Tile.PLAYER_E
                or Tile.BLOCK_N <= self <= Tile.BLOCK_E
                or Tile.PLAYER_SWIM_N <= self <= Tile.PLAYER_SWIM_E)

    def __repr__(self):
        return self.name


def tile_name(code: int) -> str:
    """Return the tile's name, or its hex code if it is not a known tile."""
    try:
        return Tile(code).name
    except ValueError:
        return f"0x{code:02X}"
