"""
Level Map

Fixed 32x32 two-layer tile grid.

Each cell holds a foreground tile (currently visible) and a background
tile (what lies underneath). Layers are numpy uint8 arrays indexed
[y, x]. On disk each layer is one RLE block of 1024 tiles, foreground
first.
"""

from typing import Tuple

import numpy as np

from ..constants import EMPTY_TILE, MAP_CELLS, MAP_HEIGHT, MAP_WIDTH
from ..utils.binary import DataStream
from .data_types import NO_POINT, Point


class LevelMap:
    """
    Two-layer tile grid of one level.

    Usage:
        level_map = LevelMap()
        level_map.push((3, 4), Tile.BLOCK)   # block on top of whatever was there
        tile = level_map.pop((3, 4))          # back to the previous tile
        pos = level_map.find_next((0, 0), Tile.CHIP)
    """

    def __init__(self):
        self.fg = np.zeros((MAP_HEIGHT, MAP_WIDTH), dtype=np.uint8)
        self.bg = np.zeros((MAP_HEIGHT, MAP_WIDTH), dtype=np.uint8)

    def copy(self) -> 'LevelMap':
        result = LevelMap()
        result.fg[:] = self.fg
        result.bg[:] = self.bg
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, LevelMap):
            return NotImplemented
        return np.array_equal(self.fg, other.fg) and np.array_equal(self.bg, other.bg)

    def __repr__(self) -> str:
        used = int(np.count_nonzero(self.fg) + np.count_nonzero(self.bg))
        return f"LevelMap({used} non-empty tiles)"

    def get_fg(self, x: int, y: int) -> int:
        return int(self.fg[y, x])

    def get_bg(self, x: int, y: int) -> int:
        return int(self.bg[y, x])

    def set_fg(self, x: int, y: int, tile: int):
        self.fg[y, x] = tile

    def set_bg(self, x: int, y: int, tile: int):
        self.bg[y, x] = tile

    def copy_region(self, source: 'LevelMap', src_origin: Tuple[int, int],
                    dest_origin: Tuple[int, int], width: int, height: int):
        """
        Copy a rectangle of both layers from `source` into this map.

        The rectangle is silently clipped to the part that lies inside both
        maps. Negative origins drop the rows and columns left of or above
        the map edge.

        Args:
            source: Map to copy from (may be this map)
            src_origin: Top-left (x, y) in the source
            dest_origin: Top-left (x, y) in this map
            width: Rectangle width in tiles
            height: Rectangle height in tiles
        """
        src_x, src_y = src_origin
        dest_x, dest_y = dest_origin

        # Trim the parts of the rectangle left of or above either map
        left = max(0, -src_x, -dest_x)
        top = max(0, -src_y, -dest_y)
        src_x, dest_x, width = src_x + left, dest_x + left, width - left
        src_y, dest_y, height = src_y + top, dest_y + top, height - top

        width = min(width, MAP_WIDTH - dest_x, MAP_WIDTH - src_x)
        height = min(height, MAP_HEIGHT - dest_y, MAP_HEIGHT - src_y)
        if width <= 0 or height <= 0:
            return

        # Copy first so overlapping regions of the same map behave
        fg = source.fg[src_y:src_y + height, src_x:src_x + width].copy()
        bg = source.bg[src_y:src_y + height, src_x:src_x + width].copy()
        self.fg[dest_y:dest_y + height, dest_x:dest_x + width] = fg
        self.bg[dest_y:dest_y + height, dest_x:dest_x + width] = bg

    def push(self, pos: Tuple[int, int], tile: int):
        """
        Place `tile` on top of a cell.

        The old foreground moves to the background; the old background is lost.
        """
        x, y = pos
        self.bg[y, x] = self.fg[y, x]
        self.fg[y, x] = tile

    def pop(self, pos: Tuple[int, int]) -> int:
        """
        Remove and return the foreground tile of a cell.

        The background moves up and the background becomes empty.
        """
        x, y = pos
        tile = int(self.fg[y, x])
        self.fg[y, x] = self.bg[y, x]
        self.bg[y, x] = EMPTY_TILE
        return tile

    def find_next(self, start: Tuple[int, int], tile: int) -> Point:
        """
        Find the next cell after `start` containing `tile` in either layer.

        Cells are scanned in row-major order, wrapping from the end of the map
        back to (0, 0). The start cell itself never matches.

        Returns:
            Position of the match, or Point(-1, -1) if there is none
        """
        x, y = start
        start_index = y * MAP_WIDTH + x
        fg = self.fg.ravel()
        bg = self.bg.ravel()

        for step in range(1, MAP_CELLS):
            index = (start_index + step) % MAP_CELLS
            if fg[index] == tile or bg[index] == tile:
                return Point(index % MAP_WIDTH, index // MAP_WIDTH)

        return NO_POINT

    def read(self, stream: DataStream) -> int:
        """
        Read both RLE layers.

        Returns:
            Number of bytes consumed
        """
        begin = stream.tell()
        self.fg = stream.read_rle(MAP_CELLS).reshape(MAP_HEIGHT, MAP_WIDTH)
        self.bg = stream.read_rle(MAP_CELLS).reshape(MAP_HEIGHT, MAP_WIDTH)
        return stream.tell() - begin

    def write(self, stream: DataStream) -> int:
        """
        Write both RLE layers.

        Returns:
            Number of bytes written
        """
        size = stream.write_rle(self.fg)
        size += stream.write_rle(self.bg)
        return size
