"""
Levelset

Ordered collection of levels behind a container header.

File format:
- u32 magic (MS, Lynx, PG or Lynx PG ruleset)
- u16 level count
- Levels, each in the stored LevelData format

Level numbers are rewritten 1..N on every write, so levels can be added,
removed and reordered freely in memory.
"""

import random
import string
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..constants import DEFAULT_MAGIC, PASSWORD_LENGTH, LevelsetMagic
from ..errors import InvalidHeaderError
from ..utils import logDebug
from ..utils.binary import DataStream
from .level_data import LevelData


def random_password(rng: Optional[random.Random] = None) -> str:
    """
    Generate a password of four uppercase letters.

    Not suitable for anything security related.

    Args:
        rng: Random generator to draw from. The module generator if omitted.
    """
    rng = rng or random
    return ''.join(rng.choice(string.ascii_uppercase) for _ in range(PASSWORD_LENGTH))


def _default_level(number: int) -> LevelData:
    return LevelData(name=f"Level {number}", password=random_password())


class Levelset:
    """
    A levelset file in memory.

    Usage:
        levelset = Levelset(3)                 # three empty levels
        levelset.add_level()                   # "Level 4"
        levelset.save("my_levels.dat")

        levelset = Levelset.load("CHIPS.DAT")
        for level in levelset:
            print(level.level_num, level.name)
    """

    def __init__(self, level_count: int = 0, magic: int = DEFAULT_MAGIC):
        """
        Create a levelset of `level_count` new levels.

        New levels are named "Level <n>" and get a random password.
        """
        self.magic = magic
        self.dirty = False
        self._levels: List[LevelData] = [_default_level(i + 1) for i in range(level_count)]

    def copy(self) -> 'Levelset':
        """Return a levelset with the same magic and deep copies of every level."""
        result = Levelset(magic=self.magic)
        result._levels = [level.copy() for level in self._levels]
        return result

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[LevelData]:
        return iter(self._levels)

    def __getitem__(self, index: int) -> LevelData:
        return self._levels[index]

    def __repr__(self) -> str:
        return f"Levelset(magic=0x{self.magic:08X}, levels={len(self._levels)})"

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def levels(self) -> List[LevelData]:
        """Levels in order. The list is a copy; the levels are not."""
        return list(self._levels)

    def level(self, index: int) -> LevelData:
        return self._levels[index]

    @staticmethod
    def random_password() -> str:
        return random_password()

    # ------------------------------------------------------------------
    # Level management
    # ------------------------------------------------------------------

    def add_level(self, level: Optional[LevelData] = None) -> LevelData:
        """
        Append a level.

        Args:
            level: Level to append. If omitted a new level named after its
                position is created with a random password.

        Returns:
            The appended level
        """
        if level is None:
            level = _default_level(len(self._levels) + 1)
        self._levels.append(level)
        return level

    def insert_level(self, index: int, level: LevelData):
        self._levels.insert(index, level)

    def take_level(self, index: int) -> LevelData:
        """Remove the level at `index` and hand it to the caller."""
        return self._levels.pop(index)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def read(self, stream: DataStream):
        """
        Replace the contents of this levelset with one read from `stream`.

        If a level fails to parse, the error propagates and the levelset is
        left partially populated. Discard it.

        Raises:
            InvalidHeaderError: if the magic is not recognized
            LevelsetFormatError subclass for any level problem
        """
        self._levels = []

        magic = stream.read32()
        try:
            self.magic = LevelsetMagic(magic)
        except ValueError:
            raise InvalidHeaderError(f"Invalid levelset header 0x{magic:08X}") from None

        count = stream.read16()
        logDebug(f"Reading {count} levels ({self.magic.name} ruleset)")

        for _ in range(count):
            level = LevelData()
            self._levels.append(level)
            level.read(stream)

    def write(self, stream: DataStream) -> int:
        """
        Write the levelset to `stream`, renumbering levels 1..N.

        Returns:
            Number of bytes written
        """
        size = stream.write32(self.magic)
        size += stream.write16(len(self._levels))

        for number, level in enumerate(self._levels, start=1):
            level.level_num = number
            size += level.write(stream)

        logDebug(f"Wrote {len(self._levels)} levels ({size} bytes)")
        return size

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'Levelset':
        """
        Read a levelset file.

        Args:
            filepath: Path to the levelset file

        Returns:
            Levelset instance
        """
        levelset = cls()
        with open(filepath, 'rb') as f:
            levelset.read(DataStream(f))
        return levelset

    def save(self, filepath: Union[str, Path]) -> int:
        """
        Write the levelset to a file.

        Nothing is written to disk if serialization fails.

        Returns:
            Number of bytes written
        """
        stream = DataStream()
        size = self.write(stream)
        Path(filepath).write_bytes(stream.getvalue())
        self.dirty = False
        return size
