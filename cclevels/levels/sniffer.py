"""
Levelset format detection.

Looks at the first four bytes of a file to tell a levelset container
apart from other level formats, without parsing anything else.
"""

import struct
from enum import Enum
from pathlib import Path
from typing import Union

from ..constants import LevelsetMagic
from ..utils import logDebug

_RECOGNIZED_MAGICS = frozenset(int(magic) for magic in LevelsetMagic)


class LevelsetFormat(Enum):
    """Detected container format."""
    ERROR = "error"                              # Unreadable or shorter than a header
    RECOGNIZED_CONTAINER = "recognized"          # One of the four levelset magics
    ALTERNATE_CONTAINER = "alternate"            # Some other (external) level format


def classify(filepath: Union[str, Path]) -> LevelsetFormat:
    """
    Classify a file by its leading 32-bit magic.

    A file that does not start with a known magic is assumed to be in an
    alternate level format rather than corrupt.

    Args:
        filepath: Path to the file

    Returns:
        LevelsetFormat value
    """
    try:
        with open(filepath, 'rb') as f:
            header = f.read(4)
    except OSError as e:
        logDebug(f"Cannot open {filepath}: {e}")
        return LevelsetFormat.ERROR

    if len(header) < 4:
        return LevelsetFormat.ERROR

    magic = struct.unpack('<I', header)[0]
    if magic in _RECOGNIZED_MAGICS:
        return LevelsetFormat.RECOGNIZED_CONTAINER
    return LevelsetFormat.ALTERNATE_CONTAINER
