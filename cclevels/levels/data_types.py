"""
Data types shared by the level modules.
"""

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """Map position. Not bounds checked."""
    x: int
    y: int


NO_POINT = Point(-1, -1)


@dataclass(frozen=True)
class Trap:
    """Trap button wired to a trap."""
    button: Point
    trap: Point


@dataclass(frozen=True)
class Clone:
    """Clone button wired to a cloning machine."""
    button: Point
    clone: Point
