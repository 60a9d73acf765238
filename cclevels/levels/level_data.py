"""
Level Data

One level of a levelset: metadata, the tile map and the link tables used
by the game logic (trap wiring, cloner wiring and the forced-move list).

Stored level format (all integers little-endian):
- u16 size (bytes following this field, through the end of the level)
- u16 level number, u16 timer, u16 chip count
- u16 map marker (always 1)
- RLE foreground layer, RLE background layer
- u16 field section size
- Fields, each: u8 tag, u8 length, `length` bytes of payload
  - NAME, HINT: NUL terminated string
  - PASSWORD: NUL terminated string, bytes XOR 0x99
  - TRAPS: 10 bytes per entry (button x/y, trap x/y, unused state word)
  - CLONERS: 8 bytes per entry (button x/y, clone x/y)
  - MOVERS: 2 bytes per entry (u8 x, u8 y)

The clipboard form used for copy/paste omits the leading size field.
"""

import copy
from dataclasses import dataclass, field
from typing import List, Tuple

from ..constants import (
    CLONE_ENTRY_SIZE,
    FIELD_HEADER_SIZE,
    MAP_DATA_MARKER,
    MAX_FIELD_SIZE,
    MOVER_ENTRY_SIZE,
    TRAP_ENTRY_SIZE,
    WORD_SIZE,
    FieldType,
)
from ..errors import (
    ChecksumMismatchError,
    CorruptClipboardDataError,
    FieldTooLargeError,
    InvalidFieldSizeError,
    InvalidMapMarkerError,
    SizeMismatchError,
    TruncatedRecordError,
    UnrecognizedFieldError,
    ValueOutOfRangeError,
)
from ..utils import logDebug
from ..utils.binary import DataStream
from .data_types import Clone, Point, Trap
from .level_map import LevelMap

# Level number, timer and chip count
METADATA_SIZE = 3 * WORD_SIZE


def _check_range(label: str, value: int, limit: int):
    if not 0 <= value <= limit:
        raise ValueOutOfRangeError(f"{label.capitalize()} {value} is outside 0..{limit}")


def _check_points(kind: str, limit: int, *points: Point):
    for point in points:
        if not (0 <= point.x <= limit and 0 <= point.y <= limit):
            raise ValueOutOfRangeError(
                f"{kind} coordinate ({point.x}, {point.y}) is outside 0..{limit}")


@dataclass
class LevelData:
    """
    A single level.

    LevelData objects are shared by reference; use copy() for an
    independent deep copy.

    Usage:
        level = LevelData(name="Level 1", password="ABCD", timer=200)
        level.connect_trap((3, 4), (10, 12))
        level.write(stream)

        level = LevelData()
        level.read(stream)
    """
    level_num: int = 0
    timer: int = 0
    chips: int = 0
    name: str = ""
    hint: str = ""
    password: str = ""
    map: LevelMap = field(default_factory=LevelMap)
    traps: List[Trap] = field(default_factory=list)
    clones: List[Clone] = field(default_factory=list)
    move_list: List[Point] = field(default_factory=list)

    def copy(self) -> 'LevelData':
        """Return an independent deep copy of this level."""
        return copy.deepcopy(self)

    def __deepcopy__(self, memo) -> 'LevelData':
        return LevelData(
            level_num=self.level_num,
            timer=self.timer,
            chips=self.chips,
            name=self.name,
            hint=self.hint,
            password=self.password,
            map=self.map.copy(),
            traps=list(self.traps),
            clones=list(self.clones),
            move_list=list(self.move_list),
        )

    # ------------------------------------------------------------------
    # Link queries
    # ------------------------------------------------------------------

    def traps_linked_to(self, button: Tuple[int, int]) -> List[Point]:
        """Trap positions wired to the button at `button`."""
        button = Point(*button)
        return [link.trap for link in self.traps if link.button == button]

    def trigger_buttons_for_trap(self, trap: Tuple[int, int]) -> List[Point]:
        """Button positions wired to the trap at `trap`."""
        trap = Point(*trap)
        return [link.button for link in self.traps if link.trap == trap]

    def cloners_linked_to(self, button: Tuple[int, int]) -> List[Point]:
        """Cloning machine positions wired to the button at `button`."""
        button = Point(*button)
        return [link.clone for link in self.clones if link.button == button]

    def trigger_buttons_for_cloner(self, clone: Tuple[int, int]) -> List[Point]:
        """Button positions wired to the cloning machine at `clone`."""
        clone = Point(*clone)
        return [link.button for link in self.clones if link.clone == clone]

    def is_mover_at(self, pos: Tuple[int, int]) -> bool:
        return Point(*pos) in self.move_list

    # ------------------------------------------------------------------
    # Link maintenance
    # ------------------------------------------------------------------

    def connect_trap(self, button: Tuple[int, int], trap: Tuple[int, int]):
        """Wire a button to a trap unless that exact pair already exists."""
        link = Trap(Point(*button), Point(*trap))
        if link not in self.traps:
            self.traps.append(link)

    def connect_cloner(self, button: Tuple[int, int], clone: Tuple[int, int]):
        """Wire a button to a cloning machine unless that exact pair already exists."""
        link = Clone(Point(*button), Point(*clone))
        if link not in self.clones:
            self.clones.append(link)

    def add_mover(self, pos: Tuple[int, int]):
        pos = Point(*pos)
        if pos not in self.move_list:
            self.move_list.append(pos)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read(self, stream: DataStream, for_clipboard: bool = False) -> int:
        """
        Read this level from `stream`, replacing the current contents.

        Args:
            stream: Stream positioned at the start of the level
            for_clipboard: Read the clipboard form (no leading size field)

        Returns:
            Number of bytes consumed

        Raises:
            LevelsetFormatError subclass describing the first problem found
        """
        begin = stream.tell()
        remaining = 0 if for_clipboard else stream.read16()

        self.level_num = stream.read16()
        self.timer = stream.read16()
        self.chips = stream.read16()
        remaining -= METADATA_SIZE

        marker = stream.read16()
        if marker != MAP_DATA_MARKER:
            raise InvalidMapMarkerError(f"Invalid map data marker {marker} at offset {begin}")
        remaining -= self.map.read(stream) + WORD_SIZE

        field_size = stream.read16()
        remaining -= WORD_SIZE
        if for_clipboard:
            remaining = field_size
        elif field_size != remaining:
            raise SizeMismatchError(
                f"Field section size {field_size} does not match level size "
                f"(expected {remaining}) at offset {begin}")

        self.name = ""
        self.hint = ""
        self.password = ""
        self.traps = []
        self.clones = []
        self.move_list = []

        fields_begin = stream.tell()
        while remaining > 0:
            tag = stream.read8()
            size = stream.read8()
            if size + FIELD_HEADER_SIZE > remaining:
                raise TruncatedRecordError(
                    f"Field {tag} of {size} bytes overruns level data "
                    f"({remaining} bytes left) at offset {stream.tell() - FIELD_HEADER_SIZE}")
            remaining -= size + FIELD_HEADER_SIZE
            self._read_field(stream, tag, size)

        consumed = stream.tell() - fields_begin
        if remaining != 0 or consumed != field_size:
            if for_clipboard:
                raise CorruptClipboardDataError(
                    f"Corrupt level data: read {consumed} of {field_size} field bytes")
            raise ChecksumMismatchError(
                f"Invalid level checksum: read {consumed} of {field_size} field bytes")

        logDebug(f"Read level {self.level_num} '{self.name}' ({stream.tell() - begin} bytes)")
        return stream.tell() - begin

    def _read_field(self, stream: DataStream, tag: int, size: int):
        """Parse one field payload of `size` bytes."""
        try:
            field_type = FieldType(tag)
        except ValueError:
            raise UnrecognizedFieldError(
                f"Unrecognized field type {tag} at offset {stream.tell() - FIELD_HEADER_SIZE}") from None

        if field_type == FieldType.NAME:
            self.name = stream.read_string(size)
        elif field_type == FieldType.HINT:
            self.hint = stream.read_string(size)
        elif field_type == FieldType.PASSWORD:
            self.password = stream.read_string(size, password=True)
        elif field_type == FieldType.TRAPS:
            self._check_field_size(field_type, size, TRAP_ENTRY_SIZE)
            for _ in range(size // TRAP_ENTRY_SIZE):
                button = Point(stream.read16(), stream.read16())
                trap = Point(stream.read16(), stream.read16())
                stream.read16()  # Trap state, unused
                self.traps.append(Trap(button, trap))
        elif field_type == FieldType.CLONERS:
            self._check_field_size(field_type, size, CLONE_ENTRY_SIZE)
            for _ in range(size // CLONE_ENTRY_SIZE):
                button = Point(stream.read16(), stream.read16())
                clone = Point(stream.read16(), stream.read16())
                self.clones.append(Clone(button, clone))
        elif field_type == FieldType.MOVERS:
            self._check_field_size(field_type, size, MOVER_ENTRY_SIZE)
            for _ in range(size // MOVER_ENTRY_SIZE):
                self.move_list.append(Point(stream.read8(), stream.read8()))

    @staticmethod
    def _check_field_size(field_type: FieldType, size: int, entry_size: int):
        if size % entry_size != 0:
            raise InvalidFieldSizeError(
                f"Invalid {field_type.name.lower()} field size {size} "
                f"(must be a multiple of {entry_size})")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(self, stream: DataStream, for_clipboard: bool = False) -> int:
        """
        Write this level to `stream`.

        Args:
            stream: Output stream
            for_clipboard: Write the clipboard form (no leading size field)

        Returns:
            Number of bytes written

        Raises:
            FieldTooLargeError: if a string or list does not fit its field
            ValueOutOfRangeError: if a number or coordinate does not fit its
                integer width
        """
        for label, value in (('level number', self.level_num),
                             ('timer', self.timer),
                             ('chip count', self.chips)):
            _check_range(label, value, 0xFFFF)

        body = DataStream()
        body.write16(self.level_num)
        body.write16(self.timer)
        body.write16(self.chips)
        body.write16(MAP_DATA_MARKER)
        self.map.write(body)
        body.write_sized(self._serialize_fields())

        if for_clipboard:
            size = stream.write(body.getvalue())
        else:
            size = stream.write_sized(body.getvalue())

        logDebug(f"Wrote level {self.level_num} '{self.name}' ({size} bytes)")
        return size

    def _serialize_fields(self) -> bytes:
        """Serialize the non-empty optional fields in their fixed order."""
        fields = DataStream()

        for field_type, text, password in ((FieldType.NAME, self.name, False),
                                           (FieldType.HINT, self.hint, False),
                                           (FieldType.PASSWORD, self.password, True)):
            if text:
                payload = DataStream()
                payload.write_string(text, password=password)
                self._write_field(fields, field_type, payload.getvalue())

        if self.traps:
            payload = DataStream()
            for link in self.traps:
                _check_points('Trap', 0xFFFF, link.button, link.trap)
                payload.write16(link.button.x)
                payload.write16(link.button.y)
                payload.write16(link.trap.x)
                payload.write16(link.trap.y)
                payload.write16(0)
            self._write_field(fields, FieldType.TRAPS, payload.getvalue())

        if self.clones:
            payload = DataStream()
            for link in self.clones:
                _check_points('Cloner', 0xFFFF, link.button, link.clone)
                payload.write16(link.button.x)
                payload.write16(link.button.y)
                payload.write16(link.clone.x)
                payload.write16(link.clone.y)
            self._write_field(fields, FieldType.CLONERS, payload.getvalue())

        if self.move_list:
            payload = DataStream()
            for mover in self.move_list:
                _check_points('Mover', 0xFF, mover)
                payload.write8(mover.x)
                payload.write8(mover.y)
            self._write_field(fields, FieldType.MOVERS, payload.getvalue())

        return fields.getvalue()

    @staticmethod
    def _write_field(stream: DataStream, field_type: FieldType, payload: bytes):
        if len(payload) > MAX_FIELD_SIZE:
            raise FieldTooLargeError(
                f"{field_type.name.capitalize()} field is {len(payload)} bytes "
                f"(maximum {MAX_FIELD_SIZE})")
        stream.write8(field_type)
        stream.write8(len(payload))
        stream.write(payload)

    # ------------------------------------------------------------------
    # Clipboard helpers
    # ------------------------------------------------------------------

    def to_clipboard(self) -> bytes:
        """Serialize this level in clipboard form."""
        stream = DataStream()
        self.write(stream, for_clipboard=True)
        return stream.getvalue()

    @classmethod
    def from_clipboard(cls, data: bytes) -> 'LevelData':
        """Create a level from clipboard form bytes."""
        level = cls()
        level.read(DataStream.from_bytes(data), for_clipboard=True)
        return level
