"""
Binary Stream Utilities

Positional little-endian reader/writer used by the levelset codec.

DataStream wraps any seekable binary file object (io.BytesIO by default)
and provides:
- fixed width integer transfer (read8/16/32, write8/16/32)
- run-length encoded tile layers (read_rle, write_rle)
- NUL terminated strings with optional password obfuscation
- length prefixed blocks (write_sized)
"""

import io
import os
import struct
from typing import BinaryIO, Optional, Union

import numpy as np

from ..constants import (
    PASSWORD_XOR_KEY,
    RLE_MAX_RUN,
    RLE_RUN_MARKER,
)
from ..errors import InvalidStringError, RLEError, UnexpectedEndOfStreamError

STRING_ENCODING = 'latin-1'


def _xor_bytes(data: bytes, key: int) -> bytes:
    return bytes(b ^ key for b in data)


def encode_rle(tiles: Union[bytes, np.ndarray]) -> bytes:
    """
    Run-length encode a flat tile array.

    Runs longer than three tiles, and any run of the 0xFF tile, are written
    as a (0xFF, count, tile) triple. Shorter runs are written literally.

    Args:
        tiles: Flat array of tile codes

    Returns:
        Encoded bytes (without the u16 length prefix)
    """
    if isinstance(tiles, (bytes, bytearray)):
        data = bytes(tiles)
    else:
        data = np.asarray(tiles, dtype=np.uint8).ravel().tobytes()
    out = bytearray()
    if not data:
        return bytes(out)

    def flush(tile: int, count: int):
        if count > 3 or tile == RLE_RUN_MARKER:
            out.extend((RLE_RUN_MARKER, count, tile))
        else:
            out.extend(bytes((tile,)) * count)

    last = data[0]
    count = 1
    for tile in data[1:]:
        if tile == last and count < RLE_MAX_RUN:
            count += 1
        else:
            flush(last, count)
            last = tile
            count = 1
    flush(last, count)

    return bytes(out)


def decode_rle(data: bytes, size: int) -> np.ndarray:
    """
    Decode run-length encoded tiles into a flat array of `size` cells.

    Cells past the end of the encoded data stay empty (0).

    Raises:
        RLEError: if the data describes more than `size` tiles or a run
            triple is cut short
    """
    result = np.zeros(size, dtype=np.uint8)
    pos = 0
    offset = 0

    while offset < len(data):
        tile = data[offset]
        offset += 1
        if tile == RLE_RUN_MARKER:
            if offset + 2 > len(data):
                raise RLEError(f"RLE run truncated at offset {offset - 1}")
            count, tile = data[offset], data[offset + 1]
            offset += 2
            if pos + count > size:
                raise RLEError(f"RLE run of {count} overflows layer at cell {pos}")
            result[pos:pos + count] = tile
            pos += count
        else:
            if pos >= size:
                raise RLEError(f"RLE data overflows layer of {size} cells")
            result[pos] = tile
            pos += 1

    return result


class DataStream:
    """
    Sequential little-endian stream over a seekable binary file object.

    Usage:
        stream = DataStream()
        stream.write16(1)
        stream.write_string("Level 1")
        data = stream.getvalue()

        stream = DataStream(io.BytesIO(data))
        marker = stream.read16()

        with open("levels.dat", "rb") as f:
            levelset.read(DataStream(f))
    """

    def __init__(self, fileobj: Optional[BinaryIO] = None):
        """
        Args:
            fileobj: Binary file object to wrap. A new io.BytesIO if omitted.
        """
        self._file = fileobj if fileobj is not None else io.BytesIO()

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DataStream':
        return cls(io.BytesIO(data))

    @property
    def fileobj(self) -> BinaryIO:
        return self._file

    def tell(self) -> int:
        return self._file.tell()

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        return self._file.seek(offset, whence)

    def getvalue(self) -> bytes:
        """Return the full contents of an in-memory stream."""
        return self._file.getvalue()

    # ------------------------------------------------------------------
    # Raw and fixed width transfer
    # ------------------------------------------------------------------

    def read(self, size: int) -> bytes:
        """
        Read exactly `size` bytes.

        Raises:
            UnexpectedEndOfStreamError: if fewer bytes are available
        """
        offset = self._file.tell()
        data = self._file.read(size)
        if len(data) != size:
            raise UnexpectedEndOfStreamError(
                f"Expected {size} bytes at offset {offset}, got {len(data)}")
        return data

    def write(self, data: bytes) -> int:
        self._file.write(data)
        return len(data)

    def read8(self) -> int:
        return self.read(1)[0]

    def read16(self) -> int:
        return struct.unpack('<H', self.read(2))[0]

    def read32(self) -> int:
        return struct.unpack('<I', self.read(4))[0]

    def write8(self, value: int) -> int:
        return self.write(struct.pack('<B', value & 0xFF))

    def write16(self, value: int) -> int:
        return self.write(struct.pack('<H', value & 0xFFFF))

    def write32(self, value: int) -> int:
        return self.write(struct.pack('<I', value & 0xFFFFFFFF))

    def write_sized(self, data: bytes) -> int:
        """
        Write a block preceded by its u16 length.

        Returns:
            Bytes written, including the length prefix
        """
        return self.write16(len(data)) + self.write(data)

    # ------------------------------------------------------------------
    # Run-length encoded layers
    # ------------------------------------------------------------------

    def read_rle(self, size: int) -> np.ndarray:
        """
        Read one RLE layer: u16 encoded length, then the encoded bytes.

        Returns:
            Flat uint8 array of `size` tiles
        """
        length = self.read16()
        return decode_rle(self.read(length), size)

    def write_rle(self, tiles: Union[bytes, np.ndarray]) -> int:
        """
        Write one RLE layer.

        Returns:
            Bytes written, including the u16 length prefix
        """
        return self.write_sized(encode_rle(tiles))

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def read_string(self, length: int, password: bool = False) -> str:
        """
        Read a string stored in a field of `length` bytes.

        The string ends at the first NUL inside the field. Password strings
        have every byte before the terminator XOR'd with 0x99.
        """
        raw = self.read(length)
        end = raw.find(b'\x00')
        if end != -1:
            raw = raw[:end]
        if password:
            raw = _xor_bytes(raw, PASSWORD_XOR_KEY)
        return raw.decode(STRING_ENCODING)

    def write_string(self, text: str, password: bool = False) -> int:
        """
        Write a string followed by a NUL terminator.

        Raises:
            InvalidStringError: if the text has characters outside latin-1

        Returns:
            Bytes written, including the terminator
        """
        try:
            raw = text.encode(STRING_ENCODING)
        except UnicodeEncodeError as e:
            raise InvalidStringError(
                f"Cannot store {text!r}: character {text[e.start]!r} is not single-byte") from None
        if password:
            raw = _xor_bytes(raw, PASSWORD_XOR_KEY)
        return self.write(raw + b'\x00')
