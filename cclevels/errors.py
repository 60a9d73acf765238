"""
Exceptions raised by the levelset codec.

Every failure derives from LevelsetFormatError (itself a ValueError), so
callers that only care whether a file is usable can catch the base class.
None of these are recovered from internally. After any of them the object
being read is partially populated and should be discarded.
"""


class LevelsetFormatError(ValueError):
    """Base class for malformed or unwritable levelset data."""


class UnexpectedEndOfStreamError(LevelsetFormatError):
    """The stream ended before a fixed-size read could be satisfied."""


class RLEError(LevelsetFormatError):
    """Run-length encoded tile data decodes past the end of a layer."""


class InvalidHeaderError(LevelsetFormatError):
    """The container magic is not one of the recognized values."""


class InvalidMapMarkerError(LevelsetFormatError):
    """The map data marker preceding the tile layers is not 1."""


class SizeMismatchError(LevelsetFormatError):
    """The declared field section size disagrees with the level size."""


class InvalidFieldSizeError(LevelsetFormatError):
    """A list field's payload is not a multiple of its element size."""


class UnrecognizedFieldError(LevelsetFormatError):
    """A field tag is not one of the known field types."""


class TruncatedRecordError(LevelsetFormatError):
    """A field claims more bytes than remain in the field section."""


class ChecksumMismatchError(LevelsetFormatError):
    """Bytes left over (or missing) after parsing a stored level's fields."""


class CorruptClipboardDataError(LevelsetFormatError):
    """Bytes left over (or missing) after parsing a clipboard level's fields."""


class FieldTooLargeError(LevelsetFormatError):
    """A field payload does not fit its one-byte length on write."""


class InvalidStringError(LevelsetFormatError):
    """A string contains characters that have no single-byte encoding."""


class ValueOutOfRangeError(LevelsetFormatError):
    """A number does not fit the width of its field on write."""
