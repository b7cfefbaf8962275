"""Errors raised while encoding or decoding polylines."""
from typing import Optional


class PolylineError(ValueError):
    """Base class for every codec error."""

    default_message = "polyline error"

    def __init__(self, message: Optional[str] = None, offset: Optional[int] = None):
        self.offset = offset
        if message is None:
            message = self.default_message
        if offset is not None:
            message = f"{message} at byte {offset}"
        super().__init__(message)


class Empty(PolylineError):
    """Decode attempted on an empty buffer where a value was expected."""

    default_message = "empty"


class InvalidByte(PolylineError):
    """A byte outside [63, 127) was found inside a varint."""

    default_message = "invalid byte"


class UnterminatedSequence(PolylineError):
    """The buffer ended before a terminal byte."""

    default_message = "unterminated sequence"


class Overflow(PolylineError):
    """The value does not fit in the codec's integer width."""

    default_message = "overflow"


class DimensionalMismatch(PolylineError):
    """A coordinate count or length disagrees with the codec dimension."""

    default_message = "dimensional mismatch"
