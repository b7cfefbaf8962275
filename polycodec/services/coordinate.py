"""Single coordinate encoding: one scaled signed varint per axis."""

import math
from typing import List, Optional, Sequence, Tuple

from polycodec.errors import DimensionalMismatch
from polycodec.models.codec import Codec, DEFAULT_CODEC
from polycodec.services.varint import (
    BytesLike,
    as_buffer,
    commit,
    decode_int_at,
    encode_int,
)


def round_half_away(x: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    if not math.isfinite(x):
        raise ValueError(f"cannot encode non-finite value {x!r}")
    if x < 0:
        return -math.floor(-x + 0.5)
    return math.floor(x + 0.5)


def scale_coord(coord: Sequence[float], codec: Codec) -> List[int]:
    """Convert a real-valued coordinate to its fixed-point integers."""
    if len(coord) != codec.dimension:
        raise DimensionalMismatch(
            f"coordinate has {len(coord)} axes, codec expects {codec.dimension}"
        )
    return [round_half_away(codec.scale * x) for x in coord]


def encode_coord(
    coord: Sequence[float],
    codec: Codec = DEFAULT_CODEC,
    buf: Optional[bytearray] = None,
) -> bytearray:
    """
    Append one coordinate to buf, without delta coding.

    Args:
        coord: Sequence of codec.dimension real numbers
        codec: Codec configuration
        buf: Optional buffer to extend in place

    Returns:
        The extended buffer
    """
    encoded = bytearray()
    for value in scale_coord(coord, codec):
        encode_int(value, encoded)
    return commit(buf, encoded)


def decode_coord_ints(buf: bytes, pos: int, codec: Codec) -> Tuple[List[int], int]:
    """Decode codec.dimension signed integers starting at buf[pos]."""
    values = []
    for _ in range(codec.dimension):
        value, pos = decode_int_at(buf, pos)
        values.append(value)
    return values, pos


def decode_coord(
    data: BytesLike, codec: Codec = DEFAULT_CODEC
) -> Tuple[List[float], bytes]:
    """
    Decode one coordinate from the front of data.

    Returns:
        (coordinate, remaining unconsumed bytes)
    """
    buf = as_buffer(data)
    values, pos = decode_coord_ints(buf, 0, codec)
    return [value / codec.scale for value in values], buf[pos:]
