"""
numpy variants of the sequence codec.

Scaling, rounding and delta computation are vectorised; only the varint
byte packing runs per value.
"""

from typing import Optional

import numpy as np

from polycodec.errors import DimensionalMismatch, Overflow
from polycodec.models.codec import Codec, DEFAULT_CODEC
from polycodec.services.polyline import decode_fixed_coords
from polycodec.services.varint import (
    INT_MIN,
    INT_WIDTH,
    BytesLike,
    as_buffer,
    commit,
    encode_int,
)


def _as_points(array, codec: Codec) -> np.ndarray:
    points = np.asarray(array, dtype=np.float64)
    if points.size == 0:
        return points.reshape(0, codec.dimension)
    if points.ndim != 2 or points.shape[1] != codec.dimension:
        raise DimensionalMismatch(
            f"expected an (n, {codec.dimension}) array, got shape {points.shape}"
        )
    if not np.all(np.isfinite(points)):
        raise ValueError("cannot encode non-finite values")
    return points


def scale_array(array, codec: Codec = DEFAULT_CODEC) -> np.ndarray:
    """
    Convert an (n, dimension) array to fixed-point integers.

    Halves round away from zero, matching the scalar codec. Values outside
    the signed 64-bit range raise Overflow.
    """
    scaled = _as_points(array, codec) * codec.scale
    rounded = np.where(scaled < 0, -np.floor(-scaled + 0.5), np.floor(scaled + 0.5))
    # 2**63 is exact in float64, INT_MAX is not
    if rounded.size and (rounded.min() < INT_MIN or rounded.max() >= -float(INT_MIN)):
        raise Overflow(f"scaled values exceed {INT_WIDTH}-bit signed range")
    return rounded.astype(np.int64)


def encode_array(
    array,
    codec: Codec = DEFAULT_CODEC,
    buf: Optional[bytearray] = None,
) -> bytearray:
    """
    Append an encoded (n, dimension) array to buf.

    Produces exactly the same bytes as encode_coords on the equivalent lists,
    and leaves buf untouched on error.
    """
    ints = scale_array(array, codec).astype(object)
    # Python ints, so deltas beyond int64 reach encode_int's range check
    deltas = np.diff(ints, axis=0, prepend=np.zeros((1, codec.dimension), dtype=object))
    encoded = bytearray()
    for value in deltas.ravel().tolist():
        encode_int(value, encoded)
    return commit(buf, encoded)


def decode_array(data: BytesLike, codec: Codec = DEFAULT_CODEC) -> np.ndarray:
    """
    Decode a buffer into an (n, dimension) float64 array.

    Raises the same errors as decode_coords.
    """
    coords = decode_fixed_coords(as_buffer(data), codec)
    if not coords:
        return np.empty((0, codec.dimension), dtype=np.float64)
    return np.array(coords, dtype=np.float64) / codec.scale
