"""
Google Polyline encoding/decoding of coordinate sequences.

Each coordinate is encoded as the difference from the previous one, so a
track of nearby points compresses to a few bytes per point. The output has
no length prefix or separators: decoding runs until the buffer is exhausted.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from polycodec.errors import DimensionalMismatch, PolylineError
from polycodec.models.codec import Codec, DEFAULT_CODEC
from polycodec.services.coordinate import decode_coord_ints, scale_coord
from polycodec.services.varint import BytesLike, as_buffer, commit, encode_int

logger = logging.getLogger(__name__)


def encode_coords(
    coords: Sequence[Sequence[float]],
    codec: Codec = DEFAULT_CODEC,
    buf: Optional[bytearray] = None,
) -> bytearray:
    """
    Append an encoded coordinate sequence to buf.

    buf is only extended once the whole sequence has encoded; on error it
    is left untouched.

    Args:
        coords: Ordered coordinates, each with codec.dimension axes
        codec: Codec configuration
        buf: Optional buffer to extend in place

    Returns:
        The extended buffer
    """
    encoded = bytearray()
    last = [0] * codec.dimension
    for coord in coords:
        values = scale_coord(coord, codec)
        for axis, value in enumerate(values):
            encode_int(value - last[axis], encoded)
        last = values
    return commit(buf, encoded)


def decode_fixed_coords(buf: bytes, codec: Codec) -> List[List[int]]:
    """Decode a whole buffer into absolute fixed-point coordinates."""
    coords = []
    last = [0] * codec.dimension
    pos = 0
    try:
        while pos < len(buf):
            deltas, pos = decode_coord_ints(buf, pos, codec)
            last = [prev + delta for prev, delta in zip(last, deltas)]
            coords.append(last)
    except PolylineError as e:
        logger.debug(
            "Polyline decode failed after %d coordinates: %s", len(coords), e
        )
        raise
    return coords


def decode_coords(
    data: BytesLike, codec: Codec = DEFAULT_CODEC
) -> Tuple[List[List[float]], bytes]:
    """
    Decode an encoded coordinate sequence.

    An empty buffer decodes to an empty list. A buffer that ends partway
    through a coordinate is invalid; no partial result is returned.

    Returns:
        (coordinates, remaining bytes), where remaining is always empty

    Raises:
        Empty, InvalidByte, UnterminatedSequence, Overflow
    """
    buf = as_buffer(data)
    coords = [
        [value / codec.scale for value in coord]
        for coord in decode_fixed_coords(buf, codec)
    ]
    return coords, b""


def encode_flat_coords(
    flat: Sequence[float],
    codec: Codec = DEFAULT_CODEC,
    buf: Optional[bytearray] = None,
) -> bytearray:
    """Encode a flat sequence of n * codec.dimension axis values."""
    if len(flat) % codec.dimension != 0:
        raise DimensionalMismatch(
            f"{len(flat)} values is not a multiple of dimension {codec.dimension}"
        )
    dim = codec.dimension
    coords = [flat[i:i + dim] for i in range(0, len(flat), dim)]
    return encode_coords(coords, codec, buf)


def decode_flat_coords(
    data: BytesLike, codec: Codec = DEFAULT_CODEC
) -> Tuple[List[float], bytes]:
    """Decode an encoded sequence into a flat list of axis values."""
    coords, remaining = decode_coords(data, codec)
    return [value for coord in coords for value in coord], remaining


def _check_lnglat(codec: Codec) -> None:
    if codec.dimension != 2:
        raise DimensionalMismatch(
            f"lng/lat ordering needs a 2-dimensional codec, got {codec.dimension}"
        )


def encode_polyline(
    coordinates: Sequence[Sequence[float]],
    codec: Codec = DEFAULT_CODEC,
    lnglat: bool = False,
) -> str:
    """
    Encode coordinates into a Google Polyline string.

    Args:
        coordinates: Sequence of coordinates, (lat, lng) for the default codec
        codec: Codec configuration
        lnglat: If True, input pairs are (lng, lat) and are swapped before encoding

    Returns:
        Polyline encoded string
    """
    if lnglat:
        _check_lnglat(codec)
        coordinates = [(lat, lng) for lng, lat in coordinates]
    return encode_coords(coordinates, codec).decode("ascii")


def decode_polyline(
    encoded: BytesLike,
    codec: Codec = DEFAULT_CODEC,
    lnglat: bool = False,
) -> List[Tuple[float, ...]]:
    """
    Decode a Google Polyline encoded string into a list of coordinate tuples.

    Args:
        encoded: Polyline encoded string
        codec: Codec configuration
        lnglat: If True, return (lng, lat) pairs instead of the wire's (lat, lng)

    Returns:
        List of coordinate tuples
    """
    if lnglat:
        _check_lnglat(codec)
    coords, _ = decode_coords(encoded, codec)
    if lnglat:
        # Polyline encodes lat first, but the caller wants lng first
        return [(lng, lat) for lat, lng in coords]
    return [tuple(coord) for coord in coords]
