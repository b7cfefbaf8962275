"""
polycodec - Google Encoded Polyline codec for N-dimensional coordinates.

The default codec encodes two-dimensional coordinates scaled by 1e5. Create a
custom Codec for other dimensionalities and scales.
"""
from polycodec.errors import (
    DimensionalMismatch,
    Empty,
    InvalidByte,
    Overflow,
    PolylineError,
    UnterminatedSequence,
)
from polycodec.models import Codec, DEFAULT_CODEC
from polycodec.services.varint import (
    INT_WIDTH,
    MAX_VARINT_LEN,
    decode_int,
    decode_uint,
    encode_int,
    encode_uint,
)
from polycodec.services.coordinate import decode_coord, encode_coord
from polycodec.services.polyline import (
    decode_coords,
    decode_flat_coords,
    decode_polyline,
    encode_coords,
    encode_flat_coords,
    encode_polyline,
)
from polycodec.services.arrays import decode_array, encode_array
from polycodec.services.simplify import encode_points

__version__ = "0.1.0"

# Short aliases for the sequence codec
encode = encode_coords
decode = decode_coords

__all__ = [
    "Codec",
    "DEFAULT_CODEC",
    "INT_WIDTH",
    "MAX_VARINT_LEN",
    "PolylineError",
    "Empty",
    "InvalidByte",
    "UnterminatedSequence",
    "Overflow",
    "DimensionalMismatch",
    "encode",
    "decode",
    "encode_coords",
    "decode_coords",
    "encode_coord",
    "decode_coord",
    "encode_uint",
    "decode_uint",
    "encode_int",
    "decode_int",
    "encode_flat_coords",
    "decode_flat_coords",
    "encode_polyline",
    "decode_polyline",
    "encode_array",
    "decode_array",
    "encode_points",
]
