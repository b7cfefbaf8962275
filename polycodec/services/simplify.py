"""
Simplify-then-encode convenience.

The simplification algorithm is supplied by the caller; the codec only
requires that it maps an ordered list of 2-D points to a reduced ordered
list of 2-D points.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from polycodec.errors import DimensionalMismatch
from polycodec.models.codec import Codec, DEFAULT_CODEC
from polycodec.services.polyline import encode_coords

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Simplifier = Callable[[List[Point], float, bool], Sequence[Sequence[float]]]


def encode_points(
    points: Sequence[Sequence[float]],
    tolerance: float,
    high_quality: bool,
    simplify: Simplifier,
    codec: Codec = DEFAULT_CODEC,
    buf: Optional[bytearray] = None,
) -> bytearray:
    """
    Simplify a 2-D point sequence and encode the result.

    Args:
        points: Ordered (x, y) points
        tolerance: Simplification tolerance, higher is more lossy
        high_quality: Passed through to the simplifier (skip its fast pre-pass)
        simplify: Callable implementing simplify(points, tolerance, high_quality)
        codec: Codec configuration, must be 2-dimensional
        buf: Optional buffer to extend in place

    Returns:
        The extended buffer
    """
    if codec.dimension != 2:
        raise DimensionalMismatch(
            f"simplification needs a 2-dimensional codec, got {codec.dimension}"
        )
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    source = []
    for point in points:
        if len(point) != 2:
            raise DimensionalMismatch(f"point has {len(point)} axes, expected 2")
        source.append((point[0], point[1]))
    simplified = simplify(source, tolerance, high_quality)
    logger.debug(
        "Simplified %d points to %d (tolerance=%s, high_quality=%s)",
        len(source), len(simplified), tolerance, high_quality,
    )
    return encode_coords(simplified, codec, buf)
