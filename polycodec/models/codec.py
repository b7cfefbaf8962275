"""Codec configuration value object."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Codec:
    """
    Parameters shared by every encode and decode call.

    Attributes:
        dimension: Number of axes per coordinate (2 for lat/lng)
        scale: Fixed-point multiplier (1e5 gives five decimal digits)
    """

    dimension: int = 2
    scale: float = 1e5

    def __post_init__(self):
        if isinstance(self.dimension, bool) or not isinstance(self.dimension, int):
            raise ValueError(f"dimension must be an integer, got {self.dimension!r}")
        if self.dimension < 1:
            raise ValueError(f"dimension must be positive, got {self.dimension}")
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ValueError(f"scale must be a positive finite number, got {self.scale!r}")


DEFAULT_CODEC = Codec(dimension=2, scale=1e5)
