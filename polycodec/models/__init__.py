"""Value objects for polycodec."""
from polycodec.models.codec import Codec, DEFAULT_CODEC

__all__ = ["Codec", "DEFAULT_CODEC"]
