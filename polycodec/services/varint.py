"""
Variable-length integer encoding used by Google's Encoded Polyline format.

Each byte carries 5 data bits, least significant group first. Continuation
bytes are offset by 95 and land in [95, 127); the terminal byte is offset by
63 and lands in [63, 95). Every byte is therefore printable ASCII.

Signed integers are zig-zag mapped so that small magnitudes of either sign
produce short encodings.
"""

from typing import Optional, Tuple, Union

from polycodec.errors import Empty, InvalidByte, Overflow, UnterminatedSequence

BytesLike = Union[bytes, bytearray, memoryview, str]

# Fixed integer width, independent of the host word size
INT_WIDTH = 64
UINT_MAX = (1 << INT_WIDTH) - 1
INT_MIN = -(1 << (INT_WIDTH - 1))
INT_MAX = (1 << (INT_WIDTH - 1)) - 1

# Number of full 5-bit groups in a value, and the bits left for the last byte
_FULL_GROUPS = INT_WIDTH // 5
_LAST_BYTE_MAX = (1 << (INT_WIDTH - 5 * _FULL_GROUPS)) - 1

# Longest valid encoding in bytes
MAX_VARINT_LEN = _FULL_GROUPS + 1


def as_buffer(data: BytesLike) -> bytes:
    """Normalize decoder input to bytes. Strings are taken as their UTF-8 bytes."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode_uint(u: int, buf: Optional[bytearray] = None) -> bytearray:
    """
    Append the encoding of an unsigned integer to buf.

    Args:
        u: Integer in [0, 2**64)
        buf: Optional buffer to extend in place

    Returns:
        The extended buffer (a new bytearray when buf is None)
    """
    if u < 0:
        raise ValueError(f"cannot encode negative value {u} as unsigned")
    if u > UINT_MAX:
        raise Overflow(f"value {u} exceeds {INT_WIDTH}-bit unsigned range")
    if buf is None:
        buf = bytearray()
    while u >= 32:
        buf.append((u & 0x1F) + 95)
        u >>= 5
    buf.append(u + 63)
    return buf


def encode_int(i: int, buf: Optional[bytearray] = None) -> bytearray:
    """Zig-zag map a signed integer and append its encoding to buf."""
    if i < INT_MIN or i > INT_MAX:
        raise Overflow(f"value {i} exceeds {INT_WIDTH}-bit signed range")
    u = ~(i << 1) if i < 0 else i << 1
    return encode_uint(u, buf)


def decode_uint_at(buf: bytes, pos: int = 0) -> Tuple[int, int]:
    """
    Decode one unsigned integer starting at buf[pos].

    Returns:
        (value, position of the first unconsumed byte)
    """
    end = len(buf)
    if pos >= end:
        raise Empty(offset=pos)

    u = 0
    shift = 0
    limit = min(pos + _FULL_GROUPS, end)
    for i in range(pos, limit):
        b = buf[i]
        if 95 <= b < 127:
            u += (b - 95) << shift
            shift += 5
        elif 63 <= b < 95:
            u += (b - 63) << shift
            return u, i + 1
        else:
            raise InvalidByte(f"invalid byte {b}", offset=i)

    if limit == end:
        raise UnterminatedSequence(offset=end)

    # Only the low bits of the final group still fit in the integer width
    b = buf[limit]
    if not 63 <= b < 127:
        raise InvalidByte(f"invalid byte {b}", offset=limit)
    if b > 63 + _LAST_BYTE_MAX:
        raise Overflow(f"varint exceeds {INT_WIDTH} bits", offset=limit)
    u += (b - 63) << shift
    return u, limit + 1


def decode_int_at(buf: bytes, pos: int = 0) -> Tuple[int, int]:
    """Decode one zig-zag signed integer starting at buf[pos]."""
    u, pos = decode_uint_at(buf, pos)
    if u & 1 == 0:
        return u >> 1, pos
    # UINT_MAX maps to INT_MIN, which has no positive counterpart
    return -((u + 1) >> 1), pos


def decode_uint(data: BytesLike) -> Tuple[int, bytes]:
    """
    Decode a single unsigned integer from the front of data.

    Returns:
        (value, remaining unconsumed bytes)

    Raises:
        Empty, InvalidByte, UnterminatedSequence, Overflow
    """
    buf = as_buffer(data)
    u, pos = decode_uint_at(buf)
    return u, buf[pos:]


def decode_int(data: BytesLike) -> Tuple[int, bytes]:
    """Decode a single signed integer from the front of data."""
    buf = as_buffer(data)
    i, pos = decode_int_at(buf)
    return i, buf[pos:]


def commit(buf: Optional[bytearray], encoded: bytearray) -> bytearray:
    """Append a fully encoded run to buf, or return it when there is no buf."""
    if buf is None:
        return encoded
    buf.extend(encoded)
    return buf
