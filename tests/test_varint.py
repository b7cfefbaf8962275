"""Tests for the varint layer."""
import pytest

from polycodec import (
    Empty,
    InvalidByte,
    Overflow,
    UnterminatedSequence,
    decode_int,
    decode_uint,
    encode_int,
    encode_uint,
)
from polycodec.services.varint import INT_MAX, INT_MIN, MAX_VARINT_LEN, UINT_MAX


@pytest.mark.parametrize("u, encoded", [
    (0, b"?"),
    (1, b"@"),
    (31, b"^"),
    (32, b"_@"),
    (UINT_MAX, b"~" * 12 + b"N"),
])
def test_encode_uint(u, encoded):
    assert encode_uint(u) == encoded


@pytest.mark.parametrize("i, encoded", [
    (0, b"?"),
    (-1, b"@"),
    (1, b"A"),
    (-2, b"B"),
    (16, b"_@"),
    (-17, b"`@"),
    (INT_MIN, b"~" * 12 + b"N"),
])
def test_encode_int(i, encoded):
    assert encode_int(i) == encoded


@pytest.mark.parametrize("u", [0, 1, 31, 32, 1023, 1024, 123456789, 2 ** 63, UINT_MAX])
def test_uint_round_trip(u):
    assert decode_uint(encode_uint(u)) == (u, b"")


@pytest.mark.parametrize("i", [0, 1, -1, 15, -16, 17, -17, 3850000, -12020000, INT_MAX, INT_MIN])
def test_int_round_trip(i):
    assert decode_int(encode_int(i)) == (i, b"")


def test_encode_appends_to_buffer():
    buf = bytearray(b"xyz")
    out = encode_uint(32, buf)
    assert out is buf
    assert buf == b"xyz_@"


def test_decode_returns_remaining_bytes():
    assert decode_uint(b"_@A?") == (32, b"A?")
    assert decode_int("@A") == (-1, b"A")


def test_max_width_encoding_length():
    assert len(encode_uint(UINT_MAX)) == MAX_VARINT_LEN


def test_uint_max_decodes_to_int_min():
    assert decode_int(b"~" * 12 + b"N") == (INT_MIN, b"")


def test_decode_empty():
    with pytest.raises(Empty):
        decode_uint(b"")


@pytest.mark.parametrize("buf", [bytes([200]), bytes([62]), b"_" + bytes([127]), "é"])
def test_decode_invalid_byte(buf):
    with pytest.raises(InvalidByte):
        decode_uint(buf)


@pytest.mark.parametrize("buf", [bytes([100]), b"~" * 12])
def test_decode_unterminated(buf):
    with pytest.raises(UnterminatedSequence):
        decode_uint(buf)


@pytest.mark.parametrize("last", [b"O", b"^", b"_", b"~"])
def test_decode_overflow(last):
    with pytest.raises(Overflow):
        decode_uint(b"_" * 12 + last)


def test_decode_invalid_final_byte_is_not_overflow():
    with pytest.raises(InvalidByte):
        decode_uint(b"_" * 12 + bytes([10]))


def test_decode_largest_final_byte():
    assert decode_uint(b"_" * 12 + b"N") == (15 << 60, b"")


def test_error_offset():
    with pytest.raises(InvalidByte) as excinfo:
        decode_uint(b"__" + bytes([200]))
    assert excinfo.value.offset == 2


def test_encode_out_of_range():
    with pytest.raises(ValueError):
        encode_uint(-1)
    with pytest.raises(Overflow):
        encode_uint(UINT_MAX + 1)
    with pytest.raises(Overflow):
        encode_int(INT_MAX + 1)
    with pytest.raises(Overflow):
        encode_int(INT_MIN - 1)
