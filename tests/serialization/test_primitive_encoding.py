import math
import struct

import pytest

from borsh_codec import (
    BadDataError,
    Deserializer,
    InvalidDiscriminantError,
    InvalidInputError,
    OutOfDataError,
    TrailingDataError,
    UnsupportedTypeError,
    decode_partial,
    decode_strict,
    encode,
)
from borsh_codec.types import f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128


@pytest.mark.parametrize('type_, value, expected', [
    (u8, 0, '00'),
    (u8, 255, 'ff'),
    (u16, 0x0102, '0201'),
    (u32, 1, '01000000'),
    (u64, 2**64 - 1, 'ff' * 8),
    (u128, 1, '01' + '00' * 15),
    (i8, -1, 'ff'),
    (i16, -1234, '2efb'),
    (i32, -2, 'feffffff'),
    (i64, -(2**63), '00' * 7 + '80'),
    (i128, -1, 'ff' * 16),
])
def test_int_little_endian(type_, value, expected):
    data = encode(value, type_)
    assert data.hex() == expected
    assert decode_strict(data, type_) == value


@pytest.mark.parametrize('type_, value', [
    (u8, 256),
    (u8, -1),
    (u64, 2**64),
    (i8, -129),
    (i8, 128),
    (i128, 2**127),
])
def test_int_out_of_range(type_, value):
    with pytest.raises(InvalidInputError):
        encode(value, type_)


def test_int_rejects_bool_and_float():
    with pytest.raises(InvalidInputError):
        encode(True, u8)
    with pytest.raises(InvalidInputError):
        encode(1.0, u32)


def test_plain_int_has_no_width():
    with pytest.raises(UnsupportedTypeError):
        encode(1, int)
    with pytest.raises(UnsupportedTypeError):
        encode(1)


def test_floats():
    assert encode(1.5, f32).hex() == '0000c03f'
    assert encode(-2.0, f64).hex() == '00000000000000c0'
    # plain float is a 64-bit float
    assert encode(-2.0, float) == encode(-2.0, f64)
    assert encode(-2.0) == encode(-2.0, f64)
    assert decode_strict(bytes.fromhex('0000c03f'), f32) == 1.5
    assert decode_strict(struct.pack('<d', math.inf), f64) == math.inf


@pytest.mark.parametrize('type_', [f32, f64])
def test_nan_is_refused_on_encode(type_):
    with pytest.raises(InvalidInputError, match='NaN'):
        encode(math.nan, type_)


@pytest.mark.parametrize('type_, data', [
    (f32, bytes([0, 0, 0xc0, 0x7f])),
    (f64, struct.pack('<d', math.nan)),
])
def test_nan_is_refused_on_decode(type_, data):
    with pytest.raises(BadDataError, match='NaN'):
        decode_strict(data, type_)


def test_f32_overflow():
    with pytest.raises(InvalidInputError):
        encode(1e40, f32)


def test_bool():
    assert encode(True) == b'\x01'
    assert encode(False) == b'\x00'
    assert decode_strict(b'\x01', bool) is True
    assert decode_strict(b'\x00', bool) is False


def test_bool_invalid_byte():
    with pytest.raises(InvalidDiscriminantError) as exc_info:
        decode_strict(b'\x00\x02', tuple[bool, bool])
    assert exc_info.value.value == 2
    assert exc_info.value.position == 1


def test_unit_takes_no_bytes():
    assert encode(None) == b''
    assert encode(None, tuple[()]) == b''
    assert decode_strict(b'', None) is None


def test_string():
    assert encode('hi').hex() == '020000006869'
    assert encode('π').hex() == '02000000cf80'
    assert decode_strict(bytes.fromhex('020000006869'), str) == 'hi'


def test_string_invalid_utf8():
    with pytest.raises(BadDataError):
        decode_strict(bytes([2, 0, 0, 0, 0xc3, 0x28]), str)


def test_string_truncated():
    with pytest.raises(OutOfDataError):
        decode_strict(b'\x05\x00\x00\x00ab', str)


def test_bytes():
    assert encode(b'abc').hex() == '03000000616263'
    assert decode_strict(bytes.fromhex('03000000616263'), bytes) == b'abc'
    value = decode_strict(bytes.fromhex('03000000616263'), bytearray)
    assert isinstance(value, bytearray)
    assert value == bytearray(b'abc')


def test_empty_input():
    with pytest.raises(OutOfDataError):
        decode_strict(b'', u32)
    with pytest.raises(OutOfDataError):
        decode_strict(b'\x01\x00', u32)


def test_trailing_data():
    with pytest.raises(TrailingDataError):
        decode_strict(b'\x01\x00', u8)


def test_decode_partial_advances_cursor():
    deserializer = Deserializer.build_bytes_deserializer(bytes.fromhex('0102000000') + b'rest')
    assert decode_partial(deserializer, u8) == 1
    assert decode_partial(deserializer, u32) == 2
    assert bytes(deserializer.read_all()) == b'rest'
