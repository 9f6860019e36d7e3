from collections import deque
from typing import Optional

import pytest
from structlog.testing import capture_logs

from borsh_codec import (
    CodecSettings,
    InvalidDiscriminantError,
    InvalidInputError,
    OutOfDataError,
    UnsupportedTypeError,
    codec_for,
    decode_strict,
    encode,
)
from borsh_codec.types import Array, Box, Err, Ok, Result, i8, u8, u16, u32, u64


def test_option():
    assert encode(None, Optional[u32]).hex() == '00'
    assert encode(5, u32 | None).hex() == '0105000000'
    assert decode_strict(bytes.fromhex('00'), Optional[u32]) is None
    assert decode_strict(bytes.fromhex('0105000000'), Optional[u32]) == 5


def test_option_invalid_discriminant():
    with pytest.raises(InvalidDiscriminantError) as exc_info:
        decode_strict(bytes.fromhex('0205000000'), Optional[u32])
    assert exc_info.value.value == 2


def test_result():
    assert encode(Ok(7), Result[u8, str]).hex() == '0107'
    assert encode(Err('no'), Result[u8, str]).hex() == '00020000006e6f'
    assert decode_strict(bytes.fromhex('0107'), Result[u8, str]) == Ok(7)
    assert decode_strict(bytes.fromhex('00020000006e6f'), Result[u8, str]) == Err('no')
    with pytest.raises(InvalidDiscriminantError):
        decode_strict(bytes.fromhex('0207'), Result[u8, str])
    with pytest.raises(InvalidInputError):
        encode(7, Result[u8, str])


def test_only_option_and_result_unions():
    with pytest.raises(UnsupportedTypeError):
        codec_for(u8 | str)


@pytest.mark.parametrize('type_, value', [
    (list[u16], [1, 2]),
    (tuple[u16, ...], (1, 2)),
    (deque[u16], deque([1, 2])),
])
def test_sequence(type_, value):
    data = encode(value, type_)
    assert data.hex() == '0200000001000200'
    decoded = decode_strict(data, type_)
    assert type(decoded) is type(value)
    assert decoded == value


def test_byte_sequence_bulk_path():
    assert encode([1, 2, 3], list[u8]).hex() == '03000000010203'
    assert decode_strict(bytes.fromhex('03000000010203'), list[u8]) == [1, 2, 3]
    with pytest.raises(InvalidInputError):
        encode([1, 256], list[u8])
    with pytest.raises(InvalidInputError):
        encode([True], list[u8])


def test_array():
    assert encode(b'abc', Array[u8, 3]).hex() == '616263'
    assert encode((1, 2), Array[u16, 2]).hex() == '01000200'
    assert decode_strict(bytes.fromhex('01000200'), Array[u16, 2]) == (1, 2)
    assert decode_strict(b'abc', Array[u8, 3]) == (0x61, 0x62, 0x63)
    with pytest.raises(InvalidInputError):
        encode((1, 2, 3), Array[u16, 2])
    with pytest.raises(OutOfDataError):
        decode_strict(bytes.fromhex('0100'), Array[u16, 2])


def test_nested_arrays():
    value = ((1, 2), (3, 4))
    data = encode(value, Array[Array[u8, 2], 2])
    assert data.hex() == '01020304'
    assert decode_strict(data, Array[Array[u8, 2], 2]) == value


def test_tuple():
    assert encode((1, 'a', True), tuple[u8, str, bool]).hex() == '010100000061' + '01'
    assert decode_strict(bytes.fromhex('01010000006101'), tuple[u8, str, bool]) == (1, 'a', True)
    with pytest.raises(InvalidInputError):
        encode((1, 'a'), tuple[u8, str, bool])


def test_box_is_transparent():
    assert encode(5, Box[u32]) == encode(5, u32)


def test_set_is_sorted():
    data = encode({3, 1, 2}, set[u16])
    assert data.hex() == '03000000010002000300'
    assert encode({2, 3, 1}, set[u16]) == data
    assert decode_strict(data, set[u16]) == {1, 2, 3}
    decoded = decode_strict(data, frozenset[u16])
    assert isinstance(decoded, frozenset)


def test_set_signed_order():
    # ordered by value, not by encoded bytes
    assert encode({1, -1}, set[i8]).hex() == '02000000ff01'


def test_set_of_options_order():
    assert encode({2, None, 1}, set[Optional[u8]]).hex() == '030000000001010102'


def test_set_of_strings_order():
    data = encode({'b', 'ab', 'a'}, set[str])
    assert data == bytes.fromhex('03000000') + encode('a') + encode('ab') + encode('b')


def test_map_is_sorted_by_key():
    expected = '02000000' + '03000000626172' + '01' + '03000000666f6f' + '00'
    assert encode({'foo': 0, 'bar': 1}, dict[str, u8]).hex() == expected
    assert encode({'bar': 1, 'foo': 0}, dict[str, u8]).hex() == expected
    assert decode_strict(bytes.fromhex(expected), dict[str, u8]) == {'foo': 0, 'bar': 1}


def test_map_of_tuple_keys():
    value = {(2, 'a'): True, (1, 'b'): False}
    data = encode(value, dict[tuple[u8, str], bool])
    assert data[4] == 1
    assert decode_strict(data, dict[tuple[u8, str], bool]) == value


def test_huge_length_fails_fast():
    data = bytes.fromhex('ffffffff') + bytes(8)
    with pytest.raises(OutOfDataError, match='elements need at least'):
        decode_strict(data, list[u64])
    with pytest.raises(OutOfDataError):
        decode_strict(data, list[u8])
    with pytest.raises(OutOfDataError):
        decode_strict(data, set[u64])
    with pytest.raises(OutOfDataError):
        decode_strict(data, dict[u32, u32])


def test_length_larger_than_input():
    # claims 3 elements of 8 bytes, only 16 bytes follow
    data = bytes.fromhex('03000000') + bytes(16)
    with pytest.raises(OutOfDataError):
        decode_strict(data, list[u64])


def test_allocation_is_clamped():
    settings = CodecSettings(alloc_ceiling_bytes=8)
    value = list(range(10))
    data = encode(value, list[u16])
    with capture_logs() as logs:
        assert decode_strict(data, list[u16], settings=settings) == value
    assert {'event': 'allocation hint clamped', 'length': 10, 'capacity': 4, 'log_level': 'debug'} in logs


def test_zero_sized_elements_are_refused():
    with pytest.raises(UnsupportedTypeError):
        codec_for(list[None])
    with pytest.raises(UnsupportedTypeError):
        codec_for(dict[tuple[()], tuple[()]])
    with pytest.raises(UnsupportedTypeError):
        codec_for(list[Array[u8, 0]])


def test_sequence_needs_item_type():
    with pytest.raises(UnsupportedTypeError):
        codec_for(list)
