import pytest

from borsh_codec import (
    UnsupportedTypeError,
    borsh_enum,
    borsh_struct,
    codec_for,
    decode_strict,
    encode,
    infer_type,
    schema_of,
)
from borsh_codec.types import u8, u64


@borsh_struct
class Transfer:
    amount: u64
    memo: str


@borsh_enum
class Message:
    class Ping:
        pass

    class Send:
        transfer: Transfer


def test_infer_type():
    assert infer_type(Transfer(1, '')) is Transfer
    assert infer_type(Message.Ping()) is Message
    assert infer_type('a') is str
    assert infer_type(b'a') is bytes
    assert infer_type(None) is type(None)


@pytest.mark.parametrize('value', [1, [1], {1: 2}, (1, 2), {1}])
def test_infer_type_needs_explicit_type(value):
    with pytest.raises(UnsupportedTypeError):
        infer_type(value)


def test_variant_encodes_as_union():
    value = Message.Send(Transfer(5, 'x'))
    assert encode(value) == b'\x01' + encode(Transfer(5, 'x'))
    assert decode_strict(encode(value), Message) == value


def test_codec_reuse():
    codec = codec_for(list[Transfer])
    values = [[], [Transfer(1, 'a')], [Transfer(2, 'b'), Transfer(3, 'c')]]
    for value in values:
        data = codec.to_bytes(value)
        assert data == encode(value, list[Transfer])
        assert codec.from_bytes(data) == value


def test_codec_min_size():
    assert codec_for(Transfer).min_size() == 12
    assert codec_for(Message).min_size() == 1
    assert codec_for(tuple[u8, u64]).min_size() == 9


def test_equal_values_encode_equally():
    first = {'b': [Transfer(2, 'y')], 'a': [Transfer(1, 'x')]}
    second = {'a': [Transfer(1, 'x')], 'b': [Transfer(2, 'y')]}
    assert encode(first, dict[str, list[Transfer]]) == encode(second, dict[str, list[Transfer]])


def test_operations_write_nothing_to_stdout(capsys):
    data = encode(Transfer(5, 'rent'))
    assert decode_strict(data, Transfer) == Transfer(5, 'rent')
    schema_of(list[u8])
    assert capsys.readouterr().out == ''
