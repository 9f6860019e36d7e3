import pytest

from borsh_codec import CodecSettings, MaxBytesExceededError, encode, encode_with_schema
from borsh_codec.types import u64


def test_encode_within_bound():
    assert encode([1, 2], list[u64], max_bytes=20) == encode([1, 2], list[u64])


def test_encode_over_bound():
    with pytest.raises(MaxBytesExceededError):
        encode([1, 2], list[u64], max_bytes=19)


def test_default_bound_from_settings():
    settings = CodecSettings(default_encode_max_bytes=4)
    assert encode('', settings=settings) == b'\x00\x00\x00\x00'
    with pytest.raises(MaxBytesExceededError):
        encode('a', settings=settings)
    # explicit bound wins over the default one
    assert encode('a', settings=settings, max_bytes=5) == b'\x01\x00\x00\x00a'


def test_encode_with_schema_bound():
    with pytest.raises(MaxBytesExceededError):
        encode_with_schema('a', max_bytes=8)
