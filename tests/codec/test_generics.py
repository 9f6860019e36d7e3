from __future__ import annotations

from typing import Generic, Optional, TypeVar

import pytest

from borsh_codec import UnsupportedTypeError, borsh_enum, borsh_struct, codec_for, decode_strict, encode, skip
from borsh_codec.types import u8, u16, u64

K = TypeVar('K')
V = TypeVar('V')
T = TypeVar('T')


@borsh_struct
class Entry(Generic[K, V]):
    key: K
    value: V


@borsh_struct
class Tagged(Generic[T]):
    tag: u8
    marker: Optional[T] = skip(default=None)


@borsh_struct
class Tree(Generic[T]):
    value: T
    children: list[Tree[T]]


@borsh_enum
class Maybe(Generic[T]):
    class Nothing:
        pass

    class Just(Generic[T]):
        value: T


def test_generic_record():
    data = encode(Entry(1, 'a'), Entry[u16, str])
    assert data.hex() == '0100' + '0100000061'
    assert decode_strict(data, Entry[u16, str]) == Entry(1, 'a')


def test_same_generic_with_other_arguments():
    assert encode(Entry(1, 2), Entry[u8, u64]).hex() == '01' + '0200000000000000'
    assert encode(Entry(1, 2), Entry[u64, u8]).hex() == '0100000000000000' + '02'


def test_generic_type_must_be_explicit():
    with pytest.raises(UnsupportedTypeError):
        encode(Entry(1, 2))


def test_unbound_type_parameter():
    with pytest.raises(UnsupportedTypeError):
        codec_for(Entry)
    with pytest.raises(UnsupportedTypeError):
        codec_for(list[T])


def test_type_arguments_of_builtin_containers():
    with pytest.raises(UnsupportedTypeError):
        codec_for(dict[u8])


def test_skipped_field_imposes_nothing():
    assert encode(Tagged(3), Tagged[Entry]) == b'\x03'
    assert decode_strict(b'\x03', Tagged[Entry]) == Tagged(3)


def test_recursive_generic():
    tree = Tree(1, [Tree(2, [])])
    data = encode(tree, Tree[u8])
    assert data.hex() == '01' + '01000000' + '02' + '00000000'
    assert decode_strict(data, Tree[u8]) == tree


def test_generic_union():
    assert encode(Maybe.Nothing(), Maybe[u16]) == b'\x00'
    assert encode(Maybe.Just(5), Maybe[u16]).hex() == '01' + '0500'
    assert decode_strict(bytes.fromhex('010500'), Maybe[u16]) == Maybe.Just(5)
