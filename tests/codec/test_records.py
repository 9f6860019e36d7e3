from __future__ import annotations

import enum
from typing import NamedTuple, Optional

import pytest

from borsh_codec import (
    CodecSettings,
    DepthLimitExceededError,
    Deserializer,
    InvalidDiscriminantError,
    InvalidInputError,
    OutOfDataError,
    TrailingDataError,
    UnsupportedTypeError,
    borsh_enum,
    borsh_struct,
    codec_for,
    decode_partial,
    decode_strict,
    encode,
    skip,
)
from borsh_codec.types import Array, u8, u16, u32, u64


@borsh_struct
class Account:
    x: u64
    s: str


@borsh_struct(frozen=True)
class Point:
    x: u16
    y: u16


@borsh_struct
class WithSkipped:
    a: u8
    counter: u32 = skip()
    cache: list[u8] = skip(default_factory=list)
    b: u8 = 0
    label: str = skip(default='none')


@borsh_struct(init='compute')
class WithHook:
    value: u8
    double: u16 = skip(init=False, default=0)

    def compute(self) -> None:
        self.double = self.value * 2


@borsh_struct(positional=True)
class Wrapper:
    inner: u32


@borsh_struct
class Unit:
    pass


class Pair(NamedTuple):
    left: u8
    right: str


@borsh_struct
class Node:
    value: u8
    children: list[Node]


@borsh_struct
class Chain:
    value: u8
    next: Optional[Chain]


@borsh_struct
class Digest:
    data: Array[u8, 4]
    nonce: u8


@borsh_struct
class Broken:
    missing: Undefined  # noqa: F821


class Color(enum.Enum):
    RED = 'r'
    GREEN = 'g'
    BLUE = 'b'


@borsh_enum
class Shape:
    class Empty:
        pass

    @borsh_struct(positional=True, frozen=True)
    class Circle:
        radius: u32

    class Rectangle:
        width: u16
        height: u16


@borsh_enum
class Expr:
    class Literal:
        value: u64

    class Add:
        left: Expr
        right: Expr


def test_record_example():
    data = encode(Account(x=1, s='hi'))
    assert len(data) == 14
    assert data.hex() == '0100000000000000' + '02000000' + '6869'
    assert decode_strict(data, Account) == Account(x=1, s='hi')


def test_record_truncated_and_trailing():
    data = encode(Account(x=1, s='hi'))
    with pytest.raises(OutOfDataError):
        decode_strict(data[:-1], Account)
    with pytest.raises(TrailingDataError):
        decode_strict(data + b'\x00', Account)


def test_record_wrong_field_value():
    with pytest.raises(InvalidInputError):
        encode(Account(x=-1, s='hi'))
    with pytest.raises(InvalidInputError):
        encode(Point(1, 2), Account)


def test_check_value_is_deep():
    codec = codec_for(list[Account])
    codec.check_value([Account(1, 'a')])
    with pytest.raises(InvalidInputError):
        codec.check_value([Account(1, 'a'), Account(2, 3)])


def test_skipped_fields_are_not_written():
    value = WithSkipped(a=1, cache=[1, 2, 3], b=2, label='x', counter=7)
    data = encode(value)
    assert data.hex() == '0102'
    decoded = decode_strict(data, WithSkipped)
    assert decoded == WithSkipped(a=1, cache=[], b=2, label='none', counter=0)


def test_init_hook_is_called():
    decoded = decode_strict(b'\x15', WithHook)
    assert decoded.value == 21
    assert decoded.double == 42
    assert encode(decoded) == b'\x15'


def test_init_hook_must_exist():
    with pytest.raises(TypeError):
        @borsh_struct(init='missing')
        class _Broken:
            value: u8


def test_positional_record_has_same_bytes():
    assert encode(Wrapper(5)) == encode(5, u32)


def test_empty_record():
    assert encode(Unit()) == b''
    assert decode_strict(b'', Unit) == Unit()


def test_named_tuple():
    data = encode(Pair(1, 'a'))
    assert data.hex() == '01' + '0100000061'
    decoded = decode_strict(data, Pair)
    assert isinstance(decoded, Pair)
    assert decoded == Pair(1, 'a')


def test_recursive_record():
    tree = Node(1, [Node(2, []), Node(3, [Node(4, [])])])
    data = encode(tree)
    assert data.hex() == '01' + '02000000' + '02' + '00000000' + '03' + '01000000' + '04' + '00000000'
    assert decode_strict(data, Node) == tree


def test_recursive_through_option():
    chain = Chain(1, Chain(2, None))
    assert encode(chain).hex() == '0101' + '0200'
    assert decode_strict(encode(chain), Chain) == chain


def test_deeply_nested_input_is_refused():
    data = b'\x00\x01' * 20000 + b'\x00\x00'
    with pytest.raises(DepthLimitExceededError):
        decode_strict(data, Chain)
    with pytest.raises(DepthLimitExceededError):
        decode_strict(b'\x01' * 20000, Expr)


def test_nesting_limit_from_settings():
    settings = CodecSettings(max_depth=3)
    chain = Chain(1, Chain(2, Chain(3, None)))
    assert decode_strict(encode(chain), Chain, settings=settings) == chain
    with pytest.raises(DepthLimitExceededError):
        decode_strict(b'\x00\x01' * 3 + b'\x00\x00', Chain, settings=settings)


def test_nesting_is_released_between_values():
    settings = CodecSettings(max_depth=2)
    chain = Chain(1, Chain(2, None))
    deserializer = Deserializer.build_bytes_deserializer(encode(chain) * 3)
    for _ in range(3):
        assert decode_partial(deserializer, Chain, settings=settings) == chain
    deserializer.finalize()


def test_record_inside_containers():
    value = {Point(2, 1): [Point(0, 0)], Point(1, 9): []}
    data = encode(value, dict[Point, list[Point]])
    # keys are ordered field by field
    assert data[4:8] == encode(Point(1, 9))
    assert decode_strict(data, dict[Point, list[Point]]) == value


def test_python_enum():
    assert encode(Color.GREEN) == b'\x01'
    assert decode_strict(b'\x02', Color) is Color.BLUE
    with pytest.raises(InvalidDiscriminantError):
        decode_strict(b'\x03', Color)
    assert encode({Color.BLUE, Color.RED}, set[Color]).hex() == '020000000002'


def test_union_variants():
    assert encode(Shape.Empty()) == b'\x00'
    assert encode(Shape.Circle(7)).hex() == '01' + '07000000'
    assert encode(Shape.Rectangle(width=1, height=2)).hex() == '02' + '0100' + '0200'
    for value in [Shape.Empty(), Shape.Circle(7), Shape.Rectangle(1, 2)]:
        assert decode_strict(encode(value), Shape) == value


def test_union_bad_discriminant():
    with pytest.raises(InvalidDiscriminantError) as exc_info:
        decode_strict(b'\x03', Shape)
    assert exc_info.value.value == 3
    assert exc_info.value.position == 0


def test_union_wrong_value():
    with pytest.raises(InvalidInputError):
        encode(Account(1, 'a'), Shape)


def test_recursive_union():
    expr = Expr.Add(Expr.Literal(1), Expr.Add(Expr.Literal(2), Expr.Literal(3)))
    data = encode(expr)
    assert data.hex() == (
        '01' + '00' + '0100000000000000' + '01' + '00' + '0200000000000000' + '00' + '0300000000000000'
    )
    assert decode_strict(data, Expr) == expr


def test_union_sort_key_uses_variant_index():
    value = {Shape.Rectangle(1, 1), Shape.Empty(), Shape.Circle(9), Shape.Circle(3)}
    data = encode(value, set[Shape])
    assert data.hex() == '04000000' + '00' + '0103000000' + '0109000000' + '0201000100'


def test_too_many_variants():
    namespace = {f'V{i}': type(f'V{i}', (), {}) for i in range(257)}
    for name, class_ in namespace.items():
        class_.__qualname__ = f'Big.{name}'
    with pytest.raises(UnsupportedTypeError):
        borsh_enum(type('Big', (), namespace))


def test_variant_limit_from_settings():
    with pytest.raises(UnsupportedTypeError):
        codec_for(Color, settings=CodecSettings(max_enum_variants=2))
    codec_for(Color, settings=CodecSettings(max_enum_variants=3))


def test_array_field():
    value = Digest(b'\x01\x02\x03\x04', 9)
    data = encode(value)
    assert data.hex() == '0102030409'
    assert decode_strict(data, Digest) == Digest((1, 2, 3, 4), 9)


def test_unresolved_forward_reference():
    with pytest.raises(UnsupportedTypeError):
        codec_for('Account')
    with pytest.raises(UnsupportedTypeError):
        codec_for(Broken)
