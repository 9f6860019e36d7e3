from __future__ import annotations

import enum
from typing import Generic, Optional, TypeVar

import pytest
from structlog.testing import capture_logs

from borsh_codec import (
    BadDataError,
    Definition,
    Fields,
    SchemaContainer,
    SchemaMismatchError,
    SchemaRedefinitionError,
    UnsupportedTypeError,
    borsh_enum,
    borsh_struct,
    decode_strict,
    decode_with_schema,
    declaration_of,
    encode,
    encode_with_schema,
    schema_of,
    skip,
)
from borsh_codec.schema import DefinitionCollector
from borsh_codec.types import Array, Box, Err, Ok, Result, u8, u32, u64

C = TypeVar('C')
W = TypeVar('W')
K = TypeVar('K')
V = TypeVar('V')
T = TypeVar('T')

EMPTY = Definition.Struct(Fields.Empty())


def _option(inner: str) -> Definition:
    return Definition.Enum((('None', 'nil'), ('Some', inner)))


@borsh_struct
class Tomatoes:
    pass


@borsh_struct
class Cucumber:
    pass


@borsh_struct
class Oil:
    pass


@borsh_struct
class Wrapper:
    pass


@borsh_struct
class Filling:
    pass


@borsh_enum
class A:
    class Bacon:
        pass

    class Eggs:
        pass

    @borsh_struct(positional=True, frozen=True)
    class Salad:
        tomatoes: Tomatoes
        cucumber: Cucumber
        oil: Oil

    class Sausage:
        wrapper: Wrapper
        filling: Filling


@borsh_enum
class G(Generic[C, W]):
    class Bacon:
        pass

    class Eggs:
        pass

    @borsh_struct(positional=True, frozen=True)
    class Salad:
        tomatoes: Tomatoes
        cucumber: C
        oil: Oil

    class Sausage:
        wrapper: W
        filling: Filling


@borsh_struct
class Pair(Generic[K, V]):
    key: K
    value: V


@borsh_struct(positional=True)
class Unnamed(Generic[K, V]):
    key: K
    value: V


@borsh_struct
class WithSkip:
    x: u64
    cache: dict[u64, str] = skip(default_factory=dict)
    y: str = ''


@borsh_struct
class Node:
    value: u8
    children: list[Node]


@borsh_struct
class Point:
    x: u32
    y: u32


class Color(enum.Enum):
    RED = 1
    GREEN = 2


@pytest.mark.parametrize('type_, declaration', [
    (u64, 'u64'),
    (bool, 'bool'),
    (float, 'f64'),
    (str, 'string'),
    (None, 'nil'),
    (bytes, 'Vec<u8>'),
    (Optional[u64], 'Option<u64>'),
    (Result[u8, str], 'Result<u8, string>'),
    (list[u64], 'Vec<u64>'),
    (tuple[u64, ...], 'Vec<u64>'),
    (set[str], 'HashSet<string>'),
    (dict[u64, str], 'HashMap<u64, string>'),
    (tuple[u64, str], 'Tuple<u64, string>'),
    (Array[u64, 32], 'Array<u64, 32>'),
    (Box[u64], 'u64'),
    (Pair[u64, str], 'Pair<u64, string>'),
    (Pair[u64, list[Pair[u8, str]]], 'Pair<u64, Vec<Pair<u8, string>>>'),
    (Color, 'Color'),
])
def test_declarations(type_, declaration):
    assert declaration_of(type_) == declaration


def test_unbound_parameter_has_no_declaration():
    with pytest.raises(UnsupportedTypeError):
        declaration_of(Pair)
    with pytest.raises(UnsupportedTypeError):
        declaration_of(Pair[u64, T])


def test_primitive_has_no_definitions():
    assert schema_of(u64) == SchemaContainer('u64', {})
    assert schema_of(str) == SchemaContainer('string', {})


def test_simple_option():
    assert schema_of(Optional[u64]).definitions == {'Option<u64>': _option('u64')}


def test_nested_option():
    assert schema_of(Optional[list[Optional[u64]]]).definitions == {
        'Option<Vec<Option<u64>>>': _option('Vec<Option<u64>>'),
        'Vec<Option<u64>>': Definition.Sequence('Option<u64>'),
        'Option<u64>': _option('u64'),
    }


def test_result():
    assert schema_of(Result[u8, str]).definitions == {
        'Result<u8, string>': Definition.Enum((('Err', 'string'), ('Ok', 'u8'))),
    }
    # variants are listed by their discriminant on the wire
    assert encode(Err('x'), Result[u8, str])[0] == 0
    assert encode(Ok(u8(1)), Result[u8, str])[0] == 1


def test_simple_vec():
    assert schema_of(list[u64]).definitions == {'Vec<u64>': Definition.Sequence('u64')}


def test_bytes():
    assert schema_of(bytes).definitions == {'Vec<u8>': Definition.Sequence('u8')}
    assert schema_of(bytes) == schema_of(list[u8])


def test_simple_tuple():
    assert schema_of(tuple[u64, str]).definitions == {
        'Tuple<u64, string>': Definition.Tuple(('u64', 'string')),
    }


def test_nested_tuple():
    assert schema_of(tuple[u64, tuple[u8, bool], str]).definitions == {
        'Tuple<u64, Tuple<u8, bool>, string>': Definition.Tuple(('u64', 'Tuple<u8, bool>', 'string')),
        'Tuple<u8, bool>': Definition.Tuple(('u8', 'bool')),
    }


def test_simple_map():
    assert schema_of(dict[u64, str]).definitions == {
        'HashMap<u64, string>': Definition.Sequence('Tuple<u64, string>'),
        'Tuple<u64, string>': Definition.Tuple(('u64', 'string')),
    }


def test_set():
    assert schema_of(set[u64]).definitions == {'HashSet<u64>': Definition.Sequence('u64')}


def test_simple_array():
    assert schema_of(Array[u64, 32]).definitions == {'Array<u64, 32>': Definition.Array(32, 'u64')}


def test_nested_array():
    assert schema_of(Array[Array[u64, 9], 32]).definitions == {
        'Array<Array<u64, 9>, 32>': Definition.Array(32, 'Array<u64, 9>'),
        'Array<u64, 9>': Definition.Array(9, 'u64'),
    }


def test_unit_struct():
    assert schema_of(Tomatoes) == SchemaContainer('Tomatoes', {'Tomatoes': EMPTY})


def test_named_struct_with_skip():
    assert schema_of(WithSkip).definitions == {
        'WithSkip': Definition.Struct(Fields.NamedFields((('x', 'u64'), ('y', 'string')))),
    }


def test_generic_named_struct():
    assert schema_of(Pair[u64, str]).definitions == {
        'Pair<u64, string>': Definition.Struct(Fields.NamedFields((('key', 'u64'), ('value', 'string')))),
    }


def test_generic_unnamed_struct():
    assert schema_of(Unnamed[u64, str]).definitions == {
        'Unnamed<u64, string>': Definition.Struct(Fields.UnnamedFields(('u64', 'string'))),
    }


def test_simple_enum():
    assert schema_of(Color).definitions == {
        'Color': Definition.Enum((('RED', 'ColorRED'), ('GREEN', 'ColorGREEN'))),
        'ColorRED': EMPTY,
        'ColorGREEN': EMPTY,
    }


def test_complex_enum():
    container = schema_of(A)
    assert container.declaration == 'A'
    assert container.definitions == {
        'Cucumber': EMPTY,
        'ASalad': Definition.Struct(Fields.UnnamedFields(('Tomatoes', 'Cucumber', 'Oil'))),
        'ABacon': EMPTY,
        'Oil': EMPTY,
        'A': Definition.Enum((
            ('Bacon', 'ABacon'),
            ('Eggs', 'AEggs'),
            ('Salad', 'ASalad'),
            ('Sausage', 'ASausage'),
        )),
        'Wrapper': EMPTY,
        'Tomatoes': EMPTY,
        'ASausage': Definition.Struct(Fields.NamedFields((('wrapper', 'Wrapper'), ('filling', 'Filling')))),
        'AEggs': EMPTY,
        'Filling': EMPTY,
    }


def test_complex_enum_generics():
    container = schema_of(G[Cucumber, Wrapper])
    assert container.declaration == 'G<Cucumber, Wrapper>'
    assert container.definitions == {
        'Cucumber': EMPTY,
        'GSalad<Cucumber, Wrapper>': Definition.Struct(Fields.UnnamedFields(('Tomatoes', 'Cucumber', 'Oil'))),
        'GBacon<Cucumber, Wrapper>': EMPTY,
        'Oil': EMPTY,
        'G<Cucumber, Wrapper>': Definition.Enum((
            ('Bacon', 'GBacon<Cucumber, Wrapper>'),
            ('Eggs', 'GEggs<Cucumber, Wrapper>'),
            ('Salad', 'GSalad<Cucumber, Wrapper>'),
            ('Sausage', 'GSausage<Cucumber, Wrapper>'),
        )),
        'Wrapper': EMPTY,
        'Tomatoes': EMPTY,
        'GSausage<Cucumber, Wrapper>': Definition.Struct(
            Fields.NamedFields((('wrapper', 'Wrapper'), ('filling', 'Filling')))
        ),
        'GEggs<Cucumber, Wrapper>': EMPTY,
        'Filling': EMPTY,
    }


def test_recursive_struct():
    assert schema_of(Node).definitions == {
        'Node': Definition.Struct(Fields.NamedFields((('value', 'u8'), ('children', 'Vec<Node>')))),
        'Vec<Node>': Definition.Sequence('Node'),
    }


def test_schema_is_stable():
    assert schema_of(G[Cucumber, Pair[u64, str]]) == schema_of(G[Cucumber, Pair[u64, str]])


def test_schema_of_schema():
    container = schema_of(SchemaContainer)
    assert container.declaration == 'SchemaContainer'
    assert container.definitions['SchemaContainer'] == Definition.Struct(Fields.NamedFields((
        ('declaration', 'string'),
        ('definitions', 'HashMap<string, Definition>'),
    )))
    assert container.definitions['Definition'] == Definition.Enum((
        ('Array', 'DefinitionArray'),
        ('Sequence', 'DefinitionSequence'),
        ('Tuple', 'DefinitionTuple'),
        ('Enum', 'DefinitionEnum'),
        ('Struct', 'DefinitionStruct'),
    ))
    assert container.definitions['FieldsUnnamedFields'] == Definition.Struct(Fields.UnnamedFields(('Vec<string>',)))


def test_container_round_trip():
    container = schema_of(G[Cucumber, Pair[u64, str]])
    assert decode_strict(encode(container), SchemaContainer) == container


def test_container_encoding():
    container = schema_of(Optional[u8])
    assert encode(container).hex() == (
        '0a000000' + b'Option<u8>'.hex()  # declaration
        + '01000000'  # one definition
        + '0a000000' + b'Option<u8>'.hex()  # key
        + '03'  # Enum
        + '02000000'  # two variants
        + '04000000' + b'None'.hex() + '03000000' + b'nil'.hex()
        + '04000000' + b'Some'.hex() + '02000000' + b'u8'.hex()
    )


def test_round_trip_with_schema():
    value = Pair(1, 'a')
    data = encode_with_schema(value, Pair[u64, str])
    assert data.endswith(encode(value, Pair[u64, str]))
    assert decode_with_schema(data, Pair[u64, str]) == value


def test_round_trip_with_schema_enum():
    value = A.Sausage(Wrapper(), Filling())
    assert decode_with_schema(encode_with_schema(value), A) == value


def test_schema_mismatch():
    data = encode_with_schema(Point(1, 2))
    with capture_logs() as logs:
        with pytest.raises(SchemaMismatchError, match='schema does not match'):
            decode_with_schema(data, Pair[u32, u32])
    assert any(log['event'] == 'schema mismatch detected' for log in logs)


def test_schema_mismatch_is_bad_data():
    data = encode_with_schema(1, u32)
    with pytest.raises(BadDataError):
        decode_with_schema(data, u8)


def test_redefinition():
    collector = DefinitionCollector()
    assert collector.add_definition('X', EMPTY)
    assert not collector.add_definition('X', EMPTY)
    with pytest.raises(SchemaRedefinitionError):
        collector.add_definition('X', Definition.Sequence('u8'))


def test_same_name_different_types():
    other = _other_tomatoes()
    with pytest.raises(SchemaRedefinitionError):
        schema_of(tuple[Tomatoes, other])


def _other_tomatoes() -> type:
    @borsh_struct
    class Tomatoes:
        weight: u8

    return Tomatoes
