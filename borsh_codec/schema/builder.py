# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Builders of declarations and definitions for the schema of a type.

Enum definitions list their variants in discriminant order. For `Result` that is `Err` then `Ok`, which is the
opposite of the order the Rust borsh crate uses in its schema, so schema containers that hold a `Result` are not
byte-compatible with the ones it produces, even though the encoded values are.

>>> from borsh_codec.types import Result, u8
>>> collector = DefinitionCollector()
>>> collector.visit(Result[u8, str])
>>> collector.definitions
{'Result<u8, string>': Definition.Enum(variants=(('Err', 'string'), ('Ok', 'u8')))}
"""

from __future__ import annotations

import enum
from typing import Any

from typing_extensions import override

from borsh_codec.schema.definitions import Definition, Fields
from borsh_codec.serialization import SchemaRedefinitionError
from borsh_codec.shape.model import RecordShape, UnionShape
from borsh_codec.shape.visitor import TypeVisitor


class DeclarationVisitor(TypeVisitor[str]):
    """ Computes the declaration of a type, the name it's referred to by in a schema.

    >>> from borsh_codec.types import Array, u8, u64
    >>> DeclarationVisitor().visit(dict[u64, list[str]])
    'HashMap<u64, Vec<string>>'
    >>> DeclarationVisitor().visit(tuple[Array[u8, 32], bool | None])
    'Tuple<Array<u8, 32>, Option<bool>>'
    """

    def generic(self, name: str, args: tuple[Any, ...]) -> str:
        if not args:
            return name
        return f'{name}<{", ".join(self.visit(arg) for arg in args)}>'

    @override
    def visit_primitive(self, name: str) -> str:
        return name

    @override
    def visit_unit(self) -> str:
        return 'nil'

    @override
    def visit_string(self) -> str:
        return 'string'

    @override
    def visit_bytes(self, builder: type) -> str:
        return 'Vec<u8>'

    @override
    def visit_option(self, item_type: Any) -> str:
        return self.generic('Option', (item_type,))

    @override
    def visit_result(self, ok_type: Any, err_type: Any) -> str:
        return self.generic('Result', (ok_type, err_type))

    @override
    def visit_sequence(self, builder: type, item_type: Any) -> str:
        return self.generic('Vec', (item_type,))

    @override
    def visit_array(self, item_type: Any, length: int) -> str:
        return f'Array<{self.visit(item_type)}, {length}>'

    @override
    def visit_tuple(self, item_types: tuple[Any, ...]) -> str:
        return self.generic('Tuple', item_types)

    @override
    def visit_set(self, builder: type, item_type: Any) -> str:
        return self.generic('HashSet', (item_type,))

    @override
    def visit_map(self, builder: type, key_type: Any, value_type: Any) -> str:
        return self.generic('HashMap', (key_type, value_type))

    @override
    def visit_record(self, type_: Any, shape: RecordShape, args: tuple[Any, ...]) -> str:
        return self.generic(shape.name, self.type_args(shape, args))

    @override
    def visit_union(self, type_: Any, shape: UnionShape, args: tuple[Any, ...]) -> str:
        return self.generic(shape.name, self.type_args(shape, args))

    @override
    def visit_enum(self, class_: type[enum.Enum]) -> str:
        return class_.__name__


class DefinitionCollector(TypeVisitor[None]):
    """ Collects the definitions of every compound type reached from the visited types, depth-first.

    A definition is only descended into the first time its declaration is found, which is what stops the walk on
    recursive types.
    """

    def __init__(self) -> None:
        self.definitions: dict[str, Definition] = {}
        self._declarations = DeclarationVisitor()

    def add_definition(self, declaration: str, definition: Definition) -> bool:
        """ Register a definition, return whether the declaration was new.

        Raises `SchemaRedefinitionError` when the declaration already has a different definition.
        """
        existing = self.definitions.get(declaration)
        if existing is None:
            self.definitions[declaration] = definition
            return True
        if existing != definition:
            raise SchemaRedefinitionError(
                f'redefining type schema for {declaration}, types with the same names are not supported: '
                f'{existing!r} != {definition!r}'
            )
        return False

    def _declare(self, type_: Any) -> str:
        return self._declarations.visit(type_)

    def _fields(self, shape: RecordShape, args: tuple[Any, ...]) -> tuple[Fields, list[Any]]:
        wire_fields = self.wire_fields(shape, args)
        field_types = [field_type for _, field_type in wire_fields]
        if not wire_fields:
            return Fields.Empty(), field_types
        if shape.positional:
            return Fields.UnnamedFields(tuple(self._declare(field_type) for field_type in field_types)), field_types
        named = tuple((field.name, self._declare(field_type)) for field, field_type in wire_fields)
        return Fields.NamedFields(named), field_types

    def _add_struct(self, declaration: str, shape: RecordShape, args: tuple[Any, ...]) -> None:
        fields, field_types = self._fields(shape, args)
        if self.add_definition(declaration, Definition.Struct(fields)):
            for field_type in field_types:
                self.visit(field_type)

    @override
    def visit_primitive(self, name: str) -> None:
        pass

    @override
    def visit_unit(self) -> None:
        pass

    @override
    def visit_string(self) -> None:
        pass

    @override
    def visit_bytes(self, builder: type) -> None:
        self.add_definition(self._declarations.visit_bytes(builder), Definition.Sequence('u8'))

    @override
    def visit_option(self, item_type: Any) -> None:
        declaration = self._declarations.visit_option(item_type)
        variants = (('None', 'nil'), ('Some', self._declare(item_type)))
        if self.add_definition(declaration, Definition.Enum(variants)):
            self.visit(item_type)

    @override
    def visit_result(self, ok_type: Any, err_type: Any) -> None:
        declaration = self._declarations.visit_result(ok_type, err_type)
        # ordered by discriminant, errors are 0
        variants = (('Err', self._declare(err_type)), ('Ok', self._declare(ok_type)))
        if self.add_definition(declaration, Definition.Enum(variants)):
            self.visit(err_type)
            self.visit(ok_type)

    @override
    def visit_sequence(self, builder: type, item_type: Any) -> None:
        declaration = self._declarations.visit_sequence(builder, item_type)
        if self.add_definition(declaration, Definition.Sequence(self._declare(item_type))):
            self.visit(item_type)

    @override
    def visit_array(self, item_type: Any, length: int) -> None:
        declaration = self._declarations.visit_array(item_type, length)
        if self.add_definition(declaration, Definition.Array(length, self._declare(item_type))):
            self.visit(item_type)

    @override
    def visit_tuple(self, item_types: tuple[Any, ...]) -> None:
        declaration = self._declarations.visit_tuple(item_types)
        elements = tuple(self._declare(item_type) for item_type in item_types)
        if self.add_definition(declaration, Definition.Tuple(elements)):
            for item_type in item_types:
                self.visit(item_type)

    @override
    def visit_set(self, builder: type, item_type: Any) -> None:
        declaration = self._declarations.visit_set(builder, item_type)
        if self.add_definition(declaration, Definition.Sequence(self._declare(item_type))):
            self.visit(item_type)

    @override
    def visit_map(self, builder: type, key_type: Any, value_type: Any) -> None:
        declaration = self._declarations.visit_map(builder, key_type, value_type)
        entry = (key_type, value_type)
        if self.add_definition(declaration, Definition.Sequence(self._declarations.visit_tuple(entry))):
            self.visit_tuple(entry)

    @override
    def visit_record(self, type_: Any, shape: RecordShape, args: tuple[Any, ...]) -> None:
        self._add_struct(self._declarations.visit_record(type_, shape, args), shape, args)

    @override
    def visit_union(self, type_: Any, shape: UnionShape, args: tuple[Any, ...]) -> None:
        declaration = self._declarations.visit_union(type_, shape, args)
        type_args = self.type_args(shape, args)
        # every variant is described by an anonymous struct named after the union and the variant
        variants = tuple(
            (variant.name, self._declarations.generic(f'{shape.name}{variant.name}', type_args))
            for variant in shape.variants
        )
        if self.add_definition(declaration, Definition.Enum(variants)):
            for variant, (_, variant_declaration) in zip(shape.variants, variants):
                self._add_struct(variant_declaration, variant.record, args)

    @override
    def visit_enum(self, class_: type[enum.Enum]) -> None:
        variants = tuple((member.name, f'{class_.__name__}{member.name}') for member in class_)
        if self.add_definition(self._declarations.visit_enum(class_), Definition.Enum(variants)):
            for _, variant_declaration in variants:
                self.add_definition(variant_declaration, Definition.Struct(Fields.Empty()))
