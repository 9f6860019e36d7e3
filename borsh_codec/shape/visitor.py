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
Shared walk over type annotations and declared shapes.

The codec builder and the schema builder are two backends of `TypeVisitor`, both get the exact same classification of
annotations and the exact same list of fields for every record, with skip-marked fields removed and generic parameters
replaced by the types they are bound to. Neither backend walks a shape on its own.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import abc, deque
from types import NoneType
from typing import Annotated, Any, ForwardRef, Generic, Sequence, TypeVar, get_args, get_origin

from borsh_codec.serialization.exceptions import UnsupportedTypeError
from borsh_codec.shape.decorators import get_record_shape, get_union_shape, is_record_class, is_union_class
from borsh_codec.shape.model import FieldShape, RecordShape, UnionShape
from borsh_codec.types import ArrayLength, Err, Ok, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from borsh_codec.utils.typing import has_type_params, is_union, substitute_type_params

R = TypeVar('R')

PRIMITIVE_NAMES: tuple[tuple[Any, str], ...] = (
    (u8, 'u8'),
    (u16, 'u16'),
    (u32, 'u32'),
    (u64, 'u64'),
    (u128, 'u128'),
    (i8, 'i8'),
    (i16, 'i16'),
    (i32, 'i32'),
    (i64, 'i64'),
    (i128, 'i128'),
    (f32, 'f32'),
    (f64, 'f64'),
    (float, 'f64'),
    (bool, 'bool'),
)

_SEQUENCE_ORIGINS: dict[Any, type] = {
    list: list,
    abc.Sequence: list,
    abc.MutableSequence: list,
    deque: deque,
}

_SET_ORIGINS: dict[Any, type] = {
    set: set,
    abc.MutableSet: set,
    frozenset: frozenset,
    abc.Set: frozenset,
}

_MAP_ORIGINS: dict[Any, type] = {
    dict: dict,
    abc.Mapping: dict,
    abc.MutableMapping: dict,
}


def primitive_name(type_: Any) -> str | None:
    for primitive, name in PRIMITIVE_NAMES:
        if type_ is primitive:
            return name
    return None


def _expect_args(type_: Any, args: tuple[Any, ...], count: int) -> tuple[Any, ...]:
    if len(args) != count:
        raise UnsupportedTypeError(f'{type_!r} expects {count} type arguments, got {len(args)}')
    return args


def bind_type_params(name: str, type_params: tuple[TypeVar, ...], args: tuple[Any, ...]) -> dict[TypeVar, Any]:
    """ Associate each type parameter with its argument, a bare generic type leaves all parameters unbound."""
    if args and len(args) != len(type_params):
        raise UnsupportedTypeError(f'{name} expects {len(type_params)} type arguments, got {len(args)}')
    return dict(zip(type_params, args))


class TypeVisitor(ABC, Generic[R]):
    """ Classifies an annotation and dispatches to the `visit_*` method for its kind.

    Annotations given to `visit` must be concrete, any type parameter found at this point is unbound and makes the
    type unusable, which is reported as `UnsupportedTypeError`.
    """

    def visit(self, type_: Any) -> R:
        if isinstance(type_, TypeVar):
            raise UnsupportedTypeError(f'type parameter {type_} is not bound to any type')
        if isinstance(type_, (str, ForwardRef)):
            raise UnsupportedTypeError(f'unresolved forward reference {type_!r}')
        if type_ is None or type_ is NoneType:
            return self.visit_unit()
        if (name := primitive_name(type_)) is not None:
            return self.visit_primitive(name)
        if type_ is int:
            raise UnsupportedTypeError('int has no fixed width, use one of u8, u16, u32, u64, u128, i8, ..., i128')
        if type_ is str:
            return self.visit_string()
        if type_ is bytes or type_ is bytearray:
            return self.visit_bytes(type_)

        origin = get_origin(type_)
        args = get_args(type_)

        if origin is Annotated:
            inner, *metadata = args
            for item in metadata:
                if isinstance(item, ArrayLength):
                    item_type, _ellipsis = get_args(inner)
                    return self.visit_array(item_type, item.length)
            return self.visit(inner)

        if is_union(type_):
            return self._visit_union_annotation(type_, args)

        if origin is tuple:
            if not args:
                return self.visit_unit()
            if len(args) == 2 and args[1] is Ellipsis:
                return self.visit_sequence(tuple, args[0])
            return self.visit_tuple(args)

        if origin in _SEQUENCE_ORIGINS:
            item_type, = _expect_args(type_, args, 1)
            return self.visit_sequence(_SEQUENCE_ORIGINS[origin], item_type)

        if origin in _SET_ORIGINS:
            item_type, = _expect_args(type_, args, 1)
            return self.visit_set(_SET_ORIGINS[origin], item_type)

        if origin in _MAP_ORIGINS:
            key_type, value_type = _expect_args(type_, args, 2)
            return self.visit_map(_MAP_ORIGINS[origin], key_type, value_type)

        class_ = origin if origin is not None else type_
        if isinstance(class_, type):
            if issubclass(class_, enum.Enum):
                return self.visit_enum(class_)
            if is_union_class(class_):
                return self.visit_union(type_, get_union_shape(class_), args)
            if is_record_class(class_):
                return self.visit_record(type_, get_record_shape(class_), args)

        raise UnsupportedTypeError(f'type {type_!r} is not supported')

    def _visit_union_annotation(self, type_: Any, args: tuple[Any, ...]) -> R:
        if len(args) == 2 and NoneType in args:
            item_type, = (arg for arg in args if arg is not NoneType)
            return self.visit_option(item_type)
        if len(args) == 2:
            by_origin = {get_origin(arg): arg for arg in args}
            if Ok in by_origin and Err in by_origin:
                ok_type, = get_args(by_origin[Ok])
                err_type, = get_args(by_origin[Err])
                return self.visit_result(ok_type, err_type)
        raise UnsupportedTypeError(f'{type_} is not supported, only `T | None` and `Result[T, E]` unions are')

    # helpers for the backends, this is where skip-marked fields are removed and type parameters are bound

    def wire_fields(self, shape: RecordShape, args: Sequence[Any]) -> list[tuple[FieldShape, Any]]:
        """ Fields that are present on the wire, in order, with their concrete types."""
        bindings = bind_type_params(shape.name, shape.type_params, tuple(args))
        return [(field, substitute_type_params(field.type_, bindings)) for field in shape.wire_fields()]

    def skipped_fields(self, shape: RecordShape, args: Sequence[Any]) -> list[tuple[FieldShape, Any]]:
        """ Fields that are not present on the wire, a type in here may still have unbound parameters."""
        bindings = bind_type_params(shape.name, shape.type_params, tuple(args))
        return [(field, substitute_type_params(field.type_, bindings)) for field in shape.skipped_fields()]

    def type_args(self, shape: RecordShape | UnionShape, args: Sequence[Any]) -> tuple[Any, ...]:
        """ The arguments of a generic type, every parameter must be bound."""
        if not shape.type_params:
            return ()
        bind_type_params(shape.name, shape.type_params, tuple(args))
        if not args or any(has_type_params(arg) for arg in args):
            raise UnsupportedTypeError(f'{shape.name} is generic, it must be used with concrete type arguments')
        return tuple(args)

    # one method for each kind of type

    @abstractmethod
    def visit_primitive(self, name: str) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_unit(self) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_string(self) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_bytes(self, builder: type) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_option(self, item_type: Any) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_result(self, ok_type: Any, err_type: Any) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_sequence(self, builder: type, item_type: Any) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_array(self, item_type: Any, length: int) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_tuple(self, item_types: tuple[Any, ...]) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_set(self, builder: type, item_type: Any) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_map(self, builder: type, key_type: Any, value_type: Any) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_record(self, type_: Any, shape: RecordShape, args: tuple[Any, ...]) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_union(self, type_: Any, shape: UnionShape, args: tuple[Any, ...]) -> R:
        raise NotImplementedError

    @abstractmethod
    def visit_enum(self, class_: type[enum.Enum]) -> R:
        raise NotImplementedError
