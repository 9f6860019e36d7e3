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

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from structlog import get_logger
from typing_extensions import override

from borsh_codec.codec.array_type import ArrayType
from borsh_codec.codec.bool_type import BoolType
from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.codec.bytes_type import BytesType
from borsh_codec.codec.collection_type import SequenceType, SetType
from borsh_codec.codec.enum_type import EnumType
from borsh_codec.codec.float_type import FLOAT_SIZES, FloatType
from borsh_codec.codec.map_type import MapType
from borsh_codec.codec.optional_type import OptionalType
from borsh_codec.codec.record_type import RecordType
from borsh_codec.codec.result_type import ResultType
from borsh_codec.codec.sized_int_type import INT_SPECS, SizedIntType
from borsh_codec.codec.str_type import StrType
from borsh_codec.codec.tuple_type import TupleType
from borsh_codec.codec.union_type import TaggedUnionType
from borsh_codec.codec.unit_type import UnitType
from borsh_codec.conf.settings import DEFAULT_SETTINGS, CodecSettings
from borsh_codec.serialization import UnsupportedTypeError
from borsh_codec.shape.model import FieldShape, RecordShape, UnionShape
from borsh_codec.shape.visitor import TypeVisitor

logger = get_logger()


class CodecBuilder(TypeVisitor[BorshType]):
    """ Builds the `BorshType` for a type annotation, composing one codec for every type found in it.

    Records and unions are memoized by their concrete annotation, so each one is built once per builder and a type that
    refers to itself ends up using its own codec. A builder should be used for a single `build` call.
    """

    def __init__(self, *, settings: CodecSettings = DEFAULT_SETTINGS) -> None:
        self.log = logger.new()
        self._settings = settings
        self._memo: dict[Any, RecordType | TaggedUnionType] = {}
        self._collections: list[tuple[str, BorshType]] = []

    def build(self, type_: Any) -> BorshType:
        codec = self.visit(type_)
        # XXX: sizes of recursive types can only be known once every record is complete, computing them now also means
        #      the codecs aren't mutated after this point
        for composite in self._memo.values():
            composite.min_size()
        for name, item in self._collections:
            if item.min_size() == 0:
                raise UnsupportedTypeError(f'{name} has zero-sized elements, which is not supported')
        self.log.debug('codec built', type=repr(type_), codec=codec, composites=len(self._memo))
        return codec

    @override
    def visit_primitive(self, name: str) -> BorshType:
        if name in INT_SPECS:
            return SizedIntType(name)
        if name in FLOAT_SIZES:
            return FloatType(name)
        assert name == 'bool', f'unknown primitive {name}'
        return BoolType()

    @override
    def visit_unit(self) -> BorshType:
        return UnitType()

    @override
    def visit_string(self) -> BorshType:
        return StrType()

    @override
    def visit_bytes(self, builder: type) -> BorshType:
        return BytesType(builder)

    @override
    def visit_option(self, item_type: Any) -> BorshType:
        return OptionalType(self.visit(item_type))

    @override
    def visit_result(self, ok_type: Any, err_type: Any) -> BorshType:
        return ResultType(self.visit(ok_type), self.visit(err_type))

    @override
    def visit_sequence(self, builder: type, item_type: Any) -> BorshType:
        item = self.visit(item_type)
        self._collections.append((f'{builder.__name__}[{item!r}]', item))
        return SequenceType(item, builder, ceiling_bytes=self._settings.alloc_ceiling_bytes)

    @override
    def visit_array(self, item_type: Any, length: int) -> BorshType:
        return ArrayType(self.visit(item_type), length)

    @override
    def visit_tuple(self, item_types: tuple[Any, ...]) -> BorshType:
        return TupleType(tuple(self.visit(item_type) for item_type in item_types))

    @override
    def visit_set(self, builder: type, item_type: Any) -> BorshType:
        item = self.visit(item_type)
        self._collections.append((f'{builder.__name__}[{item!r}]', item))
        return SetType(item, builder, ceiling_bytes=self._settings.alloc_ceiling_bytes)

    @override
    def visit_map(self, builder: type, key_type: Any, value_type: Any) -> BorshType:
        key = self.visit(key_type)
        value = self.visit(value_type)
        self._collections.append((f'{builder.__name__}[{key!r}, {value!r}]', TupleType((key, value))))
        return MapType(key, value, builder, ceiling_bytes=self._settings.alloc_ceiling_bytes)

    @override
    def visit_record(self, type_: Any, shape: RecordShape, args: tuple[Any, ...]) -> BorshType:
        if (memoized := self._memo.get(type_)) is not None:
            return memoized
        codec = RecordType(shape, max_depth=self._settings.max_depth)
        self._memo[type_] = codec
        self._fill_record(codec, shape, args)
        return codec

    @override
    def visit_union(self, type_: Any, shape: UnionShape, args: tuple[Any, ...]) -> BorshType:
        if (memoized := self._memo.get(type_)) is not None:
            return memoized
        self._check_variant_count(shape.name, len(shape.variants))
        codec = TaggedUnionType(shape)
        self._memo[type_] = codec
        variants: list[RecordType] = []
        for variant in shape.variants:
            record = RecordType(variant.record, max_depth=self._settings.max_depth)
            self._fill_record(record, variant.record, args)
            variants.append(record)
        codec.set_variants(tuple(variants))
        return codec

    @override
    def visit_enum(self, class_: type[enum.Enum]) -> BorshType:
        self._check_variant_count(class_.__name__, len(class_))
        return EnumType(class_)

    def _check_variant_count(self, name: str, count: int) -> None:
        if count > self._settings.max_enum_variants:
            raise UnsupportedTypeError(
                f'{name} has {count} variants, at most {self._settings.max_enum_variants} are allowed'
            )

    def _fill_record(self, codec: RecordType, shape: RecordShape, args: tuple[Any, ...]) -> None:
        fields = tuple((field, self.visit(field_type)) for field, field_type in self.wire_fields(shape, args))
        skipped = tuple(
            (field, self._skipped_default(field, field_type))
            for field, field_type in self.skipped_fields(shape, args)
        )
        codec.set_fields(fields, skipped)

    def _skipped_default(self, field: FieldShape, field_type: Any) -> Callable[[], Any]:
        factory: Optional[Callable[[], Any]] = field.default_factory
        if factory is not None:
            return factory
        # XXX: without an explicit default the type of the field must be known to get its default
        return self.visit(field_type).default


def build_codec(type_: Any, *, settings: CodecSettings = DEFAULT_SETTINGS) -> BorshType:
    """ Build the codec of the given type annotation."""
    return CodecBuilder(settings=settings).build(type_)
