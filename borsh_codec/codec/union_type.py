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

from typing import Any, Optional

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.codec.record_type import RecordType
from borsh_codec.serialization import Deserializer, InvalidDiscriminantError, InvalidInputError, Serializer
from borsh_codec.shape.model import UnionShape


class TaggedUnionType(BorshType[Any]):
    """ Represents instances of the variants of a tagged union.

    Layout: [index: u8][payload], where the index is the position of the variant in its declaration and the payload is
    encoded just like a record.
    """

    __slots__ = ('_shape', '_variants', '_by_class', '_min_size')

    _shape: UnionShape
    _variants: Optional[tuple[RecordType, ...]]
    _by_class: dict[type, int]
    _min_size: Optional[int]

    def __init__(self, shape: UnionShape) -> None:
        self._shape = shape
        self._variants = None
        self._by_class = {variant.record.class_: variant.index for variant in shape.variants}
        self._min_size = None

    def set_variants(self, variants: tuple[RecordType, ...]) -> None:
        assert self._variants is None, 'variants can only be set once'
        assert len(variants) == len(self._shape.variants)
        self._variants = variants

    @property
    def shape(self) -> UnionShape:
        return self._shape

    @property
    def variants(self) -> tuple[RecordType, ...]:
        assert self._variants is not None, 'union codec is not complete'
        return self._variants

    def _index_of(self, value: Any) -> int:
        index = self._by_class.get(type(value))
        if index is None:
            raise InvalidInputError(f'expected a variant of {self._shape.name}, got {type(value).__name__}')
        return index

    @override
    def min_size(self) -> int:
        if self._min_size is None:
            self._min_size = 1
            self._min_size = 1 + min((variant.min_size() for variant in self.variants), default=0)
        return self._min_size

    @override
    def sort_key(self, value: Any, /) -> Any:
        index = self._index_of(value)
        return (index, self.variants[index].sort_key(value))

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        index = self._index_of(value)
        if deep:
            self.variants[index]._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        index = self._index_of(value)
        serializer.write_byte(index)
        self.variants[index].serialize(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        pos = deserializer.cur_pos()
        index = deserializer.read_byte()
        if index >= len(self.variants):
            raise InvalidDiscriminantError(
                f'unexpected variant index {index} for {self._shape.name} at position {pos}',
                value=index,
                position=pos,
            )
        return self.variants[index].deserialize(deserializer)

    def __repr__(self) -> str:
        return f'TaggedUnionType({self._shape.name})'
