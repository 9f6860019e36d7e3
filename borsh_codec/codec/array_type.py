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

from collections.abc import Sequence
from typing import Any, TypeVar

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.codec.collection_type import as_bytes, is_byte_type
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.compound_encoding.array import decode_array, encode_array
from borsh_codec.serialization.encoding.bytes import decode_fixed_bytes, encode_fixed_bytes

T = TypeVar('T')


class ArrayType(BorshType[tuple[T, ...]]):
    """ Represents `Array[T, N]` values, exactly N elements and no length prefix.

    Values are decoded as tuples, any sequence of the right length can be encoded, `bytes` included when `T` is `u8`.
    """

    __slots__ = ('_item', '_length')

    _item: BorshType[T]
    _length: int

    def __init__(self, item: BorshType[T], length: int) -> None:
        self._item = item
        self._length = length

    @property
    def item(self) -> BorshType[T]:
        return self._item

    @property
    def length(self) -> int:
        return self._length

    @override
    def min_size(self) -> int:
        return self._length * self._item.min_size()

    @override
    def default(self) -> tuple[T, ...]:
        return tuple(self._item.default() for _ in range(self._length))

    @override
    def sort_key(self, value: tuple[T, ...], /) -> Any:
        return tuple(self._item.sort_key(i) for i in value)

    @override
    def _check_value(self, value: tuple[T, ...], /, *, deep: bool) -> None:
        if not isinstance(value, Sequence) or isinstance(value, str):
            raise InvalidInputError(f'expected a sequence, got {type(value).__name__}')
        if isinstance(value, (bytes, bytearray)) and not is_byte_type(self._item):
            raise InvalidInputError(f'expected a sequence, got {type(value).__name__}')
        if len(value) != self._length:
            raise InvalidInputError(f'expected an array of length {self._length}, got {len(value)}')
        if deep:
            for i in value:
                self._item._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple[T, ...], /) -> None:
        if is_byte_type(self._item) and (data := as_bytes(value)) is not None:
            encode_fixed_bytes(serializer, data, length=self._length)
            return
        encode_array(serializer, value, self._item.serialize, length=self._length)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple[T, ...]:
        if is_byte_type(self._item):
            return tuple(decode_fixed_bytes(deserializer, length=self._length))  # type: ignore[arg-type]
        return decode_array(deserializer, self._item.deserialize, length=self._length)

    def __repr__(self) -> str:
        return f'ArrayType({self._item!r}, {self._length})'
