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

from typing import Any

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple


class TupleType(BorshType[tuple]):
    """ Represents `tuple[A, B, ...]` values, the elements one after the other.
    """

    __slots__ = ('_items',)

    _items: tuple[BorshType, ...]

    def __init__(self, items: tuple[BorshType, ...]) -> None:
        self._items = items

    @property
    def items(self) -> tuple[BorshType, ...]:
        return self._items

    @override
    def min_size(self) -> int:
        return sum(item.min_size() for item in self._items)

    @override
    def default(self) -> tuple:
        return tuple(item.default() for item in self._items)

    @override
    def sort_key(self, value: tuple, /) -> Any:
        return tuple(item.sort_key(i) for item, i in zip(self._items, value))

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise InvalidInputError(f'expected tuple, got {type(value).__name__}')
        if len(value) != len(self._items):
            raise InvalidInputError(f'expected a tuple of length {len(self._items)}, got {len(value)}')
        if deep:
            for item, i in zip(self._items, value):
                item._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        encode_tuple(serializer, value, tuple(item.serialize for item in self._items))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        return decode_tuple(deserializer, tuple(item.deserialize for item in self._items))

    def __repr__(self) -> str:
        return f'TupleType({self._items!r})'
