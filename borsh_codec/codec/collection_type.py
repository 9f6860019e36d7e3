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

from abc import ABC
from collections.abc import Collection, Hashable, Iterable, Set
from typing import Any, Callable, TypeVar

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.codec.sized_int_type import SizedIntType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.compound_encoding.collection import decode_collection, encode_collection
from borsh_codec.serialization.compound_encoding.set import decode_set, encode_set
from borsh_codec.serialization.encoding.bytes import decode_bytes, encode_bytes
from borsh_codec.serialization.hint import DEFAULT_ALLOC_CEILING_BYTES

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


def is_byte_type(item: BorshType) -> bool:
    """ Whether values of this type are a single unsigned byte, collections of those can be copied in bulk."""
    return isinstance(item, SizedIntType) and item.name == 'u8'


def as_bytes(value: Iterable[Any]) -> bytes | None:
    """ Bulk conversion of a collection of byte values, `None` when some element isn't a valid byte.

    When `None` is returned the caller falls back to the element by element path, which reports the invalid element.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if any(isinstance(i, bool) for i in value):
        return None
    try:
        return bytes(value)
    except (TypeError, ValueError):
        return None


class _CollectionType(BorshType[Collection[T]], ABC):
    """ Used as base for classes that represent length-prefixed collections.
    """

    __slots__ = ('_item', '_builder', '_ceiling_bytes')

    _item: BorshType[T]
    _builder: Callable[[Iterable[T]], Collection[T]]
    _ceiling_bytes: int

    def __init__(
        self,
        item: BorshType[T],
        builder: Callable[[Iterable[T]], Collection[T]],
        *,
        ceiling_bytes: int = DEFAULT_ALLOC_CEILING_BYTES,
    ) -> None:
        self._item = item
        self._builder = builder
        self._ceiling_bytes = ceiling_bytes

    @property
    def item(self) -> BorshType[T]:
        return self._item

    @override
    def min_size(self) -> int:
        return 4

    @override
    def default(self) -> Collection[T]:
        return self._builder(())

    def _check_item(self, item: T) -> None:
        self._item._check_value(item, deep=True)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes, bytearray)):
            raise InvalidInputError(f'expected a collection, got {type(value).__name__}')
        if deep:
            for i in value:
                self._check_item(i)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._item!r}, {self._builder.__name__})'


class SequenceType(_CollectionType[T]):
    """ Represents `list`, `tuple[T, ...]` and `collections.deque` values, elements are kept in order.

    Sequences of `u8` take a bulk path that reads and writes all the elements at once, the bytes are the same.
    """

    __slots__ = ()

    @override
    def sort_key(self, value: Collection[T], /) -> Any:
        return tuple(self._item.sort_key(i) for i in value)

    @override
    def _serialize(self, serializer: Serializer, value: Collection[T], /) -> None:
        if is_byte_type(self._item) and (data := as_bytes(value)) is not None:
            encode_bytes(serializer, data)
            return
        encode_collection(serializer, value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Collection[T]:
        if is_byte_type(self._item):
            return self._builder(decode_bytes(deserializer))  # type: ignore[arg-type]
        return decode_collection(
            deserializer,
            self._item.deserialize,
            self._builder,
            element_size=self._item.min_size(),
            ceiling_bytes=self._ceiling_bytes,
        )


class SetType(_CollectionType[H]):
    """ Represents `set` and `frozenset` values, members are always written in ascending order.
    """

    __slots__ = ()

    @override
    def sort_key(self, value: Collection[H], /) -> Any:
        return tuple(sorted(self._item.sort_key(i) for i in value))

    @override
    def _check_value(self, value: Collection[H], /, *, deep: bool) -> None:
        if not isinstance(value, Set):
            raise InvalidInputError(f'expected a set, got {type(value).__name__}')
        super()._check_value(value, deep=deep)

    @override
    def _serialize(self, serializer: Serializer, value: Collection[H], /) -> None:
        encode_set(serializer, value, self._item.serialize, sort_key=self._item.sort_key)  # type: ignore[arg-type]

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Collection[H]:
        return decode_set(
            deserializer,
            self._item.deserialize,
            self._builder,  # type: ignore[arg-type]
            element_size=self._item.min_size(),
            ceiling_bytes=self._ceiling_bytes,
        )
