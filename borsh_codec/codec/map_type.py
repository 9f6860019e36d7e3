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

from collections.abc import Hashable, Iterable, Mapping
from typing import Any, Callable, TypeVar

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from borsh_codec.serialization.hint import DEFAULT_ALLOC_CEILING_BYTES

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class MapType(BorshType[Mapping[K, V]]):
    """ Represents `dict` and `Mapping` values, entries are always written in ascending key order.
    """

    __slots__ = ('_key', '_value', '_builder', '_ceiling_bytes')

    _key: BorshType[K]
    _value: BorshType[V]
    _builder: Callable[[Iterable[tuple[K, V]]], Mapping[K, V]]
    _ceiling_bytes: int

    def __init__(
        self,
        key: BorshType[K],
        value: BorshType[V],
        builder: Callable[[Iterable[tuple[K, V]]], Mapping[K, V]] = dict,
        *,
        ceiling_bytes: int = DEFAULT_ALLOC_CEILING_BYTES,
    ) -> None:
        self._key = key
        self._value = value
        self._builder = builder
        self._ceiling_bytes = ceiling_bytes

    @property
    def key(self) -> BorshType[K]:
        return self._key

    @property
    def value(self) -> BorshType[V]:
        return self._value

    @override
    def min_size(self) -> int:
        return 4

    @override
    def default(self) -> Mapping[K, V]:
        return self._builder(())

    @override
    def sort_key(self, value: Mapping[K, V], /) -> Any:
        return tuple(sorted((self._key.sort_key(k), self._value.sort_key(v)) for k, v in value.items()))

    @override
    def _check_value(self, value: Mapping[K, V], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise InvalidInputError(f'expected a mapping, got {type(value).__name__}')
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Mapping[K, V], /) -> None:
        encode_mapping(serializer, value, self._key.serialize, self._value.serialize, sort_key=self._key.sort_key)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Mapping[K, V]:
        return decode_mapping(
            deserializer,
            self._key.deserialize,
            self._value.deserialize,
            self._builder,
            element_size=self._key.min_size() + self._value.min_size(),
            ceiling_bytes=self._ceiling_bytes,
        )

    def __repr__(self) -> str:
        return f'MapType({self._key!r}, {self._value!r})'
