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

from enum import Enum
from typing import Any, TypeVar

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidDiscriminantError, InvalidInputError, Serializer

T = TypeVar('T', bound=Enum)


class EnumType(BorshType[T]):
    """ Represents members of an `enum.Enum` class, a tagged union where no variant has a payload.

    A member is encoded as its position in the class, its value is not used.
    """

    __slots__ = ('_enum_class', '_members', '_index')

    _enum_class: type[T]
    _members: tuple[T, ...]
    _index: dict[T, int]

    def __init__(self, enum_class: type[T]) -> None:
        self._enum_class = enum_class
        self._members = tuple(enum_class)
        self._index = {member: index for index, member in enumerate(self._members)}

    @property
    def members(self) -> tuple[T, ...]:
        return self._members

    @override
    def min_size(self) -> int:
        return 1

    @override
    def sort_key(self, value: T, /) -> Any:
        return self._index[value]

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise InvalidInputError(f'expected {self._enum_class.__name__}, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        serializer.write_byte(self._index[value])

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        pos = deserializer.cur_pos()
        index = deserializer.read_byte()
        if index >= len(self._members):
            raise InvalidDiscriminantError(
                f'unexpected variant index {index} for {self._enum_class.__name__} at position {pos}',
                value=index,
                position=pos,
            )
        return self._members[index]

    def __repr__(self) -> str:
        return f'EnumType({self._enum_class.__name__})'
