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

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.encoding.int import decode_int, encode_int

# name -> (byte size, signed)
INT_SPECS: dict[str, tuple[int, bool]] = {
    'u8': (1, False),
    'u16': (2, False),
    'u32': (4, False),
    'u64': (8, False),
    'u128': (16, False),
    'i8': (1, True),
    'i16': (2, True),
    'i32': (4, True),
    'i64': (8, True),
    'i128': (16, True),
}


class SizedIntType(BorshType[int]):
    """ Represents `int` values with a fixed size and signedness, encoded in little-endian.
    """

    __slots__ = ('_name', '_byte_size', '_signed')

    _name: str
    _byte_size: int
    _signed: bool

    def __init__(self, name: str) -> None:
        self._name = name
        self._byte_size, self._signed = INT_SPECS[name]

    @property
    def name(self) -> str:
        return self._name

    def _upper_bound_value(self) -> int:
        if self._signed:
            return 2**(self._byte_size * 8 - 1) - 1
        else:
            return 2**(self._byte_size * 8) - 1

    def _lower_bound_value(self) -> int:
        if self._signed:
            return -(2**(self._byte_size * 8 - 1))
        else:
            return 0

    @override
    def min_size(self) -> int:
        return self._byte_size

    @override
    def default(self) -> int:
        return 0

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidInputError(f'expected int for {self._name}, got {type(value).__name__}')
        if not self._lower_bound_value() <= value <= self._upper_bound_value():
            raise InvalidInputError(f'{value} is out of range for {self._name}')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)

    def __repr__(self) -> str:
        return f'SizedIntType({self._name!r})'
