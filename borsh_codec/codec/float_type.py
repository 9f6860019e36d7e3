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

import math

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.encoding.float import decode_float, encode_float

FLOAT_SIZES: dict[str, int] = {
    'f32': 4,
    'f64': 8,
}


class FloatType(BorshType[float]):
    """ Represents IEEE-754 `float` values, NaN is rejected both ways because its bit pattern isn't portable.
    """

    __slots__ = ('_name', '_byte_size')

    _name: str
    _byte_size: int

    def __init__(self, name: str) -> None:
        self._name = name
        self._byte_size = FLOAT_SIZES[name]

    @property
    def name(self) -> str:
        return self._name

    @override
    def min_size(self) -> int:
        return self._byte_size

    @override
    def default(self) -> float:
        return 0.0

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise InvalidInputError(f'expected float for {self._name}, got {type(value).__name__}')
        if math.isnan(value):
            raise InvalidInputError('for portability reasons NaN cannot be serialized')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        encode_float(serializer, value, length=self._byte_size)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> float:
        return decode_float(deserializer, length=self._byte_size)

    def __repr__(self) -> str:
        return f'FloatType({self._name!r})'
