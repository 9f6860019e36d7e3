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
from borsh_codec.serialization.encoding.unit import decode_unit, encode_unit


class UnitType(BorshType[None]):
    """ Represents `None`, it takes no space at all.
    """

    __slots__ = ()

    @override
    def min_size(self) -> int:
        return 0

    @override
    def default(self) -> None:
        return None

    @override
    def sort_key(self, value: None, /) -> Any:
        return 0

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise InvalidInputError(f'expected None, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: None, /) -> None:
        encode_unit(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> None:
        decode_unit(deserializer)
