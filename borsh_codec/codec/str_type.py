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
from borsh_codec.serialization.encoding.utf8 import decode_utf8, encode_utf8


class StrType(BorshType[str]):
    """ Represents builtin `str` values, as UTF-8 with a length prefix.
    """

    __slots__ = ()

    @override
    def min_size(self) -> int:
        return 4

    @override
    def default(self) -> str:
        return ''

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise InvalidInputError(f'expected str, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        encode_utf8(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return decode_utf8(deserializer)
