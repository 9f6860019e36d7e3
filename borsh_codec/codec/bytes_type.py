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

from typing import Callable

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.encoding.bytes import decode_bytes, encode_bytes


class BytesType(BorshType[bytes]):
    """ Represents builtin `bytes` and `bytearray` values, the same as a sequence of `u8` but copied in bulk.
    """

    __slots__ = ('_builder',)

    _builder: Callable[[bytes], bytes]

    def __init__(self, builder: Callable[[bytes], bytes] = bytes) -> None:
        self._builder = builder

    @override
    def min_size(self) -> int:
        return 4

    @override
    def default(self) -> bytes:
        return self._builder(b'')

    @override
    def sort_key(self, value: bytes, /) -> bytes:
        return bytes(value)

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InvalidInputError(f'expected bytes, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: bytes, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return self._builder(decode_bytes(deserializer))

    def __repr__(self) -> str:
        return f'BytesType({self._builder.__name__})'
