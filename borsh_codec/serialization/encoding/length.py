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

"""
Length prefixes of dynamically sized containers are unsigned 32-bit little-endian integers.

>>> se = Serializer.build_bytes_serializer()
>>> encode_length(se, 2)
>>> encode_length(se, 0x01020304)
>>> bytes(se.finalize()).hex()
'0200000004030201'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff'))
>>> decode_length(de)
4294967295
"""

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import TooLongError

from .int import decode_int, encode_int

LENGTH_PREFIX_SIZE = 4
MAX_LENGTH = 2**(LENGTH_PREFIX_SIZE * 8) - 1


def encode_length(serializer: Serializer, length: int) -> None:
    if length > MAX_LENGTH:
        raise TooLongError(f'length {length} does not fit in the length prefix')
    encode_int(serializer, length, length=LENGTH_PREFIX_SIZE, signed=False)


def decode_length(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)
