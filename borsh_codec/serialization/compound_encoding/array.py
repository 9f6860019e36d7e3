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

r"""
A fixed-size array has its length known by both sides, so it is only the concatenation of its elements.

Layout: [value_0]...[value_N-1]

>>> from borsh_codec.serialization.encoding.int import encode_int, decode_int
>>> from functools import partial
>>> encode_u16 = partial(encode_int, length=2, signed=False)
>>> decode_u16 = partial(decode_int, length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, 2, 3], encode_u16, length=3)
>>> bytes(se.finalize()).hex()
'010002000300'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010002000300'))
>>> decode_array(de, decode_u16, length=3)
(1, 2, 3)
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_array(se, [1, 2], encode_u16, length=3)
... except ValueError as e:
...     print(*e.args)
expected an array of length 3, got 2
"""

from collections.abc import Sequence
from typing import TypeVar

from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer

from . import Decoder, Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Sequence[T], encoder: Encoder[T], *, length: int) -> None:
    if len(values) != length:
        raise InvalidInputError(f'expected an array of length {length}, got {len(values)}')
    for value in values:
        encoder(serializer, value)


def decode_array(deserializer: Deserializer, decoder: Decoder[T], *, length: int) -> tuple[T, ...]:
    return tuple(decoder(deserializer) for _ in range(length))
