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
A collection is basically any value that has a known size and is iterable.

Layout: [N: u32 little-endian][value_0]...[value_N-1]

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foo', 'π']
>>> encode_collection(se, value, encode_utf8)
>>> bytes(se.finalize()).hex()
'0200000003000000666f6f02000000cf80'

Breakdown of the result:

    02000000: 2 as u32, the total length
    03000000666f6f: 'foo' (with length prefix)
    02000000cf80: 'π' (with length prefix)

When decoding, the builder can be any compatible collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`. The
`element_size` is the minimum number of bytes a single element takes, it's used to reject a length that the input
cannot possibly hold before anything is allocated:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0200000003000000666f6f02000000cf80'))
>>> decode_collection(de, decode_utf8, tuple, element_size=4)
('foo', 'π')
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff0300'))
>>> try:
...     decode_collection(de, decode_utf8, list, element_size=4)
... except ValueError as e:
...     print(*e.args)
unexpected end of input at position 0: 4294967295 elements need at least 17179869180 bytes, 2 left
"""

from collections.abc import Collection, Iterable
from typing import Any, Callable, TypeVar

from structlog import get_logger

from borsh_codec.serialization import Deserializer, OutOfDataError, Serializer
from borsh_codec.serialization.encoding.length import decode_length, encode_length
from borsh_codec.serialization.hint import DEFAULT_ALLOC_CEILING_BYTES, cautious_capacity

from . import Decoder, Encoder

logger = get_logger()

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_length(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    element_size: int = 1,
    ceiling_bytes: int = DEFAULT_ALLOC_CEILING_BYTES,
) -> R:
    pos = deserializer.cur_pos()
    length = decode_length(deserializer)
    remaining = deserializer.remaining()
    element_size = max(element_size, 1)
    if length * element_size > remaining:
        raise OutOfDataError(
            f'unexpected end of input at position {pos}: '
            f'{length} elements need at least {length * element_size} bytes, {remaining} left'
        )
    capacity = cautious_capacity(length, remaining=remaining, element_size=element_size, ceiling_bytes=ceiling_bytes)
    if capacity < length:
        logger.debug('allocation hint clamped', length=length, capacity=capacity)
    items: list[Any] = [None] * min(capacity, length)
    for i in range(length):
        item = decoder(deserializer)
        if i < capacity:
            items[i] = item
        else:
            items.append(item)
    return builder(items)
