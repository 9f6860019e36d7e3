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
A set is encoded as a collection, but its members are written in ascending order instead of iteration order, two sets
with the same members always produce the same bytes.

Layout: [N: u32 little-endian][smallest member]...[largest member]

>>> from borsh_codec.serialization.encoding.int import encode_int, decode_int
>>> from functools import partial
>>> encode_u8 = partial(encode_int, length=1, signed=False)
>>> decode_u8 = partial(decode_int, length=1, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_set(se, {3, 1, 2}, encode_u8)
>>> bytes(se.finalize()).hex()
'03000000010203'

A `sort_key` can be given for members that are not naturally ordered, it must agree with the members' equality:

>>> se = Serializer.build_bytes_serializer()
>>> encode_set(se, frozenset({3, 1, 2}), encode_u8, sort_key=lambda x: -x)
>>> bytes(se.finalize()).hex()
'03000000030201'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03000000010203'))
>>> sorted(decode_set(de, decode_u8, frozenset, element_size=1))
[1, 2, 3]
>>> de.finalize()
"""

from collections.abc import Iterable, Set
from typing import Any, Callable, Optional, TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.hint import DEFAULT_ALLOC_CEILING_BYTES

from . import Decoder, Encoder
from .collection import decode_collection, encode_collection

T = TypeVar('T')
R = TypeVar('R', bound=Set)


def encode_set(
    serializer: Serializer,
    values: Set[T],
    encoder: Encoder[T],
    *,
    sort_key: Optional[Callable[[T], Any]] = None,
) -> None:
    encode_collection(serializer, sorted(values, key=sort_key), encoder)  # type: ignore[type-var, arg-type]


def decode_set(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    element_size: int = 1,
    ceiling_bytes: int = DEFAULT_ALLOC_CEILING_BYTES,
) -> R:
    return decode_collection(deserializer, decoder, builder, element_size=element_size, ceiling_bytes=ceiling_bytes)
