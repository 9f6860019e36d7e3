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
Encoding a mapping is equivalent to encoding a collection of 2-tuples, sorted by key so that two mappings with the same
entries always produce the same bytes regardless of insertion order.

Layout: [N: u32 little-endian][key_0][value_0]...[key_N-1][value_N-1]

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from borsh_codec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> value = {
...     'foo': False,
...     'bar': True,
... }
>>> encode_mapping(se, value, encode_utf8, encode_bool)
>>> bytes(se.finalize()).hex()
'02000000030000006261720103000000666f6f00'

Breakdown of the result:

    02000000: 2 as u32, the total length
    03000000626172: 'bar' with length prefix
    01: True
    03000000666f6f: 'foo' with length prefix
    00: False

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02000000030000006261720103000000666f6f00'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict, element_size=5)
{'bar': True, 'foo': False}
>>> de.finalize()
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional, TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.hint import DEFAULT_ALLOC_CEILING_BYTES

from . import Decoder, Encoder
from .collection import decode_collection, encode_collection

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def encode_mapping(
    serializer: Serializer,
    values_mapping: Mapping[KT, VT],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
    *,
    sort_key: Optional[Callable[[KT], Any]] = None,
) -> None:
    def encode_entry(serializer: Serializer, key: KT) -> None:
        key_encoder(serializer, key)
        value_encoder(serializer, values_mapping[key])

    encode_collection(serializer, sorted(values_mapping, key=sort_key), encode_entry)  # type: ignore[type-var]


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
    *,
    element_size: int = 1,
    ceiling_bytes: int = DEFAULT_ALLOC_CEILING_BYTES,
) -> R:
    def decode_entry(deserializer: Deserializer) -> tuple[KT, VT]:
        return key_decoder(deserializer), value_decoder(deserializer)

    return decode_collection(
        deserializer,
        decode_entry,
        mapping_builder,
        element_size=element_size,
        ceiling_bytes=ceiling_bytes,
    )
