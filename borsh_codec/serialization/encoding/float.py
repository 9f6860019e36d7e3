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
This module implements encoding of IEEE-754 floats using their little-endian raw bit pattern.

NaN is not allowed in either direction: NaN bit patterns are not portable across architectures (signalling NaNs on
some platforms are quiet NaNs on others), so two nodes could disagree on the bytes of the same value.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 0000c03f
>>> encode_float(se, -2.0, length=8)  # writes 00000000000000c0
>>> bytes(se.finalize()).hex()
'0000c03f00000000000000c0'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c03f00000000000000c0'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=8)
-2.0
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, float('nan'), length=8)
... except ValueError as e:
...     print(*e.args)
for portability reasons NaN cannot be serialized

>>> de = Deserializer.build_bytes_deserializer(bytes([0, 0, 192, 127]))
>>> try:
...     decode_float(de, length=4)
... except ValueError as e:
...     print(*e.args)
for portability reasons NaN cannot be deserialized
"""

import math
import struct

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import BadDataError, InvalidInputError

_FORMATS = {
    4: '<f',
    8: '<d',
}


def _get_format(length: int) -> str:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'unsupported float size: {length}')


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encode a float with the given byte-length (4 or 8), NaN is rejected.
    """
    format = _get_format(length)
    if math.isnan(value):
        raise InvalidInputError('for portability reasons NaN cannot be serialized')
    try:
        serializer.write_struct((value,), format)
    except (struct.error, OverflowError) as e:
        raise InvalidInputError(f'{value} does not fit in a {length * 8}-bit float') from e


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decode a float with the given byte-length (4 or 8), a NaN bit pattern is rejected.
    """
    format = _get_format(length)
    value, = deserializer.read_struct(format)
    if math.isnan(value):
        raise BadDataError('for portability reasons NaN cannot be deserialized')
    return value
