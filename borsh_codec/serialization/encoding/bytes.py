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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as an
unsigned 32-bit little-endian integer.

This is the bulk path for any sequence of single bytes, the resulting bytes are exactly the same as encoding a
sequence of `u8` one by one.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend 04000000 before writing b'test'
>>> bytes(se.finalize()).hex()
'0400000074657374'

>>> de = Deserializer.build_bytes_deserializer(b'\x04\x00\x00\x00test')
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x04\x00\x00\x00testfoo')
>>> _ = decode_bytes(de)
>>> try:
...     de.finalize()
... except ValueError as e:
...     print(*e.args)
not all bytes read: 3 bytes left at position 8

A length that the remaining input can't satisfy fails before anything is copied:

>>> de = Deserializer.build_bytes_deserializer(b'\xff\xff\xff\xfftest')
>>> try:
...     decode_bytes(de)
... except ValueError as e:
...     print(*e.args)
unexpected end of input at position 4: need 4294967295 bytes, 4 left

Fixed size byte arrays have no length prefix:

>>> se = Serializer.build_bytes_serializer()
>>> encode_fixed_bytes(se, b'abc', length=3)
>>> bytes(se.finalize())
b'abc'
"""

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import InvalidInputError
from borsh_codec.serialization.types import Buffer

from .length import decode_length, encode_length


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data)
    encode_length(serializer, view.nbytes)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequnce with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_length(deserializer)
    return bytes(deserializer.read_bytes(size))


def encode_fixed_bytes(serializer: Serializer, data: Buffer, *, length: int) -> None:
    """ Encodes a byte-sequence of a known length, without prefix.
    """
    view = memoryview(data)
    if view.nbytes != length:
        raise InvalidInputError(f'expected {length} bytes, got {view.nbytes}')
    serializer.write_bytes(view)


def decode_fixed_bytes(deserializer: Deserializer, *, length: int) -> bytes:
    """ Decodes a byte-sequence of a known length, without prefix.
    """
    return bytes(deserializer.read_bytes(length))
