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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`. The prefix is
the number of encoded bytes, not the number of characters.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 06000000666f6f626172
>>> encode_utf8(se, 'π')  # writes 02000000cf80
>>> bytes(se.finalize()).hex()
'06000000666f6f62617202000000cf80'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06000000666f6f62617202000000cf80'))
>>> decode_utf8(de)  # reads 06000000666f6f626172
'foobar'
>>> decode_utf8(de)  # reads 02000000cf80
'π'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes([1, 0, 0, 0, 0xc0]))
>>> try:
...     decode_utf8(de)
... except ValueError as e:
...     print(type(e).__name__)
BadDataError
"""

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import BadDataError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    encode_bytes(serializer, data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    data = decode_bytes(deserializer)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise BadDataError(str(e)) from e
