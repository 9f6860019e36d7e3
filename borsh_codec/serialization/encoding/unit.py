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
The unit value (`None`) is encoded with zero bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_unit(se, None)
>>> bytes(se.finalize())
b''

>>> de = Deserializer.build_bytes_deserializer(b'test')
>>> str(decode_unit(de))
'None'
>>> bytes(de.read_all())
b'test'
"""

from borsh_codec.serialization import Deserializer, Serializer


def encode_unit(serializer: Serializer, value: None) -> None:
    assert value is None
    # XXX: zero sized serialization, nothing to do


def decode_unit(deserializer: Deserializer) -> None:
    # XXX: zero sized serialization, nothing to do
    return None
