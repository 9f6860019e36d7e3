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
A result is a two-armed outcome, prefixed by a 1-byte discriminant.

Layout:

    [0x00][error] when Err
    [0x01][value] when Ok

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from borsh_codec.serialization.encoding.int import encode_int, decode_int
>>> from functools import partial
>>> encode_u8 = partial(encode_int, length=1, signed=False)
>>> decode_u8 = partial(decode_int, length=1, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_result(se, Ok(7), encode_u8, encode_utf8)
>>> encode_result(se, Err('no'), encode_u8, encode_utf8)
>>> bytes(se.finalize()).hex()
'010700020000006e6f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010700020000006e6f'))
>>> decode_result(de, decode_u8, decode_utf8)
Ok(7)
>>> decode_result(de, decode_u8, decode_utf8)
Err('no')
>>> de.finalize()
"""

from typing import TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import InvalidDiscriminantError
from borsh_codec.utils.result import Err, Ok, Result

from . import Decoder, Encoder

T = TypeVar('T')
E = TypeVar('E')

ERR_DISCRIMINANT = 0
OK_DISCRIMINANT = 1


def encode_result(
    serializer: Serializer,
    value: Result[T, E],
    ok_encoder: Encoder[T],
    err_encoder: Encoder[E],
) -> None:
    match value:
        case Ok():
            serializer.write_byte(OK_DISCRIMINANT)
            ok_encoder(serializer, value.ok())
        case Err():
            serializer.write_byte(ERR_DISCRIMINANT)
            err_encoder(serializer, value.err())
        case _:
            raise TypeError('expected Ok or Err')


def decode_result(deserializer: Deserializer, ok_decoder: Decoder[T], err_decoder: Decoder[E]) -> Result[T, E]:
    pos = deserializer.cur_pos()
    flag = deserializer.read_byte()
    if flag == OK_DISCRIMINANT:
        return Ok(ok_decoder(deserializer))
    elif flag == ERR_DISCRIMINANT:
        return Err(err_decoder(deserializer))
    else:
        raise InvalidDiscriminantError(
            f'invalid result discriminant {flag} at position {pos}', value=flag, position=pos
        )
