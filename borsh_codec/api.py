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
Entry points to encode and decode values and to work with their schemas.

Every call builds the codecs it needs, `codec_for` builds one that can be kept and reused.

>>> from borsh_codec.shape import borsh_struct
>>> from borsh_codec.types import u64
>>> @borsh_struct
... class Account:
...     balance: u64
...     owner: str
>>> data = encode(Account(1, 'hi'))
>>> data.hex()
'0100000000000000020000006869'
>>> decode_strict(data, Account)
Account(balance=1, owner='hi')
"""

import enum
from types import NoneType
from typing import Any, Optional

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.codec.builder import build_codec
from borsh_codec.conf.settings import DEFAULT_SETTINGS, CodecSettings
from borsh_codec.schema.helpers import deserialize_with_schema, serialize_with_schema
from borsh_codec.serialization import Deserializer, Serializer, UnsupportedTypeError
from borsh_codec.serialization.types import Buffer
from borsh_codec.shape.decorators import is_record_class, is_union_class, type_of_value

_INFERABLE_BUILTINS = (bool, str, bytes, bytearray, float, NoneType)


def infer_type(value: Any) -> Any:
    """ The type to encode `value` with when no type is given.

    Only values whose class fully determines the format can be used: non-generic records, unions and enums plus `bool`,
    `str`, `bytes`, `float` and `None`. Integers have no width and containers have no element type, those need an
    explicit type.
    """
    type_ = type_of_value(value)
    if type_ in _INFERABLE_BUILTINS or issubclass(type_, enum.Enum):
        return type_
    if is_record_class(type_) or is_union_class(type_):
        if getattr(type_, '__parameters__', ()):
            raise UnsupportedTypeError(f'{type_.__name__} is generic, the type arguments must be given explicitly')
        return type_
    raise UnsupportedTypeError(f'cannot infer the type of a {type_.__name__} value, it must be given explicitly')


def codec_for(type_: Any, *, settings: Optional[CodecSettings] = None) -> BorshType:
    """ Build a codec for the given type annotation, it can be used any number of times and from any thread."""
    return build_codec(type_, settings=settings or DEFAULT_SETTINGS)


def encode(
    value: Any,
    type_: Any = None,
    *,
    max_bytes: Optional[int] = None,
    settings: Optional[CodecSettings] = None,
) -> bytes:
    """ Encode a value, raises `MaxBytesExceededError` if the output would be larger than `max_bytes`."""
    settings = settings or DEFAULT_SETTINGS
    if type_ is None:
        type_ = infer_type(value)
    if max_bytes is None:
        max_bytes = settings.default_encode_max_bytes
    return build_codec(type_, settings=settings).to_bytes(value, max_bytes=max_bytes)


def decode_strict(data: Buffer, type_: Any, *, settings: Optional[CodecSettings] = None) -> Any:
    """ Decode a single value that must use all of the given bytes, raises `TrailingDataError` otherwise."""
    return build_codec(type_, settings=settings or DEFAULT_SETTINGS).from_bytes(data)


def decode_partial(deserializer: Deserializer, type_: Any, *, settings: Optional[CodecSettings] = None) -> Any:
    """ Decode a single value, the deserializer is left at the first byte after it."""
    return build_codec(type_, settings=settings or DEFAULT_SETTINGS).deserialize(deserializer)


def encode_with_schema(
    value: Any,
    type_: Any = None,
    *,
    max_bytes: Optional[int] = None,
    settings: Optional[CodecSettings] = None,
) -> bytes:
    """ Encode the schema container of the type followed by the value."""
    settings = settings or DEFAULT_SETTINGS
    if type_ is None:
        type_ = infer_type(value)
    if max_bytes is None:
        max_bytes = settings.default_encode_max_bytes
    serializer = Serializer.build_bytes_serializer()
    serialize_with_schema(serializer.with_optional_max_bytes(max_bytes), value, type_, settings=settings)
    return bytes(serializer.finalize())


def decode_with_schema(data: Buffer, type_: Any, *, settings: Optional[CodecSettings] = None) -> Any:
    """ Decode data produced by `encode_with_schema`, raises `SchemaMismatchError` if it was made for another type."""
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = deserialize_with_schema(deserializer, type_, settings=settings or DEFAULT_SETTINGS)
    deserializer.finalize()
    return value
