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
Deterministic binary codec in the Borsh format.

Types are described with annotations: width-tagged integers from `borsh_codec.types`, builtin containers, records
declared with `@borsh_struct` and tagged unions declared with `@borsh_enum`. Equal values always encode to the same
bytes and decoding never trusts the lengths found in the input.
"""

from borsh_codec.api import (
    codec_for,
    decode_partial,
    decode_strict,
    decode_with_schema,
    encode,
    encode_with_schema,
    infer_type,
)
from borsh_codec.codec import BorshType
from borsh_codec.conf import DEFAULT_SETTINGS, CodecSettings, load_settings
from borsh_codec.schema import Definition, Fields, SchemaContainer, declaration_of, schema_of
from borsh_codec.serialization import (
    BadDataError,
    DepthLimitExceededError,
    Deserializer,
    InvalidDiscriminantError,
    InvalidInputError,
    OutOfDataError,
    SchemaMismatchError,
    SchemaRedefinitionError,
    SerializationError,
    Serializer,
    TooLongError,
    TrailingDataError,
    UnsupportedTypeError,
)
from borsh_codec.serialization.adapters import MaxBytesExceededError
from borsh_codec.shape import borsh_enum, borsh_struct, skip
from borsh_codec.version import __version__

__all__ = [
    '__version__',
    'encode',
    'decode_strict',
    'decode_partial',
    'codec_for',
    'infer_type',
    'encode_with_schema',
    'decode_with_schema',
    'schema_of',
    'declaration_of',
    'BorshType',
    'Serializer',
    'Deserializer',
    'CodecSettings',
    'DEFAULT_SETTINGS',
    'load_settings',
    'Definition',
    'Fields',
    'SchemaContainer',
    'borsh_struct',
    'borsh_enum',
    'skip',
    'SerializationError',
    'OutOfDataError',
    'InvalidInputError',
    'InvalidDiscriminantError',
    'BadDataError',
    'TrailingDataError',
    'DepthLimitExceededError',
    'SchemaMismatchError',
    'TooLongError',
    'MaxBytesExceededError',
    'UnsupportedTypeError',
    'SchemaRedefinitionError',
]
