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

from borsh_codec.codec.array_type import ArrayType
from borsh_codec.codec.bool_type import BoolType
from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.codec.builder import CodecBuilder, build_codec
from borsh_codec.codec.bytes_type import BytesType
from borsh_codec.codec.collection_type import SequenceType, SetType
from borsh_codec.codec.enum_type import EnumType
from borsh_codec.codec.float_type import FloatType
from borsh_codec.codec.map_type import MapType
from borsh_codec.codec.optional_type import OptionalType
from borsh_codec.codec.record_type import RecordType
from borsh_codec.codec.result_type import ResultType
from borsh_codec.codec.sized_int_type import SizedIntType
from borsh_codec.codec.str_type import StrType
from borsh_codec.codec.tuple_type import TupleType
from borsh_codec.codec.union_type import TaggedUnionType
from borsh_codec.codec.unit_type import UnitType

__all__ = [
    'BorshType',
    'CodecBuilder',
    'build_codec',
    'SizedIntType',
    'FloatType',
    'BoolType',
    'UnitType',
    'StrType',
    'BytesType',
    'OptionalType',
    'ResultType',
    'SequenceType',
    'SetType',
    'ArrayType',
    'TupleType',
    'MapType',
    'RecordType',
    'TaggedUnionType',
    'EnumType',
]
