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

from borsh_codec.shape.decorators import (
    borsh_enum,
    borsh_struct,
    get_record_shape,
    get_union_shape,
    skip,
    type_of_value,
)
from borsh_codec.shape.model import FieldShape, RecordShape, UnionShape, VariantShape
from borsh_codec.shape.visitor import TypeVisitor

__all__ = [
    'FieldShape',
    'RecordShape',
    'VariantShape',
    'UnionShape',
    'TypeVisitor',
    'borsh_struct',
    'borsh_enum',
    'skip',
    'get_record_shape',
    'get_union_shape',
    'type_of_value',
]
