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

from borsh_codec.schema.builder import DeclarationVisitor, DefinitionCollector
from borsh_codec.schema.definitions import Definition, Fields, SchemaContainer
from borsh_codec.schema.helpers import declaration_of, deserialize_with_schema, schema_of, serialize_with_schema

__all__ = [
    'Definition',
    'Fields',
    'SchemaContainer',
    'DeclarationVisitor',
    'DefinitionCollector',
    'declaration_of',
    'schema_of',
    'serialize_with_schema',
    'deserialize_with_schema',
]
