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

from __future__ import annotations

from typing import Any, TypeVar

from structlog import get_logger

from borsh_codec.codec.builder import build_codec
from borsh_codec.conf.settings import DEFAULT_SETTINGS, CodecSettings
from borsh_codec.schema.builder import DeclarationVisitor, DefinitionCollector
from borsh_codec.schema.definitions import SchemaContainer
from borsh_codec.serialization import Deserializer, SchemaMismatchError, Serializer

logger = get_logger()

T = TypeVar('T')


def declaration_of(type_: Any) -> str:
    """ The declaration of a type.

    >>> from borsh_codec.types import u64
    >>> declaration_of(list[u64 | None])
    'Vec<Option<u64>>'
    """
    return DeclarationVisitor().visit(type_)


def schema_of(type_: Any) -> SchemaContainer:
    """ Build the schema container of a type, a new container is built on every call.

    >>> from borsh_codec.types import u64
    >>> container = schema_of(dict[u64, str])
    >>> container.declaration
    'HashMap<u64, string>'
    >>> sorted(container.definitions)
    ['HashMap<u64, string>', 'Tuple<u64, string>']
    """
    collector = DefinitionCollector()
    collector.visit(type_)
    container = SchemaContainer(declaration=declaration_of(type_), definitions=collector.definitions)
    logger.debug('schema container built', declaration=container.declaration, definitions=len(container.definitions))
    return container


def serialize_with_schema(
    serializer: Serializer,
    value: Any,
    type_: Any,
    *,
    settings: CodecSettings = DEFAULT_SETTINGS,
) -> None:
    """ Write the schema container of `type_` followed by the value."""
    build_codec(SchemaContainer, settings=settings).serialize(serializer, schema_of(type_))
    build_codec(type_, settings=settings).serialize(serializer, value)


def deserialize_with_schema(
    deserializer: Deserializer,
    type_: Any,
    *,
    settings: CodecSettings = DEFAULT_SETTINGS,
) -> Any:
    """ Read a schema container and a value, the container must be the same as the schema of `type_`.

    Both are read before comparing them, so a value that can't be decoded is reported as such even if the schema
    doesn't match.
    """
    found = build_codec(SchemaContainer, settings=settings).deserialize(deserializer)
    value = build_codec(type_, settings=settings).deserialize(deserializer)
    expected = schema_of(type_)
    if found != expected:
        logger.debug('schema mismatch detected', expected=expected.declaration, found=found.declaration)
        raise SchemaMismatchError('schema does not match')
    return value
