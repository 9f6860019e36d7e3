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
Structural description of types, independent of any decoder.

A type is described by its declaration, a name parametrized by the declarations of its arguments like
`HashMap<u64, string>`, and by the definitions of every compound type it reaches. These classes are declared with the
same front end as any other type, so a schema can itself be encoded and have a schema.
"""

from __future__ import annotations

from dataclasses import dataclass

from borsh_codec.shape.decorators import borsh_enum, borsh_struct
from borsh_codec.types import u32


@borsh_enum
class Fields:
    """ Fields of a struct definition, skip-marked fields are never listed."""

    @borsh_struct(positional=True, frozen=True)
    class NamedFields:
        fields: tuple[tuple[str, str], ...]

    @borsh_struct(positional=True, frozen=True)
    class UnnamedFields:
        fields: tuple[str, ...]

    class Empty:
        pass


@borsh_enum
class Definition:
    """ Definition of a compound type, primitives and strings have none."""

    @dataclass(frozen=True)
    class Array:
        length: u32
        elements: str

    @dataclass(frozen=True)
    class Sequence:
        elements: str

    @dataclass(frozen=True)
    class Tuple:
        elements: tuple[str, ...]

    @dataclass(frozen=True)
    class Enum:
        variants: tuple[tuple[str, str], ...]

    @dataclass(frozen=True)
    class Struct:
        fields: Fields


@borsh_struct(frozen=True)
class SchemaContainer:
    """ The declaration of a type together with the definitions of all the compound types it reaches."""
    declaration: str
    definitions: dict[str, Definition]
