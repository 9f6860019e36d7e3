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
The declared shape of composite types.

A shape is what both the codec builder and the schema builder consume: an ordered list of fields for a record, an
ordered list of variants for a tagged union, plus the list of generic type parameters. Shapes are computed from the
class when needed and are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar


@dataclass(frozen=True, slots=True)
class FieldShape:
    """ A single field of a record, in declaration order."""
    name: str
    type_: Any
    skip: bool = False
    init: bool = True
    default_factory: Optional[Callable[[], Any]] = None

    def has_default(self) -> bool:
        return self.default_factory is not None


@dataclass(frozen=True, slots=True)
class RecordShape:
    """ A record (struct), its fields are encoded in order, skipping the skip-marked ones.

    A `positional` record is one whose fields are only known by their position, like a tuple, it only changes how the
    schema describes it. When `init` is given, it's the name of a method that is called on every decoded value.
    """
    name: str
    class_: type
    fields: tuple[FieldShape, ...]
    type_params: tuple[TypeVar, ...] = ()
    positional: bool = False
    init: Optional[str] = None

    def is_namedtuple(self) -> bool:
        return issubclass(self.class_, tuple)

    def wire_fields(self) -> tuple[FieldShape, ...]:
        return tuple(field for field in self.fields if not field.skip)

    def skipped_fields(self) -> tuple[FieldShape, ...]:
        return tuple(field for field in self.fields if field.skip)


@dataclass(frozen=True, slots=True)
class VariantShape:
    """ One variant of a tagged union, the payload is described as a record."""
    name: str
    index: int
    record: RecordShape


@dataclass(frozen=True, slots=True)
class UnionShape:
    """ A tagged union (enum), variants are in declaration order, the position of each one is its discriminant."""
    name: str
    class_: type
    variants: tuple[VariantShape, ...]
    type_params: tuple[TypeVar, ...] = ()

    def variant_of(self, value: Any) -> Optional[VariantShape]:
        for variant in self.variants:
            if type(value) is variant.record.class_:
                return variant
        return None
