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

from typing import Any, Callable, Optional

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.conf.settings import DEFAULT_MAX_DEPTH
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.shape.model import FieldShape, RecordShape


class RecordType(BorshType[Any]):
    """ Represents instances of a record class, the fields that are not skip-marked are encoded in declaration order.

    Skip-marked fields take no space, when decoding they are filled with their default. The codec is created empty and
    receives its fields from the builder right after, that's what makes recursive types possible. Each decoded record
    counts as one level of nesting against `max_depth`.
    """

    __slots__ = ('_shape', '_fields', '_skipped', '_min_size', '_max_depth')

    _shape: RecordShape
    _fields: Optional[tuple[tuple[FieldShape, BorshType], ...]]
    _skipped: tuple[tuple[FieldShape, Callable[[], Any]], ...]
    _min_size: Optional[int]
    _max_depth: int

    def __init__(self, shape: RecordShape, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._shape = shape
        self._max_depth = max_depth
        self._fields = None
        self._skipped = ()
        self._min_size = None

    def set_fields(
        self,
        fields: tuple[tuple[FieldShape, BorshType], ...],
        skipped: tuple[tuple[FieldShape, Callable[[], Any]], ...],
    ) -> None:
        assert self._fields is None, 'fields can only be set once'
        self._fields = fields
        self._skipped = skipped

    @property
    def shape(self) -> RecordShape:
        return self._shape

    @property
    def fields(self) -> tuple[tuple[FieldShape, BorshType], ...]:
        assert self._fields is not None, 'record codec is not complete'
        return self._fields

    def construct(self, values: dict[str, Any]) -> Any:
        """ Build an instance from the values of all of its fields and call the init hook if there is one."""
        shape = self._shape
        if shape.is_namedtuple():
            value = shape.class_(*(values[field.name] for field in shape.fields))
        else:
            init_kwargs = {field.name: values[field.name] for field in shape.fields if field.init}
            value = shape.class_(**init_kwargs)
            for field in shape.fields:
                if not field.init:
                    object.__setattr__(value, field.name, values[field.name])
        if shape.init is not None:
            getattr(value, shape.init)()
        return value

    @override
    def min_size(self) -> int:
        if self._min_size is None:
            # XXX: a record that contains itself directly can never be built, it counts as 0 while being measured
            self._min_size = 0
            self._min_size = sum(codec.min_size() for _, codec in self.fields)
        return self._min_size

    @override
    def default(self) -> Any:
        values = {field.name: codec.default() for field, codec in self.fields}
        values.update((field.name, factory()) for field, factory in self._skipped)
        return self.construct(values)

    @override
    def sort_key(self, value: Any, /) -> Any:
        return tuple(codec.sort_key(getattr(value, field.name)) for field, codec in self.fields)

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        if not isinstance(value, self._shape.class_):
            raise InvalidInputError(f'expected {self._shape.name} instance, got {type(value).__name__}')
        if deep:
            for field, codec in self.fields:
                codec._check_value(getattr(value, field.name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        for field, codec in self.fields:
            codec.serialize(serializer, getattr(value, field.name))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        values: dict[str, Any] = {}
        with deserializer.nested(self._max_depth):
            for field, codec in self.fields:
                values[field.name] = codec.deserialize(deserializer)
        for field, factory in self._skipped:
            values[field.name] = factory()
        return self.construct(values)

    def __repr__(self) -> str:
        return f'RecordType({self._shape.name})'
