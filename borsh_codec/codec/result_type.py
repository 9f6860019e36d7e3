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

from typing_extensions import override

from borsh_codec.codec.borsh_type import BorshType
from borsh_codec.serialization import Deserializer, InvalidInputError, Serializer
from borsh_codec.serialization.compound_encoding.result import decode_result, encode_result
from borsh_codec.utils.result import Err, Ok, Result

V = TypeVar('V')
E = TypeVar('E')


class ResultType(BorshType[Result[V, E]]):
    """ Represents a two-armed outcome, either `Ok(V)` or `Err(E)`.
    """

    __slots__ = ('_ok', '_err')

    _ok: BorshType[V]
    _err: BorshType[E]

    def __init__(self, ok: BorshType[V], err: BorshType[E]) -> None:
        self._ok = ok
        self._err = err

    @override
    def min_size(self) -> int:
        return 1 + min(self._ok.min_size(), self._err.min_size())

    @override
    def sort_key(self, value: Result[V, E], /) -> Any:
        match value:
            case Ok(inner):
                return (0, self._ok.sort_key(inner))
            case Err(inner):
                return (1, self._err.sort_key(inner))
        raise InvalidInputError(f'expected Ok or Err, got {type(value).__name__}')

    @override
    def _check_value(self, value: Result[V, E], /, *, deep: bool) -> None:
        match value:
            case Ok(inner):
                if deep:
                    self._ok._check_value(inner, deep=True)
            case Err(inner):
                if deep:
                    self._err._check_value(inner, deep=True)
            case _:
                raise InvalidInputError(f'expected Ok or Err, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: Result[V, E], /) -> None:
        encode_result(serializer, value, self._ok.serialize, self._err.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[V, E]:
        return decode_result(deserializer, self._ok.deserialize, self._err.deserialize)

    def __repr__(self) -> str:
        return f'ResultType({self._ok!r}, {self._err!r})'
