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
Type vocabulary used in annotations of encodable values.

Python has a single `int` and a single `float`, the width of each one on the wire must be given by one of the NewTypes
below, plain `int` is not accepted by the codec, plain `float` is the same as `f64`.

>>> from typing import get_args
>>> get_args(Array[u8, 4])
(tuple[borsh_codec.types.u8, ...], ArrayLength(length=4))
>>> Box[u64] is u64
True
"""

from dataclasses import dataclass
from typing import Annotated, Any, NewType

from borsh_codec.utils.result import Err, Ok, OkErr, Result

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)
u128 = NewType('u128', int)
i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)
i128 = NewType('i128', int)
f32 = NewType('f32', float)
f64 = NewType('f64', float)


@dataclass(frozen=True, slots=True)
class ArrayLength:
    """ Metadata attached to `tuple[T, ...]` to make it a fixed-size array."""
    length: int


class Array:
    """ A fixed-size array, `Array[T, N]` is encoded as N consecutive values of `T`, without any length prefix.

    Values are tuples (lists are accepted when encoding), the annotation is an alias of
    `Annotated[tuple[T, ...], ArrayLength(N)]`.
    """

    def __class_getitem__(cls, params: Any) -> Any:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError('expected Array[<type>, <length>]')
        item_type, length = params
        if not isinstance(length, int) or isinstance(length, bool) or length < 0:
            raise TypeError(f'array length must be a non-negative int, got {length!r}')
        return Annotated[tuple[item_type, ...], ArrayLength(length)]


class Box:
    """ An owning indirection, `Box[T]` is just `T`, there is no extra framing on the wire."""

    def __class_getitem__(cls, item_type: Any) -> Any:
        return item_type


__all__ = [
    'u8',
    'u16',
    'u32',
    'u64',
    'u128',
    'i8',
    'i16',
    'i32',
    'i64',
    'i128',
    'f32',
    'f64',
    'Array',
    'ArrayLength',
    'Box',
    'Ok',
    'Err',
    'OkErr',
    'Result',
]
