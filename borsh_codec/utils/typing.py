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

from functools import reduce
from operator import or_
from types import UnionType
from typing import Annotated, Any, Mapping, TypeVar, Union, get_args, get_origin


def is_subclass(cls: type, class_or_tuple: type | tuple[type] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for recursive NewType classes.

    Normal behavior from `issubclass`:

    >>> is_subclass(int, int)
    True
    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, bytes | str)
    False

    But `is_subclass` also works when a NewType is given as arg 1:

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> M = NewType('M', N)
    >>> is_subclass(M, int)
    True
    >>> is_subclass(M, str)
    False
    """
    while (super_type := getattr(cls, '__supertype__', None)) is not None:
        cls = super_type
    return issubclass(cls, class_or_tuple)


def is_union(type_: Any) -> bool:
    """ Whether the annotation is either a `typing.Union` or a `types.UnionType`.

    >>> is_union(int | None)
    True
    >>> from typing import Optional
    >>> is_union(Optional[int])
    True
    >>> is_union(list[int])
    False
    """
    return get_origin(type_) in (Union, UnionType)


def has_type_params(type_: Any) -> bool:
    """ Whether there is any type parameter left anywhere in the given annotation.

    >>> T = TypeVar('T')
    >>> has_type_params(T), has_type_params(list[T]), has_type_params(dict[str, T | None]), has_type_params(list[int])
    (True, True, True, False)
    """
    if isinstance(type_, TypeVar):
        return True
    return any(has_type_params(arg) for arg in get_args(type_) if arg is not Ellipsis)


def substitute_type_params(type_: Any, bindings: Mapping[TypeVar, Any]) -> Any:
    """ Replace the type parameters in an annotation by the types they are bound to.

    Unbound type parameters are kept, callers decide whether that is an error.

    >>> T = TypeVar('T')
    >>> U = TypeVar('U')
    >>> substitute_type_params(dict[T, list[U]], {T: str, U: int})
    dict[str, list[int]]
    >>> substitute_type_params(tuple[T, ...], {T: int})
    tuple[int, ...]
    >>> substitute_type_params(T | None, {T: int})
    int | None
    >>> substitute_type_params(list[U], {T: int})
    list[~U]
    """
    if isinstance(type_, TypeVar):
        return bindings.get(type_, type_)

    if not has_type_params(type_):
        return type_

    args = tuple(substitute_type_params(arg, bindings) if arg is not Ellipsis else arg for arg in get_args(type_))

    if get_origin(type_) is Annotated:
        return Annotated[(args[0], *type_.__metadata__)]

    if is_union(type_):
        # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
        return reduce(or_, args)

    origin = get_origin(type_)
    assert hasattr(origin, '__class_getitem__'), 'we must have an indexable class at this point'
    return origin[args]
