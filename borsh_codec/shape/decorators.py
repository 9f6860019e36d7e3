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
Front end that turns plain Python classes into declared shapes.

Records are dataclasses (or `NamedTuple` classes) and tagged unions are classes whose variants are dataclasses nested in
their body, in declaration order:

>>> @borsh_struct
... class Point:
...     x: str
...     y: bool
...     label: str = skip(default='')
>>> [(f.name, f.skip) for f in get_record_shape(Point).fields]
[('x', False), ('y', False), ('label', True)]

>>> @borsh_enum
... class Shape:
...     class Empty:
...         pass
...     @borsh_struct(positional=True, frozen=True)
...     class Circle:
...         radius: str
>>> [(v.index, v.name, v.record.positional) for v in get_union_shape(Shape).variants]
[(0, 'Empty', False), (1, 'Circle', True)]
>>> type_of_value(Shape.Circle("r")) is Shape
True
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, get_type_hints, overload

from borsh_codec.serialization.exceptions import UnsupportedTypeError
from borsh_codec.shape.model import FieldShape, RecordShape, UnionShape, VariantShape

T = TypeVar('T', bound=type)

SKIP_KEY = 'borsh_skip'
STRUCT_ATTR = '__borsh_struct__'
ENUM_ATTR = '__borsh_enum__'
VARIANT_OF_ATTR = '__borsh_variant_of__'

# a single byte discriminant can't address more than this
MAX_ENUM_VARIANTS = 256


@dataclass(frozen=True, slots=True)
class StructOptions:
    positional: bool = False
    init: Optional[str] = None


def skip(
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    init: bool = True,
    repr: bool = True,
    compare: bool = True,
) -> Any:
    """ Declare a dataclass field that is never written and is filled with a default when decoding.

    Without `default` nor `default_factory` the default value of the field's type is used (zero, empty string, empty
    collection, `None` for options and so on).
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        init=init,
        repr=repr,
        compare=compare,
        metadata={SKIP_KEY: True},
    )


@overload
def borsh_struct(cls: T, /) -> T:
    ...


@overload
def borsh_struct(
    cls: None = None,
    /,
    *,
    positional: bool = False,
    init: Optional[str] = None,
    **dataclass_kwargs: Any,
) -> Callable[[T], T]:
    ...


def borsh_struct(
    cls: Optional[T] = None,
    /,
    *,
    positional: bool = False,
    init: Optional[str] = None,
    **dataclass_kwargs: Any,
) -> T | Callable[[T], T]:
    """ Mark a class as a record, turning it into a dataclass if it isn't one already.

    `positional=True` describes the fields by position only in the schema and `init='method_name'` calls that method
    on every decoded value. Extra keyword arguments are forwarded to `dataclasses.dataclass`.
    """
    def wrap(cls: T) -> T:
        if not dataclasses.is_dataclass(cls):
            cls = dataclass(**dataclass_kwargs)(cls)
        elif dataclass_kwargs:
            raise TypeError(f'{cls.__name__} is already a dataclass, dataclass options cannot be applied')
        if init is not None and not callable(getattr(cls, init, None)):
            raise TypeError(f'{cls.__name__} has no method {init!r} to use as init hook')
        setattr(cls, STRUCT_ATTR, StructOptions(positional=positional, init=init))
        return cls

    if cls is None:
        return wrap
    return wrap(cls)


def borsh_enum(cls: T, /) -> T:
    """ Mark a class as a tagged union, its variants are the classes nested in its body.

    Variants that aren't dataclasses already are made frozen dataclasses. The position of a variant in the class body
    is its discriminant, so reordering variants changes the format.
    """
    variants: list[type] = []
    for name, member in list(vars(cls).items()):
        if not isinstance(member, type) or member.__qualname__ != f'{cls.__qualname__}.{name}':
            continue
        if not dataclasses.is_dataclass(member):
            member = dataclass(frozen=True)(member)
        setattr(member, VARIANT_OF_ATTR, cls)
        variants.append(member)
    if len(variants) > MAX_ENUM_VARIANTS:
        raise UnsupportedTypeError(f'{cls.__name__} has {len(variants)} variants, at most {MAX_ENUM_VARIANTS} allowed')
    setattr(cls, ENUM_ATTR, tuple(variants))
    return cls


def is_union_class(class_: type) -> bool:
    return ENUM_ATTR in vars(class_)


def is_record_class(class_: type) -> bool:
    return dataclasses.is_dataclass(class_) or _is_namedtuple(class_)


def _is_namedtuple(class_: type) -> bool:
    return issubclass(class_, tuple) and hasattr(class_, '_fields')


def type_of_value(value: Any) -> type:
    """ The type to use when encoding `value` and no type was given, variants are encoded as their union."""
    class_ = type(value)
    return vars(class_).get(VARIANT_OF_ATTR, class_)


def _default_factory(field: dataclasses.Field) -> Optional[Callable[[], Any]]:
    if field.default is not dataclasses.MISSING:
        default = field.default
        return lambda: default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory
    return None


def get_record_shape(
    class_: type,
    *,
    type_params: Optional[tuple[TypeVar, ...]] = None,
    localns: Optional[dict[str, Any]] = None,
) -> RecordShape:
    """ Build the shape of a record class, forward references are resolved at this point."""
    if not is_record_class(class_):
        raise UnsupportedTypeError(f'{class_.__name__} is neither a dataclass nor a NamedTuple')
    options = vars(class_).get(STRUCT_ATTR) or StructOptions()
    try:
        hints = get_type_hints(class_, localns=localns, include_extras=True)
    except NameError as e:
        raise UnsupportedTypeError(f'cannot resolve the annotations of {class_.__name__}: {e}') from e
    fields: tuple[FieldShape, ...]
    positional = options.positional
    if _is_namedtuple(class_):
        fields = tuple(FieldShape(name, hints[name]) for name in class_._fields)  # type: ignore[attr-defined]
        positional = True
    else:
        fields = tuple(
            FieldShape(
                name=field.name,
                type_=hints[field.name],
                skip=bool(field.metadata.get(SKIP_KEY, False)),
                init=field.init,
                default_factory=_default_factory(field),
            )
            for field in dataclasses.fields(class_)
        )
    return RecordShape(
        name=class_.__name__,
        class_=class_,
        fields=fields,
        type_params=tuple(getattr(class_, '__parameters__', ())) if type_params is None else type_params,
        positional=positional,
        init=options.init,
    )


def get_union_shape(class_: type) -> UnionShape:
    """ Build the shape of a tagged union class, each variant's payload is a record shape."""
    if not is_union_class(class_):
        raise UnsupportedTypeError(f'{class_.__name__} is not a @borsh_enum class')
    type_params = tuple(getattr(class_, '__parameters__', ()))
    localns = {class_.__name__: class_, **vars(class_)}
    variants = tuple(
        VariantShape(
            name=variant.__name__,
            index=index,
            record=get_record_shape(variant, type_params=type_params, localns=localns),
        )
        for index, variant in enumerate(vars(class_)[ENUM_ATTR])
    )
    return UnionShape(name=class_.__name__, class_=class_, variants=variants, type_params=type_params)
