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

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, final

from borsh_codec.serialization import Deserializer, Serializer, UnsupportedTypeError

T = TypeVar('T')


class BorshType(ABC, Generic[T]):
    """ This class is used to model a type with a known type signature and how it will be (de)serialized.

    Instances are built from type annotations by `CodecBuilder` and are immutable once built, so a single instance can
    be shared and used concurrently to encode and decode any number of values.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise `InvalidInputError` if the value is not compatible with this type, recursing into compound values.
        """
        # XXX: subclasses must implement BorshType._check_value, not BorshType.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value instance according to the signature that was abstracted.

        Serialization includes calling check_value while the value is being serialized, so calling check_value before
        calling serialize is not needed.
        """
        # XXX: subclasses must implement BorshType._serialize, not BorshType.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Deserialize a value instance according to the signature that was abstracted.

        The deserializer is left right after the value, so this can be used to decode a value that is part of a larger
        input.
        """
        # XXX: subclasses must implement BorshType._deserialize, not BorshType.deserialize
        return self._deserialize(deserializer)

    @final
    def to_bytes(self, value: T, /, *, max_bytes: Optional[int] = None) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer.with_optional_max_bytes(max_bytes), value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: bytes, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes`, all of the bytes must be used by the value.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    @abstractmethod
    def min_size(self) -> int:
        """ The smallest number of bytes any value of this type is encoded into.

        It's used to bound how many elements a length prefix can claim for the remaining input.
        """
        raise NotImplementedError

    def default(self) -> T:
        """ Default value for this type, used for skip-marked fields that don't declare their own default.
        """
        raise UnsupportedTypeError(f'{self!r} has no default value')

    def sort_key(self, value: T, /) -> Any:
        """ Key used to order values when they are members of a set or keys of a map.

        It must give the same ordering as comparing the values field by field, variants by their index, sequences
        lexicographically and `None` before anything else.
        """
        return value

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `BorshType.check_value`.

        Compound values should use `BorshType._check_value` on the inner type(s) instead of `BorshType.check_value` and
        pass the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the give value has been "shallow checked".

        When implementing the serialization with compound encoders, `BorshType.serialize` should be passed as an
        `Encoder` instead of `BorshType._serialize`, so the next implementation can assume that the value was checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`, it is expected that deserializers always produce valid values.
        """
        raise NotImplementedError
