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

import struct
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator

from .exceptions import DepthLimitExceededError
from .types import Buffer

if TYPE_CHECKING:
    from .bytes_deserializer import BytesDeserializer


class Deserializer(ABC):
    """ Read side of the serialization system, a cursor that only moves forward.

    Every read checks the remaining length before touching the data and raises `OutOfDataError` when there isn't
    enough of it, higher layers rely on this instead of doing their own bounds checks.
    """

    # how many levels of `nested` are currently open
    _depth: int = 0

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @abstractmethod
    def cur_pos(self) -> int:
        """How many bytes were consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def remaining(self) -> int:
        """How many bytes are left to be read."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.remaining() == 0

    @abstractmethod
    def peek_byte(self) -> int:
        """Read a single byte but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n single byte but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n bytes, when exact=True it errors if there isn't enough data"""
        # XXX: this is a blanket implementation that is an example of the behavior, this implementation has to be
        #      explicitly used if needed
        def iter_bytes() -> Iterator[int]:
            for _ in range(n):
                if not exact and self.is_empty():
                    break
                yield self.read_byte()
        return bytes(iter_bytes())

    @abstractmethod
    def read_all(self) -> Buffer:
        """Read all bytes until the reader is empty."""
        # XXX: it is recommended that implementors of Deserializer specialize this implementation
        def iter_bytes() -> Iterator[int]:
            while not self.is_empty():
                yield self.read_byte()
        return bytes(iter_bytes())

    def read_struct(self, format: str) -> tuple[Any, ...]:
        size = struct.calcsize(format)
        data = self.read_bytes(size)
        return struct.unpack_from(format, data)

    @contextmanager
    def nested(self, max_depth: int) -> Iterator[None]:
        """ Open one level of nesting of a value that can contain itself, it's closed when the block exits.

        Raises `DepthLimitExceededError` when `max_depth` levels are already open, deeply nested input then fails with
        a `SerializationError` instead of exhausting the interpreter stack.
        """
        if self._depth >= max_depth:
            raise DepthLimitExceededError(f'nesting deeper than {max_depth} levels at position {self.cur_pos()}')
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
