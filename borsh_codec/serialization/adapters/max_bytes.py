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

from typing import TypeVar

from typing_extensions import override

from borsh_codec.serialization.exceptions import SerializationError
from borsh_codec.serialization.serializer import Serializer

from ..types import Buffer
from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class MaxBytesExceededError(SerializationError):
    """ An encoding would be larger than the bound given to `MaxBytesSerializer`.

    The write that fails is not performed, but the output produced up to that point is a truncated value, so the whole
    encoding has failed and the serializer must not be written to again.
    """


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """ Bounds the number of bytes written to the wrapped serializer.

    >>> se = Serializer.build_bytes_serializer()
    >>> bounded = MaxBytesSerializer(se, 3)
    >>> bounded.write_bytes(b'ab')
    >>> bounded.write_bytes(b'cd')
    Traceback (most recent call last):
    ...
    borsh_codec.serialization.adapters.max_bytes.MaxBytesExceededError: cannot write more than 3 bytes
    >>> bytes(se.finalize())
    b'ab'
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        if write_size > self._bytes_left:
            self._bytes_left = -1
            raise MaxBytesExceededError(f'cannot write more than {self._max_bytes} bytes')
        self._bytes_left -= write_size

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(data_view.nbytes)
        super().write_bytes(data_view)
