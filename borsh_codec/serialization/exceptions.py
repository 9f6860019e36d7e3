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
Error kinds raised by the serialization system.

All errors caused by the bytes being (de)serialized derive from `SerializationError`, which is a `ValueError` so that
callers that only care about "bad input" can catch a single builtin class. Errors caused by the type graph itself
(unsupported annotations, declaration collisions) are programming errors and don't derive from it.
"""


class SerializationError(ValueError):
    """ Base class for every recoverable (de)serialization error."""


class OutOfDataError(SerializationError):
    """ Fewer bytes remain than a read requires."""


class InvalidInputError(SerializationError):
    """ The value or the framing is invalid, for example a NaN float or an out of range integer."""


class InvalidDiscriminantError(InvalidInputError):
    """ A bool/option/result/union discriminant byte is outside of its valid set.

    The offending byte value and its position in the input are kept so callers can report them.
    """

    def __init__(self, message: str, *, value: int, position: int | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.position = position


class BadDataError(SerializationError):
    """ The bytes are correctly framed but not valid for the target type (non UTF-8 string, NaN bit pattern)."""


class TrailingDataError(SerializationError):
    """ A value was successfully decoded but not all bytes were consumed."""


class DepthLimitExceededError(SerializationError):
    """ The input nests values of a recursive type deeper than the configured limit."""


class SchemaMismatchError(BadDataError):
    """ The schema prefixed to the data does not match the schema of the requested type."""


class TooLongError(SerializationError):
    """ A length does not fit in the length prefix of the format."""


class UnsupportedTypeError(TypeError):
    """ The given type annotation cannot be mapped to any codec."""


class SchemaRedefinitionError(AssertionError):
    """ Two different definitions were found for the same declaration.

    This indicates that two distinct types produce the same declaration name, which is a defect in the type graph and
    not in the data, so it is not meant to be handled.
    """
