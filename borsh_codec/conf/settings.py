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

from pathlib import Path
from typing import Optional, Union

from pydantic import Field

from borsh_codec.serialization.hint import DEFAULT_ALLOC_CEILING_BYTES
from borsh_codec.shape.decorators import MAX_ENUM_VARIANTS
from borsh_codec.utils import pydantic
from borsh_codec.utils.yaml import model_from_extended_yaml

DEFAULT_MAX_DEPTH = 64


class CodecSettings(pydantic.BaseModel):
    """ Tunables of the codec, instances are immutable and passed explicitly to the operations that use them.
    """

    # How many bytes worth of elements a decoder reserves up-front for a length-prefixed collection, the declared
    # length of a collection can't be trusted, so memory is only reserved up to this amount and grows as elements are
    # actually decoded.
    alloc_ceiling_bytes: int = Field(default=DEFAULT_ALLOC_CEILING_BYTES, ge=1)

    # Tagged unions with more variants than this are refused when a codec is built, it can only be lowered because a
    # single byte discriminant can't address more than 256 variants.
    max_enum_variants: int = Field(default=MAX_ENUM_VARIANTS, ge=1, le=MAX_ENUM_VARIANTS)

    # When set, `encode` fails with `MaxBytesExceededError` instead of producing an output larger than this, it can
    # still be overridden on each call.
    default_encode_max_bytes: Optional[int] = Field(default=None, ge=0)

    # How many records a decoded value can nest inside each other, deeper input fails with `DepthLimitExceededError`.
    # Decoding recurses once per level, so values much above the default run into the interpreter recursion limit.
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)


DEFAULT_SETTINGS = CodecSettings()


def load_settings(filepath: Union[Path, str]) -> CodecSettings:
    """ Load settings from a yaml file, the file can extend another one through the `extends` key.
    """
    return model_from_extended_yaml(CodecSettings, filepath=filepath)
