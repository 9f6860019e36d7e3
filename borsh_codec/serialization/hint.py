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
Allocation guard for length-prefixed containers.

A length prefix is attacker controlled, so it can't be trusted when deciding how much memory to reserve before the
elements are actually read. The capacity is clamped to what the remaining input could possibly hold and to a small
fixed ceiling, and it is never below 1.

>>> cautious_capacity(0xFFFF_FFFF, remaining=10, element_size=8)
1
>>> cautious_capacity(3, remaining=1000, element_size=8)
3
>>> cautious_capacity(10_000, remaining=1_000_000, element_size=8)
512
>>> cautious_capacity(10_000, remaining=1_000_000, element_size=1)
4096
>>> cautious_capacity(0, remaining=0, element_size=0)
1
"""

DEFAULT_ALLOC_CEILING_BYTES = 4096


def cautious_capacity(
    length_hint: int,
    *,
    remaining: int,
    element_size: int,
    ceiling_bytes: int = DEFAULT_ALLOC_CEILING_BYTES,
) -> int:
    """ Number of elements that is safe to reserve for a container that claims to have `length_hint` elements.

    The `element_size` is the minimum encoded size of one element, zero-sized elements are counted as 1 byte.
    """
    element_size = max(element_size, 1)
    return max(min(length_hint, remaining // element_size, ceiling_bytes // element_size), 1)
