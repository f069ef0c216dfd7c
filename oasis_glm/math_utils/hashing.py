################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Order-sensitive hash mixing for fixed-size values."""

from __future__ import annotations

from typing import Any
from typing import Iterable


# Multiplier applied to the running hash before mixing in the next field
HASH_MULTIPLIER: int = 397

# Running hash is kept to 64 bits
HASH_MASK: int = (1 << 64) - 1


def combine_hashes(values: Iterable[Any]) -> int:
    """Combine the hashes of all values in order.

    h = hash(v0); h = ((h * 397) ^ hash(vi)) mod 2**64 for i > 0
    """
    result: int = 0
    first: bool = True
    for value in values:
        value_hash: int = hash(value)
        if first:
            result = value_hash & HASH_MASK
            first = False
        else:
            result = ((result * HASH_MULTIPLIER) ^ value_hash) & HASH_MASK
    return result
