################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Exceptions and index validation shared by the vector and matrix kernels."""

from __future__ import annotations

import numpy as np


class ComponentIndexError(IndexError):
    """Raised when a component or field index is outside the valid range."""

    def __init__(self, index: object, size: int, what: str = "index") -> None:
        super().__init__(f"{what} {index!r} out of range [0, {size})")
        self.index: object = index
        self.size: int = size


class TypeRegistryError(LookupError):
    """Raised when a (domain, shape) pair has no generated type."""


def check_index(index: object, size: int, what: str = "index") -> int:
    """Return a validated component index in [0, size).

    Raises:
        TypeError: If the index is not an integer (bool is rejected)
        ComponentIndexError: If the index is outside [0, size)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(
        index, (int, np.integer)
    ):
        raise TypeError(f"{what} must be an int, got {type(index).__name__}")
    if index < 0 or index >= size:
        raise ComponentIndexError(index, size, what)
    return int(index)
