################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Logical operators for boolean matrices."""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Optional

import numpy as np


class LogicalMatrixMixin:
    """Element-wise AND, OR, XOR, NOT with bool scalar broadcast."""

    __slots__ = ()

    def _logical(self, other: Any, function: Callable[..., Any]) -> Any:
        operand: Optional[Any] = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._from_array(function(self._values, operand))

    def __and__(self, other: Any) -> Any:
        return self._logical(other, np.logical_and)

    def __rand__(self, other: Any) -> Any:
        return self._logical(other, np.logical_and)

    def __or__(self, other: Any) -> Any:
        return self._logical(other, np.logical_or)

    def __ror__(self, other: Any) -> Any:
        return self._logical(other, np.logical_or)

    def __xor__(self, other: Any) -> Any:
        return self._logical(other, np.logical_xor)

    def __rxor__(self, other: Any) -> Any:
        return self._logical(other, np.logical_xor)

    def __invert__(self) -> Any:
        return self._from_array(np.logical_not(self._values))

    def all(self) -> bool:
        return bool(np.all(self._values))

    def any(self) -> bool:
        return bool(np.any(self._values))

    def min_element(self) -> bool:
        """AND-reduction over all fields."""
        return self.all()

    def max_element(self) -> bool:
        """OR-reduction over all fields."""
        return self.any()
