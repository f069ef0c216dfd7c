################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element-wise functions and bitwise operators for integer vectors."""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Optional

import numpy as np


class IntegerVectorFunctions:
    """Sign functions and bitwise operators for int32, uint32 and int64.

    Bitwise operators accept a vector of the same class or an integer scalar
    on either side. Shift counts are not validated.
    """

    __slots__ = ()

    @classmethod
    def abs(cls, value: Any) -> Any:
        """Return |v| per component, wrapping at the domain minimum."""
        return cls._apply(np.abs, value)

    @classmethod
    def sign(cls, value: Any) -> Any:
        return cls._apply(np.sign, value)

    def _bitwise(
        self, other: Any, function: Callable[..., Any], reflected: bool = False
    ) -> Any:
        operand: Optional[Any] = self._operand(other)
        if operand is None:
            return NotImplemented
        lhs: Any = operand if reflected else self._values
        rhs: Any = self._values if reflected else operand
        return self._from_array(function(lhs, rhs))

    def __and__(self, other: Any) -> Any:
        return self._bitwise(other, np.bitwise_and)

    def __rand__(self, other: Any) -> Any:
        return self._bitwise(other, np.bitwise_and, reflected=True)

    def __or__(self, other: Any) -> Any:
        return self._bitwise(other, np.bitwise_or)

    def __ror__(self, other: Any) -> Any:
        return self._bitwise(other, np.bitwise_or, reflected=True)

    def __xor__(self, other: Any) -> Any:
        return self._bitwise(other, np.bitwise_xor)

    def __rxor__(self, other: Any) -> Any:
        return self._bitwise(other, np.bitwise_xor, reflected=True)

    def __lshift__(self, other: Any) -> Any:
        return self._bitwise(other, np.left_shift)

    def __rlshift__(self, other: Any) -> Any:
        return self._bitwise(other, np.left_shift, reflected=True)

    def __rshift__(self, other: Any) -> Any:
        return self._bitwise(other, np.right_shift)

    def __rrshift__(self, other: Any) -> Any:
        return self._bitwise(other, np.right_shift, reflected=True)

    def __invert__(self) -> Any:
        return self._from_array(np.invert(self._values))
