################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element-wise functions for float32 and float64 vectors."""

from __future__ import annotations

from typing import Any
from typing import Optional

import numpy as np


class RealVectorFunctions:
    """Element-wise math for real vectors.

    Every function is a classmethod taking a vector of the class or a scalar
    for each operand; scalars broadcast to all components. Domain edge cases
    (log of a negative value, sqrt of a negative value, overflow) produce NaN
    or inf without raising.
    """

    __slots__ = ()

    @classmethod
    def abs(cls, value: Any) -> Any:
        return cls._apply(np.abs, value)

    @classmethod
    def sign(cls, value: Any) -> Any:
        """Return -1, 0 or 1 per component."""
        return cls._apply(np.sign, value)

    @classmethod
    def floor(cls, value: Any) -> Any:
        return cls._apply(np.floor, value)

    @classmethod
    def ceiling(cls, value: Any) -> Any:
        return cls._apply(np.ceil, value)

    @classmethod
    def round(cls, value: Any) -> Any:
        """Round to the nearest integer, halves to even."""
        return cls._apply(np.rint, value)

    @classmethod
    def truncate(cls, value: Any) -> Any:
        """Round toward zero."""
        return cls._apply(np.trunc, value)

    @classmethod
    def fract(cls, value: Any) -> Any:
        """Return v - floor(v)."""
        return cls._apply(lambda v: v - np.floor(v), value)

    @classmethod
    def sqrt(cls, value: Any) -> Any:
        return cls._apply(np.sqrt, value)

    @classmethod
    def inverse_sqrt(cls, value: Any) -> Any:
        """Return 1 / sqrt(v)."""
        return cls._apply(lambda v: np.reciprocal(np.sqrt(v)), value)

    @classmethod
    def exp(cls, value: Any) -> Any:
        return cls._apply(np.exp, value)

    @classmethod
    def exp2(cls, value: Any) -> Any:
        return cls._apply(np.exp2, value)

    @classmethod
    def log(cls, value: Any, base: Optional[Any] = None) -> Any:
        """Return the natural logarithm, or log(v) / log(base) for a base."""
        if base is None:
            return cls._apply(np.log, value)
        return cls._apply(lambda v, b: np.log(v) / np.log(b), value, base)

    @classmethod
    def log2(cls, value: Any) -> Any:
        return cls._apply(np.log2, value)

    @classmethod
    def log10(cls, value: Any) -> Any:
        return cls._apply(np.log10, value)

    @classmethod
    def pow(cls, base: Any, exponent: Any) -> Any:
        return cls._apply(np.power, base, exponent)

    @classmethod
    def sin(cls, value: Any) -> Any:
        return cls._apply(np.sin, value)

    @classmethod
    def cos(cls, value: Any) -> Any:
        return cls._apply(np.cos, value)

    @classmethod
    def tan(cls, value: Any) -> Any:
        return cls._apply(np.tan, value)

    @classmethod
    def asin(cls, value: Any) -> Any:
        return cls._apply(np.arcsin, value)

    @classmethod
    def acos(cls, value: Any) -> Any:
        return cls._apply(np.arccos, value)

    @classmethod
    def atan(cls, value: Any) -> Any:
        return cls._apply(np.arctan, value)

    @classmethod
    def sinh(cls, value: Any) -> Any:
        return cls._apply(np.sinh, value)

    @classmethod
    def cosh(cls, value: Any) -> Any:
        return cls._apply(np.cosh, value)

    @classmethod
    def tanh(cls, value: Any) -> Any:
        return cls._apply(np.tanh, value)

    @classmethod
    def radians(cls, value: Any) -> Any:
        """Convert degrees to radians."""
        return cls._apply(np.radians, value)

    @classmethod
    def degrees(cls, value: Any) -> Any:
        """Convert radians to degrees."""
        return cls._apply(np.degrees, value)

    @classmethod
    def step(cls, edge: Any, value: Any) -> Any:
        """Return 0 where value < edge, else 1."""
        return cls._apply(lambda e, v: np.where(v < e, 0.0, 1.0), edge, value)

    @classmethod
    def smoothstep(cls, edge0: Any, edge1: Any, value: Any) -> Any:
        """Return the Hermite step between two edges.

        t = clamp((v - edge0) / (edge1 - edge0), 0, 1); t * t * (3 - 2t)
        """

        def _smoothstep(e0: Any, e1: Any, v: Any) -> Any:
            t: Any = np.clip((v - e0) / (e1 - e0), 0.0, 1.0)
            return t * t * (3.0 - 2.0 * t)

        return cls._apply(_smoothstep, edge0, edge1, value)

    @classmethod
    def is_nan(cls, value: Any) -> Any:
        return cls._bool_vector(np.isnan(cls._require_operand(value)))

    @classmethod
    def is_infinity(cls, value: Any) -> Any:
        return cls._bool_vector(np.isinf(cls._require_operand(value)))

    @classmethod
    def is_finite(cls, value: Any) -> Any:
        return cls._bool_vector(np.isfinite(cls._require_operand(value)))

    # Constants

    @classmethod
    def epsilon(cls) -> Any:
        """Return the vector filled with the smallest positive subnormal."""
        return cls._from_array(np.finfo(cls.DOMAIN.dtype).smallest_subnormal)

    @classmethod
    def nan(cls) -> Any:
        return cls._from_array(np.nan)

    @classmethod
    def negative_infinity(cls) -> Any:
        return cls._from_array(-np.inf)

    @classmethod
    def positive_infinity(cls) -> Any:
        return cls._from_array(np.inf)
