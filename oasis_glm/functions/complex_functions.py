################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element-wise functions for complex vectors.

Real-valued results (magnitude, phase, projections) are float64 vectors of
the same size. Functions follow numpy's principal branches, and singular
inputs such as log(0) or 1 / 0 propagate inf and NaN components.
"""

from __future__ import annotations

import numbers
from typing import Any
from typing import List
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_glm.type_registry import REGISTRY


class ComplexVectorFunctions:
    """Projections, polar form and transcendental functions for CVec types."""

    __slots__ = ()

    @classmethod
    def _real_vector_type(cls) -> Any:
        return REGISTRY.vector(cls.DOMAIN.real_domain, cls.SIZE)

    @classmethod
    def _real_operand(cls, value: Any) -> Any:
        """Return float64 storage of a real vector or a real scalar."""
        if type(value) is cls._real_vector_type():
            return value._values
        if isinstance(value, (numbers.Real, np.bool_)):
            return cls.DOMAIN.real_domain.coerce(value)
        raise TypeError(
            f"expected {cls._real_vector_type().__name__} or real scalar, "
            f"got {type(value).__name__}"
        )

    @classmethod
    def _mixed_operand(cls, value: Any) -> Any:
        """Return complex storage of a complex or real vector, or a scalar."""
        if type(value) is cls._real_vector_type():
            return value._values.astype(cls.DOMAIN.dtype)
        return cls._require_operand(value)

    @classmethod
    def _real_result(cls, values: NDArray[Any]) -> Any:
        return cls._real_vector_type()._from_array(values)

    # Projections

    def magnitude(self) -> Any:
        """Return |c| per component as a float64 vector."""
        return self._real_result(np.abs(self._values))

    def phase(self) -> Any:
        """Return arg(c) per component in (-pi, pi] as a float64 vector."""
        return self._real_result(np.angle(self._values))

    def real(self) -> Any:
        return self._real_result(self._values.real)

    def imaginary(self) -> Any:
        return self._real_result(self._values.imag)

    @classmethod
    def abs(cls, value: Any) -> Any:
        """Return the component magnitudes as a float64 vector."""
        with np.errstate(all="ignore"):
            return cls._real_result(np.abs(cls._require_operand(value)))

    @classmethod
    def from_polar_coordinates(cls, magnitude: Any, phase: Any) -> Any:
        """Return magnitude * (cos(phase) + i sin(phase)).

        Each operand is a float64 vector of the same size or a real scalar.
        """
        m: Any = cls._real_operand(magnitude)
        p: Any = cls._real_operand(phase)
        with np.errstate(all="ignore"):
            return cls._from_array(m * np.cos(p) + 1j * (m * np.sin(p)))

    # Element-wise functions

    @classmethod
    def conjugate(cls, value: Any) -> Any:
        return cls._apply(np.conj, value)

    @classmethod
    def reciprocal(cls, value: Any) -> Any:
        """Return 1 / v."""
        one: Any = cls.DOMAIN.one
        return cls._apply(lambda v: one / v, value)

    @classmethod
    def sqrt(cls, value: Any) -> Any:
        return cls._apply(np.sqrt, value)

    @classmethod
    def exp(cls, value: Any) -> Any:
        return cls._apply(np.exp, value)

    @classmethod
    def log(cls, value: Any, base: Optional[Any] = None) -> Any:
        """Return the principal natural logarithm, or log(v) / log(base).

        The base is a float64 vector of the same size or a real scalar.
        """
        if base is None:
            return cls._apply(np.log, value)
        b: Any = cls._real_operand(base)
        with np.errstate(all="ignore"):
            return cls._from_array(np.log(cls._require_operand(value)) / np.log(b))

    @classmethod
    def log2(cls, value: Any) -> Any:
        return cls._apply(np.log2, value)

    @classmethod
    def log10(cls, value: Any) -> Any:
        return cls._apply(np.log10, value)

    @classmethod
    def pow(cls, base: Any, exponent: Any) -> Any:
        """Return base ** exponent.

        Either operand is a complex vector, a float64 vector of the same
        size, or a scalar.
        """
        operands: List[Any] = [cls._mixed_operand(base), cls._mixed_operand(exponent)]
        with np.errstate(all="ignore"):
            return cls._from_array(np.power(*operands))

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

    # Constants

    @classmethod
    def imaginary_ones(cls) -> Any:
        """Return the vector with every component equal to 1j."""
        return cls._from_array(1j)

    @classmethod
    def imaginary_unit(cls, index: int) -> Any:
        """Return the vector with 1j at the given component."""
        result: Any = cls.zero()
        result[index] = 1j
        return result
