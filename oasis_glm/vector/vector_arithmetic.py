################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Arithmetic, norm and ordering extensions for non-boolean vectors."""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_glm.math_utils import norms


def domain_limits(dtype: np.dtype) -> Any:
    """Return numpy's finfo or iinfo for a real or integer dtype."""
    if np.issubdtype(dtype, np.floating):
        return np.finfo(dtype)
    return np.iinfo(dtype)


class ArithmeticVectorMixin:
    """Component-wise arithmetic, norms and interpolation.

    Binary operators accept a vector of exactly the same class or a scalar
    on either side. Any other operand makes the operator return
    NotImplemented, so mixing Vec3 with DVec3 raises TypeError.
    """

    __slots__ = ()

    def _binary(
        self, other: Any, function: Callable[..., Any], reflected: bool = False
    ) -> Any:
        operand: Optional[Any] = self._operand(other)
        if operand is None:
            return NotImplemented
        lhs: Any = operand if reflected else self._values
        rhs: Any = self._values if reflected else operand
        with np.errstate(all="ignore"):
            return self._from_array(function(lhs, rhs))

    def __add__(self, other: Any) -> Any:
        return self._binary(other, np.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, np.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, np.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, np.subtract, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, np.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, np.multiply, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, self.DOMAIN.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, self.DOMAIN.divide, reflected=True)

    def __pos__(self) -> Any:
        return self.copy()

    @classmethod
    def _require_vector(cls, value: Any) -> NDArray[Any]:
        if type(value) is not cls:
            raise TypeError(f"expected {cls.__name__}, got {type(value).__name__}")
        return value._values

    # Norms

    def _magnitudes(self) -> NDArray[Any]:
        return self.DOMAIN.magnitude(self._values)

    def length(self) -> float:
        """Return the Euclidean length sqrt(sum |c|^2)."""
        return norms.length(self._magnitudes())

    def length_sqr(self) -> float:
        """Return the squared Euclidean length sum |c|^2."""
        return norms.length_sqr(self._magnitudes())

    def norm(self) -> float:
        return self.length()

    def norm2(self) -> float:
        return self.length()

    def norm1(self) -> float:
        """Return the taxicab norm sum |c|."""
        return norms.norm1(self._magnitudes())

    def norm_max(self) -> float:
        """Return the maximum norm max |c|."""
        return norms.norm_max(self._magnitudes())

    def norm_p(self, p: float) -> float:
        """Return the p-norm (sum |c|^p)^(1/p), unguarded for p <= 0."""
        return norms.norm_p(self._magnitudes(), p)

    def sum(self) -> Any:
        """Return the sum of all components in the domain."""
        with np.errstate(all="ignore"):
            return np.sum(self._values, dtype=self.DOMAIN.dtype).item()

    @classmethod
    def _difference(cls, lhs: Any, rhs: Any) -> Any:
        with np.errstate(all="ignore"):
            return cls._from_array(
                cls._require_vector(lhs) - cls._require_vector(rhs)
            )

    @classmethod
    def distance(cls, lhs: Any, rhs: Any) -> float:
        """Return the Euclidean distance between two vectors."""
        return cls._difference(lhs, rhs).length()

    @classmethod
    def distance_sqr(cls, lhs: Any, rhs: Any) -> float:
        return cls._difference(lhs, rhs).length_sqr()

    # Algebra

    @classmethod
    def dot(cls, lhs: Any, rhs: Any) -> Any:
        """Return sum lhs_i * rhs_i in the domain."""
        a: NDArray[Any] = cls._require_vector(lhs)
        b: NDArray[Any] = cls._require_vector(rhs)
        with np.errstate(all="ignore"):
            products: NDArray[Any] = a * b
            return np.sum(products, dtype=cls.DOMAIN.dtype).item()

    @classmethod
    def reflect(cls, incident: Any, normal: Any) -> Any:
        """Return incident - 2 * dot(normal, incident) * normal.

        The normal is expected to be normalized and is not validated.
        """
        i: NDArray[Any] = cls._require_vector(incident)
        n: NDArray[Any] = cls._require_vector(normal)
        two: Any = cls.DOMAIN.coerce(2)
        with np.errstate(all="ignore"):
            d: Any = np.sum(n * i, dtype=cls.DOMAIN.dtype)
            return cls._from_array(i - two * d * n)

    @classmethod
    def mix(cls, minimum: Any, maximum: Any, amount: Any) -> Any:
        """Return minimum * (1 - amount) + maximum * amount.

        Each operand is independently a vector of this class or a scalar.
        """
        one: Any = cls.DOMAIN.one
        return cls._apply(
            lambda lo, hi, a: lo * (one - a) + hi * a, minimum, maximum, amount
        )

    @classmethod
    def hermite_interpolation_order3(cls, value: Any) -> Any:
        """Return (3 - 2v) v^2."""
        two: Any = cls.DOMAIN.coerce(2)
        three: Any = cls.DOMAIN.coerce(3)
        return cls._apply(lambda v: (three - two * v) * v * v, value)

    @classmethod
    def hermite_interpolation_order5(cls, value: Any) -> Any:
        """Return ((6v - 15) v + 10) v^3."""
        six: Any = cls.DOMAIN.coerce(6)
        ten: Any = cls.DOMAIN.coerce(10)
        fifteen: Any = cls.DOMAIN.coerce(15)
        return cls._apply(
            lambda v: ((six * v - fifteen) * v + ten) * v * v * v, value
        )

    @classmethod
    def sqr(cls, value: Any) -> Any:
        return cls._apply(lambda v: v * v, value)

    @classmethod
    def pow2(cls, value: Any) -> Any:
        return cls._apply(lambda v: v * v, value)


class SignedVectorMixin:
    """Negation for domains where it is closed."""

    __slots__ = ()

    def __neg__(self) -> Any:
        with np.errstate(all="ignore"):
            return self._from_array(np.negative(self._values))


class OrderedVectorMixin:
    """Reductions, clamping and comparisons for real and integer domains."""

    __slots__ = ()

    def min_element(self) -> Any:
        return self._values.min().item()

    def max_element(self) -> Any:
        return self._values.max().item()

    @classmethod
    def min(cls, lhs: Any, rhs: Any) -> Any:
        """Return the component-wise minimum."""
        return cls._apply(np.minimum, lhs, rhs)

    @classmethod
    def max(cls, lhs: Any, rhs: Any) -> Any:
        """Return the component-wise maximum."""
        return cls._apply(np.maximum, lhs, rhs)

    @classmethod
    def clamp(cls, value: Any, low: Any, high: Any) -> Any:
        """Return min(max(value, low), high) per component."""
        return cls._apply(
            lambda v, lo, hi: np.minimum(np.maximum(v, lo), hi), value, low, high
        )

    @classmethod
    def lesser_than(cls, lhs: Any, rhs: Any) -> Any:
        return cls._bool_vector(
            np.less(cls._require_operand(lhs), cls._require_operand(rhs))
        )

    @classmethod
    def lesser_than_equal(cls, lhs: Any, rhs: Any) -> Any:
        return cls._bool_vector(
            np.less_equal(cls._require_operand(lhs), cls._require_operand(rhs))
        )

    @classmethod
    def greater_than(cls, lhs: Any, rhs: Any) -> Any:
        return cls._bool_vector(
            np.greater(cls._require_operand(lhs), cls._require_operand(rhs))
        )

    @classmethod
    def greater_than_equal(cls, lhs: Any, rhs: Any) -> Any:
        return cls._bool_vector(
            np.greater_equal(cls._require_operand(lhs), cls._require_operand(rhs))
        )

    @classmethod
    def max_value(cls) -> Any:
        """Return the vector filled with the largest finite domain value."""
        return cls._from_array(domain_limits(cls.DOMAIN.dtype).max)

    @classmethod
    def min_value(cls) -> Any:
        """Return the vector filled with the most negative domain value."""
        return cls._from_array(domain_limits(cls.DOMAIN.dtype).min)


class FractionalVectorMixin:
    """Normalization for real and complex domains."""

    __slots__ = ()

    def normalized(self) -> Any:
        """Return self / length, NaN or inf when the length is zero."""
        return self._from_array(self.DOMAIN.divide(self._values, self.length()))

    def normalized_safe(self) -> Any:
        """Return the zero vector for a zero input, else normalized()."""
        if not np.any(self._values):
            return self.zero()
        return self.normalized()


class PlanarCrossMixin:
    """Scalar cross product of two-component vectors."""

    __slots__ = ()

    @classmethod
    def cross(cls, lhs: Any, rhs: Any) -> Any:
        """Return lhs.x * rhs.y - lhs.y * rhs.x."""
        a: NDArray[Any] = cls._require_vector(lhs)
        b: NDArray[Any] = cls._require_vector(rhs)
        with np.errstate(all="ignore"):
            return (a[0] * b[1] - a[1] * b[0]).item()


class SpatialCrossMixin:
    """Cross product of three-component vectors."""

    __slots__ = ()

    @classmethod
    def cross(cls, lhs: Any, rhs: Any) -> Any:
        a: NDArray[Any] = cls._require_vector(lhs)
        b: NDArray[Any] = cls._require_vector(rhs)
        with np.errstate(all="ignore"):
            return cls._from_array(
                np.array(
                    [
                        a[1] * b[2] - a[2] * b[1],
                        a[2] * b[0] - a[0] * b[2],
                        a[0] * b[1] - a[1] * b[0],
                    ],
                    dtype=cls.DOMAIN.dtype,
                )
            )
