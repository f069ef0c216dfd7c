################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Arithmetic, products and norms for non-boolean matrices."""

from __future__ import annotations

import itertools
from typing import Any
from typing import Callable
from typing import ClassVar
from typing import Dict
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_glm.math_utils import norms
from oasis_glm.matrix.matrix_base import MatrixBase
from oasis_glm.vector.vector_base import VectorBase


class ArithmeticMatrixMixin:
    """Element-wise arithmetic, matrix products and norms.

    Products use the column-major convention: for A with k columns and m
    rows and B with n columns and k rows, C = A @ B has n columns and m rows
    and C[j, i] == sum_t A[t, i] * B[j, t].

    Valid product operands are listed in per-class tables filled when the
    type family is generated. Any other operand makes @ return
    NotImplemented.
    """

    __slots__ = ()

    # Right operand class -> result class of self @ operand
    _MATMUL_RESULTS: ClassVar[Dict[type, type]] = {}
    # Left vector class -> result class of vector @ self
    _RMATMUL_RESULTS: ClassVar[Dict[type, type]] = {}

    def _elementwise(
        self, other: Any, function: Callable[..., Any], reflected: bool = False
    ) -> Any:
        operand: Optional[Any] = self._operand(other)
        if operand is None:
            return NotImplemented
        lhs: Any = operand if reflected else self._values
        rhs: Any = self._values if reflected else operand
        with np.errstate(all="ignore"):
            return self._from_array(function(lhs, rhs))

    def _scalar(
        self, other: Any, function: Callable[..., Any], reflected: bool = False
    ) -> Any:
        if isinstance(other, (MatrixBase, VectorBase)):
            return NotImplemented
        return self._elementwise(other, function, reflected)

    def __add__(self, other: Any) -> Any:
        return self._elementwise(other, np.add)

    def __radd__(self, other: Any) -> Any:
        return self._elementwise(other, np.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._elementwise(other, np.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._elementwise(other, np.subtract, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._scalar(other, np.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._scalar(other, np.multiply, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._scalar(other, self.DOMAIN.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._scalar(other, self.DOMAIN.divide, reflected=True)

    def __pos__(self) -> Any:
        return self.copy()

    @classmethod
    def _require_matrix(cls, value: Any) -> NDArray[Any]:
        if type(value) is not cls:
            raise TypeError(f"expected {cls.__name__}, got {type(value).__name__}")
        return value._values

    @classmethod
    def comp_mul(cls, lhs: Any, rhs: Any) -> Any:
        """Return the element-wise product of two matrices."""
        a: NDArray[Any] = cls._require_matrix(lhs)
        b: NDArray[Any] = cls._require_matrix(rhs)
        with np.errstate(all="ignore"):
            return cls._from_array(a * b)

    @classmethod
    def comp_div(cls, lhs: Any, rhs: Any) -> Any:
        """Return the element-wise quotient of two matrices."""
        return cls._from_array(
            cls.DOMAIN.divide(cls._require_matrix(lhs), cls._require_matrix(rhs))
        )

    # Products

    def __matmul__(self, other: Any) -> Any:
        result_type: Optional[type] = self._MATMUL_RESULTS.get(type(other))
        if result_type is None:
            return NotImplemented
        with np.errstate(all="ignore"):
            # Storage is [column, row], so the product reverses the operands
            product: NDArray[Any] = np.matmul(other._values, self._values)
        return result_type._from_array(product)  # type: ignore[attr-defined]

    def __rmatmul__(self, other: Any) -> Any:
        result_type: Optional[type] = self._RMATMUL_RESULTS.get(type(other))
        if result_type is None:
            return NotImplemented
        with np.errstate(all="ignore"):
            product: NDArray[Any] = np.matmul(self._values, other._values)
        return result_type._from_array(product)  # type: ignore[attr-defined]

    # Norms

    def _magnitudes(self) -> NDArray[Any]:
        return self.DOMAIN.magnitude(self._values.reshape(-1))

    def length(self) -> float:
        """Return sqrt(sum |m|^2) over all fields."""
        return norms.length(self._magnitudes())

    def length_sqr(self) -> float:
        return norms.length_sqr(self._magnitudes())

    def norm(self) -> float:
        return self.length()

    def norm2(self) -> float:
        return self.length()

    def norm1(self) -> float:
        return norms.norm1(self._magnitudes())

    def norm_max(self) -> float:
        return norms.norm_max(self._magnitudes())

    def norm_p(self, p: float) -> float:
        return norms.norm_p(self._magnitudes(), p)

    def sum(self) -> Any:
        """Return the sum of all fields in the domain."""
        with np.errstate(all="ignore"):
            return np.sum(self._values, dtype=self.DOMAIN.dtype).item()


class SignedMatrixMixin:
    """Negation for domains where it is closed."""

    __slots__ = ()

    def __neg__(self) -> Any:
        with np.errstate(all="ignore"):
            return self._from_array(np.negative(self._values))


class OrderedMatrixMixin:
    __slots__ = ()

    def min_element(self) -> Any:
        return self._values.min().item()

    def max_element(self) -> Any:
        return self._values.max().item()


def laplace_determinant(values: NDArray[np.float64]) -> float:
    """Return the determinant of a small square array by cofactor expansion."""
    size: int = values.shape[0]
    if size == 1:
        return float(values[0, 0])
    if size == 2:
        return float(values[0, 0] * values[1, 1] - values[0, 1] * values[1, 0])

    total: float = 0.0
    for column in range(size):
        minor: NDArray[np.float64] = np.delete(values[1:], column, axis=1)
        sign: float = -1.0 if column % 2 else 1.0
        total += sign * float(values[0, column]) * laplace_determinant(minor)
    return total


def adjugate(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return the transposed cofactor matrix of a small square array."""
    size: int = values.shape[0]
    result: NDArray[np.float64] = np.empty((size, size), dtype=np.float64)
    for i, j in itertools.product(range(size), repeat=2):
        minor: NDArray[np.float64] = np.delete(np.delete(values, j, axis=0), i, axis=1)
        sign: float = -1.0 if (i + j) % 2 else 1.0
        result[i, j] = sign * laplace_determinant(minor)
    return result


class RealSquareMatrixMixin:
    """Determinant and inverse for square float32 and float64 matrices."""

    __slots__ = ()

    def determinant(self) -> float:
        with np.errstate(all="ignore"):
            return laplace_determinant(self._values.astype(np.float64))

    def inverse(self) -> Any:
        """Return adjugate / determinant.

        A singular matrix yields inf and NaN fields instead of raising.
        """
        # The inverse of the transpose is the transpose of the inverse, so
        # the column-major storage inverts in place
        values: NDArray[np.float64] = self._values.astype(np.float64)
        with np.errstate(all="ignore"):
            return self._from_array(adjugate(values) / laplace_determinant(values))
