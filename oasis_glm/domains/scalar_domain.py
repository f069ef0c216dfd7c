################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Scalar domains that vectors and matrices are parameterized over."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import NDArray


class DomainKind(Enum):
    """Number system of a scalar domain."""

    REAL = "real"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    COMPLEX = "complex"


@dataclass(frozen=True)
class ScalarDomain:
    """Scalar number system with its own zero, one and arithmetic closure.

    Responsibility:
        Own every scalar-level policy the vector and matrix kernels rely on,
        so that the kernels stay mechanical component-wise mappings.

    Capability contract:
        - coerce(value): strict conversion of one Python/numpy scalar
        - convert_array(values): explicit conversion from another domain
        - divide(lhs, rhs): domain division policy
        - magnitude(values): |c| per component, as norm_dtype
        - conjugate(values): identity outside the complex domain

    Optional capabilities are advertised by the is_* flags and decide which
    extensions a generated type receives.

    Attributes:
        name: Domain identifier, e.g. "float32"
        prefix: Class name prefix, e.g. "D" for DVec3
        kind: Number system
        dtype: numpy storage dtype
        signed: True if negation is closed over the domain
        norm_dtype: Real dtype used to accumulate norms, None for boolean
        real_domain: Domain of real/imaginary projections (complex only)
    """

    name: str
    prefix: str
    kind: DomainKind
    dtype: np.dtype
    signed: bool
    norm_dtype: Optional[np.dtype]
    real_domain: Optional[ScalarDomain] = None

    @property
    def is_real(self) -> bool:
        return self.kind is DomainKind.REAL

    @property
    def is_integer(self) -> bool:
        return self.kind is DomainKind.INTEGER

    @property
    def is_boolean(self) -> bool:
        return self.kind is DomainKind.BOOLEAN

    @property
    def is_complex(self) -> bool:
        return self.kind is DomainKind.COMPLEX

    @property
    def is_arithmetic(self) -> bool:
        return self.kind is not DomainKind.BOOLEAN

    @property
    def is_signed(self) -> bool:
        return self.is_arithmetic and self.signed

    @property
    def is_ordered(self) -> bool:
        return self.kind in (DomainKind.REAL, DomainKind.INTEGER)

    @property
    def is_fractional(self) -> bool:
        return self.kind in (DomainKind.REAL, DomainKind.COMPLEX)

    @property
    def zero(self) -> Any:
        """Return the additive identity (False for boolean)."""
        return self.dtype.type(0)

    @property
    def one(self) -> Any:
        """Return the multiplicative identity (True for boolean)."""
        return self.dtype.type(1)

    def coerce(self, value: Any) -> Any:
        """Convert a single scalar into this domain.

        Raises:
            TypeError: If the scalar cannot be represented without an
                implicit narrowing between number systems
            OverflowError: If an integer is outside the representable range
        """
        if isinstance(value, (bool, np.bool_)):
            if self.is_boolean:
                return np.bool_(value)
            return self.dtype.type(int(value))

        if self.is_boolean:
            raise TypeError(f"{self.name} requires bool scalars, got {value!r}")

        if isinstance(value, numbers.Integral):
            return self.dtype.type(int(value))

        if isinstance(value, numbers.Real):
            if self.is_integer:
                raise TypeError(
                    f"{self.name} requires integral scalars, got {value!r}"
                )
            with np.errstate(all="ignore"):
                return self.dtype.type(float(value))

        if isinstance(value, numbers.Complex):
            if not self.is_complex:
                raise TypeError(f"{self.name} cannot hold complex value {value!r}")
            with np.errstate(all="ignore"):
                return self.dtype.type(complex(value))

        raise TypeError(f"{self.name} cannot hold {type(value).__name__} values")

    def convert_array(self, values: NDArray[Any]) -> NDArray[Any]:
        """Explicitly convert an array of another domain into this domain."""
        array: NDArray[Any] = np.asarray(values)
        if np.iscomplexobj(array) and not self.is_complex:
            raise TypeError(f"cannot convert complex values to {self.name}")
        if self.is_boolean:
            return np.asarray(array != 0, dtype=self.dtype)
        with np.errstate(all="ignore"):
            return array.astype(self.dtype)

    def full(self, size: int, value: Any) -> NDArray[Any]:
        """Return a 1-D array of the given size filled with one scalar."""
        return np.full(size, self.coerce(value), dtype=self.dtype)

    def divide(self, lhs: NDArray[Any], rhs: NDArray[Any]) -> NDArray[Any]:
        """Divide component-wise using the domain's division policy.

        Real and complex domains use IEEE division and let inf/NaN
        propagate. Integer domains truncate toward zero.

        Raises:
            ZeroDivisionError: On an integer zero divisor
            TypeError: For the boolean domain
        """
        if self.is_boolean:
            raise TypeError("division is not defined for bool")

        if self.is_integer:
            lhs_arr: NDArray[Any] = np.asarray(lhs, dtype=self.dtype)
            rhs_arr: NDArray[Any] = np.asarray(rhs, dtype=self.dtype)
            if np.any(rhs_arr == 0):
                raise ZeroDivisionError(f"{self.name} division by zero")
            with np.errstate(all="ignore"):
                quotient: NDArray[Any] = np.floor_divide(lhs_arr, rhs_arr)
                if self.signed:
                    remainder: NDArray[Any] = lhs_arr - quotient * rhs_arr
                    # Floor division rounds toward -inf for mixed signs
                    adjust: NDArray[Any] = (remainder != 0) & (
                        (lhs_arr < 0) != (rhs_arr < 0)
                    )
                    quotient = quotient + adjust.astype(self.dtype)
            return np.asarray(quotient, dtype=self.dtype)

        with np.errstate(all="ignore"):
            return np.true_divide(lhs, rhs).astype(self.dtype)

    def magnitude(self, values: NDArray[Any]) -> NDArray[Any]:
        """Return |c| per component as the norm dtype."""
        if self.norm_dtype is None:
            raise TypeError("magnitude is not defined for bool")
        array: NDArray[Any] = np.asarray(values, dtype=self.dtype)
        if self.is_complex:
            return np.abs(array).astype(self.norm_dtype)
        return np.abs(array.astype(self.norm_dtype))

    def conjugate(self, values: NDArray[Any]) -> NDArray[Any]:
        """Return the complex conjugate, identity for non-complex domains."""
        if self.is_complex:
            return np.conj(values)
        return np.array(values, dtype=self.dtype)


FLOAT32: ScalarDomain = ScalarDomain(
    name="float32",
    prefix="",
    kind=DomainKind.REAL,
    dtype=np.dtype(np.float32),
    signed=True,
    norm_dtype=np.dtype(np.float32),
)

FLOAT64: ScalarDomain = ScalarDomain(
    name="float64",
    prefix="D",
    kind=DomainKind.REAL,
    dtype=np.dtype(np.float64),
    signed=True,
    norm_dtype=np.dtype(np.float64),
)

INT32: ScalarDomain = ScalarDomain(
    name="int32",
    prefix="I",
    kind=DomainKind.INTEGER,
    dtype=np.dtype(np.int32),
    signed=True,
    norm_dtype=np.dtype(np.float64),
)

UINT32: ScalarDomain = ScalarDomain(
    name="uint32",
    prefix="U",
    kind=DomainKind.INTEGER,
    dtype=np.dtype(np.uint32),
    signed=False,
    norm_dtype=np.dtype(np.float64),
)

INT64: ScalarDomain = ScalarDomain(
    name="int64",
    prefix="L",
    kind=DomainKind.INTEGER,
    dtype=np.dtype(np.int64),
    signed=True,
    norm_dtype=np.dtype(np.float64),
)

BOOL: ScalarDomain = ScalarDomain(
    name="bool",
    prefix="B",
    kind=DomainKind.BOOLEAN,
    dtype=np.dtype(np.bool_),
    signed=False,
    norm_dtype=None,
)

COMPLEX128: ScalarDomain = ScalarDomain(
    name="complex128",
    prefix="C",
    kind=DomainKind.COMPLEX,
    dtype=np.dtype(np.complex128),
    signed=True,
    norm_dtype=np.dtype(np.float64),
    real_domain=FLOAT64,
)

# Generation order of the closed type family
ALL_DOMAINS: Tuple[ScalarDomain, ...] = (
    FLOAT32,
    FLOAT64,
    INT32,
    UINT32,
    INT64,
    BOOL,
    COMPLEX128,
)


def is_scalar(value: Any) -> bool:
    """Return True if the value is a scalar of any number system."""
    return isinstance(value, (numbers.Number, np.bool_))
