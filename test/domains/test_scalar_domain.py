################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for scalar domain coercion and division policies."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_glm.domains import BOOL
from oasis_glm.domains import COMPLEX128
from oasis_glm.domains import FLOAT32
from oasis_glm.domains import FLOAT64
from oasis_glm.domains import INT32
from oasis_glm.domains import UINT32
from oasis_glm.domains import is_scalar


def test_capability_flags() -> None:
    """Checks capability flags per number system."""
    assert FLOAT32.is_fractional and FLOAT32.is_ordered and FLOAT32.is_signed
    assert INT32.is_ordered and not INT32.is_fractional
    assert not UINT32.is_signed
    assert COMPLEX128.is_fractional and not COMPLEX128.is_ordered
    assert not BOOL.is_arithmetic and not BOOL.is_signed


def test_coerce_real() -> None:
    """Checks real domains accept ints, bools and floats."""
    value: Any = FLOAT32.coerce(1)
    assert isinstance(value, np.float32)
    assert value == 1.0
    assert FLOAT64.coerce(True) == 1.0
    assert FLOAT64.coerce(2.5) == 2.5


def test_coerce_rejects_narrowing() -> None:
    """Checks strict scalar coercion raises TypeError."""
    with pytest.raises(TypeError):
        INT32.coerce(1.5)
    with pytest.raises(TypeError):
        FLOAT64.coerce(1j)
    with pytest.raises(TypeError):
        BOOL.coerce(1)
    with pytest.raises(TypeError):
        FLOAT64.coerce("1")


def test_coerce_out_of_range() -> None:
    """Checks integers outside the domain range raise OverflowError."""
    with pytest.raises(OverflowError):
        INT32.coerce(2**40)
    with pytest.raises(OverflowError):
        UINT32.coerce(-1)


def test_coerce_bool_and_complex() -> None:
    """Checks boolean and complex coercion."""
    assert BOOL.coerce(True) == True  # noqa: E712
    assert COMPLEX128.coerce(2) == 2 + 0j
    assert COMPLEX128.coerce(1.5) == 1.5 + 0j


def test_convert_array() -> None:
    """Checks explicit conversion between domains."""
    as_bool: NDArray[Any] = BOOL.convert_array(np.array([0, 2]))
    assert as_bool.tolist() == [False, True]

    truncated: NDArray[Any] = INT32.convert_array(np.array([1.9, -1.9]))
    assert truncated.tolist() == [1, -1]

    from_bool: NDArray[Any] = FLOAT64.convert_array(np.array([True, False]))
    assert from_bool.tolist() == [1.0, 0.0]

    with pytest.raises(TypeError):
        FLOAT64.convert_array(np.array([1 + 1j]))


def test_integer_division_truncates() -> None:
    """Checks signed integer division truncates toward zero."""
    lhs: NDArray[Any] = np.array([-7, 7, -6], dtype=np.int32)
    rhs: NDArray[Any] = np.array([2, -2, 2], dtype=np.int32)
    assert INT32.divide(lhs, rhs).tolist() == [-3, -3, -3]


def test_integer_division_by_zero() -> None:
    """Checks an integer zero divisor raises ZeroDivisionError."""
    lhs: NDArray[Any] = np.array([1, 2], dtype=np.int32)
    with pytest.raises(ZeroDivisionError):
        INT32.divide(lhs, np.array([1, 0], dtype=np.int32))


def test_real_division_propagates() -> None:
    """Checks real division by zero yields inf without raising."""
    result: NDArray[Any] = FLOAT64.divide(np.array([1.0, -1.0]), np.array([0.0, 0.0]))
    assert result.tolist() == [np.inf, -np.inf]


def test_bool_division_rejected() -> None:
    """Checks division is undefined for bool."""
    with pytest.raises(TypeError):
        BOOL.divide(np.array([True]), np.array([True]))


def test_magnitude() -> None:
    """Checks magnitudes use the norm dtype."""
    ints: NDArray[Any] = INT32.magnitude(np.array([-2147483648, 3], dtype=np.int32))
    assert ints.dtype == np.float64
    assert ints.tolist() == [2147483648.0, 3.0]

    complexes: NDArray[Any] = COMPLEX128.magnitude(np.array([3 + 4j]))
    assert complexes.tolist() == [5.0]

    with pytest.raises(TypeError):
        BOOL.magnitude(np.array([True]))


def test_conjugate() -> None:
    """Checks conjugation is the identity outside complex."""
    assert COMPLEX128.conjugate(np.array([1 + 2j])).tolist() == [1 - 2j]
    assert FLOAT64.conjugate(np.array([1.5])).tolist() == [1.5]


def test_is_scalar() -> None:
    """Checks scalar detection."""
    assert is_scalar(True)
    assert is_scalar(np.float32(1.0))
    assert is_scalar(1j)
    assert not is_scalar("1")
    assert not is_scalar([1])
