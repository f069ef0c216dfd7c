################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for complex-domain functions."""

from __future__ import annotations

import cmath
import math
from typing import Any

import numpy as np
import pytest

from oasis_glm import CVec2
from oasis_glm import CVec3
from oasis_glm import DVec2
from oasis_glm import DVec3
from oasis_glm import Vec2


def _close(vector: Any, expected: Any) -> bool:
    return bool(np.allclose(vector.to_array(), np.asarray(expected)))


def test_conjugate_and_magnitude_scenario() -> None:
    """Checks CVec2(2, 3) conjugate and magnitude."""
    vector: CVec2 = CVec2(2, 3)
    conjugate: CVec2 = CVec2.conjugate(vector)
    assert conjugate.values == [2 - 0j, 3 - 0j]
    assert conjugate == vector
    assert vector.magnitude() == DVec2(2, 3)


def test_projections() -> None:
    """Checks magnitude, phase, real and imaginary as DVecN."""
    vector: CVec2 = CVec2(3 + 4j, -1j)
    assert vector.magnitude() == DVec2(5, 1)
    assert _close(vector.phase(), [math.atan2(4, 3), -math.pi / 2])
    assert vector.real() == DVec2(3, 0)
    assert vector.imaginary() == DVec2(4, -1)
    assert type(vector.phase()) is DVec2
    assert CVec2.conjugate(CVec2(1 + 2j, 0)) == CVec2(1 - 2j, 0)


def test_abs() -> None:
    """Checks abs returns component magnitudes as DVecN."""
    result: Any = CVec3.abs(CVec3(3 + 4j, 0, -2))
    assert type(result) is DVec3
    assert result == DVec3(5, 0, 2)


def test_from_polar_coordinates() -> None:
    """Checks polar construction from vectors and scalars."""
    result: CVec2 = CVec2.from_polar_coordinates(DVec2(1, 2), DVec2(0, math.pi / 2))
    assert _close(result, [1, 2j])
    assert CVec2.from_polar_coordinates(2.0, 0.0) == CVec2(2, 2)
    with pytest.raises(TypeError):
        CVec2.from_polar_coordinates(DVec3(1, 1, 1), 0.0)
    with pytest.raises(TypeError):
        CVec2.from_polar_coordinates(1j, 0.0)


def test_exp_and_log() -> None:
    """Checks exp and the principal logarithm."""
    assert _close(CVec2.exp(CVec2(1j * math.pi, 0)), [-1, 1])
    assert _close(CVec2.log(CVec2(-1, 1)), [1j * math.pi, 0])
    assert _close(CVec2.log(CVec2(8, 4), 2.0), [3, 2])
    assert _close(CVec2.log(CVec2(9, 16), DVec2(3, 4)), [2, 2])
    assert _close(CVec2.log2(CVec2(8, 1j)), [3, cmath.log(1j, 2)])
    assert _close(CVec2.log10(CVec2(100, 1)), [2, 0])


def test_log_base_validation() -> None:
    """Checks the logarithm base must be real."""
    with pytest.raises(TypeError):
        CVec2.log(CVec2(1, 1), DVec3(2, 2, 2))
    with pytest.raises(TypeError):
        CVec2.log(CVec2(1, 1), 2j)


def test_log_of_zero_propagates() -> None:
    """Checks log(0) yields -inf without raising."""
    result: CVec2 = CVec2.log(CVec2(0, 1))
    assert math.isinf(result[0].real)
    assert result[1] == 0


def test_roots_and_reciprocal() -> None:
    """Checks sqrt and reciprocal."""
    assert _close(CVec2.sqrt(CVec2(-4, 4)), [2j, 2])
    assert _close(CVec2.reciprocal(CVec2(2j, 4)), [-0.5j, 0.25])


def test_pow() -> None:
    """Checks complex and real exponents on either side."""
    assert _close(CVec2.pow(CVec2(1j, 2), 2), [-1, 4])
    assert _close(CVec2.pow(CVec2(2, 2), DVec2(2, 3)), [4, 8])
    assert _close(CVec2.pow(2.0, CVec2(1, 2)), [2, 4])
    assert _close(CVec2.pow(DVec2(2, 3), CVec2(2, 1j)), [4, 3**1j])
    assert _close(CVec2.pow(CVec2(-1, 1), 0.5), [1j, 1])


def test_trigonometry() -> None:
    """Checks sin^2 + cos^2 == 1 and the inverse functions."""
    vector: CVec2 = CVec2(1 + 1j, 0.5)
    sine: CVec2 = CVec2.sin(vector)
    cosine: CVec2 = CVec2.cos(vector)
    assert _close(sine * sine + cosine * cosine, [1, 1])
    assert _close(CVec2.tan(vector), (sine / cosine).to_array())
    assert _close(CVec2.asin(CVec2.sin(CVec2(0.5j, 0.25))), [0.5j, 0.25])
    assert _close(CVec2.acos(CVec2(1, 0)), [0, math.pi / 2])
    assert _close(CVec2.atan(CVec2(0, 1)), [0, math.pi / 4])


def test_hyperbolic() -> None:
    """Checks cosh^2 - sinh^2 == 1 and tanh."""
    vector: CVec2 = CVec2(0.3 - 0.2j, 1.5j)
    sinh: CVec2 = CVec2.sinh(vector)
    cosh: CVec2 = CVec2.cosh(vector)
    assert _close(cosh * cosh - sinh * sinh, [1, 1])
    assert _close(CVec2.tanh(vector), (sinh / cosh).to_array())


def test_constants() -> None:
    """Checks imaginary constants."""
    assert CVec2.imaginary_ones().values == [1j, 1j]
    assert CVec2.imaginary_unit_y() == CVec2(0, 1j)
    assert CVec3.imaginary_unit_z() == CVec3(0, 0, 1j)
    assert not hasattr(CVec2, "imaginary_unit_z")


def test_complex_arithmetic_and_norms() -> None:
    """Checks complex vectors support arithmetic but not ordering."""
    assert CVec2(1j, 2) * 1j == CVec2(-1, 2j)
    assert CVec2.dot(CVec2(1j, 1), CVec2(1j, 1)) == 0
    assert _close(CVec2(3j, 4).normalized(), [0.6j, 0.8])
    assert not hasattr(CVec2, "min_element")
    with pytest.raises(TypeError):
        CVec2(1, 2) + Vec2(1, 2)
