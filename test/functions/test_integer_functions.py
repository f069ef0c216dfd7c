################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for integer-domain functions and bitwise operators."""

from __future__ import annotations

import pytest

from oasis_glm import IVec2
from oasis_glm import IVec3
from oasis_glm import LVec2
from oasis_glm import UVec2


def test_abs_and_sign() -> None:
    """Checks abs and sign."""
    assert IVec2.abs(IVec2(-3, 3)) == IVec2(3, 3)
    assert IVec3.sign(IVec3(-7, 0, 9)) == IVec3(-1, 0, 1)
    assert UVec2.abs(UVec2(4, 0)) == UVec2(4, 0)
    assert LVec2.abs(-5) == LVec2(5, 5)


def test_bitwise_operators() -> None:
    """Checks AND, OR, XOR and NOT."""
    lhs: IVec2 = IVec2(0b1100, 0b1010)
    rhs: IVec2 = IVec2(0b1010, 0b0110)
    assert lhs & rhs == IVec2(0b1000, 0b0010)
    assert lhs | rhs == IVec2(0b1110, 0b1110)
    assert lhs ^ rhs == IVec2(0b0110, 0b1100)
    assert ~IVec2(0, -1) == IVec2(-1, 0)
    assert ~UVec2(0, 0) == UVec2.max_value()


def test_scalar_operands() -> None:
    """Checks integer scalars on either side."""
    assert IVec2(0b1100, 0b1010) | 1 == IVec2(0b1101, 0b1011)
    assert 1 & IVec2(3, 4) == IVec2(1, 0)
    assert 0b1111 ^ IVec2(0b0101, 0) == IVec2(0b1010, 0b1111)


def test_shifts() -> None:
    """Checks left and right shifts."""
    assert IVec2(1, 3) << 2 == IVec2(4, 12)
    assert IVec2(8, 16) >> 2 == IVec2(2, 4)
    assert 1 << IVec2(1, 2) == IVec2(2, 4)
    assert 64 >> IVec2(1, 3) == IVec2(32, 8)
    assert IVec2(1, 1) << IVec2(0, 4) == IVec2(1, 16)


def test_mixed_classes_rejected() -> None:
    """Checks bitwise operators require the same class."""
    with pytest.raises(TypeError):
        IVec2(1, 2) & UVec2(1, 2)
    with pytest.raises(TypeError):
        IVec2(1, 2) & 1.5
