################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for boolean vector logic."""

from __future__ import annotations

import pytest

from oasis_glm import BVec2
from oasis_glm import BVec3
from oasis_glm import BVec4


def test_logical_operators() -> None:
    """Checks AND, OR, XOR and NOT."""
    lhs: BVec3 = BVec3(True, False, True)
    rhs: BVec3 = BVec3(True, True, False)
    assert lhs & rhs == BVec3(True, False, False)
    assert lhs | rhs == BVec3(True, True, True)
    assert lhs ^ rhs == BVec3(False, True, True)
    assert ~lhs == BVec3(False, True, False)


def test_scalar_broadcast() -> None:
    """Checks a bool scalar broadcasts on either side."""
    vector: BVec2 = BVec2(True, False)
    assert vector & True == vector
    assert False | vector == vector
    assert True ^ vector == BVec2(False, True)


def test_reductions() -> None:
    """Checks all/any and their min/max aliases."""
    assert BVec4(True).all()
    assert BVec4(True).min_element()
    assert not BVec2(True, False).all()
    assert BVec2(True, False).any()
    assert BVec2(True, False).max_element()
    assert not BVec2(False).any()


def test_no_arithmetic() -> None:
    """Checks boolean vectors do not support arithmetic."""
    with pytest.raises(TypeError):
        BVec2(True, False) + BVec2(True, True)
    with pytest.raises(TypeError):
        -BVec2(True, False)
    assert not hasattr(BVec2, "length")


def test_mixed_classes_rejected() -> None:
    """Checks logic between different classes raises TypeError."""
    with pytest.raises(TypeError):
        BVec2(True, False) & BVec3(True, True, True)
    with pytest.raises(TypeError):
        BVec2(True, False) & 1
