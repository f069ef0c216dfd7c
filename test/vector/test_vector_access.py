################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for vector component access, equality and formatting."""

from __future__ import annotations

import copy
import math
from typing import Any
from typing import List

import numpy as np
import pytest

from oasis_glm import REGISTRY
from oasis_glm import BVec2
from oasis_glm import BVec3
from oasis_glm import ComponentIndexError
from oasis_glm import DVec2
from oasis_glm import DVec3
from oasis_glm import IVec2
from oasis_glm import Vec2
from oasis_glm import Vec3
from oasis_glm import Vec4
from oasis_glm.math_utils.hashing import combine_hashes


VECTOR_TYPES: List[Any] = REGISTRY.vector_types()


def _bad_indices(size: int) -> List[int]:
    return [-2147483648, -1, size, size + 1, size + 2, 2147483647]


@pytest.mark.parametrize("vector_type", VECTOR_TYPES, ids=lambda t: t.__name__)
def test_index_round_trip(vector_type: Any) -> None:
    """Checks v[i] = s; v[i] == s for every valid index."""
    vector: Any = vector_type()
    for index in range(vector_type.SIZE):
        vector[index] = vector_type.DOMAIN.one
        assert vector[index] == 1
    assert vector == vector_type.ones()


@pytest.mark.parametrize("vector_type", VECTOR_TYPES, ids=lambda t: t.__name__)
def test_index_bounds(vector_type: Any) -> None:
    """Checks out-of-range indices fail for get and set."""
    vector: Any = vector_type()
    for index in _bad_indices(vector_type.SIZE):
        with pytest.raises(ComponentIndexError):
            vector[index]
        with pytest.raises(IndexError):
            vector[index] = vector_type.DOMAIN.zero


def test_non_integer_index() -> None:
    """Checks non-integer indices raise TypeError."""
    vector: Vec2 = Vec2(1, 2)
    with pytest.raises(TypeError):
        vector[1.0]
    with pytest.raises(TypeError):
        vector[True]
    with pytest.raises(TypeError):
        vector["x"]


def test_named_components() -> None:
    """Checks x, y, z, w are readable and writable up to N."""
    vector: Vec4 = Vec4(1, 2, 3, 4)
    assert (vector.x, vector.y, vector.z, vector.w) == (1.0, 2.0, 3.0, 4.0)
    vector.w = 8
    assert vector[3] == 8.0
    assert not hasattr(Vec2(), "z")
    assert not hasattr(Vec3(), "w")


def test_setter_coerces() -> None:
    """Checks component assignment uses strict coercion."""
    vector: IVec2 = IVec2(1, 2)
    with pytest.raises(TypeError):
        vector.x = 1.5
    with pytest.raises(TypeError):
        vector[0] = 1.5


def test_sequence_protocol() -> None:
    """Checks len, iteration, values and array interop."""
    vector: DVec3 = DVec3(1, 2, 3)
    assert len(vector) == 3
    assert list(vector) == [1.0, 2.0, 3.0]

    values: List[float] = vector.values
    values[0] = 9.0
    assert vector.x == 1.0

    array: Any = vector.to_array()
    array[0] = 9.0
    assert vector.x == 1.0
    assert np.asarray(vector).dtype == np.float64
    assert np.asarray(Vec2(1, 2)).dtype == np.float32


def test_copy_is_independent() -> None:
    """Checks copies do not share storage."""
    vector: Vec3 = Vec3(1, 2, 3)
    for duplicate in (vector.copy(), copy.copy(vector), copy.deepcopy(vector)):
        duplicate.x = 7
        assert vector.x == 1.0
        assert duplicate.x == 7.0


def test_equality() -> None:
    """Checks structural, exact, same-class equality."""
    assert Vec2(1, 2) == Vec2(1, 2)
    assert Vec2(1, 2) != Vec2(1, 3)
    assert Vec2(1, 2) != DVec2(1, 2)
    assert Vec2(1, 2) != (1.0, 2.0)
    assert Vec2(0.1, 0) != DVec2(0.1, 0)


def test_nan_never_equal() -> None:
    """Checks IEEE equality for NaN components."""
    vector: DVec2 = DVec2(math.nan, 0.0)
    assert vector != vector.copy()
    assert not vector == vector.copy()


def test_hash() -> None:
    """Checks equal vectors hash equal with the component mixing."""
    assert hash(Vec3(1, 2, 3)) == hash(Vec3(1, 2, 3))
    assert hash(DVec3(1, 2, 3)) == combine_hashes([1.0, 2.0, 3.0])
    assert hash(Vec2(0.0, 1.0)) == hash(Vec2(-0.0, 1.0))
    assert len({IVec2(1, 2), IVec2(1, 2), IVec2(2, 1)}) == 2


def test_comparison_helpers() -> None:
    """Checks equal and not_equal return boolean vectors."""
    lhs: Vec3 = Vec3(1, 2, 3)
    rhs: Vec3 = Vec3(1, 0, 3)
    assert Vec3.equal(lhs, rhs) == BVec3(True, False, True)
    assert Vec3.not_equal(lhs, rhs) == BVec3(False, True, False)
    assert Vec3.equal(lhs, 2) == BVec3(False, True, False)
    assert BVec2.equal(BVec2(True, False), True) == BVec2(True, False)


def test_constants_are_fresh() -> None:
    """Checks named constants are independent instances."""
    first: Vec3 = Vec3.zero()
    second: Vec3 = Vec3.zero()
    assert first is not second
    first.x = 5
    assert Vec3.zero() == Vec3(0, 0, 0)
    assert second.x == 0.0


def test_unit_constants() -> None:
    """Checks unit vectors exist up to N."""
    assert DVec3.unit_x().values == [1.0, 0.0, 0.0]
    assert DVec3.unit_z().values == [0.0, 0.0, 1.0]
    assert Vec4.unit_w() == Vec4(0, 0, 0, 1)
    assert BVec2.unit_y() == BVec2(False, True)
    assert not hasattr(Vec2, "unit_z")
    assert Vec3.ones() == Vec3(1)


def test_to_string() -> None:
    """Checks formatting with defaults and overrides."""
    assert str(Vec2(1.5, 2)) == "1.5, 2.0"
    assert str(BVec2(True, False)) == "True, False"
    assert Vec2(1.5, 2).to_string(separator=";", scalar_format=".2f") == "1.50;2.00"
    assert IVec2(1, 2).to_string(formatter=lambda value: hex(value)) == "0x1, 0x2"


def test_repr() -> None:
    """Checks repr names the class and components."""
    assert repr(IVec2(1, 2)) == "IVec2(1, 2)"
    assert repr(BVec2(True, False)) == "BVec2(True, False)"


def test_array_interface_requires_copy() -> None:
    """Checks numpy conversion refuses a no-copy request."""
    vector: DVec3 = DVec3(1, 2, 3)
    array: Any = np.asarray(vector, dtype=np.float32)
    assert array.dtype == np.float32
    assert array.tolist() == [1.0, 2.0, 3.0]
    with pytest.raises(ValueError):
        np.asarray(vector, copy=False)
