################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Generation of the closed family of vector and matrix classes.

Every (domain, size) vector and (domain, columns, rows) matrix is built once
at import by composing the kernel base with the capability mixins its domain
advertises. The classes are registered in REGISTRY and bound to module
names below, e.g. Vec3, DVec2, IMat4x3, BMat2.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple

from oasis_glm.domains.scalar_domain import ALL_DOMAINS
from oasis_glm.domains.scalar_domain import BOOL
from oasis_glm.domains.scalar_domain import COMPLEX128
from oasis_glm.domains.scalar_domain import FLOAT32
from oasis_glm.domains.scalar_domain import FLOAT64
from oasis_glm.domains.scalar_domain import INT32
from oasis_glm.domains.scalar_domain import INT64
from oasis_glm.domains.scalar_domain import UINT32
from oasis_glm.domains.scalar_domain import ScalarDomain
from oasis_glm.functions.complex_functions import ComplexVectorFunctions
from oasis_glm.functions.integer_functions import IntegerVectorFunctions
from oasis_glm.functions.real_functions import RealVectorFunctions
from oasis_glm.matrix.matrix_arithmetic import ArithmeticMatrixMixin
from oasis_glm.matrix.matrix_arithmetic import OrderedMatrixMixin
from oasis_glm.matrix.matrix_arithmetic import RealSquareMatrixMixin
from oasis_glm.matrix.matrix_arithmetic import SignedMatrixMixin
from oasis_glm.matrix.matrix_base import MatrixBase
from oasis_glm.matrix.matrix_base import column_property
from oasis_glm.matrix.matrix_base import field_property
from oasis_glm.matrix.matrix_base import row_property
from oasis_glm.matrix.matrix_logic import LogicalMatrixMixin
from oasis_glm.swizzle.swizzle import SWIZZLE_TYPES
from oasis_glm.type_registry import REGISTRY
from oasis_glm.vector.vector_arithmetic import ArithmeticVectorMixin
from oasis_glm.vector.vector_arithmetic import FractionalVectorMixin
from oasis_glm.vector.vector_arithmetic import OrderedVectorMixin
from oasis_glm.vector.vector_arithmetic import PlanarCrossMixin
from oasis_glm.vector.vector_arithmetic import SignedVectorMixin
from oasis_glm.vector.vector_arithmetic import SpatialCrossMixin
from oasis_glm.vector.vector_base import COMPONENT_NAMES
from oasis_glm.vector.vector_base import VectorBase
from oasis_glm.vector.vector_base import component_property
from oasis_glm.vector.vector_logic import LogicalVectorMixin


_LOG: logging.Logger = logging.getLogger(__name__)


# Component counts of the generated vectors
VECTOR_SIZES: Tuple[int, ...] = (2, 3, 4)

# Column and row counts of the generated matrices
MATRIX_DIMENSIONS: Tuple[int, ...] = (2, 3, 4)


def _vector_bases(domain: ScalarDomain, size: int) -> Tuple[type, ...]:
    bases: List[type] = []

    if domain.is_real:
        bases.append(RealVectorFunctions)
    elif domain.is_integer:
        bases.append(IntegerVectorFunctions)
    elif domain.is_complex:
        bases.append(ComplexVectorFunctions)

    if domain.is_boolean:
        bases.append(LogicalVectorMixin)
    else:
        if domain.is_fractional:
            bases.append(FractionalVectorMixin)
        if domain.is_ordered:
            bases.append(OrderedVectorMixin)
        if domain.is_signed:
            bases.append(SignedVectorMixin)
        if size == 2:
            bases.append(PlanarCrossMixin)
        elif size == 3:
            bases.append(SpatialCrossMixin)
        bases.append(ArithmeticVectorMixin)

    bases.append(VectorBase)
    return tuple(bases)


def _matrix_bases(domain: ScalarDomain, cols: int, rows: int) -> Tuple[type, ...]:
    bases: List[type] = []

    if domain.is_boolean:
        bases.append(LogicalMatrixMixin)
    else:
        if domain.is_real and cols == rows:
            bases.append(RealSquareMatrixMixin)
        if domain.is_ordered:
            bases.append(OrderedMatrixMixin)
        if domain.is_signed:
            bases.append(SignedMatrixMixin)
        bases.append(ArithmeticMatrixMixin)

    bases.append(MatrixBase)
    return tuple(bases)


def _unit_constant(index: int) -> classmethod:
    def constant(cls: Any) -> Any:
        return cls.unit(index)

    constant.__doc__ = f"Return the unit vector along {COMPONENT_NAMES[index]}."
    return classmethod(constant)


def _imaginary_unit_constant(index: int) -> classmethod:
    def constant(cls: Any) -> Any:
        return cls.imaginary_unit(index)

    constant.__doc__ = f"Return 1j along {COMPONENT_NAMES[index]}, zero elsewhere."
    return classmethod(constant)


def make_vector_type(domain: ScalarDomain, size: int) -> type:
    """Generate and register the vector class of one domain and size."""
    name: str = f"{domain.prefix}Vec{size}"
    namespace: Dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "__doc__": f"Vector of {size} {domain.name} components.",
        "DOMAIN": domain,
        "SIZE": size,
        "_SWIZZLE": SWIZZLE_TYPES[size],
    }
    for index in range(size):
        letter: str = COMPONENT_NAMES[index]
        namespace[letter] = component_property(index)
        namespace[f"unit_{letter}"] = _unit_constant(index)
        if domain.is_complex:
            namespace[f"imaginary_unit_{letter}"] = _imaginary_unit_constant(index)

    vector_type: type = type(name, _vector_bases(domain, size), namespace)
    REGISTRY.register_vector(domain, size, vector_type)
    return vector_type


def make_matrix_type(domain: ScalarDomain, cols: int, rows: int) -> type:
    """Generate and register the matrix class of one domain and shape."""
    name: str = f"{domain.prefix}Mat{cols}x{rows}"
    namespace: Dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "__doc__": f"Matrix of {cols} columns and {rows} rows of {domain.name}.",
        "DOMAIN": domain,
        "COLS": cols,
        "ROWS": rows,
    }
    if domain.is_arithmetic:
        namespace["_MATMUL_RESULTS"] = {}
        namespace["_RMATMUL_RESULTS"] = {}
    for column, row in itertools.product(range(cols), range(rows)):
        namespace[f"m{column}{row}"] = field_property(column, row)
    for column in range(cols):
        namespace[f"column{column}"] = column_property(column)
    for row in range(rows):
        namespace[f"row{row}"] = row_property(row)

    matrix_type: type = type(name, _matrix_bases(domain, cols, rows), namespace)
    REGISTRY.register_matrix(domain, cols, rows, matrix_type)
    return matrix_type


def _link_products(domain: ScalarDomain) -> int:
    """Fill the product tables of one domain and return the entry count."""
    count: int = 0
    dims: Tuple[int, ...] = MATRIX_DIMENSIONS

    # A (k columns, m rows) @ B (n columns, k rows) -> C (n columns, m rows)
    for k, m, n in itertools.product(dims, dims, dims):
        lhs: Any = REGISTRY.matrix(domain, k, m)
        rhs: type = REGISTRY.matrix(domain, n, k)
        lhs._MATMUL_RESULTS[rhs] = REGISTRY.matrix(domain, n, m)
        count += 1

    for k, m in itertools.product(dims, dims):
        matrix: Any = REGISTRY.matrix(domain, k, m)
        matrix._MATMUL_RESULTS[REGISTRY.vector(domain, k)] = REGISTRY.vector(
            domain, m
        )
        matrix._RMATMUL_RESULTS[REGISTRY.vector(domain, m)] = REGISTRY.vector(
            domain, k
        )
        count += 2

    return count


def generate_type_family() -> None:
    """Generate every vector, matrix and product table."""
    vector_count: int = 0
    matrix_count: int = 0
    product_count: int = 0

    for domain in ALL_DOMAINS:
        for size in VECTOR_SIZES:
            make_vector_type(domain, size)
            vector_count += 1

        for cols, rows in itertools.product(MATRIX_DIMENSIONS, MATRIX_DIMENSIONS):
            make_matrix_type(domain, cols, rows)
            matrix_count += 1

        if domain.is_arithmetic:
            product_count += _link_products(domain)

    _LOG.debug(
        "Generated %d vector types, %d matrix types, %d swizzle types and %d "
        "product entries",
        vector_count,
        matrix_count,
        len(SWIZZLE_TYPES),
        product_count,
    )


generate_type_family()

Vec2 = REGISTRY.vector(FLOAT32, 2)
Vec3 = REGISTRY.vector(FLOAT32, 3)
Vec4 = REGISTRY.vector(FLOAT32, 4)

Mat2x2 = REGISTRY.matrix(FLOAT32, 2, 2)
Mat2x3 = REGISTRY.matrix(FLOAT32, 2, 3)
Mat2x4 = REGISTRY.matrix(FLOAT32, 2, 4)
Mat3x2 = REGISTRY.matrix(FLOAT32, 3, 2)
Mat3x3 = REGISTRY.matrix(FLOAT32, 3, 3)
Mat3x4 = REGISTRY.matrix(FLOAT32, 3, 4)
Mat4x2 = REGISTRY.matrix(FLOAT32, 4, 2)
Mat4x3 = REGISTRY.matrix(FLOAT32, 4, 3)
Mat4x4 = REGISTRY.matrix(FLOAT32, 4, 4)

Mat2 = Mat2x2
Mat3 = Mat3x3
Mat4 = Mat4x4

DVec2 = REGISTRY.vector(FLOAT64, 2)
DVec3 = REGISTRY.vector(FLOAT64, 3)
DVec4 = REGISTRY.vector(FLOAT64, 4)

DMat2x2 = REGISTRY.matrix(FLOAT64, 2, 2)
DMat2x3 = REGISTRY.matrix(FLOAT64, 2, 3)
DMat2x4 = REGISTRY.matrix(FLOAT64, 2, 4)
DMat3x2 = REGISTRY.matrix(FLOAT64, 3, 2)
DMat3x3 = REGISTRY.matrix(FLOAT64, 3, 3)
DMat3x4 = REGISTRY.matrix(FLOAT64, 3, 4)
DMat4x2 = REGISTRY.matrix(FLOAT64, 4, 2)
DMat4x3 = REGISTRY.matrix(FLOAT64, 4, 3)
DMat4x4 = REGISTRY.matrix(FLOAT64, 4, 4)

DMat2 = DMat2x2
DMat3 = DMat3x3
DMat4 = DMat4x4

IVec2 = REGISTRY.vector(INT32, 2)
IVec3 = REGISTRY.vector(INT32, 3)
IVec4 = REGISTRY.vector(INT32, 4)

IMat2x2 = REGISTRY.matrix(INT32, 2, 2)
IMat2x3 = REGISTRY.matrix(INT32, 2, 3)
IMat2x4 = REGISTRY.matrix(INT32, 2, 4)
IMat3x2 = REGISTRY.matrix(INT32, 3, 2)
IMat3x3 = REGISTRY.matrix(INT32, 3, 3)
IMat3x4 = REGISTRY.matrix(INT32, 3, 4)
IMat4x2 = REGISTRY.matrix(INT32, 4, 2)
IMat4x3 = REGISTRY.matrix(INT32, 4, 3)
IMat4x4 = REGISTRY.matrix(INT32, 4, 4)

IMat2 = IMat2x2
IMat3 = IMat3x3
IMat4 = IMat4x4

UVec2 = REGISTRY.vector(UINT32, 2)
UVec3 = REGISTRY.vector(UINT32, 3)
UVec4 = REGISTRY.vector(UINT32, 4)

UMat2x2 = REGISTRY.matrix(UINT32, 2, 2)
UMat2x3 = REGISTRY.matrix(UINT32, 2, 3)
UMat2x4 = REGISTRY.matrix(UINT32, 2, 4)
UMat3x2 = REGISTRY.matrix(UINT32, 3, 2)
UMat3x3 = REGISTRY.matrix(UINT32, 3, 3)
UMat3x4 = REGISTRY.matrix(UINT32, 3, 4)
UMat4x2 = REGISTRY.matrix(UINT32, 4, 2)
UMat4x3 = REGISTRY.matrix(UINT32, 4, 3)
UMat4x4 = REGISTRY.matrix(UINT32, 4, 4)

UMat2 = UMat2x2
UMat3 = UMat3x3
UMat4 = UMat4x4

LVec2 = REGISTRY.vector(INT64, 2)
LVec3 = REGISTRY.vector(INT64, 3)
LVec4 = REGISTRY.vector(INT64, 4)

LMat2x2 = REGISTRY.matrix(INT64, 2, 2)
LMat2x3 = REGISTRY.matrix(INT64, 2, 3)
LMat2x4 = REGISTRY.matrix(INT64, 2, 4)
LMat3x2 = REGISTRY.matrix(INT64, 3, 2)
LMat3x3 = REGISTRY.matrix(INT64, 3, 3)
LMat3x4 = REGISTRY.matrix(INT64, 3, 4)
LMat4x2 = REGISTRY.matrix(INT64, 4, 2)
LMat4x3 = REGISTRY.matrix(INT64, 4, 3)
LMat4x4 = REGISTRY.matrix(INT64, 4, 4)

LMat2 = LMat2x2
LMat3 = LMat3x3
LMat4 = LMat4x4

BVec2 = REGISTRY.vector(BOOL, 2)
BVec3 = REGISTRY.vector(BOOL, 3)
BVec4 = REGISTRY.vector(BOOL, 4)

BMat2x2 = REGISTRY.matrix(BOOL, 2, 2)
BMat2x3 = REGISTRY.matrix(BOOL, 2, 3)
BMat2x4 = REGISTRY.matrix(BOOL, 2, 4)
BMat3x2 = REGISTRY.matrix(BOOL, 3, 2)
BMat3x3 = REGISTRY.matrix(BOOL, 3, 3)
BMat3x4 = REGISTRY.matrix(BOOL, 3, 4)
BMat4x2 = REGISTRY.matrix(BOOL, 4, 2)
BMat4x3 = REGISTRY.matrix(BOOL, 4, 3)
BMat4x4 = REGISTRY.matrix(BOOL, 4, 4)

BMat2 = BMat2x2
BMat3 = BMat3x3
BMat4 = BMat4x4

CVec2 = REGISTRY.vector(COMPLEX128, 2)
CVec3 = REGISTRY.vector(COMPLEX128, 3)
CVec4 = REGISTRY.vector(COMPLEX128, 4)

CMat2x2 = REGISTRY.matrix(COMPLEX128, 2, 2)
CMat2x3 = REGISTRY.matrix(COMPLEX128, 2, 3)
CMat2x4 = REGISTRY.matrix(COMPLEX128, 2, 4)
CMat3x2 = REGISTRY.matrix(COMPLEX128, 3, 2)
CMat3x3 = REGISTRY.matrix(COMPLEX128, 3, 3)
CMat3x4 = REGISTRY.matrix(COMPLEX128, 3, 4)
CMat4x2 = REGISTRY.matrix(COMPLEX128, 4, 2)
CMat4x3 = REGISTRY.matrix(COMPLEX128, 4, 3)
CMat4x4 = REGISTRY.matrix(COMPLEX128, 4, 4)

CMat2 = CMat2x2
CMat3 = CMat3x3
CMat4 = CMat4x4
