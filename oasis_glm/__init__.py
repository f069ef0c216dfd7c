################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vector and matrix value types over real, integer, boolean and
complex scalars.
"""

from __future__ import annotations

from oasis_glm.config.format_params import FormatParams
from oasis_glm.config.format_params import FormatParamsError
from oasis_glm.glm_errors import ComponentIndexError
from oasis_glm.glm_errors import TypeRegistryError
from oasis_glm.glm_types import BMat2
from oasis_glm.glm_types import BMat2x2
from oasis_glm.glm_types import BMat2x3
from oasis_glm.glm_types import BMat2x4
from oasis_glm.glm_types import BMat3
from oasis_glm.glm_types import BMat3x2
from oasis_glm.glm_types import BMat3x3
from oasis_glm.glm_types import BMat3x4
from oasis_glm.glm_types import BMat4
from oasis_glm.glm_types import BMat4x2
from oasis_glm.glm_types import BMat4x3
from oasis_glm.glm_types import BMat4x4
from oasis_glm.glm_types import BVec2
from oasis_glm.glm_types import BVec3
from oasis_glm.glm_types import BVec4
from oasis_glm.glm_types import CMat2
from oasis_glm.glm_types import CMat2x2
from oasis_glm.glm_types import CMat2x3
from oasis_glm.glm_types import CMat2x4
from oasis_glm.glm_types import CMat3
from oasis_glm.glm_types import CMat3x2
from oasis_glm.glm_types import CMat3x3
from oasis_glm.glm_types import CMat3x4
from oasis_glm.glm_types import CMat4
from oasis_glm.glm_types import CMat4x2
from oasis_glm.glm_types import CMat4x3
from oasis_glm.glm_types import CMat4x4
from oasis_glm.glm_types import CVec2
from oasis_glm.glm_types import CVec3
from oasis_glm.glm_types import CVec4
from oasis_glm.glm_types import DMat2
from oasis_glm.glm_types import DMat2x2
from oasis_glm.glm_types import DMat2x3
from oasis_glm.glm_types import DMat2x4
from oasis_glm.glm_types import DMat3
from oasis_glm.glm_types import DMat3x2
from oasis_glm.glm_types import DMat3x3
from oasis_glm.glm_types import DMat3x4
from oasis_glm.glm_types import DMat4
from oasis_glm.glm_types import DMat4x2
from oasis_glm.glm_types import DMat4x3
from oasis_glm.glm_types import DMat4x4
from oasis_glm.glm_types import DVec2
from oasis_glm.glm_types import DVec3
from oasis_glm.glm_types import DVec4
from oasis_glm.glm_types import IMat2
from oasis_glm.glm_types import IMat2x2
from oasis_glm.glm_types import IMat2x3
from oasis_glm.glm_types import IMat2x4
from oasis_glm.glm_types import IMat3
from oasis_glm.glm_types import IMat3x2
from oasis_glm.glm_types import IMat3x3
from oasis_glm.glm_types import IMat3x4
from oasis_glm.glm_types import IMat4
from oasis_glm.glm_types import IMat4x2
from oasis_glm.glm_types import IMat4x3
from oasis_glm.glm_types import IMat4x4
from oasis_glm.glm_types import IVec2
from oasis_glm.glm_types import IVec3
from oasis_glm.glm_types import IVec4
from oasis_glm.glm_types import LMat2
from oasis_glm.glm_types import LMat2x2
from oasis_glm.glm_types import LMat2x3
from oasis_glm.glm_types import LMat2x4
from oasis_glm.glm_types import LMat3
from oasis_glm.glm_types import LMat3x2
from oasis_glm.glm_types import LMat3x3
from oasis_glm.glm_types import LMat3x4
from oasis_glm.glm_types import LMat4
from oasis_glm.glm_types import LMat4x2
from oasis_glm.glm_types import LMat4x3
from oasis_glm.glm_types import LMat4x4
from oasis_glm.glm_types import LVec2
from oasis_glm.glm_types import LVec3
from oasis_glm.glm_types import LVec4
from oasis_glm.glm_types import Mat2
from oasis_glm.glm_types import Mat2x2
from oasis_glm.glm_types import Mat2x3
from oasis_glm.glm_types import Mat2x4
from oasis_glm.glm_types import Mat3
from oasis_glm.glm_types import Mat3x2
from oasis_glm.glm_types import Mat3x3
from oasis_glm.glm_types import Mat3x4
from oasis_glm.glm_types import Mat4
from oasis_glm.glm_types import Mat4x2
from oasis_glm.glm_types import Mat4x3
from oasis_glm.glm_types import Mat4x4
from oasis_glm.glm_types import UMat2
from oasis_glm.glm_types import UMat2x2
from oasis_glm.glm_types import UMat2x3
from oasis_glm.glm_types import UMat2x4
from oasis_glm.glm_types import UMat3
from oasis_glm.glm_types import UMat3x2
from oasis_glm.glm_types import UMat3x3
from oasis_glm.glm_types import UMat3x4
from oasis_glm.glm_types import UMat4
from oasis_glm.glm_types import UMat4x2
from oasis_glm.glm_types import UMat4x3
from oasis_glm.glm_types import UMat4x4
from oasis_glm.glm_types import UVec2
from oasis_glm.glm_types import UVec3
from oasis_glm.glm_types import UVec4
from oasis_glm.glm_types import Vec2
from oasis_glm.glm_types import Vec3
from oasis_glm.glm_types import Vec4
from oasis_glm.matrix.matrix_base import MatrixBase
from oasis_glm.type_registry import REGISTRY
from oasis_glm.type_registry import TypeRegistry
from oasis_glm.vector.vector_base import VectorBase


__all__ = [
    "ComponentIndexError",
    "FormatParams",
    "FormatParamsError",
    "MatrixBase",
    "REGISTRY",
    "TypeRegistry",
    "TypeRegistryError",
    "VectorBase",
    "BMat2",
    "BMat2x2",
    "BMat2x3",
    "BMat2x4",
    "BMat3",
    "BMat3x2",
    "BMat3x3",
    "BMat3x4",
    "BMat4",
    "BMat4x2",
    "BMat4x3",
    "BMat4x4",
    "BVec2",
    "BVec3",
    "BVec4",
    "CMat2",
    "CMat2x2",
    "CMat2x3",
    "CMat2x4",
    "CMat3",
    "CMat3x2",
    "CMat3x3",
    "CMat3x4",
    "CMat4",
    "CMat4x2",
    "CMat4x3",
    "CMat4x4",
    "CVec2",
    "CVec3",
    "CVec4",
    "DMat2",
    "DMat2x2",
    "DMat2x3",
    "DMat2x4",
    "DMat3",
    "DMat3x2",
    "DMat3x3",
    "DMat3x4",
    "DMat4",
    "DMat4x2",
    "DMat4x3",
    "DMat4x4",
    "DVec2",
    "DVec3",
    "DVec4",
    "IMat2",
    "IMat2x2",
    "IMat2x3",
    "IMat2x4",
    "IMat3",
    "IMat3x2",
    "IMat3x3",
    "IMat3x4",
    "IMat4",
    "IMat4x2",
    "IMat4x3",
    "IMat4x4",
    "IVec2",
    "IVec3",
    "IVec4",
    "LMat2",
    "LMat2x2",
    "LMat2x3",
    "LMat2x4",
    "LMat3",
    "LMat3x2",
    "LMat3x3",
    "LMat3x4",
    "LMat4",
    "LMat4x2",
    "LMat4x3",
    "LMat4x4",
    "LVec2",
    "LVec3",
    "LVec4",
    "Mat2",
    "Mat2x2",
    "Mat2x3",
    "Mat2x4",
    "Mat3",
    "Mat3x2",
    "Mat3x3",
    "Mat3x4",
    "Mat4",
    "Mat4x2",
    "Mat4x3",
    "Mat4x4",
    "UMat2",
    "UMat2x2",
    "UMat2x3",
    "UMat2x4",
    "UMat3",
    "UMat3x2",
    "UMat3x3",
    "UMat3x4",
    "UMat4",
    "UMat4x2",
    "UMat4x3",
    "UMat4x4",
    "UVec2",
    "UVec3",
    "UVec4",
    "Vec2",
    "Vec3",
    "Vec4",
]
