################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Norm kernels over arrays of component magnitudes.

Every function takes the non-negative real magnitudes |c_i| of a value's
components, already converted to the accumulation dtype, and returns a
Python float. Degenerate inputs are not validated: numpy produces inf/NaN.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def length_sqr(magnitudes: NDArray[Any]) -> float:
    """Return sum |c|^2."""
    with np.errstate(all="ignore"):
        return float(np.sum(magnitudes * magnitudes, dtype=magnitudes.dtype))


def length(magnitudes: NDArray[Any]) -> float:
    """Return the Euclidean norm sqrt(sum |c|^2)."""
    with np.errstate(all="ignore"):
        squared: Any = np.sum(magnitudes * magnitudes, dtype=magnitudes.dtype)
        return float(np.sqrt(squared))


def norm1(magnitudes: NDArray[Any]) -> float:
    """Return the taxicab norm sum |c|."""
    return float(np.sum(magnitudes, dtype=magnitudes.dtype))


def norm_max(magnitudes: NDArray[Any]) -> float:
    """Return the maximum norm max |c|."""
    return float(np.max(magnitudes))


def norm_p(magnitudes: NDArray[Any], p: float) -> float:
    """Return the p-norm (sum |c|^p)^(1/p).

    p = 0 and negative p are computed as written and may yield inf or NaN.
    """
    with np.errstate(all="ignore"):
        exponent: Any = magnitudes.dtype.type(p)
        total: Any = np.sum(np.power(magnitudes, exponent), dtype=magnitudes.dtype)
        return float(np.power(total, magnitudes.dtype.type(1) / exponent))
