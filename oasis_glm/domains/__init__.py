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

from oasis_glm.domains.scalar_domain import ALL_DOMAINS
from oasis_glm.domains.scalar_domain import BOOL
from oasis_glm.domains.scalar_domain import COMPLEX128
from oasis_glm.domains.scalar_domain import FLOAT32
from oasis_glm.domains.scalar_domain import FLOAT64
from oasis_glm.domains.scalar_domain import INT32
from oasis_glm.domains.scalar_domain import INT64
from oasis_glm.domains.scalar_domain import UINT32
from oasis_glm.domains.scalar_domain import DomainKind
from oasis_glm.domains.scalar_domain import ScalarDomain
from oasis_glm.domains.scalar_domain import is_scalar


__all__ = [
    "ALL_DOMAINS",
    "BOOL",
    "COMPLEX128",
    "DomainKind",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "ScalarDomain",
    "UINT32",
    "is_scalar",
]
