################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Lookup table from (domain, shape) to generated vector and matrix classes."""

from __future__ import annotations

import logging
from typing import Dict
from typing import List
from typing import Tuple

from oasis_glm.domains.scalar_domain import ScalarDomain
from oasis_glm.glm_errors import TypeRegistryError


_LOG: logging.Logger = logging.getLogger(__name__)


class TypeRegistry:
    """Closed table of the generated type family.

    Kernels resolve cross-type results through the registry at call time,
    e.g. a comparison on a Vec3 produces a BVec3 and a transposed Mat2x3 is
    a Mat3x2. Entries are added once while the family is generated.
    """

    def __init__(self) -> None:
        self._vectors: Dict[Tuple[str, int], type] = {}
        self._matrices: Dict[Tuple[str, int, int], type] = {}

    def register_vector(self, domain: ScalarDomain, size: int, cls: type) -> None:
        key: Tuple[str, int] = (domain.name, size)
        if key in self._vectors:
            raise TypeRegistryError(f"vector {key} is already registered")
        self._vectors[key] = cls
        _LOG.debug("Registered %s for %s vectors of size %d", cls.__name__, *key)

    def register_matrix(
        self, domain: ScalarDomain, cols: int, rows: int, cls: type
    ) -> None:
        key: Tuple[str, int, int] = (domain.name, cols, rows)
        if key in self._matrices:
            raise TypeRegistryError(f"matrix {key} is already registered")
        self._matrices[key] = cls
        _LOG.debug("Registered %s for %s matrices of %dx%d", cls.__name__, *key)

    def vector(self, domain: ScalarDomain, size: int) -> type:
        """Return the vector class of the given domain and size."""
        try:
            return self._vectors[(domain.name, size)]
        except KeyError:
            raise TypeRegistryError(
                f"no {domain.name} vector of size {size}"
            ) from None

    def matrix(self, domain: ScalarDomain, cols: int, rows: int) -> type:
        """Return the matrix class of the given domain and shape."""
        try:
            return self._matrices[(domain.name, cols, rows)]
        except KeyError:
            raise TypeRegistryError(
                f"no {domain.name} matrix with {cols} columns and {rows} rows"
            ) from None

    def vector_types(self) -> List[type]:
        return list(self._vectors.values())

    def matrix_types(self) -> List[type]:
        return list(self._matrices.values())


# Registry populated by oasis_glm.glm_types
REGISTRY: TypeRegistry = TypeRegistry()
