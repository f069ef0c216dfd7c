################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Component reordering for vectors.

A swizzle accessor holds a copy of a vector's components and builds new
vectors of 2, 3 or 4 components by selecting, duplicating or reordering
them. Accessor classes are generated once per source size and shared by
every domain, so the available patterns depend only on the source size.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any
from typing import ClassVar
from typing import Dict
from typing import List

from numpy.typing import NDArray

from oasis_glm.domains.scalar_domain import ScalarDomain
from oasis_glm.glm_errors import check_index
from oasis_glm.type_registry import REGISTRY
from oasis_glm.vector.vector_base import VectorBase


_LOG: logging.Logger = logging.getLogger(__name__)


# Component letter sets, each in storage order
LETTER_SETS: tuple[str, ...] = ("xyzw", "rgba")

# Sizes of the vectors a swizzle can produce
TARGET_SIZES: tuple[int, ...] = (2, 3, 4)


class SwizzleBase:
    """Reorder accessor over a snapshot of one vector."""

    __slots__ = ("_domain", "_values")

    SOURCE_SIZE: ClassVar[int]

    def __init__(self, source: VectorBase) -> None:
        if source.SIZE != self.SOURCE_SIZE:
            raise TypeError(
                f"{type(self).__name__} requires a vector of size {self.SOURCE_SIZE}"
            )
        self._domain: ScalarDomain = source.DOMAIN
        self._values: NDArray[Any] = source.to_array()

    def select(self, *indices: int) -> Any:
        """Return a new vector built from the given source component indices.

        Raises:
            TypeError: If fewer than 2 or more than 4 indices are given, or an
                index is not an integer
            ComponentIndexError: If an index is outside the source vector
        """
        if len(indices) not in TARGET_SIZES:
            raise TypeError(f"swizzle selects 2 to 4 components, got {len(indices)}")
        positions: List[int] = [
            check_index(index, self.SOURCE_SIZE) for index in indices
        ]
        return REGISTRY.vector(self._domain, len(positions))._from_array(
            self._values[positions]
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._values.tolist()))})"


def _pattern_property(positions: tuple[int, ...]) -> property:
    def getter(self: SwizzleBase) -> Any:
        return self.select(*positions)

    return property(getter)


def make_swizzle_type(source_size: int) -> type:
    """Generate the accessor class for vectors of one size."""
    namespace: Dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "SOURCE_SIZE": source_size,
    }
    for letters in LETTER_SETS:
        alphabet: str = letters[:source_size]
        for target_size in TARGET_SIZES:
            for positions in itertools.product(range(source_size), repeat=target_size):
                name: str = "".join(alphabet[p] for p in positions)
                namespace[name] = _pattern_property(positions)

    class_name: str = f"Swizzle{source_size}"
    swizzle_type: type = type(class_name, (SwizzleBase,), namespace)
    _LOG.debug("Generated %s with %d patterns", class_name, len(namespace) - 3)
    return swizzle_type


Swizzle2: type = make_swizzle_type(2)
Swizzle3: type = make_swizzle_type(3)
Swizzle4: type = make_swizzle_type(4)

# Accessor class by source vector size
SWIZZLE_TYPES: Dict[int, type] = {2: Swizzle2, 3: Swizzle3, 4: Swizzle4}
