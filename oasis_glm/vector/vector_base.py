################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Storage, construction, access and equality for fixed-size vectors."""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_glm.domains.scalar_domain import BOOL
from oasis_glm.domains.scalar_domain import ScalarDomain
from oasis_glm.domains.scalar_domain import is_scalar
from oasis_glm.formatting.value_format import format_values
from oasis_glm.formatting.value_format import resolve_params
from oasis_glm.glm_errors import check_index
from oasis_glm.math_utils.hashing import combine_hashes
from oasis_glm.type_registry import REGISTRY


# Names of the components in storage order
COMPONENT_NAMES: str = "xyzw"


def fit_array(values: NDArray[Any], size: int, domain: ScalarDomain) -> NDArray[Any]:
    """Zero-fill or truncate a 1-D array to the given size."""
    result: NDArray[Any] = np.zeros(size, dtype=domain.dtype)
    count: int = min(size, values.shape[0])
    result[:count] = values[:count]
    return result


class VectorBase:
    """Ordered tuple of exactly SIZE scalars of one domain.

    Responsibility:
        Own the component storage of a vector and every operation that is
        defined for all domains: construction, indexed and named access,
        structural equality, hashing, formatting and the constants shared by
        every domain.

    Storage:
        A numpy array of shape (SIZE,) and dtype DOMAIN.dtype. Every vector
        owns its array; results are built from fresh arrays.

    Capabilities beyond this base (arithmetic, ordering, logic, functions)
    are mixed in per domain when the type family is generated.
    """

    __slots__ = ("_values",)

    # Numpy defers mixed operations to the vector's reflected operators
    __array_ufunc__ = None

    DOMAIN: ClassVar[ScalarDomain]
    SIZE: ClassVar[int]

    # Swizzle accessor class shared by every vector of the same size
    _SWIZZLE: ClassVar[type]

    _values: NDArray[Any]

    def __init__(self, *args: Any) -> None:
        self._values = self._construct(args)

    @classmethod
    def _construct(cls, args: Sequence[Any]) -> NDArray[Any]:
        domain: ScalarDomain = cls.DOMAIN

        if not args:
            return np.zeros(cls.SIZE, dtype=domain.dtype)

        if len(args) == 1:
            arg: Any = args[0]
            if is_scalar(arg):
                return domain.full(cls.SIZE, arg)
            if isinstance(arg, VectorBase):
                return fit_array(domain.convert_array(arg._values), cls.SIZE, domain)
            if isinstance(arg, np.ndarray):
                if arg.ndim != 1:
                    raise TypeError(f"{cls.__name__} requires a 1-D array")
                return fit_array(domain.convert_array(arg), cls.SIZE, domain)
            if isinstance(arg, (list, tuple)):
                coerced: List[Any] = [domain.coerce(value) for value in arg]
                return fit_array(
                    np.array(coerced, dtype=domain.dtype).reshape(-1), cls.SIZE, domain
                )
            raise TypeError(
                f"cannot construct {cls.__name__} from {type(arg).__name__}"
            )

        parts: List[NDArray[Any]] = []
        for arg in args:
            if is_scalar(arg):
                parts.append(np.array([domain.coerce(arg)], dtype=domain.dtype))
            elif isinstance(arg, VectorBase):
                parts.append(domain.convert_array(arg._values))
            else:
                raise TypeError(
                    f"cannot construct {cls.__name__} from {type(arg).__name__}"
                )

        values: NDArray[Any] = np.concatenate(parts).astype(domain.dtype)
        if values.shape[0] != cls.SIZE:
            raise TypeError(
                f"{cls.__name__} requires {cls.SIZE} components, got {values.shape[0]}"
            )
        return values

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Any:
        """Rebuild a vector from exactly SIZE ordered scalars.

        Raises:
            ValueError: If the number of scalars is not SIZE
            TypeError: If a scalar cannot be represented in the domain
        """
        scalars: List[Any] = list(values)
        if len(scalars) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} requires {cls.SIZE} values, got {len(scalars)}"
            )
        return cls._from_array(
            np.array([cls.DOMAIN.coerce(value) for value in scalars], cls.DOMAIN.dtype)
        )

    @classmethod
    def _from_array(cls, values: Any) -> Any:
        """Wrap a copy of an array already in the domain without validation."""
        result: VectorBase = cls.__new__(cls)
        with np.errstate(all="ignore"):
            result._values = np.array(
                np.broadcast_to(values, (cls.SIZE,)), dtype=cls.DOMAIN.dtype
            )
        return result

    @classmethod
    def _operand(cls, value: Any) -> Optional[Any]:
        """Return the storage of a same-class vector or a coerced scalar.

        Returns None for values of any other class so operators can return
        NotImplemented.
        """
        if type(value) is cls:
            return value._values
        if is_scalar(value):
            return cls.DOMAIN.coerce(value)
        return None

    @classmethod
    def _require_operand(cls, value: Any) -> Any:
        operand: Optional[Any] = cls._operand(value)
        if operand is None:
            raise TypeError(
                f"expected {cls.__name__} or scalar, got {type(value).__name__}"
            )
        return operand

    @classmethod
    def _apply(cls, function: Any, *operands: Any) -> Any:
        """Apply a numpy function to vector-or-scalar operands of this class."""
        arrays: List[Any] = [cls._require_operand(operand) for operand in operands]
        with np.errstate(all="ignore"):
            return cls._from_array(function(*arrays))

    @classmethod
    def _bool_vector(cls, values: NDArray[Any]) -> Any:
        return REGISTRY.vector(BOOL, cls.SIZE)._from_array(values)

    # Component access

    def __getitem__(self, index: Any) -> Any:
        return self._values[check_index(index, self.SIZE)].item()

    def __setitem__(self, index: Any, value: Any) -> None:
        self._values[check_index(index, self.SIZE)] = self.DOMAIN.coerce(value)

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values.tolist())

    @property
    def values(self) -> List[Any]:
        """Return the components as a fresh list of Python scalars."""
        return self._values.tolist()

    def to_array(self) -> NDArray[Any]:
        """Return a copy of the component storage."""
        return self._values.copy()

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> NDArray[Any]:
        if copy is False:
            raise ValueError(f"{type(self).__name__} cannot be viewed without a copy")
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    @property
    def swizzle(self) -> Any:
        """Return a reorder accessor over a copy of the components."""
        return self._SWIZZLE(self)

    def copy(self) -> Any:
        return self._from_array(self._values)

    def __copy__(self) -> Any:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        return self.copy()

    # Equality and hashing

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not bool(np.array_equal(self._values, other._values))  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return combine_hashes(self._values.tolist())

    @classmethod
    def equal(cls, lhs: Any, rhs: Any) -> Any:
        """Return the component-wise lhs == rhs as a boolean vector."""
        return cls._bool_vector(
            np.equal(cls._require_operand(lhs), cls._require_operand(rhs))
        )

    @classmethod
    def not_equal(cls, lhs: Any, rhs: Any) -> Any:
        """Return the component-wise lhs != rhs as a boolean vector."""
        return cls._bool_vector(
            np.not_equal(cls._require_operand(lhs), cls._require_operand(rhs))
        )

    # Constants

    @classmethod
    def zero(cls) -> Any:
        return cls._from_array(np.zeros(cls.SIZE, dtype=cls.DOMAIN.dtype))

    @classmethod
    def ones(cls) -> Any:
        return cls._from_array(np.ones(cls.SIZE, dtype=cls.DOMAIN.dtype))

    @classmethod
    def unit(cls, index: int) -> Any:
        """Return the vector with a one at the given component."""
        values: NDArray[Any] = np.zeros(cls.SIZE, dtype=cls.DOMAIN.dtype)
        values[check_index(index, cls.SIZE)] = cls.DOMAIN.one
        return cls._from_array(values)

    # Formatting

    def to_string(
        self,
        separator: Optional[str] = None,
        scalar_format: Optional[str] = None,
        formatter: Optional[Any] = None,
    ) -> str:
        """Join the components in order.

        Args:
            separator: Text between components, defaults to ", "
            scalar_format: format() spec applied to each component
            formatter: Callable rendering one component, wins over scalar_format
        """
        return format_values(
            self.values, resolve_params(separator, scalar_format, formatter)
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self.values)})"


def component_property(index: int) -> property:
    """Return a read/write property for one named component."""

    def getter(self: VectorBase) -> Any:
        return self._values[index].item()

    def setter(self: VectorBase, value: Any) -> None:
        self._values[index] = self.DOMAIN.coerce(value)

    name: str = COMPONENT_NAMES[index]
    return property(getter, setter, doc=f"The {name} component")
