################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Storage, construction, access and equality for fixed-shape matrices."""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from oasis_glm.domains.scalar_domain import ScalarDomain
from oasis_glm.domains.scalar_domain import is_scalar
from oasis_glm.formatting.value_format import format_values
from oasis_glm.formatting.value_format import resolve_params
from oasis_glm.glm_errors import check_index
from oasis_glm.math_utils.hashing import combine_hashes
from oasis_glm.type_registry import REGISTRY
from oasis_glm.vector.vector_base import VectorBase


class MatrixBase:
    """COLS column vectors of ROWS scalars each, stored column-major.

    Responsibility:
        Own the field storage of a matrix and every operation that is
        defined for all domains: construction, flattened and 2-D access,
        column/row extraction, structural equality, hashing and formatting.

    Storage:
        A numpy array of shape (COLS, ROWS), so values[c, r] is the field in
        column c and row r, and the C-order flattening is the column-major
        field order: m[c, r] == m[c * ROWS + r].

    Columns and rows are returned as fresh vectors, never as live views.
    """

    __slots__ = ("_values",)

    # Numpy defers mixed operations to the matrix's reflected operators
    __array_ufunc__ = None

    DOMAIN: ClassVar[ScalarDomain]
    COLS: ClassVar[int]
    ROWS: ClassVar[int]

    _values: NDArray[Any]

    def __init__(self, *args: Any) -> None:
        self._values = self._construct(args)

    @classmethod
    def _shape(cls) -> Tuple[int, int]:
        return (cls.COLS, cls.ROWS)

    @classmethod
    def _field_count(cls) -> int:
        return cls.COLS * cls.ROWS

    @classmethod
    def _construct(cls, args: Sequence[Any]) -> NDArray[Any]:
        domain: ScalarDomain = cls.DOMAIN

        if not args:
            return np.zeros(cls._shape(), dtype=domain.dtype)

        if len(args) == 1 and isinstance(args[0], MatrixBase):
            source: NDArray[Any] = domain.convert_array(args[0]._values)
            if source.shape == cls._shape():
                return source

            # Fields outside the overlap come from the identity
            values: NDArray[Any] = np.eye(cls.COLS, cls.ROWS, dtype=domain.dtype)
            cols: int = min(cls.COLS, source.shape[0])
            rows: int = min(cls.ROWS, source.shape[1])
            values[:cols, :rows] = source[:cols, :rows]
            return values

        if len(args) == cls.COLS and all(
            isinstance(arg, VectorBase) and arg.SIZE == cls.ROWS for arg in args
        ):
            return np.stack([domain.convert_array(arg._values) for arg in args])

        if len(args) == cls._field_count() and all(is_scalar(arg) for arg in args):
            return np.array(
                [domain.coerce(arg) for arg in args], dtype=domain.dtype
            ).reshape(cls._shape())

        raise TypeError(
            f"{cls.__name__} requires no arguments, a matrix, {cls.COLS} column "
            f"vectors of size {cls.ROWS} or {cls._field_count()} scalars"
        )

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Any:
        """Rebuild a matrix from exactly COLS * ROWS column-major scalars.

        Raises:
            ValueError: If the number of scalars is wrong
            TypeError: If a scalar cannot be represented in the domain
        """
        scalars: List[Any] = list(values)
        if len(scalars) != cls._field_count():
            raise ValueError(
                f"{cls.__name__} requires {cls._field_count()} values, "
                f"got {len(scalars)}"
            )
        return cls._from_array(
            np.array([cls.DOMAIN.coerce(value) for value in scalars], cls.DOMAIN.dtype)
        )

    @classmethod
    def _from_array(cls, values: Any) -> Any:
        """Wrap a copy of an array already in the domain without validation."""
        result: MatrixBase = cls.__new__(cls)
        array: NDArray[Any] = np.asarray(values)
        if array.ndim == 1:
            array = array.reshape(cls._shape())
        with np.errstate(all="ignore"):
            result._values = np.array(
                np.broadcast_to(array, cls._shape()), dtype=cls.DOMAIN.dtype
            )
        return result

    @classmethod
    def _operand(cls, value: Any) -> Optional[Any]:
        """Return the storage of a same-class matrix or a coerced scalar."""
        if type(value) is cls:
            return value._values
        if is_scalar(value):
            return cls.DOMAIN.coerce(value)
        return None

    def _position(self, key: Any) -> Tuple[int, int]:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError("matrix index must be (column, row)")
            return (
                check_index(key[0], self.COLS, "column"),
                check_index(key[1], self.ROWS, "row"),
            )
        index: int = check_index(key, self._field_count())
        column, row = divmod(index, self.ROWS)
        return (column, row)

    # Field access

    def __getitem__(self, key: Any) -> Any:
        return self._values[self._position(key)].item()

    def __setitem__(self, key: Any, value: Any) -> None:
        self._values[self._position(key)] = self.DOMAIN.coerce(value)

    def __len__(self) -> int:
        return self._field_count()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    @property
    def values(self) -> List[Any]:
        """Return all fields in column-major order as Python scalars."""
        return self._values.reshape(-1).tolist()

    def values_2d(self) -> List[List[Any]]:
        """Return the fields as a list of columns."""
        return self._values.tolist()

    def to_array(self) -> NDArray[Any]:
        """Return a copy of the storage, indexed as array[column, row]."""
        return self._values.copy()

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> NDArray[Any]:
        if copy is False:
            raise ValueError(f"{type(self).__name__} cannot be viewed without a copy")
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    def column(self, index: int) -> Any:
        """Return a copy of one column as a vector of size ROWS."""
        column: int = check_index(index, self.COLS, "column")
        return REGISTRY.vector(self.DOMAIN, self.ROWS)._from_array(
            self._values[column]
        )

    def row(self, index: int) -> Any:
        """Return a copy of one row as a vector of size COLS."""
        row: int = check_index(index, self.ROWS, "row")
        return REGISTRY.vector(self.DOMAIN, self.COLS)._from_array(
            self._values[:, row]
        )

    def transposed(self) -> Any:
        """Return the ROWS x COLS matrix with result[r, c] == self[c, r]."""
        return REGISTRY.matrix(self.DOMAIN, self.ROWS, self.COLS)._from_array(
            self._values.T
        )

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
        return combine_hashes(self.values)

    # Constants

    @classmethod
    def zero(cls) -> Any:
        return cls._from_array(np.zeros(cls._shape(), dtype=cls.DOMAIN.dtype))

    @classmethod
    def ones(cls) -> Any:
        return cls._from_array(np.ones(cls._shape(), dtype=cls.DOMAIN.dtype))

    @classmethod
    def identity(cls) -> Any:
        """Return ones on the main diagonal and zeros elsewhere."""
        return cls._from_array(np.eye(cls.COLS, cls.ROWS, dtype=cls.DOMAIN.dtype))

    # Formatting

    def to_string(
        self,
        separator: Optional[str] = None,
        scalar_format: Optional[str] = None,
        formatter: Optional[Any] = None,
    ) -> str:
        """Join all fields in column-major order."""
        return format_values(
            self.values, resolve_params(separator, scalar_format, formatter)
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self.values)})"


def field_property(column: int, row: int) -> property:
    """Return a read/write property for the field m<column><row>."""

    def getter(self: MatrixBase) -> Any:
        return self._values[column, row].item()

    def setter(self: MatrixBase, value: Any) -> None:
        self._values[column, row] = self.DOMAIN.coerce(value)

    return property(getter, setter, doc=f"Field in column {column}, row {row}")


def column_property(index: int) -> property:
    def getter(self: MatrixBase) -> Any:
        return self.column(index)

    return property(getter, doc=f"Copy of column {index}")


def row_property(index: int) -> property:
    def getter(self: MatrixBase) -> Any:
        return self.row(index)

    return property(getter, doc=f"Copy of row {index}")
