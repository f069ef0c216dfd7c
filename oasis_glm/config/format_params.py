################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for rendering vectors and matrices as text."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from typing import Any
from typing import Callable
from typing import Optional


# Text placed between consecutive components
SEPARATOR: str = ", "
# format() spec applied to each component, None for str()
SCALAR_FORMAT: Optional[str] = None
# Callable rendering one component, wins over SCALAR_FORMAT
FORMATTER: Optional[Callable[[Any], str]] = None


class FormatParamsError(Exception):
    """Raised when formatting parameter validation fails."""


@dataclass(frozen=True)
class FormatParams:
    """Parameters controlling to_string() output."""

    # Text placed between consecutive components
    separator: str = SEPARATOR
    # format() spec applied to each component
    scalar_format: Optional[str] = SCALAR_FORMAT
    # Callable rendering one component
    formatter: Optional[Callable[[Any], str]] = FORMATTER

    @classmethod
    def defaults(cls) -> FormatParams:
        """Return the default formatting parameters."""
        return cls()

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        if not isinstance(self.separator, str):
            raise FormatParamsError("separator must be a str")
        if not self.separator:
            raise FormatParamsError("separator must be non-empty")
        if self.scalar_format is not None and not isinstance(self.scalar_format, str):
            raise FormatParamsError("scalar_format must be a str or None")
        if self.formatter is not None and not callable(self.formatter):
            raise FormatParamsError("formatter must be callable or None")

    def replace(self, **overrides: Any) -> FormatParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)
