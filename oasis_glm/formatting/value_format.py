################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Rendering of component sequences as text."""

from __future__ import annotations

from typing import Any
from typing import Iterable
from typing import List
from typing import Optional

from oasis_glm.config.format_params import FormatParams
from oasis_glm.config.format_params import FormatParamsError


def format_scalar(value: Any, params: FormatParams) -> str:
    """Render one component."""
    if params.formatter is not None:
        return str(params.formatter(value))
    if params.scalar_format is not None:
        try:
            return format(value, params.scalar_format)
        except ValueError as err:
            raise FormatParamsError(
                f"scalar_format {params.scalar_format!r} cannot render {value!r}"
            ) from err
    return str(value)


def format_values(values: Iterable[Any], params: Optional[FormatParams] = None) -> str:
    """Join components in order with the configured separator."""
    if params is None:
        params = FormatParams.defaults()
    params.validate()

    parts: List[str] = [format_scalar(value, params) for value in values]
    return params.separator.join(parts)


def resolve_params(
    separator: Optional[str] = None,
    scalar_format: Optional[str] = None,
    formatter: Optional[Any] = None,
) -> FormatParams:
    """Return default parameters with the given non-None overrides applied."""
    overrides: dict[str, Any] = {}
    if separator is not None:
        overrides["separator"] = separator
    if scalar_format is not None:
        overrides["scalar_format"] = scalar_format
    if formatter is not None:
        overrides["formatter"] = formatter
    return FormatParams.defaults().replace(**overrides)
