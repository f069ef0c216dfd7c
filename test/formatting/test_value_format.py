################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for joining components as text."""

from __future__ import annotations

import pytest

from oasis_glm.config.format_params import FormatParams
from oasis_glm.config.format_params import FormatParamsError
from oasis_glm.formatting.value_format import format_values
from oasis_glm.formatting.value_format import resolve_params


def test_default_format() -> None:
    """Checks components are joined with the default separator."""
    assert format_values([1.5, 2.0]) == "1.5, 2.0"
    assert format_values([True, False]) == "True, False"


def test_scalar_format_and_separator() -> None:
    """Checks the per-scalar format spec and separator."""
    params: FormatParams = FormatParams(separator="; ", scalar_format=".2f")
    assert format_values([1.5, 2.0], params) == "1.50; 2.00"


def test_formatter_wins() -> None:
    """Checks a formatter callable takes precedence over scalar_format."""
    params: FormatParams = FormatParams(
        scalar_format=".2f", formatter=lambda value: f"<{value}>"
    )
    assert format_values([1, 2], params) == "<1>, <2>"


def test_bad_scalar_format() -> None:
    """Checks a spec that cannot render a component is a config error."""
    params: FormatParams = FormatParams(scalar_format="d")
    with pytest.raises(FormatParamsError):
        format_values([1.5], params)


def test_invalid_params_rejected() -> None:
    """Checks parameters are validated before formatting."""
    with pytest.raises(FormatParamsError):
        format_values([1], FormatParams(separator=""))


def test_resolve_params() -> None:
    """Checks only non-None overrides are applied."""
    params: FormatParams = resolve_params(separator="|")
    assert params.separator == "|"
    assert params.scalar_format is None
    assert resolve_params() == FormatParams.defaults()
