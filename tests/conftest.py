# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from pyopts import Option, OptionSet, bool_option, string_option


@pytest.fixture
def host_option() -> Option:
    """Return a required-value string option with a default and shorthand."""
    return string_option("host", "h", "localhost", "Database host")


@pytest.fixture
def verbose_option() -> Option:
    """Return a boolean option that is enabled by default."""
    return bool_option("verbose", "v", True, "Be chatty")


@pytest.fixture
def option_set(host_option: Option, verbose_option: Option) -> OptionSet:
    """Return an option set mixing string, boolean and value-optional options."""
    return OptionSet(
        (
            host_option,
            verbose_option,
            string_option("log_file", "", "", "Write logs here").value_optional(),
            bool_option("dry-run", "n", False, "Print actions without running them"),
        ),
        source="command line",
    )
