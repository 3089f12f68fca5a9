# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for option metadata and the option builders."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from pyopts import (
    Option,
    OptionDefinitionError,
    OptionError,
    OptionType,
    bool_option,
    is_falsey,
    string_option,
)


def test_string_option_defaults() -> None:
    """String options require a value unless told otherwise."""
    option = string_option("max_rows", "r", "10", "Row limit")
    assert option.name == "max-rows"
    assert option.shorthand == "r"
    assert option.option_type is OptionType.STRING
    assert option.default == "10"
    assert option.require_value is True
    assert option.hidden_on_cli is False


@pytest.mark.parametrize(("default", "expected"), [(True, "1"), (False, "")])
def test_bool_option_default_strings(default: bool, expected: str) -> None:
    """Boolean defaults are stored as their canonical string form."""
    option = bool_option("allow_unsafe", "", default, "Permit unsafe operations")
    assert option.name == "allow-unsafe"
    assert option.default == expected
    assert option.require_value is False


def test_names_never_contain_underscores() -> None:
    names = ["a_b_c", "_leading", "trailing_", "mixed-style_name"]
    for name in names:
        assert "_" not in string_option(name, "", "", "").name
        assert "_" not in bool_option(name, "", False, "").name


def test_modifiers_return_updated_copies(host_option: Option) -> None:
    """Chained modifiers leave the original declaration untouched."""
    changed = host_option.hidden().value_optional()
    assert changed.hidden_on_cli is True
    assert changed.require_value is False
    assert host_option.hidden_on_cli is False
    assert host_option.require_value is True
    assert changed.value_required().require_value is True


def test_bool_option_cannot_require_value(verbose_option: Option) -> None:
    with pytest.raises(OptionDefinitionError, match="boolean options cannot have required value"):
        verbose_option.value_required()


def test_definition_error_is_not_a_token_error() -> None:
    """Handlers for token errors must not swallow declaration mistakes."""
    assert not issubclass(OptionDefinitionError, OptionError)
    assert issubclass(OptionDefinitionError, ValueError)


def test_direct_construction_enforces_invariants() -> None:
    with pytest.raises(OptionDefinitionError):
        Option(
            name="flag",
            shorthand="",
            option_type=OptionType.BOOL,
            default="",
            description="",
            require_value=True,
        )
    with pytest.raises(OptionDefinitionError):
        string_option("", "", "", "")
    with pytest.raises(OptionDefinitionError):
        string_option("host", "ho", "", "")


def test_option_is_frozen(host_option: Option) -> None:
    with pytest.raises(FrozenInstanceError):
        host_option.name = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("default", "expected"),
    [("", False), ("0", False), ("OFF", False), ("False", False), ("1", True), ("yes", True)],
)
def test_bool_nonzero_default(default: str, expected: bool) -> None:
    option = Option(
        name="flag",
        shorthand="",
        option_type=OptionType.BOOL,
        default=default,
        description="",
        require_value=False,
    )
    assert option.has_nonzero_default() is expected
    assert option.printable_default() == ("true" if expected else "false")
    assert is_falsey(default) is not expected


def test_string_nonzero_default() -> None:
    assert string_option("host", "", "db", "").has_nonzero_default() is True
    assert string_option("host", "", "", "").has_nonzero_default() is False
    assert string_option("host", "", "db", "").printable_default() == '"db"'


def test_usage_name_annotations(host_option: Option, verbose_option: Option) -> None:
    """Display names advertise negation and value requirements."""
    assert verbose_option.usage_name() == "[skip-]verbose"
    assert bool_option("quiet", "", False, "").usage_name() == "quiet"
    assert host_option.usage_name() == "host value"
    assert host_option.value_optional().usage_name() == "host[=value]"
    assert host_option.hidden().usage_name() == ""
