# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for option token error messages."""

from __future__ import annotations

from pyopts import OptionError, OptionMissingValueError, OptionNotDefinedError


def test_not_defined_message() -> None:
    assert str(OptionNotDefinedError("foo")) == 'Unknown option "foo"'
    assert str(OptionNotDefinedError("foo", "/etc/app.cnf")) == '/etc/app.cnf: Unknown option "foo"'


def test_missing_value_message() -> None:
    assert str(OptionMissingValueError("host")) == "Missing required value for option host"
    error = OptionMissingValueError("host", "command line")
    assert error.message == "command line: Missing required value for option host"
    assert error.name == "host"
    assert error.source == "command line"


def test_errors_share_a_base_and_compare_by_value() -> None:
    assert isinstance(OptionNotDefinedError("x"), OptionError)
    assert isinstance(OptionMissingValueError("x"), OptionError)
    assert OptionNotDefinedError("x", "a") == OptionNotDefinedError("x", "a")
    assert OptionNotDefinedError("x", "a") != OptionMissingValueError("x", "a")
    assert OptionNotDefinedError("x") != OptionNotDefinedError("x", "a")
    assert "OptionNotDefinedError(name='x'" in repr(OptionNotDefinedError("x"))


def test_base_error_and_custom_subclass_messages() -> None:
    """The shared base formats its own message and subclasses only swap the text."""
    assert str(OptionError("x", "src")) == "src: Invalid option x"

    class OptionConflictError(OptionError):
        template = "Option {name} conflicts with another option"

    error = OptionConflictError("{weird}", "app.cnf")
    assert error.message == "app.cnf: Option {weird} conflicts with another option"
