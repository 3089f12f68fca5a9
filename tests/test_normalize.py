# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for option token normalisation."""

from __future__ import annotations

import pytest

from pyopts import NormalizedToken, normalize_key, normalize_token


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Foo_Bar=baz", ("foo-bar", "baz", True, False)),
        ("loose-x", ("x", "", False, True)),
        ("skip-x", ("x", "", True, False)),
        ("disable-x", ("x", "", True, False)),
        ("skip-x=off", ("x", "1", True, False)),
        ("Skip_Foo=Off", ("foo", "1", True, False)),
        ("SKIP-X=FALSE", ("x", "1", True, False)),
        ("disable-x=0", ("x", "1", True, False)),
        ("skip-x=1", ("x", "", True, False)),
        ("skip-x=on", ("x", "", True, False)),
        ("skip-x=", ("x", "", True, False)),
        ("enable-x", ("x", "", False, False)),
        ("enable-x=0", ("x", "0", True, False)),
        ("loose-skip-x=false", ("x", "1", True, True)),
        ("loose_disable_x", ("x", "", True, True)),
        ("  Foo  =  bar  ", ("foo", "bar", True, False)),
        ("a=b=c", ("a", "b=c", True, False)),
        ("x=", ("x", "", True, False)),
        (" Foo =\tBar\n", ("foo", "Bar", True, False)),
    ],
)
def test_normalize_token(raw: str, expected: tuple[str, str, bool, bool]) -> None:
    assert normalize_token(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", "=value", "  =x"])
def test_blank_keys_yield_empty_token(raw: str) -> None:
    """Malformed tokens are reported as zero values, never raised."""
    assert normalize_token(raw) == NormalizedToken("", "", False, False)


def test_only_one_negation_prefix_applies() -> None:
    """Prefixes after the first negation/enable prefix stay part of the key."""
    assert normalize_key("skip-enable-x") == "enable-x"
    assert normalize_key("enable-skip-x") == "skip-x"
    assert normalize_key("skip-disable-x") == "disable-x"


def test_loose_prefix_must_come_first() -> None:
    token = normalize_token("skip-loose-x")
    assert token.key == "loose-x"
    assert token.loose is False


def test_result_unpacks_like_a_tuple() -> None:
    key, value, has_value, loose = normalize_token("Loose-Enable-Foo=1")
    assert (key, value, has_value, loose) == ("foo", "1", True, True)


def test_normalize_key() -> None:
    assert normalize_key("Skip_Foo=Off") == "foo"
    assert normalize_key("   ") == ""


def test_unicode_whitespace_is_trimmed() -> None:
    assert normalize_token("\xa0Foo\u3000=\u2003bar\u0085") == ("foo", "bar", True, False)


def test_information_separators_are_not_whitespace() -> None:
    """Control separators \\x1c-\\x1f stay part of the key and value."""
    assert normalize_key("\x1ffoo") == "\x1ffoo"
    assert normalize_token("foo=bar\x1c").value == "bar\x1c"
