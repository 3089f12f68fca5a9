# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Normalisation of raw ``key`` / ``key=value`` option tokens.

Tokens come from the command line or option files and may use any of the
historical spellings accepted for an option: mixed case, underscores instead of
hyphens, a ``loose-`` prefix marking the option as optional to know about, and
``skip-`` / ``disable-`` / ``enable-`` prefixes. Normalisation is a purely
syntactic transform; whether the resulting key names a real option is decided
by :mod:`pyopts.registry`.
"""

from __future__ import annotations

from typing import Final, NamedTuple

LOOSE_PREFIX: Final[str] = "loose-"
NEGATION_PREFIXES: Final[tuple[str, ...]] = ("skip-", "disable-")
ENABLE_PREFIX: Final[str] = "enable-"

# Only these values flip a negated assignment back on; "" is not among them.
NEGATED_FALSEY_VALUES: Final[frozenset[str]] = frozenset({"off", "false", "0"})

# Unicode White_Space; unlike str.isspace this excludes the \x1c-\x1f separators.
WHITESPACE: Final[str] = (
    "\t\n\v\f\r \x85\xa0\u1680"
    + "".join(map(chr, range(0x2000, 0x200B)))
    + "\u2028\u2029\u202f\u205f\u3000"
)

_TRUTHY: Final[str] = "1"
_FALSEY: Final[str] = ""


class NormalizedToken(NamedTuple):
    """Canonical form of a single option token."""

    key: str
    value: str
    has_value: bool
    loose: bool


EMPTY_TOKEN: Final[NormalizedToken] = NormalizedToken(key="", value="", has_value=False, loose=False)


def _strip_prefix(key: str, prefix: str) -> tuple[str, bool]:
    if key.startswith(prefix):
        return key[len(prefix) :], True
    return key, False


def normalize_token(raw: str) -> NormalizedToken:
    """Split ``raw`` into its canonical key and resolved value.

    Args:
        raw: Token of the form ``"key"`` or ``"key=value"``.

    Returns:
        NormalizedToken: Canonical key, value, whether a value was supplied and
        whether the token carried a ``loose-`` prefix. An empty or blank key
        yields :data:`EMPTY_TOKEN`.

    Notes:
        A negated key (``skip-foo``, ``disable-foo``) always counts as having a
        value. With an explicit value the negation is applied to it, so
        ``skip-foo=off`` is a double negative that resolves to ``"1"``.
    """

    key_part, separator, value_part = raw.partition("=")
    key = key_part.strip(WHITESPACE)
    if not key:
        return EMPTY_TOKEN
    key = key.lower().replace("_", "-")

    key, loose = _strip_prefix(key, LOOSE_PREFIX)

    negated = False
    for prefix in NEGATION_PREFIXES:
        key, negated = _strip_prefix(key, prefix)
        if negated:
            break
    else:
        key, _ = _strip_prefix(key, ENABLE_PREFIX)

    if separator:
        value = value_part.strip(WHITESPACE)
        if negated:
            value = _TRUTHY if value.lower() in NEGATED_FALSEY_VALUES else _FALSEY
        return NormalizedToken(key=key, value=value, has_value=True, loose=loose)
    if negated:
        return NormalizedToken(key=key, value=_FALSEY, has_value=True, loose=loose)
    return NormalizedToken(key=key, value="", has_value=False, loose=loose)


def normalize_key(raw: str) -> str:
    """Return only the canonical key portion of :func:`normalize_token`."""

    return normalize_token(raw).key


__all__: Final[tuple[str, ...]] = (
    "EMPTY_TOKEN",
    "NEGATED_FALSEY_VALUES",
    "NormalizedToken",
    "WHITESPACE",
    "normalize_key",
    "normalize_token",
)
