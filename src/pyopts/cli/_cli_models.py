# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations accepted by the CLI commands."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Annotated, Final

import typer

from ..errors import OptionDefinitionError
from ..model_options import Option, bool_option, is_falsey, string_option
from ..normalize import normalize_key
from ..registry import OptionSet

# [s,]name[=default][:description]; a default containing ":" must be double-quoted.
_DECLARATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:(?P<short>[a-zA-Z0-9]),)?(?P<name>[a-zA-Z0-9][-_a-zA-Z0-9]*)"
    r'(?:=(?:"(?P<quoted>[^"]*)"|(?P<default>[^:"]*)))?(?::(?P<description>.*))?$',
)

STRING_DECLARATIONS = Annotated[
    list[str] | None,
    typer.Option(
        "--string",
        "-s",
        help="Declare a string option as '[s,]name[=default][:description]'; quote a default containing ':'.",
    ),
]
BOOL_DECLARATIONS = Annotated[
    list[str] | None,
    typer.Option(
        "--bool",
        "-b",
        help="Declare a boolean option as '[s,]name[=default][:description]'.",
    ),
]
OPTIONAL_NAMES = Annotated[
    list[str] | None,
    typer.Option("--optional", help="Name of a string option that may appear without a value."),
]
HIDDEN_NAMES = Annotated[
    list[str] | None,
    typer.Option("--hidden", help="Name of an option to omit from usage text."),
]


@dataclass(frozen=True, slots=True)
class OptionDeclaration:
    """Parsed ``[s,]name[=default][:description]`` declaration."""

    shorthand: str
    name: str
    default: str
    description: str

    @staticmethod
    def parse(text: str) -> OptionDeclaration:
        """Parse a declaration string.

        Raises:
            OptionDefinitionError: If ``text`` does not follow the declaration format.
        """

        match = _DECLARATION_PATTERN.match(text.strip())
        if match is None:
            raise OptionDefinitionError(f"Invalid option declaration '{text}'")
        return OptionDeclaration(
            shorthand=match.group("short") or "",
            name=match.group("name"),
            default=match.group("quoted") or match.group("default") or "",
            description=(match.group("description") or "").strip(),
        )


@dataclass(slots=True)
class DeclaredOptions:
    """Raw declaration inputs gathered from the command line."""

    strings: list[str]
    bools: list[str]
    optional: list[str]
    hidden: list[str]


def build_declared_options(
    strings: Iterable[str] | None,
    bools: Iterable[str] | None,
    optional: Iterable[str] | None = None,
    hidden: Iterable[str] | None = None,
) -> DeclaredOptions:
    """Collect possibly-absent Typer list options into :class:`DeclaredOptions`."""

    return DeclaredOptions(
        strings=list(strings or ()),
        bools=list(bools or ()),
        optional=list(optional or ()),
        hidden=list(hidden or ()),
    )


def build_option_set(declared: DeclaredOptions, *, source: str = "") -> OptionSet:
    """Build an :class:`OptionSet` from CLI declarations.

    Raises:
        OptionDefinitionError: If a declaration is malformed or conflicts with another,
            or an ``--optional`` / ``--hidden`` name matches no declaration.
    """

    optional = {normalize_key(name) for name in declared.optional}
    hidden = {normalize_key(name) for name in declared.hidden}
    options: list[Option] = []
    for text in declared.strings:
        decl = OptionDeclaration.parse(text)
        option = string_option(decl.name, decl.shorthand, decl.default, decl.description)
        if option.name in optional:
            option = option.value_optional()
        options.append(option)
    for text in declared.bools:
        decl = OptionDeclaration.parse(text)
        options.append(bool_option(decl.name, decl.shorthand, not is_falsey(decl.default), decl.description))
    unknown = sorted((optional | hidden) - {option.name for option in options})
    if unknown:
        raise OptionDefinitionError(f"Unknown option name(s) in --optional/--hidden: {', '.join(unknown)}")
    options = [option.hidden() if option.name in hidden else option for option in options]
    return OptionSet(options, source=source)


__all__ = [
    "BOOL_DECLARATIONS",
    "DeclaredOptions",
    "HIDDEN_NAMES",
    "OPTIONAL_NAMES",
    "OptionDeclaration",
    "STRING_DECLARATIONS",
    "build_declared_options",
    "build_option_set",
]
