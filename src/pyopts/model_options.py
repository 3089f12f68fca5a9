# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option metadata models and the builders used to declare them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final

from .errors import OptionDefinitionError

FALSEY_VALUES: Final[frozenset[str]] = frozenset({"", "0", "off", "false"})
_BOOL_TRUE_DEFAULT: Final[str] = "1"
_BOOL_FALSE_DEFAULT: Final[str] = ""


def is_falsey(value: str) -> bool:
    """Return ``True`` when ``value`` spells a false boolean.

    Args:
        value: Raw option value; compared case-insensitively.

    Returns:
        bool: ``True`` for ``""``, ``"0"``, ``"off"`` and ``"false"``.
    """

    return value.lower() in FALSEY_VALUES


class OptionType(str, Enum):
    """Primitive option types; richer interpretations happen after lookup."""

    STRING = "string"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class Option:
    """Declarative description of a single named setting.

    Options are frozen once built. The modifier methods return updated copies
    so declarations can still be chained, e.g.
    ``string_option("host", "h", "", "Database host").hidden()``.

    Attributes:
        name: Canonical hyphen-separated identifier.
        shorthand: Single character used for the short flag, ``""`` for none.
        option_type: Primitive type of the option.
        default: String form of the default value.
        description: Help text rendered in usage output.
        require_value: Whether supplying the option without a value is an error.
        hidden_on_cli: Whether the option is omitted from usage output.
    """

    name: str
    shorthand: str
    option_type: OptionType
    default: str
    description: str
    require_value: bool
    hidden_on_cli: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise OptionDefinitionError("option name must not be empty")
        if "_" in self.name:
            raise OptionDefinitionError(f"Option {self.name}: names use hyphens, not underscores")
        if len(self.shorthand) > 1:
            raise OptionDefinitionError(
                f"Option {self.name}: shorthand must be a single character, got {self.shorthand!r}",
            )
        if self.option_type is OptionType.BOOL and self.require_value:
            raise OptionDefinitionError(f"Option {self.name}: boolean options cannot have required value")

    def hidden(self) -> Option:
        """Return a copy of the option suppressed from usage output."""

        return replace(self, hidden_on_cli=True)

    def value_required(self) -> Option:
        """Return a copy that errors when supplied without a value.

        Raises:
            OptionDefinitionError: If the option is boolean; presence alone is
                the signal for a boolean option.
        """

        if self.option_type is OptionType.BOOL:
            raise OptionDefinitionError(f"Option {self.name}: boolean options cannot have required value")
        return replace(self, require_value=True)

    def value_optional(self) -> Option:
        """Return a copy that may appear without any value."""

        return replace(self, require_value=False)

    def has_nonzero_default(self) -> bool:
        """Return ``True`` when the default differs from the type's empty value."""

        if self.option_type is OptionType.BOOL:
            return not is_falsey(self.default)
        return self.default != ""

    def printable_default(self) -> str:
        """Return a human-friendly rendering of the default value."""

        if self.option_type is OptionType.BOOL:
            return "false" if is_falsey(self.default) else "true"
        return f'"{self.default}"'

    def usage_name(self) -> str:
        """Return the option name annotated for display in usage output."""

        if self.hidden_on_cli:
            return ""
        if self.option_type is OptionType.BOOL:
            return f"[skip-]{self.name}" if self.has_nonzero_default() else self.name
        if self.require_value:
            return f"{self.name} value"
        return f"{self.name}[=value]"

    def usage(self, max_name_length: int, line_width: int | None = None) -> str:
        """Return one line of help text; see :func:`pyopts.usage.render_usage`."""

        from .usage import render_usage

        return render_usage(self, max_name_length, line_width)


def _canonical_name(long_name: str) -> str:
    return long_name.replace("_", "-")


def string_option(long_name: str, shorthand: str, default: str, description: str) -> Option:
    """Create a string option, which requires a value unless made optional.

    Args:
        long_name: Long option name; underscores become hyphens.
        shorthand: Single-character short flag, or ``""``.
        default: Default value.
        description: Help text.

    Returns:
        Option: Frozen string option.
    """

    return Option(
        name=_canonical_name(long_name),
        shorthand=shorthand,
        option_type=OptionType.STRING,
        default=default,
        description=description,
        require_value=True,
    )


def bool_option(long_name: str, shorthand: str, default: bool, description: str) -> Option:
    """Create a boolean option, which never requires a value.

    Args:
        long_name: Long option name; underscores become hyphens.
        shorthand: Single-character short flag, or ``""``.
        default: Whether the option is enabled by default.
        description: Help text.

    Returns:
        Option: Frozen boolean option whose default is ``"1"`` or ``""``.
    """

    return Option(
        name=_canonical_name(long_name),
        shorthand=shorthand,
        option_type=OptionType.BOOL,
        default=_BOOL_TRUE_DEFAULT if default else _BOOL_FALSE_DEFAULT,
        description=description,
        require_value=False,
    )


__all__: Final[tuple[str, ...]] = (
    "FALSEY_VALUES",
    "Option",
    "OptionType",
    "bool_option",
    "is_falsey",
    "string_option",
)
