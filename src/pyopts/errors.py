# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while defining options and resolving option tokens."""

from __future__ import annotations

from typing import ClassVar, Final


class OptionDefinitionError(ValueError):
    """Raised when an option definition violates its construction contract.

    This is a programming error made by whoever declares the option, such as
    marking a boolean option as requiring a value. It deliberately sits outside
    the :class:`OptionError` family so handlers for user input never swallow it.
    """


class OptionError(Exception):
    """Base class for recoverable failures tied to a single option token.

    Attributes:
        name: Normalised option key the failure refers to.
        source: Optional origin of the token (file path, ``"command line"``),
            used only to prefix the message.
    """

    template: ClassVar[str] = "Invalid option {name}"

    def __init__(self, name: str, source: str = "") -> None:
        """Store the offending option ``name`` and optional ``source``."""

        self.name = name
        self.source = source
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Return the formatted message including the source prefix."""

        prefix = f"{self.source}: " if self.source else ""
        return prefix + self.template.format(name=self.name)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, source={self.source!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionError):
            return NotImplemented
        return (type(self), self.name, self.source) == (type(other), other.name, other.source)

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.source))


class OptionNotDefinedError(OptionError):
    """Raised when a normalised key matches no known option."""

    template = 'Unknown option "{name}"'


class OptionMissingValueError(OptionError):
    """Raised when an option requiring a value was supplied without one."""

    template = "Missing required value for option {name}"


__all__: Final[tuple[str, ...]] = (
    "OptionDefinitionError",
    "OptionError",
    "OptionMissingValueError",
    "OptionNotDefinedError",
)
