# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lookup of normalised option tokens against a set of declared options."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

from .errors import OptionDefinitionError, OptionMissingValueError, OptionNotDefinedError
from .model_options import Option, OptionType, is_falsey
from .normalize import normalize_key, normalize_token
from .usage import render_group_usage

LOGGER = logging.getLogger(__name__)

_BOOL_PRESENT_VALUE: Final[str] = "1"


@dataclass(frozen=True, slots=True)
class ResolvedToken:
    """Token accepted by an :class:`OptionSet`."""

    option: Option
    value: str
    has_value: bool
    loose: bool

    def is_enabled(self) -> bool:
        """Return ``True`` when the resolved value reads as a true boolean."""

        return not is_falsey(self.value)


class OptionSet:
    """Ordered collection of options addressed by canonical name.

    The set is populated while a program declares its options and is only read
    afterwards, so it can be shared freely once built.
    """

    def __init__(self, options: Iterable[Option] = (), *, source: str = "") -> None:
        """Create the set and register ``options`` in order.

        Args:
            options: Options to register immediately.
            source: Default token origin used in error messages.
        """

        self.source = source
        self._options: dict[str, Option] = {}
        self._shorthands: dict[str, Option] = {}
        for option in options:
            self.add(option)

    def add(self, option: Option) -> Option:
        """Register ``option`` and return it.

        Raises:
            OptionDefinitionError: If the name or shorthand is already taken.
        """

        if option.name in self._options:
            raise OptionDefinitionError(f"Option {option.name} is already defined")
        if option.shorthand:
            existing = self._shorthands.get(option.shorthand)
            if existing is not None:
                raise OptionDefinitionError(
                    f"Option {option.name}: shorthand -{option.shorthand} already used by {existing.name}",
                )
            self._shorthands[option.shorthand] = option
        self._options[option.name] = option
        return option

    def get(self, name: str) -> Option | None:
        """Return the option matching ``name`` in any accepted spelling."""

        return self._options.get(normalize_key(name))

    def by_shorthand(self, shorthand: str) -> Option | None:
        """Return the option whose short flag is ``shorthand``."""

        return self._shorthands.get(shorthand)

    def options(self) -> tuple[Option, ...]:
        """Return registered options in declaration order."""

        return tuple(self._options.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def resolve(self, token: str, *, source: str | None = None) -> ResolvedToken | None:
        """Normalise ``token`` and match it against the registered options.

        Args:
            token: Raw ``key`` or ``key=value`` token.
            source: Origin of the token; defaults to the set's ``source``.

        Returns:
            ResolvedToken | None: The accepted token, or ``None`` when the key
            is blank or names an unknown ``loose-`` option.

        Raises:
            OptionNotDefinedError: If the key matches no option and is not loose.
            OptionMissingValueError: If the option requires a value and none was given.
        """

        origin = self.source if source is None else source
        key, value, has_value, loose = normalize_token(token)
        if not key:
            return None
        option = self._options.get(key)
        if option is None:
            if loose:
                LOGGER.debug("ignoring unknown loose option %r from %s", key, origin or "<unknown>")
                return None
            raise OptionNotDefinedError(key, origin)
        if option.require_value and not has_value:
            raise OptionMissingValueError(key, origin)
        if option.option_type is OptionType.BOOL and not has_value:
            value = _BOOL_PRESENT_VALUE
        return ResolvedToken(option=option, value=value, has_value=has_value, loose=loose)

    def usage(self, line_width: int | None = None) -> str:
        """Return aligned help text for every visible option."""

        return render_group_usage(self._options.values(), line_width)


__all__: Final[tuple[str, ...]] = ("OptionSet", "ResolvedToken")
