# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers that list command options by canonical name in ``--help``."""

from __future__ import annotations

from typing import Any, Final

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand

from ..normalize import normalize_key

ARGUMENT_PARAM_TYPE: Final[str] = "argument"


def help_sort_key(param: Parameter) -> str:
    """Return the normalised long name a parameter is listed under."""

    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    return normalize_key((long_names or names or [param.name or ""])[0].lstrip("-"))


class CanonicalHelpCommand(TyperCommand):
    """Command whose help keeps arguments in order and sorts options by name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if param.param_type_name == ARGUMENT_PARAM_TYPE:
                arguments.append(record)
            else:
                options.append((help_sort_key(param), record))
        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(options, key=lambda item: item[0])])


def create_typer(**kwargs: Any) -> typer.Typer:
    """Return a Typer app rendering plain Click help, where option sorting applies.

    Commands opt into sorted listings with ``cls=CanonicalHelpCommand``.
    """

    kwargs.setdefault("rich_markup_mode", None)
    return typer.Typer(**kwargs)


__all__ = ["CanonicalHelpCommand", "create_typer", "help_sort_key"]
