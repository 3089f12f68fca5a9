# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the token and usage commands."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.table import Table

from ..config import ConfigError, detect_line_width, load_usage_settings
from ..errors import OptionDefinitionError, OptionError
from ..logging import Reporter
from ..normalize import normalize_token
from ._cli_models import (
    BOOL_DECLARATIONS,
    HIDDEN_NAMES,
    OPTIONAL_NAMES,
    STRING_DECLARATIONS,
    build_declared_options,
    build_option_set,
)
from .typer_ext import CanonicalHelpCommand, create_typer

app = create_typer(
    name="pyopts",
    help="Inspect option tokens and render option usage text.",
    no_args_is_help=True,
)

TOKENS_ARGUMENT = Annotated[list[str], typer.Argument(help="Raw 'key' or 'key=value' tokens.")]
JSON_OPTION = Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table.")]
SOURCE_OPTION = Annotated[str, typer.Option("--source", help="Token origin used to prefix error messages.")]
WIDTH_OPTION = Annotated[
    int | None,
    typer.Option("--width", "-w", help="Wrap usage text to this many columns."),
]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate messages with emoji.")]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Colour output; detected from the terminal by default."),
]


@app.command("normalize", cls=CanonicalHelpCommand)
def normalize_command(tokens: TOKENS_ARGUMENT, as_json: JSON_OPTION = False, color: COLOR_OPTION = None) -> None:
    """Show the canonical key and value for each token."""

    results = [(token, normalize_token(token)) for token in tokens]
    if as_json:
        payload = [{"token": token, **normalized._asdict()} for token, normalized in results]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table("token", "key", "value", "has_value", "loose")
    for token, normalized in results:
        table.add_row(
            token,
            normalized.key,
            normalized.value,
            str(normalized.has_value).lower(),
            str(normalized.loose).lower(),
        )
    Reporter(use_color=color).render(table)


@app.command("resolve", cls=CanonicalHelpCommand)
def resolve_command(
    tokens: TOKENS_ARGUMENT,
    strings: STRING_DECLARATIONS = None,
    bools: BOOL_DECLARATIONS = None,
    optional: OPTIONAL_NAMES = None,
    source: SOURCE_OPTION = "command line",
    use_emoji: EMOJI_OPTION = False,
    color: COLOR_OPTION = None,
) -> None:
    """Resolve tokens against declared options and report failures."""

    try:
        option_set = build_option_set(build_declared_options(strings, bools, optional), source=source)
    except OptionDefinitionError as exc:
        raise typer.BadParameter(str(exc)) from exc

    reporter = Reporter(use_color=color, use_emoji=use_emoji)
    accepted = ignored = failures = 0
    for token in tokens:
        try:
            resolved = option_set.resolve(token)
        except OptionError as exc:
            failures += 1
            reporter.fail(str(exc))
            continue
        if resolved is None:
            ignored += 1
            reporter.warn(f"ignored '{token}'")
            continue
        accepted += 1
        reporter.ok(f"{resolved.option.name} = {resolved.value!r}")
    reporter.section("Summary")
    reporter.info(f"{accepted} accepted, {ignored} ignored, {failures} failed")
    if failures:
        raise typer.Exit(code=1)


@app.command("usage", cls=CanonicalHelpCommand)
def usage_command(
    strings: STRING_DECLARATIONS = None,
    bools: BOOL_DECLARATIONS = None,
    optional: OPTIONAL_NAMES = None,
    hidden: HIDDEN_NAMES = None,
    width: WIDTH_OPTION = None,
) -> None:
    """Print aligned help text for the declared options."""

    try:
        option_set = build_option_set(build_declared_options(strings, bools, optional, hidden))
        settings = load_usage_settings(line_width=width)
    except (OptionDefinitionError, ConfigError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(option_set.usage(detect_line_width(settings)), nl=False)


__all__ = ["app"]
