# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Help-text rendering for option declarations."""

from __future__ import annotations

import textwrap
from collections.abc import Iterable
from typing import Final

from .model_options import Option, OptionType

_INDENT: Final[str] = "  "
_SHORTHAND_WIDTH: Final[int] = 3
_COLUMN_GAP: Final[str] = "  "


def _left_column(option: Option, max_name_length: int) -> str:
    shorthand = f"-{option.shorthand}," if option.shorthand else ""
    return f"{_INDENT}{shorthand:>{_SHORTHAND_WIDTH}} --{option.usage_name():<{max_name_length}}{_COLUMN_GAP}"


def _description(option: Option) -> str:
    suffix = ""
    if option.has_nonzero_default():
        if option.option_type is OptionType.BOOL:
            suffix = f" (enabled by default; disable with --skip-{option.name})"
        else:
            suffix = f" (default {option.printable_default()})"
    return f"{option.description}{suffix}"


def wrap_words(text: str, width: int) -> list[str]:
    """Wrap ``text`` at whitespace so each line fits within ``width`` columns.

    Words longer than ``width`` are kept whole, and line breaks already present
    in ``text`` are preserved.

    Args:
        text: Text to wrap.
        width: Maximum line length; values below one are treated as one.

    Returns:
        list[str]: Wrapped lines without trailing newlines.
    """

    budget = max(width, 1)
    lines: list[str] = []
    for paragraph in text.split("\n"):
        lines.extend(
            textwrap.wrap(
                paragraph,
                width=budget,
                break_long_words=False,
                break_on_hyphens=False,
            )
            or [""],
        )
    return lines


def render_usage(option: Option, max_name_length: int, line_width: int | None = None) -> str:
    """Render one line of help text for ``option``.

    Args:
        option: Option to describe.
        max_name_length: Longest display name in the option's group, used to
            align the description column.
        line_width: Maximum physical line length; ``None`` disables wrapping.

    Returns:
        str: Help text ending with a newline, or ``""`` for hidden options.
    """

    if option.hidden_on_cli:
        return ""
    head = _left_column(option, max_name_length)
    desc = _description(option)
    if line_width is not None and len(head) + len(desc) > line_width:
        spacer = "\n" + " " * len(head)
        desc = spacer.join(wrap_words(desc, line_width - len(head)))
    return f"{head}{desc}\n"


def render_group_usage(options: Iterable[Option], line_width: int | None = None) -> str:
    """Render aligned help text for a group of options sorted by name.

    Args:
        options: Options belonging to the group; hidden ones are skipped.
        line_width: Maximum physical line length; ``None`` disables wrapping.

    Returns:
        str: Concatenated usage lines, or ``""`` when nothing is visible.
    """

    visible = sorted((option for option in options if not option.hidden_on_cli), key=lambda opt: opt.name)
    if not visible:
        return ""
    max_name_length = max(len(option.usage_name()) for option in visible)
    return "".join(render_usage(option, max_name_length, line_width) for option in visible)


__all__: Final[tuple[str, ...]] = ("render_group_usage", "render_usage", "wrap_words")
