# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status lines for the CLI, rendered through Rich."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Final

from rich.console import Console, RenderableType
from rich.rule import Rule
from rich.text import Text

_SYMBOLS: Final[dict[str, str]] = {"info": "ℹ️ ", "ok": "✅ ", "warn": "⚠️ ", "fail": "❌ "}
_STYLES: Final[dict[str, str]] = {"info": "cyan", "ok": "green", "warn": "yellow", "fail": "red"}


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(slots=True)
class Reporter:
    """Print status lines honouring the CLI's ``--color`` and ``--emoji`` switches.

    Attributes:
        use_color: Style lines; ``None`` follows TTY detection.
        use_emoji: Prefix status lines with an emoji symbol.
    """

    use_color: bool | None = None
    use_emoji: bool = False
    _console: Console = field(init=False, repr=False)

    def __post_init__(self) -> None:
        color = self.color_enabled
        self._console = Console(
            color_system="auto" if color else None,
            no_color=not color,
            emoji=self.use_emoji,
            soft_wrap=True,
            highlight=False,
        )

    @property
    def color_enabled(self) -> bool:
        """Return whether styling is applied to printed lines."""

        return detect_tty() if self.use_color is None else self.use_color

    def render(self, renderable: RenderableType) -> None:
        """Print an arbitrary Rich renderable such as a table."""

        self._console.print(renderable)

    def section(self, title: str) -> None:
        """Print a section header separating blocks of output."""

        if self.color_enabled:
            self._console.print()
            self._console.print(Rule(title))
        else:
            self._console.print(f"\n--- {title} ---")

    def _line(self, kind: str, msg: str) -> None:
        text = Text(f"{_SYMBOLS[kind] if self.use_emoji else ''}{msg}")
        if self.color_enabled:
            text.stylize(_STYLES[kind])
        self._console.print(text)

    def info(self, msg: str) -> None:
        """Emit an informational message."""

        self._line("info", msg)

    def ok(self, msg: str) -> None:
        """Emit a success message."""

        self._line("ok", msg)

    def warn(self, msg: str) -> None:
        """Emit a warning message."""

        self._line("warn", msg)

    def fail(self, msg: str) -> None:
        """Emit an error message."""

        self._line("fail", msg)


__all__ = ["Reporter", "detect_tty"]
