# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Usage rendering settings and terminal width detection."""

from __future__ import annotations

import os
import sys
from typing import Final, TextIO

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

DEFAULT_MIN_LINE_WIDTH: Final[int] = 80
DEFAULT_UNBOUNDED_LINE_WIDTH: Final[int] = 10000


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class UsageSettings(BaseModel):
    """Settings controlling how wide usage text may grow."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    line_width: int | None = Field(default=None, ge=1)
    min_line_width: int = Field(default=DEFAULT_MIN_LINE_WIDTH, ge=1)
    unbounded_line_width: int = Field(default=DEFAULT_UNBOUNDED_LINE_WIDTH, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> UsageSettings:
        if self.unbounded_line_width < self.min_line_width:
            raise ValueError("unbounded_line_width must not be smaller than min_line_width")
        return self


def load_usage_settings(**overrides: object) -> UsageSettings:
    """Return validated :class:`UsageSettings` built from ``overrides``.

    Raises:
        ConfigError: If any override fails validation.
    """

    try:
        return UsageSettings.model_validate(overrides)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _stream_is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def detect_line_width(settings: UsageSettings | None = None, *, stream: TextIO | None = None) -> int:
    """Return the line width usage text should be wrapped to.

    Args:
        settings: Optional settings; an explicit ``line_width`` always wins.
        stream: Stream whose terminal is probed, ``sys.stderr`` by default.

    Returns:
        int: The terminal width floored at ``min_line_width`` when ``stream``
        is a terminal, otherwise ``unbounded_line_width``.
    """

    active = settings or UsageSettings()
    if active.line_width is not None:
        return active.line_width
    target = stream if stream is not None else sys.stderr
    if not _stream_is_tty(target):
        return active.unbounded_line_width
    try:
        columns = os.get_terminal_size(target.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return active.unbounded_line_width
    return max(columns, active.min_line_width)


__all__: Final[tuple[str, ...]] = (
    "ConfigError",
    "DEFAULT_MIN_LINE_WIDTH",
    "DEFAULT_UNBOUNDED_LINE_WIDTH",
    "UsageSettings",
    "detect_line_width",
    "load_usage_settings",
)
