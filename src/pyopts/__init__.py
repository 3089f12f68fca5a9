# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed option declarations, usage text and option token normalisation."""

from __future__ import annotations

from typing import Final

from .errors import OptionDefinitionError, OptionError, OptionMissingValueError, OptionNotDefinedError
from .model_options import FALSEY_VALUES, Option, OptionType, bool_option, is_falsey, string_option
from .normalize import NormalizedToken, normalize_key, normalize_token
from .registry import OptionSet, ResolvedToken
from .usage import render_group_usage, render_usage

__all__: Final[tuple[str, ...]] = (
    "FALSEY_VALUES",
    "NormalizedToken",
    "Option",
    "OptionDefinitionError",
    "OptionError",
    "OptionMissingValueError",
    "OptionNotDefinedError",
    "OptionSet",
    "OptionType",
    "ResolvedToken",
    "bool_option",
    "is_falsey",
    "normalize_key",
    "normalize_token",
    "render_group_usage",
    "render_usage",
    "string_option",
)
