"""Argument router.

Exports the ``ArgumentRouter`` class, the ``parse_args`` /
``normalize_args`` convenience functions, and ``FlagValues``.
"""
from __future__ import annotations

from argfix.parser.router import (
    ArgumentRouter,
    ParseOutcome,
    normalize_args,
    normalize_args_with_bool_flags,
    parse_args,
    parse_args_with_bool_flags,
)
from argfix.parser.values import FlagValues

__all__ = [
    "ArgumentRouter",
    "ParseOutcome",
    "FlagValues",
    "parse_args",
    "parse_args_with_bool_flags",
    "normalize_args",
    "normalize_args_with_bool_flags",
]
