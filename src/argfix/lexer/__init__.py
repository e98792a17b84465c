"""Argument token classifier.

Exports the strict and lenient flag classifiers and the ``tokenize``
convenience function.
"""
from __future__ import annotations

from argfix.lexer.classifier import (
    FlagParts,
    classify,
    extract_flag_name,
    extract_flag_name_lenient,
    is_flag,
    strip_dashes,
    tokenize,
)

__all__ = [
    "FlagParts",
    "classify",
    "extract_flag_name",
    "extract_flag_name_lenient",
    "is_flag",
    "strip_dashes",
    "tokenize",
]
