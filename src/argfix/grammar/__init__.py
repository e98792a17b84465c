"""Argument token vocabulary.

Exports ``Token``, ``TokenKind``, ``DashStyle`` and the ``TERMINATOR``
constant.
"""
from __future__ import annotations

from argfix.grammar.tokens import TERMINATOR, DashStyle, Token, TokenKind

__all__ = ["Token", "TokenKind", "DashStyle", "TERMINATOR"]
