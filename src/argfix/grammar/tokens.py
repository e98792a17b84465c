"""Token definitions for command-line argument sequences.

Every raw argument string is classified into one of three kinds: a
flag, a positional value, or the ``--`` terminator.  A classified token
is represented by a frozen ``Token`` dataclass that keeps the raw text
alongside the extracted flag name and inline value so downstream code
can rebuild the token in its original style.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final

TERMINATOR: Final[str] = "--"
"""The token that ends flag parsing; everything after it is literal."""


class TokenKind(Enum):
    """Classification of a single argument token."""

    FLAG = auto()
    POSITIONAL = auto()
    TERMINATOR = auto()


class DashStyle(Enum):
    """How many leading dashes a flag token was written with.

    ``NONE`` only occurs for bare names handed to the lenient
    classifier used by flag correction.
    """

    NONE = 0
    SHORT = 1
    LONG = 2

    @property
    def prefix(self) -> str:
        """Return the dash prefix for this style (``""``, ``"-"`` or ``"--"``)."""
        return "-" * self.value

    @classmethod
    def of(cls, raw: str) -> "DashStyle":
        """Return the dash style of ``raw`` (three or more dashes count as LONG)."""
        if raw.startswith("--"):
            return cls.LONG
        if raw.startswith("-"):
            return cls.SHORT
        return cls.NONE


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified argument token.

    Parameters
    ----------
    raw:
        The token exactly as it appeared in the input sequence.
    kind:
        Classification of the token.
    name:
        Flag name with the leading dashes stripped; empty for
        non-flag tokens.
    value:
        Inline value supplied with ``=``; empty when absent.
    has_value:
        True when the token carried an ``=`` separator, which
        distinguishes ``--name=`` (empty value) from ``--name``.
    dashes:
        Leading dash style of the raw token.
    index:
        0-based position of the token in its input sequence.
    """

    raw: str
    kind: TokenKind
    name: str = ""
    value: str = ""
    has_value: bool = False
    dashes: DashStyle = DashStyle.NONE
    index: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.raw!r})"

    @property
    def is_flag(self) -> bool:
        """Return True if this token is flag-shaped."""
        return self.kind is TokenKind.FLAG

    @property
    def is_terminator(self) -> bool:
        """Return True if this token is the ``--`` terminator."""
        return self.kind is TokenKind.TERMINATOR
