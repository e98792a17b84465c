"""Token classifier: decides whether an argument is a flag.

The classifier looks at one argument at a time and answers three
questions: is it flag-shaped, what is its name once the leading dashes
are stripped, and did it carry an inline ``=value``.

Two variants exist:

- the **strict** classifier (``is_flag`` / ``extract_flag_name``) used
  by the argument router, which requires a leading dash and treats
  negative numbers such as ``-123`` or ``-.5`` as values;
- the **lenient** classifier (``extract_flag_name_lenient``) used by
  flag correction, which also accepts a bare name without dashes.

Dash stripping removes at most two dashes, so ``---x`` has the name
``-x``.  Only the first ``=`` separates name from value, so
``--config=key=value`` yields ``("config", "key=value")``.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final, NamedTuple

from argfix.grammar.tokens import TERMINATOR, DashStyle, Token, TokenKind

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_NEGATIVE_NUMBER: Final[re.Pattern[str]] = re.compile(r"-\.?[0-9]")


class FlagParts(NamedTuple):
    """Name and inline value extracted from a flag token.

    ``ok`` is False when the token is not a flag; in that case ``name``
    and ``value`` are empty.  ``has_value`` is True only when an ``=``
    separator was present.
    """

    name: str
    value: str
    ok: bool
    has_value: bool = False


_NOT_A_FLAG: Final[FlagParts] = FlagParts("", "", False)


def strip_dashes(arg: str) -> str:
    """Remove at most two leading dashes, so ``---x`` becomes ``-x``."""
    if arg.startswith("--"):
        return arg[2:]
    if arg.startswith("-"):
        return arg[1:]
    return arg


def _split_inline_value(stripped: str, ok: bool) -> FlagParts:
    name, sep, value = stripped.partition("=")
    return FlagParts(name, value, ok, bool(sep))


# ---------------------------------------------------------------------------
# Strict classifier
# ---------------------------------------------------------------------------


def is_flag(arg: str) -> bool:
    """Return True if ``arg`` looks like a flag.

    Single dashes, empty strings, tokens without a leading dash and
    negative numbers (``-123``, ``-1.23``, ``-.5``) are not flags.  The
    terminator ``--`` passes this check but is rejected by
    :func:`extract_flag_name`.
    """
    if len(arg) < 2 or arg[0] != "-":
        return False
    return _NEGATIVE_NUMBER.match(arg) is None


def extract_flag_name(arg: str) -> FlagParts:
    """Extract the flag name and inline value from ``arg``.

    Examples
    --------
    ::

        extract_flag_name("--owner")        # FlagParts("owner", "", True, False)
        extract_flag_name("-o")             # FlagParts("o", "", True, False)
        extract_flag_name("--owner=alice")  # FlagParts("owner", "alice", True, True)
        extract_flag_name("--owner=")       # FlagParts("owner", "", True, True)
        extract_flag_name("1.2")            # FlagParts("", "", False, False)
        extract_flag_name("--")             # FlagParts("", "", False, False)
    """
    if not is_flag(arg):
        return _NOT_A_FLAG
    stripped = strip_dashes(arg)
    if not stripped:
        return _NOT_A_FLAG
    return _split_inline_value(stripped, True)


# ---------------------------------------------------------------------------
# Lenient classifier
# ---------------------------------------------------------------------------


def extract_flag_name_lenient(arg: str) -> FlagParts:
    """Extract a flag name from ``arg``, accepting names without dashes.

    ``ok`` reports whether the argument had leading dashes; a bare name
    such as ``"ownr"`` yields ``FlagParts("ownr", "", False)``.  The
    inputs ``""``, ``"-"`` and ``"--"`` carry no name at all.
    """
    if arg in ("", "-", TERMINATOR):
        return _NOT_A_FLAG
    dashed = arg.startswith("-")
    stripped = strip_dashes(arg)
    if not stripped:
        return _NOT_A_FLAG
    return _split_inline_value(stripped, dashed)


# ---------------------------------------------------------------------------
# Whole-token classification
# ---------------------------------------------------------------------------


def classify(arg: str, index: int = 0) -> Token:
    """Classify a single argument into a :class:`Token`.

    The terminator is reported as ``TokenKind.TERMINATOR`` regardless of
    where it occurs; :func:`tokenize` applies the "everything after the
    terminator is literal" rule.
    """
    if arg == TERMINATOR:
        return Token(raw=arg, kind=TokenKind.TERMINATOR, dashes=DashStyle.LONG, index=index)
    parts = extract_flag_name(arg)
    if not parts.ok:
        return Token(raw=arg, kind=TokenKind.POSITIONAL, index=index)
    return Token(
        raw=arg,
        kind=TokenKind.FLAG,
        name=parts.name,
        value=parts.value,
        has_value=parts.has_value,
        dashes=DashStyle.of(arg),
        index=index,
    )


def tokenize(args: Iterable[str] | None) -> list[Token]:
    """Classify every argument of a sequence.

    The first ``--`` is emitted as a ``TERMINATOR`` token; every token
    after it, including further ``--`` tokens and anything spelled like
    a flag, is ``POSITIONAL``.

    Parameters
    ----------
    args:
        Raw argument strings, program name already removed.  ``None``
        is treated as an empty sequence.

    Returns
    -------
    list[Token]
        One token per input argument, in input order.
    """
    tokens: list[Token] = []
    terminated = False
    for index, arg in enumerate(args or ()):
        if terminated:
            tokens.append(Token(raw=arg, kind=TokenKind.POSITIONAL, index=index))
            continue
        token = classify(arg, index)
        if token.is_terminator:
            terminated = True
        tokens.append(token)
    return tokens
