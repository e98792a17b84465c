"""argfix — command-line argument interpretation: flag routing and typo correction.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import argfix

    # Fix flag typos against the known flags
    fixed = argfix.correct(["--ownr", "alice", "1.2"], ["owner"])
    fixed.corrected_args   # ["--owner", "alice", "1.2"]

    # Split into positional arguments and flag values
    outcome = argfix.route(fixed.corrected_args, ["owner"])
    outcome.positional     # ["1.2"]
    outcome.flags          # {"owner": "alice"}

    # Rank candidates by edit distance
    argfix.match("stauts", ["status", "init"]).match   # "status"

    argfix.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from argfix.convenience import ArgInterpreter, Interpretation

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from argfix.corrector.corrector import CorrectionOutcome
    from argfix.fuzzy.match import MatchResult
    from argfix.parser.router import ParseOutcome


def route(
    args: Sequence[str] | None,
    flags: Iterable[str],
    bool_flags: Iterable[str] = (),
) -> "ParseOutcome":
    """Split ``args`` into positional arguments and known flag values.

    Parameters
    ----------
    args:
        Raw arguments, program name removed.
    flags:
        Known flag names without dashes.
    bool_flags:
        Flags that never consume the next argument.

    Returns
    -------
    ParseOutcome
        Positional arguments and the flag-name to value mapping.
    """
    from argfix.parser.router import parse_args_with_bool_flags

    return parse_args_with_bool_flags(args, flags, bool_flags)


def normalize(
    args: Sequence[str] | None,
    flags: Iterable[str],
    bool_flags: Iterable[str] = (),
) -> list[str]:
    """Reorder ``args`` so positional arguments precede flags.

    Returns
    -------
    list[str]
        A new list; ``args`` is not modified.
    """
    from argfix.parser.router import normalize_args_with_bool_flags

    return normalize_args_with_bool_flags(args, flags, bool_flags)


def correct(args: Sequence[str] | None, flags: Iterable[str]) -> "CorrectionOutcome":
    """Correct misspelled flags in ``args`` against ``flags``.

    Returns
    -------
    CorrectionOutcome
        Corrected arguments, applied corrections and ambiguous flags.
    """
    from argfix.corrector.corrector import fuzzy_match_flags

    return fuzzy_match_flags(args, flags)


def match(input: str, candidates: Iterable[str], threshold: float = 0.8) -> "MatchResult":  # noqa: A002
    """Find the closest candidate to ``input``.

    Parameters
    ----------
    input:
        String to look up.
    candidates:
        Known strings.
    threshold:
        Similarity needed for ``auto_correct``; defaults to the command
        preset.

    Raises
    ------
    argfix.errors.ThresholdError
        If ``threshold`` is outside ``[0.0, 1.0]``.
    """
    from argfix.fuzzy.match import match as _match

    return _match(input, candidates, threshold)


def distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between ``a`` and ``b``."""
    from argfix.fuzzy.distance import distance as _distance

    return _distance(a, b)


__all__ = [
    "__version__",
    "ArgInterpreter",
    "Interpretation",
    "route",
    "normalize",
    "correct",
    "match",
    "distance",
]
