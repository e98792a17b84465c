"""Flag corrector: rewrites misspelled flags before routing.

The corrector walks an argument list, and for every flag-shaped token
whose name is not a known flag it asks the similarity matcher for the
closest known name.  Confident matches are rewritten in place, keeping
the original dash style and inline value; close but uncertain matches
are reported as ambiguous and left untouched.

Everything from the ``--`` terminator onward is copied verbatim, and
the order of the arguments is never changed.

Example
-------
::

    from argfix.corrector import fuzzy_match_flags

    outcome = fuzzy_match_flags(["--ownr", "alice", "--for"], ["owner", "force", "format"])
    outcome.corrected_args  # ["--owner", "alice", "--for"]
    outcome.corrections     # [FlagCorrection("--ownr", "--owner")]
    outcome.ambiguous[0].suggestions[:2]  # ("force", "format")
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from argfix.config import DEFAULT_CONFIG, MatchConfig
from argfix.fuzzy.match import suggest_flag
from argfix.grammar.tokens import TERMINATOR, DashStyle
from argfix.lexer.classifier import FlagParts, extract_flag_name_lenient, is_flag

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FuzzyFlagResult:
    """Fuzzy match of a single user-supplied flag.

    Parameters
    ----------
    input:
        The token as typed, e.g. ``"--ownr"``.
    match:
        Best known flag name without dashes, e.g. ``"owner"``.
    auto_correct:
        True when the match is confident enough to apply.
    suggestions:
        Alternatives, only populated when not auto-correcting.
    is_flag:
        True if the input had leading dashes.
    value:
        Inline value for ``--flag=value`` input.
    """

    input: str
    match: str = ""
    auto_correct: bool = False
    suggestions: tuple[str, ...] = ()
    is_flag: bool = False
    value: str = ""

    def __str__(self) -> str:
        if self.auto_correct and self.match:
            return f"auto-corrected {self.input} to --{self.match}"
        if self.suggestions:
            options = ", ".join(f"--{s}" for s in self.suggestions)
            return f"ambiguous flag {self.input}, did you mean: {options}?"
        return f"unknown flag: {self.input}"


@dataclass(frozen=True)
class FlagCorrection:
    """A correction that was applied, e.g. ``--ownr`` to ``--owner``."""

    original: str
    corrected: str


@dataclass(frozen=True)
class AmbiguousFlag:
    """A flag with close matches but no confident correction."""

    input: str
    suggestions: tuple[str, ...]


@dataclass
class CorrectionOutcome:
    """Result of correcting a whole argument list.

    Parameters
    ----------
    corrected_args:
        The arguments with corrections applied, in the original order.
    corrections:
        Corrections that were applied, in argument order.
    ambiguous:
        Flags left unchanged because no match was confident.
    errors:
        Reserved; always empty.
    """

    corrected_args: list[str] = field(default_factory=list)
    corrections: list[FlagCorrection] = field(default_factory=list)
    ambiguous: list[AmbiguousFlag] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Return True if at least one correction was applied."""
        return bool(self.corrections)

    @property
    def has_ambiguities(self) -> bool:
        """Return True if any flag was left ambiguous."""
        return bool(self.ambiguous)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rebuild(arg: str, parts: FlagParts, name: str) -> str:
    """Spell ``name`` the way ``arg`` was written.

    Long flags keep their inline value (``--name=value``, ``--name=``);
    short flags and bare names are rebuilt from the name alone.
    """
    dashes = DashStyle.of(arg)
    if dashes is DashStyle.LONG:
        if parts.has_value:
            return f"--{name}={parts.value}"
        return f"--{name}"
    return f"{dashes.prefix}{name}"


# ---------------------------------------------------------------------------
# Corrector
# ---------------------------------------------------------------------------


class FlagCorrector:
    """Corrects misspelled flags against a set of known flag names.

    Parameters
    ----------
    known_flags:
        Flag names without dashes.
    config:
        Matching parameters; ``config.flag_threshold`` decides when a
        correction is applied.
    """

    __slots__ = ("_known", "_candidates", "_config")

    def __init__(
        self,
        known_flags: Iterable[str] | None = None,
        config: MatchConfig = DEFAULT_CONFIG,
    ) -> None:
        self._known: frozenset[str] = frozenset(known_flags or ())
        self._candidates: tuple[str, ...] = tuple(sorted(self._known))
        self._config = config

    def __repr__(self) -> str:
        return (
            f"FlagCorrector(known_flags={list(self._candidates)}, "
            f"threshold={self._config.flag_threshold})"
        )

    def match_flag(self, arg: str) -> FuzzyFlagResult:
        """Fuzzy match a single flag token.

        ``arg`` may be ``--flag``, ``-f``, ``--flag=value`` or a bare
        ``flag`` name.
        """
        if not arg:
            return FuzzyFlagResult(input=arg)

        parts = extract_flag_name_lenient(arg)
        if not parts.name or not self._candidates:
            return FuzzyFlagResult(input=arg, is_flag=parts.ok, value=parts.value)

        result = suggest_flag(parts.name, self._candidates, self._config)
        return FuzzyFlagResult(
            input=arg,
            match=result.match,
            auto_correct=result.auto_correct,
            suggestions=() if result.auto_correct else result.suggestions,
            is_flag=parts.ok,
            value=parts.value,
        )

    def correct(self, args: Sequence[str] | None) -> CorrectionOutcome:
        """Correct every misspelled flag in ``args``.

        Parameters
        ----------
        args:
            Raw arguments, program name removed.  Never modified.

        Returns
        -------
        CorrectionOutcome
            Corrected arguments plus the applied corrections and the
            ambiguous flags.
        """
        outcome = CorrectionOutcome()
        if not args:
            return outcome

        terminated = False
        for arg in args:
            if terminated or arg == TERMINATOR:
                terminated = True
                outcome.corrected_args.append(arg)
                continue

            if not is_flag(arg):
                outcome.corrected_args.append(arg)
                continue

            parts = extract_flag_name_lenient(arg)
            if parts.name in self._known:
                outcome.corrected_args.append(arg)
                continue

            result = self.match_flag(arg)
            if result.auto_correct and result.match:
                corrected = _rebuild(arg, parts, result.match)
                logger.debug("Corrected flag %r to %r", arg, corrected)
                outcome.corrected_args.append(corrected)
                outcome.corrections.append(FlagCorrection(original=arg, corrected=corrected))
                continue

            if result.suggestions:
                logger.debug("Ambiguous flag %r: %s", arg, ", ".join(result.suggestions))
                outcome.ambiguous.append(
                    AmbiguousFlag(input=arg, suggestions=result.suggestions)
                )
            outcome.corrected_args.append(arg)

        return outcome


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def fuzzy_match_flag(
    arg: str,
    known_flags: Iterable[str] | None,
    config: MatchConfig = DEFAULT_CONFIG,
) -> FuzzyFlagResult:
    """Fuzzy match one flag token against ``known_flags``.

    Example
    -------
    ::

        fuzzy_match_flag("--ownr", ["owner", "output", "format"]).match  # "owner"
    """
    return FlagCorrector(known_flags, config).match_flag(arg)


def fuzzy_match_flags(
    args: Sequence[str] | None,
    known_flags: Iterable[str] | None,
    config: MatchConfig = DEFAULT_CONFIG,
) -> CorrectionOutcome:
    """Correct misspelled flags in ``args`` against ``known_flags``."""
    return FlagCorrector(known_flags, config).correct(args)
