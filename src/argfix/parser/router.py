"""Argument router: partitions arguments into positional values and flags.

The router makes a single left-to-right pass over the argument list and
may look one token ahead to decide whether a flag consumes the next
token as its value.

Supported forms:

- long flags: ``--flag value`` or ``--flag=value``
- short flags: ``-f value`` or ``-f=value``
- boolean flags: ``--flag`` (value ``"true"`` when declared boolean)
- ``--`` terminates flag parsing; the terminator itself is dropped

Flags that are not in the known set are kept as positional arguments.
They are never corrected here; run :mod:`argfix.corrector` first when
typo correction is wanted.

The lookahead for a non-boolean flag without an inline value follows a
fixed order: no next token, then a next token that is a known flag, then
a terminator; in all three cases the flag gets an empty value.  Only
otherwise is the next token consumed.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from argfix.grammar.tokens import TERMINATOR
from argfix.lexer.classifier import extract_flag_name

logger = logging.getLogger(__name__)


@dataclass
class ParseOutcome:
    """Result of routing an argument list.

    Parameters
    ----------
    positional:
        Non-flag arguments in their original order (duplicates kept).
    flags:
        Known flag names mapped to their string values.  A flag given
        twice keeps the value of its last occurrence.
    """

    positional: list[str] = field(default_factory=list)
    flags: dict[str, str] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        """Support ``"owner" in outcome`` for flag presence."""
        return name in self.flags


class ArgumentRouter:
    """Routes argument lists against a fixed set of known flags.

    Parameters
    ----------
    flag_names:
        Names (without dashes) of every flag the command accepts.
    bool_flags:
        Subset of flags that never consume the next argument.  Names
        listed here but missing from ``flag_names`` are ignored, because
        unknown flags are routed as positional.
    """

    __slots__ = ("_flag_set", "_bool_set")

    def __init__(
        self,
        flag_names: Iterable[str] | None = None,
        bool_flags: Iterable[str] | None = None,
    ) -> None:
        self._flag_set: frozenset[str] = frozenset(flag_names or ())
        self._bool_set: frozenset[str] = frozenset(bool_flags or ())

    def __repr__(self) -> str:
        return (
            f"ArgumentRouter(flag_names={sorted(self._flag_set)}, "
            f"bool_flags={sorted(self._bool_set)})"
        )

    @property
    def flag_names(self) -> frozenset[str]:
        """Return the known flag names."""
        return self._flag_set

    @property
    def bool_flags(self) -> frozenset[str]:
        """Return the names declared as boolean."""
        return self._bool_set

    # ------------------------------------------------------------------
    # Classification helpers
    # ------------------------------------------------------------------

    def _known_flag(self, arg: str) -> str | None:
        """Return the flag name of ``arg`` if it is a known flag."""
        parts = extract_flag_name(arg)
        if parts.ok and parts.name in self._flag_set:
            return parts.name
        return None

    def _takes_next(self, args: Sequence[str], i: int) -> bool:
        """Return True if the known flag at ``args[i]`` consumes ``args[i + 1]``."""
        if i + 1 >= len(args):
            return False
        next_arg = args[i + 1]
        if next_arg == TERMINATOR:
            return False
        return self._known_flag(next_arg) is None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, args: Sequence[str] | None) -> ParseOutcome:
        """Split ``args`` into positional arguments and flag values.

        Parameters
        ----------
        args:
            Raw arguments, program name removed.  Never modified.

        Returns
        -------
        ParseOutcome
            Positional arguments and the flag-name to value mapping.
        """
        outcome = ParseOutcome()
        if not args:
            return outcome

        terminated = False
        i = 0
        while i < len(args):
            arg = args[i]
            i += 1

            if terminated:
                outcome.positional.append(arg)
                continue
            if arg == TERMINATOR:
                terminated = True
                continue

            parts = extract_flag_name(arg)
            if not parts.ok or parts.name not in self._flag_set:
                outcome.positional.append(arg)
                continue

            name = parts.name
            if parts.has_value:
                value = parts.value
            elif name in self._bool_set:
                value = "true"
            elif self._takes_next(args, i - 1):
                value = args[i]
                i += 1
            else:
                value = ""

            if name in outcome.flags:
                logger.debug(
                    "Flag %r given more than once; %r replaces %r",
                    name,
                    value,
                    outcome.flags[name],
                )
            outcome.flags[name] = value

        return outcome

    def normalize(self, args: Sequence[str] | None) -> list[str]:
        """Reorder ``args`` so that positional arguments come before flags.

        The result lists positional arguments (those before the
        terminator, then those after it), followed by every known flag
        together with the value token it consumed, followed by a single
        ``--`` if the input contained one.  Relative order within each
        group is preserved and ``args`` is not modified.
        """
        if not args:
            return []

        positional: list[str] = []
        after_terminator: list[str] = []
        flag_parts: list[str] = []
        terminated = False

        i = 0
        while i < len(args):
            arg = args[i]
            i += 1

            if terminated:
                after_terminator.append(arg)
                continue
            if arg == TERMINATOR:
                terminated = True
                continue

            parts = extract_flag_name(arg)
            if not parts.ok or parts.name not in self._flag_set:
                positional.append(arg)
                continue

            flag_parts.append(arg)
            if parts.has_value or parts.name in self._bool_set:
                continue
            if self._takes_next(args, i - 1):
                flag_parts.append(args[i])
                i += 1

        result = [*positional, *after_terminator, *flag_parts]
        if terminated:
            result.append(TERMINATOR)
        return result


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def parse_args(args: Sequence[str] | None, flag_names: Iterable[str] | None) -> ParseOutcome:
    """Route ``args`` with no flags declared boolean.

    Example
    -------
    ::

        outcome = parse_args(["--owner", "alice", "1.2"], {"owner"})
        outcome.positional  # ["1.2"]
        outcome.flags       # {"owner": "alice"}
    """
    return ArgumentRouter(flag_names).parse(args)


def parse_args_with_bool_flags(
    args: Sequence[str] | None,
    flag_names: Iterable[str] | None,
    bool_flags: Iterable[str] | None,
) -> ParseOutcome:
    """Route ``args``; flags in ``bool_flags`` never consume the next argument."""
    return ArgumentRouter(flag_names, bool_flags).parse(args)


def normalize_args(args: Sequence[str] | None, flag_names: Iterable[str] | None) -> list[str]:
    """Reorder ``args`` into positional-first order with no boolean flags."""
    return ArgumentRouter(flag_names).normalize(args)


def normalize_args_with_bool_flags(
    args: Sequence[str] | None,
    flag_names: Iterable[str] | None,
    bool_flags: Iterable[str] | None,
) -> list[str]:
    """Reorder ``args`` into positional-first order, honoring boolean flags."""
    return ArgumentRouter(flag_names, bool_flags).normalize(args)
