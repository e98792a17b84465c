"""Fail-fast accessors for routed flag values.

Reading a flag that the command never registered is a bug in the
calling code, not bad user input.  :class:`FlagValues` therefore raises
:class:`~argfix.errors.FlagNotRegisteredError` for such reads instead of
quietly returning an empty string.  Values are always strings.
"""
from __future__ import annotations

from collections.abc import Iterable

from argfix.errors import FlagNotRegisteredError
from argfix.parser.router import ParseOutcome


class FlagValues:
    """Read-only view of a :class:`ParseOutcome` keyed by registered flags.

    Parameters
    ----------
    outcome:
        The routed arguments.
    registered:
        Every flag name the command declared.
    """

    __slots__ = ("_outcome", "_registered")

    def __init__(self, outcome: ParseOutcome, registered: Iterable[str]) -> None:
        self._outcome = outcome
        self._registered: frozenset[str] = frozenset(registered)

    def __repr__(self) -> str:
        return f"FlagValues({self._outcome.flags!r})"

    def _check(self, name: str) -> None:
        if name not in self._registered:
            raise FlagNotRegisteredError(name, self._registered)

    @property
    def positional(self) -> list[str]:
        """Return the positional arguments of the underlying outcome."""
        return self._outcome.positional

    def must_string(self, name: str) -> str:
        """Return the value of flag ``name``, ``""`` when it was not given.

        Raises
        ------
        FlagNotRegisteredError
            If ``name`` was never registered.
        """
        self._check(name)
        return self._outcome.flags.get(name, "")

    def is_set(self, name: str) -> bool:
        """Return True if flag ``name`` appeared on the command line.

        Raises
        ------
        FlagNotRegisteredError
            If ``name`` was never registered.
        """
        self._check(name)
        return name in self._outcome.flags
