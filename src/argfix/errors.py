"""Error types for argfix.

Malformed user input never raises: unknown flags degrade to positional
tokens and empty inputs produce empty results.  The exceptions here
signal programming errors in the calling code and are raised
immediately.
"""
from __future__ import annotations

from collections.abc import Iterable


class ArgfixError(Exception):
    """Base class for all argfix errors."""


class FlagNotRegisteredError(ArgfixError, KeyError):
    """Raised when code reads a flag that was never registered.

    Parameters
    ----------
    name:
        The flag name that was requested.
    registered:
        The flag names that were registered, used in the message.
    """

    def __init__(self, name: str, registered: Iterable[str] = ()) -> None:
        self.flag_name = name
        self.registered = tuple(sorted(registered))
        known = ", ".join(self.registered) or "(none)"
        message = f"flag not registered: {name!r} (registered flags: {known})"
        super().__init__(message)
        self.message = message

    # KeyError.__str__ repr()s its argument; keep the plain message.
    def __str__(self) -> str:
        return self.message


class ThresholdError(ArgfixError, ValueError):
    """Raised when a similarity threshold lies outside ``[0.0, 1.0]``."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold
        super().__init__(f"similarity threshold must be within [0.0, 1.0], got {threshold!r}")
