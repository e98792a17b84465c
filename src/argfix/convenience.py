"""Convenience API for argfix: correct, then route, in one call.

The usual way to consume a command line is to fix flag typos first and
route the corrected arguments afterwards.  :class:`ArgInterpreter`
bundles the known flags once and runs both passes.

Example
-------
::

    from argfix import ArgInterpreter

    interp = ArgInterpreter(flags=["owner", "verbose"], bool_flags=["verbose"])
    result = interp.interpret(["--verbos", "--ownr", "alice", "1.2"])
    result.values.must_string("owner")   # "alice"
    result.values.positional             # ["1.2"]
    [c.corrected for c in result.correction.corrections]
    # ["--verbose", "--owner"]
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from argfix.config import DEFAULT_CONFIG, MatchConfig
from argfix.corrector.corrector import CorrectionOutcome, FlagCorrector
from argfix.corrector.diagnostics import Diagnostic, diagnose
from argfix.parser.router import ArgumentRouter, ParseOutcome
from argfix.parser.values import FlagValues

logger = logging.getLogger(__name__)


@dataclass
class Interpretation:
    """Both passes of an interpretation.

    Parameters
    ----------
    correction:
        Output of the flag corrector.
    parsed:
        Output of the router run on ``correction.corrected_args``.
    values:
        Fail-fast accessor over ``parsed``.
    """

    correction: CorrectionOutcome
    parsed: ParseOutcome
    values: FlagValues

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Return diagnostics describing the corrections and ambiguities."""
        return diagnose(self.correction)


class ArgInterpreter:
    """Zero-state helper that corrects and routes argument lists.

    Parameters
    ----------
    flags:
        Every flag name the command accepts.  Boolean flags are added
        automatically.
    bool_flags:
        Flags that never consume the next argument.
    config:
        Matching parameters for the corrector.
    """

    def __init__(
        self,
        flags: Iterable[str] = (),
        bool_flags: Iterable[str] = (),
        config: MatchConfig = DEFAULT_CONFIG,
    ) -> None:
        bools = frozenset(bool_flags)
        self._flags: frozenset[str] = frozenset(flags) | bools
        self._corrector = FlagCorrector(self._flags, config)
        self._router = ArgumentRouter(self._flags, bools)

    def __repr__(self) -> str:
        return f"ArgInterpreter(flags={sorted(self._flags)})"

    @property
    def flags(self) -> frozenset[str]:
        """Return every registered flag name."""
        return self._flags

    def correct(self, args: Sequence[str] | None) -> CorrectionOutcome:
        """Run only the correction pass."""
        return self._corrector.correct(args)

    def route(self, args: Sequence[str] | None) -> ParseOutcome:
        """Run only the routing pass, without correction."""
        return self._router.parse(args)

    def interpret(self, args: Sequence[str] | None) -> Interpretation:
        """Correct flag typos in ``args``, then route the corrected list."""
        correction = self._corrector.correct(args)
        if correction.changed:
            logger.debug("Applied %d flag correction(s)", len(correction.corrections))
        parsed = self._router.parse(correction.corrected_args)
        return Interpretation(
            correction=correction,
            parsed=parsed,
            values=FlagValues(parsed, self._flags),
        )
