"""Diagnostic messages for flag corrections.

A ``Diagnostic`` is a message attached to one argument token.  The CLI
and other presentation layers turn a :class:`CorrectionOutcome` into a
list of diagnostics to report what was auto-corrected and which flags
need the user's attention.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto

from argfix.corrector.corrector import AmbiguousFlag, CorrectionOutcome, FlagCorrection

AUTO_CORRECTED = "ARG001"
AMBIGUOUS_FLAG = "ARG002"


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostics, aligned with LSP conventions."""

    ERROR = auto()
    WARNING = auto()
    INFORMATION = auto()
    HINT = auto()


@dataclass(frozen=True)
class Diagnostic:
    """A single correction finding.

    Parameters
    ----------
    severity:
        How serious this finding is.
    code:
        A short machine-readable identifier, e.g. ``"ARG001"``.
    message:
        Human-readable description.
    token:
        The argument token the finding is about.
    suggestion:
        Optional replacement text or list of candidates.
    """

    severity: DiagnosticSeverity
    code: str
    message: str
    token: str
    suggestion: str | None = field(default=None)

    def __str__(self) -> str:
        prefix = f"[{self.code}] {self.severity.name}"
        suggestion_part = f" (hint: {self.suggestion})" if self.suggestion else ""
        return f"{prefix} {self.token}: {self.message}{suggestion_part}"

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic should fail the invocation."""
        return self.severity == DiagnosticSeverity.ERROR


def _from_correction(correction: FlagCorrection) -> Diagnostic:
    return Diagnostic(
        severity=DiagnosticSeverity.INFORMATION,
        code=AUTO_CORRECTED,
        message=f"auto-corrected {correction.original} to {correction.corrected}",
        token=correction.original,
        suggestion=correction.corrected,
    )


def _from_ambiguous(flag: AmbiguousFlag) -> Diagnostic:
    options = ", ".join(f"--{s}" for s in flag.suggestions)
    return Diagnostic(
        severity=DiagnosticSeverity.WARNING,
        code=AMBIGUOUS_FLAG,
        message=f"ambiguous flag {flag.input}, did you mean: {options}?",
        token=flag.input,
        suggestion=options,
    )


def diagnose(outcome: CorrectionOutcome, strict: bool = False) -> list[Diagnostic]:
    """Build diagnostics for a correction outcome.

    Parameters
    ----------
    outcome:
        The result of :func:`argfix.corrector.fuzzy_match_flags`.
    strict:
        When ``True``, ambiguous flags are reported as errors.

    Returns
    -------
    list[Diagnostic]
        Auto-corrections first, then ambiguous flags, each in argument
        order.
    """
    diagnostics = [_from_correction(c) for c in outcome.corrections]
    for flag in outcome.ambiguous:
        diagnostic = _from_ambiguous(flag)
        if strict:
            diagnostic = replace(diagnostic, severity=DiagnosticSeverity.ERROR)
        diagnostics.append(diagnostic)
    return diagnostics
