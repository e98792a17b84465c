"""Flag corrector.

Exports ``FlagCorrector``, the ``fuzzy_match_flag`` /
``fuzzy_match_flags`` convenience functions, their result types and the
diagnostic helpers.
"""
from __future__ import annotations

from argfix.corrector.corrector import (
    AmbiguousFlag,
    CorrectionOutcome,
    FlagCorrection,
    FlagCorrector,
    FuzzyFlagResult,
    fuzzy_match_flag,
    fuzzy_match_flags,
)
from argfix.corrector.diagnostics import Diagnostic, DiagnosticSeverity, diagnose

__all__ = [
    "FlagCorrector",
    "FuzzyFlagResult",
    "FlagCorrection",
    "AmbiguousFlag",
    "CorrectionOutcome",
    "fuzzy_match_flag",
    "fuzzy_match_flags",
    "Diagnostic",
    "DiagnosticSeverity",
    "diagnose",
]
