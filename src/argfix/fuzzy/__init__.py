"""Fuzzy string matching: edit distance and candidate ranking."""
from __future__ import annotations

from argfix.fuzzy.distance import distance, similarity
from argfix.fuzzy.match import MatchResult, match, suggest_command, suggest_flag

__all__ = [
    "distance",
    "similarity",
    "MatchResult",
    "match",
    "suggest_command",
    "suggest_flag",
]
