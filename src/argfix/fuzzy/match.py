"""Similarity matching of an input string against known candidates.

``match`` ranks every candidate by edit distance and classifies the
best one as a confident match (safe to auto-correct), a mere
suggestion, or no match at all.

Similarity is defined as ``1 - distance / max(len(input), len(candidate))``.

Ranking is deterministic: candidates are ordered by increasing distance
and, for equal distances, lexicographically, so repeated calls produce
identical suggestion lists whatever the order of the candidate
iterable.

Example
-------
::

    from argfix.fuzzy import suggest_flag

    result = suggest_flag("ownr", ["owner", "output", "format"])
    result.match        # "owner"
    result.auto_correct # True
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from argfix.config import DEFAULT_CONFIG, MatchConfig
from argfix.errors import ThresholdError
from argfix.fuzzy.distance import distance as edit_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one input against a candidate set.

    Parameters
    ----------
    input:
        The string that was matched.
    match:
        Best candidate, or ``""`` when nothing was relevant enough.
    distance:
        Edit distance from ``input`` to ``match`` (0 when no match).
    auto_correct:
        True when the best candidate is similar enough to be applied
        without asking.
    suggestions:
        Close candidates ordered by distance, then lexicographically.
    """

    input: str
    match: str = ""
    distance: int = 0
    auto_correct: bool = False
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """Return True if a best candidate was found."""
        return bool(self.match)


def _similarity(input_length: int, candidate: str, dist: int) -> float:
    longest = max(input_length, len(candidate))
    return 1 - dist / longest


def match(
    input: str,  # noqa: A002
    candidates: Iterable[str],
    threshold: float,
    config: MatchConfig = DEFAULT_CONFIG,
) -> MatchResult:
    """Find the best match for ``input`` among ``candidates``.

    Parameters
    ----------
    input:
        The (possibly misspelled) string to look up.
    candidates:
        Known strings; duplicates are ignored.
    threshold:
        Similarity in ``[0.0, 1.0]`` at or above which the best match is
        flagged ``auto_correct``.  Higher means stricter.
    config:
        Relevance floor and suggestion window parameters.

    Returns
    -------
    MatchResult
        The best match with its suggestions, or an empty result when
        the input or the candidate set is empty or the best candidate
        falls below ``config.min_similarity``.

    Raises
    ------
    ThresholdError
        If ``threshold`` is outside ``[0.0, 1.0]``.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ThresholdError(threshold)

    unique = list(dict.fromkeys(candidates))
    if not input or not unique:
        return MatchResult(input=input)

    ranked = sorted((edit_distance(input, c), c) for c in unique)
    best_distance, best = ranked[0]

    input_length = len(input)
    best_similarity = _similarity(input_length, best, best_distance)
    if best_similarity < config.min_similarity:
        logger.debug(
            "No relevant match for %r (best %r at similarity %.3f)",
            input,
            best,
            best_similarity,
        )
        return MatchResult(input=input)

    max_distance = config.suggestion_distance_window(input_length)
    min_similarity = config.suggestion_similarity_floor(threshold)
    suggestions = tuple(
        candidate
        for dist, candidate in ranked
        if dist <= max_distance
        and _similarity(input_length, candidate, dist) >= min_similarity
    )

    return MatchResult(
        input=input,
        match=best,
        distance=best_distance,
        auto_correct=best_similarity >= threshold,
        suggestions=suggestions,
    )


def suggest_command(
    input: str,  # noqa: A002
    commands: Iterable[str],
    config: MatchConfig = DEFAULT_CONFIG,
) -> MatchResult:
    """Match a command name using the command threshold (default 0.8)."""
    return match(input, commands, config.command_threshold, config)


def suggest_flag(
    input: str,  # noqa: A002
    flags: Iterable[str],
    config: MatchConfig = DEFAULT_CONFIG,
) -> MatchResult:
    """Match a flag name using the more forgiving flag threshold (default 0.7).

    Flag names are short, so a single typo costs a larger share of
    their length than it does for command names.
    """
    return match(input, flags, config.flag_threshold, config)
