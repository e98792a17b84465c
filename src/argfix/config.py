"""Matching configuration for argfix.

The numeric constants below were tuned empirically against real typo
corpora; they are kept exact for behavioral compatibility.  A
:class:`MatchConfig` bundles them so callers (and the CLI) can override
individual values per invocation without touching module state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from argfix.errors import ThresholdError

COMMAND_THRESHOLD: Final[float] = 0.8
"""Similarity needed to auto-correct a command name."""

FLAG_THRESHOLD: Final[float] = 0.7
"""Similarity needed to auto-correct a flag name."""

MIN_SIMILARITY: Final[float] = 0.3
"""Best matches below this similarity are not reported at all."""

SUGGESTION_SLACK: Final[float] = 0.5
"""Suggestions may fall this far below the auto-correct threshold."""

MIN_SUGGESTION_SIMILARITY: Final[float] = 0.1

SUGGESTION_DISTANCE_PAD: Final[int] = 3
"""Suggestions may be up to ``len(input) + pad`` edits away."""

MIN_SUGGESTION_DISTANCE: Final[int] = 4


@dataclass(frozen=True)
class MatchConfig:
    """Tunable parameters for the similarity matcher.

    Parameters
    ----------
    command_threshold:
        Auto-correct threshold for command names (default 0.8).
    flag_threshold:
        Auto-correct threshold for flag names (default 0.7).
    min_similarity:
        Absolute relevance floor for the best match (default 0.3).
    suggestion_slack:
        Amount subtracted from the threshold to obtain the suggestion
        similarity floor (default 0.5).
    min_suggestion_similarity:
        Lower bound of the suggestion similarity floor (default 0.1).
    suggestion_distance_pad:
        Added to the input length to obtain the suggestion distance
        window (default 3).
    min_suggestion_distance:
        Lower bound of the suggestion distance window (default 4).

    Raises
    ------
    ThresholdError
        If a threshold or the similarity floor is outside ``[0.0, 1.0]``.
    """

    command_threshold: float = COMMAND_THRESHOLD
    flag_threshold: float = FLAG_THRESHOLD
    min_similarity: float = MIN_SIMILARITY
    suggestion_slack: float = SUGGESTION_SLACK
    min_suggestion_similarity: float = MIN_SUGGESTION_SIMILARITY
    suggestion_distance_pad: int = SUGGESTION_DISTANCE_PAD
    min_suggestion_distance: int = MIN_SUGGESTION_DISTANCE

    def __post_init__(self) -> None:
        for threshold in (self.command_threshold, self.flag_threshold, self.min_similarity):
            if not 0.0 <= threshold <= 1.0:
                raise ThresholdError(threshold)

    def suggestion_similarity_floor(self, threshold: float) -> float:
        """Return the per-candidate similarity needed to be suggested."""
        return max(self.min_suggestion_similarity, threshold - self.suggestion_slack)

    def suggestion_distance_window(self, input_length: int) -> int:
        """Return the largest distance a suggested candidate may have."""
        return max(self.min_suggestion_distance, input_length + self.suggestion_distance_pad)


DEFAULT_CONFIG: Final[MatchConfig] = MatchConfig()
