"""Unit tests for argfix.config — matching parameters."""
from __future__ import annotations

import dataclasses

import pytest

from argfix.config import DEFAULT_CONFIG, MatchConfig
from argfix.errors import ThresholdError


def test_defaults() -> None:
    assert DEFAULT_CONFIG.command_threshold == 0.8
    assert DEFAULT_CONFIG.flag_threshold == 0.7
    assert DEFAULT_CONFIG.min_similarity == 0.3


def test_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.flag_threshold = 0.5  # type: ignore[misc]


def test_replace_overrides_one_field() -> None:
    config = dataclasses.replace(DEFAULT_CONFIG, flag_threshold=0.9)
    assert config.flag_threshold == 0.9
    assert config.command_threshold == 0.8


class TestSuggestionWindow:
    @pytest.mark.parametrize("threshold, expected", [
        (0.8, 0.3),
        (0.7, 0.2),
        (0.5, 0.1),
        (0.0, 0.1),
        (1.0, 0.5),
    ])
    def test_similarity_floor(self, threshold: float, expected: float) -> None:
        assert DEFAULT_CONFIG.suggestion_similarity_floor(threshold) == pytest.approx(expected)

    @pytest.mark.parametrize("length, expected", [(0, 4), (1, 4), (2, 5), (6, 9)])
    def test_distance_window(self, length: int, expected: int) -> None:
        assert DEFAULT_CONFIG.suggestion_distance_window(length) == expected


class TestValidation:
    @pytest.mark.parametrize("field_name", ["command_threshold", "flag_threshold", "min_similarity"])
    @pytest.mark.parametrize("value", [-0.01, 1.5])
    def test_out_of_range(self, field_name: str, value: float) -> None:
        with pytest.raises(ThresholdError):
            MatchConfig(**{field_name: value})

    def test_message_names_value(self) -> None:
        with pytest.raises(ThresholdError, match="1.5"):
            MatchConfig(flag_threshold=1.5)
