"""Unit tests for argfix.parser.router — partitioning and reordering of arguments."""
from __future__ import annotations

import pytest

from argfix.parser.router import (
    ArgumentRouter,
    ParseOutcome,
    normalize_args,
    normalize_args_with_bool_flags,
    parse_args,
    parse_args_with_bool_flags,
)

OWNER_FORMAT = {"owner", "format"}


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseBasics:
    @pytest.mark.parametrize("args", [None, []])
    def test_empty(self, args: list[str] | None) -> None:
        outcome = parse_args(args, OWNER_FORMAT)
        assert outcome == ParseOutcome()

    def test_flag_before_positional(self) -> None:
        outcome = parse_args(["--owner", "alice", "1.2"], {"owner"})
        assert outcome.positional == ["1.2"]
        assert outcome.flags == {"owner": "alice"}

    def test_positional_before_inline_flag(self) -> None:
        outcome = parse_args(["1.2", "--owner=alice"], {"owner"})
        assert outcome.positional == ["1.2"]
        assert outcome.flags == {"owner": "alice"}

    def test_short_flag(self) -> None:
        outcome = parse_args(["-o", "alice", "x"], {"o"})
        assert outcome.flags == {"o": "alice"}
        assert outcome.positional == ["x"]

    def test_contains(self) -> None:
        outcome = parse_args(["--owner", "alice"], OWNER_FORMAT)
        assert "owner" in outcome
        assert "format" not in outcome

    def test_positional_duplicates_kept_in_order(self) -> None:
        outcome = parse_args(["b", "a", "b"], OWNER_FORMAT)
        assert outcome.positional == ["b", "a", "b"]


class TestInlineValues:
    def test_empty_inline_value(self) -> None:
        outcome = parse_args(["--owner=", "x"], {"owner"})
        assert outcome.flags == {"owner": ""}
        assert outcome.positional == ["x"]

    def test_value_containing_equals(self) -> None:
        outcome = parse_args(["--format=a=b"], OWNER_FORMAT)
        assert outcome.flags == {"format": "a=b"}

    def test_inline_value_never_consumes_next(self) -> None:
        outcome = parse_args(["--owner=alice", "bob"], {"owner"})
        assert outcome.positional == ["bob"]


class TestLookahead:
    def test_flag_at_end_gets_empty_value(self) -> None:
        assert parse_args(["x", "--owner"], {"owner"}).flags == {"owner": ""}

    def test_next_known_flag_is_not_consumed(self) -> None:
        outcome = parse_args(["--owner", "--format", "json"], OWNER_FORMAT)
        assert outcome.flags == {"owner": "", "format": "json"}
        assert outcome.positional == []

    def test_next_terminator_is_not_consumed(self) -> None:
        outcome = parse_args(["--owner", "--", "x"], {"owner"})
        assert outcome.flags == {"owner": ""}
        assert outcome.positional == ["x"]

    def test_next_unknown_flag_is_consumed(self) -> None:
        outcome = parse_args(["--owner", "-alice-"], {"owner"})
        assert outcome.flags == {"owner": "-alice-"}
        assert outcome.positional == []

    def test_negative_number_is_consumed(self) -> None:
        outcome = parse_args(["--owner", "-5", "x"], {"owner"})
        assert outcome.flags == {"owner": "-5"}
        assert outcome.positional == ["x"]


class TestUnknownFlags:
    def test_unknown_flag_is_positional(self) -> None:
        outcome = parse_args(["--verbose", "x"], {"owner"})
        assert outcome.positional == ["--verbose", "x"]
        assert outcome.flags == {}

    def test_misspelled_flag_is_not_corrected(self) -> None:
        outcome = parse_args(["--ownr", "alice"], {"owner"})
        assert outcome.positional == ["--ownr", "alice"]
        assert "owner" not in outcome

    def test_negative_numbers_are_positional(self) -> None:
        assert parse_args(["-5", "-1.5"], {"owner"}).positional == ["-5", "-1.5"]


class TestBoolFlags:
    def test_bool_flag_is_true_and_does_not_consume(self) -> None:
        outcome = parse_args_with_bool_flags(["--verbose", "1.2"], {"verbose", "owner"}, {"verbose"})
        assert outcome.flags == {"verbose": "true"}
        assert outcome.positional == ["1.2"]

    def test_bool_flag_before_valued_flag(self) -> None:
        outcome = parse_args_with_bool_flags(
            ["--verbose", "--owner", "alice"], {"verbose", "owner"}, {"verbose"}
        )
        assert outcome.positional == []
        assert outcome.flags == {"verbose": "true", "owner": "alice"}

    def test_bool_flag_inline_value_wins(self) -> None:
        outcome = parse_args_with_bool_flags(["--verbose=false"], {"verbose"}, {"verbose"})
        assert outcome.flags == {"verbose": "false"}

    def test_without_bool_declaration_next_is_consumed(self) -> None:
        outcome = parse_args(["--verbose", "1.2"], {"verbose"})
        assert outcome.flags == {"verbose": "1.2"}
        assert outcome.positional == []

    def test_bool_flag_missing_from_known_set_is_ignored(self) -> None:
        outcome = parse_args_with_bool_flags(["--verbose", "x"], {"owner"}, {"verbose"})
        assert outcome.positional == ["--verbose", "x"]


class TestTerminator:
    def test_terminator_is_dropped(self) -> None:
        outcome = parse_args(["--"], {"owner"})
        assert outcome == ParseOutcome()

    def test_everything_after_terminator_is_positional(self) -> None:
        outcome = parse_args(["a", "--", "--owner", "b", "--"], {"owner"})
        assert outcome.positional == ["a", "--owner", "b", "--"]
        assert outcome.flags == {}


class TestRepeatedFlags:
    def test_last_occurrence_wins(self) -> None:
        outcome = parse_args(["--owner", "a", "--owner=b"], {"owner"})
        assert outcome.flags == {"owner": "b"}


def test_input_is_not_modified() -> None:
    args = ["--owner", "alice", "--", "x"]
    snapshot = list(args)
    router = ArgumentRouter({"owner"})
    router.parse(args)
    router.normalize(args)
    assert args == snapshot


def test_router_exposes_sets() -> None:
    router = ArgumentRouter(["owner", "verbose"], ["verbose"])
    assert router.flag_names == frozenset({"owner", "verbose"})
    assert router.bool_flags == frozenset({"verbose"})
    assert "owner" in repr(router)


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    @pytest.mark.parametrize("args", [None, []])
    def test_empty(self, args: list[str] | None) -> None:
        assert normalize_args(args, {"owner"}) == []

    @pytest.mark.parametrize("args, expected", [
        (["--owner", "alice", "1.2"], ["1.2", "--owner", "alice"]),
        (["1.2", "--owner", "alice"], ["1.2", "--owner", "alice"]),
        (["--owner=alice", "x"], ["x", "--owner=alice"]),
        (["--ownr", "alice", "x"], ["--ownr", "alice", "x"]),
        (["--owner", "--format", "json", "x"], ["x", "--owner", "--format", "json"]),
    ])
    def test_reorders(self, args: list[str], expected: list[str]) -> None:
        assert normalize_args(args, OWNER_FORMAT) == expected

    def test_terminator_goes_last(self) -> None:
        got = normalize_args(["1.2", "--owner", "alice", "--", "x"], {"owner"})
        assert got == ["1.2", "x", "--owner", "alice", "--"]

    def test_post_terminator_flags_stay_positional(self) -> None:
        got = normalize_args(["a", "--", "--owner", "b"], {"owner"})
        assert got == ["a", "--owner", "b", "--"]

    def test_bool_flags_do_not_carry_values(self) -> None:
        got = normalize_args_with_bool_flags(["--verbose", "x"], {"verbose"}, {"verbose"})
        assert got == ["x", "--verbose"]

    def test_non_bool_flag_carries_its_value(self) -> None:
        assert normalize_args(["--verbose", "x"], {"verbose"}) == ["--verbose", "x"]

    @pytest.mark.parametrize("args", [
        ["--owner", "alice", "1.2", "-5"],
        ["x", "--verbose", "--owner=bob", "y"],
        ["--format", "json", "--owner", "--verbose", "z"],
    ])
    def test_idempotent_and_meaning_preserving(self, args: list[str]) -> None:
        router = ArgumentRouter(["owner", "format", "verbose"], ["verbose"])
        once = router.normalize(args)
        assert router.normalize(once) == once
        assert router.parse(once) == router.parse(args)
