"""Unit tests for argfix.lexer — classification of argument tokens."""
from __future__ import annotations

import pytest

from argfix.grammar.tokens import DashStyle, Token, TokenKind
from argfix.lexer.classifier import (
    FlagParts,
    classify,
    extract_flag_name,
    extract_flag_name_lenient,
    is_flag,
    strip_dashes,
    tokenize,
)


# ---------------------------------------------------------------------------
# is_flag
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("arg", ["-v", "--verbose", "--owner=alice", "---x", "-a-", "-.", "--"])
def test_flag_shaped_tokens(arg: str) -> None:
    assert is_flag(arg) is True


@pytest.mark.parametrize("arg", ["", "-", "a", "owner", "1.2", "-5", "-123", "-1.23", "-.5", "-0"])
def test_non_flag_tokens(arg: str) -> None:
    assert is_flag(arg) is False


# ---------------------------------------------------------------------------
# extract_flag_name (strict)
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("arg, expected", [
    ("--owner", FlagParts("owner", "", True, False)),
    ("-o", FlagParts("o", "", True, False)),
    ("--owner=alice", FlagParts("owner", "alice", True, True)),
    ("--owner=", FlagParts("owner", "", True, True)),
    ("-o=val", FlagParts("o", "val", True, True)),
    ("--config=key=value", FlagParts("config", "key=value", True, True)),
    ("---x", FlagParts("-x", "", True, False)),
    ("1.2", FlagParts("", "", False, False)),
    ("--", FlagParts("", "", False, False)),
    ("-", FlagParts("", "", False, False)),
    ("-42", FlagParts("", "", False, False)),
])
def test_extract_flag_name(arg: str, expected: FlagParts) -> None:
    assert extract_flag_name(arg) == expected


class TestInlineValueRoundTrip:
    @pytest.mark.parametrize("name, value", [
        ("owner", "alice"),
        ("config", "a=b=c"),
        ("path", "/tmp/x y"),
        ("n", "-5"),
        ("dry-run", "true"),
        ("emoji", "日本"),
    ])
    def test_long_form_recovers_name_and_value(self, name: str, value: str) -> None:
        parts = extract_flag_name(f"--{name}={value}")
        assert parts.ok
        assert parts.name == name
        assert parts.value == value
        assert parts.has_value

    def test_missing_value_differs_from_empty_value(self) -> None:
        bare = extract_flag_name("--owner")
        empty = extract_flag_name("--owner=")
        assert bare.value == empty.value == ""
        assert bare.has_value is False
        assert empty.has_value is True


# ---------------------------------------------------------------------------
# extract_flag_name_lenient
# ---------------------------------------------------------------------------


class TestLenientClassifier:
    def test_bare_name_is_not_a_flag_but_has_a_name(self) -> None:
        assert extract_flag_name_lenient("ownr") == FlagParts("ownr", "", False, False)

    def test_dashed_name_is_a_flag(self) -> None:
        assert extract_flag_name_lenient("--ownr=alice") == FlagParts("ownr", "alice", True, True)

    def test_short_flag(self) -> None:
        assert extract_flag_name_lenient("-o") == FlagParts("o", "", True, False)

    def test_bare_name_with_value(self) -> None:
        assert extract_flag_name_lenient("ownr=x") == FlagParts("ownr", "x", False, True)

    @pytest.mark.parametrize("arg", ["", "-", "--"])
    def test_no_name(self, arg: str) -> None:
        parts = extract_flag_name_lenient(arg)
        assert parts.name == ""
        assert parts.ok is False


# ---------------------------------------------------------------------------
# classify / tokenize
# ---------------------------------------------------------------------------


class TestClassify:
    def test_terminator(self) -> None:
        token = classify("--")
        assert token.kind is TokenKind.TERMINATOR
        assert token.is_terminator

    def test_positional(self) -> None:
        token = classify("1.2", index=3)
        assert token.kind is TokenKind.POSITIONAL
        assert token.index == 3
        assert token.name == ""

    def test_long_flag_with_value(self) -> None:
        token = classify("--owner=alice")
        assert token.is_flag
        assert token.name == "owner"
        assert token.value == "alice"
        assert token.has_value
        assert token.dashes is DashStyle.LONG

    def test_short_flag(self) -> None:
        token = classify("-v")
        assert token.dashes is DashStyle.SHORT
        assert token.dashes.prefix == "-"

    def test_token_is_frozen(self) -> None:
        token = classify("-v")
        with pytest.raises((AttributeError, TypeError)):
            token.name = "x"  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(classify("-v")) == "Token(FLAG, '-v')"


class TestTokenize:
    def test_none_is_empty(self) -> None:
        assert tokenize(None) == []

    def test_kinds_and_indices(self) -> None:
        tokens = tokenize(["--owner", "alice", "-5"])
        assert [t.kind for t in tokens] == [
            TokenKind.FLAG,
            TokenKind.POSITIONAL,
            TokenKind.POSITIONAL,
        ]
        assert [t.index for t in tokens] == [0, 1, 2]

    def test_everything_after_terminator_is_positional(self) -> None:
        tokens = tokenize(["--owner", "--", "--owner", "--"])
        assert [t.kind for t in tokens] == [
            TokenKind.FLAG,
            TokenKind.TERMINATOR,
            TokenKind.POSITIONAL,
            TokenKind.POSITIONAL,
        ]
        assert tokens[2] == Token(raw="--owner", kind=TokenKind.POSITIONAL, index=2)

    def test_accepts_generators(self) -> None:
        tokens = tokenize(a for a in ["-v", "x"])
        assert [t.raw for t in tokens] == ["-v", "x"]


@pytest.mark.parametrize("raw, style", [
    ("--x", DashStyle.LONG),
    ("---x", DashStyle.LONG),
    ("-x", DashStyle.SHORT),
    ("x", DashStyle.NONE),
])
def test_dash_style_of(raw: str, style: DashStyle) -> None:
    assert DashStyle.of(raw) is style


@pytest.mark.parametrize("raw, stripped", [
    ("--owner", "owner"),
    ("-o", "o"),
    ("---x", "-x"),
    ("owner", "owner"),
    ("--", ""),
])
def test_strip_dashes(raw: str, stripped: str) -> None:
    assert strip_dashes(raw) == stripped
