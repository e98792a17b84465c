#!/usr/bin/env python3
"""Example: ArgInterpreter and diagnostics

Demonstrates correcting and routing in one pass with ArgInterpreter,
reporting what happened through diagnostics, and exporting the result
as JSON and YAML.

Usage:
    python examples/02_flag_correction.py

Requirements:
    pip install argfix
"""
from __future__ import annotations

from argfix import ArgInterpreter
from argfix.config import MatchConfig
from argfix.errors import FlagNotRegisteredError
from argfix.serializer import OutcomeSerializer

COMMAND_LINES = [
    ["--ownr", "alice", "1.2"],
    ["--for", "--verbose", "target"],
    ["--ownr=bob", "--", "--ownr", "kept-verbatim"],
]


def main() -> None:
    interp = ArgInterpreter(flags=["owner", "force", "format"], bool_flags=["verbose", "force"])
    serializer = OutcomeSerializer()

    for args in COMMAND_LINES:
        print(f"\n$ cmd {' '.join(args)}")
        result = interp.interpret(args)
        for diagnostic in result.diagnostics:
            print(f"  {diagnostic}")
        print(f"  owner = {result.values.must_string('owner')!r}")
        print(f"  positional = {result.values.positional}")

    # Reading a flag that was never registered is a programming error
    try:
        interp.interpret([]).values.must_string("ownr")
    except FlagNotRegisteredError as exc:
        print(f"\nFlagNotRegisteredError: {exc}")

    # A stricter threshold turns the same typo into an ambiguity
    strict = ArgInterpreter(flags=["owner"], config=MatchConfig(flag_threshold=0.9))
    outcome = strict.correct(["--ownr", "alice"])
    print("\nStrict correction as JSON:")
    print(serializer.to_json(outcome))
    print("Routed as YAML:")
    print(serializer.to_yaml(strict.route(outcome.corrected_args)))


if __name__ == "__main__":
    main()
