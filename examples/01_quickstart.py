#!/usr/bin/env python3
"""Example: Quickstart — argfix

Minimal working example: fix flag typos in a command line, route the
corrected arguments, and rank command-name candidates.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install argfix
"""
from __future__ import annotations

import argfix

KNOWN_FLAGS = ["owner", "format", "verbose"]
COMMANDS = ["init", "status", "claim", "release", "refine", "challenge"]

ARGS = ["--verbos", "--ownr", "alice", "1.2", "--formt=json"]


def main() -> None:
    print(f"argfix version: {argfix.__version__}")

    # Step 1: Correct misspelled flags
    fixed = argfix.correct(ARGS, KNOWN_FLAGS)
    for correction in fixed.corrections:
        print(f"Corrected {correction.original} -> {correction.corrected}")
    print(f"Corrected args: {fixed.corrected_args}")

    # Step 2: Route into positional arguments and flag values
    outcome = argfix.route(fixed.corrected_args, KNOWN_FLAGS, bool_flags=["verbose"])
    print(f"Positional: {outcome.positional}")
    print(f"Flags: {outcome.flags}")

    # Step 3: Reorder so positional arguments come first
    print(f"Normalized: {argfix.normalize(ARGS, KNOWN_FLAGS, ['verbose'])}")

    # Step 4: Suggest a command for a typo
    result = argfix.match("stauts", COMMANDS)
    verdict = "auto-correct" if result.auto_correct else "suggest"
    print(f"'stauts' -> '{result.match}' (distance {result.distance}, {verdict})")


if __name__ == "__main__":
    main()
