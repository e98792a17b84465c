"""Shared test fixtures for argfix.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "argfix"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def cli_commands() -> list[str]:
    """Return a realistic set of subcommand names."""
    return [
        "init", "status", "claim", "release", "refine", "accept",
        "challenge", "validate", "admit", "refute", "archive",
        "jobs", "def", "assume", "lemma", "help", "version",
    ]


@pytest.fixture()
def cli_flags() -> list[str]:
    """Return a realistic set of long flag names."""
    return [
        "help", "version", "verbose", "format", "output", "dir", "config",
        "quiet", "debug", "json", "force", "recursive", "dry-run", "all",
    ]
