"""Command-line front end for argfix.

``argfix.cli.main`` holds the Click group registered as the ``argfix``
console script.
"""
from __future__ import annotations
