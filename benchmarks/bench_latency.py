"""Benchmark: edit distance and candidate matching latency (p50/p95/mean).

Matching cost grows with the number of candidates times the product of
string lengths, so both benchmarks use a realistically sized command set.
"""
from __future__ import annotations

import json
import sys
import time
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import argfix
from argfix.fuzzy.match import suggest_command

_WARMUP: int = 200
_ITERATIONS: int = 5_000

_COMMANDS: list[str] = [
    "init", "status", "claim", "release", "refine", "accept", "challenge",
    "validate", "admit", "refute", "archive", "jobs", "def", "assume",
    "lemma", "help", "version", "extract", "export", "import", "graph",
]


def _measure(operation: str, call: Callable[[], object]) -> dict[str, object]:
    for _ in range(_WARMUP):
        call()

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        call()
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_distance_latency() -> dict[str, object]:
    """Benchmark a single Levenshtein distance between two flag-sized strings.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    return _measure("argfix_distance_latency", lambda: argfix.distance("recursive", "recusrive"))


def bench_match_latency() -> dict[str, object]:
    """Benchmark ranking a misspelled command against the full command set.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    return _measure("argfix_match_latency", lambda: suggest_command("chalenge", _COMMANDS))


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_distance_latency, "distance_latency_baseline.json"),
        (bench_match_latency, "match_latency_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
