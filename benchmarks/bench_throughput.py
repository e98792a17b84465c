"""Benchmark: correction and routing throughput.

Measures how many argument lists per second can be corrected and routed
using the public FlagCorrector and ArgumentRouter APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from argfix.corrector.corrector import FlagCorrector
from argfix.parser.router import ArgumentRouter

_ITERATIONS: int = 5_000
_ROUTE_ITERATIONS: int = 20_000

_FLAGS: list[str] = [
    "owner", "format", "force", "verbose", "output", "config",
    "quiet", "debug", "recursive", "dry-run", "all", "dir",
]
_BOOL_FLAGS: list[str] = ["verbose", "quiet", "debug", "force", "all", "dry-run"]

_SAMPLE_ARGS: list[str] = [
    "--verbos", "--ownr", "alice", "1.2", "--formt=json",
    "--recusrive", "src", "--", "--ownr", "tail",
]


def bench_correct_throughput() -> dict[str, object]:
    """Benchmark flag correction of a typo-laden argument list.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    corrector = FlagCorrector(_FLAGS)

    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        corrector.correct(_SAMPLE_ARGS)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "argfix_correct_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_route_throughput() -> dict[str, object]:
    """Benchmark routing of an already corrected argument list.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    corrected = FlagCorrector(_FLAGS).correct(_SAMPLE_ARGS).corrected_args
    router = ArgumentRouter(_FLAGS, _BOOL_FLAGS)

    start = time.perf_counter()
    for _ in range(_ROUTE_ITERATIONS):
        router.parse(corrected)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "argfix_route_throughput",
        "iterations": _ROUTE_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ROUTE_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ROUTE_ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_correct_throughput, "correct_throughput_baseline.json"),
        (bench_route_throughput, "route_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
