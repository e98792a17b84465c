"""Benchmark: memory allocated while correcting long argument lists."""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import argfix

_ITERATIONS: int = 200
_FLAGS: list[str] = ["owner", "format", "force", "verbose", "output", "config"]
# 1,000 tokens mixing misspelled flags, exact flags and positionals.
_LONG_ARGS: list[str] = ["--ownr", "alice", "--verbose", "file.txt"] * 250


def bench_correct_memory() -> dict[str, object]:
    """Benchmark memory usage during correction of a long argument list.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb.
    """
    tracemalloc.start()
    for _ in range(_ITERATIONS):
        argfix.correct(_LONG_ARGS, _FLAGS)
    current_bytes, peak_bytes = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    result: dict[str, object] = {
        "operation": "argfix_correct_memory",
        "iterations": _ITERATIONS,
        "peak_memory_kb": round(peak_bytes / 1024, 2),
        "current_memory_kb": round(current_bytes / 1024, 2),
    }
    print(
        f"[bench_memory] {result['operation']}: "
        f"peak {result['peak_memory_kb']:.2f} KB over {_ITERATIONS} iterations"
    )
    return result


if __name__ == "__main__":
    result = bench_correct_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
