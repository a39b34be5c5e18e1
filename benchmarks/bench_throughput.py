"""Benchmark: link traversal and render throughput on wide trees.

Measures how many tweaks per second a single ``link`` call can apply
across a flat tree of buckets, and how many resources per second
``render_all`` can merge.
"""
from __future__ import annotations

import json
import time
from pathlib import Path

from tweakgraph.construct import Root
from tweakgraph.library import Bucket
from tweakgraph.render import render_all

_WIDTH: int = 500
_ROUNDS: int = 20


def _wide_tree(width: int) -> Root:
    root = Root()
    for i in range(width):
        Bucket(root, f"Bucket{i:04d}")
    return root


def bench_link_throughput(width: int = _WIDTH, rounds: int = _ROUNDS) -> dict[str, object]:
    """Benchmark one tag tweak linked across ``width`` buckets, ``rounds`` times.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    root = _wide_tree(width)
    tweak = Bucket.tag("Team", "bench")

    start = time.perf_counter()
    for _ in range(rounds):
        root.link([tweak])
    total = time.perf_counter() - start

    applied = width * rounds
    result: dict[str, object] = {
        "operation": "link_collection_tweak",
        "iterations": applied,
        "total_seconds": round(total, 4),
        "ops_per_second": round(applied / total, 1) if total else 0.0,
        "avg_latency_ms": round(total / applied * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_render_throughput(width: int = _WIDTH, rounds: int = _ROUNDS) -> dict[str, object]:
    """Benchmark ``render_all`` over ``width`` buckets, ``rounds`` times.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    root = _wide_tree(width)

    start = time.perf_counter()
    for _ in range(rounds):
        render_all(root)
    total = time.perf_counter() - start

    rendered = width * rounds
    result: dict[str, object] = {
        "operation": "render_all_buckets",
        "iterations": rendered,
        "total_seconds": round(total, 4),
        "ops_per_second": round(rendered / total, 1) if total else 0.0,
        "avg_latency_ms": round(total / rendered * 1000, 4),
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
        (bench_link_throughput, "link_throughput_baseline.json"),
        (bench_render_throughput, "render_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
