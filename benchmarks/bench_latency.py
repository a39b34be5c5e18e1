"""Benchmark: build-and-render latency of the demo apps (p50/p95/mean).

Each iteration builds a fresh tree for one demo app, runs its link
traversals and renders it to a document.
"""
from __future__ import annotations

import json
import time
from pathlib import Path

from tweakgraph.demo import APPS
from tweakgraph.render import render_all

_WARMUP: int = 100
_ITERATIONS: int = 3_000


def bench_app_latency(app_name: str = "floating-policy", iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark build + render latency of one demo app.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    build = APPS[app_name].build

    for _ in range(min(_WARMUP, iterations)):
        render_all(build(None))

    latencies_ms: list[float] = []
    for _ in range(iterations):
        t0 = time.perf_counter()
        render_all(build(None))
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": f"build_render_{app_name}",
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1) if total else 0.0,
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


if __name__ == "__main__":
    results = [bench_app_latency(name) for name in APPS]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
