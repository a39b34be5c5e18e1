"""Structural tests for the tweakgraph benchmark modules."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_app_latency")


def test_bench_throughput_importable() -> None:
    """Verify bench_throughput module can be imported."""
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_link_throughput")
    assert hasattr(mod, "bench_render_throughput")


def test_app_latency_returns_expected_keys() -> None:
    from bench_latency import bench_app_latency

    result = bench_app_latency("constructor-props", iterations=20)
    assert result["operation"] == "build_render_constructor-props"
    assert result["iterations"] == 20
    assert "p50_ms" in result
    assert "p95_ms" in result


def test_link_throughput_returns_expected_keys() -> None:
    from bench_throughput import bench_link_throughput

    result = bench_link_throughput(width=10, rounds=2)
    assert result["iterations"] == 20
    assert "ops_per_second" in result
    assert "avg_latency_ms" in result


def test_render_throughput_returns_expected_keys() -> None:
    from bench_throughput import bench_render_throughput

    result = bench_render_throughput(width=10, rounds=2)
    assert result["operation"] == "render_all_buckets"
    assert "ops_per_second" in result
