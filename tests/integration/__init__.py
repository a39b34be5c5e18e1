"""Integration tests.

These exercise whole demo applications and the CLI end to end. Run only
the fast unit tests with ``pytest tests/unit/``.
"""
from __future__ import annotations
