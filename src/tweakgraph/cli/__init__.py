"""Command-line interface.

The click group lives in :mod:`tweakgraph.cli.main` and is installed as
the ``tweakgraph`` console script.
"""
from __future__ import annotations
