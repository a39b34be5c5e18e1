"""Demo applications used by the ``check`` and ``render`` commands."""
from __future__ import annotations

from tweakgraph.demo.apps import APPS, DemoApp, fancy_bucket

__all__ = ["APPS", "DemoApp", "fancy_bucket"]
