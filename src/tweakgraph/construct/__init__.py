"""Construct tree and linkable protocol.

Exports the tree node types, the floating scope marker and the helpers
that match linkables against nodes.
"""
from __future__ import annotations

from tweakgraph.construct.linkable import Linkable, LinkHandler, matches, try_link
from tweakgraph.construct.trace import CreationTrace
from tweakgraph.construct.tree import Construct, FloatingScope, Root, floating

__all__ = [
    "Construct",
    "Root",
    "FloatingScope",
    "floating",
    "CreationTrace",
    "Linkable",
    "LinkHandler",
    "matches",
    "try_link",
]
