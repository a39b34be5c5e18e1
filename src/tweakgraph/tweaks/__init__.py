"""Tweak variants and their factory functions."""
from __future__ import annotations

from tweakgraph.tweaks.tweaks import (
    CollectionTweak,
    LinkingTweak,
    ScalarTweak,
    Tweak,
    collection_tweak,
    linking_tweak,
    scalar_tweak,
)

__all__ = [
    "Tweak",
    "ScalarTweak",
    "CollectionTweak",
    "LinkingTweak",
    "scalar_tweak",
    "collection_tweak",
    "linking_tweak",
]
