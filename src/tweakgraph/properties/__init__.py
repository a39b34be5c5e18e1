"""Property model.

Exports the observable base, the ``UNSET`` sentinel and every property
variant.
"""
from __future__ import annotations

from tweakgraph.properties.model import (
    CollectionProperty,
    DerivedProperty,
    LinkRelationship,
    Property,
    PropertyKind,
    ScalarProperty,
    expect_kind,
)
from tweakgraph.properties.observable import UNSET, Observable, SupportsObservers, is_unset

__all__ = [
    "UNSET",
    "is_unset",
    "Observable",
    "SupportsObservers",
    "Property",
    "PropertyKind",
    "ScalarProperty",
    "CollectionProperty",
    "DerivedProperty",
    "LinkRelationship",
    "expect_kind",
]
