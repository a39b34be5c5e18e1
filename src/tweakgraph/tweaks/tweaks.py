"""Tweaks: deferred mutations that apply to resources through linking.

Each tweak targets a single capability tag, normally a resource type, and
attaches to every node in a :meth:`~tweakgraph.construct.Construct.link`
traversal that advertises it.

Usage
-----
::

    from tweakgraph.tweaks import collection_tweak, scalar_tweak

    Resource(root, "Bucket", "S3::Bucket").link([
        scalar_tweak("S3::Bucket", "BucketName", "MyBucket"),
        collection_tweak("S3::Bucket", "Tags", {"Key": "CostCenter", "Value": "1234"}),
    ])
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from tweakgraph.construct.tree import Construct
from tweakgraph.errors import AlreadySetError, TypeMismatchError
from tweakgraph.properties.model import CollectionProperty, PropertyKind, ScalarProperty, expect_kind
from tweakgraph.resource.resource import Resource


def _expect_resource(target: Construct, tweak: object) -> Resource:
    if not isinstance(target, Resource):
        raise TypeMismatchError(repr(tweak), "Resource", str(target))
    return target


@dataclass(frozen=True)
class ScalarTweak:
    """Set a scalar property once.

    Raises (on attach)
    ------------------
    UnknownPropertyError
        The resource has no such property.
    TypeMismatchError
        The property is not a plain scalar.
    AlreadySetError
        The scalar already holds a value.
    """

    resource_type: str
    property_name: str
    value: Any

    @property
    def link_targets(self) -> tuple[str, ...]:
        return (self.resource_type,)

    def link_to(self, target: Construct) -> None:
        resource = _expect_resource(target, self)
        prop = expect_kind(
            resource.property(self.property_name),
            PropertyKind.SCALAR,
            f"{self!r} on {resource}",
        )
        assert isinstance(prop, ScalarProperty)
        if prop.has_value:
            raise AlreadySetError(self.resource_type, self.property_name, resource.path)
        prop.set(self.value)


@dataclass(frozen=True)
class CollectionTweak:
    """Append a value to a collection property; repeated application adds again."""

    resource_type: str
    collection: str
    value: Any

    @property
    def link_targets(self) -> tuple[str, ...]:
        return (self.resource_type,)

    def link_to(self, target: Construct) -> None:
        resource = _expect_resource(target, self)
        prop = expect_kind(
            resource.property(self.collection),
            PropertyKind.COLLECTION,
            f"{self!r} on {resource}",
        )
        assert isinstance(prop, CollectionProperty)
        prop.add(self.value)


@dataclass(frozen=True)
class LinkingTweak:
    """Run ``register(resource)`` on every matching resource.

    ``register`` typically calls ``resource.make_linkable_to(...)`` so the
    resource reacts to a capability it did not declare itself.
    """

    resource_type: str
    register: Callable[[Any], None]

    @property
    def link_targets(self) -> tuple[str, ...]:
        return (self.resource_type,)

    def link_to(self, target: Construct) -> None:
        self.register(_expect_resource(target, self))


Tweak = Union[ScalarTweak, CollectionTweak, LinkingTweak]


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def scalar_tweak(resource_type: str, property_name: str, value: Any) -> ScalarTweak:
    """Return a tweak that sets ``property_name`` to ``value``."""
    return ScalarTweak(resource_type, property_name, value)


def collection_tweak(resource_type: str, collection: str, value: Any) -> CollectionTweak:
    """Return a tweak that appends ``value`` to ``collection``."""
    return CollectionTweak(resource_type, collection, value)


def linking_tweak(resource_type: str, register: Callable[[Any], None]) -> LinkingTweak:
    """Return a tweak that hands each matching resource to ``register``."""
    return LinkingTweak(resource_type, register)
