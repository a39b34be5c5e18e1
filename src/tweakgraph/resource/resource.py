"""Resource: a construct that owns named properties and renders itself.

A resource's logical id is the concatenation of the ids on its path, so
``Root -> Bucket -> Policy`` renders under ``"BucketPolicy"``.  Rendering
produces ``{logical_id: {"type": ..., "properties": {...}}}`` with the
properties in declaration order.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from tweakgraph.construct.tree import Construct
from tweakgraph.errors import DuplicatePropertyError, UnknownPropertyError
from tweakgraph.properties.model import LinkRelationship, Property
from tweakgraph.properties.observable import UNSET

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """A value that knows how to turn itself into document data."""

    def render(self) -> Any: ...


def is_renderable(value: object) -> bool:
    """Return ``True`` for instances exposing a ``render`` method."""
    return not isinstance(value, type) and isinstance(value, Renderable)


def render_value(value: Any) -> Any:
    """Render one property value.

    :data:`~tweakgraph.properties.UNSET` becomes ``None``, renderables are
    asked to render themselves, mappings and sequences are rendered item by
    item, everything else passes through unchanged.
    """
    if value is UNSET:
        return None
    if is_renderable(value):
        return value.render()
    if isinstance(value, dict):
        return {key: render_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [render_value(item) for item in value]
    return value


@dataclass(frozen=True)
class Reference:
    """A pointer to a resource, resolved to its logical id when rendered.

    The id is read at render time, so a reference taken before its target
    was adopted out of a floating scope still names the final location.
    """

    target: "Resource"

    def render(self) -> dict[str, str]:
        return {"Ref": self.target.logical_id}


class Resource(Construct):
    """A construct that appears in the rendered document.

    Parameters
    ----------
    scope:
        Owning construct.
    id:
        Id unique within ``scope``.
    resource_type:
        Type tag written to the ``type`` field of the rendered entry.
    """

    def __init__(self, scope: Construct, id: str, resource_type: str) -> None:  # noqa: A002
        super().__init__(scope, id)
        self.resource_type = resource_type
        self._properties: dict[str, Property] = {}
        self._links: list[LinkRelationship] = []

    @property
    def logical_id(self) -> str:
        return "".join(self.path)

    @property
    def ref(self) -> Reference:
        """A reference to this resource for embedding in other properties."""
        return Reference(self)

    @property
    def properties(self) -> Mapping[str, Property]:
        return MappingProxyType(self._properties)

    @property
    def links(self) -> tuple[LinkRelationship, ...]:
        return tuple(self._links)

    # ------------------------------------------------------------------
    # Construction API
    # ------------------------------------------------------------------

    def add_property(self, name: str, prop: Property) -> Property:
        """Declare property ``name``.

        Raises
        ------
        DuplicatePropertyError
            If ``name`` is already declared on this resource.
        """
        if name in self._properties:
            raise DuplicatePropertyError(name, self.path)
        self._properties[name] = prop
        logger.debug("%s declared %s property %r", self, prop.kind.value, name)
        return prop

    def add_link_relationship(
        self,
        targets: Iterable[str],
        initial_value: Construct | None = None,
        name: str | None = None,
    ) -> LinkRelationship:
        """Declare a pending link to a node advertising any of ``targets``.

        When ``name`` is given the relationship is also declared as a
        property and renders as a reference to the linked node.
        """
        link = LinkRelationship(targets, initial_value)
        if name is not None:
            self.add_property(name, link)
        self._links.append(link)
        return link

    # ------------------------------------------------------------------
    # Linking
    # ------------------------------------------------------------------

    @property
    def link_targets(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for link in self._links:
            seen.update(dict.fromkeys(link.targets))
        seen.update(dict.fromkeys(super().link_targets))
        return tuple(seen)

    def link_to(self, target: Construct) -> None:
        """Fill every pending relationship ``target`` satisfies, then run
        the dynamic link handlers.
        """
        advertised = target.advertises
        for link in self._links:
            if not advertised.isdisjoint(link.targets):
                link.set(target)
        super().link_to(target)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> dict[str, dict[str, Any]]:
        return {
            self.logical_id: {
                "type": self.resource_type,
                "properties": {
                    name: prop.rendered() for name, prop in self._properties.items()
                },
            }
        }

    # Defined last: inside the class body this name shadows the builtin.
    def property(self, name: str) -> Property:
        """Return the property declared as ``name``.

        Raises
        ------
        UnknownPropertyError
            If no such property exists.
        """
        try:
            return self._properties[name]
        except KeyError:
            raise UnknownPropertyError(name, self.path) from None
