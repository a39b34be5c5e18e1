"""Registry of resource types.

Resource definitions register their class under the resource type tag they
render as.  Third-party packages contribute more by declaring entry-points
in their own ``pyproject.toml`` under the ``tweakgraph.resources`` group.

Example
-------
Register a resource class with the decorator::

    from tweakgraph.plugins.registry import resource_types
    from tweakgraph.resource import Resource

    @resource_types.register("AWS::SQS::Queue")
    class Queue(Resource):
        ...

Load all installed resource packages via entry-points::

    resource_types.load_entrypoints()

Look a class up by type::

    cls = resource_types.get("AWS::SQS::Queue")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import TypeVar

from tweakgraph.errors import ResourceTypeAlreadyRegisteredError, ResourceTypeNotFoundError
from tweakgraph.resource.resource import Resource

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "tweakgraph.resources"

R = TypeVar("R", bound=type[Resource])


class ResourceTypeRegistry:
    """Maps resource type tags to :class:`~tweakgraph.resource.Resource`
    subclasses.

    Parameters
    ----------
    name:
        A human-readable name for this registry, used in log records.
    """

    def __init__(self, name: str = "resource-types") -> None:
        self._name = name
        self._types: dict[str, type[Resource]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, resource_type: str) -> Callable[[R], R]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        ResourceTypeAlreadyRegisteredError
            If ``resource_type`` is already in use.
        TypeError
            If the decorated class does not subclass ``Resource``.
        """

        def decorator(cls: R) -> R:
            self.register_class(resource_type, cls)
            return cls

        return decorator

    def register_class(self, resource_type: str, cls: type[Resource]) -> None:
        """Register ``cls`` under ``resource_type`` without decorator syntax."""
        if resource_type in self._types:
            raise ResourceTypeAlreadyRegisteredError(resource_type)
        if not (isinstance(cls, type) and issubclass(cls, Resource)):
            raise TypeError(
                f"Cannot register {cls!r} under {resource_type!r}: "
                "it must be a subclass of Resource."
            )
        self._types[resource_type] = cls
        logger.debug(
            "Registered resource type %r -> %s in registry %r",
            resource_type,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, resource_type: str) -> None:
        """Remove ``resource_type`` from the registry.

        Raises
        ------
        ResourceTypeNotFoundError
            If ``resource_type`` is not registered.
        """
        if resource_type not in self._types:
            raise ResourceTypeNotFoundError(resource_type, self.list_types())
        del self._types[resource_type]
        logger.debug("Deregistered resource type %r from registry %r", resource_type, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, resource_type: str) -> type[Resource]:
        """Return the class registered under ``resource_type``.

        Raises
        ------
        ResourceTypeNotFoundError
            If nothing is registered under ``resource_type``.
        """
        try:
            return self._types[resource_type]
        except KeyError:
            raise ResourceTypeNotFoundError(resource_type, self.list_types()) from None

    def list_types(self) -> list[str]:
        """Return all registered type tags in alphabetical order."""
        return sorted(self._types)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"ResourceTypeRegistry(name={self._name!r}, types={self.list_types()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Register resource classes declared as package entry-points.

        Each entry-point name is the resource type tag; its value is the
        class.  Types that are already registered are skipped, so repeated
        calls are idempotent.  An entry-point that fails to import or is
        not a resource class is logged and skipped.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."tweakgraph.resources"]
            "AWS::SQS::Queue" = "my_package.sqs:Queue"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._types:
                logger.debug(
                    "Resource type %r from entry-points is already in %r; not loading it.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Could not import resource type %r from entry-point group %r.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (ResourceTypeAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r is not a usable Resource class "
                    "for registry %r; ignoring it.",
                    ep.name,
                    self._name,
                )


resource_types = ResourceTypeRegistry()
