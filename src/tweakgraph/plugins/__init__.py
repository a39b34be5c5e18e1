"""Resource type registry and entry-point discovery."""
from __future__ import annotations

from tweakgraph.plugins.registry import ENTRYPOINT_GROUP, ResourceTypeRegistry, resource_types

__all__ = ["ResourceTypeRegistry", "resource_types", "ENTRYPOINT_GROUP"]
