"""Resource nodes and value rendering."""
from __future__ import annotations

from tweakgraph.resource.resource import Reference, Renderable, Resource, is_renderable, render_value

__all__ = ["Resource", "Reference", "Renderable", "is_renderable", "render_value"]
