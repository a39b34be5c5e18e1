"""Resource discovery, document rendering and serialization."""
from __future__ import annotations

from tweakgraph.render.renderer import find_all, render_all
from tweakgraph.render.serializer import FORMATS, DocumentSerializer

__all__ = ["find_all", "render_all", "DocumentSerializer", "FORMATS"]
