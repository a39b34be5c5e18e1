"""Text serialization of rendered documents.

Usage
-----
::

    from tweakgraph.render.serializer import DocumentSerializer

    serializer = DocumentSerializer()
    json_text = serializer.to_json(render_all(root))
    yaml_text = serializer.render(root, "yaml")
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from tweakgraph.construct.tree import Construct
from tweakgraph.render.renderer import render_all

FORMATS: tuple[str, ...] = ("json", "yaml")


class DocumentSerializer:
    """Turns a rendered document into JSON or YAML text.

    Key order is preserved in both formats, so two equal documents built
    the same way serialize to identical text.
    """

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, document: dict[str, Any], indent: int = 2) -> str:
        """Serialize ``document`` to a JSON string."""
        return json.dumps(document, indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> dict[str, Any]:
        data: dict[str, Any] = json.loads(text)
        return data

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, document: dict[str, Any]) -> str:
        """Serialize ``document`` to a YAML string."""
        return yaml.safe_dump(
            document, default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    def from_yaml(self, text: str) -> dict[str, Any]:
        data: dict[str, Any] = yaml.safe_load(text)
        return data

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------

    def render(self, scope: Construct, fmt: str = "json") -> str:
        """Render every resource under ``scope`` and serialize as ``fmt``.

        Raises
        ------
        ValueError
            If ``fmt`` is not ``"json"`` or ``"yaml"``.
        """
        document = render_all(scope)
        if fmt == "json":
            return self.to_json(document)
        if fmt == "yaml":
            return self.to_yaml(document)
        raise ValueError(f"Unknown output format {fmt!r}; expected one of: {', '.join(FORMATS)}")
