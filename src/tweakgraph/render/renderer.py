"""Collect resources from a tree and merge them into one document."""
from __future__ import annotations

import logging
from collections import deque
from typing import Any

from tweakgraph.construct.tree import Construct
from tweakgraph.errors import DuplicateLogicalIdError
from tweakgraph.resource.resource import Resource

logger = logging.getLogger(__name__)


def find_all(scope: Construct) -> list[Resource]:
    """Return every resource under ``scope`` (inclusive), breadth-first."""
    found: list[Resource] = []
    queue: deque[Construct] = deque([scope])
    while queue:
        node = queue.popleft()
        if isinstance(node, Resource):
            found.append(node)
        queue.extend(node.children.values())
    return found


def render_all(scope: Construct) -> dict[str, Any]:
    """Render every resource under ``scope`` into a single document.

    Resources are merged in order of their ``/``-joined paths, so the
    result does not depend on child insertion order.

    Raises
    ------
    DuplicateLogicalIdError
        If two resources render under the same logical id.
    """
    resources = sorted(find_all(scope), key=lambda r: "/".join(r.path))
    document: dict[str, Any] = {}
    owners: dict[str, tuple[str, ...]] = {}
    for resource in resources:
        for logical_id, body in resource.render().items():
            if logical_id in document:
                raise DuplicateLogicalIdError(logical_id, owners[logical_id], resource.path)
            document[logical_id] = body
            owners[logical_id] = resource.path
    logger.debug("Rendered %d resource(s) under %s", len(document), scope)
    return document
