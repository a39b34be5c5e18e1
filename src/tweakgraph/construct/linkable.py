"""Capability-based matching between linkables and construct nodes.

A node *advertises* capability tags (``Construct.advertises``).  A linkable
*targets* capability tags (``link_targets``).  The two attach when the sets
intersect; the linkable's ``link_to`` is then called with the node and is
responsible for finding and mutating whatever it needs on it.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tweakgraph.construct.tree import Construct

logger = logging.getLogger(__name__)


@runtime_checkable
class Linkable(Protocol):
    """Anything that can attach itself to a matching construct.

    Constructs, tweaks and free-standing values such as
    :class:`~tweakgraph.library.iam.PolicyStatement` all satisfy this
    protocol.
    """

    @property
    def link_targets(self) -> Collection[str]:
        """Capability tags this object wants to attach to."""
        ...  # pragma: no cover

    def link_to(self, target: "Construct") -> None:
        """Attach to ``target``; only called when the tags intersect."""
        ...  # pragma: no cover


@dataclass(frozen=True)
class LinkHandler:
    """A callback registered with ``Construct.make_linkable_to``."""

    tags: tuple[str, ...]
    callback: Callable[[Any], None]

    def accepts(self, target: "Construct") -> bool:
        return not target.advertises.isdisjoint(self.tags)


def matches(linkable: Linkable, node: "Construct") -> bool:
    """Return ``True`` if ``linkable`` targets any tag ``node`` advertises."""
    return not node.advertises.isdisjoint(linkable.link_targets)


def try_link(linkable: Linkable, node: "Construct") -> bool:
    """Attach ``linkable`` to ``node`` if their tags intersect.

    Returns
    -------
    bool
        Whether ``link_to`` was called.  For disjoint tag sets the node is
        left untouched.
    """
    result = matches(linkable, node)
    if result:
        linkable.link_to(node)
    logger.debug(
        "%s (%s?) -> %s (%s!): %s",
        linkable,
        ",".join(linkable.link_targets),
        node,
        ",".join(sorted(node.advertises)),
        result,
    )
    return result
