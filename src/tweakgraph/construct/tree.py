"""The construct tree: identity, ownership, reparenting and link traversal.

Every non-root node is owned by exactly one parent and keyed by an id that
is unique among its siblings.  A node created under a
:class:`FloatingScope` is *floating*: the first :meth:`Construct.link`
traversal that encounters it adopts it under the node being visited.
That adoption is the only reparenting the tree allows.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from tweakgraph.config import LinkPolicy, Settings
from tweakgraph.construct.linkable import Linkable, LinkHandler, try_link
from tweakgraph.construct.trace import CreationTrace
from tweakgraph.errors import (
    DuplicateIdError,
    InvalidIdentityError,
    NotReparentableError,
    ReparentConflictError,
    UnmatchedLinkableError,
)

logger = logging.getLogger(__name__)


class Construct:
    """A node in the construct tree.

    Parameters
    ----------
    scope:
        The owning parent, or ``None`` for a root.
    id:
        Identifier unique among ``scope``'s children.  Must be ``None``
        exactly when ``scope`` is ``None``.

    Raises
    ------
    InvalidIdentityError
        If exactly one of ``scope`` and ``id`` is absent.
    DuplicateIdError
        If ``scope`` already owns a child called ``id``.
    """

    def __init__(self, scope: "Construct | None", id: str | None) -> None:  # noqa: A002
        scope_given = scope is not None
        id_given = bool(id)
        if scope_given != id_given:
            raise InvalidIdentityError(scope_given, id_given)

        self._scope = scope
        self.id = id
        self._children: dict[str, Construct] = {}
        self._advertises: dict[str, None] = {}
        self._link_handlers: list[LinkHandler] = []
        self.creation_trace = CreationTrace.capture()

        if scope is not None and id:
            if id in scope._children:
                raise DuplicateIdError(id, scope.path)
            scope._children[id] = self

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def scope(self) -> "Construct | None":
        return self._scope

    @property
    def children(self) -> Mapping[str, "Construct"]:
        """Read-only view of the children, in insertion order."""
        return MappingProxyType(self._children)

    @property
    def path(self) -> tuple[str, ...]:
        """Ids from the root (exclusive) down to this node."""
        parts: list[str] = []
        node: Construct | None = self
        while node is not None and node._scope is not None and node.id:
            parts.append(node.id)
            node = node._scope
        return tuple(reversed(parts))

    @property
    def root(self) -> "Construct":
        node = self
        while node._scope is not None:
            node = node._scope
        return node

    @property
    def is_floating(self) -> bool:
        return isinstance(self._scope, FloatingScope)

    @property
    def settings(self) -> Settings:
        root = self.root
        return root._settings if isinstance(root, Root) else Settings()

    def walk(self) -> Iterator["Construct"]:
        """Yield this node and its descendants, depth-first, pre-order."""
        stack: list[Construct] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node._children.values())))

    def __str__(self) -> str:
        return f"{type(self).__name__}@{'/'.join(self.path)}"

    __repr__ = __str__

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def advertises(self) -> frozenset[str]:
        """Capability tags other linkables may attach to."""
        return frozenset(self._advertises)

    @property
    def link_targets(self) -> tuple[str, ...]:
        """Capability tags this node reacts to when used as a linkable."""
        seen: dict[str, None] = {}
        for handler in self._link_handlers:
            seen.update(dict.fromkeys(handler.tags))
        return tuple(seen)

    @property
    def link_handlers(self) -> dict[str, list[Callable[[Any], None]]]:
        """Tag to callbacks mapping, each list in registration order."""
        result: dict[str, list[Callable[[Any], None]]] = {}
        for handler in self._link_handlers:
            for tag in handler.tags:
                result.setdefault(tag, []).append(handler.callback)
        return result

    def make_linkable_as(self, *tags: str) -> None:
        """Advertise ``tags`` to linkables."""
        self._advertises.update(dict.fromkeys(tags))

    def make_linkable_to(self, tags: Iterable[str], callback: Callable[[Any], None]) -> None:
        """Call ``callback(target)`` whenever this node is linked to a
        target advertising any of ``tags``.
        """
        handler = LinkHandler(tags=tuple(tags), callback=callback)
        self._link_handlers.append(handler)
        logger.debug("%s linkable to %s", self, ",".join(handler.tags))

    def link_to(self, target: "Construct") -> None:
        for handler in list(self._link_handlers):
            if handler.accepts(target):
                handler.callback(target)

    # ------------------------------------------------------------------
    # Reparenting and linking
    # ------------------------------------------------------------------

    def reparent(self, new_parent: "Construct") -> None:
        """Move a floating node under ``new_parent``.

        The destination is checked before anything is mutated, so a failed
        reparent leaves the node where it was.

        Raises
        ------
        NotReparentableError
            If this node is a root, is not floating, or ``new_parent`` is
            inside this node's own subtree.
        ReparentConflictError
            If ``new_parent`` already has a child with this node's id.
        """
        old_parent = self._scope
        if old_parent is None or not self.id:
            raise NotReparentableError(str(self), "it is a root")
        if not isinstance(old_parent, FloatingScope):
            raise NotReparentableError(str(self), f"its scope {old_parent} is not floating")
        ancestor: Construct | None = new_parent
        while ancestor is not None:
            if ancestor is self:
                raise NotReparentableError(str(self), f"{new_parent} is inside its own subtree")
            ancestor = ancestor._scope
        if self.id in new_parent._children:
            raise ReparentConflictError(self.id, new_parent.path)

        del old_parent._children[self.id]
        self._scope = new_parent
        new_parent._children[self.id] = self
        logger.debug("Reparented %s (was floating)", self)

    def link(
        self,
        linkables: Iterable[Linkable | None] | None = None,
        *,
        policy: LinkPolicy | None = None,
    ) -> None:
        """Offer every linkable to every node of this subtree, top-down.

        ``None`` entries are skipped.  A floating construct in the list is
        first adopted by the node being visited.  Each linkable is then
        tried against that node; the traversal continues into all children
        with the same list, depth-first in child insertion order.

        Parameters
        ----------
        linkables:
            Objects to attach.
        policy:
            Overrides the root's :class:`~tweakgraph.config.Settings`
            policy for unmatched linkables.

        Raises
        ------
        UnmatchedLinkableError
            Under :attr:`LinkPolicy.STRICT`, if a linkable matched nothing.
        """
        items = [item for item in linkables or () if item is not None]
        if not items:
            return

        matched: set[int] = set()
        stack: list[Construct] = [self]
        while stack:
            node = stack.pop()
            for item in items:
                if isinstance(item, Construct) and item.is_floating:
                    item.reparent(node)
                    matched.add(id(item))
                if try_link(item, node):
                    matched.add(id(item))
            stack.extend(reversed(list(node._children.values())))

        unmatched = [str(item) for item in items if id(item) not in matched]
        if not unmatched:
            return
        effective = policy or self.settings.link_policy
        if effective is LinkPolicy.STRICT:
            raise UnmatchedLinkableError(unmatched, self.path)
        for text in unmatched:
            logger.debug("%s found no target under %s; dropped", text, self)


class Root(Construct):
    """A tree anchor: no scope, no id.

    Parameters
    ----------
    settings:
        Session settings consulted by every node in this tree.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__(None, None)
        self._settings = settings or Settings()

    @classmethod
    def build(cls, block: Callable[["Root"], Any], settings: Settings | None = None) -> "Root":
        """Create a root, pass it to ``block`` and return it."""
        root = cls(settings)
        block(root)
        return root

    def __str__(self) -> str:
        return f"{type(self).__name__}@"

    __repr__ = __str__


class FloatingScope(Root):
    """Marks nodes that have not yet been placed in a concrete tree.

    Create one per declaration site with :func:`floating` and pass it as
    the ``scope`` of the node to be adopted later.
    """


def floating(settings: Settings | None = None) -> FloatingScope:
    """Return a fresh floating scope."""
    return FloatingScope(settings)
