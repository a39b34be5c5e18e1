"""Error types raised by the construct tree, property model and renderer.

Every error is raised synchronously at the point of violation and carries
enough structured context (node path, property name, expected vs. actual
variant) to diagnose a misconfigured capability tag or a duplicate
identifier.  Nothing here is retried or recovered internally.
"""
from __future__ import annotations

from collections.abc import Iterable


def _fmt_path(path: Iterable[str]) -> str:
    joined = "/".join(path)
    return joined or "<root>"


class TweakGraphError(Exception):
    """Base class for every error raised by tweakgraph."""


# ---------------------------------------------------------------------------
# Construct tree
# ---------------------------------------------------------------------------


class DuplicateIdError(TweakGraphError):
    """Raised when a parent already owns a child with the requested id."""

    def __init__(self, child_id: str, parent_path: tuple[str, ...]) -> None:
        self.child_id = child_id
        self.parent_path = parent_path
        super().__init__(
            f"Duplicate child {child_id!r} under {_fmt_path(parent_path)!r}"
        )


class InvalidIdentityError(TweakGraphError):
    """Raised when exactly one of ``scope`` and ``id`` is absent."""

    def __init__(self, scope_given: bool, id_given: bool) -> None:
        self.scope_given = scope_given
        self.id_given = id_given
        super().__init__(
            "Id must be empty only if scope is empty "
            f"(scope given: {scope_given}, id given: {id_given})"
        )


class NotReparentableError(TweakGraphError):
    """Raised when reparenting a node that is a root or is not floating."""

    def __init__(self, node: str, reason: str) -> None:
        self.node = node
        self.reason = reason
        super().__init__(f"Cannot reparent {node}: {reason}")


class ReparentConflictError(TweakGraphError):
    """Raised when the new parent already owns a child with the node's id."""

    def __init__(self, child_id: str, parent_path: tuple[str, ...]) -> None:
        self.child_id = child_id
        self.parent_path = parent_path
        super().__init__(
            f"New parent {_fmt_path(parent_path)!r} already has a child "
            f"with id {child_id!r}"
        )


# ---------------------------------------------------------------------------
# Properties and tweaks
# ---------------------------------------------------------------------------


class UnknownPropertyError(TweakGraphError, KeyError):
    """Raised when a resource has no property with the requested name."""

    def __init__(self, name: str, resource_path: tuple[str, ...]) -> None:
        self.property_name = name
        self.resource_path = resource_path
        super().__init__(
            f"Unknown property {name!r} on {_fmt_path(resource_path)!r}"
        )

    # KeyError.__str__ would quote the whole message.
    def __str__(self) -> str:
        return str(self.args[0])


class DuplicatePropertyError(TweakGraphError):
    """Raised when a resource declares the same property name twice."""

    def __init__(self, name: str, resource_path: tuple[str, ...]) -> None:
        self.property_name = name
        self.resource_path = resource_path
        super().__init__(
            f"Duplicate property {name!r} on {_fmt_path(resource_path)!r}"
        )


class TypeMismatchError(TweakGraphError, TypeError):
    """Raised when a property or node is not the variant a linkable expects."""

    def __init__(self, subject: str, expected: str, actual: str) -> None:
        self.subject = subject
        self.expected = expected
        self.actual = actual
        super().__init__(f"{subject}: expected {expected}, got {actual}")


class AlreadySetError(TweakGraphError):
    """Raised by a scalar tweak whose target property already holds a value."""

    def __init__(self, resource_type: str, name: str, resource_path: tuple[str, ...]) -> None:
        self.resource_type = resource_type
        self.property_name = name
        self.resource_path = resource_path
        super().__init__(
            f"{resource_type} {name} already has a value "
            f"(at {_fmt_path(resource_path)!r})"
        )


class AlreadyLinkedError(TweakGraphError):
    """Raised when a set-once link relationship is set a second time."""

    def __init__(self, current: str, attempted: str) -> None:
        self.current = current
        self.attempted = attempted
        super().__init__(
            f"Link already has a value: {current} (attempted to set {attempted})"
        )


class UnmatchedLinkableError(TweakGraphError):
    """Raised under the strict link policy when linkables matched no node."""

    def __init__(self, linkables: list[str], root_path: tuple[str, ...]) -> None:
        self.linkables = linkables
        self.root_path = root_path
        super().__init__(
            f"{len(linkables)} linkable(s) found no target under "
            f"{_fmt_path(root_path)!r}: " + ", ".join(linkables)
        )


# ---------------------------------------------------------------------------
# Rendering and registry
# ---------------------------------------------------------------------------


class DuplicateLogicalIdError(TweakGraphError):
    """Raised when two resources render under the same logical id."""

    def __init__(self, logical_id: str, first: tuple[str, ...], second: tuple[str, ...]) -> None:
        self.logical_id = logical_id
        self.first = first
        self.second = second
        super().__init__(
            f"Logical id {logical_id!r} is rendered by both "
            f"{_fmt_path(first)!r} and {_fmt_path(second)!r}"
        )


class ResourceTypeNotFoundError(TweakGraphError, KeyError):
    """Raised when a requested resource type is not in the registry."""

    def __init__(self, resource_type: str, available: list[str]) -> None:
        self.resource_type = resource_type
        self.available = available
        super().__init__(
            f"Resource type {resource_type!r} is not registered. "
            f"Available types: {', '.join(available) or '(none)'}. "
            "Check that the package is installed and its entry-points are declared."
        )

    def __str__(self) -> str:
        return str(self.args[0])


class ResourceTypeAlreadyRegisteredError(TweakGraphError, ValueError):
    """Raised when attempting to register a resource type twice."""

    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(
            f"Resource type {resource_type!r} is already registered. "
            "Deregister the existing entry first."
        )
