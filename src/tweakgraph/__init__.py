"""tweakgraph: construct trees, capability-matched tweaks and deterministic rendering.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import tweakgraph as tg

    class Queue(tg.Resource):
        def __init__(self, scope, id, linkables=None):
            super().__init__(scope, id, "AWS::SQS::Queue")
            self.make_linkable_as("AWS::SQS::Queue")
            self.add_property("QueueName", tg.ScalarProperty())
            self.link(linkables)

    root = tg.Root()
    Queue(root, "Jobs", [tg.scalar_tweak("AWS::SQS::Queue", "QueueName", "jobs")])

    tg.render_all(root)
    # {'Jobs': {'type': 'AWS::SQS::Queue', 'properties': {'QueueName': 'jobs'}}}

    tg.__version__
    '0.1.0'
"""
from __future__ import annotations

from tweakgraph.config import LinkPolicy, Settings
from tweakgraph.construct import Construct, FloatingScope, Linkable, Root, floating, matches, try_link
from tweakgraph.errors import (
    AlreadyLinkedError,
    AlreadySetError,
    DuplicateIdError,
    DuplicateLogicalIdError,
    DuplicatePropertyError,
    InvalidIdentityError,
    NotReparentableError,
    ReparentConflictError,
    TweakGraphError,
    TypeMismatchError,
    UnknownPropertyError,
    UnmatchedLinkableError,
)
from tweakgraph.properties import (
    UNSET,
    CollectionProperty,
    DerivedProperty,
    LinkRelationship,
    Property,
    PropertyKind,
    ScalarProperty,
)
from tweakgraph.render import find_all, render_all
from tweakgraph.resource import Resource
from tweakgraph.tweaks import (
    CollectionTweak,
    LinkingTweak,
    ScalarTweak,
    collection_tweak,
    linking_tweak,
    scalar_tweak,
)

__version__: str = "0.1.0"


def render(scope: Construct, fmt: str = "json") -> str:
    """Render every resource under ``scope`` as JSON or YAML text.

    Parameters
    ----------
    scope:
        Usually the tree's :class:`Root`.
    fmt:
        ``"json"`` (default) or ``"yaml"``.

    Raises
    ------
    DuplicateLogicalIdError
        If two resources render under the same logical id.
    ValueError
        If ``fmt`` is not a supported format.
    """
    from tweakgraph.render.serializer import DocumentSerializer

    return DocumentSerializer().render(scope, fmt)


__all__ = [
    "__version__",
    # Tree
    "Construct",
    "Root",
    "FloatingScope",
    "floating",
    "Linkable",
    "matches",
    "try_link",
    # Properties
    "UNSET",
    "Property",
    "PropertyKind",
    "ScalarProperty",
    "CollectionProperty",
    "DerivedProperty",
    "LinkRelationship",
    # Resources and tweaks
    "Resource",
    "ScalarTweak",
    "CollectionTweak",
    "LinkingTweak",
    "scalar_tweak",
    "collection_tweak",
    "linking_tweak",
    # Rendering
    "find_all",
    "render_all",
    "render",
    # Configuration
    "Settings",
    "LinkPolicy",
    # Errors
    "TweakGraphError",
    "DuplicateIdError",
    "InvalidIdentityError",
    "ReparentConflictError",
    "NotReparentableError",
    "UnknownPropertyError",
    "DuplicatePropertyError",
    "TypeMismatchError",
    "AlreadySetError",
    "AlreadyLinkedError",
    "UnmatchedLinkableError",
    "DuplicateLogicalIdError",
]
