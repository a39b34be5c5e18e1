"""Runtime settings for tweakgraph.

Settings are explicit values attached to a :class:`~tweakgraph.construct.Root`
(or passed straight to :meth:`~tweakgraph.construct.Construct.link`);
there is no module-wide mutable configuration.

Environment variables
---------------------
``TWEAKGRAPH_LINK_POLICY``
    ``permissive`` (default) or ``strict``.
``TWEAKGRAPH_DEBUG``
    ``1``, ``true``, ``yes`` or ``on`` enables debug logging.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

LINK_POLICY_ENV = "TWEAKGRAPH_LINK_POLICY"
DEBUG_ENV = "TWEAKGRAPH_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class LinkPolicy(Enum):
    """What to do with linkables that match no node during a traversal.

    PERMISSIVE
        Drop them silently (a debug record is still logged).
    STRICT
        Raise :class:`~tweakgraph.errors.UnmatchedLinkableError` once the
        traversal is complete.
    """

    PERMISSIVE = "permissive"
    STRICT = "strict"

    @classmethod
    def parse(cls, text: str) -> "LinkPolicy":
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown link policy {text!r}; expected one of: {choices}"
            ) from None


@dataclass(frozen=True)
class Settings:
    """Behavioural switches for a construction session.

    Parameters
    ----------
    link_policy:
        Policy applied to unmatched linkables.
    debug:
        Whether :func:`configure_logging` should enable debug output.
    """

    link_policy: LinkPolicy = LinkPolicy.PERMISSIVE
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        policy_text = env.get(LINK_POLICY_ENV)
        policy = LinkPolicy.parse(policy_text) if policy_text else LinkPolicy.PERMISSIVE
        debug = env.get(DEBUG_ENV, "").strip().lower() in _TRUTHY
        return cls(link_policy=policy, debug=debug)


def configure_logging(settings: Settings) -> None:
    """Route ``tweakgraph`` debug records to a Rich handler on stderr.

    Does nothing unless ``settings.debug`` is set.  Calling it twice does
    not install a second handler.
    """
    if not settings.debug:
        return

    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger("tweakgraph")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
