"""Shared test fixtures for tweakgraph.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from tweakgraph.config import LinkPolicy, Settings
from tweakgraph.construct import FloatingScope, Root, floating


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "tweakgraph"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def root() -> Root:
    return Root()


@pytest.fixture()
def strict_root() -> Root:
    return Root(Settings(link_policy=LinkPolicy.STRICT))


@pytest.fixture()
def floating_scope() -> FloatingScope:
    return floating()
