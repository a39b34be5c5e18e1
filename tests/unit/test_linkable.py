"""Unit tests for capability matching and the link traversal."""
from __future__ import annotations

import logging
from typing import Any

import pytest

from tweakgraph.config import LinkPolicy
from tweakgraph.construct import (
    Construct,
    FloatingScope,
    Linkable,
    LinkHandler,
    Root,
    matches,
    try_link,
)
from tweakgraph.errors import ReparentConflictError, UnmatchedLinkableError
from tweakgraph.tweaks import scalar_tweak


class Recorder:
    """A linkable that remembers every node it was attached to."""

    def __init__(self, *targets: str) -> None:
        self.link_targets = targets
        self.seen: list[tuple[str, ...]] = []

    def link_to(self, target: Construct) -> None:
        self.seen.append(target.path)

    def __repr__(self) -> str:
        return f"Recorder({', '.join(self.link_targets)})"


def _node(scope: Construct, id: str, *tags: str) -> Construct:  # noqa: A002
    node = Construct(scope, id)
    node.make_linkable_as(*tags)
    return node


# ===========================================================================
# Matching
# ===========================================================================


class TestMatching:
    def test_matches_on_shared_tag(self, root: Root) -> None:
        node = _node(root, "A", "x", "y")
        assert matches(Recorder("y", "z"), node)

    def test_no_match_on_disjoint_tags(self, root: Root) -> None:
        node = _node(root, "A", "x")
        assert not matches(Recorder("z"), node)

    def test_try_link_calls_link_to_on_match(self, root: Root) -> None:
        node = _node(root, "A", "x")
        rec = Recorder("x")
        assert try_link(rec, node) is True
        assert rec.seen == [("A",)]

    def test_try_link_skips_disjoint_node(self, root: Root) -> None:
        node = _node(root, "A", "x")
        rec = Recorder("z")
        assert try_link(rec, node) is False
        assert rec.seen == []

    def test_try_link_logs_attempt(self, root: Root, caplog: pytest.LogCaptureFixture) -> None:
        node = _node(root, "A", "x")
        with caplog.at_level(logging.DEBUG, logger="tweakgraph.construct.linkable"):
            try_link(Recorder("x"), node)
        assert "Construct@A" in caplog.text
        assert "True" in caplog.text

    def test_recorder_and_tweaks_satisfy_protocol(self) -> None:
        assert isinstance(Recorder("x"), Linkable)
        assert isinstance(scalar_tweak("T", "P", 1), Linkable)

    def test_advertises_accumulates_tags(self, root: Root) -> None:
        node = _node(root, "A", "x")
        node.make_linkable_as("y", "x")
        assert node.advertises == frozenset({"x", "y"})


# ===========================================================================
# Link handlers on constructs
# ===========================================================================


class TestLinkHandlers:
    def test_handler_runs_for_accepted_target(self, root: Root) -> None:
        target = _node(root, "Target", "bucket")
        source = Construct(root, "Source")
        received: list[Any] = []
        source.make_linkable_to(["bucket"], received.append)
        source.link_to(target)
        assert received == [target]

    def test_handler_ignores_other_targets(self, root: Root) -> None:
        target = _node(root, "Target", "queue")
        source = Construct(root, "Source")
        received: list[Any] = []
        source.make_linkable_to(["bucket"], received.append)
        source.link_to(target)
        assert received == []

    def test_link_targets_and_handler_map(self, root: Root) -> None:
        source = Construct(root, "Source")
        first = lambda _: None  # noqa: E731
        second = lambda _: None  # noqa: E731
        source.make_linkable_to(["a", "b"], first)
        source.make_linkable_to(["b"], second)
        assert source.link_targets == ("a", "b")
        assert source.link_handlers == {"a": [first], "b": [first, second]}

    def test_link_handler_accepts(self, root: Root) -> None:
        handler = LinkHandler(tags=("x",), callback=lambda _: None)
        assert handler.accepts(_node(root, "A", "x"))
        assert not handler.accepts(_node(root, "B", "y"))


# ===========================================================================
# Traversal
# ===========================================================================


class TestLinkTraversal:
    def test_visits_depth_first_in_insertion_order(self, root: Root) -> None:
        a = _node(root, "A", "t")
        _node(a, "A1", "t")
        _node(a, "A2", "t")
        _node(root, "B", "t")
        rec = Recorder("t")
        root.link([rec])
        assert rec.seen == [("A",), ("A", "A1"), ("A", "A2"), ("B",)]

    def test_every_matching_node_receives_the_linkable(self, root: Root) -> None:
        _node(root, "A", "t")
        _node(root, "B", "other")
        _node(root, "C", "t")
        rec = Recorder("t")
        root.link([rec])
        assert rec.seen == [("A",), ("C",)]

    def test_link_is_scoped_to_subtree(self, root: Root) -> None:
        a = _node(root, "A", "t")
        _node(a, "Inner", "t")
        _node(root, "B", "t")
        rec = Recorder("t")
        a.link([rec])
        assert rec.seen == [("A",), ("A", "Inner")]

    def test_none_entries_are_skipped(self, root: Root) -> None:
        _node(root, "A", "t")
        rec = Recorder("t")
        root.link([None, rec, None])
        assert rec.seen == [("A",)]

    def test_empty_or_missing_list_is_a_no_op(self, root: Root) -> None:
        root.link()
        root.link([])
        root.link([None])

    def test_linkables_apply_in_list_order_per_node(self, root: Root) -> None:
        node = _node(root, "A", "t")
        order: list[str] = []

        class Named(Recorder):
            def __init__(self, name: str) -> None:
                super().__init__("t")
                self.name = name

            def link_to(self, target: Construct) -> None:
                order.append(self.name)

        root.link([Named("first"), Named("second")])
        assert node.advertises == frozenset({"t"})
        assert order == ["first", "second"]


# ===========================================================================
# Floating adoption
# ===========================================================================


class TestFloatingAdoption:
    def test_floating_node_is_adopted_by_link_root(
        self, root: Root, floating_scope: FloatingScope
    ) -> None:
        parent = Construct(root, "Bucket")
        node = Construct(floating_scope, "Policy")
        parent.link([node])
        assert node.scope is parent
        assert node.path == ("Bucket", "Policy")

    def test_adopted_node_is_visited_in_same_traversal(
        self, root: Root, floating_scope: FloatingScope
    ) -> None:
        parent = Construct(root, "Bucket")
        _node(floating_scope, "Policy", "policy")
        rec = Recorder("policy")
        parent.link([floating_scope.children["Policy"], rec])
        assert rec.seen == [("Bucket", "Policy")]

    def test_conflicting_adoption_raises_and_keeps_node_floating(
        self, root: Root, floating_scope: FloatingScope
    ) -> None:
        parent = Construct(root, "Bucket")
        Construct(parent, "Policy")
        node = Construct(floating_scope, "Policy")
        with pytest.raises(ReparentConflictError):
            parent.link([node])
        assert node.is_floating
        assert floating_scope.children["Policy"] is node

    def test_second_link_elsewhere_leaves_node_in_place(
        self, root: Root, floating_scope: FloatingScope
    ) -> None:
        first = Construct(root, "First")
        second = Construct(root, "Second")
        node = Construct(floating_scope, "Policy")
        first.link([node])
        second.link([node])
        assert node.scope is first
        assert "Policy" not in second.children


# ===========================================================================
# Unmatched linkables
# ===========================================================================


class TestUnmatchedPolicy:
    def test_permissive_drops_and_logs(
        self, root: Root, caplog: pytest.LogCaptureFixture
    ) -> None:
        _node(root, "A", "t")
        with caplog.at_level(logging.DEBUG, logger="tweakgraph.construct.tree"):
            root.link([Recorder("nothing")])
        assert "found no target" in caplog.text

    def test_strict_root_raises(self, strict_root: Root) -> None:
        _node(strict_root, "A", "t")
        with pytest.raises(UnmatchedLinkableError) as exc_info:
            strict_root.link([Recorder("t"), Recorder("nothing")])
        assert exc_info.value.linkables == ["Recorder(nothing)"]

    def test_strict_raises_after_full_traversal(self, strict_root: Root) -> None:
        _node(strict_root, "A", "t")
        _node(strict_root, "B", "t")
        rec = Recorder("t")
        with pytest.raises(UnmatchedLinkableError):
            strict_root.link([rec, Recorder("nothing")])
        assert rec.seen == [("A",), ("B",)]

    def test_policy_argument_overrides_settings(self, root: Root) -> None:
        with pytest.raises(UnmatchedLinkableError):
            root.link([Recorder("nothing")], policy=LinkPolicy.STRICT)

    def test_permissive_argument_overrides_strict_root(self, strict_root: Root) -> None:
        strict_root.link([Recorder("nothing")], policy=LinkPolicy.PERMISSIVE)

    def test_adopted_floating_node_counts_as_matched(
        self, strict_root: Root, floating_scope: FloatingScope
    ) -> None:
        parent = Construct(strict_root, "Bucket")
        node = Construct(floating_scope, "Policy")
        parent.link([node])
        assert node.scope is parent
