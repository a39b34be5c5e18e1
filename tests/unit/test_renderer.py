"""Unit tests for tweakgraph.render: discovery, merging and serialization."""
from __future__ import annotations

import json

import pytest
import yaml

import tweakgraph
from tweakgraph.construct import Construct, Root
from tweakgraph.errors import DuplicateLogicalIdError
from tweakgraph.properties import ScalarProperty
from tweakgraph.render import FORMATS, DocumentSerializer, find_all, render_all
from tweakgraph.resource import Resource


def _named(scope: Construct, id: str, value: str = "v") -> Resource:  # noqa: A002
    res = Resource(scope, id, "Test::Named")
    res.add_property("Name", ScalarProperty(value))
    return res


# ===========================================================================
# find_all
# ===========================================================================


class TestFindAll:
    def test_breadth_first(self, root: Root) -> None:
        a = _named(root, "A")
        a1 = _named(a, "A1")
        b = _named(root, "B")
        assert find_all(root) == [a, b, a1]

    def test_skips_plain_constructs_but_descends(self, root: Root) -> None:
        group = Construct(root, "Group")
        inner = _named(group, "Inner")
        assert find_all(root) == [inner]

    def test_includes_scope_itself(self, root: Root) -> None:
        res = _named(root, "Only")
        assert find_all(res) == [res]

    def test_empty_tree(self, root: Root) -> None:
        assert find_all(root) == []


# ===========================================================================
# render_all
# ===========================================================================


class TestRenderAll:
    def test_merges_resources(self, root: Root) -> None:
        _named(root, "A", "a")
        _named(Construct(root, "Group"), "B", "b")
        assert render_all(root) == {
            "A": {"type": "Test::Named", "properties": {"Name": "a"}},
            "GroupB": {"type": "Test::Named", "properties": {"Name": "b"}},
        }

    def test_key_order_ignores_insertion_order(self) -> None:
        first = Root()
        _named(first, "B")
        _named(first, "A")
        second = Root()
        _named(second, "A")
        _named(second, "B")
        assert list(render_all(first)) == ["A", "B"]
        assert json.dumps(render_all(first)) == json.dumps(render_all(second))

    def test_orders_by_joined_path(self, root: Root) -> None:
        _named(root, "AB")
        _named(Construct(root, "A"), "C")
        assert list(render_all(root)) == ["AC", "AB"]

    def test_colliding_logical_ids_raise(self, root: Root) -> None:
        _named(root, "AB")
        _named(Construct(root, "A"), "B")
        with pytest.raises(DuplicateLogicalIdError) as exc_info:
            render_all(root)
        assert exc_info.value.logical_id == "AB"
        assert exc_info.value.first == ("A", "B")
        assert exc_info.value.second == ("AB",)

    def test_empty_tree_renders_empty_document(self, root: Root) -> None:
        assert render_all(root) == {}


# ===========================================================================
# DocumentSerializer
# ===========================================================================


class TestDocumentSerializer:
    def test_formats(self) -> None:
        assert FORMATS == ("json", "yaml")

    def test_json_round_trip(self, root: Root) -> None:
        _named(root, "A")
        serializer = DocumentSerializer()
        text = serializer.render(root, "json")
        assert serializer.from_json(text) == render_all(root)

    def test_json_keeps_unicode(self) -> None:
        assert "é" in DocumentSerializer().to_json({"Name": "é"})

    def test_yaml_keeps_key_order(self) -> None:
        text = DocumentSerializer().to_yaml({"b": 1, "a": None})
        assert text.index("b:") < text.index("a:")
        assert yaml.safe_load(text) == {"b": 1, "a": None}

    def test_yaml_render(self, root: Root) -> None:
        _named(root, "A", "a")
        serializer = DocumentSerializer()
        assert serializer.from_yaml(serializer.render(root, "yaml")) == render_all(root)

    def test_unknown_format(self, root: Root) -> None:
        with pytest.raises(ValueError, match="xml"):
            DocumentSerializer().render(root, "xml")

    def test_package_level_render(self, root: Root) -> None:
        _named(root, "A")
        assert json.loads(tweakgraph.render(root)) == render_all(root)
