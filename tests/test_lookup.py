"""Tests for find_child and get_value_of."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from inplace_json import Node, NodeKind, find_child, get_value_of

DOC = '{"name":"widget","count":3,"ratio":0.5,"ok":true,"none":null,"tags":["a"],"meta":{}}'


@pytest.fixture
def root(parse_text: Callable[..., Node]) -> Node:
    return parse_text(DOC)


class TestFindChild:
    def test_finds_member(self, root: Node) -> None:
        child = find_child(root, "count")
        assert child is not None
        assert child.kind is NodeKind.INTEGER

    def test_missing_member(self, root: Node) -> None:
        assert find_child(root, "absent") is None

    def test_names_are_case_sensitive(self, root: Node) -> None:
        assert find_child(root, "Name") is None

    def test_returns_containers(self, root: Node) -> None:
        tags = find_child(root, "tags")
        assert tags is not None
        assert tags.kind is NodeKind.ARRAY

    def test_first_duplicate_wins(self, parse_text: Callable[..., Node]) -> None:
        dup = parse_text('{"k":1,"k":2}')
        assert find_child(dup, "k").get_value() == "1"  # type: ignore[union-attr]

    def test_array_elements_have_no_name(self, parse_text: Callable[..., Node]) -> None:
        arr = parse_text('["a","b"]')
        assert find_child(arr, "a") is None

    def test_leaf_has_no_children(self, root: Node) -> None:
        leaf = find_child(root, "name")
        assert leaf is not None
        assert find_child(leaf, "anything") is None

    def test_decoded_names_are_matched(self, parse_text: Callable[..., Node]) -> None:
        doc = parse_text('{"a\\"b":1}')
        assert find_child(doc, 'a"b') is not None


class TestGetValueOf:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("name", "widget"),
            ("count", "3"),
            ("ratio", "0.5"),
            ("ok", "true"),
            ("none", "null"),
        ],
    )
    def test_leaf_values(self, root: Node, name: str, value: str) -> None:
        assert get_value_of(root, name) == value

    @pytest.mark.parametrize("name", ["tags", "meta"])
    def test_containers_excluded(self, root: Node, name: str) -> None:
        assert get_value_of(root, name) is None

    def test_missing_member(self, root: Node) -> None:
        assert get_value_of(root, "absent") is None

    def test_nested_lookup(self, parse_text: Callable[..., Node]) -> None:
        doc = parse_text('{"outer":{"inner":"deep"}}')
        outer = find_child(doc, "outer")
        assert outer is not None
        assert get_value_of(outer, "inner") == "deep"
