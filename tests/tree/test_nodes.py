"""Tests for NodeKind, the record layout and the Node handle.

Verifies:
- NodeKind has exactly 7 members with lowercase string values (StrEnum property)
- make_records yields unlinked records of NODE_DTYPE
- reset/append build child and sibling chains with O(1) append
- Handles compare by (record array, row), not by identity
"""

from __future__ import annotations

import numpy as np
import pytest

from inplace_json.tree.nodes import (
    CONTAINER_KINDS,
    NO_NODE,
    NODE_DTYPE,
    Node,
    NodeKind,
    make_records,
)


class TestNodeKind:
    def test_has_exactly_seven_members(self) -> None:
        assert len(NodeKind) == 7

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.OBJECT == "object"
        assert NodeKind.ARRAY == "array"
        assert NodeKind.TEXT == "text"
        assert NodeKind.BOOLEAN == "boolean"
        assert NodeKind.INTEGER == "integer"
        assert NodeKind.REAL == "real"
        assert NodeKind.NULL == "null"

    def test_container_kinds(self) -> None:
        assert frozenset({NodeKind.OBJECT, NodeKind.ARRAY}) == CONTAINER_KINDS


class TestMakeRecords:
    def test_dtype_and_length(self) -> None:
        records = make_records(5)
        assert records.dtype == NODE_DTYPE
        assert records.shape == (5,)

    def test_links_start_empty(self) -> None:
        records = make_records(3)
        for field in ("name", "value", "child", "last_child", "sibling", "parent"):
            assert np.all(records[field] == NO_NODE)

    def test_zero_capacity_allowed(self) -> None:
        assert len(make_records(0)) == 0

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="qty must be >= 0"):
            make_records(-1)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tree() -> tuple[Node, Node, Node]:
    """Build ARRAY -> [TEXT "ab", NULL] by hand over ``ab\\0null\\0``."""
    source = bytearray(b"ab\0null\0")
    records = make_records(4)
    root = Node(records, 0, source)
    root.reset(NodeKind.ARRAY)
    first = Node(records, 1, source)
    first.reset(NodeKind.TEXT, value=0)
    second = Node(records, 2, source)
    second.reset(NodeKind.NULL, value=3)
    root.append(first)
    root.append(second)
    return root, first, second


class TestLinks:
    def test_first_child(self) -> None:
        root, first, _ = _tree()
        assert root.child == first

    def test_sibling_chain(self) -> None:
        _, first, second = _tree()
        assert first.sibling == second
        assert second.sibling is None

    def test_parent_links(self) -> None:
        root, first, second = _tree()
        assert first.parent == root
        assert second.parent == root
        assert root.parent is None

    def test_children_in_order(self) -> None:
        root, first, second = _tree()
        assert list(root.children()) == [first, second]

    def test_leaf_has_no_children(self) -> None:
        _, first, _ = _tree()
        assert first.child is None
        assert list(first.children()) == []

    def test_reset_unlinks(self) -> None:
        root, _, _ = _tree()
        root.reset(NodeKind.OBJECT)
        assert root.child is None
        assert root.kind is NodeKind.OBJECT


class TestReadAccess:
    def test_values_read_up_to_nul(self) -> None:
        _, first, second = _tree()
        assert first.get_value() == "ab"
        assert second.get_value() == "null"

    def test_container_has_no_value(self) -> None:
        root, _, _ = _tree()
        assert root.get_value() is None

    def test_unnamed_nodes(self) -> None:
        root, first, _ = _tree()
        assert root.get_name() is None
        assert first.get_name() is None

    def test_value_without_nul_runs_to_end(self) -> None:
        records = make_records(1)
        node = Node(records, 0, bytearray(b"xyz"))
        node.reset(NodeKind.TEXT, value=1)
        assert node.get_value() == "yz"

    def test_kind_predicates(self) -> None:
        root, first, _ = _tree()
        assert root.is_container and not root.is_leaf
        assert first.is_leaf and not first.is_container

    def test_index_and_source(self) -> None:
        root, _, second = _tree()
        assert root.index == 0
        assert second.index == 2
        assert second.source is root.source


class TestIdentity:
    def test_handles_to_same_row_are_equal(self) -> None:
        records = make_records(2)
        source = bytearray(b"\0")
        assert Node(records, 1, source) == Node(records, 1, source)
        assert hash(Node(records, 1, source)) == hash(Node(records, 1, source))

    def test_different_arrays_differ(self) -> None:
        source = bytearray(b"\0")
        assert Node(make_records(1), 0, source) != Node(make_records(1), 0, source)

    def test_not_equal_to_other_types(self) -> None:
        assert Node(make_records(1), 0, bytearray()) != 0

    def test_repr_mentions_kind(self) -> None:
        root, _, _ = _tree()
        assert "array" in repr(root)
