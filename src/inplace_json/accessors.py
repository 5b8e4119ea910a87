"""Typed accessors converting decoded leaf text to Python values.

The parser itself only delivers text.  These helpers turn the text of a
leaf into ``bool``, ``int`` or ``float`` and convert whole trees to plain
Python structures.  Each accessor checks the node kind first and raises
``TypeError`` when it does not apply.
"""

from __future__ import annotations

from typing import Any

from inplace_json.tree.nodes import Node, NodeKind

__all__ = ["get_boolean", "get_integer", "get_real", "to_python"]

_NUMERIC_KINDS = frozenset({NodeKind.INTEGER, NodeKind.REAL})


def _leaf_text(node: Node, allowed: frozenset[NodeKind]) -> str:
    if node.kind not in allowed:
        expected = sorted(kind.value for kind in allowed)
        msg = f"expected a node of kind {expected}, got {node.kind.value!r}"
        raise TypeError(msg)
    return node.get_value() or ""


def get_boolean(node: Node) -> bool:
    """Return the value of a BOOLEAN node."""
    return _leaf_text(node, frozenset({NodeKind.BOOLEAN})) == "true"


def get_integer(node: Node) -> int:
    """Return the value of an INTEGER node.

    The parser already guarantees the value fits in a signed 64-bit integer.
    """
    return int(_leaf_text(node, frozenset({NodeKind.INTEGER})))


def get_real(node: Node) -> float:
    """Return the value of a REAL or INTEGER node as a float."""
    return float(_leaf_text(node, _NUMERIC_KINDS))


def _scalar(node: Node) -> Any:
    kind = node.kind
    if kind is NodeKind.BOOLEAN:
        return get_boolean(node)
    if kind is NodeKind.INTEGER:
        return get_integer(node)
    if kind is NodeKind.REAL:
        return get_real(node)
    if kind is NodeKind.NULL:
        return None
    return node.get_value()


def _empty(node: Node) -> dict[str | None, Any] | list[Any]:
    return {} if node.kind is NodeKind.OBJECT else []


def to_python(node: Node) -> Any:
    """Convert the tree rooted at ``node`` into dicts, lists and scalars.

    Objects become ``dict`` (a repeated member name keeps its last value),
    arrays become ``list``, TEXT becomes ``str`` and NULL becomes ``None``.
    The walk keeps its own stack, so nesting depth is bounded only by the
    pool the tree was parsed into.
    """
    if node.is_leaf:
        return _scalar(node)
    result = _empty(node)
    pending = [(node, result)]
    while pending:
        container, target = pending.pop()
        for child in container.children():
            value = _empty(child) if child.is_container else _scalar(child)
            if isinstance(target, dict):
                target[child.get_name()] = value
            else:
                target.append(value)
            if child.is_container:
                pending.append((child, value))
    return result
