"""Read-only property lookup on a parsed tree."""

from __future__ import annotations

from inplace_json.tree.nodes import Node

__all__ = ["find_child", "get_value_of"]


def find_child(node: Node, name: str) -> Node | None:
    """Return the first child of ``node`` named ``name``, in document order.

    Linear in the number of children; nothing is cached.  Array elements
    have no name and never match.
    """
    for child in node.children():
        if child.get_name() == name:
            return child
    return None


def get_value_of(node: Node, name: str) -> str | None:
    """Return the value text of the child named ``name``.

    Returns None when there is no such child or when it is an OBJECT or
    ARRAY: containers have to be walked structurally.
    """
    child = find_child(node, name)
    if child is None or child.is_container:
        return None
    return child.get_value()
