"""Node records, NodeKind StrEnum and the Node handle.

Nodes live as fixed-size rows of a numpy structured array (``NODE_DTYPE``)
owned by the caller.  Links between nodes are row indices and names/values
are offsets into the parsed buffer, so a whole tree fits in the record array
plus the buffer it was parsed from.  ``Node`` is a thin handle over one row.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto

import numpy as np

__all__ = [
    "CONTAINER_KINDS",
    "NODE_DTYPE",
    "NO_NODE",
    "Node",
    "NodeKind",
    "make_records",
]


class NodeKind(StrEnum):
    """Enumeration of the seven JSON node kinds.

    StrEnum values are the lowercased member names:
    - OBJECT   -> "object"  : JSON object {}
    - ARRAY    -> "array"   : JSON array []
    - TEXT     -> "text"    : string value
    - BOOLEAN  -> "boolean" : true / false
    - INTEGER  -> "integer" : number without fraction or exponent
    - REAL     -> "real"    : number with fraction and/or exponent
    - NULL     -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    TEXT = auto()
    BOOLEAN = auto()
    INTEGER = auto()
    REAL = auto()
    NULL = auto()


CONTAINER_KINDS = frozenset({NodeKind.OBJECT, NodeKind.ARRAY})

# Record field value meaning "no node" / "no offset".
NO_NODE = -1

# Row layout of a node record.  ``kind`` is the position of the kind in NodeKind.
NODE_DTYPE = np.dtype(
    [
        ("kind", np.uint8),
        ("name", np.int64),
        ("value", np.int64),
        ("child", np.int32),
        ("last_child", np.int32),
        ("sibling", np.int32),
        ("parent", np.int32),
    ]
)

_KINDS: tuple[NodeKind, ...] = tuple(NodeKind)
_KIND_CODES: dict[NodeKind, int] = {kind: code for code, kind in enumerate(_KINDS)}


def make_records(qty: int) -> np.ndarray:
    """Return a fresh record array able to hold ``qty`` nodes."""
    if qty < 0:
        msg = f"qty must be >= 0, got {qty}"
        raise ValueError(msg)
    records = np.zeros(qty, dtype=NODE_DTYPE)
    for field in ("name", "value", "child", "last_child", "sibling", "parent"):
        records[field] = NO_NODE
    return records


def _read_token(source: bytearray, offset: int) -> str:
    end = source.find(0, offset)
    if end < 0:
        end = len(source)
    return source[offset:end].decode("utf-8", errors="replace")


class Node:
    """Handle to one node record.

    A handle is a ``(records, index, source)`` triple: the record array the
    node lives in, its row, and the buffer its name and value point into.
    Handles are cheap and compare equal when they address the same row of
    the same record array.

    The tree aliases the buffer.  Neither the buffer nor the record array may
    be modified while handles are in use; re-parsing into the same records
    invalidates every handle of the previous tree.
    """

    __slots__ = ("_index", "_records", "_source")

    def __init__(self, records: np.ndarray, index: int, source: bytearray) -> None:
        self._records = records
        self._index = index
        self._source = source

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._records is other._records and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._records), self._index))

    def __repr__(self) -> str:
        return f"Node(index={self._index}, kind={self.kind.value!r}, name={self.get_name()!r})"

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def index(self) -> int:
        """Row of this node in its record array."""
        return self._index

    @property
    def source(self) -> bytearray:
        """The parsed buffer the node's name and value point into."""
        return self._source

    @property
    def kind(self) -> NodeKind:
        return _KINDS[int(self._records["kind"][self._index])]

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    @property
    def is_leaf(self) -> bool:
        return self.kind not in CONTAINER_KINDS

    @property
    def child(self) -> Node | None:
        """First child of a container, or None."""
        return self._link("child")

    @property
    def sibling(self) -> Node | None:
        """Next node at the same level, or None."""
        return self._link("sibling")

    @property
    def parent(self) -> Node | None:
        """Enclosing container, or None for the root."""
        return self._link("parent")

    def get_name(self) -> str | None:
        """Return the member name, or None for array elements and the root."""
        offset = int(self._records["name"][self._index])
        if offset == NO_NODE:
            return None
        return _read_token(self._source, offset)

    def get_value(self) -> str | None:
        """Return the decoded value text of a leaf, or None for containers."""
        offset = int(self._records["value"][self._index])
        if offset == NO_NODE or self.is_container:
            return None
        return _read_token(self._source, offset)

    def children(self) -> Iterator[Node]:
        """Yield the children of a container in document order."""
        node = self.child
        while node is not None:
            yield node
            node = node.sibling

    # ------------------------------------------------------------------
    # Write access (used while building)
    # ------------------------------------------------------------------

    def reset(self, kind: NodeKind, name: int = NO_NODE, value: int = NO_NODE) -> None:
        """Overwrite the record with a fresh, unlinked node."""
        self._records[self._index] = (
            _KIND_CODES[kind],
            name,
            value,
            NO_NODE,
            NO_NODE,
            NO_NODE,
            NO_NODE,
        )

    def append(self, node: Node) -> None:
        """Link ``node`` as the last child of this container in O(1)."""
        records = self._records
        records["parent"][node._index] = self._index
        records["sibling"][node._index] = NO_NODE
        last = int(records["last_child"][self._index])
        if last == NO_NODE:
            records["child"][self._index] = node._index
        else:
            records["sibling"][last] = node._index
        records["last_child"][self._index] = node._index

    def _link(self, field: str) -> Node | None:
        index = int(self._records[field][self._index])
        if index == NO_NODE:
            return None
        return Node(self._records, index, self._source)
