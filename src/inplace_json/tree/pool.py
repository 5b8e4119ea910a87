"""ArrayPool: fixed-capacity node pool over a caller-owned record array.

Hands out rows of a numpy record array in order.  Row 0 is reserved for the
root and returned by ``init``; ``alloc`` walks the remaining rows and
returns ``None`` once they are used up.  Nothing is ever freed during a
parse: a new ``init`` simply restarts from row 1.

Example::

    from inplace_json.tree.pool import ArrayPool

    pool = ArrayPool.with_capacity(16)
    root = pool.init(bytearray(b"[1]\\0"))
    first = pool.alloc()     # row 1
    pool.used                # 2
"""

from __future__ import annotations

import logging

import numpy as np

from inplace_json.errors import ErrorKind, ParseError
from inplace_json.tree.nodes import NODE_DTYPE, Node, make_records

__all__ = ["ArrayPool"]

logger = logging.getLogger(__name__)


class ArrayPool:
    """Bounded node pool backed by a numpy record array.

    Satisfies the ``NodePool`` Protocol structurally (no inheritance
    required).  The record array is borrowed, not copied: the tree built
    through this pool lives in ``records``.

    Args:
        records: One-dimensional array of dtype ``NODE_DTYPE``.
        qty: Number of leading rows the pool may use.  Defaults to
            ``len(records)``.
    """

    def __init__(self, records: np.ndarray, qty: int | None = None) -> None:
        if not isinstance(records, np.ndarray) or records.dtype != NODE_DTYPE:
            msg = "records must be a numpy array of dtype NODE_DTYPE"
            raise TypeError(msg)
        if records.ndim != 1:
            msg = f"records must be one-dimensional, got {records.ndim} dimensions"
            raise ValueError(msg)
        if qty is None:
            qty = len(records)
        if not 0 <= qty <= len(records):
            msg = f"qty must be in [0, {len(records)}], got {qty}"
            raise ValueError(msg)
        self._records = records
        self._qty = qty
        self._next_free = 0
        self._source = bytearray()

    @classmethod
    def with_capacity(cls, capacity: int) -> ArrayPool:
        """Create a pool over a fresh record array of ``capacity`` rows."""
        return cls(make_records(capacity))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def records(self) -> np.ndarray:
        """The backing record array."""
        return self._records

    @property
    def capacity(self) -> int:
        """Maximum number of nodes, root included."""
        return self._qty

    @property
    def used(self) -> int:
        """Number of rows handed out since the last ``init``."""
        return self._next_free

    # ------------------------------------------------------------------
    # NodePool Protocol surface
    # ------------------------------------------------------------------

    def init(self, source: bytearray) -> Node:
        """Bind the pool to ``source`` and return the root handle (row 0).

        Raises:
            ParseError: If the pool cannot hold even the root.
        """
        if self._qty < 1:
            msg = "node pool has no room for the root"
            raise ParseError(ErrorKind.CAPACITY, msg, 0)
        self._source = source
        self._next_free = 1
        return Node(self._records, 0, source)

    def alloc(self) -> Node | None:
        """Return the next unused row, or None when the pool is exhausted."""
        if self._next_free >= self._qty:
            logger.debug("node pool exhausted after %d nodes", self._qty)
            return None
        node = Node(self._records, self._next_free, self._source)
        self._next_free += 1
        return node
