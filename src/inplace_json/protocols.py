"""NodePool Protocol for the node storage extension point.

Defines the structural interface every node pool must satisfy.  The tree
builder is written only against this Protocol, so a fixed record array, a
slice of a larger arena or any other capacity-bounded store can be plugged
in without inheriting from any base class.

Example::

    from inplace_json.protocols import NodePool
    from inplace_json.tree.nodes import Node, make_records

    class ArenaSlice:
        def __init__(self, records, start, stop):
            self._records, self._start, self._stop = records, start, stop
            self._next = start

        def init(self, source: bytearray) -> Node:
            self._source = source
            self._next = self._start + 1
            return Node(self._records, self._start, source)

        def alloc(self) -> Node | None:
            if self._next >= self._stop:
                return None
            self._next += 1
            return Node(self._records, self._next - 1, self._source)

    assert isinstance(ArenaSlice(make_records(8), 0, 8), NodePool)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from inplace_json.tree.nodes import Node


@runtime_checkable
class NodePool(Protocol):
    """Structural protocol for bounded node sources.

    The ``init`` method must:
    - Bind the pool to ``source``, the buffer about to be parsed.
    - Restart allocation so that the next ``alloc`` returns the first
      non-root slot.
    - Return a handle to the root slot.

    The ``alloc`` method must return a handle to a slot not handed out
    since the last ``init``, or ``None`` once capacity is exhausted.
    """

    def init(self, source: bytearray) -> Node: ...

    def alloc(self) -> Node | None: ...
