"""Tree subpackage: node records, the node pool and the tree builder.

Re-exports the public API for the tree module:
- Node: handle to one node record
- NodeKind: StrEnum of the seven node kinds
- NODE_DTYPE / make_records: layout and constructor of record arrays
- ArrayPool: fixed-capacity pool over a record array
- TreeBuilder: the single-pass in-place parser
"""

from inplace_json.tree.nodes import NODE_DTYPE, Node, NodeKind, make_records
from inplace_json.tree.pool import ArrayPool
from inplace_json.tree.builder import TreeBuilder

__all__ = ["NODE_DTYPE", "ArrayPool", "Node", "NodeKind", "TreeBuilder", "make_records"]
