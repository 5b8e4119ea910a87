"""inplace-json - allocation-bounded, in-place JSON parsing into a fixed node pool."""

from __future__ import annotations

from inplace_json.accessors import get_boolean, get_integer, get_real, to_python
from inplace_json.api import create, create_with_pool, make_buffer, parse
from inplace_json.config import ParserConfig, UnicodeEscapes
from inplace_json.errors import ErrorKind, ParseError
from inplace_json.lookup import find_child, get_value_of
from inplace_json.protocols import NodePool
from inplace_json.tree import ArrayPool, Node, NodeKind, make_records

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayPool",
    "ErrorKind",
    "Node",
    "NodeKind",
    "NodePool",
    "ParseError",
    "ParserConfig",
    "UnicodeEscapes",
    "create",
    "create_with_pool",
    "find_child",
    "get_boolean",
    "get_integer",
    "get_real",
    "get_value_of",
    "make_buffer",
    "make_records",
    "parse",
    "to_python",
]
