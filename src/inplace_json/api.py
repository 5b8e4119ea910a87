"""Public API functions for inplace-json.

This module provides the entry points: ``create`` and ``create_with_pool``
report failure as ``None`` without saying why, ``parse`` raises a
``ParseError`` carrying the error kind and offset.  Each call creates a
fresh ``TreeBuilder``; the only state is in the caller's buffer and pool.

Example::

    from inplace_json import create, get_value_of, make_buffer, make_records

    buf = make_buffer('{"name": "inplace", "size": 3}')
    root = create(buf, make_records(8))
    get_value_of(root, "size")   # "3"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inplace_json.config import ParserConfig
from inplace_json.errors import ParseError
from inplace_json.tree.builder import TreeBuilder
from inplace_json.tree.pool import ArrayPool

if TYPE_CHECKING:
    import numpy as np

    from inplace_json.protocols import NodePool
    from inplace_json.tree.nodes import Node

__all__ = ["create", "create_with_pool", "make_buffer", "parse"]

logger = logging.getLogger(__name__)


def make_buffer(text: str) -> bytearray:
    """Return ``text`` as a mutable, NUL-terminated UTF-8 buffer."""
    return bytearray(text.encode("utf-8")) + b"\0"


def parse(
    buffer: bytearray,
    pool: NodePool,
    config: ParserConfig | None = None,
) -> Node:
    """Parse ``buffer`` in place and return the root node.

    Args:
        buffer: Mutable JSON text, normally NUL-terminated.  It is rewritten
                while parsing and backs every name and value of the tree.
        pool:   Source of node records; any ``NodePool``.
        config: Parser options.  Defaults to ``ParserConfig()`` when None.

    Returns:
        The root OBJECT or ARRAY node.

    Raises:
        TypeError:  If ``buffer`` is not a ``bytearray``.
        ParseError: If the document is malformed or the pool runs out.
    """
    if not isinstance(buffer, bytearray):
        msg = f"buffer must be a bytearray, got {type(buffer).__name__}"
        raise TypeError(msg)
    builder = TreeBuilder(config=config if config is not None else ParserConfig())
    logger.debug("parsing %d-byte buffer", len(buffer))
    return builder.build(buffer, pool)


def create_with_pool(
    buffer: bytearray,
    pool: NodePool,
    config: ParserConfig | None = None,
) -> Node | None:
    """Parse ``buffer`` with ``pool``; return the root, or None on any failure.

    Failures of every kind (grammar, escapes, numbers, capacity, input)
    collapse to None.  Use ``parse`` to learn the reason.
    """
    try:
        return parse(buffer, pool, config=config)
    except ParseError as exc:
        logger.debug("parse failed (%s): %s", exc.kind, exc)
        return None


def create(
    buffer: bytearray,
    mem: np.ndarray,
    qty: int | None = None,
    config: ParserConfig | None = None,
) -> Node | None:
    """Parse ``buffer`` into the record array ``mem``.

    Args:
        buffer: Mutable JSON text, rewritten in place.
        mem:    Record array of dtype ``NODE_DTYPE`` (see ``make_records``).
        qty:    Number of usable records.  Defaults to ``len(mem)``.
        config: Parser options.  Defaults to ``ParserConfig()`` when None.

    Returns:
        The root node, or None if the buffer could not be parsed.
    """
    return create_with_pool(buffer, ArrayPool(mem, qty), config=config)
