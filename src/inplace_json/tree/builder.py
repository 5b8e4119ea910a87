"""TreeBuilder: single-pass, in-place JSON parser driving a node pool.

Walks the buffer once with a cursor.  For every member or element it mints
one node from the pool, appends it to the currently open container and
hands the value over to the lexer: strings are unescaped in place, literals
and numbers are validated and NUL-terminated in place, and ``{``/``[`` open
a new container that becomes current.

No explicit stack is kept.  Each node records the index of its enclosing
container, so closing a container is an O(1) step back to ``parent``.

Commas are skipped wherever they appear, and whitespace left behind a
primitive is enough to separate it from the next value.  With
``ParserConfig.strict_separators`` the builder instead tracks where a comma
may stand and rejects missing, leading, doubled and trailing ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from inplace_json.config import ParserConfig
from inplace_json.errors import ErrorKind, ParseError
from inplace_json.lexer.chars import COMMA, END_OF_BLOCK, NUL, QUOTE, skip_blank
from inplace_json.lexer.primitives import end_token, match_literal, match_number
from inplace_json.lexer.strings import parse_string
from inplace_json.tree.nodes import NO_NODE, Node, NodeKind

if TYPE_CHECKING:
    from inplace_json.protocols import NodePool

__all__ = ["TreeBuilder"]


_COLON = ord(":")

_OPENERS: dict[int, NodeKind] = {
    ord("{"): NodeKind.OBJECT,
    ord("["): NodeKind.ARRAY,
}
_CLOSERS: dict[NodeKind, int] = {
    NodeKind.OBJECT: ord("}"),
    NodeKind.ARRAY: ord("]"),
}
_LITERALS: dict[int, tuple[bytes, NodeKind]] = {
    ord("t"): (b"true", NodeKind.BOOLEAN),
    ord("f"): (b"false", NodeKind.BOOLEAN),
    ord("n"): (b"null", NodeKind.NULL),
}


class _State(Enum):
    # Only enforced with strict_separators.
    OPENED = auto()  # just after "{" / "[": value or close
    EXPECT_VALUE = auto()  # just after ",": value required
    AFTER_VALUE = auto()  # "," or close


@dataclass
class TreeBuilder:
    """Parses a NUL-terminated JSON buffer into a tree of pool nodes.

    The buffer is rewritten while parsing: every member name and leaf value
    ends up decoded and NUL-terminated where it stood, and the nodes only
    store offsets to it.  On failure the buffer is left partially rewritten
    and whatever was written to the pool must be ignored.

    Example::

        builder = TreeBuilder()
        root = builder.build(bytearray(b'{"a":[1,2]}\\0'), ArrayPool.with_capacity(8))
        # root: OBJECT -> ARRAY "a" -> [INTEGER "1", INTEGER "2"]
    """

    config: ParserConfig = field(default_factory=ParserConfig)

    def build(self, source: bytearray, pool: NodePool) -> Node:
        """Parse ``source`` and return the root node.

        Args:
            source: Mutable buffer holding the document.  It is rewritten in
                place and must stay untouched while the tree is in use.
            pool:   Where node records come from.

        Returns:
            The root node, an OBJECT or ARRAY.

        Raises:
            ParseError: On any grammar, lexical, numeric or capacity failure,
                or INPUT if the document does not start with ``{`` or ``[``.
        """
        pos = skip_blank(source, 0)
        if pos is None or source[pos] not in _OPENERS:
            msg = "document must start with '{' or '['"
            raise ParseError(ErrorKind.INPUT, msg, pos or 0)

        root = pool.init(source)
        root.reset(_OPENERS[source[pos]])
        current = root
        state = _State.OPENED
        pos += 1

        strict = self.config.strict_separators

        while True:
            pos = self._next_token(source, pos)
            ch = source[pos]

            if ch == _CLOSERS[current.kind]:
                if strict and state is _State.EXPECT_VALUE:
                    msg = "value expected after ','"
                    raise ParseError(ErrorKind.GRAMMAR, msg, pos)
                source[pos] = NUL
                pos += 1
                parent = current.parent
                if parent is None:
                    return root
                current = parent
                state = _State.AFTER_VALUE
                continue

            if ch == COMMA:
                if strict and state is not _State.AFTER_VALUE:
                    msg = "value expected, found ','"
                    raise ParseError(ErrorKind.GRAMMAR, msg, pos)
                pos += 1
                state = _State.EXPECT_VALUE
                continue
            if strict and state is _State.AFTER_VALUE:
                msg = f"expected ',' or {chr(_CLOSERS[current.kind])!r}"
                raise ParseError(ErrorKind.GRAMMAR, msg, pos)
            if ch in END_OF_BLOCK:
                msg = f"unexpected {chr(ch)!r} inside {current.kind.value}"
                raise ParseError(ErrorKind.GRAMMAR, msg, pos)

            node = pool.alloc()
            if node is None:
                msg = "node pool exhausted"
                raise ParseError(ErrorKind.CAPACITY, msg, pos)

            name = NO_NODE
            if current.kind is NodeKind.OBJECT:
                name = pos + 1
                pos = self._member_name(source, pos)
                ch = source[pos]

            if ch in _OPENERS:
                node.reset(_OPENERS[ch], name=name)
                current.append(node)
                current = node
                state = _State.OPENED
                pos += 1
                continue

            kind, value, pos, state = self._leaf(source, pos)
            node.reset(kind, name=name, value=value)
            current.append(node)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _next_token(source: bytearray, pos: int) -> int:
        pos = skip_blank(source, pos)
        if pos is None:
            msg = "unexpected end of input inside container"
            raise ParseError(ErrorKind.GRAMMAR, msg, len(source))
        return pos

    def _member_name(self, source: bytearray, pos: int) -> int:
        """Decode the member name at ``pos``; return the cursor of its value."""
        if source[pos] != QUOTE:
            msg = "member name must be a string"
            raise ParseError(ErrorKind.GRAMMAR, msg, pos)
        pos = parse_string(source, pos + 1, self.config)
        pos = self._next_token(source, pos)
        if source[pos] != _COLON:
            msg = "expected ':' after member name"
            raise ParseError(ErrorKind.GRAMMAR, msg, pos)
        return self._next_token(source, pos + 1)

    def _leaf(self, source: bytearray, pos: int) -> tuple[NodeKind, int, int, _State]:
        """Consume the leaf value at ``pos``.

        Returns:
            ``(kind, value offset, next cursor, next state)``.  A comma
            swallowed by the terminator rule moves straight to EXPECT_VALUE.
        """
        ch = source[pos]
        if ch == QUOTE:
            end = parse_string(source, pos + 1, self.config)
            return NodeKind.TEXT, pos + 1, end, _State.AFTER_VALUE
        if ch in _LITERALS:
            literal, kind = _LITERALS[ch]
            end = match_literal(source, pos, literal)
        else:
            end, kind = match_number(source, pos)
        state = _State.EXPECT_VALUE if source[end] == COMMA else _State.AFTER_VALUE
        return kind, pos, end_token(source, end), state
