"""Recognisers for literal and number tokens, and the terminator rule.

The recognisers only validate: they return the cursor of the character that
ends the token and leave the buffer untouched.  ``end_token`` then applies
the terminator rule, which is what makes every primitive value
NUL-terminated in place:

- a comma or whitespace after the token is overwritten with NUL and
  consumed;
- a closing ``}`` or ``]`` is left alone for the tree builder to consume.
"""

from __future__ import annotations

from inplace_json.errors import ErrorKind, ParseError
from inplace_json.lexer.chars import (
    BLANK,
    COMMA,
    DIGITS,
    END_OF_BLOCK,
    NUL,
    char_at,
    is_one_of,
    skip_digits,
)
from inplace_json.tree.nodes import NodeKind

__all__ = [
    "end_token",
    "is_end_of_primitive",
    "match_literal",
    "match_number",
]

_MINUS = ord("-")
_PLUS = ord("+")
_ZERO = ord("0")
_DOT = ord(".")
_EXPONENT = frozenset(b"eE")

# Decimal forms of the signed 64-bit limits, sign included.
_INT64_MIN = b"-9223372036854775808"
_INT64_MAX = b"9223372036854775807"


def is_end_of_primitive(ch: int) -> bool:
    """True if ``ch`` may follow a literal or number."""
    return ch == COMMA or is_one_of(ch, BLANK) or is_one_of(ch, END_OF_BLOCK)


def end_token(buf: bytearray, pos: int) -> int:
    """Apply the terminator rule at ``pos`` and return the next cursor."""
    if buf[pos] not in END_OF_BLOCK:
        buf[pos] = NUL
        pos += 1
    return pos


def match_literal(buf: bytearray, pos: int, literal: bytes) -> int:
    """Match ``literal`` (``true``, ``false`` or ``null``) at ``pos``.

    Returns:
        Cursor of the character that ends the literal.

    Raises:
        ParseError: GRAMMAR if the text differs from ``literal`` or is not
            followed by a valid primitive terminator.
    """
    end = pos + len(literal)
    if buf[pos:end] != literal:
        msg = f"invalid literal, expected {literal.decode()!r}"
        raise ParseError(ErrorKind.GRAMMAR, msg, pos)
    if not is_end_of_primitive(char_at(buf, end)):
        msg = f"unexpected character after {literal.decode()!r}"
        raise ParseError(ErrorKind.GRAMMAR, msg, end)
    return end


def match_number(buf: bytearray, pos: int) -> tuple[int, NodeKind]:
    """Match a JSON number at ``pos``.

    Grammar: ``-? (0 | [1-9][0-9]*) (.[0-9]+)? ([eE][+-]?[0-9]+)?``.  A
    number without fraction and exponent is an INTEGER and must fit in a
    signed 64-bit integer; anything else is a REAL.

    Returns:
        ``(end, kind)``: cursor of the character that ends the number and
        the node kind it was tagged with.

    Raises:
        ParseError: NUMERIC on malformed grammar, integer overflow, or a
            number not followed by a valid primitive terminator.
    """
    start = pos
    if char_at(buf, pos) == _MINUS:
        pos += 1
    ch = char_at(buf, pos)
    if ch not in DIGITS:
        msg = "digit expected"
        raise ParseError(ErrorKind.NUMERIC, msg, pos)
    if ch != _ZERO:
        pos = _digit_run(buf, pos)
    else:
        pos += 1
        if char_at(buf, pos) in DIGITS:
            msg = "leading zero followed by a digit"
            raise ParseError(ErrorKind.NUMERIC, msg, pos)

    kind = NodeKind.INTEGER
    if char_at(buf, pos) == _DOT:
        pos = _fraction(buf, pos + 1)
        kind = NodeKind.REAL
    if char_at(buf, pos) in _EXPONENT:
        pos = _exponent(buf, pos + 1)
        kind = NodeKind.REAL

    if not is_end_of_primitive(char_at(buf, pos)):
        msg = "unexpected character after number"
        raise ParseError(ErrorKind.NUMERIC, msg, pos)
    if kind is NodeKind.INTEGER:
        _check_int64(buf, start, pos)
    return pos, kind


def _digit_run(buf: bytearray, pos: int) -> int:
    end = skip_digits(buf, pos)
    if end is None:
        msg = "unexpected end of input inside number"
        raise ParseError(ErrorKind.NUMERIC, msg, len(buf))
    return end


def _fraction(buf: bytearray, pos: int) -> int:
    if char_at(buf, pos) not in DIGITS:
        msg = "digit expected after decimal point"
        raise ParseError(ErrorKind.NUMERIC, msg, pos)
    return _digit_run(buf, pos + 1)


def _exponent(buf: bytearray, pos: int) -> int:
    if char_at(buf, pos) in (_MINUS, _PLUS):
        pos += 1
    if char_at(buf, pos) not in DIGITS:
        msg = "digit expected in exponent"
        raise ParseError(ErrorKind.NUMERIC, msg, pos)
    return _digit_run(buf, pos + 1)


def _check_int64(buf: bytearray, start: int, end: int) -> None:
    """Reject integer tokens outside [-2**63, 2**63 - 1] without converting them."""
    token = bytes(buf[start:end])
    threshold = _INT64_MIN if token.startswith(b"-") else _INT64_MAX
    if len(token) > len(threshold) or (len(token) == len(threshold) and token > threshold):
        msg = "integer out of 64-bit range"
        raise ParseError(ErrorKind.NUMERIC, msg, start)
