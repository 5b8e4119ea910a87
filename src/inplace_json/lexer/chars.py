"""Character classes and cursor-advancing scanner primitives.

The buffer is a ``bytearray``; a cursor is an index into it.  The NUL byte
and the end of the buffer both act as the terminator.  Skipping functions
return ``None`` when they run into the terminator before finding a
character outside the class, so that "boundary found" and "buffer
exhausted" are never confused.
"""

from __future__ import annotations

from collections.abc import Set

__all__ = [
    "BACKSLASH",
    "BLANK",
    "COMMA",
    "DIGITS",
    "END_OF_BLOCK",
    "HEX_DIGITS",
    "NUL",
    "QUOTE",
    "char_at",
    "is_one_of",
    "skip_blank",
    "skip_digits",
    "skip_while",
]

NUL = 0
QUOTE = ord('"')
BACKSLASH = ord("\\")
COMMA = ord(",")

BLANK: frozenset[int] = frozenset(b" \n\r\t\f")
DIGITS: frozenset[int] = frozenset(b"0123456789")
HEX_DIGITS: frozenset[int] = frozenset(b"0123456789abcdefABCDEF")
END_OF_BLOCK: frozenset[int] = frozenset(b"}]")


def char_at(buf: bytearray, pos: int) -> int:
    """Return the character at ``pos``; NUL past the end of the buffer."""
    if pos < len(buf):
        return buf[pos]
    return NUL


def is_one_of(ch: int, members: Set[int]) -> bool:
    """True if ``ch`` belongs to the character class ``members``."""
    return ch in members


def skip_while(buf: bytearray, pos: int, members: Set[int]) -> int | None:
    """Advance ``pos`` past every character belonging to ``members``.

    Args:
        buf:     The buffer being scanned.
        pos:     Cursor to start from.
        members: Character class, as a set of byte values.

    Returns:
        Cursor of the first character outside ``members``, or None if the
        terminator was reached first.
    """
    end = len(buf)
    while pos < end:
        ch = buf[pos]
        if ch == NUL:
            return None
        if ch not in members:
            return pos
        pos += 1
    return None


def skip_blank(buf: bytearray, pos: int) -> int | None:
    """Skip JSON whitespace; see ``skip_while``."""
    return skip_while(buf, pos, BLANK)


def skip_digits(buf: bytearray, pos: int) -> int | None:
    """Skip ASCII decimal digits; see ``skip_while``."""
    return skip_while(buf, pos, DIGITS)
