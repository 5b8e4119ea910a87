"""In-place decoder for quoted string tokens.

``parse_string`` reads a string token character by character and writes the
decoded characters back through a second cursor that trails the reading
one.  Escapes are always at least as long as what they decode to, so the
write cursor never overtakes the read cursor and no extra storage is
needed.  The closing quote is replaced by NUL, leaving the decoded token
NUL-terminated inside the original bytes.
"""

from __future__ import annotations

from inplace_json.config import ParserConfig, UnicodeEscapes
from inplace_json.errors import ErrorKind, ParseError
from inplace_json.lexer.chars import BACKSLASH, HEX_DIGITS, NUL, QUOTE, char_at

__all__ = ["parse_string"]

_UNICODE = ord("u")

# Escape character -> the character it stands for.
_ESCAPES: dict[int, int] = {
    ord('"'): ord('"'),
    ord("\\"): ord("\\"),
    ord("/"): ord("/"),
    ord("b"): ord("\b"),
    ord("f"): ord("\f"),
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
}


def parse_string(buf: bytearray, pos: int, config: ParserConfig) -> int:
    """Decode the string token starting at ``pos`` in place.

    Args:
        buf:    The buffer being parsed.  Modified in place.
        pos:    Cursor just past the opening quote.
        config: Decides how ``\\uXXXX`` escapes are rewritten.

    Returns:
        Cursor just past the closing quote, which now holds NUL.

    Raises:
        ParseError: LEXICAL on a malformed escape or when the terminator is
            reached before the closing quote.
    """
    head = tail = pos
    end = len(buf)
    while head < end:
        ch = buf[head]
        if ch == NUL:
            break
        if ch == QUOTE:
            buf[tail] = NUL
            return head + 1
        if ch != BACKSLASH:
            buf[tail] = ch
            head += 1
            tail += 1
            continue
        esc = char_at(buf, head + 1)
        if esc == _UNICODE:
            head, tail = _unicode_escape(buf, head, tail, config)
            continue
        code = _ESCAPES.get(esc)
        if code is None:
            msg = f"invalid escape character {chr(esc)!r}"
            raise ParseError(ErrorKind.LEXICAL, msg, head)
        buf[tail] = code
        head += 2
        tail += 1
    msg = "unterminated string"
    raise ParseError(ErrorKind.LEXICAL, msg, pos - 1)


def _hex_quad(buf: bytearray, pos: int) -> int | None:
    """Return the value of four hex digits at ``pos``, or None."""
    digits = buf[pos : pos + 4]
    if len(digits) != 4 or not all(d in HEX_DIGITS for d in digits):
        return None
    return int(digits, 16)


def _unicode_escape(buf: bytearray, head: int, tail: int, config: ParserConfig) -> tuple[int, int]:
    """Rewrite the ``\\uXXXX`` escape at ``head``; return the advanced cursors."""
    code_point = _hex_quad(buf, head + 2)
    if code_point is None:
        msg = "\\u must be followed by four hexadecimal digits"
        raise ParseError(ErrorKind.LEXICAL, msg, head)
    if config.unicode_escapes != UnicodeEscapes.DECODE:
        buf[tail] = config.placeholder_code
        return head + 6, tail + 1

    consumed = 6
    if 0xD800 <= code_point <= 0xDBFF:
        low = None
        if char_at(buf, head + 6) == BACKSLASH and char_at(buf, head + 7) == _UNICODE:
            low = _hex_quad(buf, head + 8)
        if low is None or not 0xDC00 <= low <= 0xDFFF:
            msg = "high surrogate not followed by a low surrogate escape"
            raise ParseError(ErrorKind.LEXICAL, msg, head)
        code_point = 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
        consumed = 12
    elif 0xDC00 <= code_point <= 0xDFFF:
        msg = "unpaired low surrogate"
        raise ParseError(ErrorKind.LEXICAL, msg, head)
    elif code_point == 0:
        msg = "\\u0000 cannot be stored in a NUL-terminated token"
        raise ParseError(ErrorKind.LEXICAL, msg, head)

    encoded = chr(code_point).encode("utf-8")
    buf[tail : tail + len(encoded)] = encoded
    return head + consumed, tail + len(encoded)
