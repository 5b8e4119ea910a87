"""lexer subpackage: character scanning, string decoding and primitive tokens.

Every function works on a ``bytearray`` and an integer cursor, rewrites the
buffer in place where needed and raises ``ParseError`` on malformed input.
"""

from __future__ import annotations

from inplace_json.lexer.chars import skip_blank, skip_digits, skip_while
from inplace_json.lexer.primitives import end_token, match_literal, match_number
from inplace_json.lexer.strings import parse_string

__all__ = [
    "end_token",
    "match_literal",
    "match_number",
    "parse_string",
    "skip_blank",
    "skip_digits",
    "skip_while",
]
