"""ErrorKind StrEnum and ParseError exception for failed parses.

Every routine of the parsing engine either returns a continuation cursor or
raises ``ParseError``.  Nothing recovers locally: the first failure aborts the
whole parse and the partially built tree is discarded.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["ErrorKind", "ParseError"]


class ErrorKind(StrEnum):
    """Why a parse did not succeed.

    - GRAMMAR:  Unexpected character or missing delimiter (``,`` ``:`` ``"``).
    - LEXICAL:  Malformed escape, bad ``\\u`` sequence or unterminated string.
    - NUMERIC:  Malformed number or integer outside the signed 64-bit range.
    - CAPACITY: The node pool ran out of records before the parse completed.
    - INPUT:    The document does not start with ``{`` or ``[``.
    """

    GRAMMAR = auto()
    LEXICAL = auto()
    NUMERIC = auto()
    CAPACITY = auto()
    INPUT = auto()


class ParseError(ValueError):
    """Raised when a buffer cannot be parsed.

    Attributes:
        kind:   The ``ErrorKind`` of the failure.
        offset: Cursor position in the buffer where the failure was detected.
    """

    def __init__(self, kind: ErrorKind, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.kind = kind
        self.offset = offset
