"""ParserConfig and UnicodeEscapes for parser configuration.

ParserConfig is a frozen (immutable) dataclass holding the few knobs the
parser has: escape decoding and whether commas are enforced.
UnicodeEscapes selects what a ``\\uXXXX`` escape turns into: a single
placeholder character (the classic behaviour) or its real UTF-8 encoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ParserConfig", "UnicodeEscapes"]

# Characters that would break the decoded token or be mistaken for syntax.
_FORBIDDEN_PLACEHOLDERS = frozenset('"\\')


class UnicodeEscapes(StrEnum):
    """How ``\\uXXXX`` escapes inside strings are rewritten.

    - PLACEHOLDER: Accept the four hex digits and collapse the whole escape
                   to ``ParserConfig.placeholder``.
    - DECODE:      Write the UTF-8 encoding of the code point in place.
                   Surrogate pairs are combined; lone surrogates and
                   ``\\u0000`` are rejected.
    """

    PLACEHOLDER = auto()
    DECODE = auto()


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for the parser.

    Attributes:
        unicode_escapes: What ``\\uXXXX`` escapes decode to.  Defaults to
            ``UnicodeEscapes.PLACEHOLDER``.
        placeholder: Single printable ASCII character written for each
            ``\\uXXXX`` escape in PLACEHOLDER mode.  Defaults to ``"?"``.
        strict_separators: Reject missing, leading, doubled and trailing
            commas.  Defaults to False, where commas are skipped wherever
            they appear and whitespace alone may separate values.
    """

    unicode_escapes: UnicodeEscapes = UnicodeEscapes.PLACEHOLDER
    placeholder: str = "?"
    strict_separators: bool = False

    def __post_init__(self) -> None:
        if self.unicode_escapes not in tuple(UnicodeEscapes):
            choices = [mode.value for mode in UnicodeEscapes]
            msg = f"unicode_escapes must be one of {choices}, got {self.unicode_escapes!r}"
            raise ValueError(msg)
        if not isinstance(self.placeholder, str) or len(self.placeholder) != 1:
            msg = f"placeholder must be a single character, got {self.placeholder!r}"
            raise ValueError(msg)
        if not " " <= self.placeholder <= "~":
            msg = f"placeholder must be printable ASCII, got {self.placeholder!r}"
            raise ValueError(msg)
        if self.placeholder in _FORBIDDEN_PLACEHOLDERS:
            msg = f"placeholder must not be a quote or backslash, got {self.placeholder!r}"
            raise ValueError(msg)
        if not isinstance(self.strict_separators, bool):
            msg = f"strict_separators must be a bool, got {self.strict_separators!r}"
            raise ValueError(msg)

    @property
    def placeholder_code(self) -> int:
        """The placeholder as the byte value written into the buffer."""
        return ord(self.placeholder)
