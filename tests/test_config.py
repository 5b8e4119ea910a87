"""Tests for ParserConfig and UnicodeEscapes."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from inplace_json.config import ParserConfig, UnicodeEscapes


class TestUnicodeEscapes:
    def test_members(self) -> None:
        assert list(UnicodeEscapes) == [UnicodeEscapes.PLACEHOLDER, UnicodeEscapes.DECODE]

    def test_values_are_lowercased(self) -> None:
        assert UnicodeEscapes.PLACEHOLDER == "placeholder"
        assert UnicodeEscapes.DECODE == "decode"


class TestDefaults:
    def test_placeholder_mode_by_default(self) -> None:
        config = ParserConfig()
        assert config.unicode_escapes is UnicodeEscapes.PLACEHOLDER
        assert config.placeholder == "?"
        assert config.placeholder_code == ord("?")
        assert config.strict_separators is False

    def test_frozen(self) -> None:
        config = ParserConfig()
        with pytest.raises(FrozenInstanceError):
            config.placeholder = "*"  # type: ignore[misc]

    def test_plain_string_mode_accepted(self) -> None:
        config = ParserConfig(unicode_escapes="decode")  # type: ignore[arg-type]
        assert config.unicode_escapes == UnicodeEscapes.DECODE


class TestValidation:
    @pytest.mark.parametrize("placeholder", ["", "ab", "é", "\n", "\0", '"', "\\"])
    def test_bad_placeholder(self, placeholder: str) -> None:
        with pytest.raises(ValueError, match="placeholder"):
            ParserConfig(placeholder=placeholder)

    def test_non_string_placeholder(self) -> None:
        with pytest.raises(ValueError, match="placeholder"):
            ParserConfig(placeholder=63)  # type: ignore[arg-type]

    @pytest.mark.parametrize("placeholder", ["*", " ", "~", "_"])
    def test_good_placeholder(self, placeholder: str) -> None:
        assert ParserConfig(placeholder=placeholder).placeholder_code == ord(placeholder)

    def test_strict_separators_must_be_bool(self) -> None:
        with pytest.raises(ValueError, match="strict_separators"):
            ParserConfig(strict_separators=1)  # type: ignore[arg-type]

    def test_bad_mode(self) -> None:
        with pytest.raises(ValueError, match="unicode_escapes"):
            ParserConfig(unicode_escapes="utf16")  # type: ignore[arg-type]
