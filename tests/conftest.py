"""Shared fixtures: a parse-from-text helper and benchmark documents."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from documents import generate_flat_document, generate_nested_document

from inplace_json import ArrayPool, Node, ParserConfig, make_buffer, parse


@pytest.fixture
def parse_text() -> Callable[..., Node]:
    """Fixture that returns a callable parsing text into a fresh pool.

    Returns:
        ``_parse(text, capacity=64, config=None) -> Node``; raises
        ``ParseError`` exactly as ``parse`` does.
    """

    def _parse(text: str, capacity: int = 64, config: ParserConfig | None = None) -> Node:
        return parse(make_buffer(text), ArrayPool.with_capacity(capacity), config=config)

    return _parse


@pytest.fixture
def flat_100() -> str:
    """100-member flat object."""
    return generate_flat_document(100)


@pytest.fixture
def nested_20x25() -> str:
    """20 sections x 25 records, a little over 2000 nodes."""
    return generate_nested_document(20, 25)
