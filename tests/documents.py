"""Deterministic JSON document generators for tests and benchmarks.

All generators produce fixed, reproducible JSON text.  No random values.
"""

from __future__ import annotations

import json
from typing import Any


def generate_flat_document(num_keys: int) -> str:
    """Flat object cycling through string, integer and real members."""
    doc: dict[str, Any] = {}
    for i in range(num_keys):
        if i % 3 == 0:
            doc[f"key_{i}"] = f"value \"{i}\"\n"
        elif i % 3 == 1:
            doc[f"key_{i}"] = i * 1000
        else:
            doc[f"key_{i}"] = i + 0.25
    return json.dumps(doc, indent=2)


def generate_nested_document(sections: int, items: int) -> str:
    """Object of ``sections`` objects, each holding an array of ``items`` records."""
    doc = {
        f"section_{i}": {
            "id": i,
            "enabled": i % 2 == 0,
            "items": [{"n": j, "label": f"item-{i}-{j}", "extra": None} for j in range(items)],
        }
        for i in range(sections)
    }
    return json.dumps(doc)


def count_nodes(text: str) -> int:
    """Number of nodes a document needs, root included."""

    def _count(value: Any) -> int:
        if isinstance(value, dict):
            return 1 + sum(_count(v) for v in value.values())
        if isinstance(value, list):
            return 1 + sum(_count(v) for v in value)
        return 1

    return _count(json.loads(text))
