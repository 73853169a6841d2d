"""
Header Resolver - map logical fields onto inconsistent sheet headers.

Two passes per field: exact match after normalization (candidates tried in
priority order), then substring containment scanning headers left to right.
"""

import re
from typing import Any, Iterable, Mapping

from .normalize import cell_to_text

NOT_FOUND = -1


def normalize_header(value: Any) -> str:
    """Drop all whitespace and lowercase."""
    return re.sub(r"\s+", "", cell_to_text(value)).lower()


def resolve_column(headers: list[Any], candidates: Iterable[str]) -> int:
    """
    Find the column index for one logical field.

    Args:
        headers: Header row cell values
        candidates: Acceptable header names, highest priority first

    Returns:
        0-based column index, or NOT_FOUND (-1)
    """
    normalized = [normalize_header(h) for h in headers]
    keys = [normalize_header(c) for c in candidates]
    keys = [k for k in keys if k]

    for key in keys:
        if key in normalized:
            return normalized.index(key)

    for i, header in enumerate(normalized):
        if any(key in header for key in keys):
            return i

    return NOT_FOUND


def resolve_columns(headers: list[Any], fields: Mapping[str, Iterable[str]]) -> dict[str, int]:
    """Resolve every field in `fields`; unresolved fields map to NOT_FOUND."""
    return {name: resolve_column(headers, candidates) for name, candidates in fields.items()}
