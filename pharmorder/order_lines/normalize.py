"""
Cell text normalization.

Strips the safe-stock annotations the upstream stock scan appends to drug
names, e.g. "Mesyrel (兩倍安全庫存: 10)", and collapses whitespace.
"""

import re
from typing import Any


# Half-width and full-width parentheses/colons are both accepted
DOUBLE_SAFE_STOCK_PATTERN = re.compile(r"\s*[（(]兩倍安全庫存[:：][^)）]*[)）]\s*")
SAFE_STOCK_PATTERN = re.compile(r"\s*[（(]安全庫存[:：][^)）]*[)）]\s*")
WHITESPACE_PATTERN = re.compile(r"\s+")


def cell_to_text(value: Any) -> str:
    """Render a raw cell value as text; None becomes "" and 30.0 becomes "30"."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_text(value: Any) -> str:
    """
    Normalize a cell value for matching and display.

    Removes every double/single safe-stock annotation and collapses runs of
    whitespace to one space. Idempotent.
    """
    text = cell_to_text(value)
    text = DOUBLE_SAFE_STOCK_PATTERN.sub(" ", text)
    text = SAFE_STOCK_PATTERN.sub(" ", text)
    return WHITESPACE_PATTERN.sub(" ", text.strip())
