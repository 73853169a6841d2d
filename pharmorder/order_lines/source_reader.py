"""
Source Reader - turn the flagged/grouped vendor sheet into SourceRows.

Every column is optional: an unresolved header simply yields empty strings.
"""

import logging
from typing import Any

from .config import SOURCE_HEADER_CANDIDATES
from .headers import NOT_FOUND, resolve_columns
from .models import SourceRow
from .normalize import normalize_text

logger = logging.getLogger(__name__)


def _pick_cell(row: list[Any], idx: int) -> Any:
    if idx == NOT_FOUND or idx >= len(row):
        return ""
    return row[idx]


def read_source_rows(table: list[list[Any]]) -> list[SourceRow]:
    """
    Read source rows from a 2-D table whose first row is the header.

    Args:
        table: Header row followed by data rows

    Returns:
        SourceRow per non-blank data row, in table order
    """
    if not table:
        return []

    headers = [normalize_text(h) for h in table[0]]
    col_idx = resolve_columns(headers, SOURCE_HEADER_CANDIDATES)
    logger.debug(f"Source columns resolved: {col_idx}")

    rows = []
    for row in table[1:]:
        vendor = normalize_text(_pick_cell(row, col_idx["vendor"]))
        parts = [
            normalize_text(_pick_cell(row, col_idx[name]))
            for name in ("name", "spec", "info")
        ]
        raw_text = " ".join(p for p in parts if p).strip()

        if not vendor and not raw_text:
            continue  # Fully blank row

        rows.append(SourceRow(vendor=vendor, raw_text=raw_text))

    logger.info(f"Read {len(rows)} source rows")
    return rows
