"""
Catalog Loader - parse the typical-quantity lookup sheet into CatalogEntries.

The catalog schema is a fixed contract with the operator: headers are matched
exactly (after trimming), never fuzzily. 商品 and 常見叫藥數量 are required;
規格 and 廠商 may be absent.
"""

import logging
from typing import Any, Optional

from .config import CATALOG_COLUMNS, CATALOG_REQUIRED, ConfigurationError
from .models import CatalogEntry, MatchSummary
from .normalize import cell_to_text, normalize_text

logger = logging.getLogger(__name__)


def _find_column_index(headers: list[str], name: str) -> Optional[int]:
    """Exact header lookup; first occurrence wins."""
    try:
        return headers.index(name)
    except ValueError:
        return None


def load_catalog(
    table: list[list[Any]],
    sheet_name: str = "catalog",
    summary: Optional[MatchSummary] = None,
) -> list[CatalogEntry]:
    """
    Load catalog entries from a 2-D table whose first row is the header.

    Args:
        table: Header row followed by data rows
        sheet_name: Used in error messages only
        summary: Optional counters; skipped_catalog_rows is incremented per nameless row

    Returns:
        CatalogEntry per row that has a product name, in table order

    Raises:
        ConfigurationError: empty table, no data rows, or a required column missing
    """
    if not table:
        raise ConfigurationError(f"Catalog sheet {sheet_name} is empty")

    headers = [cell_to_text(h).strip() for h in table[0]]

    col_idx = {field: _find_column_index(headers, header) for field, header in CATALOG_COLUMNS.items()}
    missing = [CATALOG_COLUMNS[f] for f in CATALOG_REQUIRED if col_idx[f] is None]
    if missing:
        raise ConfigurationError(f"Catalog sheet {sheet_name} is missing columns: {missing}")

    if len(table) < 2:
        raise ConfigurationError(f"Catalog sheet {sheet_name} has no data rows")

    entries = []
    skipped = 0
    for row_num, row in enumerate(table[1:], start=2):
        def get_val(field):
            idx = col_idx.get(field)
            if idx is None or idx >= len(row):
                return ""
            return normalize_text(row[idx])

        name = get_val("name")
        if not name:
            skipped += 1
            if summary is not None:
                summary.skipped_catalog_rows += 1
            logger.debug(f"Catalog row {row_num} has no product name, skipped")
            continue

        entries.append(CatalogEntry.build(
            name=name,
            qty=get_val("qty"),
            spec=get_val("spec"),
            vendor=get_val("vendor"),
        ))

    logger.info(f"Loaded {len(entries)} catalog entries ({skipped} rows without a product name)")
    return entries
