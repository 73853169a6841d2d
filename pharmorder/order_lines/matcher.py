"""
Order-line matcher - core composition engine.

For each vendor blob:
1. Candidates: catalog entries with no vendor, or the same vendor (case-insensitive)
2. Keep a candidate when its lowercase product name occurs anywhere in the blob
3. Resolve the typical quantity (unit rule); entries without one are dropped
4. Compose "{name} [spec] {qty}" fragments, deduplicated in catalog order
5. Join into "{vendor}想訂{fragment}、{fragment}…"

Substring containment is the only "was this ordered" signal; there is no
word-boundary check, so a name that is a substring of another also matches.
"""

import logging
import re
from typing import Optional

from .config import Config
from .models import CatalogEntry, MatchSummary, OrderLine, VendorBlob

logger = logging.getLogger(__name__)

# Box, grain, tablet, bottle, piece, pack, strip
UNIT_SUFFIXES = ("盒", "粒", "顆", "錠", "瓶", "支", "包", "條")
EMPTY_QTY_SENTINELS = {"nan", "none"}

ORDER_VERB = "想訂"
FRAGMENT_SEPARATOR = "、"


def ensure_qty_unit(qty: Optional[str], default_unit: str) -> str:
    """
    Resolve the display quantity for a catalog entry.

    Returns "" for missing/sentinel values, the value unchanged when it already
    carries a unit (or is descriptive text), and value + default_unit when it
    ends in a bare digit.
    """
    value = (qty or "").strip()
    if not value or value.lower() in EMPTY_QTY_SENTINELS:
        return ""
    if value.endswith(UNIT_SUFFIXES):
        return value
    if re.search(r"\d$", value):
        return value + default_unit
    return value


def compose_fragment(entry: CatalogEntry, qty: str, include_spec: bool) -> str:
    """Empty spec falls back to the name-only form even when include_spec is set."""
    if include_spec and entry.spec:
        return f"{entry.name} {entry.spec} {qty}"
    return f"{entry.name} {qty}"


def candidates_for_vendor(catalog: list[CatalogEntry], vendor_key: str) -> list[CatalogEntry]:
    """Catalog entries that may be ordered from this vendor."""
    key = vendor_key.lower()
    return [e for e in catalog if e.vendor_agnostic or e.vendor_key == key]


def match_vendor(
    blob: str,
    vendor_key: str,
    catalog: list[CatalogEntry],
    config: Config,
    summary: Optional[MatchSummary] = None,
) -> list[str]:
    """
    Collect the distinct fragments this vendor's text asks for.

    Args:
        blob: Normalized lowercase text for the vendor
        vendor_key: Vendor display string ("" for unspecified)
        catalog: All catalog entries
        config: Supplies include_spec and default_unit
        summary: Optional counters to update

    Returns:
        Fragments in catalog order, each listed once
    """
    items = []
    seen = set()

    for entry in candidates_for_vendor(catalog, vendor_key):
        if not entry.name_key or entry.name_key not in blob:
            continue

        qty = ensure_qty_unit(entry.qty, config.default_unit)
        if not qty:
            logger.debug(f"{entry.name}: no typical quantity on record, dropped")
            if summary is not None:
                summary.dropped_no_qty += 1
            continue

        fragment = compose_fragment(entry, qty, config.include_spec)
        if fragment not in seen:
            seen.add(fragment)
            items.append(fragment)

    return items


def generate_order_lines(
    blobs: VendorBlob,
    catalog: list[CatalogEntry],
    config: Config,
    summary: Optional[MatchSummary] = None,
) -> list[OrderLine]:
    """
    Build one OrderLine per vendor with at least one matched catalog entry.

    Output order follows the blob mapping; callers sort for display.
    """
    lines = []

    for vendor_key, blob in blobs.items():
        vendor_display = vendor_key or config.unspecified_vendor
        if summary is not None:
            summary.vendors += 1

        items = match_vendor(blob, vendor_key, catalog, config, summary)
        if not items:
            logger.debug(f"{vendor_display}: no catalog entries matched")
            if summary is not None:
                summary.unmatched_vendors.append(vendor_display)
            continue

        text = f"{vendor_display}{ORDER_VERB}" + FRAGMENT_SEPARATOR.join(items)
        lines.append(OrderLine(vendor=vendor_display, text=text))

        if summary is not None:
            summary.matched_vendors += 1
            summary.fragments += len(items)

    logger.info(f"Composed {len(lines)} order lines from {len(blobs)} vendors")
    return lines
