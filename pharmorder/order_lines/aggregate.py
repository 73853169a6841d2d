"""
Vendor Text Aggregator - one searchable blob of text per vendor.

Rows are grouped by vendor display string ("" is the unspecified-vendor
group) and concatenated in input order before a final normalize + lowercase.
"""

from .models import SourceRow, VendorBlob
from .normalize import normalize_text


def build_vendor_blobs(rows: list[SourceRow]) -> VendorBlob:
    """
    Build the per-vendor haystack text.

    Args:
        rows: SourceRows from the source reader

    Returns:
        Dict mapping vendor key -> normalized lowercase text
    """
    grouped: dict[str, list[str]] = {}
    for row in rows:
        key = row.vendor or ""
        if key not in grouped:
            grouped[key] = []
        grouped[key].append(row.raw_text or "")

    return {
        key: normalize_text(" ".join(texts)).lower()
        for key, texts in grouped.items()
    }
