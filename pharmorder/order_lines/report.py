"""
Report Generator - order the lines and format them for output.

Vendor order uses ICU collation for the operator's locale (stroke order for
zh_Hant), not code point order. Produces the output sheet table, console
output and CSV export.
"""

import csv
import io
from datetime import datetime
from functools import lru_cache
from typing import Optional, TextIO

from .config import OUTPUT_HEADER
from .models import MatchSummary, OrderLine


@lru_cache
def get_collator(locale: str):
    """Cached ICU collator for a locale id such as "zh_Hant_TW"."""
    import icu

    return icu.Collator.createInstance(icu.Locale(locale))


def sort_order_lines(lines: list[OrderLine], locale: str) -> list[OrderLine]:
    """Sort order lines by vendor display name using linguistic collation."""
    collator = get_collator(locale)
    return sorted(lines, key=lambda line: collator.getSortKey(line.vendor))


def build_output_table(lines: list[OrderLine]) -> list[list[str]]:
    """Header row followed by one [vendor, text] row per line, order preserved."""
    return [list(OUTPUT_HEADER)] + [line.as_row() for line in lines]


def format_console(lines: list[OrderLine], summary: Optional[MatchSummary] = None) -> str:
    """
    Format order lines for console display.

    Args:
        lines: Sorted order lines
        summary: Optional run counters for the summary block

    Returns:
        Formatted string for console output
    """
    if not lines:
        out = ["No order lines generated."]
    else:
        out = [f"\nORDER LINES ({len(lines)})", "=" * 70]
        out.extend(line.text for line in lines)

    if summary is not None:
        out.append("\n" + "=" * 70)
        out.append("SUMMARY")
        out.append(f"  Vendors:          {summary.vendors}")
        out.append(f"  With orders:      {summary.matched_vendors}")
        out.append(f"  Fragments:        {summary.fragments}")
        out.append(f"  Dropped (no qty): {summary.dropped_no_qty}")
        out.append(f"  Skipped catalog:  {summary.skipped_catalog_rows}")
        if summary.unmatched_vendors:
            out.append(f"  No match:         {'、'.join(summary.unmatched_vendors)}")
        out.append("=" * 70)

    return "\n".join(out) + "\n"


def export_csv(lines: list[OrderLine], output: TextIO | None = None) -> str:
    """
    Export order lines as a two-column CSV with the output sheet header.

    Args:
        lines: Order lines to export
        output: Optional file handle to write to

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerows(build_output_table(lines))

    csv_content = buffer.getvalue()
    if output:
        output.write(csv_content)
    return csv_content


def generate_report_filename(extension: str = "csv") -> str:
    """Filename like "order_lines_2026-01-08.csv"."""
    date_str = datetime.now().strftime("%Y-%m-%d")
    return f"order_lines_{date_str}.{extension}"
