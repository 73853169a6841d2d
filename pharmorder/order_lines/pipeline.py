"""
Pipeline - one full order-line run against a TableAdapter.

Read and validate both sheets, aggregate, match and sort first; the output
sheet is only touched once all of that has succeeded.
"""

import logging
from dataclasses import dataclass, field

from .adapters import TableAdapter
from .aggregate import build_vendor_blobs
from .catalog_loader import load_catalog
from .config import Config
from .matcher import generate_order_lines
from .models import MatchSummary, OrderLine
from .report import build_output_table, sort_order_lines
from .source_reader import read_source_rows

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a run: sorted lines plus counters."""
    lines: list[OrderLine] = field(default_factory=list)
    summary: MatchSummary = field(default_factory=MatchSummary)
    source_rows: int = 0
    catalog_entries: int = 0
    written: bool = False


def build_order_lines(adapter: TableAdapter, config: Config) -> RunResult:
    """Compute sorted order lines without writing anything."""
    source_table = adapter.read_table(config.sheets.source)
    catalog_table = adapter.read_table(config.sheets.catalog)

    rows = read_source_rows(source_table)
    summary = MatchSummary()
    catalog = load_catalog(catalog_table, config.sheets.catalog, summary)

    blobs = build_vendor_blobs(rows)
    lines = generate_order_lines(blobs, catalog, config, summary)

    return RunResult(
        lines=sort_order_lines(lines, config.collation_locale),
        summary=summary,
        source_rows=len(rows),
        catalog_entries=len(catalog),
    )


def run(adapter: TableAdapter, config: Config, write: bool = True) -> RunResult:
    """
    Generate vendor order lines and replace the output sheet with them.

    Args:
        adapter: Sheet access
        config: Run configuration
        write: False computes the lines without touching the output sheet

    Returns:
        RunResult with the lines in output order
    """
    result = build_order_lines(adapter, config)

    if write:
        adapter.write_table(config.sheets.output, build_output_table(result.lines))
        result.written = True
        logger.info(f"Wrote {len(result.lines)} order lines to {config.sheets.output}")

    return result
