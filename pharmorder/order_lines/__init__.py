# Vendor order lines: low-stock notes + typical-quantity catalog -> order text

from .models import SourceRow, CatalogEntry, OrderLine, VendorBlob, MatchSummary
from .config import load_config, Config, SheetNames, ConfigurationError
from .normalize import normalize_text
from .headers import resolve_column, resolve_columns
from .source_reader import read_source_rows
from .catalog_loader import load_catalog
from .aggregate import build_vendor_blobs
from .matcher import ensure_qty_unit, generate_order_lines
from .report import sort_order_lines, build_output_table, format_console, export_csv
from .adapters import TableAdapter, WorkbookAdapter, InMemoryTableAdapter
from .pipeline import run, build_order_lines, RunResult

__version__ = "1.0.0"

__all__ = [
    # Models
    "SourceRow",
    "CatalogEntry",
    "OrderLine",
    "VendorBlob",
    "MatchSummary",
    # Config
    "Config",
    "SheetNames",
    "ConfigurationError",
    "load_config",
    # Readers
    "normalize_text",
    "resolve_column",
    "resolve_columns",
    "read_source_rows",
    "load_catalog",
    # Matching
    "build_vendor_blobs",
    "ensure_qty_unit",
    "generate_order_lines",
    # Output
    "sort_order_lines",
    "build_output_table",
    "format_console",
    "export_csv",
    # Adapters
    "TableAdapter",
    "WorkbookAdapter",
    "InMemoryTableAdapter",
    # Pipeline
    "run",
    "build_order_lines",
    "RunResult",
]
