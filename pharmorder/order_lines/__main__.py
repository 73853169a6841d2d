"""
CLI entry point for vendor order-line generation.

Usage:
    python -m pharmorder.order_lines 叫藥.xlsx
    python -m pharmorder.order_lines 叫藥.xlsx --include-spec --output-csv lines.csv
    python -m pharmorder.order_lines 叫藥.xlsx --output out.xlsx --default-unit 瓶
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .adapters import WorkbookAdapter
from .config import load_config
from .pipeline import run
from .report import format_console, export_csv, generate_report_filename


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="order_lines",
        description="Vendor order lines - turn flagged low-stock notes into per-vendor order text",
    )

    parser.add_argument(
        "workbook",
        metavar="FILE",
        help="Workbook (XLSX) holding the source and catalog sheets",
    )

    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Config file (default: module's order_config.json)",
    )

    parser.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Save the workbook here instead of overwriting the input",
    )

    parser.add_argument(
        "--include-spec",
        action="store_true",
        default=None,
        help="Include the catalog spec in each fragment",
    )

    parser.add_argument(
        "--default-unit",
        default=None,
        help="Unit appended to bare numeric quantities",
    )

    parser.add_argument(
        "--output-csv",
        nargs="?",
        const="",
        metavar="FILE",
        help="Also export the order lines as CSV (default name: order_lines_YYYY-MM-DD.csv)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and print the lines without writing the output sheet",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress console output",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log skipped rows and unmatched vendors",
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return 1

    try:
        config = load_config(config_path)
        overrides = {}
        if args.include_spec is not None:
            overrides["include_spec"] = args.include_spec
        if args.default_unit is not None:
            overrides["default_unit"] = args.default_unit
        if overrides:
            config = replace(config, **overrides)

        adapter = WorkbookAdapter(args.workbook, output_path=args.output)
        result = run(adapter, config, write=not args.dry_run)

        if not args.quiet:
            print(format_console(result.lines, result.summary))
            if result.written:
                print(f"Output sheet {config.sheets.output} saved to: {adapter.output_path}")

        if args.output_csv is not None:
            output_path = Path(args.output_csv or generate_report_filename())
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                export_csv(result.lines, output=f)
            if not args.quiet:
                print(f"CSV exported to: {output_path}")

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
