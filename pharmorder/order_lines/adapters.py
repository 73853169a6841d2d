"""
Table Adapters - bridge to the spreadsheet holding the three sheets.

The adapter pattern lets us swap implementations (in-memory for testing,
openpyxl workbook for production) without changing pipeline logic.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook

from .config import ConfigurationError

logger = logging.getLogger(__name__)


def _trim_table(rows: list[list[Any]]) -> list[list[Any]]:
    """Drop trailing rows with no values at all."""
    end = len(rows)
    while end and all(v is None or str(v).strip() == "" for v in rows[end - 1]):
        end -= 1
    return rows[:end]


class TableAdapter(ABC):
    """
    Abstract interface for sheet access.

    Tables are plain 2-D lists: the first row is the header.
    """

    @abstractmethod
    def sheet_names(self) -> list[str]:
        """Names of all sheets available."""
        pass

    @abstractmethod
    def read_table(self, name: str) -> list[list[Any]]:
        """
        Read a whole sheet in one pass.

        Raises:
            ConfigurationError: if the sheet does not exist
        """
        pass

    @abstractmethod
    def write_table(self, name: str, rows: list[list[Any]]) -> None:
        """Replace the sheet's contents with rows, creating it if needed."""
        pass


class WorkbookAdapter(TableAdapter):
    """
    XLSX workbook via openpyxl.

    Reads cached values (data_only) so formula cells yield their results.
    Writes load the workbook with formulas intact, replace one sheet, and save
    to output_path (default: the source workbook itself).
    """

    def __init__(self, path: str | Path, output_path: str | Path | None = None):
        self._path = Path(path)
        self._output_path = Path(output_path) if output_path else self._path
        if not self._path.exists():
            raise FileNotFoundError(f"Workbook not found: {self._path}")

    @property
    def output_path(self) -> Path:
        return self._output_path

    def sheet_names(self) -> list[str]:
        workbook = load_workbook(self._path, read_only=True)
        try:
            return list(workbook.sheetnames)
        finally:
            workbook.close()

    def read_table(self, name: str) -> list[list[Any]]:
        workbook = load_workbook(self._path, read_only=True, data_only=True)
        try:
            if name not in workbook.sheetnames:
                raise ConfigurationError(f"Sheet not found: {name}")
            sheet = workbook[name]
            rows = [list(row) for row in sheet.iter_rows(values_only=True)]
        finally:
            workbook.close()

        rows = _trim_table(rows)
        logger.info(f"Read {len(rows)} rows from sheet {name}")
        return rows

    def write_table(self, name: str, rows: list[list[Any]]) -> None:
        # Write into the output file if it already exists, else start from the source
        base = self._output_path if self._output_path.exists() else self._path
        workbook = load_workbook(base)

        if name in workbook.sheetnames:
            position = workbook.sheetnames.index(name)
            workbook.remove(workbook[name])
            sheet = workbook.create_sheet(name, position)
        else:
            sheet = workbook.create_sheet(name)

        for row in rows:
            sheet.append(list(row))

        workbook.save(self._output_path)
        logger.info(f"Wrote {len(rows)} rows to sheet {name} in {self._output_path}")


class InMemoryTableAdapter(TableAdapter):
    """
    In-memory adapter for programmatic test setup.

    Useful for unit tests where you want to control exact tables.
    """

    def __init__(self, tables: dict[str, list[list[Any]]] | None = None):
        self._tables = {name: [list(r) for r in rows] for name, rows in (tables or {}).items()}
        self.writes = 0

    def sheet_names(self) -> list[str]:
        return list(self._tables)

    def read_table(self, name: str) -> list[list[Any]]:
        if name not in self._tables:
            raise ConfigurationError(f"Sheet not found: {name}")
        return [list(r) for r in self._tables[name]]

    def write_table(self, name: str, rows: list[list[Any]]) -> None:
        self._tables[name] = [list(r) for r in rows]
        self.writes += 1


def new_workbook(path: str | Path, tables: dict[str, list[list[Any]]]) -> Path:
    """Create an XLSX file holding the given tables, one sheet each."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in tables.items():
        sheet = workbook.create_sheet(name)
        for row in rows:
            sheet.append(list(row))
    path = Path(path)
    workbook.save(path)
    return path
