"""Read-only access to spreadsheet workbooks."""

import zlib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook

from swimqualifiers.errors import WorkbookReadError

Row = tuple[Any, ...]

# Sheets are parsed lazily, so a damaged sheet only fails once it is iterated.
# XML parse errors (stdlib and lxml) both derive from SyntaxError.
SHEET_READ_ERRORS = (SyntaxError, BadZipFile, zlib.error, KeyError, ValueError, OSError)


@contextmanager
def open_workbook(path: Path) -> Iterator[Workbook]:
    """Open a workbook for reading cell values, closing it afterwards.

    Raises:
        WorkbookReadError: If the file is missing, corrupt or not xlsx
    """
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, *SHEET_READ_ERRORS) as e:
        raise WorkbookReadError(f"Cannot read workbook {path.name}: {e}") from e
    try:
        yield workbook
    finally:
        workbook.close()


def sheet_rows(workbook: Workbook, sheet_name: str) -> Iterator[Row]:
    """Yield the cell values of every row in a sheet.

    Raises:
        WorkbookReadError: If the sheet's data cannot be read
    """
    try:
        yield from workbook[sheet_name].iter_rows(values_only=True)
    except SHEET_READ_ERRORS as e:
        raise WorkbookReadError(f"Cannot read sheet '{sheet_name}': {e}") from e
