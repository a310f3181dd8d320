"""Shared fixtures: spreadsheet builders and a small standards table."""

import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from swimqualifiers.config import Settings
from swimqualifiers.models import Sex, StandardsTable

SheetRows = list[list[Any]]


def write_workbook(path: Path, sheets: dict[str, SheetRows]) -> Path:
    """Write a workbook with one sheet per entry, in order."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, rows in sheets.items():
        worksheet = workbook.create_sheet(title=title)
        for row in rows:
            worksheet.append(row)
    workbook.save(path)
    return path


def truncate_sheet(path: Path, member: str = "xl/worksheets/sheet1.xml") -> Path:
    """Cut a sheet's XML in half, leaving the rest of the workbook intact."""
    with zipfile.ZipFile(path) as source:
        entries = [(info, source.read(info.filename)) for info in source.infolist()]
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as target:
        for info, data in entries:
            if info.filename == member:
                data = data[: len(data) // 2]
            target.writestr(info, data)
    return path


def meet_row(name: Any, time: Any) -> list[Any]:
    """A meet results row with the name in column E and the time in column J."""
    row: list[Any] = [None] * 10
    row[0] = 1
    row[4] = name
    row[9] = time
    return row


MEET_HEADER = ["Place", "", "", "", "Name", "", "", "", "", "Time"]


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[[str, dict[str, SheetRows]], Path]:
    """Build a workbook under tmp_path."""

    def _make(filename: str, sheets: dict[str, SheetRows]) -> Path:
        return write_workbook(tmp_path / filename, sheets)

    return _make


@pytest.fixture
def standards_table() -> StandardsTable:
    """Men and women standards for a few events at ages 11, 13 and 15."""
    table = StandardsTable()
    table.add_event(Sex.MEN, "200Fr", {"11": 150.0, "13": 130.0, "15": 120.0})
    table.add_event(Sex.MEN, "100Bu", {"11": 80.0, "13": 70.0, "15": 65.0})
    table.add_event(Sex.WOMEN, "200Fr", {"11": 155.0, "13": 135.0, "15": 125.0})
    return table


@pytest.fixture
def pipeline_settings(tmp_path: Path) -> Settings:
    """Settings pointing at an empty layout under tmp_path."""
    data_folder = tmp_path / "data"
    data_folder.mkdir()
    return Settings(
        _env_file=None,
        standards_file=tmp_path / "timestandards.xlsx",
        data_folder=data_folder,
        output_file=tmp_path / "out" / "qualifier_counts.xlsx",
        meet_file_prefix="X_",
    )
