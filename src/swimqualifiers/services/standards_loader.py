"""Load qualifying time standards from the standards workbook."""

from collections.abc import Iterable
from pathlib import Path

from swimqualifiers.logging import get_logger
from swimqualifiers.models import Sex, StandardsTable
from swimqualifiers.services.event_parser import normalize_age, normalize_event, time_to_seconds
from swimqualifiers.services.workbook_reader import Row, open_workbook, sheet_rows

logger = get_logger(__name__)


def header_text(value: object) -> str:
    """Render a header cell as text ("13", "13&U"); blank for anything else."""
    if isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return ""


def parse_age_columns(header: Row) -> list[tuple[int, str]]:
    """Age-group columns of a header row as (column index, label) pairs.

    Column 0 holds the event names and is skipped, as are blank headers.
    """
    columns: list[tuple[int, str]] = []
    for col_idx, cell in enumerate(header):
        if col_idx == 0:
            continue
        text = header_text(cell)
        if text:
            columns.append((col_idx, normalize_age(text)))
    return columns


def parse_standards_rows(rows: Iterable[Row]) -> list[tuple[str, dict[str, float]]]:
    """Turn the rows of one standards tab into (event, {age: seconds}) entries.

    Rows without a text event name in column 0 are skipped. Cells whose time
    cannot be read simply leave that age group without a standard.
    """
    row_iter = iter(rows)
    header = next(row_iter, None)
    if header is None:
        return []

    age_columns = parse_age_columns(header)
    logger.debug("standards_header", cells=[header_text(cell) for cell in header])

    entries: list[tuple[str, dict[str, float]]] = []
    for row in row_iter:
        if not row or not isinstance(row[0], str) or not row[0].strip():
            continue

        event = normalize_event(row[0])
        if event is None:
            continue

        times: dict[str, float] = {}
        for col_idx, age in age_columns:
            if col_idx >= len(row):
                continue
            seconds = time_to_seconds(row[col_idx])
            if seconds is not None:
                times[age] = seconds

        entries.append((event, times))

    return entries


def load_time_standards(standards_file: Path) -> StandardsTable:
    """Load the 'Mens' and 'Womens' tabs into a StandardsTable.

    A missing tab leaves that sex with no standards.

    Raises:
        WorkbookReadError: If the workbook cannot be opened
    """
    table = StandardsTable()

    with open_workbook(standards_file) as workbook:
        for sex in Sex:
            table.standards.setdefault(sex, {})
            table.event_order.setdefault(sex, [])

            if sex.sheet_name not in workbook.sheetnames:
                logger.warning(
                    "standards_sheet_missing", sheet=sex.sheet_name, file=standards_file.name
                )
                continue

            entries = parse_standards_rows(sheet_rows(workbook, sex.sheet_name))
            for event, times in entries:
                table.add_event(sex, event, times)

            logger.info(
                "standards_loaded",
                sex=sex.value,
                events=table.event_count(sex),
                ages=table.age_groups(sex),
                sample_events=table.events(sex)[:5],
            )

    return table
