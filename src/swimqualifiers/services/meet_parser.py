"""Discover meet result workbooks and extract normalized results from them."""

import math
from collections.abc import Iterable
from pathlib import Path

from swimqualifiers.errors import MalformedFilenameError
from swimqualifiers.logging import get_logger
from swimqualifiers.models import MeetFileInfo, MeetResult
from swimqualifiers.services.event_parser import normalize_event, time_to_seconds
from swimqualifiers.services.workbook_reader import Row, open_workbook, sheet_rows

logger = get_logger(__name__)

# Fixed layout of a meet results sheet (0-indexed columns)
NAME_COLUMN = 4  # column E
TIME_COLUMN = 9  # column J
MIN_ROW_WIDTH = TIME_COLUMN + 1

# Filename tokens, separated by "_"
COURSE_TOKEN = 2
SEX_TOKEN = 3
AGE_RANGE_TOKEN = 4


def parse_meet_filename(filename: str) -> MeetFileInfo:
    """Read course, sex and age group from a meet filename.

    Example:
        "CAN-MBSK_2025_LCM_M_00-13_Provincials.xlsx"
        -> course "LCM", sex "M", age "13"

    Raises:
        MalformedFilenameError: If the name has fewer than five tokens or the
            age range is not "XX-YY"
    """
    parts = Path(filename).stem.split("_")
    if len(parts) <= AGE_RANGE_TOKEN:
        raise MalformedFilenameError(f"Cannot parse filename: {filename}")

    age_range = parts[AGE_RANGE_TOKEN]
    age_parts = age_range.split("-")
    if len(age_parts) != 2:
        raise MalformedFilenameError(f"Invalid age range format: {age_range}")

    return MeetFileInfo(
        filename=filename,
        course=parts[COURSE_TOKEN],
        sex=parts[SEX_TOKEN],
        age=age_parts[1],
    )


def discover_meet_files(
    data_folder: Path, prefix: str, extensions: Iterable[str]
) -> list[Path]:
    """List meet files directly inside a folder, sorted by name."""
    suffixes = tuple(extensions)
    return sorted(
        path
        for path in data_folder.iterdir()
        if path.is_file() and path.name.startswith(prefix) and path.name.endswith(suffixes)
    )


def _athlete_name(value: object) -> str:
    if isinstance(value, str):
        return value.strip()
    return ""


def parse_result_rows(rows: Iterable[Row], info: MeetFileInfo, event: str) -> list[MeetResult]:
    """Extract results from the rows of one event sheet.

    Rows that are too short or have no finite positive time are skipped,
    which also drops header and spacer rows.
    """
    results: list[MeetResult] = []
    for row in rows:
        if len(row) < MIN_ROW_WIDTH:
            continue

        seconds = time_to_seconds(row[TIME_COLUMN])
        if seconds is None or not math.isfinite(seconds) or seconds <= 0:
            continue

        results.append(
            MeetResult(
                course=info.course,
                sex=info.sex,
                age=info.age,
                event=event,
                time=seconds,
                name=_athlete_name(row[NAME_COLUMN]),
            )
        )
    return results


def parse_meet_file(path: Path) -> list[MeetResult]:
    """Extract every result from a meet workbook.

    Each sheet is one event, named by its tab. Tabs with blank names are
    skipped.

    Raises:
        MalformedFilenameError: If the filename cannot be tokenized
        WorkbookReadError: If the workbook or one of its sheets cannot be read
    """
    info = parse_meet_filename(path.name)
    logger.info("meet_file_parsing", sex=info.sex, age=info.age, course=info.course)

    results: list[MeetResult] = []
    with open_workbook(path) as workbook:
        for sheet_name in workbook.sheetnames:
            event = normalize_event(sheet_name)
            if event is None:
                continue
            results.extend(parse_result_rows(sheet_rows(workbook, sheet_name), info, event))

    logger.info("meet_file_parsed", results=len(results))
    return results
