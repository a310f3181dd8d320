"""Write the qualifier count report workbook."""

from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font

from swimqualifiers.logging import get_logger
from swimqualifiers.models import QualifierSummary, Sex, StandardsTable

logger = get_logger(__name__)

EVENT_HEADER = "Event"
TOTAL_ATHLETES_LABEL = "Total Unique Athletes"
UNIQUE_QUALIFIERS_LABEL = "Unique Qualifiers"


def build_sheet_rows(
    sex: Sex, standards: StandardsTable, summary: QualifierSummary
) -> list[list[Any]]:
    """Lay out one sex's report: events as rows, age groups as columns.

    Layout:
        Event | 11 | 13 | 15 ...
        200Fr |  0 |  1 |  0
        ...
        (blank)
        Total Unique Athletes | ...
        Unique Qualifiers     | ...
    """
    ages = standards.age_groups(sex)

    rows: list[list[Any]] = [[EVENT_HEADER, *ages]]
    for event in standards.events(sex):
        rows.append([event, *(summary.count(sex, age, event) for age in ages)])

    rows.append([])
    rows.append(
        [TOTAL_ATHLETES_LABEL, *(summary.total_athlete_count(sex, age) for age in ages)]
    )
    rows.append(
        [UNIQUE_QUALIFIERS_LABEL, *(summary.unique_qualifier_count(sex, age) for age in ages)]
    )
    return rows


def write_report(
    output_file: Path, standards: StandardsTable, summary: QualifierSummary
) -> Path:
    """Write a 'Mens' and a 'Womens' sheet to a new workbook.

    Returns:
        The path written
    """
    workbook = Workbook()
    # Replace the default sheet with one per sex
    workbook.remove(workbook.active)

    bold = Font(bold=True)
    for sex in Sex:
        worksheet = workbook.create_sheet(title=sex.sheet_name)
        for row in build_sheet_rows(sex, standards, summary):
            worksheet.append(row)
        for cell in worksheet[1]:
            cell.font = bold

    output_file.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_file)
    logger.info("report_written", file=str(output_file))
    return output_file
