"""The batch run: standards, meet files, aggregation, report.

Stages run strictly in order. The report is only written once every input
has been read and aggregated, so a failed run leaves no output file.
"""

from pathlib import Path

from pydantic import BaseModel

from swimqualifiers.config import Settings
from swimqualifiers.errors import ConfigurationError, MalformedFilenameError, WorkbookReadError
from swimqualifiers.logging import bind_context, clear_context, get_logger
from swimqualifiers.models import MeetResult, QualifierSummary, StandardsTable, age_sort_key
from swimqualifiers.services.aggregator import aggregate
from swimqualifiers.services.meet_parser import discover_meet_files, parse_meet_file
from swimqualifiers.services.report_writer import write_report
from swimqualifiers.services.standards_loader import load_time_standards

logger = get_logger(__name__)


class PipelineResult(BaseModel):
    """Outcome of a completed run."""

    output_file: Path
    standards: StandardsTable
    summary: QualifierSummary
    files_parsed: int
    files_failed: int
    results_extracted: int


def _describe_directory(directory: Path) -> str:
    entries = sorted(
        f"[DIR] {entry.name}" if entry.is_dir() else entry.name for entry in directory.iterdir()
    )
    return ", ".join(entries) or "(empty)"


def load_standards(settings: Settings) -> StandardsTable:
    """Load the standards workbook named in settings.

    Raises:
        ConfigurationError: If the file is missing or unreadable
    """
    standards_file = settings.standards_file
    if not standards_file.exists():
        cwd = Path.cwd()
        raise ConfigurationError(
            f"Time standards file not found: {standards_file} "
            f"(looked in {cwd}; contains: {_describe_directory(cwd)})"
        )

    logger.info("standards_loading", file=str(standards_file))
    try:
        return load_time_standards(standards_file)
    except WorkbookReadError as e:
        raise ConfigurationError(str(e)) from e


def find_meet_files(settings: Settings) -> list[Path]:
    """Locate meet files in the configured data folder.

    Raises:
        ConfigurationError: If the folder is missing or holds no meet files
    """
    data_folder = settings.data_folder
    if not data_folder.is_dir():
        raise ConfigurationError(f"Data folder not found: {data_folder}")

    meet_files = discover_meet_files(
        data_folder, settings.meet_file_prefix, settings.meet_file_extensions
    )
    logger.info("meet_files_found", folder=str(data_folder), count=len(meet_files))

    if not meet_files:
        raise ConfigurationError(
            f"No meet files found in {data_folder} "
            f"(expected names starting with '{settings.meet_file_prefix}')"
        )
    return meet_files


def extract_results(meet_files: list[Path]) -> tuple[list[MeetResult], int]:
    """Parse every meet file, skipping files that fail.

    Returns:
        Tuple of (results in file order, number of files that failed)
    """
    all_results: list[MeetResult] = []
    failed = 0

    for path in meet_files:
        bind_context(meet_file=path.name)
        try:
            all_results.extend(parse_meet_file(path))
        except (MalformedFilenameError, WorkbookReadError) as e:
            failed += 1
            logger.warning("meet_file_skipped", error=str(e))
        finally:
            clear_context()

    return all_results, failed


def _log_result_overview(results: list[MeetResult]) -> None:
    ages = sorted({result.age for result in results}, key=age_sort_key)
    events = sorted({result.event for result in results})
    logger.info("results_extracted", total=len(results), ages=ages, sample_events=events[:5])
    for result in results[:3]:
        logger.debug("sample_result", result=str(result))


def run_pipeline(settings: Settings) -> PipelineResult:
    """Load standards, parse meet files, count qualifiers and write the report.

    Raises:
        ConfigurationError: If the standards file or data folder is missing,
            or no meet files are found
    """
    standards = load_standards(settings)
    meet_files = find_meet_files(settings)

    results, failed = extract_results(meet_files)
    _log_result_overview(results)

    summary = aggregate(results, standards)
    output_file = write_report(settings.output_file, standards, summary)

    return PipelineResult(
        output_file=output_file,
        standards=standards,
        summary=summary,
        files_parsed=len(meet_files) - failed,
        files_failed=failed,
        results_extracted=len(results),
    )
