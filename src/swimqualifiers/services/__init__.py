"""Service layer for swimqualifiers business logic."""

from swimqualifiers.services.age_resolver import find_best_age_match
from swimqualifiers.services.aggregator import (
    aggregate,
    count_qualifiers,
    count_total_athletes,
    count_unique_qualifiers,
)
from swimqualifiers.services.event_parser import (
    format_seconds,
    normalize_age,
    normalize_event,
    time_to_seconds,
)
from swimqualifiers.services.meet_parser import (
    discover_meet_files,
    parse_meet_file,
    parse_meet_filename,
)
from swimqualifiers.services.pipeline import PipelineResult, run_pipeline
from swimqualifiers.services.report_writer import build_sheet_rows, write_report
from swimqualifiers.services.standards_loader import load_time_standards

__all__ = [
    "aggregate",
    "build_sheet_rows",
    "count_qualifiers",
    "count_total_athletes",
    "count_unique_qualifiers",
    "discover_meet_files",
    "find_best_age_match",
    "format_seconds",
    "load_time_standards",
    "normalize_age",
    "normalize_event",
    "parse_meet_file",
    "parse_meet_filename",
    "PipelineResult",
    "run_pipeline",
    "time_to_seconds",
    "write_report",
]
