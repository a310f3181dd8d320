"""Tests for meet file discovery and result extraction."""

import pytest
from conftest import MEET_HEADER, meet_row, truncate_sheet

from swimqualifiers.errors import MalformedFilenameError, WorkbookReadError
from swimqualifiers.models import MeetFileInfo
from swimqualifiers.services.meet_parser import (
    discover_meet_files,
    parse_meet_file,
    parse_meet_filename,
    parse_result_rows,
)

INFO = MeetFileInfo(filename="X_X_LCM_M_00-13.xlsx", course="LCM", sex="M", age="13")


class TestParseMeetFilename:
    """Tests for filename tokenizing."""

    def test_tokens(self):
        """Course, sex and the upper age come from fixed positions."""
        info = parse_meet_filename("CAN-MBSK_2025_LCM_M_00-13_Provincials.xlsx")
        assert info.course == "LCM"
        assert info.sex == "M"
        assert info.age == "13"

    def test_exactly_five_tokens(self):
        """The extension does not count as part of the age token."""
        info = parse_meet_filename("CAN-MBSK_2025_SCM_F_14-15.xls")
        assert info.sex == "F"
        assert info.age == "15"

    def test_too_few_tokens(self):
        """Fewer than five tokens is malformed."""
        with pytest.raises(MalformedFilenameError, match="Cannot parse filename"):
            parse_meet_filename("CAN-MBSK_2025_LCM_M.xlsx")

    @pytest.mark.parametrize("age_range", ["13", "00-13-15"])
    def test_bad_age_range(self, age_range):
        """The age token must be 'XX-YY'."""
        with pytest.raises(MalformedFilenameError, match="Invalid age range format"):
            parse_meet_filename(f"CAN-MBSK_2025_LCM_M_{age_range}_Meet.xlsx")


class TestDiscoverMeetFiles:
    """Tests for finding meet files in the data folder."""

    def test_prefix_and_extension_filter(self, tmp_path):
        """Only prefixed spreadsheet files are picked, sorted by name."""
        for name in [
            "CAN-MBSK_b_LCM_M_00-13.xlsx",
            "CAN-MBSK_a_LCM_F_00-13.xls",
            "CAN-MBSK_c_LCM_M_00-13.csv",
            "OTHER_a_LCM_M_00-13.xlsx",
        ]:
            (tmp_path / name).write_bytes(b"")
        (tmp_path / "CAN-MBSK_dir.xlsx").mkdir()

        found = discover_meet_files(tmp_path, "CAN-MBSK_", (".xlsx", ".xls"))

        assert [p.name for p in found] == [
            "CAN-MBSK_a_LCM_F_00-13.xls",
            "CAN-MBSK_b_LCM_M_00-13.xlsx",
        ]

    def test_empty_folder(self, tmp_path):
        """No files, empty list."""
        assert discover_meet_files(tmp_path, "CAN-MBSK_", (".xlsx",)) == []


class TestParseResultRows:
    """Tests for turning sheet rows into results."""

    def test_result_fields(self):
        """A row yields a result with filename metadata and the sheet's event."""
        results = parse_result_rows([meet_row("A. Swimmer", "2:05.00")], INFO, "200Fr")

        assert len(results) == 1
        result = results[0]
        assert result.course == "LCM"
        assert result.sex == "M"
        assert result.age == "13"
        assert result.event == "200Fr"
        assert result.time == pytest.approx(125.0)
        assert result.name == "A. Swimmer"

    def test_header_and_blank_times_skipped(self):
        """Rows without a readable positive time are dropped."""
        rows = [
            tuple(MEET_HEADER),
            meet_row("No Time", None),
            meet_row("Scratch", "NS"),
            meet_row("Zero", 0),
            meet_row("Negative", -3.0),
            meet_row("Real", 61.2),
        ]
        results = parse_result_rows(rows, INFO, "100Fr")
        assert [r.name for r in results] == ["Real"]

    @pytest.mark.parametrize("time", ["nan", "-nan", "+nan", "1:nan", "inf", "-inf", "1:inf"])
    def test_non_finite_times_skipped(self, time):
        """NaN and infinite times are dropped like any unreadable time."""
        rows = [meet_row("Junk", time), meet_row("Real", 60.0)]
        results = parse_result_rows(rows, INFO, "100Fr")
        assert [r.name for r in results] == ["Real"]

    def test_short_rows_skipped(self):
        """Rows without a time column are ignored."""
        rows = [(1, None, None, None, "Short", None, None, None, 60.0)]
        assert parse_result_rows(rows, INFO, "100Fr") == []

    def test_missing_name(self):
        """A result without a text name keeps an empty name."""
        results = parse_result_rows([meet_row(None, 60.0), meet_row(1234, 61.0)], INFO, "100Fr")
        assert [r.name for r in results] == ["", ""]

    def test_name_trimmed(self):
        """Names are stripped of surrounding whitespace."""
        results = parse_result_rows([meet_row("  B. Swimmer ", 60.0)], INFO, "100Fr")
        assert results[0].name == "B. Swimmer"


class TestParseMeetFile:
    """Tests for reading a whole meet workbook."""

    def test_each_sheet_is_an_event(self, make_workbook):
        """Sheet names are normalized into events."""
        path = make_workbook(
            "X_X_LCM_M_00-13_Meet.xlsx",
            {
                "200 Free": [MEET_HEADER, meet_row("A. Swimmer", "2:05.00")],
                "100 Fly": [MEET_HEADER, meet_row("A. Swimmer", 68.0), meet_row("C. Swimmer", 75.0)],
            },
        )

        results = parse_meet_file(path)

        assert [(r.event, r.name) for r in results] == [
            ("200Fr", "A. Swimmer"),
            ("100Bu", "A. Swimmer"),
            ("100Bu", "C. Swimmer"),
        ]
        assert all(r.sex == "M" and r.age == "13" for r in results)

    def test_blank_sheet_name_skipped(self, make_workbook):
        """A sheet whose name normalizes to nothing is ignored."""
        path = make_workbook(
            "X_X_LCM_F_00-11_Meet.xlsx",
            {
                " ": [meet_row("Ignored", 60.0)],
                "50 Back": [meet_row("D. Swimmer", 40.0)],
            },
        )

        results = parse_meet_file(path)

        assert [r.name for r in results] == ["D. Swimmer"]

    def test_malformed_filename(self, make_workbook):
        """Bad filenames fail before the workbook is opened."""
        path = make_workbook("X_Meet.xlsx", {"50 Free": [meet_row("A", 30.0)]})
        with pytest.raises(MalformedFilenameError):
            parse_meet_file(path)

    def test_damaged_sheet(self, make_workbook):
        """A sheet whose XML is cut short raises WorkbookReadError."""
        path = make_workbook(
            "X_X_LCM_M_00-13_Meet.xlsx",
            {"200 Free": [MEET_HEADER] + [meet_row(f"Swimmer {i}", 120.0 + i) for i in range(20)]},
        )
        truncate_sheet(path)

        with pytest.raises(WorkbookReadError, match="Cannot read"):
            parse_meet_file(path)

    def test_unreadable_workbook(self, tmp_path):
        """Files that are not xlsx raise WorkbookReadError."""
        path = tmp_path / "X_X_LCM_M_00-13_Meet.xls"
        path.write_bytes(b"\xd0\xcf\x11\xe0legacy")
        with pytest.raises(WorkbookReadError):
            parse_meet_file(path)
