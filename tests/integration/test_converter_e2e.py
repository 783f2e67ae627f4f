"""End-to-end tests for converting reading-list CSV files.

These tests run the full pipeline against files in a temporary directory,
both through convert_file and through the command-line entry point.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from lxml import etree

from mal_converter.cli import main
from mal_converter.converter import build_output_path, convert_file
from mal_converter.shared.config import Settings
from mal_converter.shared.exceptions import InputFileError, OutputWriteError

HEADER = "mal,title,type,read,rating,last_read\n"


def _parse_file(path: str | Path) -> etree._Element:
    return etree.parse(str(path)).getroot()


class TestOutputPath:
    """Tests for output path derivation."""

    @pytest.mark.parametrize(
        "input_path, expected",
        [
            ("lists/reading.csv", "lists/reading_mal.xml"),
            ("READING.CSV", "READING_mal.xml"),
            ("reading.csv.bak", "reading.csv.bak_mal.xml"),
            ("reading", "reading_mal.xml"),
            (".csv", ".csv_mal.xml"),
        ],
    )
    def test_build_output_path(self, input_path: str, expected: str):
        """Test '.csv' is replaced and other names get the suffix appended."""
        assert build_output_path(input_path) == Path(expected)


class TestConvertFile:
    """Tests for whole-file conversion."""

    def test_strict_conversion(self, sample_csv_file: Path, strict_settings: Settings):
        """Test invalid rows are skipped and the rest is written."""
        result = convert_file(sample_csv_file, settings=strict_settings)

        assert result.output_path == str(sample_csv_file.with_name("reading-list_mal.xml"))
        assert result.records_written == 5
        assert result.rows_skipped == 2
        assert result.status_counts.total == 5

        root = _parse_file(result.output_path)
        assert root.find("myinfo").findtext("user_total_manga") == "5"
        assert root.find("myinfo").findtext("user_total_onhold") == "1"
        first = root.find("manga")
        assert first.findtext("manga_mangadb_id") == "42"
        assert first.findtext("manga_title") == "Foo, Bar"
        assert first.findtext("my_start_date") == "2023-01-15"
        assert first.findtext("my_finish_date") == "2023-01-15"

        ids = [m.findtext("manga_mangadb_id") for m in root.findall("manga")]
        assert ids == ["42", "2", "13", "1706", "656"]

    def test_lenient_conversion(self, sample_csv_file: Path, lenient_settings: Settings):
        """Test every row is kept and unknown statuses default."""
        result = convert_file(sample_csv_file, settings=lenient_settings)

        assert result.records_written == 7
        assert result.rows_skipped == 0

        root = _parse_file(result.output_path)
        statuses = [m.findtext("my_status") for m in root.findall("manga")]
        assert statuses[5] == "Plan to Read"
        assert root.find("myinfo").findtext("user_total_plantoread") == "2"
        assert root.findall("manga")[6].findtext("manga_mangadb_id") == "0"

    def test_positional_layout(self, sample_csv_file: Path):
        """Test the positional layout gives the same records."""
        settings = Settings(validation_mode="strict", csv_layout="positional")

        result = convert_file(sample_csv_file, settings=settings)

        assert result.records_written == 5
        assert _parse_file(result.output_path).find("manga").findtext("manga_title") == "Foo, Bar"

    def test_dd_mm_yyyy_date_is_reordered(self, sample_csv_file: Path, strict_settings: Settings):
        """Test the DD-MM-YYYY date of Berserk is written as YYYY-MM-DD."""
        result = convert_file(sample_csv_file, settings=strict_settings)

        berserk = _parse_file(result.output_path).findall("manga")[1]
        assert berserk.findtext("my_start_date") == "2023-01-15"

    def test_explicit_output_path(self, sample_csv_file: Path, strict_settings: Settings, tmp_path: Path):
        """Test the destination can be overridden."""
        destination = tmp_path / "out" / "export.xml"
        destination.parent.mkdir()

        result = convert_file(sample_csv_file, settings=strict_settings, output_path=destination)

        assert result.output_path == str(destination)
        assert destination.exists()

    def test_strict_zero_rows_writes_nothing(self, write_csv, strict_settings: Settings):
        """Test strict mode produces no file when every row is invalid."""
        path = write_csv(HEADER + ",No Id,Reading,1,1,2020-01-01\n")

        result = convert_file(path, settings=strict_settings)

        assert result.is_written is False
        assert result.rows_skipped == 1
        assert not build_output_path(path).exists()

    def test_lenient_zero_rows_writes_empty_document(self, write_csv, lenient_settings: Settings):
        """Test lenient mode writes a well-formed empty document."""
        path = write_csv(HEADER)

        result = convert_file(path, settings=lenient_settings)

        root = _parse_file(result.output_path)
        assert result.records_written == 0
        assert root.find("myinfo").findtext("user_total_manga") == "0"
        assert root.findall("manga") == []

    def test_missing_input_raises_error(self, tmp_path: Path, strict_settings: Settings):
        """Test a missing file raises InputFileError."""
        with pytest.raises(InputFileError):
            convert_file(tmp_path / "missing.csv", settings=strict_settings)

    def test_unwritable_output_raises_error(self, sample_csv_file: Path, strict_settings: Settings, tmp_path: Path):
        """Test write failures raise OutputWriteError."""
        destination = tmp_path / "no-such-dir" / "export.xml"

        with pytest.raises(OutputWriteError) as exc_info:
            convert_file(sample_csv_file, settings=strict_settings, output_path=destination)

        assert exc_info.value.details["output_path"] == str(destination)
        assert exc_info.value.details["original_error_type"] == "FileNotFoundError"


class TestCli:
    """Tests for the command-line entry point."""

    def test_success(self, sample_csv_file: Path, capsys: pytest.CaptureFixture[str]):
        """Test a successful run exits 0 and names the output file."""
        exit_code = main([str(sample_csv_file)])

        out = capsys.readouterr().out
        expected = sample_csv_file.with_name("reading-list_mal.xml")
        assert exit_code == 0
        assert f"MAL XML file created successfully: {expected}" in out
        assert expected.exists()

    def test_missing_argument_exits_non_zero(self, capsys: pytest.CaptureFixture[str]):
        """Test usage is printed to stderr when no path is given."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code != 0
        assert "usage" in capsys.readouterr().err.lower()

    def test_file_not_found(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        """Test a missing input exits 1 without writing anything."""
        exit_code = main([str(tmp_path / "missing.csv")])

        assert exit_code == 1
        assert "File not found" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []

    def test_mode_flag_overrides_environment(self, sample_csv_file: Path):
        """Test --mode lenient keeps rows that strict mode skips."""
        assert main([str(sample_csv_file), "--mode", "lenient"]) == 0

        root = _parse_file(sample_csv_file.with_name("reading-list_mal.xml"))
        assert len(root.findall("manga")) == 7

    def test_layout_flag(self, sample_csv_file: Path):
        """Test --layout positional is accepted."""
        assert main([str(sample_csv_file), "--layout", "positional"]) == 0

    def test_strict_zero_rows_is_a_notice(self, write_csv, capsys: pytest.CaptureFixture[str]):
        """Test an all-invalid file exits 0 and reports that nothing was written."""
        path = write_csv(HEADER + "https://x/manga/1,Title,Unknown,1,1,\n")

        exit_code = main([str(path)])

        assert exit_code == 0
        assert "No comics to process" in capsys.readouterr().err
        assert not build_output_path(path).exists()

    def test_write_failure_exits_non_zero(self, sample_csv_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        """Test an unwritable destination exits 1 without the confirmation."""
        destination = tmp_path / "no-such-dir" / "export.xml"

        with patch("mal_converter.cli.logger"):
            exit_code = main([str(sample_csv_file), "--output", str(destination)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Error writing XML file" in captured.err
        assert "created successfully" not in captured.out
