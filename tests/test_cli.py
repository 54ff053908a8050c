"""
Tests for the command-line interface.
"""
import pytest

from lstc_calendar import Calendar, cli
from lstc_calendar.cli import main, parse_date_parts
from lstc_calendar.exceptions import InvalidDateError


UNCLASSIFIED_PACK = """
name: christmas-only
entries:
  - classification: x-mas
    month: 12
    day: 25
"""


@pytest.fixture
def pack_file(tmp_path):
    path = tmp_path / "christmas.yaml"
    path.write_text(UNCLASSIFIED_PACK, encoding="utf-8")
    return path


class TestParseDateParts:
    """Tests for ISO date argument parsing."""

    def test_valid(self):
        assert parse_date_parts("2024-05-27") == (2024, 5, 27)

    def test_parts_are_not_range_checked(self):
        assert parse_date_parts("2023-02-29") == (2023, 2, 29)

    @pytest.mark.parametrize("text", ["2024/05/27", "2024-05", "tomorrow", "2024-05-27-1"])
    def test_malformed(self, text):
        with pytest.raises(InvalidDateError):
            parse_date_parts(text)


class TestClassifyCommand:
    """Tests for `classify`."""

    def test_builtin_pack(self, capsys):
        exit_code = main(["classify", "england_and_wales", "2024-05-27", "2024-05-28"])
        out = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert out[0].startswith("2024-05-27  bank_holiday")
        assert "Spring bank holiday" in out[0]
        assert "(entry #7" in out[0]
        assert out[1].startswith("2024-05-28  workday")

    def test_pack_file_and_unclassified(self, capsys, pack_file):
        exit_code = main(["classify", str(pack_file), "2024-12-25", "2024-12-26"])
        out = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert out[0].startswith("2024-12-25  x-mas")
        assert out[1] == "2024-12-26  unclassified"

    def test_invalid_date(self, capsys):
        exit_code = main(["classify", "england_and_wales", "2023-02-29", "2024-05-06"])
        captured = capsys.readouterr()

        assert exit_code == 2
        assert "LSTC_INVALID_DATE" in captured.err
        assert captured.out.startswith("2024-05-06  bank_holiday")

    def test_unknown_pack(self, capsys):
        exit_code = main(["classify", "atlantis", "2024-05-06"])

        assert exit_code == 1
        assert "LSTC_PACK_NOT_FOUND" in capsys.readouterr().err

    def test_year_out_of_range(self, capsys):
        exit_code = main(["classify", "england_and_wales", "99999999999999999999-01-01"])

        assert exit_code == 2
        assert "LSTC_INVALID_DATE" in capsys.readouterr().err

    def test_reinserted_entry_reports_winning_position(self, capsys, monkeypatch):
        calendar = Calendar()
        shared = calendar.add_entry("weekend", days_of_week=["sat", "sun"])
        calendar.add_entry("workday")
        calendar.insert(shared)
        monkeypatch.setattr(cli, "load_pack", lambda source, strict_version=True: calendar)

        assert main(["classify", "any", "2024-02-11"]) == 0
        assert "(entry #3)" in capsys.readouterr().out


class TestValidateCommand:
    """Tests for `validate`."""

    def test_valid_builtin_pack(self, capsys):
        exit_code = main(["validate", "england_and_wales"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "VALIDATION PASSED" in out
        assert "Entries: 12" in out
        assert "bank_holiday, weekend, workday" in out

    def test_invalid_pack(self, capsys, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: bad\nentries:\n  - classification: x\n    month: 13\n")

        exit_code = main(["validate", str(path)])
        out = capsys.readouterr().out

        assert exit_code == 1
        assert "VALIDATION FAILED" in out
        assert "entries.0.month" in out

    def test_version_mismatch_can_be_relaxed(self, capsys, tmp_path):
        path = tmp_path / "future.yaml"
        path.write_text('schema_version: "2.0.0"\nname: future\nentries: []\n')

        assert main(["validate", str(path)]) == 1
        assert main(["--no-strict-version", "validate", str(path)]) == 0


class TestListCommand:
    """Tests for `list` and the bare parser."""

    def test_list(self, capsys):
        assert main(["list"]) == 0
        assert capsys.readouterr().out.split() == ["england_and_wales", "us_federal"]

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out
