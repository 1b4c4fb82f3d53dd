"""
Tests for the results file.
"""

import pytest

from cauldron.actions import Action
from cauldron.bitmath import STATE_COUNT
from cauldron.results import format_line, format_results, read_results, write_results
from cauldron.solver import SolutionTable


@pytest.fixture
def small_table() -> SolutionTable:
    table = SolutionTable()
    table.record(0, ())
    table.record(1, [Action.SUGAR])
    table.record(1088, [Action.SPIDER_EYE, Action.CATALYST])
    table.record(1184, [Action.SPIDER_EYE])
    return table


class TestFormat:
    """Tests for line formatting."""

    def test_line(self):
        assert format_line(1088, [Action.DILUTE, Action.SPIDER_EYE, Action.CATALYST]) == "01088, WEN"

    def test_empty_path(self):
        assert format_line(0, ()) == "00000, "

    def test_ascending_reached_only(self, small_table):
        assert format_results(small_table) == [
            "00000, ",
            "00001, S",
            "01088, EN",
            "01184, E",
        ]

    def test_include_unreached(self, small_table):
        """Every state gets a line, unreached ones with the marker."""
        lines = format_results(small_table, include_unreached=True, unreached_marker="--")
        assert len(lines) == STATE_COUNT
        assert lines[1] == "00001, S"
        assert lines[2] == "00002, --"


class TestWriteRead:
    """Tests for writing and reading the file."""

    def test_round_trip(self, small_table, tmp_path):
        path = tmp_path / "results.txt"
        write_results(small_table, path)

        assert path.read_text().splitlines()[2] == "01088, EN"
        restored = read_results(path)
        assert list(restored.reached()) == list(small_table.reached())

    def test_round_trip_with_unreached(self, small_table, tmp_path):
        path = tmp_path / "results.txt"
        write_results(small_table, path, include_unreached=True)

        restored = read_results(path)
        assert restored.reached_count == 4
        assert restored[2] is None

    def test_full_table(self, table, tmp_path):
        path = tmp_path / "results.txt"
        write_results(table, path)

        lines = path.read_text().splitlines()
        assert len(lines) == table.reached_count
        assert lines[0] == "00000, "

    def test_stripped_empty_path(self, tmp_path):
        """A line without trailing space still parses as the empty path."""
        path = tmp_path / "results.txt"
        path.write_text("00000,\n00001, S\n")
        assert read_results(path)[0] == ()

    @pytest.mark.parametrize("line", [
        "1, S",
        "abcde, S",
        "00001 S",
        "40000, S",
        "00001, SX",
    ])
    def test_malformed(self, tmp_path, line):
        path = tmp_path / "results.txt"
        path.write_text(line + "\n")
        with pytest.raises(ValueError):
            read_results(path)

    def test_duplicate_state(self, tmp_path):
        path = tmp_path / "results.txt"
        path.write_text("00001, S\n00001, S\n")
        with pytest.raises(ValueError):
            read_results(path)

    @pytest.mark.parametrize("marker", ["S", " "])
    def test_ambiguous_marker_rejected_on_write(self, small_table, tmp_path, marker):
        """Markers that would read back as a path are refused before writing."""
        path = tmp_path / "results.txt"
        with pytest.raises(ValueError, match="unreached_marker"):
            write_results(small_table, path, include_unreached=True, unreached_marker=marker)
        assert not path.exists()

    @pytest.mark.parametrize("marker", ["S", " "])
    def test_ambiguous_marker_rejected_on_read(self, small_table, tmp_path, marker):
        path = tmp_path / "results.txt"
        write_results(small_table, path)
        with pytest.raises(ValueError, match="unreached_marker"):
            read_results(path, unreached_marker=marker)

    def test_round_trip_with_custom_marker(self, small_table, tmp_path):
        """Reached and unreached states both survive a custom marker."""
        path = tmp_path / "results.txt"
        write_results(small_table, path, include_unreached=True, unreached_marker="N/A")

        restored = read_results(path, unreached_marker="N/A")
        assert restored[1] == (Action.SUGAR,)
        assert restored[2] is None
        assert list(restored.reached()) == list(small_table.reached())

    def test_write_error_propagates(self, small_table, tmp_path):
        """Failing to create the file is not swallowed."""
        with pytest.raises(OSError):
            write_results(small_table, tmp_path / "missing" / "results.txt")
