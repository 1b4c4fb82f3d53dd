"""
Results file: one line per state, ``NNNNN, CODES``.

    00000,
    00001, S
    01088, WEN
"""

from pathlib import Path
from typing import Sequence, Union

from .actions import Action, parse_path, render_path
from .bitmath import STATE_COUNT
from .config import DEFAULT_UNREACHED_MARKER, validate_unreached_marker
from .solver import SolutionTable


def format_line(state: int, path: Sequence[Action]) -> str:
    """Format a single results line."""
    return f"{int(state):05d}, {render_path(path)}"


def format_results(
    table: SolutionTable,
    include_unreached: bool = False,
    unreached_marker: str = DEFAULT_UNREACHED_MARKER,
) -> list[str]:
    """
    Format a solution table as results lines in ascending state order.

    Args:
        table: Solved table
        include_unreached: Write a marker line for unreached states too
        unreached_marker: Text used in place of the path for those lines

    Returns:
        Lines without trailing newlines
    """
    if not include_unreached:
        return [format_line(state, path) for state, path in table.reached()]

    validate_unreached_marker(unreached_marker)

    lines = []
    for state in range(STATE_COUNT):
        path = table[state]
        if path is None:
            lines.append(f"{state:05d}, {unreached_marker}")
        else:
            lines.append(format_line(state, path))
    return lines


def write_results(
    table: SolutionTable,
    path: Union[str, Path],
    include_unreached: bool = False,
    unreached_marker: str = DEFAULT_UNREACHED_MARKER,
) -> None:
    """
    Write the results file.

    Any OSError raised while creating or writing the file propagates.
    """
    lines = format_results(table, include_unreached, unreached_marker)
    with open(path, "w", encoding="ascii", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")


def read_results(
    path: Union[str, Path],
    unreached_marker: str = DEFAULT_UNREACHED_MARKER,
) -> SolutionTable:
    """
    Load a results file back into a solution table.

    Raises:
        ValueError: On a malformed line, a state listed twice, or a marker
            that could be mistaken for a path
    """
    validate_unreached_marker(unreached_marker)
    table = SolutionTable()
    with open(path, encoding="ascii") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line:
                continue

            # The empty path leaves only trailing whitespace after the comma
            state_text, sep, codes = line.partition(",")
            codes = codes.strip()
            if not sep or len(state_text) != 5 or not state_text.isdigit():
                raise ValueError(f"line {lineno}: malformed results line {line!r}")

            state = int(state_text)
            if state >= STATE_COUNT:
                raise ValueError(f"line {lineno}: state {state} out of range")

            if codes == unreached_marker:
                continue

            table.record(state, parse_path(codes))
    return table
