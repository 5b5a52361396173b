# utils/table_export.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# CSV export and plain-text rendering of truth tables

import csv
import io
from pathlib import Path
from typing import List, Sequence, TextIO, Union

from logic.truth_table import TruthTable
from utils.logger import get_logger


def _cell(value: bool) -> str:
    return "T" if value else "F"


def write_csv(table: TruthTable, stream: TextIO) -> None:
    """Write a truth table as CSV to an open text stream.

    The header line holds the column labels and every following line one row.
    All fields are quoted, booleans are written as T or F.

    Args:
        table: Truth table to export
        stream: Text stream opened with ``newline=""``
    """
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(table.columns)
    for row in table.rows:
        writer.writerow([_cell(value) for value in row])


def table_to_csv(table: TruthTable) -> str:
    """Render a truth table as CSV text.

    Example:
        >>> print(table_to_csv(build_truth_table("~p")))
        "p","~p"
        "T","F"
        "F","T"
    """
    buffer = io.StringIO()
    write_csv(table, buffer)
    return buffer.getvalue()


def write_table_csv(table: TruthTable, filepath: Union[str, Path]) -> Path:
    """Export a truth table to a CSV file (UTF-8, so glyphs survive).

    Args:
        table: Truth table to export
        filepath: Destination path, overwritten if it exists

    Returns:
        Path the table was written to
    """
    path = Path(filepath)
    with open(path, "w", newline="", encoding="utf-8") as file:
        write_csv(table, file)

    get_logger().debug(f"Wrote {len(table.rows)} rows to {path}")
    return path


def render_table(table: TruthTable) -> str:
    """Render a truth table as an aligned plain-text grid."""
    widths = [max(len(label), 1) for label in table.columns]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.center(width) for cell, width in zip(cells, widths))

    lines: List[str] = [line(table.columns)]
    lines.append("-+-".join("-" * width for width in widths))
    for row in table.rows:
        lines.append(line([_cell(value) for value in row]))
    return "\n".join(lines)
