# tests/integration_tests/test_table_export.py

"""CSV export, text rendering and formula file reading."""

import csv

import pytest
from logic import build_truth_table
from utils.table_export import table_to_csv, write_table_csv, render_table
from utils.formula_reader import read_formulas, load_formulas, FormulaFileError


def test_csv_quotes_every_field():
    text = table_to_csv(build_truth_table("~p"))
    assert text == '"p","~p"\n"T","F"\n"F","T"\n'


def test_csv_round_trips_through_reader(tmp_path):
    table = build_truth_table("(p∧q)∨r")
    path = write_table_csv(table, tmp_path / "t.csv")

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))

    assert tuple(rows[0]) == table.columns
    assert len(rows) == 1 + len(table.rows)
    assert rows[1] == ["T"] * 5


def test_csv_header_keeps_glyphs():
    text = table_to_csv(build_truth_table("p↔q"))
    assert text.splitlines()[0] == '"p","q","p↔q"'


def test_render_table_layout():
    lines = render_table(build_truth_table("p∧q")).splitlines()
    assert len(lines) == 2 + 4
    assert lines[0].split(" | ") == ["p", "q", "p∧q"]
    assert set(lines[1]) <= {"-", "+"}
    assert [cell.strip() for cell in lines[2].split(" | ")] == ["T", "T", "T"]
    assert [cell.strip() for cell in lines[-1].split(" | ")] == ["F", "F", "F"]


def test_read_formulas_skips_comments_and_blanks(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("# header\n\n  p | q  \n   # indented comment\np -> p\n", encoding="utf-8")
    assert list(read_formulas(path)) == ["p | q", "p -> p"]


def test_missing_file(tmp_path):
    with pytest.raises(FormulaFileError):
        list(read_formulas(tmp_path / "nope.txt"))


def test_load_formulas_requires_content(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text("\n# only comments\n", encoding="utf-8")
    with pytest.raises(FormulaFileError):
        load_formulas(path)
