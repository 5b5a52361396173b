# tests/logic_tests/test_subexpressions.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Test suite for ordered sub-expression extraction

"""Test suite for sub-expression extraction.

Column labels must come out bottom-up (every sub-expression before anything
containing it), deduplicated by text, without bare variables, and end with
the full formula text.
"""

import pytest
from parser import parse_text, normalize
from logic.subexpressions import collect_subexpressions, collect_subexpression_nodes


def _columns(raw: str):
    source = normalize(raw)
    return collect_subexpressions(parse_text(source), source)


class TestSubexpressionExtraction:
    """Test cases for column label extraction."""

    EXTRACTION_CASES = [
        ("(p∧q)∨r", ["p∧q", "(p∧q)∨r"]),
        ("p∧q∨r", ["p∧q", "p∧q∨r"]),
        ("p∨q∧r", ["q∧r", "p∨q∧r"]),
        ("~p", ["~p"]),
        ("~~p", ["~p", "~~p"]),
        ("~(p∧q)", ["p∧q", "~(p∧q)"]),
        ("p→q→r", ["p→q", "p→q→r"]),
        ("p→(q→r)", ["q→r", "p→(q→r)"]),
        ("(p→q)∧(q→r)", ["p→q", "q→r", "(p→q)∧(q→r)"]),
        (
            "((p→q)∧(q→r))→(p→r)",
            ["p→q", "q→r", "(p→q)∧(q→r)", "p→r", "((p→q)∧(q→r))→(p→r)"],
        ),
        ("~p∨q", ["~p", "~p∨q"]),
        # Whole formula keeps its own outer parentheses
        ("(p∧q)", ["(p∧q)"]),
        ("((p∧q))", ["((p∧q))"]),
        ("(p)", ["(p)"]),
        # Bare variable has no computed column
        ("p", []),
        # ASCII input is labelled in canonical notation
        ("(p && q) | r", ["p∧q", "(p∧q)∨r"]),
    ]

    @pytest.mark.parametrize("formula, expected", EXTRACTION_CASES)
    def test_extraction_order(self, formula, expected):
        """Test labels come out bottom-up and end with the formula.

        Args:
            formula: Input formula
            expected: Expected ordered labels
        """
        assert _columns(formula) == expected

    DEDUPLICATION_CASES = [
        ("(p∧q)∨(p∧q)", ["p∧q", "(p∧q)∨(p∧q)"]),
        ("~p∧~p", ["~p", "~p∧~p"]),
        ("(p∨q)∧(p∨q)∧r", ["p∨q", "(p∨q)∧(p∨q)", "(p∨q)∧(p∨q)∧r"]),
        ("p∧q∨(p∧q)", ["p∧q", "p∧q∨(p∧q)"]),
    ]

    @pytest.mark.parametrize("formula, expected", DEDUPLICATION_CASES)
    def test_repeated_text_collapses(self, formula, expected):
        """Test repeated sub-expressions produce a single column.

        Args:
            formula: Formula with a repeated sub-expression
            expected: Expected ordered labels
        """
        columns = _columns(formula)
        assert columns == expected
        assert len(columns) == len(set(columns))

    def test_subexpressions_precede_containers(self):
        formula = "~(p∧(q∨~r))↔(s→p)"
        columns = _columns(formula)

        for i, label in enumerate(columns):
            for later in columns[i + 1:]:
                assert later not in label, f"{later} is contained in earlier {label}"

        assert columns[-1] == formula

    def test_nodes_match_labels(self):
        source = "(p∧q)∨~r"
        pairs = collect_subexpression_nodes(parse_text(source), source)

        assert [label for label, _ in pairs] == ["p∧q", "~r", "(p∧q)∨~r"]
        assert str(pairs[0][1]) == "(p∧q)"
        assert str(pairs[1][1]) == "~r"
