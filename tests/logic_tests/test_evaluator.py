# tests/logic_tests/test_evaluator.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Test suite for tree and postfix evaluation

"""Test suite for formula evaluation.

Covers the connective truth tables, the agreement between tree recursion and
the RPN stack evaluator, sub-tree evaluation and the contract errors raised
for incomplete assignments and malformed postfix sequences.
"""

import pytest
from parser import parse_text
from parser.ast_nodes import Operator
from logic.evaluator import evaluate, evaluate_rpn, to_rpn
from logic.assignments import enumerate_assignments, variables_of
from logic.exceptions import UnboundVariable, MalformedRPN, EvaluationError

T, F = True, False


class TestConnectives:
    """Truth tables of each connective over p and q."""

    # formula -> results for (p,q) = TT, TF, FT, FF
    CONNECTIVE_CASES = [
        ("p∧q", [T, F, F, F]),
        ("p∨q", [T, T, T, F]),
        ("p→q", [T, F, T, T]),
        ("p↔q", [T, F, F, T]),
        ("p⊕q", [F, T, T, F]),
        ("~p∨q", [T, F, T, T]),
    ]

    @pytest.mark.parametrize("formula, expected", CONNECTIVE_CASES)
    def test_connective_truth_table(self, formula, expected):
        tree = parse_text(formula)
        actual = [evaluate(tree, a) for a in enumerate_assignments(["p", "q"])]
        assert actual == expected

    def test_negation(self):
        tree = parse_text("~p")
        assert evaluate(tree, {"p": True}) is False
        assert evaluate(tree, {"p": False}) is True

    def test_double_negation(self):
        tree = parse_text("~~p")
        assert evaluate(tree, {"p": True}) is True


class TestRPNEquivalence:
    """Tree recursion and postfix stack evaluation agree everywhere."""

    FORMULAS = [
        "p",
        "~p",
        "p∧q∨r",
        "p→q→r",
        "p↔(q⊕~r)",
        "~(p∧q)↔(~p∨~q)",
        "((p→q)∧(q→r))→(p→r)",
        "p⊕q⊕r⊕s",
        "~(p∨~(q∧~(r→~s)))",
        "(p↔q)∧(r↔s)∨~(p⊕s)",
    ]

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_tree_and_rpn_agree(self, formula):
        tree = parse_text(formula)
        rpn = to_rpn(tree)

        for assignment in enumerate_assignments(variables_of(tree)):
            assert evaluate(tree, assignment) == evaluate_rpn(rpn, assignment), (
                f"Evaluators disagree on {formula} under {assignment}"
            )

    def test_rpn_order(self):
        rpn = to_rpn(parse_text("p∧~q"))
        assert rpn == ("p", "q", Operator.NOT, Operator.AND)

    def test_rpn_respects_grouping(self):
        assert to_rpn(parse_text("p→q→r")) == (
            "p", "q", Operator.IMPLIES, "r", Operator.IMPLIES,
        )
        assert to_rpn(parse_text("p→(q→r)")) == (
            "p", "q", "r", Operator.IMPLIES, Operator.IMPLIES,
        )


class TestSubtreeEvaluation:

    def test_any_subtree_can_be_evaluated(self):
        tree = parse_text("(p∧q)∨r")
        assignment = {"p": True, "q": False, "r": True}

        assert evaluate(tree.left, assignment) is False
        assert evaluate(tree.right, assignment) is True
        assert evaluate(tree, assignment) is True

    def test_subtree_needs_only_its_own_variables(self):
        tree = parse_text("(p∧q)∨r")
        assert evaluate(tree.left, {"p": True, "q": True}) is True


class TestContractErrors:

    def test_unbound_variable(self):
        tree = parse_text("p∧q")
        with pytest.raises(UnboundVariable) as exc_info:
            evaluate(tree, {"p": True})

        assert exc_info.value.name == "q"
        assert "q" in str(exc_info.value)
        assert isinstance(exc_info.value, EvaluationError)
        assert isinstance(exc_info.value, KeyError)

    def test_unbound_variable_in_rpn(self):
        with pytest.raises(UnboundVariable):
            evaluate_rpn(("p", "r", Operator.OR), {"p": False})

    def test_extra_variables_are_ignored(self):
        tree = parse_text("p")
        assert evaluate(tree, {"p": True, "q": False, "s": True}) is True

    @pytest.mark.parametrize("rpn", [
        (),
        ("p", "q"),
        (Operator.NOT,),
        ("p", Operator.AND),
        ("p", "q", Operator.OR, Operator.IFF),
    ])
    def test_malformed_rpn(self, rpn):
        with pytest.raises(MalformedRPN):
            evaluate_rpn(rpn, {"p": True, "q": True})
