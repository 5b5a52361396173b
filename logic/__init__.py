# logic/__init__.py

"""Core evaluation interface.

This package provides:
  • evaluate / evaluate_rpn: truth value of a tree under an assignment
  • enumerate_assignments: every assignment in truth-table row order
  • collect_subexpressions: ordered truth table column labels
  • check_tautology / build_truth_table: the calculator's two operations
  • refresh: the view computed from an editor state
"""

from .evaluator import evaluate, evaluate_rpn, to_rpn
from .assignments import Assignments, enumerate_assignments, variables_of
from .subexpressions import collect_subexpressions
from .formula import Formula, parse_formula
from .truth_table import TautologyResult, TruthTable, check_tautology, build_truth_table
from .calculator import CalculatorView, refresh
from .exceptions import EvaluationError, UnboundVariable, MalformedRPN

__all__ = [
    "evaluate",
    "evaluate_rpn",
    "to_rpn",
    "Assignments",
    "enumerate_assignments",
    "variables_of",
    "collect_subexpressions",
    "Formula",
    "parse_formula",
    "TautologyResult",
    "TruthTable",
    "check_tautology",
    "build_truth_table",
    "CalculatorView",
    "refresh",
    "EvaluationError",
    "UnboundVariable",
    "MalformedRPN",
]
