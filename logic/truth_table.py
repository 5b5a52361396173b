# logic/truth_table.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Tautology checking and truth table construction

"""The calculator's two public operations.

    check_tautology: is the formula true under every assignment?
    build_truth_table: one row per assignment, one column per variable and
        per distinct compound sub-expression, ending with the formula

Both accept raw text in any supported notation, or an already parsed
Formula, and raise ParseError subclasses for malformed input. Every call
parses afresh and shares no state with previous calls.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .formula import Formula, parse_formula
from .assignments import enumerate_assignments
from .evaluator import evaluate
from .subexpressions import collect_subexpression_nodes
from utils.logger import get_logger

Row = Tuple[bool, ...]


def _as_formula(formula: Union[str, Formula]) -> Formula:
    if isinstance(formula, Formula):
        return formula
    return parse_formula(formula)


@dataclass(frozen=True)
class TautologyResult:
    """Outcome of a tautology check.

    Attributes:
        formula: Normalized formula text
        variables: Variables used, in alphabet order
        is_tautology: True when every assignment satisfies the formula
        counterexample: First falsifying assignment in row order, or None
    """

    formula: str
    variables: Tuple[str, ...]
    is_tautology: bool
    counterexample: Optional[Dict[str, bool]] = None


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        formula: Normalized formula text
        variables: Variables in alphabet order; the leading columns
        columns: Variables, then sub-expressions smallest first, then the
            formula
        rows: One tuple of booleans per assignment, aligned with columns,
            from all-true to all-false
    """

    formula: str
    variables: Tuple[str, ...]
    columns: Tuple[str, ...]
    rows: Tuple[Row, ...]

    @property
    def results(self) -> Row:
        """Values of the formula column."""
        return tuple(row[-1] for row in self.rows)

    @property
    def is_tautology(self) -> bool:
        return all(self.results)

    def column(self, label: str) -> Row:
        """Values of the column with the given label.

        Raises:
            KeyError: No column carries that label
        """
        try:
            index = self.columns.index(label)
        except ValueError:
            raise KeyError(label) from None
        return tuple(row[index] for row in self.rows)

    def describe_row(self, index: int) -> List[Tuple[str, bool]]:
        """Step list for one row: each column label with its value."""
        return list(zip(self.columns, self.rows[index]))


def check_tautology(formula: Union[str, Formula]) -> TautologyResult:
    """Decide whether a formula is true under every assignment.

    Args:
        formula: Raw formula text or a parsed Formula

    Returns:
        TautologyResult with the first counterexample when there is one

    Raises:
        ParseError: Formula text is malformed
    """
    parsed = _as_formula(formula)
    variables = parsed.variables

    counterexample = None
    for assignment in enumerate_assignments(variables):
        if not evaluate(parsed.root, assignment):
            counterexample = assignment
            break

    result = TautologyResult(
        formula=parsed.source,
        variables=variables,
        is_tautology=counterexample is None,
        counterexample=counterexample,
    )
    get_logger().debug(
        f"Tautology check for {parsed.source}: {result.is_tautology}"
    )
    return result


def build_truth_table(formula: Union[str, Formula]) -> TruthTable:
    """Evaluate a formula and each of its sub-expressions on every row.

    Args:
        formula: Raw formula text or a parsed Formula

    Returns:
        TruthTable with 2^n rows for the n variables used

    Raises:
        ParseError: Formula text is malformed

    Example:
        >>> table = build_truth_table("(p&q)|r")
        >>> table.columns
        ('p', 'q', 'r', 'p∧q', '(p∧q)∨r')
    """
    parsed = _as_formula(formula)
    variables = parsed.variables
    computed = collect_subexpression_nodes(parsed.root, parsed.source)

    rows = []
    for assignment in enumerate_assignments(variables):
        values = [assignment[name] for name in variables]
        values.extend(evaluate(node, assignment) for _, node in computed)
        rows.append(tuple(values))

    table = TruthTable(
        formula=parsed.source,
        variables=variables,
        columns=variables + tuple(label for label, _ in computed),
        rows=tuple(rows),
    )
    get_logger().table_built(parsed.source, len(table.columns), len(table.rows))
    return table
