# logic/assignments.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Exhaustive enumeration of truth assignments in truth-table row order

"""Truth assignment enumeration.

For n variables there are 2^n assignments. Rows follow the conventional
truth-table layout: the first variable in alphabet order is the most
significant bit, and rows count down from all-true to all-false.

    p q
    T T
    T F
    F T
    F F
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, Tuple

from parser import ast_nodes as ast
from parser.ast_nodes import VARIABLES
from utils.logger import get_logger


def order_variables(variables: Iterable[str]) -> Tuple[str, ...]:
    """Put variable names in alphabet order (p < q < r < s).

    Raises:
        ValueError: A name is outside the alphabet or appears twice
    """
    names = list(variables)

    unknown = [name for name in names if name not in VARIABLES]
    if unknown:
        raise ValueError(f"Unknown variable(s): {', '.join(map(repr, unknown))}")

    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate variables in {names}")

    return tuple(sorted(names, key=VARIABLES.index))


class Assignments:
    """Finite, restartable sequence of every assignment over a variable set.

    Iterating twice yields the same rows in the same order.

    Attributes:
        variables: Variable names in alphabet order
    """

    def __init__(self, variables: Iterable[str]):
        self.variables = order_variables(variables)

    def __len__(self) -> int:
        return 1 << len(self.variables)

    def __getitem__(self, row: int) -> Dict[str, bool]:
        if row < 0:
            row += len(self)
        if not 0 <= row < len(self):
            raise IndexError(f"Row {row} out of range for {len(self)} rows")

        n = len(self.variables)
        i = len(self) - 1 - row
        return {
            name: bool(i & (1 << (n - 1 - j)))
            for j, name in enumerate(self.variables)
        }

    def __iter__(self) -> Iterator[Dict[str, bool]]:
        for row in range(len(self)):
            yield self[row]

    def __repr__(self) -> str:
        return f"Assignments({', '.join(self.variables)})"


def enumerate_assignments(variables: Iterable[str]) -> Assignments:
    """Build the assignment sequence for a set of variables.

    Args:
        variables: Distinct names from the alphabet, in any order

    Returns:
        Assignments over the variables sorted p < q < r < s
    """
    assignments = Assignments(variables)
    get_logger().debug(f"Enumerating {len(assignments)} assignments for {assignments!r}")
    return assignments


def variables_of(node: ast.Expr) -> Tuple[str, ...]:
    """Variables referenced anywhere in a tree, in alphabet order."""
    found = set()
    pending = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, ast.Variable):
            found.add(current.name)
        pending.extend(current.children)
    return order_variables(found)
