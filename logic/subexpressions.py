# logic/subexpressions.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Ordered extraction of distinct sub-expressions for truth table columns

"""Sub-expression extraction.

A truth table shows one computed column per distinct compound sub-expression,
smallest first, ending with the formula itself. Columns are labelled with the
exact text the user typed (after normalization), recovered by slicing the
source with each node's span.

The walk is post-order, so every sub-expression is listed before anything
that contains it. Inner nodes are labelled by their span, which leaves out
the parentheses wrapped around them: in ``(p∧q)∨r`` the inner column reads
``p∧q``. The formula column is the whole normalized source, outer
parentheses included. Labels are deduplicated by text, first occurrence wins,
and bare variables are skipped since they already have their own columns.
"""

from typing import List, Tuple

from parser import ast_nodes as ast


def _slice(source: str, span: ast.Span) -> str:
    start, end = span
    return source[start:end]


def _walk(
    node: ast.Expr, source: str, seen: set, out: List[Tuple[str, ast.Expr]]
) -> None:
    if isinstance(node, ast.Variable):
        return

    for child in node.children:
        _walk(child, source, seen, out)

    label = _slice(source, node.span)
    if label not in seen:
        seen.add(label)
        out.append((label, node))


def collect_subexpression_nodes(
    root: ast.Expr, source: str
) -> List[Tuple[str, ast.Expr]]:
    """Ordered, deduplicated (label, node) pairs for the computed columns.

    Args:
        root: Parsed formula
        source: The normalized text the formula was parsed from

    Returns:
        Pairs in post-order; the last one is the whole formula unless the
        formula is a bare variable
    """
    seen: set = set()
    out: List[Tuple[str, ast.Expr]] = []

    for child in root.children:
        _walk(child, source, seen, out)

    full_text = _slice(source, root.extent)
    if full_text not in ast.VARIABLES and (not out or out[-1][0] != full_text):
        # A proper sub-expression is always shorter, so this never duplicates
        out.append((full_text, root))

    return out


def collect_subexpressions(root: ast.Expr, source: str) -> List[str]:
    """Ordered, deduplicated labels of every compound sub-expression.

    Example:
        >>> collect_subexpressions(parse_text("(p∧q)∨r"), "(p∧q)∨r")
        ['p∧q', '(p∧q)∨r']
    """
    return [label for label, _ in collect_subexpression_nodes(root, source)]
