# logic/evaluator.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Truth-value evaluation of expression trees and their postfix form

"""Boolean evaluation of parsed formulas.

Two evaluators are provided and must agree on every well-formed formula and
complete assignment:

    evaluate: direct recursion over the tree through the visitor interface
    evaluate_rpn: one stack pass over the postfix (RPN) form from ``to_rpn``

Both look up connective semantics in the same table, so the only thing the
RPN path adds is the linearization and the stack discipline. Both sides of
every binary connective are always evaluated; there are no side effects to
short-circuit.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Sequence, Tuple, Union

from parser import ast_nodes as ast
from parser.ast_nodes import Operator
from .exceptions import UnboundVariable, MalformedRPN

Assignment = Mapping[str, bool]
RPNItem = Union[str, Operator]

BINARY_SEMANTICS: Dict[Operator, Callable[[bool, bool], bool]] = {
    Operator.AND: lambda a, b: a and b,
    Operator.OR: lambda a, b: a or b,
    Operator.IMPLIES: lambda a, b: (not a) or b,
    Operator.IFF: lambda a, b: a == b,
    Operator.XOR: lambda a, b: a != b,
}


def _lookup(assignment: Assignment, name: str) -> bool:
    try:
        return bool(assignment[name])
    except KeyError:
        raise UnboundVariable(name) from None


class TreeEvaluator(ast.Visitor):
    """Evaluates a tree under one fixed assignment.

    Attributes:
        assignment: Truth value for every variable the tree references
    """

    def __init__(self, assignment: Assignment):
        self.assignment = assignment

    def evaluate(self, node: ast.Expr) -> bool:
        return node.accept(self)

    def visit_variable(self, n: ast.Variable) -> bool:
        return _lookup(self.assignment, n.name)

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_binary(self, n: ast.BinaryOp) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return BINARY_SEMANTICS[n.op](left, right)


def evaluate(node: ast.Expr, assignment: Assignment) -> bool:
    """Evaluate a tree (or any sub-tree) under an assignment.

    Args:
        node: Root of the tree or sub-tree to evaluate
        assignment: Mapping from variable name to truth value

    Returns:
        Truth value of the expression

    Raises:
        UnboundVariable: The assignment omits a referenced variable
    """
    return TreeEvaluator(assignment).evaluate(node)


class _PostfixEmitter(ast.Visitor):
    def __init__(self):
        self.items: List[RPNItem] = []

    def visit_variable(self, n: ast.Variable):
        self.items.append(n.name)

    def visit_not(self, n: ast.Not):
        n.operand.accept(self)
        self.items.append(Operator.NOT)

    def visit_binary(self, n: ast.BinaryOp):
        n.left.accept(self)
        n.right.accept(self)
        self.items.append(n.op)


def to_rpn(node: ast.Expr) -> Tuple[RPNItem, ...]:
    """Linearize a tree into postfix order.

    Variables appear as their names and connectives as Operator members.

    Example:
        >>> to_rpn(parse_text("p∧~q"))
        ('p', 'q', <Operator.NOT: '~'>, <Operator.AND: '∧'>)
    """
    emitter = _PostfixEmitter()
    node.accept(emitter)
    return tuple(emitter.items)


def evaluate_rpn(rpn: Sequence[RPNItem], assignment: Assignment) -> bool:
    """Evaluate a postfix sequence with a single stack pass.

    Args:
        rpn: Sequence produced by ``to_rpn``
        assignment: Mapping from variable name to truth value

    Returns:
        Truth value of the expression

    Raises:
        UnboundVariable: The assignment omits a referenced variable
        MalformedRPN: The sequence underflows the stack or leaves more than
            one value on it
    """
    stack: List[bool] = []

    for item in rpn:
        if isinstance(item, Operator):
            if len(stack) < item.arity:
                raise MalformedRPN(f"Operator '{item.glyph}' is missing an operand")
            if item is Operator.NOT:
                stack.append(not stack.pop())
            else:
                right = stack.pop()
                left = stack.pop()
                stack.append(BINARY_SEMANTICS[item](left, right))
        else:
            stack.append(_lookup(assignment, item))

    if len(stack) != 1:
        raise MalformedRPN(f"Postfix sequence leaves {len(stack)} values on the stack")

    return stack[0]
