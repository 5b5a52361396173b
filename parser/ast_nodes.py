# parser/ast_nodes.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Expression tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of formulas over the fixed alphabet {p, q, r, s}. Besides its
logical structure every node remembers where it came from in the normalized
source text, which is what the truth table uses to label its columns.

Node Types:
    Variable: One of the four propositional variables
    Not: Unary negation
    BinaryOp: AND, OR, IMPLIES, IFF and XOR, tagged with an Operator

Source positions:
    span: half-open [start, end) range of the node's own text
    extent: the span widened by every pair of parentheses wrapped directly
        around the node; parents are built from their children's extents

Positions are excluded from equality and hashing, so ``p∧q`` and ``(p)∧(q)``
produce equal trees.

All nodes support the visitor design pattern for traversal and evaluation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Tuple

Span = Tuple[int, int]

VARIABLES: Tuple[str, ...] = ("p", "q", "r", "s")


class Operator(Enum):
    """Canonical connectives, valued by their glyph."""

    NOT = "~"
    AND = "∧"
    XOR = "⊕"
    OR = "∨"
    IMPLIES = "→"
    IFF = "↔"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def arity(self) -> int:
        return 1 if self is Operator.NOT else 2

    def __str__(self) -> str:
        return self.value


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and evaluation operations.
    """

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_binary(self, n: BinaryOp): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def children(self) -> Tuple[Expr, ...]:
        """Direct sub-expressions, left to right."""
        raise NotImplementedError

    def __str__(self) -> str:
        """Return a fully parenthesized representation that re-parses to an
        equal tree.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable, the only leaf node.

    Attributes:
        name: One of ``p``, ``q``, ``r``, ``s``
        span: Source range of the variable letter
        extent: Source range including any wrapping parentheses
    """

    name: str
    span: Span = field(default=(0, 0), compare=False)
    extent: Span = field(default=(0, 0), compare=False)

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    @property
    def children(self) -> Tuple[Expr, ...]:
        return ()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of its operand.

    Attributes:
        operand: The expression being negated
        span: Source range from the ``~`` through the operand's extent
        extent: Source range including any wrapping parentheses
    """

    operand: Expr
    span: Span = field(default=(0, 0), compare=False)
    extent: Span = field(default=(0, 0), compare=False)

    def accept(self, v: Visitor):
        return v.visit_not(self)

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        return f"~{self.operand}"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Binary connective applied to two operands.

    Attributes:
        op: Connective, any Operator except NOT
        left: Left operand
        right: Right operand
        span: Source range from the left operand's extent to the right's
        extent: Source range including any wrapping parentheses
    """

    op: Operator
    left: Expr
    right: Expr
    span: Span = field(default=(0, 0), compare=False)
    extent: Span = field(default=(0, 0), compare=False)

    def __post_init__(self):
        if self.op is Operator.NOT:
            raise ValueError("NOT is not a binary operator")

    def accept(self, v: Visitor):
        return v.visit_binary(self)

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left}{self.op.glyph}{self.right})"


def And(left: Expr, right: Expr) -> BinaryOp:
    """Shorthand constructor for a conjunction."""
    return BinaryOp(Operator.AND, left, right)


def Or(left: Expr, right: Expr) -> BinaryOp:
    """Shorthand constructor for a disjunction."""
    return BinaryOp(Operator.OR, left, right)


def Implies(left: Expr, right: Expr) -> BinaryOp:
    """Shorthand constructor for an implication."""
    return BinaryOp(Operator.IMPLIES, left, right)


def Iff(left: Expr, right: Expr) -> BinaryOp:
    """Shorthand constructor for a biconditional."""
    return BinaryOp(Operator.IFF, left, right)


def Xor(left: Expr, right: Expr) -> BinaryOp:
    """Shorthand constructor for an exclusive or."""
    return BinaryOp(Operator.XOR, left, right)
