# parser/grammar.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

This module defines the grammar rules and parsing logic for formulas over the
variables p, q, r and s. The parser constructs span-annotated expression trees
from token streams provided by the lexer, handling operator precedence and
associativity through SLY's precedence table.

Operator Precedence (lowest to highest, all binary operators left-associative):
- IFF ('↔')
- IMPLIES ('→'), grouped left to right: p→q→r is (p→q)→r
- OR ('∨')
- XOR ('⊕')
- AND ('∧')
- NOT ('~'): right-associative prefix

Before the grammar runs, the token list is screened for the two failures that
deserve their own error class: formulas with no variable at all and
unbalanced parentheses. Anything the grammar still rejects is reported as an
unexpected token.
"""

from dataclasses import replace
from typing import Sequence

from sly import Parser
from sly.lex import Token

from .lexer import FormulaLexer
from .ast_nodes import Expr, Variable, Not, BinaryOp, Operator
from .exceptions import (
    ParseError,
    UnbalancedParentheses,
    UnexpectedToken,
    EmptyExpression,
)
from utils.logger import get_logger


def _binary(op: Operator, left: Expr, right: Expr) -> BinaryOp:
    span = (left.extent[0], right.extent[1])
    return BinaryOp(op, left, right, span=span, extent=span)


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Implements grammar rules to construct AST nodes from token streams. Each
    node records its own source span; a parenthesized group returns its inner
    node with the extent widened over the parentheses.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "IFF"),
        ("left", "IMPLIES"),
        ("left", "OR"),
        ("left", "XOR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        span = (p.index, p.expr.extent[1])
        return Not(p.expr, span=span, extent=span)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return _binary(Operator.AND, p.expr0, p.expr1)

    @_("expr XOR expr")
    def expr(self, p) -> Expr:
        """Exclusive-or operator."""
        return _binary(Operator.XOR, p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return _binary(Operator.OR, p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Expr:
        """Implication operator."""
        return _binary(Operator.IMPLIES, p.expr0, p.expr1)

    @_("expr IFF expr")
    def expr(self, p) -> Expr:
        """Biconditional operator."""
        return _binary(Operator.IFF, p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping.

        Tokens are one character each and contiguous, so the closing
        parenthesis sits right after the inner extent.
        """
        inner = p.expr
        return replace(inner, extent=(p.index, inner.extent[1] + 1))

    @_("VAR")
    def expr(self, p) -> Expr:
        """One of the four propositional variables."""
        span = (p.index, p.index + 1)
        return Variable(p.VAR, span=span, extent=span)

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            UnexpectedToken: Always raised with position information
        """
        if token:
            raise UnexpectedToken(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}",
                position=token.index,
                token=token.value,
            )

        raise UnexpectedToken("Syntax error: Unexpected end of formula")


def _check_variables(tokens: Sequence[Token]) -> None:
    if not any(tok.type == "VAR" for tok in tokens):
        raise EmptyExpression("Formula contains no variable (expected p, q, r or s)")


def _check_parentheses(tokens: Sequence[Token]) -> None:
    open_positions = []
    for tok in tokens:
        if tok.type == "LPAREN":
            open_positions.append(tok.index)
        elif tok.type == "RPAREN":
            if not open_positions:
                raise UnbalancedParentheses(
                    f"Unmatched ')' at position {tok.index}", tok.index
                )
            open_positions.pop()

    if open_positions:
        raise UnbalancedParentheses(
            f"Unclosed '(' at position {open_positions[-1]}", open_positions[-1]
        )


def parse_tokens(tokens: Sequence[Token]) -> Expr:
    """Parse a token list into an expression tree.

    Args:
        tokens: Tokens produced by ``tokenize``

    Returns:
        Root node of the span-annotated expression tree

    Raises:
        EmptyExpression: No variable token present
        UnbalancedParentheses: Grouping does not match up
        UnexpectedToken: A token violates its grammar position
        ParseError: Any other failure inside the parser machinery
    """
    logger = get_logger()

    _check_variables(tokens)
    _check_parentheses(tokens)

    try:
        ast_result = _FormulaParser().parse(iter(tokens))
    except ParseError:
        logger.debug("Parse error encountered")
        raise
    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(f"Parse failed: {exc}") from exc

    if ast_result is None:
        raise ParseError("Failed to parse formula (syntax error).")

    logger.debug(f"Successfully parsed formula into {type(ast_result).__name__}")
    return ast_result
