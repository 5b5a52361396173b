# parser/__init__.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Formula normalization, tokenization and parsing components

"""Propositional formula parsing for the logic calculator.

This module turns raw formula text into span-annotated expression trees. The
pipeline runs in one direction:

    raw text -> normalize -> tokenize -> parse -> expression tree

Normalization accepts ASCII shortcuts (``->``, ``&&``, ``!``, ``xor``...) and
alternative Unicode glyphs and rewrites them into the canonical set
``~ ∧ ⊕ ∨ → ↔``. The lexer is strict and the grammar is an LALR(1) parser
built with SLY.

Core Functions:
    normalize: Rewrites operator notation into canonical glyphs
    tokenize: Splits canonical text into one-character tokens
    parse: Builds an expression tree from a token list
    parse_text: Runs the full pipeline on raw text

Grammar Features:
    - Left-associative binary operators, implication included
    - Precedence ~ > ∧ > ⊕ > ∨ > → > ↔
    - Parenthetical grouping support
    - Distinct errors for illegal characters, unbalanced parentheses,
      unexpected tokens and formulas without variables

Example:
    >>> from parser import parse_text
    >>> ast = parse_text("(p && q) -> r")
    >>> str(ast)
    '((p∧q)→r)'
"""

from typing import Sequence

from sly.lex import Token

from .exceptions import (
    ParseError,
    InvalidCharacter,
    UnbalancedParentheses,
    UnexpectedToken,
    EmptyExpression,
)
from .normalizer import normalize
from .lexer import tokenize
from .grammar import parse_tokens
from .ast_nodes import Expr
from utils.logger import get_logger


def parse(tokens: Sequence[Token]) -> Expr:
    """Parse a token list into an expression tree.

    Uses a fresh parser instance for each invocation so no state survives
    between formulas.

    Args:
        tokens: Token list produced by ``tokenize``

    Returns:
        Root AST node with every node's span and extent set

    Raises:
        ParseError: One of its subclasses, describing the first problem found
    """
    return parse_tokens(tokens)


def parse_text(source: str) -> Expr:
    """Normalize, tokenize and parse a raw formula string.

    Args:
        source: Formula text in any supported notation

    Returns:
        Root AST node; spans refer to ``normalize(source)``

    Raises:
        ParseError: Formula is malformed

    Example:
        >>> ast = parse_text("p -> p")
        >>> # Returns BinaryOp(IMPLIES) with two Variable nodes
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    normalized = normalize(source)

    try:
        result = parse_tokens(tokenize(normalized))
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "normalize",
    "tokenize",
    "parse",
    "parse_text",
    "ParseError",
    "InvalidCharacter",
    "UnbalancedParentheses",
    "UnexpectedToken",
    "EmptyExpression",
]

__version__ = "1.0.0"
__description__ = "Propositional formula normalization and parsing components"
