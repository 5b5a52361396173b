# parser/lexer.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for normalized propositional formula strings.

This module implements tokenization of formulas that have already been
rewritten into canonical notation by the normalizer. Every token is exactly
one character long, which keeps token positions and source positions in
lock-step.

Supported Tokens:
- Variables: p, q, r, s
- Operators: ~, ∧, ⊕, ∨, →, ↔
- Grouping: (, )

The lexer is strict: any other character, whitespace included, raises
InvalidCharacter at its position instead of being skipped.
"""

from typing import List

from sly import Lexer
from sly.lex import Token

from .exceptions import InvalidCharacter
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for canonical propositional formulas.

    Transforms normalized formula strings into token sequences for parsing.

    Attributes:
        tokens: Set of valid token types
        VAR: Variable pattern restricted to the fixed alphabet
    """

    # Valid token types for parser recognition
    tokens = {
        "VAR",
        "NOT",
        "AND",
        "XOR",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    VAR = r"[pqrs]"

    NOT = r"~"
    AND = r"∧"
    XOR = r"⊕"
    OR = r"∨"
    IMPLIES = r"→"
    IFF = r"↔"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token patterns.

        Args:
            t: SLY token object containing error context

        Raises:
            InvalidCharacter: Always raised with character and position
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise InvalidCharacter(illegal_char, error_pos)


def tokenize(expr: str) -> List[Token]:
    """Tokenize a normalized formula.

    The token stream is materialized eagerly so an illegal character fails
    here rather than halfway through parsing.

    Args:
        expr: Formula in canonical notation, without whitespace

    Returns:
        Tokens in input order, each with ``type``, ``value`` and ``index``

    Raises:
        InvalidCharacter: On the first character outside the alphabet
    """
    tokens = list(FormulaLexer().tokenize(expr))
    get_logger().debug(f"Tokenized '{expr}' into {len(tokens)} tokens")
    return tokens
