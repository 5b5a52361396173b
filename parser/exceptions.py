# parser/exceptions.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while turning formula text into an
expression tree. Every exception derives from ParseError so callers that only
care about "the formula is invalid" can catch a single class, while the
subclasses let tests and user interfaces tell the failure modes apart.

Taxonomy:
    InvalidCharacter: character outside the variable/operator/paren alphabet
    UnbalancedParentheses: mismatched or unclosed grouping
    UnexpectedToken: token violates its grammar position
    EmptyExpression: no variable present, nothing to evaluate
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Indicates that the input formula does not conform to the grammar or
    contains structural errors that prevent building an expression tree.
    Used throughout the parsing pipeline to provide consistent error handling.

    Attributes:
        position: 0-based character offset of the problem in the normalized
            formula, or None when the problem has no single location
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class InvalidCharacter(ParseError):
    """A character that is not a variable, operator glyph or parenthesis."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Illegal character '{character}' encountered at position {position}",
            position,
        )
        self.character = character


class UnbalancedParentheses(ParseError):
    """A ')' without a matching '(' or a '(' that is never closed."""

    pass


class UnexpectedToken(ParseError):
    """A token that cannot extend the production being parsed.

    Attributes:
        token: Text of the offending token, or None at end of input
    """

    def __init__(
        self, message: str, position: Optional[int] = None, token: Optional[str] = None
    ):
        super().__init__(message, position)
        self.token = token


class EmptyExpression(ParseError):
    """The formula references no variable at all."""

    pass
