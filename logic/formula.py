# logic/formula.py

"""
Encapsulates a parsed formula together with the normalized text it was
parsed from. Node spans index into that text, so the two always travel
together.
"""

from dataclasses import dataclass
from typing import Tuple

from parser import normalize, tokenize, parse
from parser.ast_nodes import Expr
from .assignments import variables_of


@dataclass(frozen=True)
class Formula:
    """
    Wraps the root of a parsed formula.

    Attributes:
        source: Normalized formula text.
        root: Expression tree whose spans refer to ``source``.
    """
    source: str
    root: Expr

    @property
    def variables(self) -> Tuple[str, ...]:
        """Referenced variables in alphabet order."""
        return variables_of(self.root)

    def __str__(self) -> str:
        return self.source


def parse_formula(raw: str) -> Formula:
    """Normalize, tokenize and parse raw text into a Formula.

    Raises:
        ParseError: One of its subclasses when the text is malformed.
    """
    source = normalize(raw)
    return Formula(source, parse(tokenize(source)))
