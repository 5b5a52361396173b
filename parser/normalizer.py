# parser/normalizer.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Maps assorted operator notations onto the canonical glyph set

"""Operator notation normalization.

Users type formulas with whatever their keyboard offers: ``->`` or ``=>``
for implication, ``&&`` or ``^`` for conjunction, ``!`` for negation, the word
``xor``, or the proper Unicode glyphs. This module rewrites all of them to the
canonical set ``~ ∧ ∨ → ↔ ⊕`` and strips whitespace so the lexer only ever
sees one-character tokens.

Normalization is a single left-to-right pass with longest alternatives first,
which makes it idempotent: the canonical glyphs never take part in any
alternative, so a second pass finds nothing left to rewrite. Characters that
are not recognised pass through untouched and are rejected later by the lexer.
"""

import re

# Longest spellings first so "<->" is not read as "<" followed by "->".
_ALTERNATIVES = (
    ("<->", "↔"),
    ("<=>", "↔"),
    ("->", "→"),
    ("=>", "→"),
    ("&&", "∧"),
    ("||", "∨"),
    ("&", "∧"),
    ("^", "∧"),
    ("|", "∨"),
    ("+", "∨"),
    ("!", "~"),
    ("-", "~"),
    ("⇔", "↔"),
    ("≡", "↔"),
    ("⇒", "→"),
    ("⊃", "→"),
    ("⋀", "∧"),
    ("·", "∧"),
    ("⋁", "∨"),
    ("¬", "~"),
    ("∼", "~"),
    ("⊻", "⊕"),
)

_CANONICAL = {spelling: glyph for spelling, glyph in _ALTERNATIVES}

_PATTERN = re.compile(
    "(?i:xor)|" + "|".join(re.escape(spelling) for spelling, _ in _ALTERNATIVES)
)


def _canonical_glyph(match: re.Match) -> str:
    text = match.group(0)
    if text.lower() == "xor":
        return "⊕"
    return _CANONICAL[text]


def normalize(raw: str) -> str:
    """Rewrite a raw formula into canonical notation.

    Args:
        raw: Formula text in any supported notation

    Returns:
        The formula with whitespace removed and every operator spelled with
        its canonical glyph

    Example:
        >>> normalize("(p && q) -> !r")
        '(p∧q)→~r'
    """
    compact = "".join(raw.split())
    return _PATTERN.sub(_canonical_glyph, compact)
