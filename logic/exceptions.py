# logic/exceptions.py

"""
Evaluation-time exceptions. These signal contract violations by the caller
(an incomplete assignment, a hand-built postfix sequence that does not
describe a tree), never a problem with the user's formula.
"""


class EvaluationError(RuntimeError):
    """Raised when a tree or postfix sequence cannot be evaluated."""


class UnboundVariable(EvaluationError, KeyError):
    """The assignment lacks a variable the formula references."""

    def __init__(self, name: str):
        super().__init__(f"No truth value assigned to variable '{name}'")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes
        return self.args[0]


class MalformedRPN(EvaluationError, ValueError):
    """A postfix sequence leaves the evaluation stack in an invalid state."""
