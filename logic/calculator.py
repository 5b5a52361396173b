# logic/calculator.py

"""
Calculator view: turns an editor state into what the screen should show.

Each refresh is a fresh, independent call into the pure core, so there is no
parse state to keep between keystrokes. When the current text is invalid the
view carries the error and neither a result nor a table, so a table from an
earlier, valid formula can never linger on screen.
"""

from dataclasses import dataclass
from typing import Optional

from parser.exceptions import ParseError
from model.editor_state import EditorState
from .formula import parse_formula
from .truth_table import TautologyResult, TruthTable, check_tautology, build_truth_table
from utils.logger import get_logger


@dataclass(frozen=True)
class CalculatorView:
    """
    Attributes:
        state: The editor state this view was computed from.
        result: Tautology verdict, present only when evaluation was requested.
        table: Truth table, present only when the table is visible.
        error: Message describing why the current text is invalid.
        error_position: Offset of the problem in the normalized text, when known.
    """
    state: EditorState
    result: Optional[TautologyResult] = None
    table: Optional[TruthTable] = None
    error: Optional[str] = None
    error_position: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def refresh(state: EditorState, evaluate: bool = False) -> CalculatorView:
    """
    Compute the view for an editor state.

    Blank text yields an empty view. Otherwise the formula is parsed once;
    the truth table is built when the table is visible and the tautology
    verdict when ``evaluate`` is set (the "evaluate" button).
    """
    if not state.text.strip():
        return CalculatorView(state)

    try:
        formula = parse_formula(state.text)
    except ParseError as e:
        get_logger().debug(f"View refresh rejected formula: {e}")
        return CalculatorView(state, error=str(e), error_position=e.position)

    result = check_tautology(formula) if evaluate else None
    table = build_truth_table(formula) if state.table_visible else None
    return CalculatorView(state, result=result, table=table)
