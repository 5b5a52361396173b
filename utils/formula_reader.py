# utils/formula_reader.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Reader for batch files of formulas, one per line

from pathlib import Path
from typing import Iterator, List, Union

from utils.logger import get_logger


class FormulaFileError(Exception):
    """Exception raised when a formula file cannot be read."""

    pass


def read_formulas(filepath: Union[str, Path]) -> Iterator[str]:
    """Read formulas from a text file.

    Each non-blank line holds one formula. Lines whose first non-blank
    character is ``#`` are comments.

    Expected format:
        # classic tautologies
        p | !p
        (p -> q) <-> (!q -> !p)

    Args:
        filepath: Path to the formula file

    Yields:
        Formula strings in file order, stripped of surrounding whitespace

    Raises:
        FormulaFileError: If the file is missing or cannot be decoded
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FormulaFileError(f"Formula file not found: {filepath}")

    logger.debug(f"Reading formula file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            for line_num, line in enumerate(file, start=1):
                text = line.strip()
                if not text or text.startswith("#"):
                    continue
                logger.debug(f"Formula on line {line_num}: {text}")
                yield text
    except (OSError, UnicodeDecodeError) as e:
        raise FormulaFileError(f"Error reading formula file: {e}") from e


def load_formulas(filepath: Union[str, Path]) -> List[str]:
    """Read every formula from a file at once.

    Raises:
        FormulaFileError: If the file is missing, unreadable or holds no formula
    """
    formulas = list(read_formulas(filepath))
    if not formulas:
        raise FormulaFileError(f"No formulas found in {filepath}")
    return formulas
