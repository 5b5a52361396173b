#!/usr/bin/env python3
# run_calculator.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Command-line interface for tautology checking and truth tables

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from logic.formula import parse_formula
from logic.truth_table import check_tautology, build_truth_table
from utils.formula_reader import load_formulas, FormulaFileError
from utils.table_export import render_table, write_table_csv
from utils.logger import LogLevel, get_logger
from parser.exceptions import ParseError


def configure_logging_for_calculator(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the calculator.

    Results are reported at INFO, so INFO is the floor.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def csv_path_for(base: Path, index: int, total: int) -> Path:
    """CSV destination for the index-th formula of a run.

    A single formula writes to ``base`` itself; several formulas get a
    numeric suffix: table.csv -> table_1.csv, table_2.csv, ...
    """
    if total == 1:
        return base
    return base.with_name(f"{base.stem}_{index}{base.suffix}")


def process_formula(
    raw: str, show_table: bool, csv_path: Optional[Path] = None
) -> bool:
    """Check one formula and report on it.

    Args:
        raw: Formula text as typed
        show_table: Print the truth table
        csv_path: Where to export the truth table, if anywhere

    Returns:
        Whether the formula is a tautology

    Raises:
        ParseError: Formula is malformed
    """
    logger = get_logger()

    formula = parse_formula(raw)
    logger.formula_loaded(raw, formula.source)

    result = check_tautology(formula)
    logger.tautology_verdict(result.formula, result.variables, result.is_tautology)

    if result.counterexample is not None:
        falsified = ", ".join(
            f"{name}={'T' if value else 'F'}"
            for name, value in result.counterexample.items()
        )
        logger.info(f"   Counterexample: {falsified}")

    if show_table or csv_path is not None:
        table = build_truth_table(formula)
        if show_table:
            logger.info("")
            logger.info(render_table(table))
        if csv_path is not None:
            write_table_csv(table, csv_path)
            logger.info(f"📄 Truth table written to {csv_path}")

    return result.is_tautology


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional logic calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_calculator.py "p | !p"
  python run_calculator.py "(p & q) -> r" --table
  python run_calculator.py "p xor q" --csv table.csv
  python run_calculator.py -f formulas.txt --require-tautology

Notation:
  Variables: p q r s
  NOT  ~ ! ¬        AND  ∧ & && ^
  OR   ∨ | ||       XOR  ⊕ xor
  IMPLIES → -> =>   IFF  ↔ <-> <=>
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula to evaluate")

    parser.add_argument(
        "-f", "--file", type=Path, help="File with one formula per line"
    )

    parser.add_argument(
        "--table", action="store_true", help="Print the full truth table"
    )

    parser.add_argument(
        "--csv", type=Path, metavar="PATH", help="Export the truth table as CSV"
    )

    parser.add_argument(
        "--require-tautology",
        action="store_true",
        help="Exit with status 1 unless every formula is a tautology",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the calculator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.formula is None and args.file is None:
        parser.error("a formula or --file is required")

    configure_logging_for_calculator(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        formulas = [args.formula] if args.formula is not None else []
        if args.file is not None:
            formulas.extend(load_formulas(args.file))

        all_tautologies = True
        for index, raw in enumerate(formulas, start=1):
            csv_path = (
                csv_path_for(args.csv, index, len(formulas)) if args.csv else None
            )
            if not process_formula(raw, args.table, csv_path):
                all_tautologies = False
            if index < len(formulas):
                logger.info("")

        if args.require_tautology and not all_tautologies:
            return 1

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except FormulaFileError as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
