#!/usr/bin/env python3
# run_simplifier.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Command-line interface for expression simplification with configurable logging levels

import sys
import argparse
from pathlib import Path

from expression.exceptions import ParseError, InvariantViolation
from simplifier import SimplificationReport, SimplifierConfig, simplify_expression
from simplifier.config import DEFAULT_MAX_ITERATIONS
from utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_NOT_CONVERGED = 2
EXIT_INPUT_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_INTERNAL_ERROR = 5


def read_expression_file(filepath: Path) -> str:
    """Read an expression from file.

    Args:
        filepath: Path to the expression file

    Returns:
        Expression text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Expression file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Error reading expression file: {e}") from e

    if not content:
        raise ValueError("Expression file is empty")

    return content


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def print_report(report: SimplificationReport, show_steps: bool, latex_output: bool) -> None:
    """Print the simplification result and, optionally, each step."""
    if show_steps:
        if report.steps:
            print("Steps:")
            for index, step in enumerate(report.steps, start=1):
                if latex_output:
                    print(f"  {index}. {step.law_name}: {step.before_latex} → {step.after_latex}")
                else:
                    print(f"  {index}. {step}")
        else:
            print("No simplification steps applied.")

    print(report.simplified_latex if latex_output else report.simplified)

    if not report.converged:
        print(report.message, file=sys.stderr)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Lattice Boolean Algebra Simplifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_simplifier.py "A*(A+B)"
  python run_simplifier.py "\\lnot(A \\land B)" --steps
  python run_simplifier.py -f expression.txt --verify -v
  python run_simplifier.py "AB + A!B" --latex-output

Notation:
  Variables A-Z, constants 0/1, negation !A or A', AND A*B or AB, OR A+B.
  LaTeX input (\\lnot, \\land, \\lor, \\overline{...}) is detected automatically.
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("expression", nargs="?", help="Expression to simplify")
    source.add_argument("-f", "--file", type=Path, help="Read the expression from a file")

    notation = parser.add_mutually_exclusive_group()
    notation.add_argument(
        "--latex",
        dest="input_format",
        action="store_const",
        const="latex",
        help="Treat the input as LaTeX",
    )
    notation.add_argument(
        "--plain",
        dest="input_format",
        action="store_const",
        const="plain",
        help="Treat the input as canonical notation",
    )
    parser.set_defaults(input_format="auto")

    parser.add_argument(
        "--max-iterations",
        type=_positive_int,
        default=DEFAULT_MAX_ITERATIONS,
        help="Maximum number of rewrite passes (default: %(default)s)",
    )

    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the result against the input by truth table",
    )

    parser.add_argument(
        "--latex-output", action="store_true", help="Print the result as LaTeX"
    )

    parser.add_argument(
        "--steps", action="store_true", help="Print every law application"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the simplifier application.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        text = read_expression_file(args.file) if args.file else args.expression

        config = SimplifierConfig(max_iterations=args.max_iterations, verify=args.verify)
        report = simplify_expression(text, input_format=args.input_format, config=config)
        print_report(report, show_steps=args.steps, latex_output=args.latex_output)

        return EXIT_OK if report.converged else EXIT_NOT_CONVERGED

    except ParseError as e:
        logger.error(f"Expression parsing error: {e}")
        return EXIT_PARSE_ERROR

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Expression file error: {e}")
        return EXIT_INPUT_ERROR

    except KeyboardInterrupt:
        logger.error("Simplification interrupted by user")
        return EXIT_INTERRUPTED

    except InvariantViolation as e:
        logger.error(f"Internal error: {e}")
        return EXIT_INTERNAL_ERROR

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
