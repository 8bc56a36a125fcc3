import argparse
import logging
import sys

from godelnum.config import Settings
from godelnum.errors import GodelError
from godelnum.numerals import NumeralStyle
from godelnum.report import axioms_report, demo_report, numeral_report, table_report
from godelnum.result import Err, Ok


def handle_numeral(n: int, style: str | None, settings: Settings) -> int:
    """Print the numeral for *n*; exit code 2 if it cannot be built."""
    chosen = NumeralStyle(style) if style else settings.numeral_style
    try:
        print(numeral_report(n, chosen, settings.numeral_limit), end="")
    except GodelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godelnum",
        description="Gödel numbering of Peano arithmetic terms and formulas",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: GODELNUM_LOG_LEVEL or WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: demo
    subparsers.add_parser(
        "demo",
        help="Encode sample terms and axioms and build the Gödel sentence.",
    )

    # Command: table
    subparsers.add_parser("table", help="Print the symbol-code table.")

    # Command: axioms
    subparsers.add_parser(
        "axioms", help="Print the Peano axioms with their Gödel numbers."
    )

    # Command: numeral
    numeral_parser = subparsers.add_parser(
        "numeral", help="Print the numeral term for N and its Gödel number."
    )
    numeral_parser.add_argument("n", type=int, metavar="N", help="A natural number.")
    numeral_parser.add_argument(
        "--style",
        choices=[s.value for s in NumeralStyle],
        default=None,
        help="Numeral style (default: GODELNUM_NUMERAL_STYLE or compact).",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "demo":
            print(demo_report(settings), end="")
            return 0
        case "table":
            print(table_report(), end="")
            return 0
        case "axioms":
            print(axioms_report(), end="")
            return 0
        case "numeral":
            return handle_numeral(args.n, args.style, settings)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


if __name__ == "__main__":
    sys.exit(main())
