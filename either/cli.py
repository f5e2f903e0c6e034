import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence

from either.config import Settings, parse_families
from either.either import Left, Right
from either.laws import LawFamily, check_laws, select_laws
from either.report import REPORT_FORMATS, ReportFormat, render_report


def handle_laws(
    *,
    fmt: ReportFormat,
    families: Sequence[LawFamily],
    verbose: bool,
) -> int:
    """Check the Either laws and print the rendered report."""
    laws = select_laws(families)
    if not laws:
        print("No laws matched the selected families.", file=sys.stderr)
        return 1

    report = check_laws(laws=laws)
    print(render_report(report, fmt, verbose=verbose))
    return 0 if report.passed else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="either",
        description="Tools for the Either sum type",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level (default: EITHER_LOG_LEVEL or WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: laws
    laws_parser = subparsers.add_parser(
        "laws",
        help="Check the functor, monad and applicative laws on sample values.",
    )
    laws_parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        help="Report format (default: EITHER_REPORT_FORMAT or text).",
    )
    laws_parser.add_argument(
        "--family",
        action="append",
        metavar="NAME",
        help="Only check laws of this family; repeatable. "
        f"One of: {', '.join(f.value for f in LawFamily)}.",
    )
    laws_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="List passing laws as well as failing ones.",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match Settings.from_env():
        case Right(settings):
            pass
        case Left(e):
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 2

    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(settings.log_level_number)

    match args.command:
        case "laws":
            families: Sequence[LawFamily] = settings.families
            if args.family:
                match parse_families(",".join(args.family)):
                    case Right(selected):
                        families = selected
                    case Left(e):
                        print(f"Error: {e}", file=sys.stderr)
                        return 2
            return handle_laws(
                fmt=args.format or settings.report_format,
                families=families,
                verbose=args.verbose,
            )
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main() -> int:
    """Entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
