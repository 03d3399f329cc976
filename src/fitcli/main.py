"""
CLI main entry point for Eve Compare Fits.

Thin wrapper around the engine - no business logic here. This is the only
place that turns engine errors into messages and exit codes.
"""

import argparse
import logging
import sys

from fitengine import FitRunner, __version__
from fitengine.loader import FileOpenError
from fitengine.parser import FitParseError

from .output import print_banner, print_diff_report, print_loadout

FLAGS = ("--version", "--justparse", "--verbose")


def normalize_flags(argv: list[str]) -> list[str]:
    """
    Lower-case known long flags so ``--JustParse`` works like ``--justparse``.

    Args:
        argv: Raw command-line arguments (without the program name)

    Returns:
        Arguments with known flags normalized
    """
    return [arg.lower() if arg.lower() in FLAGS else arg for arg in argv]


class FitArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments, like every other failure."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = FitArgumentParser(
        prog="eve-compare-fits",
        description="Compare two Eve Online ship fits and list what to remove and add.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s old_fit.txt new_fit.txt
  %(prog)s --justparse fit1.txt fit2.txt fit3.txt
  %(prog)s --version
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Fit files: exactly two to compare, or any number with --justparse",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the version and exit",
    )

    parser.add_argument(
        "--justparse",
        action="store_true",
        help="Parse and print each fit file without comparing",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser and differ details to stderr",
    )

    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(normalize_flags(argv))


def setup_logging(verbose: bool) -> None:
    """Send engine logs to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Orchestrates the CLI workflow:
    1. Parse arguments
    2. Parse each fit (--justparse) or compare two fits
    3. Display results

    Raises:
        SystemExit: With status 1 on bad or missing arguments, unreadable files
            or parse errors
    """
    if argv is None:
        argv = sys.argv[1:]

    # --version wins over everything else, including arguments argparse would reject
    if "--version" in normalize_flags(argv):
        print(__version__)
        sys.exit(0)

    args = parse_arguments(argv)

    setup_logging(args.verbose)

    # Identify the program
    print_banner(__version__)

    runner = FitRunner()

    try:
        if args.justparse:
            for path, loadout in runner.inspect(args.files):
                print_loadout(path, loadout)
            sys.exit(0)

        if len(args.files) != 2:
            print("Please provide 2 Fit files for comparison.", file=sys.stderr)
            sys.exit(1)

        report = runner.compare(args.files[0], args.files[1])

    except FileOpenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except FitParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_diff_report(report)


if __name__ == "__main__":
    main()
