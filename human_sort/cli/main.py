"""Main CLI entry point for human_sort."""

import argparse
import sys

from human_sort import __version__
from human_sort.cli.commands import compare, sort
from human_sort.config import DigitClass
from human_sort.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="human-sort",
        description="Sort and compare text with numbers in human order",
        epilog="Use 'human-sort <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )

    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Compare characters by exact code point (uppercase before lowercase)",
    )
    common.add_argument(
        "--digits",
        choices=[d.value for d in DigitClass],
        default=DigitClass.ASCII.value,
        help="Which characters count as digits (default: ascii)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # human-sort sort [FILE ...]
    sort_parser = subparsers.add_parser(
        "sort",
        parents=[common],
        help="Sort lines in human order",
        description="Read lines from files (or stdin) and print them in human order",
    )
    sort_parser.add_argument("files", nargs="*", help="Files to read (default: stdin)")
    sort_parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Sort in descending order",
    )
    sort_parser.add_argument(
        "-u",
        "--unique",
        action="store_true",
        help="Drop lines that compare equal to the previous line",
    )

    # human-sort compare <left> <right>
    compare_parser = subparsers.add_parser(
        "compare",
        parents=[common],
        help="Compare two strings",
        description="Print whether LEFT is less, equal or greater than RIGHT",
    )
    compare_parser.add_argument("left", help="First string")
    compare_parser.add_argument("right", help="Second string")

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "sort":
        return sort.sort_command(args)
    elif args.command == "compare":
        return compare.compare_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
