from __future__ import annotations

import sys
from argparse import ArgumentParser, ArgumentTypeError, FileType
from typing import Optional, Sequence, TextIO

from .common import partition
from .version import Version


def format_argument(format_spec: str, /) -> str:
    """Validates a format spec, turning errors into ArgumentTypeError."""
    try:
        format(Version(0, 0, 0), format_spec)
    except ValueError as error:
        raise ArgumentTypeError(f"{error}")

    return format_spec


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="semv", description="parse, format and sort semantic versions")
    parser.add_argument(
        "input_file",
        help="File with one version per line. Reads from stdin by default.",
        type=FileType("rt"),
        nargs="?",
        default=sys.stdin,
    )
    parser.add_argument(
        "-f",
        "--format",
        help="Output format: G (general), N (neutral) or a field count from 1 to 5.",
        type=format_argument,
        default="G",
    )
    parser.add_argument(
        "-s",
        "--sort",
        help="Print versions in ascending precedence instead of input order.",
        action="store_true",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = create_parser().parse_args(argv)

    # get input text
    input_file: TextIO = args.input_file
    lines = [line.strip() for line in input_file]
    if input_file is not sys.stdin:
        input_file.close()

    # parse every non blank line
    versions, errors = partition(Version.parse_result(line) for line in lines if line)
    if args.sort:
        versions = sorted(versions)

    for version in versions:
        print(format(version, args.format))

    for error in errors:
        print("Invalid version:", error, file=sys.stderr)

    if errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
