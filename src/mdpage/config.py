#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Command line handling for the Markdown to HTML page converter

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from mdpage.errors import ConfigurationError

STDIO = "-"
DEFAULT_TITLE = "Untitled Document"
PAGE_MODE = "page"
FRAGMENT_MODE = "fragment"
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


@dataclass(frozen=True)
class Config:
    inputs: Tuple[str, ...] = (STDIO,)
    output: str = STDIO
    front_matter: str = ""
    title: str = DEFAULT_TITLE
    min_depth: int = 1
    max_depth: int = 2
    mode: str = PAGE_MODE
    verbose: bool = False

    @property
    def full_page(self) -> bool:
        return self.mode == PAGE_MODE


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Convert Markdown to a standalone HTML page with a table of contents",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Markdown files to concatenate ('-' or nothing reads standard input)",
    )
    parser.add_argument(
        "-i",
        "--input",
        help="Single Markdown input file ('-' for standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=STDIO,
        help="Name of output file (default: standard output)",
    )
    parser.add_argument(
        "-f",
        "--front-matter",
        default="",
        help="Name of front matter file",
    )
    parser.add_argument(
        "-t",
        "--title",
        default=DEFAULT_TITLE,
        help=f"HTML metadata title, page mode only (default: {DEFAULT_TITLE})",
    )
    parser.add_argument(
        "-M",
        "--min-depth",
        type=int,
        default=1,
        help="Min depth to be included in table of contents (default: 1)",
    )
    parser.add_argument(
        "-m",
        "--max-depth",
        type=int,
        default=2,
        help="Max depth to be included in table of contents (default: 2)",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Emit only the rendered content, without the HTML page shell",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report progress on standard error",
    )
    return parser


def resolve_config(args: argparse.Namespace, mode: str = PAGE_MODE) -> Config:
    """
    Validate parsed arguments and freeze them into a Config.

    Parameters:
        args (argparse.Namespace): Result of the argument parser.
        mode (str): Output mode used when --fragment is not given.

    Returns:
        Config: The configuration shared by every stage of the run.
    """
    if not args.output:
        raise ConfigurationError("output file name is required")

    if args.input is not None and args.inputs:
        raise ConfigurationError("use either --input or positional input files, not both")

    if args.input is not None:
        inputs = (args.input,)
    elif args.inputs:
        inputs = tuple(args.inputs)
    else:
        inputs = (STDIO,)

    for name, depth in (("min depth", args.min_depth), ("max depth", args.max_depth)):
        if not MIN_HEADING_LEVEL <= depth <= MAX_HEADING_LEVEL:
            raise ConfigurationError(
                f"{name} must be between {MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL}, got {depth}"
            )
    if args.min_depth > args.max_depth:
        raise ConfigurationError(
            f"min depth {args.min_depth} is greater than max depth {args.max_depth}"
        )

    return Config(
        inputs=inputs,
        output=args.output,
        front_matter=args.front_matter or "",
        title=args.title,
        min_depth=args.min_depth,
        max_depth=args.max_depth,
        mode=FRAGMENT_MODE if args.fragment else mode,
        verbose=args.verbose,
    )


def parse_args(
    argv: Optional[Sequence[str]] = None,
    mode: str = PAGE_MODE,
    prog: Optional[str] = None,
) -> Config:
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    return resolve_config(args, mode)
