#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Entry points: Markdown files in, one HTML page (or fragment) out

import sys

from mdpage.config import FRAGMENT_MODE, PAGE_MODE, STDIO, build_parser, resolve_config
from mdpage.errors import ConversionError, OutputError, TocError
from mdpage.markdown_to_html import build_documents
from mdpage.reader import assemble_inputs
from mdpage.toc import build_toc, count_entries, render_toc
from mdpage.writer import open_output, write_page


def convert(config):
    """
    Run the whole conversion described by a Config.

    The destination is opened only after every input is read and parsed
    and the table of contents is built.
    """
    front_matter_source, body_source = assemble_inputs(config)
    front_matter, body = build_documents(front_matter_source, body_source)

    try:
        entries = build_toc(body, config.min_depth, config.max_depth)
    except TocError as exc:
        raise TocError(f"while preparing Table of Contents: {exc}") from exc
    if config.verbose:
        print(
            f"[INFO] Table of contents has {count_entries(entries)} entries "
            f"(levels {config.min_depth}-{config.max_depth})",
            file=sys.stderr,
        )

    with open_output(config.output) as out:
        try:
            write_page(out, config, front_matter.html, render_toc(entries), body.html)
        except OSError as exc:
            raise OutputError(f"can't write to {config.output}: {exc}") from exc

    if config.verbose:
        destination = "standard output" if config.output == STDIO else config.output
        print(f"[INFO] Wrote HTML to {destination}", file=sys.stderr)


def run(argv=None, mode=PAGE_MODE, prog=None) -> int:
    parser = build_parser(prog)
    args = parser.parse_args(argv)

    try:
        convert(resolve_config(args, mode))
    except ConversionError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    return 0


def main():
    raise SystemExit(run())


def fragment_main():
    raise SystemExit(run(mode=FRAGMENT_MODE))


if __name__ == "__main__":
    main()
