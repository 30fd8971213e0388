#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Write the rendered front matter, table of contents and body

import html
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from mdpage.config import STDIO, Config
from mdpage.errors import OutputError

PAGE_PREAMBLE = """
<html>
<head>
<meta charset="utf-8">
<title>
{title}
</title>
</head>
<body>
"""

PAGE_CLOSING = "</body></html>"


@contextmanager
def open_output(path: str) -> Iterator[TextIO]:
    """
    Open the destination of a run.

    Standard output is handed out as is and left open. A file is created or
    truncated, and closed when the block exits, whether or not writing failed.
    """
    if path == STDIO:
        yield sys.stdout
        return

    try:
        file = open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise OutputError(f'can\'t open "{path}" for writing: {exc.strerror or exc}') from exc

    with file:
        yield file


def write_page(out: TextIO, config: Config, front_matter: str, toc: str, body: str) -> None:
    """
    Write the three rendered parts in their fixed order.

    Parameters:
        out (TextIO): The opened destination.
        config (Config): Selects the page shell and its title.
        front_matter (str): Rendered front matter, possibly empty.
        toc (str): Rendered table of contents list, possibly empty.
        body (str): Rendered document body.
    """
    if config.full_page:
        out.write(PAGE_PREAMBLE.format(title=html.escape(config.title)))

    for part in (front_matter, toc, body):
        if part:
            out.write(part)
            if not part.endswith("\n"):
                out.write("\n")

    if config.full_page:
        out.write(PAGE_CLOSING)
        out.write("\n")
