#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Read Markdown sources from files or standard input

import sys
from typing import Tuple

from mdpage.config import STDIO, Config
from mdpage.errors import EmptyInputError, InputError


def read_source(path):
    """
    Read the raw content of a Markdown source.

    Parameters:
        path (str): The path to the Markdown file, or '-' for standard input.

    Returns:
        bytes: The content of the source, unmodified.
    """
    if path == STDIO:
        try:
            return sys.stdin.buffer.read()
        except OSError as exc:
            raise InputError(f"(stdin): {exc}") from exc

    try:
        with open(path, "rb") as file:
            return file.read()
    except OSError as exc:
        raise InputError(f'file "{path}": {exc.strerror or exc}') from exc


def read_front_matter(path):
    # No front matter file is not an error: the page simply starts with the TOC
    if not path:
        return b""
    return read_source(path)


def assemble_inputs(config: Config) -> Tuple[bytes, bytes]:
    """
    Read the front matter and every primary input of a run.

    Primary inputs are concatenated in command line order without any
    separator. An input that yields no data aborts the run.

    Returns:
        tuple: (front matter bytes, body bytes)
    """
    front_matter = read_front_matter(config.front_matter)

    chunks = []
    for name in config.inputs:
        source = read_source(name)
        if not source:
            raise EmptyInputError(f"no data read from input {name}")
        if config.verbose:
            print(f"[INFO] Read {len(source)} bytes from {name}", file=sys.stderr)
        chunks.append(source)

    return front_matter, b"".join(chunks)
