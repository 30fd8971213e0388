#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Convert Markdown buffers to HTML snippets

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import markdown

from mdpage.errors import InputError

OUTPUT_FORMAT = "html"

BODY_EXTENSIONS = [
    "tables",
    "fenced_code",
    "footnotes",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
    "toc",
]

BODY_EXTENSION_CONFIGS = {
    # GitHub only knows ~~strikethrough~~, a single tilde stays literal
    "pymdownx.tilde": {"subscript": False},
    # An empty marker keeps a literal [TOC] in the text as it is
    "toc": {"marker": "", "permalink": False},
}


@dataclass(frozen=True)
class Document:
    """A parsed Markdown buffer together with the source it came from."""

    source: bytes
    html: str
    headings: List[Dict[str, Any]] = field(default_factory=list)


def front_matter_markdown():
    """
    Create the engine used for front matter.

    Front matter is plain structural Markdown: no GitHub extensions and no
    heading identifiers.
    """
    return markdown.Markdown(output_format=OUTPUT_FORMAT)


def body_markdown():
    """
    Create the engine used for the document body.

    Enables tables, strikethrough, autolinks, task lists and footnotes, and
    gives every heading a stable identifier derived from its text.
    """
    return markdown.Markdown(
        extensions=BODY_EXTENSIONS,
        extension_configs=BODY_EXTENSION_CONFIGS,
        output_format=OUTPUT_FORMAT,
    )


def decode_source(source):
    try:
        return source.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputError(f"input is not valid UTF-8: {exc}") from exc


def parse(source, md):
    """
    Convert Markdown to HTML.

    Parameters:
        source (bytes): The raw Markdown buffer.
        md (markdown.Markdown): The configured engine.

    Returns:
        Document: The rendered HTML and the heading tokens of the buffer.
    """
    md.reset()
    html_snippet = md.convert(decode_source(source))
    headings = list(getattr(md, "toc_tokens", []))
    return Document(source=source, html=html_snippet, headings=headings)


def build_documents(front_matter: bytes, body: bytes) -> Tuple[Document, Document]:
    return parse(front_matter, front_matter_markdown()), parse(body, body_markdown())
