#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Build and render the table of contents of a document

import html
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from mdpage.config import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from mdpage.errors import TocError
from mdpage.markdown_to_html import Document


@dataclass(frozen=True)
class TocEntry:
    level: int
    text: str
    identifier: str
    children: Tuple["TocEntry", ...] = ()


def iter_headings(tokens: Iterable[Dict[str, Any]]) -> Iterator[Tuple[int, str, str]]:
    """Yield (level, text, identifier) for every heading token, in document order."""
    for token in tokens:
        try:
            level = int(token["level"])
            identifier = token["id"]
            text = html.unescape(token["name"])
        except (KeyError, TypeError, ValueError) as exc:
            raise TocError(f"malformed heading token {token!r}: {exc}") from exc
        if not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
            raise TocError(f"heading {text!r} has unsupported level {level}")
        yield level, text, identifier
        yield from iter_headings(token.get("children") or [])


def nest(headings: List[Tuple[int, str, str]]) -> Tuple[TocEntry, ...]:
    # A heading belongs under the closest preceding heading of a smaller level
    roots: List[Tuple[int, str, str, list]] = []
    stack: List[Tuple[int, str, str, list]] = []
    for level, text, identifier in headings:
        node = (level, text, identifier, [])
        while stack and stack[-1][0] >= level:
            stack.pop()
        if stack:
            stack[-1][3].append(node)
        else:
            roots.append(node)
        stack.append(node)
    return tuple(_freeze(node) for node in roots)


def _freeze(node) -> TocEntry:
    level, text, identifier, children = node
    return TocEntry(
        level=level,
        text=text,
        identifier=identifier,
        children=tuple(_freeze(child) for child in children),
    )


def build_toc(document: Document, min_depth: int, max_depth: int) -> Tuple[TocEntry, ...]:
    """
    Build the table of contents of a parsed document.

    Parameters:
        document (Document): The parsed body.
        min_depth (int): Lowest heading level to include.
        max_depth (int): Highest heading level to include.

    Returns:
        tuple: Top-level TocEntry items; nested headings are in `children`.
    """
    if min_depth > max_depth:
        raise TocError(f"empty depth range {min_depth}-{max_depth}")

    kept = [
        heading
        for heading in iter_headings(document.headings)
        if min_depth <= heading[0] <= max_depth
    ]
    return nest(kept)


def count_entries(entries: Iterable[TocEntry]) -> int:
    return sum(1 + count_entries(entry.children) for entry in entries)


def render_toc(entries: Tuple[TocEntry, ...]) -> str:
    """Render entries as a nested HTML list of links to the heading anchors."""
    if not entries:
        return ""

    lines = ["<ul>"]
    for entry in entries:
        link = (
            f'<a href="#{html.escape(entry.identifier, quote=True)}">'
            f"{html.escape(entry.text)}</a>"
        )
        if entry.children:
            lines.append(f"<li>{link}")
            lines.append(render_toc(entry.children).rstrip("\n"))
            lines.append("</li>")
        else:
            lines.append(f"<li>{link}</li>")
    lines.append("</ul>")
    return "\n".join(lines) + "\n"
