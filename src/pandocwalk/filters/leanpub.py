#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/leanpub.py
"""Leanpub block emulation.

Leanpub marks asides by prefixing every line of a paragraph with a block
marker::

    W> This is a **warning**
    W> that will be _displayed_ in its
    W>
    W> own block containing other inline `elements`.

Pandoc reads such a paragraph as a single ``Para``. This filter splits it
back into lines and wraps them in raw markup for the target format. Within
a block, lines starting with ``* `` become a bullet list and lines starting
with ``# `` become a level 2 header; other lines are joined into a paragraph
with line breaks.

Supported block types: D>, E>, X>, I>, Q>, T>, W>. Supported output formats
are latex, html and epub. For LaTeX (and PDF) the ``\\lp...`` commands have
to be defined in the LaTeX template.

Usage as a pandoc filter::

    pandoc --filter pandocwalk-leanpub book.md -o book.pdf

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from pandocwalk.ast.builder import BulletList, Constructor, Header, LineBreak, Para, Plain, RawBlock
from pandocwalk.ast.nodes import Action, Node, is_node
from pandocwalk.ast.utils import stringify
from pandocwalk.constants import CONTENT_KEY, TAG_KEY

_ANCHOR_INVALID_RE = re.compile(r"[^0-9a-z]")


@dataclass
class BlockEmulation:
    """A leanpub block type.

    Parameters
    ----------
    name : str
        Block marker, e.g. ``"W>"``
    formats : dict[str, tuple[str, str]]
        Opening and closing raw markup keyed by output format

    """

    name: str
    formats: dict[str, tuple[str, str]] = field(default_factory=dict)

    def matches(self, value: Any) -> bool:
        """Return True if value is this block's marker."""
        return is_node(value) and value[TAG_KEY] == "Str" and value.get(CONTENT_KEY) == self.name

    def matches_block_element(self, key: str, value: Any) -> bool:
        """Return True for a Para starting with this block's marker and a space."""
        if key == "Para" and isinstance(value, list) and len(value) >= 2:
            return self.matches(value[0]) and _is_space(value[1])
        return False

    def open(self, format: str) -> str:
        return self.formats.get(format, ("", ""))[0]

    def close(self, format: str) -> str:
        return self.formats.get(format, ("", ""))[1]

    def get_lines(self, value: Sequence[Any]) -> list[list[Any]]:
        """Split a paragraph's inlines into lines at each block marker.

        The markers and the spaces that open a line are left out; lines
        with no content are dropped.
        """
        lines: list[list[Any]] = [[]]
        for item in value:
            if self.matches(item):
                lines.append([])
            elif not lines[-1] and _is_space(item):
                continue
            else:
                lines[-1].append(item)
        return [line for line in lines if line]


def _is_space(value: Any) -> bool:
    return is_node(value) and value[TAG_KEY] == "Space"


def _leanpub_block(marker: str, kind: str) -> BlockEmulation:
    div = (f'<div class="lp{kind}">', "</div>")
    return BlockEmulation(marker, {"latex": (f"\\lp{kind}{{", "}"), "epub": div, "html": div})


LEANPUB_BLOCKS: list[BlockEmulation] = [
    _leanpub_block("D>", "discussion"),
    _leanpub_block("E>", "error"),
    _leanpub_block("X>", "exercise"),
    _leanpub_block("I>", "information"),
    _leanpub_block("Q>", "question"),
    _leanpub_block("T>", "tip"),
    _leanpub_block("W>", "warning"),
]


def _starts_with(line: list[Any], marker: str) -> bool:
    first = line[0]
    if not (is_node(first) and first[TAG_KEY] == "Str" and first.get(CONTENT_KEY) == marker):
        return False
    if len(line) < 2 or not is_node(line[1]):
        return True
    return line[1].get(CONTENT_KEY) is None or line[1][TAG_KEY] == "Space"


def get_line_context(line: list[Any], default: Constructor) -> Constructor:
    """Return the constructor of the element a line belongs to."""
    if _starts_with(line, "*"):
        return BulletList
    if _starts_with(line, "#"):
        return Header
    return default


def anchor_for(inlines: Any) -> str:
    """Build a header identifier from the text of its inlines.

    >>> anchor_for([{"t": "Str", "c": "Read"}, {"t": "Space", "c": []}, {"t": "Str", "c": "This!"}])
    'read-this'

    """
    return _ANCHOR_INVALID_RE.sub("-", stringify(inlines).lower()).strip("-")


def process_line_in_context(line: list[Any], context: Constructor) -> Any:
    """Turn a line into its contribution to the element of its context."""
    if context is Para or context is Plain:
        return line + [LineBreak()]
    if context is BulletList:
        return [Plain(line[2:])]
    if context is Header:
        inlines = line[2:]
        return Header(2, [anchor_for(inlines), [], []], inlines)
    return line


def is_context_complete(prev: Optional[Constructor], current: Constructor) -> bool:
    """Return True if the element collected so far must be closed before current."""
    if prev is not None and prev is not current:
        return True
    # Every header line is an element of its own
    return prev is Header


def close_context(context: Optional[Constructor], content: list[Any]) -> Optional[Node]:
    """Build the element for the lines collected in a context."""
    if context is Para or context is Plain:
        merged = [item for line in content for item in line]
        # Drop the trailing line break
        return context(merged[:-1])
    if context is BulletList:
        return context(content)
    if context is Header:
        return content[0]
    return None


def emulate_block(block: BlockEmulation, value: list[Any], format: str, default_context: Constructor = Para) -> list[Node]:
    """Replace a leanpub paragraph with raw open/close markup around its elements."""
    result = [RawBlock(format, block.open(format))]
    current_context: Optional[Constructor] = None
    current_lines: list[Any] = []

    for line in block.get_lines(value):
        line_context = get_line_context(line, default_context)
        if is_context_complete(current_context, line_context) and current_lines:
            element = close_context(current_context, current_lines)
            if element:
                result.append(element)
            current_lines = []
        current_lines.append(process_line_in_context(line, line_context))
        current_context = line_context

    if current_lines:
        element = close_context(current_context, current_lines)
        if element:
            result.append(element)

    result.append(RawBlock(format, block.close(format)))
    return result


def make_action(default_format: str = "latex", blocks: Optional[Sequence[BlockEmulation]] = None) -> Action:
    """Build the leanpub block emulation action.

    Parameters
    ----------
    default_format : str, default = "latex"
        Format used when pandoc passes none
    blocks : sequence of BlockEmulation, optional
        Block types to recognize, defaults to ``LEANPUB_BLOCKS``

    """
    block_types = list(LEANPUB_BLOCKS if blocks is None else blocks)

    def action(key: str, value: Any, format: str, meta: Any) -> Any:
        target = format or default_format
        for block in block_types:
            if block.matches_block_element(key, value):
                return emulate_block(block, value, target)
        return None

    return action


def main() -> int:
    """Console script entry point."""
    from pandocwalk.cli import run_filter_main

    return run_filter_main("leanpub")


if __name__ == "__main__":
    raise SystemExit(main())
