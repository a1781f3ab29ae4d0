#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/manuscript.py
"""Manuscript formatting for fiction publishers.

Prepares a story for standard manuscript format:

- images are not allowed in a manuscript and become empty text
- links keep their text and lose their target
- headers of the chapter level have every word capitalized

Usage as a pandoc filter::

    pandoc --filter pandocwalk-manuscript story.md -o story.docx

"""

from __future__ import annotations

import re
from typing import Any

from pandocwalk.ast.builder import Header, Str
from pandocwalk.ast.nodes import Action
from pandocwalk.ast.utils import stringify
from pandocwalk.exceptions import MalformedTreeError

_WORD_START_RE = re.compile(r"(^|\s)(\S)")


def capitalize_words(text: str) -> str:
    """Upper-case the first character of each whitespace-separated word.

    The rest of each word is left as is.

    >>> capitalize_words("the iPhone years")
    'The IPhone Years'

    """
    return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def make_action(header_level: int = 2) -> Action:
    """Build the manuscript action.

    Parameters
    ----------
    header_level : int, default = 2
        Level of the headers to capitalize

    """

    def action(key: str, value: Any, format: str, meta: Any) -> Any:
        if key == "Image":
            return Str("")
        elif key == "Link":
            # Keep the link text, drop the target
            return Str(stringify(value))
        elif key == "Header":
            if not isinstance(value, list) or len(value) != 3:
                raise MalformedTreeError(key, value, "[level, attributes, inlines]")
            level, attr, inlines = value
            if level == header_level:
                return Header(level, attr, [Str(capitalize_words(stringify(inlines)))])
        return None

    return action


def main() -> int:
    """Console script entry point."""
    from pandocwalk.cli import run_filter_main

    return run_filter_main("manuscript")


if __name__ == "__main__":
    raise SystemExit(main())
