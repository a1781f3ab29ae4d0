#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/titlecase.py
"""Title-case every word of the document text.

Usage as a pandoc filter::

    pandoc --filter pandocwalk-titlecase input.md -o output.html

"""

from __future__ import annotations

import re
from typing import Any

from pandocwalk.ast.nodes import Action

_WORD_RE = re.compile(r"\w[\w']*")


def title_case(text: str) -> str:
    """Upper-case the first letter of every word and lower-case the rest.

    Unlike ``str.title`` an apostrophe does not start a new word.

    >>> title_case("hELLO world")
    'Hello World'
    >>> title_case("don't")
    "Don't"

    """
    return _WORD_RE.sub(lambda m: m.group(0).capitalize(), text)


def make_action() -> Action:
    """Build the title-case action."""

    def action(key: str, value: Any, format: str, meta: Any) -> Any:
        if key == "Str":
            return title_case(value)
        return None

    return action


def main() -> int:
    """Console script entry point."""
    from pandocwalk.cli import run_filter_main

    return run_filter_main("titlecase")


if __name__ == "__main__":
    raise SystemExit(main())
