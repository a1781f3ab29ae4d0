"""Test utilities for pandocwalk test suite.

This module provides helpers for building test documents and counting
nodes in walked trees.
"""

from typing import Any

from pandocwalk.ast.builder import (
    Code,
    Div,
    Emph,
    Header,
    Image,
    Link,
    Para,
    Space,
    Str,
)


def make_document(*blocks: Any, meta: dict | None = None) -> list:
    """Build an array-form pandoc document from blocks."""
    return [{"unMeta": meta or {}}, *blocks]


def sample_blocks() -> list:
    """Return a small document body touching nested inline and block nodes."""
    return [
        Header(1, ["title", [], []], [Str("The"), Space(), Str("title")]),
        Para(
            [
                Str("Some"),
                Space(),
                Emph([Str("emphasized")]),
                Space(),
                Code(["", [], []], "code()"),
                Space(),
                Image([Str("alt")], ["pic.png", ""]),
            ]
        ),
        Div(
            ["box", ["note"], []],
            [Para([Link([Str("a"), Space(), Str("link")], ["https://example.com", ""]), Image([], ["x.png", ""])])],
        ),
    ]


def count_tags(tree: Any, tag: str | None = None) -> int:
    """Count tagged nodes in a tree, optionally only those with the given tag."""
    count = 0
    if isinstance(tree, list):
        for item in tree:
            count += count_tags(item, tag)
    elif isinstance(tree, dict):
        if "t" in tree and (tag is None or tree["t"] == tag):
            count += 1
        for value in tree.values():
            count += count_tags(value, tag)
    return count


def collect_tags(tree: Any) -> list[str]:
    """Return the tags of all nodes in document order."""
    tags: list[str] = []
    if isinstance(tree, list):
        for item in tree:
            tags.extend(collect_tags(item))
    elif isinstance(tree, dict):
        if "t" in tree:
            tags.append(tree["t"])
        for value in tree.values():
            tags.extend(collect_tags(value))
    return tags
