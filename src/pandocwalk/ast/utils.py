#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/ast/utils.py
"""Utility functions for working with document trees.

Functions
---------
stringify : Extract the plain text of a node or list of nodes

Examples
--------
Extract text from a heading's inlines:

    >>> from pandocwalk.ast.builder import Emph, Space, Str
    >>> from pandocwalk.ast.utils import stringify
    >>> stringify([Str("Hello"), Space(), Emph([Str("world")])])
    'Hello world'

"""

from __future__ import annotations

from typing import Any

from pandocwalk.ast.walk import walk
from pandocwalk.exceptions import MalformedTreeError


class _TextCollector:
    """Walk action that records the text of the nodes it visits.

    It never returns a replacement, so the walk descends into every node and
    nested inlines (e.g. a ``Str`` inside ``Emph``) contribute their own
    fragments.
    """

    def __init__(self) -> None:
        self.parts: list[str] = []

    def __call__(self, key: str, value: Any, format: str, meta: Any) -> None:
        if key == "Str":
            self.parts.append(value)
        elif key in ("Code", "Math"):
            # [attr or math type, literal text]
            if not isinstance(value, (list, tuple)) or len(value) < 2:
                raise MalformedTreeError(key, value, "a two item list ending with the literal text")
            self.parts.append(value[1])
        elif key in ("LineBreak", "Space"):
            self.parts.append(" ")

    def text(self) -> str:
        return "".join(self.parts)


def stringify(x: Any) -> str:
    """Walk the tree x and return its concatenated text, leaving out all formatting.

    ``Str`` contributes its content, ``Code`` and ``Math`` their literal
    text, and ``Space`` and ``LineBreak`` a single space. Every other element
    contributes nothing itself, but its children are still visited. As in
    every walk, x itself is not offered, so a bare ``Str`` yields the empty
    string; wrap it in a list to count it.

    Parameters
    ----------
    x : Any
        A node, a list of nodes, or any JSON value containing nodes

    Returns
    -------
    str
        Text fragments concatenated in document order

    Examples
    --------
    >>> from pandocwalk.ast.builder import Para, Space, Str
    >>> stringify(Para([Str("a"), Space(), Str("b")]))
    'a b'
    >>> stringify(Str("alone"))
    ''

    """
    collector = _TextCollector()
    # Like any walk, the root itself is not offered: a bare node contributes
    # only through its content
    walk(x, collector, "", {})
    return collector.text()


__all__ = [
    "stringify",
]
