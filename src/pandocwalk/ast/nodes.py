#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/ast/nodes.py
"""Node model for the pandoc JSON document tree.

Nodes are plain JSON data, exactly as pandoc serializes them: a ``dict``
with a ``"t"`` key holding the element tag and a ``"c"`` key holding its
content. Content is a string, a number, another node, or a list of nodes and
primitives, shaped according to the arity registered for the tag.

A document is a list whose first element carries the document metadata
under ``unMeta`` and whose remaining elements are block nodes::

    [{"unMeta": {}}, {"t": "Para", "c": [{"t": "Str", "c": "Hello"}]}]

Nodes are treated as immutable values. Nothing in this package changes a
node in place; transformations always build new containers.

Element Catalog
---------------
Block-level tags:
    Plain, Para, CodeBlock, RawBlock, BlockQuote, OrderedList, BulletList,
    DefinitionList, Header, HorizontalRule, Table, Div, Null

Inline tags:
    Str, Emph, Strong, Strikeout, Superscript, Subscript, SmallCaps, Quoted,
    Cite, Code, Space, LineBreak, Math, RawInline, Link, Image, Note, Span

"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping

from pandocwalk.constants import CONTENT_KEY, TAG_KEY

Node = dict[str, Any]
"""A tagged node: ``{"t": tag, "c": content}``."""

Action = Callable[[str, Any, str, Any], Any]
"""Filter action: ``action(tag, content, format, meta)``.

Returns None to keep the node, a node to replace it, a list of nodes to
splice in its place, or a primitive to replace its content.
"""


class NodeTag(str, Enum):
    """Closed set of element tags known to the standard constructors."""

    # Block elements
    PLAIN = "Plain"
    PARA = "Para"
    CODE_BLOCK = "CodeBlock"
    RAW_BLOCK = "RawBlock"
    BLOCK_QUOTE = "BlockQuote"
    ORDERED_LIST = "OrderedList"
    BULLET_LIST = "BulletList"
    DEFINITION_LIST = "DefinitionList"
    HEADER = "Header"
    HORIZONTAL_RULE = "HorizontalRule"
    TABLE = "Table"
    DIV = "Div"
    NULL = "Null"

    # Inline elements
    STR = "Str"
    EMPH = "Emph"
    STRONG = "Strong"
    STRIKEOUT = "Strikeout"
    SUPERSCRIPT = "Superscript"
    SUBSCRIPT = "Subscript"
    SMALL_CAPS = "SmallCaps"
    QUOTED = "Quoted"
    CITE = "Cite"
    CODE = "Code"
    SPACE = "Space"
    LINE_BREAK = "LineBreak"
    MATH = "Math"
    RAW_INLINE = "RawInline"
    LINK = "Link"
    IMAGE = "Image"
    NOTE = "Note"
    SPAN = "Span"

    def __str__(self) -> str:
        return self.value


# Arity of every standard element. External filters depend on these exact
# values, do not change them.
BLOCK_ELEMENTS: dict[str, int] = {
    "Plain": 1,
    "Para": 1,
    "CodeBlock": 2,
    "RawBlock": 2,
    "BlockQuote": 1,
    "OrderedList": 2,
    "BulletList": 1,
    "DefinitionList": 1,
    "Header": 3,
    "HorizontalRule": 0,
    "Table": 5,
    "Div": 2,
    "Null": 0,
}

INLINE_ELEMENTS: dict[str, int] = {
    "Str": 1,
    "Emph": 1,
    "Strong": 1,
    "Strikeout": 1,
    "Superscript": 1,
    "Subscript": 1,
    "SmallCaps": 1,
    "Quoted": 2,
    "Cite": 2,
    "Code": 2,
    "Space": 0,
    "LineBreak": 0,
    "Math": 2,
    "RawInline": 2,
    "Link": 2,
    "Image": 2,
    "Note": 1,
    "Span": 2,
}

ELEMENT_ARITIES: dict[str, int] = {**BLOCK_ELEMENTS, **INLINE_ELEMENTS}


def is_node(value: Any) -> bool:
    """Return True if value is a tagged node (a dict with a ``"t"`` key)."""
    return isinstance(value, dict) and TAG_KEY in value


def is_block(value: Any) -> bool:
    """Return True if value is a node with a standard block-level tag."""
    return is_node(value) and value[TAG_KEY] in BLOCK_ELEMENTS


def is_inline(value: Any) -> bool:
    """Return True if value is a node with a standard inline tag."""
    return is_node(value) and value[TAG_KEY] in INLINE_ELEMENTS


def node_tag(node: Node) -> str:
    """Return the tag of a node."""
    return node[TAG_KEY]


def node_content(node: Node) -> Any:
    """Return the content of a node, or None for nodes serialized without one."""
    return node.get(CONTENT_KEY)


def attributes(attrs: Mapping[str, Any] | None) -> list[Any]:
    """Build a pandoc attribute triple from a mapping.

    Parameters
    ----------
    attrs : Mapping or None
        Attribute mapping. ``id`` becomes the identifier, ``classes`` the class
        list, and every other key a key/value pair.

    Returns
    -------
    list
        ``[identifier, classes, keyvals]`` where keyvals is a list of
        ``[key, value]`` pairs in the mapping's order

    Examples
    --------
    >>> attributes({"id": "intro", "classes": ["note"], "lang": "en"})
    ['intro', ['note'], [['lang', 'en']]]
    >>> attributes(None)
    ['', [], []]

    """
    attrs = attrs or {}
    ident = attrs.get("id") or ""
    classes = list(attrs.get("classes") or [])
    keyvals = [[key, value] for key, value in attrs.items() if key not in ("id", "classes")]
    return [ident, classes, keyvals]


__all__ = [
    "Action",
    "BLOCK_ELEMENTS",
    "ELEMENT_ARITIES",
    "INLINE_ELEMENTS",
    "Node",
    "NodeTag",
    "attributes",
    "is_block",
    "is_inline",
    "is_node",
    "node_content",
    "node_tag",
]
