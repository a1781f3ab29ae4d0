#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/ast/__init__.py
"""Document tree module: node model, constructors, walk and text extraction.

The module consists of several components:

- nodes: the tagged-node data model and the standard element catalog
- builder: arity-checked element constructors (``Str``, ``Para``, ...)
- walk: the recursive rewrite algorithm driven by a filter action
- utils: ``stringify`` for extracting plain text

Examples
--------
Basic usage:

    >>> from pandocwalk.ast import Para, Space, Str, stringify, walk
    >>> para = Para([Str("hello"), Space(), Str("world")])
    >>> def shout(key, value, format, meta):
    ...     if key == "Str":
    ...         return value.upper()
    >>> stringify(walk([para], shout, "", {}))
    'HELLO WORLD'

"""

from __future__ import annotations

from pandocwalk.ast.builder import (
    STANDARD_CONSTRUCTORS,
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    Constructor,
    DefinitionList,
    Div,
    Emph,
    Header,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    Math,
    Note,
    Null,
    OrderedList,
    Para,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SmallCaps,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    elt,
)
from pandocwalk.ast.nodes import (
    BLOCK_ELEMENTS,
    ELEMENT_ARITIES,
    INLINE_ELEMENTS,
    Action,
    Node,
    NodeTag,
    attributes,
    is_block,
    is_inline,
    is_node,
)
from pandocwalk.ast.utils import stringify
from pandocwalk.ast.walk import walk

__all__ = [
    # Node model
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
    # Constructors
    "Constructor",
    "STANDARD_CONSTRUCTORS",
    "elt",
    "BlockQuote",
    "BulletList",
    "Cite",
    "Code",
    "CodeBlock",
    "DefinitionList",
    "Div",
    "Emph",
    "Header",
    "HorizontalRule",
    "Image",
    "LineBreak",
    "Link",
    "Math",
    "Note",
    "Null",
    "OrderedList",
    "Para",
    "Plain",
    "Quoted",
    "RawBlock",
    "RawInline",
    "SmallCaps",
    "Space",
    "Span",
    "Str",
    "Strikeout",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    # Walking
    "stringify",
    "walk",
]
