#  Copyright (c) 2025 Tom Villani, Ph.D.
"""pandocwalk - write pandoc filters as functions over the JSON document tree.

Pandoc can serialize any document it reads as JSON: an ordered tree of
tagged nodes (``{"t": "Para", "c": [...]}``). pandocwalk walks that tree,
offers every node to a filter *action*, and rebuilds the document from
what the action returns.

Key Features
------------
- ``walk``: side-effect-free recursive rewrite with replace, splice and delete
- Arity-checked constructors for every standard element (``Str``, ``Para``, ...)
- ``stringify`` to extract the plain text of any subtree
- ``to_json_filter`` to turn an action into a complete pandoc filter script
- Built-in filters and a registry with entry point plugin discovery

Requirements
------------
- Python 3.10+

Examples
--------
A complete filter script:

    >>> from pandocwalk import to_json_filter
    >>>
    >>> def caps(key, value, format, meta):
    ...     if key == "Str":
    ...         return value.upper()
    >>>
    >>> if __name__ == "__main__":
    ...     to_json_filter(caps)

Building replacement nodes:

    >>> from pandocwalk import Emph, Str
    >>> def emphasize(key, value, format, meta):
    ...     if key == "Str" and value.startswith("!"):
    ...         return Emph([Str(value[1:])])

"""

from __future__ import annotations

from pandocwalk.ast import (
    BLOCK_ELEMENTS,
    ELEMENT_ARITIES,
    INLINE_ELEMENTS,
    STANDARD_CONSTRUCTORS,
    Action,
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
    Node,
    NodeTag,
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
    attributes,
    elt,
    is_node,
    stringify,
    walk,
)
from pandocwalk.document import apply_action, dump_document, get_meta, load_document, to_json_filter
from pandocwalk.exceptions import (
    ActionError,
    ArityError,
    MalformedDocumentError,
    MalformedTreeError,
    PandocWalkError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "walk",
    "stringify",
    "elt",
    "Constructor",
    "attributes",
    "is_node",
    "Action",
    "Node",
    "NodeTag",
    "BLOCK_ELEMENTS",
    "INLINE_ELEMENTS",
    "ELEMENT_ARITIES",
    "STANDARD_CONSTRUCTORS",
    # Driver
    "apply_action",
    "dump_document",
    "get_meta",
    "load_document",
    "to_json_filter",
    # Exceptions
    "PandocWalkError",
    "ArityError",
    "ActionError",
    "MalformedTreeError",
    "MalformedDocumentError",
    # Block constructors
    "Plain",
    "Para",
    "CodeBlock",
    "RawBlock",
    "BlockQuote",
    "OrderedList",
    "BulletList",
    "DefinitionList",
    "Header",
    "HorizontalRule",
    "Table",
    "Div",
    "Null",
    # Inline constructors
    "Str",
    "Emph",
    "Strong",
    "Strikeout",
    "Superscript",
    "Subscript",
    "SmallCaps",
    "Quoted",
    "Cite",
    "Code",
    "Space",
    "LineBreak",
    "Math",
    "RawInline",
    "Link",
    "Image",
    "Note",
    "Span",
]
