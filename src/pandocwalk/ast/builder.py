#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/ast/builder.py
"""Element constructors for building replacement nodes.

This module provides the constructor factory ``elt`` and one ready-made
constructor per standard element tag. Filters use them to build the nodes
their actions return::

    >>> from pandocwalk.ast.builder import Header, Str
    >>> Str("hello")
    {'t': 'Str', 'c': 'hello'}
    >>> Header(2, ["intro", [], []], [Str("Intro")])
    {'t': 'Header', 'c': [2, ['intro', [], []], [{'t': 'Str', 'c': 'Intro'}]]}

A constructor's content shape follows its arity: the bare argument for
arity 1, the argument list for any other arity (an empty list for 0).

"""

from __future__ import annotations

from typing import Any

from pandocwalk.ast.nodes import BLOCK_ELEMENTS, INLINE_ELEMENTS, Node
from pandocwalk.constants import CONTENT_KEY, TAG_KEY
from pandocwalk.exceptions import ArityError


class Constructor:
    """Arity-checked factory for nodes of a single tag.

    Parameters
    ----------
    tag : str
        Tag of the nodes this constructor builds
    arity : int
        Exact number of arguments every call must receive

    Examples
    --------
    >>> Emph = Constructor("Emph", 1)
    >>> Emph([{"t": "Str", "c": "word"}])
    {'t': 'Emph', 'c': [{'t': 'Str', 'c': 'word'}]}
    >>> Emph()
    Traceback (most recent call last):
    ...
    pandocwalk.exceptions.ArityError: Emph expects 1 arguments, but given 0

    """

    __slots__ = ("tag", "arity")

    def __init__(self, tag: str, arity: int):
        """Initialize the constructor with its tag and arity."""
        if arity < 0:
            raise ValueError(f"Arity must be non-negative, got {arity}")
        self.tag = tag
        self.arity = arity

    def __call__(self, *args: Any) -> Node:
        """Build a node from exactly ``arity`` arguments.

        Raises
        ------
        ArityError
            If the number of arguments differs from the registered arity

        """
        if len(args) != self.arity:
            raise ArityError(self.tag, self.arity, len(args))
        content = args[0] if self.arity == 1 else list(args)
        return {TAG_KEY: self.tag, CONTENT_KEY: content}

    def __repr__(self) -> str:
        return f"Constructor({self.tag!r}, {self.arity})"


def elt(tag: str, arity: int) -> Constructor:
    """Create a constructor for nodes tagged ``tag`` taking ``arity`` arguments.

    Parameters
    ----------
    tag : str
        Element tag, e.g. ``"Str"`` or ``"Header"``
    arity : int
        Number of arguments the constructor requires

    Returns
    -------
    Constructor
        Callable producing ``{"t": tag, "c": ...}`` nodes

    """
    return Constructor(tag, arity)


# Constructors for block elements

Plain = elt("Plain", BLOCK_ELEMENTS["Plain"])
Para = elt("Para", BLOCK_ELEMENTS["Para"])
CodeBlock = elt("CodeBlock", BLOCK_ELEMENTS["CodeBlock"])
RawBlock = elt("RawBlock", BLOCK_ELEMENTS["RawBlock"])
BlockQuote = elt("BlockQuote", BLOCK_ELEMENTS["BlockQuote"])
OrderedList = elt("OrderedList", BLOCK_ELEMENTS["OrderedList"])
BulletList = elt("BulletList", BLOCK_ELEMENTS["BulletList"])
DefinitionList = elt("DefinitionList", BLOCK_ELEMENTS["DefinitionList"])
Header = elt("Header", BLOCK_ELEMENTS["Header"])
HorizontalRule = elt("HorizontalRule", BLOCK_ELEMENTS["HorizontalRule"])
Table = elt("Table", BLOCK_ELEMENTS["Table"])
Div = elt("Div", BLOCK_ELEMENTS["Div"])
Null = elt("Null", BLOCK_ELEMENTS["Null"])

# Constructors for inline elements

Str = elt("Str", INLINE_ELEMENTS["Str"])
Emph = elt("Emph", INLINE_ELEMENTS["Emph"])
Strong = elt("Strong", INLINE_ELEMENTS["Strong"])
Strikeout = elt("Strikeout", INLINE_ELEMENTS["Strikeout"])
Superscript = elt("Superscript", INLINE_ELEMENTS["Superscript"])
Subscript = elt("Subscript", INLINE_ELEMENTS["Subscript"])
SmallCaps = elt("SmallCaps", INLINE_ELEMENTS["SmallCaps"])
Quoted = elt("Quoted", INLINE_ELEMENTS["Quoted"])
Cite = elt("Cite", INLINE_ELEMENTS["Cite"])
Code = elt("Code", INLINE_ELEMENTS["Code"])
Space = elt("Space", INLINE_ELEMENTS["Space"])
LineBreak = elt("LineBreak", INLINE_ELEMENTS["LineBreak"])
Math = elt("Math", INLINE_ELEMENTS["Math"])
RawInline = elt("RawInline", INLINE_ELEMENTS["RawInline"])
Link = elt("Link", INLINE_ELEMENTS["Link"])
Image = elt("Image", INLINE_ELEMENTS["Image"])
Note = elt("Note", INLINE_ELEMENTS["Note"])
Span = elt("Span", INLINE_ELEMENTS["Span"])

STANDARD_CONSTRUCTORS: dict[str, Constructor] = {
    constructor.tag: constructor
    for constructor in (
        Plain,
        Para,
        CodeBlock,
        RawBlock,
        BlockQuote,
        OrderedList,
        BulletList,
        DefinitionList,
        Header,
        HorizontalRule,
        Table,
        Div,
        Null,
        Str,
        Emph,
        Strong,
        Strikeout,
        Superscript,
        Subscript,
        SmallCaps,
        Quoted,
        Cite,
        Code,
        Space,
        LineBreak,
        Math,
        RawInline,
        Link,
        Image,
        Note,
        Span,
    )
}


__all__ = [
    "Constructor",
    "STANDARD_CONSTRUCTORS",
    "elt",
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
