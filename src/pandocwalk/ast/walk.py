#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/ast/walk.py
"""Recursive tree walk applying a filter action to every tagged node.

The walk rebuilds the whole tree and never modifies its input. Each tagged
node found inside a list is offered to the action, which decides what
appears in its place:

- ``None``: the node is kept, and its content is walked
- a list: the items are walked and spliced in place of the node
  (an empty list deletes it, several items expand it into siblings)
- a dict: the returned node is walked and replaces the node
- anything else: the node keeps its tag and its content becomes ``str(result)``;
  this replacement is final and is not walked

Examples
--------
Drop every image from a document:

    >>> from pandocwalk.ast.walk import walk
    >>> def drop_images(key, value, format, meta):
    ...     if key == "Image":
    ...         return []
    >>> new_doc = walk(doc, drop_images, "html", meta)

Upper-case all text:

    >>> def shout(key, value, format, meta):
    ...     if key == "Str":
    ...         return value.upper()

"""

from __future__ import annotations

from typing import Any

from pandocwalk.ast.nodes import Action
from pandocwalk.constants import CONTENT_KEY, TAG_KEY


def walk(x: Any, action: Action, format: str, meta: Any) -> Any:
    """Walk a tree, applying an action to every tagged node.

    Parameters
    ----------
    x : Any
        JSON value to walk: a list, a dict (tagged node or plain object) or a
        primitive
    action : callable
        ``action(tag, content, format, meta)`` called once per tagged node
        found in a list, in document order
    format : str
        Target output format, passed through to the action untouched
    meta : Any
        Document metadata, passed through to the action untouched

    Returns
    -------
    Any
        The rewritten tree. Lists and dicts are always new objects;
        primitives are returned as is.

    Notes
    -----
    A primitive result is converted with ``str``, so ``True`` and ``False``
    become ``"True"`` and ``"False"``, not ``"1"`` and ``""`` as in pandoc
    filter libraries that use PHP string casting.

    Exceptions raised by the action are not caught: they abort the walk and
    propagate to the caller unchanged.

    """
    if isinstance(x, (list, tuple)):
        array = []
        for item in x:
            if isinstance(item, dict) and TAG_KEY in item:
                res = action(item[TAG_KEY], item.get(CONTENT_KEY), format, meta)
                if res is None:
                    array.append(walk(item, action, format, meta))
                elif isinstance(res, (list, tuple)):
                    for z in res:
                        array.append(walk(z, action, format, meta))
                elif isinstance(res, dict):
                    array.append(walk(res, action, format, meta))
                else:
                    obj = dict(item)
                    obj[CONTENT_KEY] = str(res)
                    array.append(obj)
            else:
                array.append(walk(item, action, format, meta))
        return array
    elif isinstance(x, dict):
        return {k: walk(v, action, format, meta) for k, v in x.items()}
    else:
        return x


__all__ = [
    "walk",
]
