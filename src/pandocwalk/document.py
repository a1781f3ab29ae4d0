#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/document.py
"""Reading, filtering and writing pandoc JSON documents.

This module is the I/O boundary around the walk engine. It turns JSON text
into a document, hands the document metadata to the walk, and writes the
rewritten document back out in the same encoding.

Two document shapes are accepted:

- the array form ``[{"unMeta": {...}}, block, ...]``
- the object form ``{"pandoc-api-version": [...], "meta": {...}, "blocks": [...]}``

Examples
--------
Write a filter script:

    >>> from pandocwalk.document import to_json_filter
    >>>
    >>> def behead(key, value, format, meta):
    ...     if key == "Header" and value[0] >= 2:
    ...         return {"t": "Para", "c": [{"t": "Emph", "c": value[2]}]}
    >>>
    >>> if __name__ == "__main__":
    ...     to_json_filter(behead)

Filter a document in memory:

    >>> doc = load_document('[{"unMeta": {}}, {"t": "Para", "c": []}]')
    >>> dump_document(apply_action(doc, behead, "html"))
    '[{"unMeta":{}},{"t":"Para","c":[]}]'

"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import IO, Any, Sequence, Union

from pandocwalk.ast.nodes import Action
from pandocwalk.ast.walk import walk
from pandocwalk.constants import BLOCKS_KEY, HTML_UNSAFE_JSON_ESCAPES, LEGACY_META_KEY, META_KEY
from pandocwalk.exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

DocumentSource = Union[str, bytes, Path, IO[str], IO[bytes]]


def _decode(data: bytes, origin: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"Document {origin} is not valid UTF-8: {e}", original_error=e) from e


def _read_source(source: DocumentSource) -> str:
    """Return the JSON text held by or referenced from source.

    Raises
    ------
    MalformedDocumentError
        If the source cannot be read or is not valid UTF-8

    """
    # Pandoc always writes UTF-8, whatever the locale of the filter process
    if source is sys.stdin and hasattr(source, "buffer"):
        source = source.buffer

    if isinstance(source, Path):
        try:
            data = source.read_bytes()
        except OSError as e:
            raise MalformedDocumentError(f"Cannot read document {source}: {e}", original_error=e) from e
        return _decode(data, str(source))
    if isinstance(source, bytes):
        return _decode(source, "bytes")
    if isinstance(source, str):
        return source
    if hasattr(source, "read"):
        try:
            data = source.read()
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(f"Document stream is not valid UTF-8: {e}", original_error=e) from e
        return _decode(data, "stream") if isinstance(data, bytes) else data
    raise TypeError(f"Unsupported document source type: {type(source).__name__}")


def load_document(source: DocumentSource) -> Any:
    """Parse a pandoc JSON document.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        JSON text, UTF-8 encoded bytes, a path to a JSON file, or a readable
        stream

    Returns
    -------
    Any
        The parsed document (plain lists, dicts and primitives)

    Raises
    ------
    MalformedDocumentError
        If the input is not valid JSON or does not carry document metadata

    """
    text = _read_source(source)
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"Invalid JSON document: {e}", original_error=e) from e

    # Fail before any filtering if the metadata cannot be found
    get_meta(doc)
    return doc


def get_meta(doc: Any) -> Any:
    """Return the metadata of a document.

    Parameters
    ----------
    doc : list or dict
        Parsed pandoc document

    Returns
    -------
    Any
        ``doc[0]["unMeta"]`` for the array form, ``doc["meta"]`` for the
        object form

    Raises
    ------
    MalformedDocumentError
        If doc has neither shape

    """
    if isinstance(doc, list):
        if doc and isinstance(doc[0], dict) and LEGACY_META_KEY in doc[0]:
            return doc[0][LEGACY_META_KEY]
        raise MalformedDocumentError(f"Document array must start with an object carrying '{LEGACY_META_KEY}'")
    if isinstance(doc, dict):
        if META_KEY in doc and BLOCKS_KEY in doc:
            return doc[META_KEY]
        raise MalformedDocumentError(f"Document object must carry '{META_KEY}' and '{BLOCKS_KEY}'")
    raise MalformedDocumentError(f"Document must be a JSON array or object, got {type(doc).__name__}")


def apply_action(doc: Any, action: Action, format: str = "") -> Any:
    """Walk a document with an action and return the rewritten document.

    Parameters
    ----------
    doc : list or dict
        Parsed pandoc document
    action : callable
        ``action(tag, content, format, meta)``
    format : str, default = ""
        Target output format, passed to the action

    Returns
    -------
    Any
        New document; doc itself is left untouched

    """
    meta = get_meta(doc)
    logger.debug("Walking document for format %r", format)
    return walk(doc, action, format, meta)


def dump_document(doc: Any) -> str:
    """Serialize a document to compact JSON.

    Non-ASCII characters and slashes are written as is. ``<``, ``>`` and
    ``&`` are written as unicode escapes so the output can be embedded in
    HTML.

    Parameters
    ----------
    doc : Any
        Document to serialize

    Returns
    -------
    str
        JSON text without trailing newline

    """
    text = json.dumps(doc, ensure_ascii=False, separators=(",", ":"))
    # These characters only occur inside JSON strings, so plain replacement is safe
    for char, escape in HTML_UNSAFE_JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def to_json_filter(
    action: Action,
    source: DocumentSource | None = None,
    argv: Sequence[str] | None = None,
    output: IO[str] | None = None,
) -> None:
    """Run an action as a pandoc JSON filter.

    Reads a JSON document from source, walks it with the action, and writes
    the rewritten document followed by a newline to output. The target format
    is taken from the first command line argument if present.

    Parameters
    ----------
    action : callable
        ``action(key, value, format, meta)``. Returning None keeps the node,
        a node replaces it, and a list is spliced in its place (so an empty
        list deletes it).
    source : str, bytes, Path or file-like, optional
        Document input, defaults to standard input
    argv : sequence of str, optional
        Command line, defaults to ``sys.argv``
    output : file-like, optional
        Destination stream, defaults to standard output

    """
    if source is None:
        source = sys.stdin
    if argv is None:
        argv = sys.argv
    if output is None:
        output = sys.stdout

    format = argv[1] if len(argv) > 1 else ""

    doc = load_document(source)
    altered = apply_action(doc, action, format)
    output.write(dump_document(altered) + "\n")
    output.flush()


__all__ = [
    "DocumentSource",
    "apply_action",
    "dump_document",
    "get_meta",
    "load_document",
    "to_json_filter",
]
