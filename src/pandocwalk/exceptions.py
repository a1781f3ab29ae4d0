#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the pandocwalk library.

This module defines the exception classes raised while building nodes,
walking document trees and running filters. The walk engine itself never
catches anything: every exception raised by an action aborts the walk and
reaches the caller unchanged.

Exception Hierarchy
-------------------
- PandocWalkError (base exception)

  - ArityError (constructor called with the wrong number of arguments)

  - ActionError (failure raised by a filter action)
    - MalformedTreeError (node content has an unexpected shape)

  - MalformedDocumentError (input is not a pandoc JSON document)

"""

from typing import Any


class PandocWalkError(Exception):
    """Base exception class for all pandocwalk-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ArityError(PandocWalkError, TypeError):
    """Exception raised when an element constructor gets the wrong argument count.

    The check happens when the constructor is called, never when it is
    created, and the arguments are never coerced to fit.

    Parameters
    ----------
    tag : str
        Tag of the element the constructor builds
    expected : int
        Number of arguments the constructor was registered with
    actual : int
        Number of arguments it was called with

    Attributes
    ----------
    tag : str
        Element tag
    expected : int
        Registered arity
    actual : int
        Argument count received

    """

    def __init__(self, tag: str, expected: int, actual: int):
        """Initialize the arity error with the tag and both counts."""
        super().__init__(f"{tag} expects {expected} arguments, but given {actual}")
        self.tag = tag
        self.expected = expected
        self.actual = actual


class ActionError(PandocWalkError):
    """Exception raised by a filter action that cannot rewrite a node.

    Actions raise this (or a subclass) to abort the whole walk. The walk
    engine propagates it unchanged.

    Parameters
    ----------
    message : str
        Description of the failure
    tag : str, optional
        Tag of the node being processed when the failure happened
    original_error : Exception, optional
        The underlying exception, if any

    """

    def __init__(self, message: str, tag: str | None = None, original_error: Exception | None = None):
        """Initialize the action error."""
        super().__init__(message, original_error)
        self.tag = tag


class MalformedTreeError(ActionError):
    """Exception raised when a node's content does not have the expected shape.

    Examples include a ``Header`` whose content is not a three item list or a
    ``Code`` node missing its literal text.

    Parameters
    ----------
    tag : str
        Tag of the malformed node
    content : Any
        The offending content value
    expected : str
        Short description of the shape the action expected

    """

    def __init__(self, tag: str, content: Any, expected: str):
        """Initialize the malformed tree error."""
        super().__init__(f"Malformed {tag} node: expected {expected}, got {content!r:.80}", tag=tag)
        self.content = content
        self.expected = expected


class MalformedDocumentError(PandocWalkError):
    """Exception raised when input cannot be read as a pandoc JSON document.

    Covers invalid JSON as well as valid JSON that lacks the document shape
    (a list whose first element carries ``unMeta``, or an object with
    ``meta`` and ``blocks``).

    Parameters
    ----------
    message : str
        Description of the problem
    original_error : Exception, optional
        The underlying decode error, if any

    """


__all__ = [
    "PandocWalkError",
    "ArityError",
    "ActionError",
    "MalformedTreeError",
    "MalformedDocumentError",
]
