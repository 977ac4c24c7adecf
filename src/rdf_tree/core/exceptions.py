"""
Exceptions raised while turning a result graph into a tree.

Every error here signals malformed input: the result vocabulary in the
graph does not describe a usable root. None of them is transient, so
callers should report them rather than retry.
"""

from typing import Optional

from rdflib.term import Node


class RdfTreeError(ValueError):
    """Base class for malformed result graphs."""

    def __init__(self, message: str, term: Optional[Node] = None):
        self.message = message
        self.term = term
        super().__init__(message)


class MissingRootError(RdfTreeError):
    """No result:this statement identifies a root."""


class ConflictingShapeError(RdfTreeError):
    """More than one result shape is indicated, or the control triple count is wrong."""


class InvalidControlTripleError(RdfTreeError):
    """A control triple has an object that is not a resource where one is required."""


class ShapeMismatchError(RdfTreeError):
    """Ordering or sort-order triples are present for the wrong shape, or repeated."""


class UnknownSortOrderError(RdfTreeError):
    """A result:sortOrder object is neither ascending nor descending."""
