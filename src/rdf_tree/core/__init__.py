"""
Core utilities shared by the tree generator.

- Exceptions for malformed result graphs
- The configurable result vocabulary
- Predicate name resolution
- Term comparison helpers
"""

from .exceptions import (
    RdfTreeError,
    MissingRootError,
    ConflictingShapeError,
    InvalidControlTripleError,
    ShapeMismatchError,
    UnknownSortOrderError,
)
from .vocabulary import ResultVocabulary
from .name_resolver import NameResolver

__all__ = [
    # Exceptions
    "RdfTreeError",
    "MissingRootError",
    "ConflictingShapeError",
    "InvalidControlTripleError",
    "ShapeMismatchError",
    "UnknownSortOrderError",
    # Vocabulary and naming
    "ResultVocabulary",
    "NameResolver",
]
