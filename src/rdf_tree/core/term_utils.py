"""
Comparison helpers for RDF terms and their native values.

rdflib terms do not share one total order across types, so the tree
comparator and the list orderer reduce everything to these helpers:
numbers compare numerically, values of the same Python type use their
natural ordering, and anything else falls back to its string form.
"""

from decimal import Decimal
from typing import Any, Callable, Sequence, TypeVar

from rdflib import BNode, Literal, URIRef
from rdflib.namespace import RDF, XSD
from rdflib.term import Node

T = TypeVar("T")

_NUMERIC_TYPES = (int, float, Decimal)
_TEXTUAL_DATATYPES = (None, XSD.string, RDF.langString)


def cmp(first: Any, second: Any) -> int:
    """Three-way comparison returning -1, 0 or 1."""
    return (first > second) - (first < second)


def is_resource(term: Any) -> bool:
    """Check if a term is a graph resource (IRI or blank node)."""
    return isinstance(term, (URIRef, BNode))


def literal_value(literal: Literal) -> Any:
    """
    Get the native Python value of a literal.

    Ill-typed literals and literals of unknown datatypes (where rdflib could
    not build a value) are reduced to their lexical form so they never reach
    rdflib's own comparison.
    """
    value = literal.toPython()
    if isinstance(value, Node):
        return str(value)
    return value


def is_textual(literal: Literal) -> bool:
    """Check if a literal is a plain string, language-tagged or xsd:string."""
    return literal.datatype in _TEXTUAL_DATATYPES


def compare_values(first: Any, second: Any) -> int:
    """
    Compare two native values using their natural ordering.

    Numbers compare numerically regardless of their Python type. Other values
    of the same type use their own ordering; values of different types, or
    that cannot be ordered against each other, compare by string form.
    """
    if isinstance(first, _NUMERIC_TYPES) and isinstance(second, _NUMERIC_TYPES):
        return cmp(first, second)
    if type(first) is type(second):
        try:
            return cmp(first, second)
        except TypeError:
            pass
    return cmp(str(first), str(second))


def compare_resources(first: Node, second: Node) -> int:
    """Compare two resources by identifier string, IRIs before blank nodes on a tie."""
    result = cmp(str(first), str(second))
    if result:
        return result
    return cmp(isinstance(first, BNode), isinstance(second, BNode))


def compare_sequences(
    first: Sequence[T],
    second: Sequence[T],
    comparator: Callable[[T, T], int],
) -> int:
    """
    Lexicographic comparison of two sequences.

    Elements are compared pairwise until one pair differs; if one sequence
    runs out first, the shorter one precedes the longer.
    """
    for left, right in zip(first, second):
        result = comparator(left, right)
        if result:
            return result
    return cmp(len(first), len(second))


def term_label(term: Node) -> str:
    """Short human-readable label for log messages."""
    if isinstance(term, Literal):
        return term.n3()
    if isinstance(term, BNode):
        return f"_:{term}"
    return str(term)
