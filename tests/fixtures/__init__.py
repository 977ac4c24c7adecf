"""
Centralized test fixtures for the rdf-tree test suite.

Usage:
    from fixtures import ITEM_TTL, ORDERED_LIST_TTL, parse_turtle

Or use the pytest fixtures in conftest.py which wrap these.
"""

from rdflib import Graph

from .rdf_fixtures import (
    EX,
    RESULT,
    PREFIXES,
    # Result shapes
    ITEM_TTL,
    LINKED_LIST_TTL,
    ORDERED_LIST_TTL,
    DESCENDING_LIST_TTL,
    UNORDERED_LIST_TTL,
    LINKED_ITEMS_TTL,
    # Traversal edge cases
    CYCLE_TTL,
    INVERSE_EDGE_TTL,
    SELF_LOOP_TTL,
    DIAMOND_TTL,
    # Malformed control triples
    NO_RESULT_TTL,
    UNKNOWN_RESULT_PREDICATE_TTL,
    LITERAL_ROOT_TTL,
    CONFLICTING_SHAPES_TTL,
    MIXED_LIST_SHAPES_TTL,
    DUPLICATE_ORDERING_TTL,
    UNKNOWN_SORT_ORDER_TTL,
    SORT_ORDER_WITHOUT_LIST_TTL,
    CONFLICTING_SORT_ORDER_TTL,
    NEXT_CYCLE_TTL,
    BRANCHING_NEXT_TTL,
    INVALID_TTL,
)


def parse_turtle(content: str) -> Graph:
    """Parse Turtle content into a fresh graph."""
    graph = Graph()
    graph.parse(data=content, format="turtle")
    return graph


__all__ = [
    'EX',
    'RESULT',
    'PREFIXES',
    'ITEM_TTL',
    'LINKED_LIST_TTL',
    'ORDERED_LIST_TTL',
    'DESCENDING_LIST_TTL',
    'UNORDERED_LIST_TTL',
    'LINKED_ITEMS_TTL',
    'CYCLE_TTL',
    'INVERSE_EDGE_TTL',
    'SELF_LOOP_TTL',
    'DIAMOND_TTL',
    'NO_RESULT_TTL',
    'UNKNOWN_RESULT_PREDICATE_TTL',
    'LITERAL_ROOT_TTL',
    'CONFLICTING_SHAPES_TTL',
    'MIXED_LIST_SHAPES_TTL',
    'DUPLICATE_ORDERING_TTL',
    'UNKNOWN_SORT_ORDER_TTL',
    'SORT_ORDER_WITHOUT_LIST_TTL',
    'CONFLICTING_SORT_ORDER_TTL',
    'NEXT_CYCLE_TTL',
    'BRANCHING_NEXT_TTL',
    'INVALID_TTL',
    'parse_turtle',
]
