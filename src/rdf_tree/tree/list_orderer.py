"""
Ordering of explicit list items.

List items designated with result:listItem are sorted by the values they
have for the ordering predicate, in the same spirit as a SPARQL ORDER BY:
items without a value sort lowest, literals before resources, and strings
before other literals.
"""

import logging
from functools import cmp_to_key
from typing import Iterable, List, Optional

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

from ..core.term_utils import (
    compare_resources,
    compare_sequences,
    compare_values,
    is_textual,
    literal_value,
)
from ..models import SortDirection

logger = logging.getLogger(__name__)


def compare_ordering_values(first: Node, second: Node) -> int:
    """
    Compare two values of the ordering predicate.

    Preference, in the order values appear in an ascending list:

    1. Strings
    2. Any other literals (by string form when their native types differ)
    3. Resources (by identifier)
    """
    first_literal = isinstance(first, Literal)
    second_literal = isinstance(second, Literal)
    if first_literal and not second_literal:
        return -1
    if not first_literal and second_literal:
        return 1
    if not first_literal:
        return compare_resources(first, second)

    first_textual = is_textual(first)
    second_textual = is_textual(second)
    if first_textual and not second_textual:
        return -1
    if not first_textual and second_textual:
        return 1
    return compare_values(literal_value(first), literal_value(second))


class ListOrderer:
    """Sorts list item resources by their values for an ordering predicate."""

    def __init__(self, graph: Graph):
        self.graph = graph

    def values_for(self, subject: Node, predicate: URIRef) -> List[Node]:
        """All values of a predicate for a subject, in comparator order."""
        values = list(self.graph.objects(subject, predicate))
        values.sort(key=cmp_to_key(compare_ordering_values))
        return values

    def sort(
        self,
        items: Iterable[Node],
        ordering_predicate: Optional[URIRef],
        direction: SortDirection = SortDirection.ASCENDING,
    ) -> List[Node]:
        """
        Sort list items.

        Args:
            items: Candidate list items (duplicates are collapsed)
            ordering_predicate: Predicate whose values order the items, or None
            direction: Ascending or descending

        Returns:
            New list of items in result order
        """
        unique: List[Node] = list(dict.fromkeys(items))

        if ordering_predicate is None:
            logger.debug("No ordering predicate supplied, ordering list items by identifier")
            ordered = sorted(unique, key=cmp_to_key(compare_resources))
        else:
            values = {item: self.values_for(item, ordering_predicate) for item in unique}
            unvalued = sum(1 for item_values in values.values() if not item_values)
            if unvalued:
                logger.debug(
                    f"{unvalued} of {len(unique)} list items have no value for {ordering_predicate}"
                )

            def compare_items(first: Node, second: Node) -> int:
                # Items without a value sort lowest, as in SPARQL.
                result = compare_sequences(values[first], values[second], compare_ordering_values)
                if result:
                    return result
                return compare_resources(first, second)

            ordered = sorted(unique, key=cmp_to_key(compare_items))

        if direction == SortDirection.DESCENDING:
            ordered.reverse()
        return ordered
