"""
Result shape classification.

Reads the control triples hanging off result:this and decides whether the
graph describes a single item, a linked list (result:next) or a list whose
order comes from a predicate (result:listItem + result:orderByPredicate).
"""

import logging
from typing import List, Optional

from rdflib import Graph, Literal
from rdflib.term import Node

from ..core.exceptions import (
    ConflictingShapeError,
    InvalidControlTripleError,
    MissingRootError,
    ShapeMismatchError,
    UnknownSortOrderError,
)
from ..core.term_utils import term_label
from ..core.vocabulary import ResultVocabulary
from ..models import Classification, ResultShape, SortDirection

logger = logging.getLogger(__name__)


class ResultShapeClassifier:
    """
    Determines the result shape from the control triples of a graph.

    Handles:
    - result:item (exactly one control triple)
    - result:next (exactly one control triple, followed by a chain)
    - result:listItem (repeatable) with optional result:orderByPredicate
      and result:sortOrder
    """

    def __init__(self, vocabulary: Optional[ResultVocabulary] = None):
        self.vocabulary = vocabulary or ResultVocabulary()

    def classify(self, graph: Graph) -> Classification:
        """
        Classify the result shape of a graph.

        Args:
            graph: Graph containing result:this control triples

        Returns:
            Classification with shape, roots, ordering predicate and direction

        Raises:
            MissingRootError: If no result:this statement identifies a root
            ConflictingShapeError: If shape indicators conflict
            InvalidControlTripleError: If a control triple has a literal object
            ShapeMismatchError: If ordering triples do not fit the shape
            UnknownSortOrderError: If result:sortOrder is not recognised
        """
        vocab = self.vocabulary
        results = list(graph.triples((vocab.this, None, None)))
        if not results:
            raise MissingRootError(
                "result:this is not present as the subject of a statement, "
                "so an RDF tree cannot be generated",
                vocab.this,
            )

        classification = Classification()
        shape = ResultShape.UNKNOWN

        for triple in results:
            _, predicate, obj = triple
            if isinstance(obj, Literal):
                raise InvalidControlTripleError(
                    f"result:this statement contained a non-resource object: {term_label(obj)}",
                    obj,
                )

            if predicate == vocab.item:
                if len(results) != 1:
                    raise ConflictingShapeError(
                        "More than one result:this statement was found for a single item result",
                        obj,
                    )
                shape = self._switch_shape(shape, ResultShape.ITEM, "result:item")
                classification.control_triples.append(triple)

            elif predicate == vocab.next:
                if len(results) != 1:
                    raise ConflictingShapeError(
                        "More than one starting point was found for a list described by result:next",
                        obj,
                    )
                shape = self._switch_shape(shape, ResultShape.LIST, "result:next")
                classification.control_triples.append(triple)

            elif predicate == vocab.list_item:
                if shape not in (ResultShape.UNKNOWN, ResultShape.LIST_WITH_ORDER_BY_PREDICATE):
                    raise ConflictingShapeError(
                        f"Tree type {shape} was identified alongside conflicting predicate result:listItem",
                        obj,
                    )
                shape = ResultShape.LIST_WITH_ORDER_BY_PREDICATE
                classification.control_triples.append(triple)
                classification.list_items.append(obj)

        classification.shape = shape
        self._read_ordering(results, classification)

        if shape == ResultShape.UNKNOWN:
            raise MissingRootError(
                "The tree type could not be identified, the necessary result:this statements were not present"
            )

        logger.info(
            f"Identified result shape {shape} with {len(classification.control_triples)} "
            f"designating statement(s)"
        )
        return classification

    @staticmethod
    def _switch_shape(current: ResultShape, new: ResultShape, indicator: str) -> ResultShape:
        if current != ResultShape.UNKNOWN:
            raise ConflictingShapeError(
                f"Tree type {current} was identified alongside conflicting predicate {indicator}"
            )
        return new

    def _read_ordering(self, results: List[tuple], classification: Classification) -> None:
        """Second pass: ordering predicate and sort direction."""
        vocab = self.vocabulary
        shape = classification.shape
        direction: Optional[SortDirection] = None

        for _, predicate, obj in results:
            if predicate == vocab.order_by_predicate:
                if classification.ordering_predicate is not None:
                    raise ShapeMismatchError("More than one ordering predicate was supplied.", obj)
                if shape != ResultShape.LIST_WITH_ORDER_BY_PREDICATE:
                    raise ShapeMismatchError(
                        f"An ordering predicate was supplied for tree type {shape}", obj
                    )
                classification.ordering_predicate = obj

            elif predicate == vocab.sort_order:
                if shape != ResultShape.LIST_WITH_ORDER_BY_PREDICATE:
                    raise ShapeMismatchError(f"A sort order was supplied for tree type {shape}", obj)
                if obj == vocab.ascending_order:
                    resolved = SortDirection.ASCENDING
                elif obj == vocab.descending_order:
                    resolved = SortDirection.DESCENDING
                else:
                    raise UnknownSortOrderError(f"Unknown sort order: {term_label(obj)}", obj)
                if direction is not None and direction != resolved:
                    raise ShapeMismatchError("More than one sort order was supplied.", obj)
                direction = resolved

        if direction is not None:
            classification.direction = direction

    def follow_next_chain(self, graph: Graph, start: Node) -> List[Node]:
        """
        Resolve the items of a linked list.

        The list starts at ``start`` and follows result:next until an item
        without an outgoing result:next statement is reached.

        Raises:
            InvalidControlTripleError: If an item has several result:next
                statements, a literal result:next object, or the chain loops
        """
        items: List[Node] = []
        visited = set()
        current: Optional[Node] = start

        while current is not None:
            if current in visited:
                raise InvalidControlTripleError(
                    f"result:next chain loops back to {term_label(current)}", current
                )
            visited.add(current)
            items.append(current)

            following = list(graph.objects(current, self.vocabulary.next))
            if len(following) > 1:
                raise InvalidControlTripleError(
                    f"too many result:next predicates assigned to {term_label(current)}", current
                )
            if not following:
                break
            if isinstance(following[0], Literal):
                raise InvalidControlTripleError(
                    f"result:next cannot be a literal: {term_label(following[0])}", following[0]
                )
            current = following[0]

        logger.debug(f"Linked list resolved to {len(items)} item(s)")
        return items
