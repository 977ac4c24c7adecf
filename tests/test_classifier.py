"""
Tests for result shape classification and linked-list resolution.
"""

import pytest
from rdflib import URIRef

from fixtures import (
    EX,
    BRANCHING_NEXT_TTL,
    CONFLICTING_SHAPES_TTL,
    CONFLICTING_SORT_ORDER_TTL,
    DUPLICATE_ORDERING_TTL,
    LITERAL_ROOT_TTL,
    MIXED_LIST_SHAPES_TTL,
    NEXT_CYCLE_TTL,
    NO_RESULT_TTL,
    SORT_ORDER_WITHOUT_LIST_TTL,
    UNKNOWN_RESULT_PREDICATE_TTL,
    UNKNOWN_SORT_ORDER_TTL,
    UNORDERED_LIST_TTL,
    DESCENDING_LIST_TTL,
    parse_turtle,
)
from rdf_tree.core.exceptions import (
    ConflictingShapeError,
    InvalidControlTripleError,
    MissingRootError,
    RdfTreeError,
    ShapeMismatchError,
    UnknownSortOrderError,
)
from rdf_tree.core.vocabulary import ResultVocabulary
from rdf_tree.models import ResultShape, SortDirection
from rdf_tree.tree.classifier import ResultShapeClassifier


def ex(name: str) -> URIRef:
    return URIRef(EX + name)


@pytest.fixture
def classifier():
    return ResultShapeClassifier()


@pytest.mark.unit
class TestShapeDetection:
    """Tests for the three supported result shapes."""

    def test_item(self, classifier, item_graph):
        """A single result:item statement gives the ITEM shape."""
        classification = classifier.classify(item_graph)

        assert classification.shape == ResultShape.ITEM
        assert classification.first_root == ex("alice")
        assert len(classification.control_triples) == 1

    def test_linked_list(self, classifier, linked_list_graph):
        """A single result:next statement gives the LIST shape."""
        classification = classifier.classify(linked_list_graph)

        assert classification.shape == ResultShape.LIST
        assert classification.first_root == ex("first")

    def test_ordered_list(self, classifier, ordered_list_graph):
        """result:listItem statements give the ordered list shape with its predicate."""
        classification = classifier.classify(ordered_list_graph)

        assert classification.shape == ResultShape.LIST_WITH_ORDER_BY_PREDICATE
        assert set(classification.list_items) == {ex("i1"), ex("i2"), ex("i3")}
        assert classification.ordering_predicate == ex("rank")
        assert classification.direction == SortDirection.ASCENDING
        assert classification.ascending

    def test_descending_sort_order(self, classifier):
        """result:DescendingOrder switches the direction."""
        classification = classifier.classify(parse_turtle(DESCENDING_LIST_TTL))

        assert classification.direction == SortDirection.DESCENDING
        assert not classification.ascending

    def test_list_items_without_ordering_predicate(self, classifier):
        """An ordering predicate is optional for explicit list items."""
        classification = classifier.classify(parse_turtle(UNORDERED_LIST_TTL))

        assert classification.shape == ResultShape.LIST_WITH_ORDER_BY_PREDICATE
        assert classification.ordering_predicate is None
        assert classification.direction == SortDirection.ASCENDING

    def test_custom_vocabulary_prefix(self, item_graph):
        """Control triples under another prefix are not recognised."""
        classifier = ResultShapeClassifier(ResultVocabulary("http://example.org/other-result/"))

        with pytest.raises(MissingRootError):
            classifier.classify(item_graph)


@pytest.mark.unit
class TestMalformedControlTriples:
    """Tests for rejected control triples."""

    def test_no_result_this(self, classifier):
        """A graph without result:this cannot produce a tree."""
        with pytest.raises(MissingRootError, match="result:this is not present"):
            classifier.classify(parse_turtle(NO_RESULT_TTL))

    def test_only_unknown_result_predicates(self, classifier):
        """result:this statements with unrecognised predicates do not identify a shape."""
        with pytest.raises(MissingRootError, match="could not be identified"):
            classifier.classify(parse_turtle(UNKNOWN_RESULT_PREDICATE_TTL))

    def test_literal_root(self, classifier):
        """A literal cannot be a root."""
        with pytest.raises(InvalidControlTripleError, match="non-resource object"):
            classifier.classify(parse_turtle(LITERAL_ROOT_TTL))

    def test_item_alongside_next(self, classifier):
        """result:item must be the only result:this statement."""
        with pytest.raises(ConflictingShapeError):
            classifier.classify(parse_turtle(CONFLICTING_SHAPES_TTL))

    def test_list_item_alongside_next(self, classifier):
        """result:listItem and result:next cannot be mixed."""
        with pytest.raises(ConflictingShapeError):
            classifier.classify(parse_turtle(MIXED_LIST_SHAPES_TTL))

    def test_duplicate_ordering_predicate(self, classifier):
        """Only one ordering predicate may be supplied."""
        with pytest.raises(ShapeMismatchError, match="More than one ordering predicate"):
            classifier.classify(parse_turtle(DUPLICATE_ORDERING_TTL))

    def test_ordering_predicate_without_list_items(self, classifier):
        """An ordering predicate only applies to explicit list items."""
        graph = parse_turtle(NO_RESULT_TTL)
        vocab = ResultVocabulary()
        graph.add((vocab.this, vocab.order_by_predicate, ex("rank")))

        with pytest.raises(ShapeMismatchError, match="ordering predicate was supplied"):
            classifier.classify(graph)

    def test_unknown_sort_order(self, classifier):
        """Sort orders other than ascending and descending are rejected."""
        with pytest.raises(UnknownSortOrderError, match="Sideways"):
            classifier.classify(parse_turtle(UNKNOWN_SORT_ORDER_TTL))

    def test_sort_order_without_list_items(self, classifier):
        """A sort order alone does not make a list."""
        with pytest.raises(ShapeMismatchError, match="sort order was supplied"):
            classifier.classify(parse_turtle(SORT_ORDER_WITHOUT_LIST_TTL))

    def test_conflicting_sort_orders(self, classifier):
        """Ascending and descending together are rejected."""
        with pytest.raises(ShapeMismatchError, match="More than one sort order"):
            classifier.classify(parse_turtle(CONFLICTING_SORT_ORDER_TTL))

    def test_repeated_sort_order_accepted(self, classifier):
        """Stating the same direction twice is not a conflict."""
        graph = parse_turtle(DESCENDING_LIST_TTL)
        vocab = ResultVocabulary()
        graph.add((vocab.this, vocab.sort_order, vocab.descending_order))

        classification = classifier.classify(graph)

        assert classification.direction == SortDirection.DESCENDING

    def test_errors_are_value_errors(self, classifier):
        """Every malformed-input error is a ValueError carrying the offending term."""
        with pytest.raises(ValueError) as exc_info:
            classifier.classify(parse_turtle(LITERAL_ROOT_TTL))

        assert isinstance(exc_info.value, RdfTreeError)
        assert exc_info.value.term is not None


@pytest.mark.unit
class TestFollowNextChain:
    """Tests for linked-list resolution."""

    def test_chain_order(self, classifier, linked_list_graph):
        """The chain is followed from the designated start to the last item."""
        items = classifier.follow_next_chain(linked_list_graph, ex("first"))

        assert items == [ex("first"), ex("second"), ex("third")]

    def test_single_item_chain(self, classifier, linked_list_graph):
        """An item without result:next ends the list immediately."""
        assert classifier.follow_next_chain(linked_list_graph, ex("third")) == [ex("third")]

    def test_cycle_rejected(self, classifier):
        """A chain that loops back is malformed."""
        with pytest.raises(InvalidControlTripleError, match="loops back"):
            classifier.follow_next_chain(parse_turtle(NEXT_CYCLE_TTL), ex("a"))

    def test_branching_rejected(self, classifier):
        """An item may have at most one result:next."""
        with pytest.raises(InvalidControlTripleError, match="too many result:next"):
            classifier.follow_next_chain(parse_turtle(BRANCHING_NEXT_TTL), ex("a"))
