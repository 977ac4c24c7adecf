"""
Reserved result vocabulary.

The control triples that mark a tree's roots all live under one URI prefix.
The prefix is configurable so that independent conversions can use
different vocabularies side by side.
"""

from dataclasses import dataclass

from rdflib import URIRef

from ..constants import VocabularyDefaults


@dataclass(frozen=True)
class ResultVocabulary:
    """
    Terms of the result vocabulary under a given prefix.

    Example:
        >>> vocab = ResultVocabulary()
        >>> vocab.this
        rdflib.term.URIRef('http://purl.org/ontology/rdf-result/this')
        >>> vocab.is_control(vocab.next)
        True
    """
    prefix: str = VocabularyDefaults.RESULT_ONTOLOGY_URI_PREFIX

    def term(self, name: str) -> URIRef:
        """Build a term of this vocabulary from its local name."""
        return URIRef(self.prefix + name)

    @property
    def this(self) -> URIRef:
        return self.term(VocabularyDefaults.THIS)

    @property
    def item(self) -> URIRef:
        return self.term(VocabularyDefaults.ITEM)

    @property
    def next(self) -> URIRef:
        return self.term(VocabularyDefaults.NEXT)

    @property
    def list_item(self) -> URIRef:
        return self.term(VocabularyDefaults.LIST_ITEM)

    @property
    def order_by_predicate(self) -> URIRef:
        return self.term(VocabularyDefaults.ORDER_BY_PREDICATE)

    @property
    def sort_order(self) -> URIRef:
        return self.term(VocabularyDefaults.SORT_ORDER)

    @property
    def ascending_order(self) -> URIRef:
        return self.term(VocabularyDefaults.ASCENDING_ORDER)

    @property
    def descending_order(self) -> URIRef:
        return self.term(VocabularyDefaults.DESCENDING_ORDER)

    def is_control(self, predicate) -> bool:
        """Check whether a predicate belongs to the control namespace."""
        return predicate is not None and str(predicate).startswith(self.prefix)
