"""
Predicate name resolution.

Resolves predicates to the display names used as JSON keys and provides the
total order used as the last tie-break between sibling tree nodes with
different predicates.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from rdflib import Graph
from rdflib.namespace import split_uri
from rdflib.term import Node

from .term_utils import cmp

logger = logging.getLogger(__name__)


class NameResolver:
    """
    Maps predicates to display names and orders them.

    Predicates are ordered alphabetically by display name. Predicates that
    share a display name are ordered by namespace priority (namespaces listed
    earlier in ``prioritised_namespaces`` win), then by the prefix bound to
    their namespace in the graph, then by full IRI, which makes the order
    total.

    Example:
        >>> resolver = NameResolver(graph, name_overrides={
        ...     "http://xmlns.com/foaf/0.1/name": "fullName",
        ... })
        >>> resolver.resolve_name(FOAF.name)
        'fullName'
    """

    def __init__(
        self,
        graph: Graph,
        prioritised_namespaces: Optional[Iterable[str]] = None,
        name_overrides: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            graph: Graph whose namespace bindings supply prefixes
            prioritised_namespaces: Namespace IRIs preferred when display names tie
            name_overrides: Full predicate IRI to display name
        """
        self.graph = graph
        self.prioritised_namespaces: List[str] = list(prioritised_namespaces or [])
        self.name_overrides: Dict[str, str] = {
            str(uri): name for uri, name in (name_overrides or {}).items()
        }
        self._keys: Dict[Node, Tuple[str, int, str, str]] = {}
        if self.name_overrides or self.prioritised_namespaces:
            logger.debug(
                f"Name resolver configured with {len(self.name_overrides)} overrides and "
                f"{len(self.prioritised_namespaces)} prioritised namespaces"
            )

    @staticmethod
    def local_name(uri: Node) -> str:
        """Extract the local part of an IRI."""
        text = str(uri)
        try:
            _, name = split_uri(text)
            if name:
                return name
        except ValueError:
            pass
        stripped = text.rstrip('#/')
        for separator in ('#', '/', ':'):
            if separator in stripped:
                return stripped.rsplit(separator, 1)[-1]
        return text

    def resolve_name(self, predicate: Node) -> str:
        """Display name of a predicate: its override if any, else its local name."""
        override = self.name_overrides.get(str(predicate))
        if override is not None:
            return override
        return self.local_name(predicate)

    def resolve_prefix(self, predicate: Node) -> str:
        """Prefix bound to the predicate's namespace in the graph, or an empty string."""
        try:
            prefix, _, _ = self.graph.namespace_manager.compute_qname(
                str(predicate), generate=False
            )
        except (KeyError, ValueError):
            return ""
        return prefix

    def resolve_qname(self, predicate: Node) -> str:
        """Qualified display name (``prefix:name``), or the bare name without a prefix."""
        prefix = self.resolve_prefix(predicate)
        name = self.resolve_name(predicate)
        return f"{prefix}:{name}" if prefix else name

    def namespace_rank(self, predicate: Node) -> int:
        """Position of the predicate's namespace in the priority list; unlisted ranks last."""
        text = str(predicate)
        for index, namespace in enumerate(self.prioritised_namespaces):
            if text.startswith(namespace):
                return index
        return len(self.prioritised_namespaces)

    def sort_key(self, predicate: Node) -> Tuple[str, int, str, str]:
        key = self._keys.get(predicate)
        if key is None:
            key = (
                self.resolve_name(predicate),
                self.namespace_rank(predicate),
                self.resolve_prefix(predicate),
                str(predicate),
            )
            self._keys[predicate] = key
        return key

    def compare_names(self, first: Node, second: Node) -> int:
        """Total order over predicates, returning -1, 0 or 1."""
        return cmp(self.sort_key(first), self.sort_key(second))
