"""
JSON rendering of canonical RDF trees.

The writer walks a canonicalized tree and emits plain JSON structures:

- resources become objects with an ``@id`` (blank nodes as ``_:id``)
- children are grouped by predicate and direction, in canonical order
- inverse edges are nested under ``@reverse``
- literals become JSON scalars when their native value allows it

Because the tree is already in canonical order, the JSON text is the same
for any two isomorphic inputs with the same identifiers.
"""

import json
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from rdflib import BNode, Literal
from rdflib.term import Node, URIRef

from ..core.name_resolver import NameResolver
from ..core.term_utils import literal_value
from ..models import ResultShape, TreeGenerationResult, TreeNode

logger = logging.getLogger(__name__)

ID_KEY = "@id"
REVERSE_KEY = "@reverse"


def render_identifier(term: Node) -> str:
    """IRI text, or ``_:id`` for a blank node."""
    if isinstance(term, BNode):
        return f"_:{term}"
    return str(term)


def render_literal(literal: Literal) -> Any:
    """JSON scalar for a literal, falling back to its lexical form."""
    value = literal_value(literal)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        return value
    if isinstance(value, str):
        return value
    return str(literal)


class JsonTreeWriter:
    """
    Renders a TreeGenerationResult as JSON-compatible structures.

    Example:
        >>> result = generate_rdf_tree(graph)
        >>> print(JsonTreeWriter().as_json(result))
    """

    def __init__(self, name_resolver: Optional[NameResolver] = None):
        """
        Initialize the writer.

        Args:
            name_resolver: Resolver for property names; defaults to the one
                carried by each rendered result
        """
        self.name_resolver = name_resolver

    def as_dict(self, result: TreeGenerationResult) -> Dict[str, Any]:
        """Render a generation result as a dictionary."""
        resolver = self.name_resolver or result.name_resolver
        tree = result.tree

        if tree.is_empty():
            return {}
        if tree.is_list:
            return {"results": [self._render_node(item, resolver) for item in tree.children]}
        if result.shape != ResultShape.ITEM:
            logger.warning(f"Rendering a {result.shape} result whose tree has no list root")
        return {"result": self._render_node(tree, resolver)}

    def as_json(self, result: TreeGenerationResult, indent: Optional[int] = 2) -> str:
        """Render a generation result as JSON text."""
        return json.dumps(self.as_dict(result), indent=indent, ensure_ascii=False)

    def _render_node(self, node: TreeNode, resolver: NameResolver) -> Any:
        if isinstance(node.value, Literal):
            return render_literal(node.value)

        rendered: Dict[str, Any] = {ID_KEY: render_identifier(node.value)}
        forward, reverse = self._group_children(node)

        for key, nodes in self._name_groups(forward, resolver):
            rendered[key] = self._render_values(nodes, resolver)

        if reverse:
            rendered[REVERSE_KEY] = {
                key: self._render_values(nodes, resolver)
                for key, nodes in self._name_groups(reverse, resolver)
            }
        return rendered

    def _render_values(self, nodes: List[TreeNode], resolver: NameResolver) -> Any:
        values = [self._render_node(child, resolver) for child in nodes]
        return values[0] if len(values) == 1 else values

    @staticmethod
    def _group_children(
        node: TreeNode,
    ) -> Tuple[Dict[URIRef, List[TreeNode]], Dict[URIRef, List[TreeNode]]]:
        """Split children by direction, grouping by predicate in first-seen order."""
        forward: Dict[URIRef, List[TreeNode]] = {}
        reverse: Dict[URIRef, List[TreeNode]] = {}
        for child in node.children:
            groups = reverse if child.inverse else forward
            groups.setdefault(child.predicate, []).append(child)
        return forward, reverse

    @staticmethod
    def _name_groups(
        groups: Dict[URIRef, List[TreeNode]],
        resolver: NameResolver,
    ) -> List[Tuple[str, List[TreeNode]]]:
        """
        Assign a JSON key to each predicate group.

        Display names are used where unique; colliding predicates get their
        qualified name, and the full IRI if that still collides.
        """
        names = {predicate: resolver.resolve_name(predicate) for predicate in groups}
        counts: Dict[str, int] = {}
        for name in names.values():
            counts[name] = counts.get(name, 0) + 1

        keys: Dict[URIRef, str] = {}
        for predicate, name in names.items():
            keys[predicate] = name if counts[name] == 1 else resolver.resolve_qname(predicate)

        qualified_counts: Dict[str, int] = {}
        for key in keys.values():
            qualified_counts[key] = qualified_counts.get(key, 0) + 1

        return [
            (keys[predicate] if qualified_counts[keys[predicate]] == 1 else str(predicate), nodes)
            for predicate, nodes in groups.items()
        ]
