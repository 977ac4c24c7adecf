"""
Graph-to-tree expansion.

Expands a graph breadth first from a root resource into a TreeNode tree.
The graph may contain cycles; the tree never does. Edges are followed
forward (subject to object) and, near list items, backward. List items
reached from elsewhere are attached as pointers and never expanded again.
"""

import logging
from collections import deque
from enum import Enum
from typing import Collection, Deque, List, Optional, Set

from rdflib import RDF, Graph, Literal
from rdflib.term import Node

from ..core.term_utils import compare_resources, is_resource, term_label
from ..core.vocabulary import ResultVocabulary
from ..models import TreeNode

logger = logging.getLogger(__name__)


class CyclePolicy(str, Enum):
    """
    Which earlier nodes block a candidate child.

    ANCESTORS: only values on the path from the root to the node being
        expanded. A resource reachable along two paths appears under both.
    SEEN: additionally, any resource already expanded in this traversal,
        including resources in a sibling's subtree.
    """
    ANCESTORS = "ancestors"
    SEEN = "seen"

    def __str__(self) -> str:
        return self.value


class TreeBuilder:
    """
    Breadth-first expansion of a graph into a tree.

    Rules applied to every candidate edge of the node being expanded:
    - control vocabulary predicates are ignored
    - self-loops are discarded
    - literals are attached as leaves
    - a forward rdf:type edge sets the node's type hint and is kept as a child;
      inverse rdf:type edges are never followed
    - candidates already on the node's lineage (or expanded, under
      CyclePolicy.SEEN) are skipped
    - inverse edges are only kept next to list items
    - list items are attached but not queued for expansion
    """

    def __init__(
        self,
        graph: Graph,
        vocabulary: Optional[ResultVocabulary] = None,
        cycle_policy: CyclePolicy = CyclePolicy.ANCESTORS,
    ):
        self.graph = graph
        self.vocabulary = vocabulary or ResultVocabulary()
        self.cycle_policy = CyclePolicy(cycle_policy)

    def build(self, root: TreeNode, list_items: Collection[Node]) -> TreeNode:
        """
        Expand a root node in place.

        Args:
            root: Node to expand; may already be attached to a list root
            list_items: Resources that act as list boundaries

        Returns:
            The expanded root node
        """
        boundaries: Set[Node] = set(list_items)
        expanded: Set[Node] = set()
        queue: Deque[TreeNode] = deque([root])

        while queue:
            node = queue.popleft()
            if not is_resource(node.value):
                continue
            if self.cycle_policy == CyclePolicy.SEEN and node.value in expanded:
                continue
            # A list item only gets one generation of children below its own parent.
            if node.value in boundaries and node.has_grandparent():
                continue

            for child in self._expand(node, boundaries, expanded):
                if child.value not in boundaries:
                    queue.append(child)

            expanded.add(node.value)

        logger.debug(
            f"Expanded {term_label(root.value)} into {root.node_count()} nodes "
            f"({len(expanded)} resources expanded)"
        )
        return root

    def _candidate_triples(self, value: Node) -> List[tuple]:
        """Outgoing triples, then incoming triples not already listed."""
        outgoing = list(self.graph.triples((value, None, None)))
        seen = set(outgoing)
        incoming = [t for t in self.graph.triples((None, None, value)) if t not in seen]
        return outgoing + incoming

    def _expand(
        self,
        node: TreeNode,
        boundaries: Set[Node],
        expanded: Set[Node],
    ) -> List[TreeNode]:
        """Attach the children of one node and return those that are resources."""
        value = node.value
        node_is_list_item = value in boundaries
        lineage = node.lineage_values()
        resources: List[TreeNode] = []

        for subject, predicate, obj in self._candidate_triples(value):
            if self.vocabulary.is_control(predicate):
                continue
            if subject == obj:
                continue

            inverse = subject != value
            candidate = subject if inverse else obj

            if isinstance(candidate, Literal):
                node.add_child(TreeNode(candidate, predicate=predicate))
                continue

            if predicate == RDF.type:
                if inverse:
                    continue
                if node.type_hint is None or compare_resources(candidate, node.type_hint) < 0:
                    node.type_hint = candidate

            if candidate in lineage:
                continue
            if self.cycle_policy == CyclePolicy.SEEN and candidate in expanded:
                continue

            # Reverse links are only meaningful as members pointing back to the list.
            if inverse and not (node_is_list_item or candidate in boundaries):
                continue

            child = node.add_child(TreeNode(candidate, predicate=predicate, inverse=inverse))
            resources.append(child)

        return resources
