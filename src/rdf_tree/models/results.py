"""
Classification and generation result types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from rdflib import URIRef
from rdflib.term import Node

from .tree_node import TreeNode

if TYPE_CHECKING:
    from ..core.name_resolver import NameResolver


class ResultShape(str, Enum):
    """Shape of the result described by the control triples."""
    UNKNOWN = "unknown"
    ITEM = "item"
    LIST = "list"
    LIST_WITH_ORDER_BY_PREDICATE = "list_with_order_by_predicate"

    def __str__(self) -> str:
        return self.value


class SortDirection(str, Enum):
    """Direction applied to an explicitly ordered list."""
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def __str__(self) -> str:
        return self.value


@dataclass
class Classification:
    """
    Outcome of reading the result:this control triples.

    Attributes:
        shape: Detected result shape.
        control_triples: The result:this triples that designate the roots.
        list_items: Candidate list items (ordered-list shape only), in graph order.
        ordering_predicate: Predicate whose values order the list, if given.
        direction: Sort direction of the ordered list.
    """
    shape: ResultShape = ResultShape.UNKNOWN
    control_triples: List[tuple] = field(default_factory=list)
    list_items: List[Node] = field(default_factory=list)
    ordering_predicate: Optional[URIRef] = None
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def ascending(self) -> bool:
        return self.direction == SortDirection.ASCENDING

    @property
    def first_root(self) -> Optional[Node]:
        """Object of the first designating triple."""
        if not self.control_triples:
            return None
        return self.control_triples[0][2]


@dataclass
class TreeGenerationResult:
    """
    Result of turning a graph into a canonical tree.

    Provides the tree itself plus what a renderer needs to format it and
    a few counters for reporting.
    """
    tree: TreeNode
    shape: ResultShape
    name_resolver: "NameResolver"
    roots: List[Node] = field(default_factory=list)
    triple_count: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return self.tree.node_count()

    @property
    def is_empty(self) -> bool:
        return self.tree.is_empty()

    def get_summary(self) -> str:
        """Generate human-readable summary of the generated tree."""
        lines = [
            "Tree Summary:",
            f"  ✓ Shape: {self.shape}",
            f"  ✓ Roots: {len(self.roots)}",
            f"  ✓ Nodes: {self.node_count}",
        ]

        if self.warnings:
            lines.append(f"  ⚠ Warnings: {len(self.warnings)}")
            for warning in self.warnings[:3]:
                lines.append(f"      - {warning}")
            if len(self.warnings) > 3:
                lines.append(f"      ... and {len(self.warnings) - 3} more")

        if self.triple_count > 0:
            lines.append(f"  Total RDF Triples: {self.triple_count}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize generation statistics to a dictionary."""
        return {
            "shape": self.shape.value,
            "roots": [str(root) for root in self.roots],
            "node_count": self.node_count,
            "triple_count": self.triple_count,
            "warnings": list(self.warnings),
        }
