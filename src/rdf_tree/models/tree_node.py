"""
Tree node data model.

A TreeNode is one position in the output tree: an RDF term plus the edge
that connects it to its parent. The source graph may be cyclic; the tree
never is, because the builder refuses to attach an ancestor's value.
"""

import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set

from rdflib import RDF, BNode, Literal, URIRef
from rdflib.term import Node


@dataclass(eq=False)
class TreeNode:
    """
    One node of a generated RDF tree.

    Attributes:
        value: RDF term at this position; None for the list root.
        predicate: Predicate connecting this node to its parent, None for roots.
        inverse: True when the underlying triple points from this node to its parent.
        is_list: True only for the valueless root of a list result.
        type_hint: Object of an outgoing rdf:type triple, if one was found.
        children: Child nodes, in canonical order once canonicalized.

    The parent is held as a weak reference and is only used for ancestor
    lookups; ownership always runs parent to child.

    Example:
        >>> root = TreeNode(URIRef("http://example.org/a"))
        >>> child = root.add_child(TreeNode(Literal("A"), predicate=RDF.value))
        >>> child.parent is root
        True
    """
    value: Optional[Node] = None
    predicate: Optional[URIRef] = None
    inverse: bool = False
    is_list: bool = False
    type_hint: Optional[Node] = None
    children: List["TreeNode"] = field(default_factory=list, repr=False)
    _parent: Optional["weakref.ReferenceType[TreeNode]"] = field(
        default=None, init=False, repr=False
    )

    @classmethod
    def list_root(cls) -> "TreeNode":
        """Create the valueless root whose children are list items."""
        return cls(is_list=True)

    @property
    def parent(self) -> Optional["TreeNode"]:
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: "TreeNode") -> "TreeNode":
        """Attach a child node and return it."""
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def add_list_item(self, resource: Node) -> "TreeNode":
        """Attach a list item (no predicate) to a list root."""
        return self.add_child(TreeNode(value=resource))

    def has_ancestor_with_value(self, value: Node) -> bool:
        """Check whether any ancestor of this node holds the given value."""
        node = self.parent
        while node is not None and node.value is not None:
            if node.value == value:
                return True
            node = node.parent
        return False

    def lineage_values(self) -> Set[Node]:
        """Values of this node and all of its ancestors."""
        values: Set[Node] = set()
        node: Optional[TreeNode] = self
        while node is not None:
            if node.value is not None:
                values.add(node.value)
            node = node.parent
        return values

    def has_grandparent(self) -> bool:
        """Check whether this node sits below another valued node."""
        parent = self.parent
        return parent is not None and parent.value is not None

    def is_literal(self) -> bool:
        return isinstance(self.value, Literal)

    def is_resource(self) -> bool:
        return isinstance(self.value, (URIRef, BNode))

    def is_type(self) -> bool:
        """True for a forward rdf:type edge."""
        return self.predicate == RDF.type and not self.inverse

    def is_childless_resource(self) -> bool:
        return self.is_resource() and not self.children

    def is_root(self) -> bool:
        return self.parent is None

    def is_empty(self) -> bool:
        """True for the tree produced from an empty graph."""
        return self.value is None and not self.children

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Iterate over this node and all descendants, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        """Number of valued nodes in this subtree."""
        return sum(1 for node in self.iter_nodes() if node.value is not None)

    def to_dict(self) -> Dict[str, Any]:
        """Structural dictionary form, used for debugging and comparisons."""
        result: Dict[str, Any] = {
            "value": self.value.n3() if self.value is not None else None,
        }
        if self.is_list:
            result["list"] = True
        if self.predicate is not None:
            result["predicate"] = str(self.predicate)
        if self.inverse:
            result["inverse"] = True
        if self.type_hint is not None:
            result["type"] = self.type_hint.n3()
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result
