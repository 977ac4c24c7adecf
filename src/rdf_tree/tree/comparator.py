"""
Sibling ordering for tree nodes.

Rules to ensure a predictable ordering of the children of a node, applied
top to bottom until one discriminates:

1. Forward rdf:type edges come first.
2. Forward edges before inverse edges.
3. Literals before resources.
4. Childless resources before resources with children.
5. Same predicate: literals by natural value, resources by identifier.
6. Different predicates: by the name resolver's order.
"""

from functools import cmp_to_key
from typing import Any, Callable

from ..core.name_resolver import NameResolver
from ..core.term_utils import cmp, compare_resources, compare_values, literal_value
from ..models import TreeNode


def _flag_order(first: bool, second: bool) -> int:
    """Nodes with the flag set sort first."""
    if first and not second:
        return -1
    if not first and second:
        return 1
    return 0


class TreeNodeComparator:
    """Total order over sibling tree nodes."""

    def __init__(self, name_resolver: NameResolver):
        self.name_resolver = name_resolver

    def compare(self, first: TreeNode, second: TreeNode) -> int:
        """Compare two siblings, returning -1, 0 or 1."""
        result = (
            _flag_order(first.is_type(), second.is_type())
            or _flag_order(not first.inverse, not second.inverse)
            or _flag_order(first.is_literal(), second.is_literal())
            or _flag_order(first.is_childless_resource(), second.is_childless_resource())
        )
        if result:
            return result

        if first.predicate == second.predicate:
            if first.is_literal() and second.is_literal():
                result = compare_values(literal_value(first.value), literal_value(second.value))
            else:
                result = compare_resources(first.value, second.value)
            # Distinct terms with equal values, e.g. "1" and "01" as integers.
            return result or cmp(_n3(first), _n3(second))

        return self.name_resolver.compare_names(first.predicate, second.predicate)

    def sort_key(self) -> Callable[[TreeNode], Any]:
        return cmp_to_key(self.compare)


def _n3(node: TreeNode) -> str:
    return node.value.n3() if node.value is not None else ""
