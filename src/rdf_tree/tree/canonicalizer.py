"""
Canonical ordering of a built tree.
"""

import logging
from typing import List, Tuple

from ..models import TreeNode
from .comparator import TreeNodeComparator

logger = logging.getLogger(__name__)


class Canonicalizer:
    """
    Sorts the children of every node with the sibling comparator.

    Children are sorted after their own subtrees (post-order). The list
    root keeps its children in list order. Running it twice gives the same
    tree as running it once.
    """

    def __init__(self, comparator: TreeNodeComparator):
        self.comparator = comparator

    def canonicalize(self, tree: TreeNode) -> TreeNode:
        key = self.comparator.sort_key()
        sorted_nodes = 0

        # Explicit stack so deep trees do not hit the recursion limit.
        stack: List[Tuple[TreeNode, bool]] = [(tree, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                if not node.is_list and len(node.children) > 1:
                    node.children.sort(key=key)
                    sorted_nodes += 1
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in node.children)

        logger.debug(f"Canonicalized tree, sorted children of {sorted_nodes} node(s)")
        return tree
