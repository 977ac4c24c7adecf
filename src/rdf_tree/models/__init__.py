"""
Data models for generated RDF trees.

Usage:
    from rdf_tree.models import TreeNode, ResultShape, TreeGenerationResult
"""

from .tree_node import TreeNode
from .results import (
    ResultShape,
    SortDirection,
    Classification,
    TreeGenerationResult,
)

__all__ = [
    "TreeNode",
    "ResultShape",
    "SortDirection",
    "Classification",
    "TreeGenerationResult",
]
