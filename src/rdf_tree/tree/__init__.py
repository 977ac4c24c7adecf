"""
Tree generation components.

Components:
- classifier: result shape detection from the control triples
- list_orderer: ordering of explicit list items
- builder: breadth-first graph expansion
- comparator / canonicalizer: deterministic sibling ordering
- generator: facade tying the components together
"""

from .classifier import ResultShapeClassifier
from .list_orderer import ListOrderer, compare_ordering_values
from .builder import CyclePolicy, TreeBuilder
from .comparator import TreeNodeComparator
from .canonicalizer import Canonicalizer
from .generator import (
    GeneratorSettings,
    RdfTreeGenerator,
    generate_rdf_tree,
    generate_from_content,
    generate_from_file,
)

__all__ = [
    'ResultShapeClassifier',
    'ListOrderer',
    'compare_ordering_values',
    'CyclePolicy',
    'TreeBuilder',
    'TreeNodeComparator',
    'Canonicalizer',
    'GeneratorSettings',
    'RdfTreeGenerator',
    'generate_rdf_tree',
    'generate_from_content',
    'generate_from_file',
]
