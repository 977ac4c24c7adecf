"""
rdf-tree: canonical tree views of RDF result graphs.

A result graph marks its roots with the reserved result vocabulary
(``result:this``). The generator classifies the result shape, expands each
root breadth first into a tree and orders every node's children
deterministically, so equal graphs always render the same way.

Usage:
    from rdf_tree import generate_from_file, JsonTreeWriter

    result = generate_from_file("result.ttl")
    print(JsonTreeWriter().as_json(result))
"""

from .core import (
    RdfTreeError,
    MissingRootError,
    ConflictingShapeError,
    InvalidControlTripleError,
    ShapeMismatchError,
    UnknownSortOrderError,
    ResultVocabulary,
    NameResolver,
)
from .models import (
    TreeNode,
    ResultShape,
    SortDirection,
    Classification,
    TreeGenerationResult,
)
from .tree import (
    CyclePolicy,
    GeneratorSettings,
    RdfTreeGenerator,
    generate_rdf_tree,
    generate_from_content,
    generate_from_file,
)
from .render import JsonTreeWriter

__version__ = "0.1.0"

__all__ = [
    # Errors
    'RdfTreeError',
    'MissingRootError',
    'ConflictingShapeError',
    'InvalidControlTripleError',
    'ShapeMismatchError',
    'UnknownSortOrderError',
    # Vocabulary and naming
    'ResultVocabulary',
    'NameResolver',
    # Models
    'TreeNode',
    'ResultShape',
    'SortDirection',
    'Classification',
    'TreeGenerationResult',
    # Generation
    'CyclePolicy',
    'GeneratorSettings',
    'RdfTreeGenerator',
    'generate_rdf_tree',
    'generate_from_content',
    'generate_from_file',
    # Rendering
    'JsonTreeWriter',
]
