"""
Converters package - graph loading for the tree generator.

Components:
- rdf_parser: RDF parsing with memory management
"""

from .rdf_parser import MemoryManager, RDFGraphParser

__all__ = [
    'MemoryManager',
    'RDFGraphParser',
]
