"""
Renderers for generated RDF trees.
"""

from .json_writer import JsonTreeWriter, render_identifier, render_literal

__all__ = [
    'JsonTreeWriter',
    'render_identifier',
    'render_literal',
]
