"""
CLI package for rdf-tree.

This package provides:
- parsers: Argument parser configuration
- commands: Command implementations
- helpers: Logging setup, configuration loading and console formatting
"""

from .helpers import (
    JSONFormatter,
    load_config,
    setup_logging,
    print_header,
    print_footer,
)
from .commands import (
    BaseCommand,
    ConvertCommand,
    ClassifyCommand,
)
from .parsers import create_argument_parser

__all__ = [
    'JSONFormatter',
    'load_config',
    'setup_logging',
    'print_header',
    'print_footer',
    'BaseCommand',
    'ConvertCommand',
    'ClassifyCommand',
    'create_argument_parser',
]
