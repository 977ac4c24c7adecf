"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.

Command Structure:
    - convert  <path>  Generate the canonical tree and write it as JSON
    - classify <path>  Report the result shape and roots of a graph
"""

import argparse

from ..constants import FileExtensions
from ..tree.builder import CyclePolicy


# ============================================================================
# Shared Flag Group Builders
# ============================================================================

def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add the configuration file flag."""
    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file'
    )


def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add input path and RDF syntax flags."""
    parser.add_argument('path', help='Path to the RDF result graph')
    parser.add_argument(
        '--format',
        dest='rdf_format',
        choices=sorted(set(FileExtensions.RDF_FORMATS.values())),
        help='RDF syntax of the input (default: inferred from the file extension)'
    )


def add_performance_flags(parser: argparse.ArgumentParser) -> None:
    """Add memory safety flags."""
    parser.add_argument(
        '--force-memory',
        action='store_true',
        help='Skip memory safety checks for very large files (use with caution)'
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='rdf-tree',
        description="Canonical tree views of RDF result graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Print the tree as JSON
    %(prog)s convert result.ttl

    # Write the tree to a file using a configuration
    %(prog)s convert result.ttl --config config.json --output tree.json

    # Only report the result shape
    %(prog)s classify result.nt
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_convert_parser(subparsers)
    _add_classify_parser(subparsers)

    return parser


# ============================================================================
# Command Parsers
# ============================================================================

def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the convert command parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Generate the canonical tree of a result graph as JSON'
    )
    add_input_flags(parser)
    add_config_flags(parser)
    parser.add_argument(
        '--output', '-o',
        help='Output JSON file path (default: print to stdout)'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help='JSON indentation (default: 2, use 0 for compact output)'
    )
    parser.add_argument(
        '--cycle-policy',
        choices=[policy.value for policy in CyclePolicy],
        help=(
            "Which earlier nodes block a child: 'ancestors' only checks the path "
            "to the root, 'seen' also skips resources already expanded. "
            "Overrides traversal.cycle_policy from the configuration."
        )
    )
    add_performance_flags(parser)


def _add_classify_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the classify command parser."""
    parser = subparsers.add_parser(
        'classify',
        help='Report the result shape and roots of a result graph'
    )
    add_input_flags(parser)
    add_config_flags(parser)
    add_performance_flags(parser)
