"""
CLI command implementations.

- BaseCommand: configuration loading and logging setup shared by commands
- ConvertCommand: graph to canonical JSON tree
- ClassifyCommand: result shape report
"""

import argparse
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from rdflib import Graph

from ..constants import ExitCode, FileExtensions
from ..converters.rdf_parser import RDFGraphParser
from ..core.exceptions import RdfTreeError
from ..core.term_utils import term_label
from ..models import ResultShape, TreeGenerationResult
from ..render import JsonTreeWriter
from ..tree.builder import CyclePolicy
from ..tree.generator import GeneratorSettings, RdfTreeGenerator
from .helpers import load_config, setup_logging, print_header, print_footer

logger = logging.getLogger(__name__)


def print_tree_summary(result: TreeGenerationResult, heading: Optional[str] = None) -> None:
    """Print a consistent summary for a generated tree."""
    if heading:
        print_header(heading)
    print(result.get_summary())
    if heading:
        print_footer()


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides common functionality like configuration loading and logging setup.
    Subclasses should implement the execute() method.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file; without one, defaults apply.
        """
        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """Lazy-load configuration."""
        if self._config is None:
            self._config = load_config(self.config_path) if self.config_path else {}
        return self._config

    def setup_logging_from_config(self) -> None:
        """Setup logging from the ``logging`` section, falling back to defaults."""
        log_config: Dict[str, Any] = {}
        try:
            log_config = self.config.get('logging') or {}
        except (ValueError, OSError) as exc:
            # Reported by load_settings; logging still gets the defaults.
            print(f"Warning: Could not load logging configuration: {exc}", file=sys.stderr)
        setup_logging(config=log_config)

    def load_settings(self, args: argparse.Namespace) -> Optional[GeneratorSettings]:
        """
        Build generator settings from the configuration and CLI overrides.

        Returns:
            Settings, or None after reporting a configuration error.
        """
        try:
            settings = GeneratorSettings.from_dict(self.config)
        except (ValueError, OSError) as exc:
            print(f"✗ Configuration error: {exc}", file=sys.stderr)
            return None

        cycle_policy = getattr(args, 'cycle_policy', None)
        if cycle_policy:
            settings.cycle_policy = CyclePolicy(cycle_policy)
        return settings

    @staticmethod
    def parse_graph(args: argparse.Namespace) -> Graph:
        """Parse the input file named on the command line."""
        graph, _, _ = RDFGraphParser.parse_file(
            args.path,
            rdf_format=getattr(args, 'rdf_format', None),
            force_large_file=getattr(args, 'force_memory', False),
        )
        return graph

    @staticmethod
    def report_error(exc: Exception) -> int:
        """Print an error and map it to an exit code."""
        if isinstance(exc, RdfTreeError):
            print(f"✗ Malformed result graph: {exc}", file=sys.stderr)
            return ExitCode.VALIDATION_ERROR
        if isinstance(exc, FileNotFoundError):
            print(f"✗ File not found: {exc}", file=sys.stderr)
            return ExitCode.FILE_NOT_FOUND
        if isinstance(exc, PermissionError):
            print(f"✗ Permission denied: {exc}", file=sys.stderr)
            return ExitCode.PERMISSION_DENIED
        if isinstance(exc, MemoryError):
            print(f"✗ Insufficient memory: {exc}", file=sys.stderr)
            return ExitCode.ERROR
        print(f"✗ Error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


class ConvertCommand(BaseCommand):
    """
    Generate the canonical tree of a result graph and emit it as JSON.

    Usage:
        convert <path> [--output tree.json] [--indent N] [--cycle-policy {ancestors,seen}]
    """

    def execute(self, args: argparse.Namespace) -> int:
        self.setup_logging_from_config()

        settings = self.load_settings(args)
        if settings is None:
            return ExitCode.CONFIG_ERROR

        try:
            graph = self.parse_graph(args)
            generator = RdfTreeGenerator.from_settings(settings)
            result = generator.generate_rdf_tree(
                graph,
                settings.prioritised_namespaces,
                settings.name_overrides,
            )
        except (RdfTreeError, ValueError, OSError, MemoryError) as exc:
            logger.error(f"Tree generation failed for {args.path}: {exc}")
            return self.report_error(exc)

        indent = getattr(args, 'indent', 2)
        indent = indent if indent and indent > 0 else None
        output = JsonTreeWriter().as_json(result, indent=indent)

        if not args.output:
            print(output)
            return ExitCode.SUCCESS

        output_path = Path(args.output)
        if output_path.suffix.lower() not in FileExtensions.OUTPUT_EXTENSIONS:
            print(f"⚠ Output file {output_path} does not have a .json extension", file=sys.stderr)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(output)
                f.write("\n")
        except OSError as exc:
            return self.report_error(exc)

        print(f"✓ Saved tree to: {output_path}")
        print_tree_summary(result, heading="RDF TREE")
        return ExitCode.SUCCESS


class ClassifyCommand(BaseCommand):
    """
    Report the result shape of a graph without building its tree.

    Usage:
        classify <path>
    """

    def execute(self, args: argparse.Namespace) -> int:
        self.setup_logging_from_config()

        settings = self.load_settings(args)
        if settings is None:
            return ExitCode.CONFIG_ERROR

        try:
            graph = self.parse_graph(args)
            if len(graph) == 0:
                print(f"✓ Shape: {ResultShape.UNKNOWN} (graph is empty)")
                return ExitCode.SUCCESS

            generator = RdfTreeGenerator.from_settings(settings)
            classification = generator.classify(graph)
            if classification.shape == ResultShape.LIST:
                roots = generator.follow_next_chain(graph, classification.first_root)
            else:
                roots = [triple[2] for triple in classification.control_triples]
        except (RdfTreeError, ValueError, OSError, MemoryError) as exc:
            logger.error(f"Classification failed for {args.path}: {exc}")
            return self.report_error(exc)

        print_header("RESULT SHAPE")
        print(f"  ✓ Shape: {classification.shape}")
        print(f"  ✓ Roots: {len(roots)}")
        for root in roots:
            print(f"      - {term_label(root)}")
        if classification.shape == ResultShape.LIST_WITH_ORDER_BY_PREDICATE:
            if classification.ordering_predicate is not None:
                print(f"  ✓ Ordered by: {term_label(classification.ordering_predicate)}")
            else:
                print("  ⚠ No ordering predicate, items are ordered by identifier")
            print(f"  ✓ Direction: {classification.direction}")
        print_footer()
        return ExitCode.SUCCESS
