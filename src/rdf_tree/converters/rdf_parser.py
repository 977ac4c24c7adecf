"""
RDF Parser Module

This module handles RDF parsing with memory management.

Components:
- MemoryManager: Pre-flight memory checks before parsing large files
- RDFGraphParser: Graph creation from content or files, with format inference
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import psutil
from rdflib import Graph

from ..constants import FileExtensions, MemoryLimits

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Manage memory usage during RDF parsing to prevent out-of-memory crashes.

    Provides pre-flight memory checks before loading large files to fail
    gracefully with helpful error messages instead of crashing.
    """

    MIN_AVAILABLE_MB = MemoryLimits.MIN_AVAILABLE_MEMORY_MB
    MAX_SAFE_FILE_MB = MemoryLimits.MAX_SAFE_FILE_MB
    MEMORY_MULTIPLIER = MemoryLimits.MEMORY_MULTIPLIER
    LOAD_FACTOR = 0.7  # Only use 70% of available memory as safe threshold

    @staticmethod
    def get_available_memory_mb() -> float:
        """
        Get available system memory in MB.

        Returns:
            Available memory in MB, or the minimum threshold if detection fails.
        """
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except (OSError, RuntimeError) as e:
            logger.warning(f"Could not determine available memory: {e}")
            return float(MemoryManager.MIN_AVAILABLE_MB)

    @classmethod
    def check_memory_available(cls, size_mb: float, force: bool = False) -> Tuple[bool, str]:
        """
        Check if enough memory is available to parse content of a given size.

        Args:
            size_mb: Size of the content in MB.
            force: If True, skip the hard size limit and allow large files.

        Returns:
            Tuple of (can_proceed: bool, message: str)
        """
        estimated_usage_mb = size_mb * cls.MEMORY_MULTIPLIER

        if not force and size_mb > cls.MAX_SAFE_FILE_MB:
            return False, (
                f"File size ({size_mb:.1f}MB) exceeds safe limit ({cls.MAX_SAFE_FILE_MB}MB). "
                f"Estimated memory required: ~{estimated_usage_mb:.0f}MB. "
                f"To process anyway, use --force-memory."
            )

        available_mb = cls.get_available_memory_mb()

        if available_mb < cls.MIN_AVAILABLE_MB:
            return False, (
                f"Insufficient free memory. "
                f"Available: {available_mb:.0f}MB, "
                f"Minimum required: {cls.MIN_AVAILABLE_MB}MB."
            )

        safe_threshold_mb = available_mb * cls.LOAD_FACTOR
        if estimated_usage_mb > safe_threshold_mb:
            if force:
                return True, (
                    f"WARNING: Content may exceed safe memory limits. "
                    f"Estimated usage: ~{estimated_usage_mb:.0f}MB, "
                    f"Safe threshold: {safe_threshold_mb:.0f}MB. "
                    f"Proceeding due to --force-memory."
                )
            return False, (
                f"Graph may be too large for available memory. "
                f"Size: {size_mb:.1f}MB, "
                f"Estimated parsing memory: ~{estimated_usage_mb:.0f}MB, "
                f"Safe threshold: {safe_threshold_mb:.0f}MB "
                f"(Available: {available_mb:.0f}MB)."
            )

        return True, (
            f"Memory OK: {size_mb:.2f}MB, "
            f"estimated usage ~{estimated_usage_mb:.0f}MB of {available_mb:.0f}MB available"
        )


class RDFGraphParser:
    """
    Handles RDF parsing with memory management and validation.

    This class encapsulates the graph parsing logic, including:
    - Format inference from file extensions
    - Pre-flight memory checks
    - Graph creation and parsing
    - Error handling with helpful messages
    """

    @staticmethod
    def infer_format_from_path(path: Union[str, Path]) -> str:
        """Map a file extension to an rdflib format name (Turtle when unknown)."""
        suffix = Path(path).suffix.lower()
        return FileExtensions.RDF_FORMATS.get(suffix, FileExtensions.DEFAULT_FORMAT)

    @staticmethod
    def resolve_format(
        rdf_format: Optional[str] = None,
        source_path: Optional[Union[str, Path]] = None,
    ) -> str:
        """
        Pick the rdflib format for a parse.

        Raises:
            ValueError: If an explicit format is not supported
        """
        if rdf_format:
            supported = set(FileExtensions.RDF_FORMATS.values())
            if rdf_format not in supported:
                raise ValueError(
                    f"Unsupported RDF format '{rdf_format}'. "
                    f"Supported formats: {', '.join(sorted(supported))}"
                )
            return rdf_format
        if source_path:
            return RDFGraphParser.infer_format_from_path(source_path)
        return FileExtensions.DEFAULT_FORMAT

    @staticmethod
    def _parse(graph: Graph, size_mb: float, **parse_kwargs) -> None:
        try:
            graph.parse(**parse_kwargs)
        except MemoryError as e:
            raise MemoryError(
                f"Insufficient memory while parsing RDF content ({size_mb:.1f} MB). "
                f"Original error: {e}"
            )
        except Exception as e:
            logger.error(f"Failed to parse RDF content: {e}")
            raise ValueError(f"Invalid RDF syntax: {e}")

    @staticmethod
    def parse_content(
        content: str,
        rdf_format: Optional[str] = None,
        force_large_file: bool = False,
        source_path: Optional[Union[str, Path]] = None,
    ) -> Tuple[Graph, int, float]:
        """
        Parse RDF content into a graph with memory safety checks.

        Args:
            content: The RDF content as a string
            rdf_format: rdflib format name; inferred from source_path when omitted
            force_large_file: If True, skip the hard size limit
            source_path: Original file path, used for format inference

        Returns:
            Tuple of (parsed Graph, triple count, content size in MB)

        Raises:
            ValueError: If content is empty, the format unsupported or the syntax invalid
            MemoryError: If insufficient memory is available to parse the content
        """
        if not content or not content.strip():
            raise ValueError("Empty RDF content provided")

        format_name = RDFGraphParser.resolve_format(rdf_format, source_path)
        content_size_mb = len(content.encode('utf-8')) / (1024 * 1024)
        logger.info(f"Parsing {format_name} content ({content_size_mb:.2f} MB)...")

        can_proceed, memory_message = MemoryManager.check_memory_available(
            content_size_mb, force=force_large_file
        )
        if not can_proceed:
            logger.error(f"Memory check failed: {memory_message}")
            raise MemoryError(memory_message)
        logger.debug(f"Memory check: {memory_message}")

        graph = Graph()
        RDFGraphParser._parse(graph, content_size_mb, data=content, format=format_name)

        triple_count = len(graph)
        if triple_count == 0:
            logger.warning("Parsed graph is empty - no triples found")
        else:
            logger.info(f"Successfully parsed {triple_count} triples")

        return graph, triple_count, content_size_mb

    @staticmethod
    def parse_file(
        file_path: Union[str, Path],
        rdf_format: Optional[str] = None,
        force_large_file: bool = False,
    ) -> Tuple[Graph, int, float]:
        """
        Parse an RDF file into a graph with memory safety checks.

        Args:
            file_path: Path to the RDF file
            rdf_format: rdflib format name; inferred from the extension when omitted
            force_large_file: If True, skip the hard size limit

        Returns:
            Tuple of (parsed Graph, triple count, file size in MB)

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file has invalid syntax or an unsupported format
            MemoryError: If insufficient memory is available
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not path.is_file():
            raise ValueError(f"Not a file: {file_path}")

        format_name = RDFGraphParser.resolve_format(rdf_format, path)
        file_size_mb = path.stat().st_size / (1024 * 1024)
        logger.info(f"Parsing {path.name} as {format_name} ({file_size_mb:.2f} MB)")

        can_proceed, memory_message = MemoryManager.check_memory_available(
            file_size_mb, force=force_large_file
        )
        if not can_proceed:
            logger.error(f"Memory check failed: {memory_message}")
            raise MemoryError(memory_message)
        logger.debug(f"Memory check: {memory_message}")

        graph = Graph()
        RDFGraphParser._parse(graph, file_size_mb, source=str(path), format=format_name)

        triple_count = len(graph)
        logger.info(f"Successfully parsed {triple_count} triples ({file_size_mb:.1f} MB)")

        return graph, triple_count, file_size_mb
