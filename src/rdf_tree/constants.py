"""
Centralized configuration constants for the RDF tree generator.

This module provides a single source of truth for the default values and
limits used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Malformed result graph
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    VALIDATION_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5
    PERMISSION_DENIED = 6


# ============================================================================
# Result Vocabulary
# ============================================================================

class VocabularyDefaults:
    """Reserved result vocabulary used to mark the roots of a tree."""

    RESULT_ONTOLOGY_URI_PREFIX: Final[str] = "http://purl.org/ontology/rdf-result/"
    """Default namespace of the control vocabulary."""

    THIS: Final[str] = "this"
    ITEM: Final[str] = "item"
    NEXT: Final[str] = "next"
    LIST_ITEM: Final[str] = "listItem"
    ORDER_BY_PREDICATE: Final[str] = "orderByPredicate"
    SORT_ORDER: Final[str] = "sortOrder"
    ASCENDING_ORDER: Final[str] = "AscendingOrder"
    DESCENDING_ORDER: Final[str] = "DescendingOrder"


# ============================================================================
# Memory Management
# ============================================================================

class MemoryLimits:
    """Memory management constants."""

    MAX_SAFE_FILE_MB: Final[int] = 500
    """Default maximum file size without explicit override (MB)."""

    MEMORY_MULTIPLIER: Final[float] = 3.5
    """RDFlib typically uses ~3-4x file size in memory."""

    MIN_AVAILABLE_MEMORY_MB: Final[int] = 256
    """Minimum available memory required before parsing (MB)."""


# ============================================================================
# Processing
# ============================================================================

class ProcessingLimits:
    """Traversal and progress reporting thresholds."""

    PROGRESS_MIN_ITEMS: Final[int] = 10
    """Lists shorter than this are built without a progress bar."""

    LARGE_GRAPH_TRIPLES: Final[int] = 100000
    """Graphs above this size get a warning before expansion."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Supported file extensions and the rdflib parser each maps to."""

    RDF_FORMATS: Final[dict] = {
        '.ttl': 'turtle',
        '.turtle': 'turtle',
        '.n3': 'n3',
        '.nt': 'nt',
        '.ntriples': 'nt',
        '.rdf': 'xml',
        '.xml': 'xml',
        '.owl': 'xml',
        '.jsonld': 'json-ld',
        '.trig': 'trig',
    }
    """Extension to rdflib format name."""

    DEFAULT_FORMAT: Final[str] = 'turtle'
    """Format used when the extension is unknown."""

    OUTPUT_EXTENSIONS: Final[tuple] = ('.json',)
    """Valid output file extensions."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""
