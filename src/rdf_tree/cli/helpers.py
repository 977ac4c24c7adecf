"""
CLI helper utilities.

- setup_logging: console (stderr) and optional rotating file logging
- load_config: JSON configuration files
- print_header / print_footer: console report framing
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constants import LoggingConfig

logger = logging.getLogger(__name__)

_installed_handlers: List[logging.Handler] = []


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LoggingConfig.JSON_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def clear_logging_handlers() -> None:
    """Detach and close the handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def _build_formatter(config: Dict[str, Any]) -> logging.Formatter:
    style = str(config.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
    if style == 'json':
        return JSONFormatter()
    return logging.Formatter(
        fmt=config.get('pattern') or LoggingConfig.LOG_FORMAT,
        datefmt=config.get('date_format', LoggingConfig.DATE_FORMAT),
    )


def _open_log_file(path: str, config: Dict[str, Any]) -> Optional[logging.Handler]:
    rotation = config.get('rotation') if isinstance(config.get('rotation'), dict) else {}
    max_mb = rotation.get('max_mb', LoggingConfig.MAX_LOG_FILE_MB)
    backup_count = rotation.get('backup_count', LoggingConfig.LOG_BACKUP_COUNT)
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=int(max_mb) * 1024 * 1024,
            backupCount=max(int(backup_count), 1),
            encoding='utf-8',
        )
    except (OSError, TypeError, ValueError) as exc:
        print(f"Warning: Could not write log file {path}: {exc}", file=sys.stderr)
        return None


def setup_logging(
    level: str = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Configure the root logger for a CLI run.

    Console output goes to stderr so that trees printed to stdout stay
    machine-readable. Calling this again replaces the handlers installed by
    the previous call.

    Args:
        level: Log level used when the config does not set one.
        log_file: Log file override.
        config: Optional ``logging`` configuration section with ``level``,
            ``file``, ``format`` (text or json), ``pattern``, ``date_format``
            and ``rotation`` ({"max_mb", "backup_count"}).

    Returns:
        The log file path in use, or None when logging to the console only.
    """
    config = dict(config or {})
    log_level = getattr(logging, str(config.get('level', level)).upper(), logging.INFO)
    file_path = log_file if log_file is not None else config.get('file')
    formatter = _build_formatter(config)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_handler = _open_log_file(file_path, config) if file_path else None
    if file_handler is not None:
        handlers.append(file_handler)

    clear_logging_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    if file_handler is not None:
        logger.info(f"Logging to: {file_path}")
        return file_path
    return None


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Raises:
        ValueError: If config_path is empty, not a .json file, or not a JSON object.
        FileNotFoundError: If the configuration file doesn't exist.
        PermissionError: If the path is a symlink.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if path.suffix.lower() != '.json':
        raise ValueError(f"Configuration file must be a .json file: {config_path}")
    if path.is_symlink():
        raise PermissionError(f"Symlinks are not allowed for configuration files: {config_path}")
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    return config


def print_header(title: str, width: int = 60) -> None:
    """Print a framed section title."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n")
