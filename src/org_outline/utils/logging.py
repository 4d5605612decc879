"""Structured logging setup for org-outline.

Events are written as JSON lines, one file per configuration. The library
modules (parser, document) never log; only the CLI and the config loader do.
"""

import atexit
import os
from pathlib import Path
from typing import IO, Any, Optional

import structlog

LOG_LEVEL_ENV = "ORG_OUTLINE_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_DIR = Path(".cache") / "org-outline" / "logs"

_log_stream: Optional[IO[str]] = None


def configure_logging(log_dir: Optional[Path] = None) -> Path:
    """
    Send structlog events to ``org-outline.log`` in ``log_dir``.

    The level comes from ORG_OUTLINE_LOG_LEVEL (one of DEBUG, INFO, WARNING,
    ERROR; anything else means INFO):

    - DEBUG: config file reads
    - INFO: config loaded, document loaded, CLI invocation
    - ERROR: documents that cannot be read or parsed

    Calling it again replaces the previous configuration and closes the
    previous log file.

    Args:
        log_dir: Directory for the log file (default: ~/.cache/org-outline/logs)

    Returns:
        Path of the log file

    Example:
        ORG_OUTLINE_LOG_LEVEL=DEBUG org-outline --file notes.org
        jq . ~/.cache/org-outline/logs/org-outline.log
    """
    global _log_stream

    if log_dir is None:
        log_dir = Path.home() / DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "org-outline.log"

    close_logging()
    _log_stream = open(log_file, "a", encoding="utf-8")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_log_level()),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_log_stream),
        # module loggers must not keep a handle to a closed file
        cache_logger_on_first_use=False,
    )

    return log_file


def close_logging() -> None:
    """Close the log file opened by ``configure_logging``, if any."""
    global _log_stream

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None


def _log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def get_logger(name: str) -> Any:
    """Get a structlog logger named after the calling module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("document_loaded", path="notes.org", characters=512)
    """
    return structlog.get_logger(name)


atexit.register(close_logging)
