"""
Structured logging (OpenTelemetry-compliant).

Produces structured log output following the OpenTelemetry Logging Data Model.

Usage::

    from ._logging import scoped_logger

    log = scoped_logger("renderer")

    # Warning (no code location)
    log.warning("Partial depth limit reached", extra={"partial": name})

    # Debug message (includes code location automatically)
    log.debug("Compiled template", extra={"length": len(source)})

Environment::

    WHISKER_LOG_LEVEL=trace|debug|info|warn|error|fatal|off (default: info)
    WHISKER_LOG_FORMAT=json|human (default: human if tty, json if piped)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Any

__all__ = ["logger", "setup_logging", "scoped_logger"]

# =============================================================================
# Version
# =============================================================================


def _get_version() -> str:
    """Get whisker version from package metadata."""
    try:
        return get_version("whisker")
    except (ImportError, PackageNotFoundError, AttributeError):
        return "0.0.0"


# =============================================================================
# Level Mapping
# =============================================================================

# Map Python levels to OpenTelemetry severity text
_LEVEL_TO_SEVERITY = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}

# Map string names to Python levels (case-insensitive)
_NAME_TO_LEVEL = {
    "trace": logging.DEBUG,  # Python doesn't have TRACE, use DEBUG
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "err": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,  # Higher than any level
    "none": logging.CRITICAL + 10,
}

# Levels that include code location
_CODE_LOCATION_LEVELS = {logging.DEBUG, logging.ERROR, logging.CRITICAL}

# Standard LogRecord fields, never copied into attributes
_STANDARD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "scope",
        "message",
    }
)


def _infer_scope(logger_name: str) -> str:
    """Last dotted component of the logger name, for records without a scope."""
    return logger_name.split(".")[-1] if logger_name else "whisker"


def _strip_path_prefix(filepath: str) -> str:
    """Strip common prefixes from filepath for cleaner log output."""
    for prefix in ("whisker/", "src/"):
        if prefix in filepath:
            return filepath[filepath.index(prefix) + len(prefix) :]
    return filepath


# =============================================================================
# Formatters
# =============================================================================


class JsonFormatter(logging.Formatter):
    """OpenTelemetry-compliant JSON formatter."""

    def __init__(self) -> None:
        super().__init__()
        self._version = _get_version()

    def format(self, record: logging.LogRecord) -> str:
        # Timestamp with nanosecond precision (RFC3339)
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        # Python's timestamp has microsecond precision, pad to nanoseconds
        timestamp = dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{int(dt.microsecond * 1000):09d}Z"

        severity = _LEVEL_TO_SEVERITY.get(record.levelno, "INFO")

        attributes: dict[str, Any] = {}
        attributes["scope"] = getattr(record, "scope", None) or _infer_scope(record.name)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_FIELDS and not key.startswith("_"):
                attributes[key] = value

        # Code location for DEBUG/ERROR/FATAL
        if record.levelno in _CODE_LOCATION_LEVELS:
            attributes["code.filepath"] = _strip_path_prefix(record.pathname)
            attributes["code.lineno"] = record.lineno

        log_record = {
            "timestamp": timestamp,
            "severityText": severity,
            "body": record.getMessage(),
            "attributes": attributes,
            "resource": {
                "service.name": "whisker",
                "service.version": self._version,
            },
        }

        return json.dumps(log_record, separators=(",", ":"), default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for terminal output."""

    # ANSI color codes
    _RESET = "\x1b[0m"
    _DIM = "\x1b[2m"
    _RED = "\x1b[31m"
    _YELLOW = "\x1b[33m"
    _CYAN = "\x1b[36m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        time_str = dt.strftime("%H:%M:%S")

        severity = _LEVEL_TO_SEVERITY.get(record.levelno, "INFO")

        if self._use_colors:
            if record.levelno <= logging.DEBUG:
                level_color = self._DIM
            elif record.levelno >= logging.ERROR:
                level_color = self._RED
            elif record.levelno >= logging.WARNING:
                level_color = self._YELLOW
            else:
                level_color = ""
        else:
            level_color = ""

        scope = getattr(record, "scope", None) or _infer_scope(record.name)

        parts = [time_str, " "]

        if level_color:
            parts.append(level_color)
        parts.append(f"{severity:<5} ")
        if level_color:
            parts.append(self._RESET)

        if self._use_colors:
            parts.append(self._CYAN)
        parts.append(f"[{scope}] ")
        if self._use_colors:
            parts.append(self._RESET)

        parts.append(record.getMessage())

        # Partial name shown in parentheses
        partial = getattr(record, "partial", None)
        if partial:
            parts.append(f" ({partial})")

        # Code location for DEBUG/ERROR/FATAL
        if record.levelno in _CODE_LOCATION_LEVELS:
            filepath = _strip_path_prefix(record.pathname)
            if self._use_colors:
                parts.append(self._DIM)
            parts.append(f" [{filepath}:{record.lineno}]")
            if self._use_colors:
                parts.append(self._RESET)

        return "".join(parts)


# =============================================================================
# Logger Setup
# =============================================================================


def _get_log_level() -> int:
    """Get log level from environment."""
    level_name = os.environ.get("WHISKER_LOG_LEVEL", "info")
    return _NAME_TO_LEVEL.get(level_name.lower(), logging.INFO)


def _get_log_format() -> str:
    """Get log format from environment or auto-detect."""
    fmt = os.environ.get("WHISKER_LOG_FORMAT")
    if fmt:
        return fmt.lower()
    # Auto-detect: human for TTY, json for pipe
    return "human" if sys.stderr.isatty() else "json"


def _create_handler(fmt: str | None = None) -> logging.Handler:
    """Create appropriate handler based on format."""
    handler = logging.StreamHandler(sys.stderr)
    fmt = (fmt or _get_log_format()).lower()

    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(use_colors=sys.stderr.isatty()))

    return handler


# Single logger for all of whisker
logger = logging.getLogger("whisker")


def _setup_default_handler() -> None:
    """Configure default logging based on environment."""
    # Don't add handler if user already configured logging
    if logger.handlers:
        return

    logger.addHandler(_create_handler())
    logger.setLevel(_get_log_level())


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
) -> None:
    """
    Configure whisker logging.

    Parameters
    ----------
    level : str or int, default "INFO"
        Log level. Can be "DEBUG", "INFO", "WARNING", "ERROR", "FATAL",
        or a logging constant like ``logging.DEBUG``.

    format : str, optional
        Log format. Either "json" or "human". If not specified,
        uses WHISKER_LOG_FORMAT env var or auto-detects based on TTY.

    Examples
    --------
    JSON output for machine parsing::

        >>> import whisker
        >>> whisker.setup_logging("INFO", format="json")

    Human-readable output::

        >>> whisker.setup_logging("DEBUG", format="human")
    """
    if isinstance(level, str):
        level = _NAME_TO_LEVEL.get(level.lower(), logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    logger.addHandler(_create_handler(format))
    logger.setLevel(level)


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges extra attributes with scope."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        # Merge extra from call with our defaults (scope)
        extra: dict[str, Any] = dict(self.extra) if self.extra else {}
        if "extra" in kwargs:
            extra.update(kwargs["extra"])
        kwargs["extra"] = extra
        return msg, kwargs


def scoped_logger(scope: str) -> logging.LoggerAdapter:
    """
    Create a logger adapter with a fixed scope.

    Parameters
    ----------
    scope : str
        The scope name (e.g., "parser", "renderer").

    Returns
    -------
    logging.LoggerAdapter
        A logger adapter that automatically adds scope to all messages.

    Examples
    --------
    ::

        from whisker._logging import scoped_logger
        log = scoped_logger("renderer")
        log.warning("Partial body failed to parse", extra={"partial": "header"})
    """
    return _ScopedLoggerAdapter(logger, {"scope": scope})


# Initialize on import
_setup_default_handler()
