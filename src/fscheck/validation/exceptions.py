"""
Exception types and error handling helpers for the filesystem check.

This module defines the error taxonomy used throughout the check and a small
set of helpers that log errors consistently before re-raising or exiting.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when a single value fails validation.

    Carries the offending field name and value so callers can build
    a precise message for the status line.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class ConfigurationError(ValidationError):
    """
    Exception raised when the check configuration as a whole is unusable.

    Covers mutually exclusive include/exclude filters, inverted thresholds,
    malformed extra tags and unreadable configuration files. Always detected
    before any mount is evaluated.
    """


class ProviderError(Exception):
    """
    Raised or yielded when statistics for a single mount cannot be read.

    ``mount`` holds the mount identity (path, type, options) with zeroed
    statistics when it is known, so the failure can still be scope-filtered.
    """

    def __init__(self, message: str, mountpoint: Optional[str] = None, mount: Any = None):
        super().__init__(message)
        self.mountpoint = mountpoint
        self.mount = mount


class EmissionError(Exception):
    """Raised when a metric line cannot be written in metrics mode."""


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    # Tracebacks only surface at debug level
    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg)
        effective_logger.debug("Traceback for %s", context, exc_info=error)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_provider_error(error: Exception, mountpoint: str, **kwargs) -> None:
    """Handle errors raised while reading a mount's statistics."""
    handle_error(error, f"provider reading '{mountpoint}'", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a CLI-level error and exit the process."""
    exit_code = kwargs.pop('exit_code', 3)

    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
