"""
Configuration file loading utilities.

This module handles the low-level loading and parsing of TOML configuration
files. Only the ``[check]`` table is read; validation happens elsewhere.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

from ..validation import ConfigurationError, ErrorSeverity, handle_config_error

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    logger.debug(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        raise ConfigurationError(
            f"{description} not found: {file_path}",
            field_name="config",
            value=str(file_path),
        )

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        error = ConfigurationError(
            f"cannot parse {description} {file_path}: {e}",
            field_name="config",
            value=str(file_path),
        )
        handle_config_error(
            error=error,
            context=f"parsing {description}",
            severity=ErrorSeverity.DEBUG,
            reraise=False,
            logger=logger
        )
        raise error from e


def load_check_table(config_path: Path) -> Dict[str, Any]:
    """
    Load the ``[check]`` table of a configuration file.

    A file without a ``[check]`` table yields an empty dictionary, so every
    setting falls back to its default.

    Raises:
        ConfigurationError: If the file cannot be read or ``check`` is not a table
    """
    data = load_toml_file(config_path, "check configuration file")
    check_data = data.get("check", {})
    if not isinstance(check_data, dict):
        raise ConfigurationError(
            f"[check] in {config_path} must be a table",
            field_name="check",
            value=check_data,
        )
    return check_data
