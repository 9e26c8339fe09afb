"""
Configuration assembly.

This module combines the optional configuration file with command-line
overrides and validates the result. The resulting CheckConfig is returned to
the caller and passed explicitly to every component; no configuration is
cached at module level.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.config import CheckConfig
from .loader import load_check_table
from .validators import validate_check_config

logger = logging.getLogger(__name__)


def merge_overrides(base: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Return ``base`` updated with every override that is not None.

    None marks a setting the command line did not mention, so the file value
    (or the default) stays in effect. Lists replace rather than extend.
    """
    merged = dict(base)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return merged


def load_check_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> CheckConfig:
    """
    Build the validated configuration for one check run.

    Args:
        config_path: Optional TOML file whose ``[check]`` table supplies settings
        overrides: Settings from the command line, keyed like ``[check]``

    Returns:
        Validated CheckConfig instance

    Raises:
        ConfigurationError: If the file cannot be loaded or the merged
            settings are invalid
    """
    file_data: Dict[str, Any] = {}
    if config_path is not None:
        file_data = load_check_table(config_path)
        logger.debug(f"Loaded {len(file_data)} settings from {config_path}")

    check_config = validate_check_config(merge_overrides(file_data, overrides))
    logger.debug(f"Effective configuration: {check_config}")
    return check_config
