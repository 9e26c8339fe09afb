"""
Configuration management for the fscheck package.

Settings come from the ``[check]`` table of an optional TOML file, overridden
by command-line flags, and are validated into an immutable CheckConfig.
"""

from .loader import load_check_table, load_toml_file
from .manager import load_check_config, merge_overrides
from .validators import (
    validate_check_config,
    validate_filter_config,
    validate_output_config,
    validate_threshold_config,
)

__all__ = [
    # Main interface
    "load_check_config",
    "merge_overrides",
    # Advanced interface
    "load_toml_file",
    "load_check_table",
    "validate_check_config",
    "validate_filter_config",
    "validate_output_config",
    "validate_threshold_config",
]
