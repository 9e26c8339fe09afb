"""
fscheck: Filesystem space and inode health check.

This package enumerates mounted filesystems, filters them by type, path and
mount options, evaluates space and inode usage against warning and critical
thresholds, and reports either a status line or a metrics stream for an
external monitoring pipeline.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Data structures and type definitions
- validation: Field validators and the error taxonomy
- collectors: Mount snapshot providers
- filters: Scope filtering of mounts
- evaluation: Threshold evaluation and aggregation
- reporting: Status line and metrics output
- cli: Command-line interface

Usage:
    From command line:
        fscheck --warning 80 --critical 90 --exclude-fs-path '/snap/*'

    Programmatically:
        from fscheck import load_check_config, run_check
        config = load_check_config(overrides={"warning": 80, "critical": 90})
        result = run_check(config)
"""

__version__ = "1.0.0"

# Main interfaces
from .config import load_check_config
from .evaluation import DiskCheck, exit_status, run_check
from .cli import main_cli

# Model classes for external use
from .models import (
    CheckConfig,
    CheckResult,
    FilterConfig,
    MetricGroup,
    MountRecord,
    OutputConfig,
    ThresholdConfig,
    Verdict,
)

# Validation utilities
from .validation import (
    ConfigurationError,
    EmissionError,
    ProviderError,
    ValidationError,
)

# Building blocks
from .collectors import AbstractMountProvider, PsutilMountProvider, StaticMountProvider
from .filters import ScopeFilter, is_read_only
from .tags import parse_extra_tags

__all__ = [
    # Main interfaces
    "load_check_config",
    "DiskCheck",
    "exit_status",
    "run_check",
    "main_cli",
    # Models
    "CheckConfig",
    "CheckResult",
    "FilterConfig",
    "MetricGroup",
    "MountRecord",
    "OutputConfig",
    "ThresholdConfig",
    "Verdict",
    # Validation
    "ConfigurationError",
    "EmissionError",
    "ProviderError",
    "ValidationError",
    # Building blocks
    "AbstractMountProvider",
    "PsutilMountProvider",
    "StaticMountProvider",
    "ScopeFilter",
    "is_read_only",
    "parse_extra_tags",
]
