"""
Data models and structures for the filesystem check.

Configuration Models:
- Scope filter rules, thresholds and output settings
- The root CheckConfig handed to every component

Snapshot Models:
- MountRecord, one immutable row per mounted filesystem

Result Models:
- Verdict ordering and the worst-of reduction
- Per-mount verdicts and the overall CheckResult

Metric Models:
- MetricGroup and Metric samples emitted in metrics mode
"""

from .config import (
    DEFAULT_PSEUDO_FS_TYPES,
    CheckConfig,
    FilterConfig,
    OutputConfig,
    ThresholdConfig,
)
from .metrics import Metric, MetricGroup
from .mounts import MountRecord, usage_percent
from .results import CheckResult, MountVerdict, Verdict, worst

__all__ = [
    # Configuration
    "DEFAULT_PSEUDO_FS_TYPES",
    "CheckConfig",
    "FilterConfig",
    "OutputConfig",
    "ThresholdConfig",
    # Snapshot
    "MountRecord",
    "usage_percent",
    # Results
    "CheckResult",
    "MountVerdict",
    "Verdict",
    "worst",
    # Metrics
    "Metric",
    "MetricGroup",
]
