"""
Threshold evaluation and aggregation of mount verdicts.
"""

from .aggregator import DiskCheck, exit_status, run_check
from .thresholds import INODES, SPACE, ThresholdEvaluator, breached_threshold, verdict_for

__all__ = [
    "DiskCheck",
    "INODES",
    "SPACE",
    "ThresholdEvaluator",
    "breached_threshold",
    "exit_status",
    "run_check",
    "verdict_for",
]
