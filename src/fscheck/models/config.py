"""
Configuration data models.

This module contains the immutable configuration values handed to the scope
filter, the threshold evaluator and the reporters. Instances are built and
validated by ``fscheck.config``; nothing here reads files or global state.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

# Virtual filesystems with no real consumable capacity, skipped unless
# include_pseudo is set. Overridable through ``pseudo_fs_types``.
DEFAULT_PSEUDO_FS_TYPES: Tuple[str, ...] = (
    "autofs",
    "binfmt_misc",
    "bpf",
    "cgroup",
    "cgroup2",
    "configfs",
    "debugfs",
    "devpts",
    "devtmpfs",
    "efivarfs",
    "fusectl",
    "hugetlbfs",
    "mqueue",
    "nsfs",
    "proc",
    "pstore",
    "ramfs",
    "rpc_pipefs",
    "securityfs",
    "selinuxfs",
    "squashfs",
    "swap",
    "sysfs",
    "tmpfs",
    "tracefs",
)


@dataclass(frozen=True)
class FilterConfig:
    """
    Scope rules deciding which mounts are evaluated.

    An empty include or exclude tuple means "no restriction" on that
    dimension. Include and exclude for the same dimension are mutually
    exclusive; the validator rejects configurations that set both.
    """

    include_fs_type: Tuple[str, ...] = ()
    exclude_fs_type: Tuple[str, ...] = ()
    # Path patterns accept shell-style wildcards
    include_fs_path: Tuple[str, ...] = ()
    exclude_fs_path: Tuple[str, ...] = ()
    include_pseudo: bool = False
    include_read_only: bool = False


@dataclass(frozen=True)
class ThresholdConfig:
    """
    Warning and critical usage percentages for space and inodes.

    Each pair must satisfy ``warning < critical``.
    """

    warning: float = 85.0
    critical: float = 95.0
    inodes_warning: float = 85.0
    inodes_critical: float = 95.0


@dataclass(frozen=True)
class OutputConfig:
    """How results are reported and how failures are treated."""

    metrics_mode: bool = False
    human_readable: bool = False
    # Abort with CRITICAL on the first unreadable mount instead of skipping it
    fail_on_error: bool = False
    # In metrics mode, report the worst verdict instead of plain OK
    metrics_threshold_status: bool = False


@dataclass(frozen=True)
class CheckConfig:
    """
    The root configuration object for one check run.
    """

    filters: FilterConfig = field(default_factory=FilterConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    # Validated key=value pairs added to every metric's tags
    extra_tags: Dict[str, str] = field(default_factory=dict)
    pseudo_fs_types: Tuple[str, ...] = DEFAULT_PSEUDO_FS_TYPES
    # Prefix of the status line
    name: str = "fscheck"
