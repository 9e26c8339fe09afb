"""
Metrics-mode reporting.

Builds one MetricGroup per measurement dimension, in a fixed order, with one
sample per evaluated mount, and serialises the groups in the Prometheus text
exposition style::

    # HELP disk_percent_used [GAUGE] Percentage of disk used
    # TYPE disk_percent_used gauge
    disk_percent_used{mountpoint="/",fstype="ext4"} 42.5 1700000000000

The whole emission is rendered before anything is written so that a failure
never leaves a truncated series behind.
"""

import logging
import time
from typing import Callable, Dict, List, NamedTuple, Optional, TextIO

from ..models.config import CheckConfig
from ..models.metrics import Metric, MetricGroup
from ..models.results import CheckResult, MountVerdict, Verdict
from ..tags import merge_tags
from ..validation import EmissionError

logger = logging.getLogger(__name__)


class MetricDefinition(NamedTuple):
    name: str
    comment: str
    value: Callable[[MountVerdict], float]


def _flag(condition: bool) -> int:
    return 1 if condition else 0


METRIC_DEFINITIONS = (
    MetricDefinition("disk.critical", "Disk usage at or above the critical threshold",
                     lambda mv: _flag(mv.space >= Verdict.CRITICAL)),
    MetricDefinition("disk.warning", "Disk usage at or above the warning threshold",
                     lambda mv: _flag(mv.space >= Verdict.WARNING)),
    MetricDefinition("disk.percent_used", "Percentage of disk used",
                     lambda mv: mv.mount.space_percent),
    MetricDefinition("disk.total_bytes", "Total size of the filesystem in bytes",
                     lambda mv: mv.mount.bytes_total),
    MetricDefinition("disk.used_bytes", "Used space in bytes",
                     lambda mv: mv.mount.bytes_used),
    MetricDefinition("disk.free_bytes", "Free space in bytes",
                     lambda mv: mv.mount.bytes_free),
    MetricDefinition("disk.inodes_critical", "Inode usage at or above the critical threshold",
                     lambda mv: _flag(mv.inodes >= Verdict.CRITICAL)),
    MetricDefinition("disk.inodes_warning", "Inode usage at or above the warning threshold",
                     lambda mv: _flag(mv.inodes >= Verdict.WARNING)),
    MetricDefinition("disk.inodes_percent_used", "Percentage of inodes used",
                     lambda mv: mv.mount.inodes_percent),
    MetricDefinition("disk.inodes_total", "Total number of inodes",
                     lambda mv: mv.mount.inodes_total),
    MetricDefinition("disk.inodes_used", "Number of used inodes",
                     lambda mv: mv.mount.inodes_used),
    MetricDefinition("disk.inodes_free", "Number of free inodes",
                     lambda mv: mv.mount.inodes_free),
)


def mount_tags(mv: MountVerdict, extra_tags: Dict[str, str]) -> Dict[str, str]:
    """Tags attached to every sample of a mount."""
    return merge_tags({"mountpoint": mv.mount.path, "fstype": mv.mount.fstype}, extra_tags)


def build_metric_groups(
    result: CheckResult, config: CheckConfig, timestamp: Optional[int] = None
) -> List[MetricGroup]:
    """
    Build the metric groups for a check result.

    Args:
        result: Outcome of the run; only evaluated mounts produce samples.
        config: Configuration the run used (for extra tags).
        timestamp: Sample time in epoch milliseconds; defaults to now.

    Returns:
        One group per entry of METRIC_DEFINITIONS, in that order.
    """
    if timestamp is None:
        timestamp = int(time.time() * 1000)

    groups = [MetricGroup(name=d.name, type="GAUGE", comment=d.comment) for d in METRIC_DEFINITIONS]
    for mv in result.evaluated:
        tags = mount_tags(mv, config.extra_tags)
        for definition, group in zip(METRIC_DEFINITIONS, groups):
            group.add_metric(tags, definition.value(mv), timestamp)
    return groups


def _escape_label(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\"", "\\\"").replace("\n", "\\n")


def format_value(value: float) -> str:
    """Shortest text form of a sample value; integral values print without a fraction."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_metric(name: str, metric: Metric) -> str:
    line = name
    if metric.tags:
        labels = ",".join(f"{key}=\"{_escape_label(val)}\"" for key, val in metric.tags.items())
        line += "{" + labels + "}"
    return f"{line} {format_value(metric.value)} {metric.timestamp}"


def format_group(group: MetricGroup) -> List[str]:
    """Render a group as its HELP and TYPE header lines followed by one line per sample."""
    name = group.export_name
    lines = [
        f"# HELP {name} [{group.type.upper()}] {group.comment}",
        f"# TYPE {name} {group.type.lower()}",
    ]
    lines.extend(format_metric(name, metric) for metric in group.metrics)
    return lines


def emit_metric_groups(groups: List[MetricGroup], stream: TextIO) -> None:
    """
    Write all groups to ``stream`` in one piece.

    Raises:
        EmissionError: If the stream cannot be written or flushed.
    """
    lines: List[str] = []
    for group in groups:
        lines.extend(format_group(group))
    payload = "\n".join(lines) + "\n" if lines else ""

    try:
        stream.write(payload)
        stream.flush()
    except (OSError, ValueError) as e:
        raise EmissionError(f"failed to write metrics: {e}") from e
    logger.debug(f"Emitted {len(groups)} metric groups ({len(lines)} lines)")
