"""
Metric data models for metrics mode.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Metric:
    """A single tagged, timestamped sample."""

    tags: Dict[str, str]
    value: float
    # Milliseconds since the epoch
    timestamp: int


@dataclass
class MetricGroup:
    """
    A named series of samples sharing a type and a help comment.

    Groups are filled while mounts are evaluated and emitted once at the end
    of the run. Samples are only ever appended.
    """

    name: str
    type: str
    comment: str
    metrics: List[Metric] = field(default_factory=list)

    def add_metric(self, tags: Dict[str, str], value: float, timestamp: int) -> None:
        """Append one sample to the group."""
        self.metrics.append(Metric(tags=dict(tags), value=value, timestamp=timestamp))

    @property
    def export_name(self) -> str:
        """Name as emitted: dotted hierarchy flattened with underscores."""
        return self.name.replace(".", "_")
