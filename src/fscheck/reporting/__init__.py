"""
Reporting of check results as a status line or a metrics stream.
"""

from .metrics import (
    METRIC_DEFINITIONS,
    build_metric_groups,
    emit_metric_groups,
    format_group,
    format_metric,
    format_value,
    mount_tags,
)
from .status import format_bytes, render_status

__all__ = [
    # Metrics mode
    "METRIC_DEFINITIONS",
    "build_metric_groups",
    "emit_metric_groups",
    "format_group",
    "format_metric",
    "format_value",
    "mount_tags",
    # Status mode
    "format_bytes",
    "render_status",
]
