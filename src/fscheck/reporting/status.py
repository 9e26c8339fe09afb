"""
Status-mode reporting.

Renders a CheckResult as a single line of the form
``<name> <VERDICT>: <detail>``. Human-readable formatting only changes how the
figures are printed, never the verdict.
"""

from ..evaluation.thresholds import INODES
from ..models.config import CheckConfig
from ..models.results import CheckResult, MountVerdict, Verdict

_IEC_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with IEC units.

    Examples:
        >>> format_bytes(512)
        '512 B'
        >>> format_bytes(1536)
        '1.5 KiB'
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"
    value = float(num_bytes)
    unit = _IEC_UNITS[0]
    for unit in _IEC_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f} {unit}"


def _figures(mv: MountVerdict, human_readable: bool) -> str:
    mount = mv.mount
    if mv.dimension == INODES:
        total, used, free = mount.inodes_total, mount.inodes_used, mount.inodes_free
        if human_readable:
            return f"Total: {total:,} inodes, Used: {used:,}, Free: {free:,}"
        return f"inodes_total={total} inodes_used={used} inodes_free={free}"

    total, used, free = mount.bytes_total, mount.bytes_used, mount.bytes_free
    if human_readable:
        return f"Total: {format_bytes(total)}, Used: {format_bytes(used)}, Free: {format_bytes(free)}"
    return f"total={total} used={used} free={free}"


def _describe(mv: MountVerdict, human_readable: bool) -> str:
    detail = f"{mv.mount.path} ({mv.mount.fstype}) {mv.dimension} {mv.percent:.2f}% used"
    if mv.threshold is not None:
        detail += f" >= {mv.verdict.name.lower()} threshold {mv.threshold:g}%"
    return f"{detail} - {_figures(mv, human_readable)}"


def render_status(result: CheckResult, config: CheckConfig, status: Verdict) -> str:
    """
    Build the one-line summary for a check run.

    Args:
        result: Outcome of the run.
        config: Configuration the run used.
        status: Verdict reported to the caller (see ``exit_status``).

    Returns:
        The summary line, without a trailing newline.
    """
    prefix = f"{config.name} {status.name}"
    if result.error is not None:
        return f"{prefix}: {result.error}"

    human = config.output.human_readable
    count = len(result.evaluated)
    if result.cited is None:
        line = f"{prefix}: no filesystems in scope"
    elif result.verdict is Verdict.OK:
        noun = "filesystem" if count == 1 else "filesystems"
        line = f"{prefix}: {count} {noun} within thresholds, first {_describe(result.cited, human)}"
    else:
        breaching = sum(1 for mv in result.evaluated if mv.verdict is not Verdict.OK)
        line = f"{prefix}: {_describe(result.cited, human)}"
        if breaching > 1:
            line += f" (+{breaching - 1} more)"

    if result.skipped:
        line += f" ({len(result.skipped)} skipped)"
    return line
