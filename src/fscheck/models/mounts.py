"""
Mount snapshot data model.
"""

from dataclasses import dataclass


def usage_percent(used: int, total: int) -> float:
    """Return ``used`` as a percentage of ``total``, or 0.0 when total is 0."""
    if total <= 0:
        return 0.0
    return used / total * 100


@dataclass(frozen=True)
class MountRecord:
    """
    Immutable snapshot of one mounted filesystem.

    Produced once per run by a mount provider and read-only afterwards.

    Attributes:
        path: Mount point (e.g. "/", "/home").
        device: Backing device or source (e.g. "/dev/sda1", "tmpfs").
        fstype: Filesystem type (e.g. "ext4", "xfs").
        options: Comma-joined mount options as reported by the OS.
        pseudo: True when the provider classifies the type as virtual.
    """

    path: str
    fstype: str
    options: str = ""
    device: str = ""
    bytes_total: int = 0
    bytes_used: int = 0
    bytes_free: int = 0
    inodes_total: int = 0
    inodes_used: int = 0
    inodes_free: int = 0
    pseudo: bool = False

    @property
    def space_percent(self) -> float:
        """Used space as a percentage of total space."""
        return usage_percent(self.bytes_used, self.bytes_total)

    @property
    def inodes_percent(self) -> float:
        """Used inodes as a percentage of total inodes."""
        return usage_percent(self.inodes_used, self.inodes_total)
