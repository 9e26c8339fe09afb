"""
Threshold evaluation of mount usage.

Converts a mount's space and inode usage percentages into verdicts using the
configured warning and critical thresholds, and picks the measurement that
decides the mount's combined verdict.
"""

import logging
from typing import Optional, Tuple

from ..models.config import ThresholdConfig
from ..models.mounts import MountRecord
from ..models.results import MountVerdict, Verdict, worst

logger = logging.getLogger(__name__)

SPACE = "space"
INODES = "inodes"


def verdict_for(percent: float, warning: float, critical: float) -> Verdict:
    """Classify a usage percentage against a warning/critical pair.

    Examples:
        >>> verdict_for(96.0, 80.0, 95.0)
        <Verdict.CRITICAL: 2>
        >>> verdict_for(80.0, 80.0, 95.0)
        <Verdict.WARNING: 1>
    """
    if percent >= critical:
        return Verdict.CRITICAL
    if percent >= warning:
        return Verdict.WARNING
    return Verdict.OK


def breached_threshold(verdict: Verdict, warning: float, critical: float) -> Optional[float]:
    """Return the threshold a verdict was reached at, or None for OK."""
    if verdict is Verdict.CRITICAL:
        return critical
    if verdict is Verdict.WARNING:
        return warning
    return None


class ThresholdEvaluator:
    """
    Evaluates mounts against a ThresholdConfig.
    """

    def __init__(self, config: ThresholdConfig):
        self.config = config

    def space_verdict(self, mount: MountRecord) -> Verdict:
        # Zero-capacity mounts carry no usable figures
        if mount.bytes_total <= 0:
            return Verdict.OK
        return verdict_for(mount.space_percent, self.config.warning, self.config.critical)

    def inodes_verdict(self, mount: MountRecord) -> Verdict:
        # Filesystems without fixed inode tables report zero inodes
        if mount.inodes_total <= 0:
            return Verdict.OK
        return verdict_for(mount.inodes_percent, self.config.inodes_warning, self.config.inodes_critical)

    def evaluate(self, mount: MountRecord) -> MountVerdict:
        """
        Evaluate both dimensions of a mount.

        The combined verdict is the worse of the two; when they are equal the
        space measurement is the one cited.
        """
        space = self.space_verdict(mount)
        inodes = self.inodes_verdict(mount)
        combined = worst((space, inodes))

        dimension, percent, threshold = self._deciding_measurement(mount, space, inodes)
        logger.debug(
            f"{mount.path}: space {mount.space_percent:.2f}% -> {space.name}, "
            f"inodes {mount.inodes_percent:.2f}% -> {inodes.name}"
        )
        return MountVerdict(
            mount=mount,
            space=space,
            inodes=inodes,
            verdict=combined,
            dimension=dimension,
            percent=percent,
            threshold=threshold,
        )

    def _deciding_measurement(
        self, mount: MountRecord, space: Verdict, inodes: Verdict
    ) -> Tuple[str, float, Optional[float]]:
        if inodes > space:
            return (
                INODES,
                mount.inodes_percent,
                breached_threshold(inodes, self.config.inodes_warning, self.config.inodes_critical),
            )
        return (
            SPACE,
            mount.space_percent,
            breached_threshold(space, self.config.warning, self.config.critical),
        )
