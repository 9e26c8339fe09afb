"""
Mount snapshot provider implementation using the 'psutil' library.

Capacity figures come from ``psutil.disk_usage``; inode figures come from
``os.statvfs`` where the platform provides it.
"""

import logging
import os
from typing import Iterator, Tuple

import psutil

from ..models.mounts import MountRecord
from ..validation import ErrorSeverity, ProviderError, handle_provider_error
from .base import AbstractMountProvider, MountSnapshot

logger = logging.getLogger(__name__)


class PsutilMountProvider(AbstractMountProvider):
    """
    Reads the mount table and per-mount statistics through psutil.

    All partitions are enumerated, including virtual ones; they are marked
    pseudo according to the configured type list and left for the scope
    filter to drop.
    """

    def read_mounts(self) -> Iterator[MountSnapshot]:
        try:
            partitions = psutil.disk_partitions(all=True)
        except (OSError, psutil.Error) as e:
            raise ProviderError(f"cannot enumerate mounted filesystems: {e}") from e

        logger.debug(f"psutil reported {len(partitions)} partitions")
        for part in partitions:
            try:
                yield self._read_mount(part)
            except (OSError, psutil.Error) as e:
                error = ProviderError(
                    f"cannot read statistics for {part.mountpoint}: {e}",
                    mountpoint=part.mountpoint,
                    mount=MountRecord(
                        path=str(part.mountpoint),
                        fstype=str(part.fstype),
                        options=str(part.opts),
                        device=str(part.device),
                        pseudo=self.is_pseudo(str(part.fstype)),
                    ),
                )
                handle_provider_error(
                    error, part.mountpoint, severity=ErrorSeverity.DEBUG, reraise=False, logger=logger
                )
                yield error

    def _read_mount(self, part) -> MountRecord:
        usage = psutil.disk_usage(part.mountpoint)
        inodes_total, inodes_used, inodes_free = self._read_inodes(part.mountpoint)
        return MountRecord(
            path=str(part.mountpoint),
            fstype=str(part.fstype),
            options=str(part.opts),
            device=str(part.device),
            bytes_total=int(usage.total),
            bytes_used=int(usage.used),
            bytes_free=int(usage.free),
            inodes_total=inodes_total,
            inodes_used=inodes_used,
            inodes_free=inodes_free,
            pseudo=self.is_pseudo(str(part.fstype)),
        )

    @staticmethod
    def _read_inodes(mountpoint: str) -> Tuple[int, int, int]:
        if not hasattr(os, "statvfs"):
            return 0, 0, 0
        st = os.statvfs(mountpoint)
        total = int(st.f_files)
        free = int(st.f_ffree)
        return total, max(total - free, 0), free
