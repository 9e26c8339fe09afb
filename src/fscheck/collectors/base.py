"""
Defines the abstract interface for mount snapshot providers.

A provider enumerates the mounted filesystems of the current host and reads
their capacity and inode statistics. Per-mount read failures are yielded as
ProviderError items rather than raised, so the caller can decide whether to
skip the mount or abort the run.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Sequence, Union

from ..models.config import DEFAULT_PSEUDO_FS_TYPES
from ..models.mounts import MountRecord
from ..validation import ProviderError

logger = logging.getLogger(__name__)

MountSnapshot = Union[MountRecord, ProviderError]


class AbstractMountProvider(ABC):
    """
    Abstract base class for mount snapshot providers.

    Subclasses implement ``read_mounts``. Pseudo-filesystem classification is
    the provider's job and is driven by the configured list of pseudo types.
    """

    def __init__(self, pseudo_fs_types: Sequence[str] = DEFAULT_PSEUDO_FS_TYPES):
        """
        Initializes the provider.

        Args:
            pseudo_fs_types: Filesystem types reported with ``pseudo=True``.
        """
        self.pseudo_fs_types = frozenset(pseudo_fs_types)
        logger.debug(
            f"Initializing {self.__class__.__name__} with {len(self.pseudo_fs_types)} pseudo fs types"
        )

    def is_pseudo(self, fstype: str) -> bool:
        return fstype in self.pseudo_fs_types

    @abstractmethod
    def read_mounts(self) -> Iterable[MountSnapshot]:
        """
        Yield one snapshot item per mounted filesystem, in OS enumeration order.

        Yields:
            A MountRecord for each readable mount, or a ProviderError for a
            mount whose statistics could not be read.

        Raises:
            ProviderError: If the mount table itself cannot be enumerated.
        """
        pass


class StaticMountProvider(AbstractMountProvider):
    """
    Provider serving a fixed list of snapshot items.

    Used to replay a captured snapshot, and as the provider in tests.
    """

    def __init__(self, items: Iterable[MountSnapshot], **kwargs):
        super().__init__(**kwargs)
        self.items = list(items)

    def read_mounts(self) -> Iterator[MountSnapshot]:
        yield from self.items
