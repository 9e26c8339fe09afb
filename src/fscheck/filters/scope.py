"""
Scope filtering of mounted filesystems.

This module decides, per mount, whether it takes part in the check at all.
A mount is in scope when its type and path pass the include/exclude rules,
it is not a pseudo filesystem (unless pseudo filesystems are included) and it
is not mounted read-only (unless read-only mounts are included).
"""

import logging
from typing import Iterable, Iterator, Optional

from ..models.config import FilterConfig
from ..models.mounts import MountRecord
from .matchers import ExactMatcher, GlobMatcher, Matcher

logger = logging.getLogger(__name__)

READ_ONLY_OPTIONS = frozenset({"ro", "read-only"})


def is_read_only(options: str) -> bool:
    """Return True if the comma-separated mount options mark a read-only mount.

    Each field is compared whole, so ``"rw,noexec"`` or an option merely
    containing ``ro`` never matches.

    Examples:
        >>> is_read_only("noexec,ro,nosuid")
        True
        >>> is_read_only("rw,noexec,nosuid")
        False
    """
    if not options:
        return False
    return any(opt.strip() in READ_ONLY_OPTIONS for opt in options.split(","))


def _passes(value: str, include: Matcher, exclude: Matcher) -> bool:
    # Include wins; both empty means no restriction
    if include:
        return include.matches(value)
    if exclude:
        return not exclude.matches(value)
    return True


class ScopeFilter:
    """
    Applies a FilterConfig to mount records.

    The configuration is validated beforehand; in particular include and
    exclude are never both set for the same dimension.
    """

    def __init__(self, config: FilterConfig):
        self.config = config
        self._include_type = ExactMatcher(config.include_fs_type)
        self._exclude_type = ExactMatcher(config.exclude_fs_type)
        self._include_path = GlobMatcher(config.include_fs_path)
        self._exclude_path = GlobMatcher(config.exclude_fs_path)

    def is_valid_fs_type(self, fstype: str) -> bool:
        return _passes(fstype, self._include_type, self._exclude_type)

    def is_valid_fs_path(self, path: str) -> bool:
        return _passes(path, self._include_path, self._exclude_path)

    def rejection_reason(self, mount: MountRecord) -> Optional[str]:
        """Return why ``mount`` is out of scope, or None when it is in scope."""
        if not self.is_valid_fs_type(mount.fstype):
            return f"filesystem type '{mount.fstype}' filtered"
        if not self.is_valid_fs_path(mount.path):
            return "path filtered"
        if mount.pseudo and not self.config.include_pseudo:
            return f"pseudo filesystem '{mount.fstype}'"
        if is_read_only(mount.options) and not self.config.include_read_only:
            return "read-only mount"
        return None

    def in_scope(self, mount: MountRecord) -> bool:
        return self.rejection_reason(mount) is None

    def select(self, mounts: Iterable[MountRecord]) -> Iterator[MountRecord]:
        """Yield the in-scope mounts, preserving enumeration order."""
        for mount in mounts:
            reason = self.rejection_reason(mount)
            if reason is not None:
                logger.debug(f"Skipping {mount.path}: {reason}")
                continue
            yield mount
