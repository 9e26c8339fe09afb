"""
Unit tests for scope filtering.

Covers the include/exclude precedence for filesystem types and paths, the
read-only option parsing and the combined in-scope rule.
"""

import pytest

from fscheck.filters import ScopeFilter, is_read_only
from fscheck.models import FilterConfig


@pytest.mark.unit
class TestIsValidFSType:
    """Test cases for filesystem type filtering."""

    def test_no_filters_all_valid(self):
        scope = ScopeFilter(FilterConfig())
        assert scope.is_valid_fs_type("ext4")
        assert scope.is_valid_fs_type("xfs")
        assert scope.is_valid_fs_type("tmpfs")

    def test_include_filter_only_included_types_valid(self):
        scope = ScopeFilter(FilterConfig(include_fs_type=("ext4", "xfs")))
        assert scope.is_valid_fs_type("ext4")
        assert scope.is_valid_fs_type("xfs")
        assert not scope.is_valid_fs_type("tmpfs")
        assert not scope.is_valid_fs_type("btrfs")

    def test_exclude_filter_excluded_types_invalid(self):
        scope = ScopeFilter(FilterConfig(exclude_fs_type=("tmpfs", "devtmpfs")))
        assert scope.is_valid_fs_type("ext4")
        assert scope.is_valid_fs_type("xfs")
        assert not scope.is_valid_fs_type("tmpfs")
        assert not scope.is_valid_fs_type("devtmpfs")


@pytest.mark.unit
class TestIsValidFSPath:
    """Test cases for mount path filtering."""

    def test_no_filters_all_valid(self):
        scope = ScopeFilter(FilterConfig())
        assert scope.is_valid_fs_path("/")
        assert scope.is_valid_fs_path("/home")
        assert scope.is_valid_fs_path("/tmp")

    def test_include_filter_only_included_paths_valid(self):
        scope = ScopeFilter(FilterConfig(include_fs_path=("/", "/home")))
        assert scope.is_valid_fs_path("/")
        assert scope.is_valid_fs_path("/home")
        assert not scope.is_valid_fs_path("/tmp")
        assert not scope.is_valid_fs_path("/var")

    def test_exclude_filter_excluded_paths_invalid(self):
        scope = ScopeFilter(FilterConfig(exclude_fs_path=("/tmp", "/var")))
        assert scope.is_valid_fs_path("/")
        assert scope.is_valid_fs_path("/home")
        assert not scope.is_valid_fs_path("/tmp")
        assert not scope.is_valid_fs_path("/var")

    def test_glob_patterns(self):
        scope = ScopeFilter(FilterConfig(exclude_fs_path=("/tmp/*", "/var/log*")))
        assert scope.is_valid_fs_path("/")
        assert scope.is_valid_fs_path("/tmp")
        assert not scope.is_valid_fs_path("/tmp/foo")
        assert not scope.is_valid_fs_path("/var/log")

    def test_glob_does_not_cross_directories(self):
        scope = ScopeFilter(FilterConfig(exclude_fs_path=("/tmp/*",)))
        assert not scope.is_valid_fs_path("/tmp/a")
        assert scope.is_valid_fs_path("/tmp/a/b")

    def test_include_glob(self):
        scope = ScopeFilter(FilterConfig(include_fs_path=("/data/*",)))
        assert scope.is_valid_fs_path("/data/a")
        assert not scope.is_valid_fs_path("/data")


@pytest.mark.unit
class TestIsReadOnly:
    """Test cases for read-only option detection."""

    @pytest.mark.parametrize("options", [
        "ro",
        "ro,noexec,nosuid",
        "noexec,ro,nosuid",
        "read-only",
        "noexec,read-only,nosuid",
        "nodev, ro",
    ])
    def test_read_only_mount_options(self, options):
        assert is_read_only(options)

    @pytest.mark.parametrize("options", [
        "rw",
        "rw,noexec,nosuid",
        "",
        "rw,errors=remount-ro",
        "rw,rootcontext=system_u",
        "rw,nosuid,nodev,noatime,ro_compat",
    ])
    def test_read_write_mount_options(self, options):
        assert not is_read_only(options)


@pytest.mark.unit
class TestInScope:
    """Test cases for the combined scope rule."""

    def test_pseudo_excluded_by_default(self, mount_factory):
        scope = ScopeFilter(FilterConfig())
        assert not scope.in_scope(mount_factory("/run", "tmpfs", pseudo=True))
        assert scope.in_scope(mount_factory("/", "ext4"))

    def test_pseudo_included_when_configured(self, mount_factory):
        scope = ScopeFilter(FilterConfig(include_pseudo=True))
        assert scope.in_scope(mount_factory("/run", "tmpfs", pseudo=True))

    def test_read_only_excluded_by_default(self, mount_factory):
        scope = ScopeFilter(FilterConfig())
        assert not scope.in_scope(mount_factory("/mnt/iso", "iso9660", options="ro,nosuid"))

    def test_read_only_included_when_configured(self, mount_factory):
        scope = ScopeFilter(FilterConfig(include_read_only=True))
        assert scope.in_scope(mount_factory("/mnt/iso", "iso9660", options="ro,nosuid"))

    def test_type_and_path_rules_combine(self, mount_factory):
        scope = ScopeFilter(FilterConfig(include_fs_type=("ext4",), exclude_fs_path=("/boot/*",)))
        assert scope.in_scope(mount_factory("/", "ext4"))
        assert not scope.in_scope(mount_factory("/boot/efi", "ext4"))
        assert not scope.in_scope(mount_factory("/home", "xfs"))

    def test_include_type_does_not_override_pseudo(self, mount_factory):
        scope = ScopeFilter(FilterConfig(include_fs_type=("tmpfs",)))
        assert not scope.in_scope(mount_factory("/run", "tmpfs", pseudo=True))

    def test_rejection_reason(self, mount_factory):
        scope = ScopeFilter(FilterConfig(exclude_fs_type=("xfs",)))
        assert scope.rejection_reason(mount_factory("/", "ext4")) is None
        assert "xfs" in scope.rejection_reason(mount_factory("/home", "xfs"))
        assert scope.rejection_reason(mount_factory("/mnt", "ext4", options="ro")) == "read-only mount"

    def test_select_preserves_order(self, sample_mounts):
        scope = ScopeFilter(FilterConfig())
        selected = list(scope.select(sample_mounts))
        assert [m.path for m in selected] == ["/", "/home"]

    def test_select_with_everything_included(self, sample_mounts):
        scope = ScopeFilter(FilterConfig(include_pseudo=True, include_read_only=True))
        assert list(scope.select(sample_mounts)) == sample_mounts
