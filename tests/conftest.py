"""
Pytest configuration and shared fixtures for the fscheck test suite.

This module provides common fixtures, mount snapshot builders and
configuration helpers for all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict
from unittest.mock import Mock, patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fscheck.collectors.base import StaticMountProvider
from fscheck.models import MountRecord


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


def make_mount(
    path: str = "/",
    fstype: str = "ext4",
    options: str = "rw",
    bytes_total: int = 100,
    bytes_used: int = 10,
    inodes_total: int = 100,
    inodes_used: int = 10,
    pseudo: bool = False,
    device: str = "/dev/sda1",
) -> MountRecord:
    """Build a MountRecord with free counts derived from total and used."""
    return MountRecord(
        path=path,
        fstype=fstype,
        options=options,
        device=device,
        bytes_total=bytes_total,
        bytes_used=bytes_used,
        bytes_free=bytes_total - bytes_used,
        inodes_total=inodes_total,
        inodes_used=inodes_used,
        inodes_free=inodes_total - inodes_used,
        pseudo=pseudo,
    )


@pytest.fixture
def mount_factory():
    """Expose make_mount to tests as a fixture."""
    return make_mount


@pytest.fixture
def sample_mounts():
    """A small host: root, home, a tmpfs and a read-only snap mount."""
    return [
        make_mount("/", "ext4", "rw,relatime", bytes_total=1000, bytes_used=420),
        make_mount("/home", "xfs", "rw,nosuid", bytes_total=1000, bytes_used=870, device="/dev/sda2"),
        make_mount("/run", "tmpfs", "rw,nosuid,nodev", bytes_total=100, bytes_used=99, pseudo=True, device="tmpfs"),
        make_mount("/snap/core/1", "squashfs", "ro,nodev", bytes_total=50, bytes_used=50, pseudo=True,
                   device="/dev/loop0"),
    ]


@pytest.fixture
def static_provider(sample_mounts):
    """Provider serving the sample snapshot."""
    return StaticMountProvider(sample_mounts)


@pytest.fixture
def sample_check_data() -> Dict[str, Any]:
    """Sample [check] table for testing."""
    return {
        "name": "disk",
        "exclude_fs_type": ["nfs"],
        "exclude_fs_path": ["/var/lib/docker/*"],
        "warning": 80.0,
        "critical": 90.0,
        "inodes_warning": 85.0,
        "inodes_critical": 95.0,
        "extra_tags": ["env=prod", "region=us-west"],
    }


@pytest.fixture
def config_file(temp_dir, sample_check_data):
    """Create a temporary configuration file for testing."""
    import toml

    path = temp_dir / "fscheck.toml"
    with open(path, "w") as f:
        toml.dump({"check": sample_check_data}, f)
    return path


# ============================================================================
# psutil Fixtures
# ============================================================================


@pytest.fixture
def mock_psutil():
    """Mock psutil and os.statvfs for provider tests without system dependencies."""
    with (
        patch("fscheck.collectors.psutil_provider.psutil.disk_partitions") as mock_partitions,
        patch("fscheck.collectors.psutil_provider.psutil.disk_usage") as mock_usage,
        patch("fscheck.collectors.psutil_provider.os.statvfs", create=True) as mock_statvfs,
    ):
        mock_partitions.return_value = [
            Mock(device="/dev/sda1", mountpoint="/", fstype="ext4", opts="rw,relatime"),
            Mock(device="proc", mountpoint="/proc", fstype="proc", opts="rw,nosuid"),
        ]
        mock_usage.return_value = Mock(total=1000, used=960, free=40, percent=96.0)
        mock_statvfs.return_value = Mock(f_files=500, f_ffree=400)

        yield {
            "disk_partitions": mock_partitions,
            "disk_usage": mock_usage,
            "statvfs": mock_statvfs,
        }
