"""
Mount snapshot providers.

This package contains the provider interface and its implementations:
- AbstractMountProvider: Interface every provider implements
- StaticMountProvider: Serves a fixed, pre-captured snapshot
- PsutilMountProvider: Reads the live mount table through psutil
"""

from .base import AbstractMountProvider, MountSnapshot, StaticMountProvider
from .psutil_provider import PsutilMountProvider

__all__ = [
    "AbstractMountProvider",
    "MountSnapshot",
    "PsutilMountProvider",
    "StaticMountProvider",
]
