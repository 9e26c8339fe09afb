"""
Command-line interface for the fscheck package.

This module provides the main CLI entry point for the filesystem check.
"""

from .main import main, main_cli

__all__ = [
    "main",
    "main_cli",
]
