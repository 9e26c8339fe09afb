"""
Scope filtering for the fscheck package.

Decides which mounts are evaluated, using exact matching for filesystem types
and glob matching for mount paths.
"""

from .matchers import ExactMatcher, GlobMatcher, Matcher
from .scope import ScopeFilter, is_read_only

__all__ = [
    "ExactMatcher",
    "GlobMatcher",
    "Matcher",
    "ScopeFilter",
    "is_read_only",
]
