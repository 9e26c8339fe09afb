"""
Check result data models.

This module defines the three-valued Verdict, the per-mount evaluation record
and the container for the outcome of a complete check run. The ordering of
Verdict is the single source of truth for every worst-of reduction.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

from .mounts import MountRecord


class Verdict(IntEnum):
    """
    Severity of a usage measurement.

    Values double as the process exit codes of status mode.
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2


def worst(verdicts: Iterable[Verdict]) -> Verdict:
    """Return the most severe verdict, or OK for an empty iterable."""
    return max(verdicts, default=Verdict.OK)


@dataclass(frozen=True)
class MountVerdict:
    """
    Evaluation of a single in-scope mount.

    ``dimension``, ``percent`` and ``threshold`` describe the measurement that
    decided ``verdict``; they are what the status line cites. ``threshold`` is
    None when the deciding measurement is OK.
    """

    mount: MountRecord
    space: Verdict
    inodes: Verdict
    verdict: Verdict
    dimension: str
    percent: float
    threshold: Optional[float] = None


@dataclass
class CheckResult:
    """
    Outcome of one check run.

    Attributes:
        verdict: Overall verdict after the worst-of reduction.
        evaluated: Per-mount verdicts in provider enumeration order.
        cited: The first mount reaching the overall verdict, if any.
        skipped: (mountpoint, error message) for mounts that could not be read.
        error: Message of the error that aborted the run, if any.
    """

    verdict: Verdict = Verdict.OK
    evaluated: List[MountVerdict] = field(default_factory=list)
    cited: Optional[MountVerdict] = None
    skipped: List[Tuple[str, str]] = field(default_factory=list)
    error: Optional[str] = None
