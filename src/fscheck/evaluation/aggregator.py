"""
Check orchestration and result aggregation.

DiskCheck runs one complete check: it reads the mount snapshot, applies the
scope filter, evaluates every in-scope mount and reduces the per-mount
verdicts to a single CheckResult. Everything it accumulates belongs to the
current run.
"""

import logging
from typing import Optional

from ..collectors.base import AbstractMountProvider
from ..collectors.psutil_provider import PsutilMountProvider
from ..filters.scope import ScopeFilter
from ..models.config import CheckConfig, OutputConfig
from ..models.results import CheckResult, Verdict, worst
from ..validation import ErrorSeverity, ProviderError, handle_provider_error
from .thresholds import ThresholdEvaluator

logger = logging.getLogger(__name__)


class DiskCheck:
    """
    One filesystem health check run.

    Args:
        config: Validated configuration for the run.
        provider: Source of the mount snapshot.
    """

    def __init__(self, config: CheckConfig, provider: AbstractMountProvider):
        self.config = config
        self.provider = provider
        self.scope = ScopeFilter(config.filters)
        self.evaluator = ThresholdEvaluator(config.thresholds)

    def run(self) -> CheckResult:
        """
        Evaluate the current snapshot.

        Unreadable mounts are skipped and recorded unless ``fail_on_error`` is
        set, in which case the run stops at the first one with a CRITICAL
        result. Failure to enumerate mounts at all is always CRITICAL.

        Returns:
            The aggregated CheckResult.
        """
        result = CheckResult()
        try:
            for item in self.provider.read_mounts():
                if isinstance(item, ProviderError):
                    if not self._handle_provider_error(item, result):
                        return result
                    continue

                if not self.scope.in_scope(item):
                    continue
                result.evaluated.append(self.evaluator.evaluate(item))
        except ProviderError as e:
            handle_provider_error(e, "mount table", severity=ErrorSeverity.ERROR, reraise=False, logger=logger)
            result.verdict = Verdict.CRITICAL
            result.error = str(e)
            return result

        result.verdict = worst(mv.verdict for mv in result.evaluated)
        # First mount in enumeration order at the overall verdict
        result.cited = next((mv for mv in result.evaluated if mv.verdict == result.verdict), None)
        logger.info(
            f"Evaluated {len(result.evaluated)} filesystems, skipped {len(result.skipped)}: "
            f"overall {result.verdict.name}"
        )
        return result

    def _handle_provider_error(self, error: ProviderError, result: CheckResult) -> bool:
        """Record a per-mount read failure. Returns False when the run must stop."""
        if error.mount is not None and not self.scope.in_scope(error.mount):
            logger.debug(f"Ignoring read failure on out-of-scope mount: {error}")
            return True

        mountpoint = error.mountpoint or "unknown mount"
        if self.config.output.fail_on_error:
            handle_provider_error(error, mountpoint, severity=ErrorSeverity.ERROR, reraise=False, logger=logger)
            result.verdict = Verdict.CRITICAL
            result.error = str(error)
            return False

        handle_provider_error(error, mountpoint, severity=ErrorSeverity.WARNING, reraise=False, logger=logger)
        result.skipped.append((mountpoint, str(error)))
        return True


def exit_status(result: CheckResult, output: OutputConfig) -> Verdict:
    """
    Map a check result to the process status.

    Errors are always CRITICAL. In metrics mode threshold breaches are data,
    not failures, unless ``metrics_threshold_status`` is set.
    """
    if result.error is not None:
        return Verdict.CRITICAL
    if output.metrics_mode and not output.metrics_threshold_status:
        return Verdict.OK
    return result.verdict


def run_check(config: CheckConfig, provider: Optional[AbstractMountProvider] = None) -> CheckResult:
    """Run a check with the given provider, defaulting to the live psutil one."""
    if provider is None:
        provider = PsutilMountProvider(pseudo_fs_types=config.pseudo_fs_types)
    return DiskCheck(config, provider).run()
