"""
Command-line interface for the fscheck filesystem health check.

This module parses command-line arguments, merges them with the optional
configuration file, runs one check and maps the outcome to the process exit
code:

    0  OK
    1  WARNING
    2  CRITICAL (including configuration, provider and emission errors)
    3  UNKNOWN (usage errors and unexpected failures)

The status line or the metric stream is written to stdout; log records go to
stderr so they never mix with the probe output.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from .. import __version__
from ..collectors.base import AbstractMountProvider
from ..config import load_check_config
from ..evaluation import exit_status, run_check
from ..models.results import Verdict
from ..reporting import build_metric_groups, emit_metric_groups, render_status
from ..validation import (
    ConfigurationError,
    EmissionError,
    ErrorSeverity,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

logger = logging.getLogger(__name__)

EXIT_UNKNOWN = 3

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with the UNKNOWN exit code."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_UNKNOWN, f"{self.prog}: error: {message}\n")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = CheckArgumentParser(
        prog="fscheck",
        description="Check filesystem space and inode usage against thresholds.",
    )
    parser.add_argument("--config", type=Path, help="TOML file with a [check] table of settings.")
    parser.add_argument("--name", type=str, help="Check name used as the status line prefix.")

    filters = parser.add_argument_group("filesystem selection")
    filters.add_argument("-t", "--include-fs-type", action="append", metavar="TYPE",
                         help="Only check filesystems of this type (repeatable).")
    filters.add_argument("-x", "--exclude-fs-type", action="append", metavar="TYPE",
                         help="Skip filesystems of this type (repeatable).")
    filters.add_argument("-i", "--include-fs-path", action="append", metavar="PATH",
                         help="Only check mounts matching this path or glob (repeatable).")
    filters.add_argument("-e", "--exclude-fs-path", action="append", metavar="PATH",
                         help="Skip mounts matching this path or glob (repeatable).")
    filters.add_argument("-p", "--include-pseudo-fs", action="store_true", default=None,
                         help="Include pseudo filesystems (tmpfs, proc, ...).")
    filters.add_argument("--pseudo-fs-type", action="append", metavar="TYPE",
                         help="Filesystem type treated as pseudo; replaces the default list (repeatable).")
    filters.add_argument("-r", "--include-read-only", action="store_true", default=None,
                         help="Include read-only mounts.")

    thresholds = parser.add_argument_group("thresholds")
    thresholds.add_argument("-w", "--warning", type=float, help="Space usage warning percentage (default 85).")
    thresholds.add_argument("-c", "--critical", type=float, help="Space usage critical percentage (default 95).")
    thresholds.add_argument("-W", "--inodes-warning", type=float, help="Inode usage warning percentage (default 85).")
    thresholds.add_argument("-K", "--inodes-critical", type=float, help="Inode usage critical percentage (default 95).")

    output = parser.add_argument_group("output")
    output.add_argument("-m", "--metrics", action="store_true", default=None,
                        help="Emit metrics instead of a status line.")
    output.add_argument("--metrics-threshold-status", action="store_true", default=None,
                        help="In metrics mode, exit with the threshold verdict instead of OK.")
    output.add_argument("-H", "--human-readable", action="store_true", default=None,
                        help="Print sizes with IEC units in the status line.")
    output.add_argument("-f", "--fail-on-error", action="store_true", default=None,
                        help="Fail CRITICAL when a filesystem cannot be read instead of skipping it.")
    output.add_argument("--tag", action="append", dest="extra_tags", metavar="KEY=VALUE",
                        help="Extra tag added to every metric (repeatable).")

    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level for stderr diagnostics.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Map parsed arguments to ``[check]`` keys; None means not given."""
    return {
        "name": args.name,
        "include_fs_type": args.include_fs_type,
        "exclude_fs_type": args.exclude_fs_type,
        "include_fs_path": args.include_fs_path,
        "exclude_fs_path": args.exclude_fs_path,
        "include_pseudo": args.include_pseudo_fs,
        "include_read_only": args.include_read_only,
        "pseudo_fs_types": args.pseudo_fs_type,
        "warning": args.warning,
        "critical": args.critical,
        "inodes_warning": args.inodes_warning,
        "inodes_critical": args.inodes_critical,
        "metrics_mode": args.metrics,
        "metrics_threshold_status": args.metrics_threshold_status,
        "human_readable": args.human_readable,
        "fail_on_error": args.fail_on_error,
        "extra_tags": args.extra_tags,
    }


def _write_line(stream: TextIO, line: str) -> bool:
    """Write one output line. On failure the line goes to stderr and False is returned."""
    try:
        stream.write(line + "\n")
        stream.flush()
    except (OSError, ValueError) as e:
        handle_error(e, "writing output", severity=ErrorSeverity.ERROR, reraise=False, logger=logger)
        sys.stderr.write(line + "\n")
        return False
    return True


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    provider: Optional[AbstractMountProvider] = None,
) -> int:
    """
    Run one check and return the exit code.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.
        stdout: Stream for the status line or metrics; defaults to ``sys.stdout``.
        provider: Mount provider; defaults to the live psutil provider.

    Returns:
        The process exit code.
    """
    stdout = stdout or sys.stdout
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_check_config(args.config, overrides_from_args(args))
    except ConfigurationError as e:
        handle_config_error(e, "validation", severity=ErrorSeverity.ERROR, reraise=False, logger=logger)
        _write_line(stdout, f"{args.name or 'fscheck'} {Verdict.CRITICAL.name}: {e}")
        return int(Verdict.CRITICAL)

    result = run_check(config, provider)
    status = exit_status(result, config.output)

    if config.output.metrics_mode and result.error is None:
        try:
            emit_metric_groups(build_metric_groups(result, config), stdout)
        except EmissionError as e:
            handle_error(e, "metrics emission", severity=ErrorSeverity.ERROR, reraise=False, logger=logger)
            sys.stderr.write(f"{config.name} {Verdict.CRITICAL.name}: {e}\n")
            return int(Verdict.CRITICAL)
        return int(status)

    if not _write_line(stdout, render_status(result, config, status)):
        return int(Verdict.CRITICAL)
    return int(status)


def main_cli() -> None:
    """Console entry point."""
    try:
        exit_code = main()
    except Exception as e:
        _write_line(sys.stdout, f"fscheck UNKNOWN: {type(e).__name__}: {e}")
        handle_cli_error(e, "check execution", exit_code=EXIT_UNKNOWN,
                         severity=ErrorSeverity.CRITICAL, logger=logger)
    sys.exit(exit_code)


if __name__ == "__main__":
    main_cli()
