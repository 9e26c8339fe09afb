"""
Configuration validation utilities.

This module turns the raw ``[check]`` settings (after CLI overrides have been
merged in) into a validated, immutable CheckConfig. Every rule that can make
the configuration unusable is enforced here, before any mount is read.
"""

import logging
from typing import Any, Dict, Tuple

from ..models.config import (
    DEFAULT_PSEUDO_FS_TYPES,
    CheckConfig,
    FilterConfig,
    OutputConfig,
    ThresholdConfig,
)
from ..tags import parse_extra_tags
from ..validation import (
    ConfigurationError,
    ValidationError,
    validate_bool,
    validate_non_empty_string,
    validate_percentage,
    validate_string_list,
)

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset({
    "name",
    "include_fs_type",
    "exclude_fs_type",
    "include_fs_path",
    "exclude_fs_path",
    "include_pseudo",
    "include_read_only",
    "pseudo_fs_types",
    "warning",
    "critical",
    "inodes_warning",
    "inodes_critical",
    "metrics_mode",
    "human_readable",
    "fail_on_error",
    "metrics_threshold_status",
    "extra_tags",
})


def validate_check_config(check_data: Dict[str, Any]) -> CheckConfig:
    """
    Validate and create a CheckConfig from raw configuration data.

    Args:
        check_data: Raw settings keyed as in the ``[check]`` table

    Returns:
        Validated CheckConfig instance

    Raises:
        ConfigurationError: If any setting is invalid or settings conflict
    """
    unknown = sorted(set(check_data) - KNOWN_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown check settings: {', '.join(unknown)}")

    try:
        filters = validate_filter_config(check_data)
        thresholds = validate_threshold_config(check_data)
        output = validate_output_config(check_data)
        extra_tags = parse_extra_tags(
            validate_string_list(check_data.get("extra_tags"), field_name="extra_tags", allow_empty_items=True),
            field_name="extra_tags",
        )
        pseudo_fs_types = validate_string_list(
            check_data.get("pseudo_fs_types", DEFAULT_PSEUDO_FS_TYPES),
            field_name="pseudo_fs_types",
        )
        name = validate_non_empty_string(check_data.get("name", "fscheck"), field_name="name")
    except ConfigurationError:
        raise
    except ValidationError as e:
        raise ConfigurationError(str(e), field_name=e.field_name, value=e.value) from e

    return CheckConfig(
        filters=filters,
        thresholds=thresholds,
        output=output,
        extra_tags=extra_tags,
        pseudo_fs_types=pseudo_fs_types,
        name=name,
    )


def _validate_exclusive_pair(
    check_data: Dict[str, Any], include_key: str, exclude_key: str
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    include = validate_string_list(check_data.get(include_key), field_name=include_key)
    exclude = validate_string_list(check_data.get(exclude_key), field_name=exclude_key)
    if include and exclude:
        raise ConfigurationError(
            f"{include_key} and {exclude_key} are mutually exclusive",
            field_name=include_key,
            value=(include, exclude),
        )
    return include, exclude


def validate_filter_config(check_data: Dict[str, Any]) -> FilterConfig:
    """
    Validate the scope filter settings.

    Raises:
        ConfigurationError: If include and exclude are both set for types or paths
        ValidationError: If a list or flag has the wrong type
    """
    include_type, exclude_type = _validate_exclusive_pair(check_data, "include_fs_type", "exclude_fs_type")
    include_path, exclude_path = _validate_exclusive_pair(check_data, "include_fs_path", "exclude_fs_path")

    return FilterConfig(
        include_fs_type=include_type,
        exclude_fs_type=exclude_type,
        include_fs_path=include_path,
        exclude_fs_path=exclude_path,
        include_pseudo=validate_bool(check_data.get("include_pseudo", False), field_name="include_pseudo"),
        include_read_only=validate_bool(check_data.get("include_read_only", False), field_name="include_read_only"),
    )


def _validate_threshold_pair(
    check_data: Dict[str, Any], warning_key: str, critical_key: str, defaults: Tuple[float, float]
) -> Tuple[float, float]:
    warning = validate_percentage(check_data.get(warning_key, defaults[0]), field_name=warning_key)
    critical = validate_percentage(check_data.get(critical_key, defaults[1]), field_name=critical_key)
    if warning >= critical:
        raise ConfigurationError(
            f"{warning_key} ({warning:g}) must be lower than {critical_key} ({critical:g})",
            field_name=warning_key,
            value=warning,
        )
    return warning, critical


def validate_threshold_config(check_data: Dict[str, Any]) -> ThresholdConfig:
    """
    Validate the space and inode thresholds.

    Raises:
        ConfigurationError: If a warning threshold is not below its critical one
        ValidationError: If a threshold is not a number in [0, 100]
    """
    defaults = ThresholdConfig()
    warning, critical = _validate_threshold_pair(
        check_data, "warning", "critical", (defaults.warning, defaults.critical)
    )
    inodes_warning, inodes_critical = _validate_threshold_pair(
        check_data, "inodes_warning", "inodes_critical", (defaults.inodes_warning, defaults.inodes_critical)
    )
    return ThresholdConfig(
        warning=warning,
        critical=critical,
        inodes_warning=inodes_warning,
        inodes_critical=inodes_critical,
    )


def validate_output_config(check_data: Dict[str, Any]) -> OutputConfig:
    """Validate the reporting flags."""
    output = OutputConfig(
        metrics_mode=validate_bool(check_data.get("metrics_mode", False), field_name="metrics_mode"),
        human_readable=validate_bool(check_data.get("human_readable", False), field_name="human_readable"),
        fail_on_error=validate_bool(check_data.get("fail_on_error", False), field_name="fail_on_error"),
        metrics_threshold_status=validate_bool(
            check_data.get("metrics_threshold_status", False), field_name="metrics_threshold_status"
        ),
    )
    if output.metrics_mode and output.human_readable:
        logger.warning("human_readable has no effect in metrics mode")
    return output
