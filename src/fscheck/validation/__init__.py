"""
Validation and error handling for the fscheck package.

This module provides input validation and the error taxonomy shared by the
configuration layer, the mount provider and the reporters.
"""

from .exceptions import (
    ConfigurationError,
    EmissionError,
    ErrorSeverity,
    ProviderError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
    handle_provider_error,
)

from .validators import (
    validate_bool,
    validate_non_empty_string,
    validate_percentage,
    validate_string_list,
)

__all__ = [
    # Errors
    "ConfigurationError",
    "EmissionError",
    "ErrorSeverity",
    "ProviderError",
    "ValidationError",
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    "handle_provider_error",
    # Validators
    "validate_bool",
    "validate_non_empty_string",
    "validate_percentage",
    "validate_string_list",
]
