"""
Field validation functions.

Small, reusable validators for the scalar and list values that make up the
check configuration. Each one returns the normalised value or raises
ValidationError naming the offending field.
"""

from typing import Any, List, Optional, Tuple

from .exceptions import ValidationError


def validate_percentage(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = 100.0,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a number within a percentage range.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated float value

    Raises:
        ValidationError: If validation fails
    """
    # bool is an int subclass; "true" is not a threshold
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        float_value = float(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    if float_value != float_value:
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_bool(value: Any, field_name: str = "value") -> bool:
    """
    Validate that a value is a real boolean.

    Raises:
        ValidationError: If the value is not a bool
    """
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_string_list(
    value: Any,
    field_name: str = "value",
    allow_empty_items: bool = False
) -> Tuple[str, ...]:
    """
    Validate a list of strings and return it as a tuple.

    None is accepted and treated as an empty list.

    Args:
        value: Value to validate
        field_name: Name of the field being validated
        allow_empty_items: Whether blank strings are accepted as items

    Returns:
        Tuple of the validated strings, in their original order

    Raises:
        ValidationError: If the value is not a list of strings
    """
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError(
            f"{field_name} must be a list of strings, got {value!r}",
            field_name=field_name,
            value=value
        )

    items: List[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ValidationError(
                f"{field_name}[{i}] must be a string, got {item!r}",
                field_name=field_name,
                value=value
            )
        if not allow_empty_items and not item.strip():
            raise ValidationError(
                f"{field_name}[{i}] must be a non-empty string",
                field_name=field_name,
                value=value
            )
        items.append(item)
    return tuple(items)


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """Validate that a value is a non-blank string and return it stripped."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    return value.strip()
