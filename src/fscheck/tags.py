"""
Extra tag parsing and merging.

Extra tags are static ``key=value`` pairs supplied by the operator and attached
to every metric emitted in metrics mode. In status mode they are inert.
"""

import logging
import re
from typing import Dict, Iterable, Optional

from .validation import ConfigurationError

logger = logging.getLogger(__name__)

# Keys become metric label names
TAG_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_extra_tags(raw_tags: Optional[Iterable[str]], field_name: str = "extra_tags") -> Dict[str, str]:
    """Parse ``key=value`` tokens into a tag mapping.

    The token is split on the first ``=``. The key is stripped and must be a
    valid label name (letters, digits and underscores, not starting with a
    digit). The value is kept verbatim and may be empty. Later duplicates
    override earlier ones. A single malformed token fails the whole set.

    Args:
        raw_tags: Iterable of raw tokens, or None for no tags.
        field_name: Name used in error messages.

    Returns:
        Mapping of tag keys to values, in token order.

    Raises:
        ConfigurationError: If any token lacks ``=`` or has an empty or invalid key.

    Examples:
        >>> parse_extra_tags(["env=prod", "region=us-west"])
        {'env': 'prod', 'region': 'us-west'}
    """
    tags: Dict[str, str] = {}
    if raw_tags is None:
        return tags

    for i, raw in enumerate(raw_tags):
        if not isinstance(raw, str) or "=" not in raw:
            raise ConfigurationError(
                f"{field_name}[{i}] must be in key=value format, got {raw!r}",
                field_name=field_name,
                value=raw,
            )
        key, value = raw.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigurationError(
                f"{field_name}[{i}] has an empty key: {raw!r}",
                field_name=field_name,
                value=raw,
            )
        if not TAG_KEY_PATTERN.match(key):
            raise ConfigurationError(
                f"{field_name}[{i}] key {key!r} must match [A-Za-z_][A-Za-z0-9_]*",
                field_name=field_name,
                value=raw,
            )
        tags[key] = value

    logger.debug(f"Parsed {len(tags)} extra tags: {tags}")
    return tags


def merge_tags(base: Dict[str, str], extra: Dict[str, str]) -> Dict[str, str]:
    """Return a new mapping of ``base`` followed by ``extra``.

    Keys already present in ``base`` keep their base value.
    """
    merged = dict(base)
    for key, value in extra.items():
        merged.setdefault(key, value)
    return merged
