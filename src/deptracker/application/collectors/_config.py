"""Configuration readers shared by collectors.

Every reader raises ConfigurationError instead of returning a default:
a missing key is never treated as "not satisfied".
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache

from deptracker.domain.exceptions import ConfigurationError


def require_string(configuration: Mapping[str, object], key: str, collector_type: str) -> str:
    """Read non-empty string value."""
    value = configuration.get(key)
    if value is None:
        raise ConfigurationError(collector_type, f"missing required key '{key}'")
    if not isinstance(value, str) or not value:
        raise ConfigurationError(collector_type, f"'{key}' must be a non-empty string")
    return value


def require_pattern(
    configuration: Mapping[str, object], key: str, collector_type: str
) -> re.Pattern[str]:
    """Read regex value, compiled case-insensitive."""
    return _compile(require_string(configuration, key, collector_type), collector_type)


def require_mapping(
    configuration: Mapping[str, object], key: str, collector_type: str
) -> Mapping[str, object]:
    """Read nested collector configuration."""
    value = configuration.get(key)
    if value is None:
        raise ConfigurationError(collector_type, f"missing required key '{key}'")
    if not isinstance(value, Mapping):
        raise ConfigurationError(collector_type, f"'{key}' must be a mapping")
    return value


def require_mapping_list(
    configuration: Mapping[str, object], key: str, collector_type: str
) -> tuple[Mapping[str, object], ...]:
    """Read non-empty list of nested collector configurations."""
    value = configuration.get(key)
    if value is None:
        raise ConfigurationError(collector_type, f"missing required key '{key}'")
    if not isinstance(value, list | tuple) or not value:
        raise ConfigurationError(collector_type, f"'{key}' must be a non-empty list")
    for item in value:
        if not isinstance(item, Mapping):
            raise ConfigurationError(collector_type, f"every item of '{key}' must be a mapping")
    return tuple(value)


@lru_cache(maxsize=256)
def _compile(pattern: str, collector_type: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ConfigurationError(collector_type, f"invalid regex '{pattern}': {e}") from e
