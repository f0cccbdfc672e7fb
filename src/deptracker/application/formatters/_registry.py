"""Formatter registry."""

from __future__ import annotations

from deptracker.application.formatters._base import BaseFormatter
from deptracker.application.formatters.console import ConsoleFormatter
from deptracker.application.formatters.json import JSONFormatter
from deptracker.domain.exceptions import ConfigurationError

# Registry - tuple for immutability
_ALL_FORMATTERS: tuple[type[BaseFormatter], ...] = (
    ConsoleFormatter,
    JSONFormatter,
)


def formatter_names() -> tuple[str, ...]:
    """Names of built-in formatters."""
    return tuple(formatter_cls.name for formatter_cls in _ALL_FORMATTERS)


def formatter_by_name(name: str) -> BaseFormatter:
    """Instantiate formatter by name with default settings.

    Raises:
        ConfigurationError: If no formatter has that name
    """
    for formatter_cls in _ALL_FORMATTERS:
        if formatter_cls.name == name:
            return formatter_cls()
    raise ConfigurationError(
        "formatter", f"unknown formatter '{name}', must be one of {list(formatter_names())}"
    )
