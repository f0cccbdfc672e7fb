"""Formatters for analysis results.

Output is str; the caller decides where it goes.
"""

from deptracker.application.formatters._base import BaseFormatter
from deptracker.application.formatters._registry import formatter_by_name, formatter_names
from deptracker.application.formatters.console import ConsoleConfig, ConsoleFormatter
from deptracker.application.formatters.json import JSONFormatter

__all__ = [
    # Base
    "BaseFormatter",
    # Formatters
    "ConsoleConfig",
    "ConsoleFormatter",
    "JSONFormatter",
    # Factory functions
    "formatter_by_name",
    "formatter_names",
]
