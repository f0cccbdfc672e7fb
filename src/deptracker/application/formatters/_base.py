"""Base formatter class for output formatting.

Provides default implementation of FormatterProtocol.
Concrete formatters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deptracker.domain.model.analysis_result import AnalysisResult


class BaseFormatter(ABC):
    """Base class for formatters implementing FormatterProtocol.

    Concrete formatters must set `name` and implement finish().
    deptracker provides ConsoleFormatter and JSONFormatter.

    Example:
        class CountFormatter(BaseFormatter):
            name = "count"

            def finish(self, result: AnalysisResult) -> str:
                return str(result.violation_count)
    """

    name: str
    """Name used in configuration and on the command line."""

    @abstractmethod
    def finish(self, result: AnalysisResult) -> str:
        """Format analysis result.

        Args:
            result: Complete analysis result

        Returns:
            Formatted output (caller decides destination)
        """
