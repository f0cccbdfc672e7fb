"""Output formatter protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from deptracker.domain.model.analysis_result import AnalysisResult


class FormatterProtocol(Protocol):
    """Contract for output formatters.

    Output is str, not print(). Caller decides destination.
    """

    name: str
    """Name used in configuration and on the command line."""

    def finish(self, result: AnalysisResult) -> str:
        """Format analysis result."""
        ...
