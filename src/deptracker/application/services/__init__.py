"""Application services.

Analyzer is the main facade for running a layer dependency analysis.
"""

from deptracker.application.services.analyzer import Analyzer

__all__ = [
    "Analyzer",
]
