"""deptracker - layered architecture checker for class dependency graphs."""

__version__ = "0.1.0"

from deptracker.application.services.analyzer import Analyzer

__all__ = ["Analyzer", "__version__"]
