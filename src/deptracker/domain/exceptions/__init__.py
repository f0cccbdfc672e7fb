"""Domain exceptions."""

from deptracker.domain.exceptions.base import DepTrackerError
from deptracker.domain.exceptions.configuration import (
    ConfigurationError,
    UnknownCollectorTypeError,
)
from deptracker.domain.exceptions.inheritance import CyclicInheritanceWarning
from deptracker.domain.exceptions.reference import UnresolvedReferenceError

__all__ = [
    "DepTrackerError",
    "ConfigurationError",
    "UnknownCollectorTypeError",
    "UnresolvedReferenceError",
    "CyclicInheritanceWarning",
]
