"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.domain.exceptions.base import DepTrackerError

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(DepTrackerError):
    """Error in layer, collector or ruleset configuration.

    Fatal: aborts the analysis before any violation is reported.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        subject: What is misconfigured (layer, collector type, file)
        reason: Why it is invalid
    """

    def __init__(self, subject: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not subject:
            raise ValueError("subject must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.subject = subject
        self.reason = reason
        super().__init__(f"Invalid configuration for '{subject}': {reason}")


class UnknownCollectorTypeError(ConfigurationError):
    """Collector configuration names an unregistered collector type.

    Attributes:
        collector_type: Requested type
        known_types: Registered types, sorted
    """

    def __init__(self, collector_type: str, known_types: Iterable[str]) -> None:
        self.collector_type = collector_type
        self.known_types = tuple(sorted(known_types))
        super().__init__(
            collector_type or "<empty>",
            f"unknown collector type, must be one of {list(self.known_types)}",
        )
