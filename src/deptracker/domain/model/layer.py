"""Layer definition."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from deptracker.domain.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class Layer:
    """Named partition of the codebase.

    A class belongs to the layer if ANY top-level collector is satisfied.

    Attributes:
        name: Layer name (must not be empty)
        collectors: Collector configurations, each with a "type" key
    """

    name: str
    collectors: tuple[Mapping[str, object], ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ConfigurationError("layer", "layer name must not be empty")
        for collector in self.collectors:
            if not isinstance(collector, Mapping):
                raise ConfigurationError(
                    self.name, f"collector configuration must be a mapping, got {collector!r}"
                )
