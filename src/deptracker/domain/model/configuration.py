"""Analysis configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from deptracker.domain.exceptions import ConfigurationError
from deptracker.domain.model.layer import Layer
from deptracker.domain.model.ruleset import Ruleset

DEFAULT_FORMATTER = "console"


@dataclass(frozen=True, slots=True)
class Configuration:
    """Layers, ruleset and output settings for one analysis.

    Immutable for the duration of a run. FAIL-FIRST: duplicate layer
    names and rulesets naming unknown layers are rejected here.

    Attributes:
        layers: Layer definitions in declaration order
        ruleset: Allowed layer dependencies
        formatter: Output formatter name
    """

    layers: tuple[Layer, ...] = ()
    ruleset: Ruleset = field(default_factory=Ruleset)
    formatter: str = DEFAULT_FORMATTER

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        seen: set[str] = set()
        for layer in self.layers:
            if layer.name in seen:
                raise ConfigurationError(layer.name, "layer defined twice")
            seen.add(layer.name)

        self.ruleset.validate_layers(seen)

        if not self.formatter:
            raise ConfigurationError("formatter", "formatter name must not be empty")

    @property
    def layer_names(self) -> tuple[str, ...]:
        """Layer names in declaration order."""
        return tuple(layer.name for layer in self.layers)

    def get_layer(self, name: str) -> Layer | None:
        """Get layer by name. Returns None if not found."""
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None
