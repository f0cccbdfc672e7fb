"""Ruleset: which layers may depend on which."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from deptracker.domain.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class Ruleset:
    """Allowed layer dependencies.

    Anything not listed is forbidden, except a layer depending on itself.
    A layer without an entry may depend on no other layer.

    Attributes:
        allowed: Layer → layers it may depend on
    """

    allowed: Mapping[str, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for layer, targets in self.allowed.items():
            if not layer:
                raise ConfigurationError("ruleset", "layer name must not be empty")
            if not isinstance(targets, frozenset):
                raise TypeError(f"allowed targets of '{layer}' must be a frozenset")

    def is_allowed(self, layer_a: str, layer_b: str) -> bool:
        """Check if layer_a may depend on layer_b. O(1)."""
        if layer_a == layer_b:
            return True
        return layer_b in self.allowed.get(layer_a, frozenset())

    def allowed_for(self, layer: str) -> frozenset[str]:
        """Layers the given layer may depend on."""
        return self.allowed.get(layer, frozenset())

    @property
    def referenced_layers(self) -> frozenset[str]:
        """Every layer name appearing in the ruleset."""
        names = set(self.allowed)
        for targets in self.allowed.values():
            names.update(targets)
        return frozenset(names)

    def validate_layers(self, layer_names: Iterable[str]) -> None:
        """Check every referenced layer is defined.

        Raises:
            ConfigurationError: If the ruleset names an unknown layer
        """
        unknown = self.referenced_layers - frozenset(layer_names)
        if unknown:
            raise ConfigurationError("ruleset", f"unknown layers: {sorted(unknown)}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Iterable[str] | None]) -> Ruleset:
        """Build from layer → iterable of allowed layers (None = nothing)."""
        return cls(
            allowed=MappingProxyType(
                {layer: frozenset(targets or ()) for layer, targets in data.items()}
            )
        )
