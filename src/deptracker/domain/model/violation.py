"""Ruleset violation type."""

from __future__ import annotations

from dataclasses import dataclass

from deptracker.domain.model.dependency import AnyDependency, InheritDependency


@dataclass(frozen=True, slots=True)
class RulesetViolation:
    """Dependency edge whose layer pair the ruleset does not allow.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        dependency: Offending edge (plain or inherited)
        layer_a: Layer of dependency.class_a
        layer_b: Layer of dependency.class_b (the forbidden target)
    """

    dependency: AnyDependency
    layer_a: str
    layer_b: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.dependency is None:
            raise TypeError("dependency must not be None")
        if not self.layer_a:
            raise ValueError("layer_a must not be empty")
        if not self.layer_b:
            raise ValueError("layer_b must not be empty")
        if self.layer_a == self.layer_b:
            raise ValueError("layer_a must differ from layer_b")

    @property
    def is_inherited(self) -> bool:
        """True if caused by an ancestor's dependency."""
        return isinstance(self.dependency, InheritDependency)

    @property
    def inherit_trail(self) -> tuple[str, ...]:
        """Ancestor chain for display, nearest ancestor first.

        Ends with the original dependency site on the outermost ancestor.
        Empty for direct violations.
        """
        dependency = self.dependency
        if not isinstance(dependency, InheritDependency):
            return ()
        original = dependency.original_dependency
        trail = [str(step) for step in dependency.path.steps]
        trail.append(f"{original.class_b}::{original.class_a_line}")
        return tuple(trail)

    def __str__(self) -> str:
        """Format for console display."""
        dependency = self.dependency
        layers = f"({self.layer_a} on {self.layer_b})"
        if not isinstance(dependency, InheritDependency):
            return (
                f"{dependency.class_a}::{dependency.class_a_line} "
                f"must not depend on {dependency.class_b} {layers}"
            )
        trail = " -> \n".join(f"\t{entry}" for entry in self.inherit_trail)
        return f"{dependency.class_a} must not depend on {dependency.class_b} {layers} \n{trail}"
