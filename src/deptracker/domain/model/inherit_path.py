"""Ancestor chain value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from deptracker.domain.model.enums import InheritKind

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class InheritStep:
    """One hop in an ancestor chain.

    Attributes:
        class_name: Ancestor reached by this hop
        line: Line of the extends/implements clause that introduced it
        kind: EXTENDS/IMPLEMENTS/USES
    """

    class_name: str
    line: int
    kind: InheritKind = InheritKind.EXTENDS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    def __str__(self) -> str:
        """Format as class::line."""
        return f"{self.class_name}::{self.line}"


@dataclass(frozen=True, slots=True)
class InheritPath:
    """Ordered ancestor chain, nearest ancestor first.

    steps[0] is the direct parent of the subclass, steps[-1] is the
    ancestor the chain leads to. Used for diagnostics only.

    Attributes:
        steps: Hops in traversal order (must not be empty)
    """

    steps: tuple[InheritStep, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.steps:
            raise ValueError("path must have at least one step")

    @property
    def ancestor(self) -> InheritStep:
        """Outermost step (the ancestor this path leads to)."""
        return self.steps[-1]

    @property
    def first(self) -> InheritStep:
        """Nearest step (the direct parent)."""
        return self.steps[0]

    @property
    def class_names(self) -> tuple[str, ...]:
        """Ancestor names in traversal order."""
        return tuple(step.class_name for step in self.steps)

    def extend(self, step: InheritStep) -> InheritPath:
        """Return new path with one more hop appended."""
        return InheritPath(steps=(*self.steps, step))

    def __iter__(self) -> Iterator[InheritStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)
