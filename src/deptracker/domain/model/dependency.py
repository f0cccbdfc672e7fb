"""Dependency edge value objects."""

from __future__ import annotations

from dataclasses import dataclass

from deptracker.domain.model.inherit_path import InheritPath


@dataclass(frozen=True, slots=True)
class Dependency:
    """Direct "uses" edge: class_a references class_b at class_a_line.

    Attributes:
        class_a: Depending class
        class_a_line: Line of the reference inside class_a (must be > 0)
        class_b: Referenced class
    """

    class_a: str
    class_a_line: int
    class_b: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_a:
            raise ValueError("class_a must not be empty")
        if not self.class_b:
            raise ValueError("class_b must not be empty")
        if self.class_a_line <= 0:
            raise ValueError(f"class_a_line must be > 0, got {self.class_a_line}")

    def __str__(self) -> str:
        """Format as class_a::line -> class_b."""
        return f"{self.class_a}::{self.class_a_line} -> {self.class_b}"


@dataclass(frozen=True, slots=True)
class InheritDependency:
    """Dependency attributed to a subclass through one of its ancestors.

    Attributes:
        class_a: Subclass the dependency is attributed to
        class_a_line: Line of the subclass's own extends/implements clause
        class_b: Class the ancestor depends on
        path: Ancestor chain from class_a up to original_dependency.class_a
        original_dependency: Plain dependency found on the ancestor
    """

    class_a: str
    class_a_line: int
    class_b: str
    path: InheritPath
    original_dependency: Dependency

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_a:
            raise ValueError("class_a must not be empty")
        if self.class_a_line <= 0:
            raise ValueError(f"class_a_line must be > 0, got {self.class_a_line}")
        if self.class_b != self.original_dependency.class_b:
            raise ValueError(
                f"class_b '{self.class_b}' must match original dependency "
                f"'{self.original_dependency.class_b}'"
            )
        if self.path.ancestor.class_name != self.original_dependency.class_a:
            raise ValueError(
                f"path must end at '{self.original_dependency.class_a}', "
                f"got '{self.path.ancestor.class_name}'"
            )

    @classmethod
    def from_path(
        cls,
        class_a: str,
        path: InheritPath,
        original_dependency: Dependency,
    ) -> InheritDependency:
        """Attribute original_dependency to class_a via path."""
        return cls(
            class_a=class_a,
            class_a_line=path.first.line,
            class_b=original_dependency.class_b,
            path=path,
            original_dependency=original_dependency,
        )

    def __str__(self) -> str:
        """Format as class_a -> class_b (via ancestors)."""
        via = " -> ".join(self.path.class_names)
        return f"{self.class_a} -> {self.class_b} (via {via})"


type AnyDependency = Dependency | InheritDependency
