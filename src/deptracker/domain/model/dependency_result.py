"""Dependency result aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from deptracker.domain.model.dependency import AnyDependency, Dependency, InheritDependency


@dataclass(slots=True)
class DependencyResult:
    """Mutable dependency aggregate for one analysis run.

    Built up by emitters and the flattener, read-only afterwards.
    NOT frozen because it's a mutable accumulator.

    Adding an edge equal to one already present is a no-op, so every
    discovered edge is stored exactly once and re-running a stage
    does not duplicate edges.

    Attributes:
        _dependencies: class_a → plain dependencies (insertion order)
        _inherit_dependencies: class_a → inherit dependencies (insertion order)
        _seen: All stored edges, for O(1) duplicate checks
    """

    _dependencies: dict[str, list[Dependency]] = field(default_factory=dict)
    _inherit_dependencies: dict[str, list[InheritDependency]] = field(default_factory=dict)
    _seen: set[AnyDependency] = field(default_factory=set)

    def add_dependency(self, dependency: Dependency) -> bool:
        """Store plain dependency.

        Returns:
            True if stored, False if an equal edge was already present
        """
        if dependency in self._seen:
            return False
        self._seen.add(dependency)
        self._dependencies.setdefault(dependency.class_a, []).append(dependency)
        return True

    def add_inherit_dependency(self, dependency: InheritDependency) -> bool:
        """Store inherit dependency.

        Returns:
            True if stored, False if an equal edge was already present
        """
        if dependency in self._seen:
            return False
        self._seen.add(dependency)
        self._inherit_dependencies.setdefault(dependency.class_a, []).append(dependency)
        return True

    def get_dependencies_by_class(self, class_name: str) -> tuple[Dependency, ...]:
        """Plain dependencies whose class_a is class_name."""
        return tuple(self._dependencies.get(class_name, ()))

    def get_inherit_dependencies_by_class(self, class_name: str) -> tuple[InheritDependency, ...]:
        """Inherit dependencies whose class_a is class_name."""
        return tuple(self._inherit_dependencies.get(class_name, ()))

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        """All plain dependencies."""
        return tuple(d for deps in self._dependencies.values() for d in deps)

    @property
    def inherit_dependencies(self) -> tuple[InheritDependency, ...]:
        """All inherit dependencies."""
        return tuple(d for deps in self._inherit_dependencies.values() for d in deps)

    def iter_all(self) -> Iterator[AnyDependency]:
        """Plain dependencies first, then inherit dependencies."""
        yield from self.dependencies
        yield from self.inherit_dependencies

    @property
    def dependency_count(self) -> int:
        """Number of plain dependencies."""
        return sum(len(deps) for deps in self._dependencies.values())

    @property
    def inherit_dependency_count(self) -> int:
        """Number of inherit dependencies."""
        return sum(len(deps) for deps in self._inherit_dependencies.values())

    @property
    def class_names(self) -> frozenset[str]:
        """All class_a names with at least one dependency."""
        return frozenset(self._dependencies) | frozenset(self._inherit_dependencies)
