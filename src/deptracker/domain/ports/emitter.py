"""Dependency emitter protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.dependency_result import DependencyResult


class DependencyEmitterProtocol(Protocol):
    """Contract for dependency emitters.

    Emitters walk the class map once and append every discovered edge
    to the shared DependencyResult.
    """

    @property
    def name(self) -> str:
        """Emitter name for progress output."""
        ...

    def apply_dependencies(self, class_map: ClassMap, dependency_result: DependencyResult) -> None:
        """Append discovered edges to dependency_result."""
        ...
