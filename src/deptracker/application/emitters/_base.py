"""Base dependency emitter class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.dependency_result import DependencyResult


class BaseDependencyEmitter(ABC):
    """Base class for emitters implementing DependencyEmitterProtocol.

    Concrete emitters must:
    1. Set `name` class attribute
    2. Implement `apply_dependencies()`
    """

    name: str
    """Emitter name for progress output."""

    @abstractmethod
    def apply_dependencies(self, class_map: ClassMap, dependency_result: DependencyResult) -> None:
        """Append discovered edges to dependency_result.

        Args:
            class_map: Parsed classes (read-only)
            dependency_result: Shared aggregate for this run (mutated)
        """
