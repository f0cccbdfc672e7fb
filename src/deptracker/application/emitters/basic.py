"""Basic dependency emitter: class-name references inside classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.application.emitters._base import BaseDependencyEmitter
from deptracker.domain.model.dependency import Dependency

if TYPE_CHECKING:
    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.dependency_result import DependencyResult


class BasicDependencyEmitter(BaseDependencyEmitter):
    """One plain Dependency per class-name reference.

    Covers every reference the class map surfaces: parameter and
    return types, instantiations, static calls, use statements.
    """

    name = "basic"

    def apply_dependencies(self, class_map: ClassMap, dependency_result: DependencyResult) -> None:
        for class_reference in class_map:
            for reference in class_reference.dependencies:
                dependency_result.add_dependency(
                    Dependency(
                        class_a=class_reference.name,
                        class_a_line=reference.line,
                        class_b=reference.class_name,
                    )
                )
