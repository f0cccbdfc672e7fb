"""Inheritance dependency emitter: extends/implements clauses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.application.emitters._base import BaseDependencyEmitter
from deptracker.domain.model.dependency import Dependency

if TYPE_CHECKING:
    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.dependency_result import DependencyResult


class InheritanceDependencyEmitter(BaseDependencyEmitter):
    """One plain Dependency from a class to each direct ancestor.

    Only direct relations are emitted, at the line of the clause.
    Indirect ancestors are reached by the flattener, which
    records the chain.
    """

    name = "inheritance"

    def apply_dependencies(self, class_map: ClassMap, dependency_result: DependencyResult) -> None:
        for class_reference in class_map:
            for relation in class_reference.inherits:
                dependency_result.add_dependency(
                    Dependency(
                        class_a=class_reference.name,
                        class_a_line=relation.line,
                        class_b=relation.class_name,
                    )
                )
