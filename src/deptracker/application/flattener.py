"""Dependency inheritance flattening.

A subclass inherits the dependencies of its ancestors: for every class C,
every ancestor path P of C and every plain dependency D declared on
P.ancestor, an InheritDependency C → D.class_b is added, carrying P and D.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deptracker.domain.model.dependency import InheritDependency

if TYPE_CHECKING:
    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.dependency_result import DependencyResult

logger = logging.getLogger(__name__)


class DependencyInheritanceFlattener:
    """Expands ancestor dependencies onto descendants.

    Only plain dependencies are walked, never inherit dependencies,
    so paths are never nested. Running twice adds nothing the second
    time (DependencyResult ignores equal edges). Terminates on any
    inheritance shape: ClassMap.get_class_inherits() cuts cycles.
    """

    def flatten_dependencies(self, class_map: ClassMap, dependency_result: DependencyResult) -> int:
        """Add inherit dependencies for every class in class_map.

        Args:
            class_map: Parsed classes (read-only)
            dependency_result: Emitted dependencies (mutated)

        Returns:
            Number of inherit dependencies added by this call
        """
        added = 0
        for class_reference in class_map:
            for path in class_map.get_class_inherits(class_reference.name):
                ancestor = path.ancestor.class_name
                for dependency in dependency_result.get_dependencies_by_class(ancestor):
                    inherit_dependency = InheritDependency.from_path(
                        class_reference.name, path, dependency
                    )
                    if dependency_result.add_inherit_dependency(inherit_dependency):
                        added += 1

        logger.debug("Flattening added %d inherit dependencies", added)
        return added
