"""Structural collectors: extends / implements / inherits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.application.collectors._base import BaseCollector
from deptracker.application.collectors._config import require_string
from deptracker.domain.model.enums import InheritKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deptracker.domain.model.class_map import ClassMap, ClassReference
    from deptracker.domain.model.inherit_path import InheritPath
    from deptracker.domain.ports.collector import CollectorFactoryProtocol


class _AncestorCollector(BaseCollector):
    """Satisfied if the class has the configured ancestor, transitively.

    Subclasses narrow which chains count through `_accepts`.
    Configuration key equals the collector type.
    """

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        ancestor = require_string(configuration, self.type, self.type)
        return any(
            path.ancestor.class_name == ancestor and self._accepts(path)
            for path in class_map.get_class_inherits(class_reference.name)
        )

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        require_string(configuration, self.type, self.type)

    def _accepts(self, path: InheritPath) -> bool:
        return True


class ExtendsCollector(_AncestorCollector):
    """Class extends the configured class (directly or through parents).

    Every hop of the chain must be an extends clause.

    Configuration:
        extends: Qualified name of the base class
    """

    type = "extends"

    def _accepts(self, path: InheritPath) -> bool:
        return all(step.kind is InheritKind.EXTENDS for step in path.steps)


class ImplementsCollector(_AncestorCollector):
    """Class implements the configured interface (directly or inherited).

    Satisfied when any hop of the chain is an implements clause, so an
    interface reached through a parent class or a parent interface counts.

    Configuration:
        implements: Qualified name of the interface
    """

    type = "implements"

    def _accepts(self, path: InheritPath) -> bool:
        return any(step.kind is InheritKind.IMPLEMENTS for step in path.steps)


class InheritsCollector(_AncestorCollector):
    """Class has the configured ancestor by any kind of inheritance.

    Configuration:
        inherits: Qualified name of the ancestor
    """

    type = "inherits"
