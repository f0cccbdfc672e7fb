"""Boolean combinators over nested collectors.

Nested configurations are resolved through the factory passed to
satisfy(), never through a global registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.application.collectors._base import BaseCollector
from deptracker.application.collectors._config import require_mapping, require_mapping_list

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deptracker.domain.model.class_map import ClassMap, ClassReference
    from deptracker.domain.ports.collector import CollectorFactoryProtocol


def _satisfy_child(
    configuration: Mapping[str, object],
    class_reference: ClassReference,
    class_map: ClassMap,
    factory: CollectorFactoryProtocol,
) -> bool:
    collector = factory.create(configuration)
    return collector.satisfy(configuration, class_reference, class_map, factory)


def _check_child(configuration: Mapping[str, object], factory: CollectorFactoryProtocol) -> None:
    factory.create(configuration).check_configuration(configuration, factory)


class AndCollector(BaseCollector):
    """All nested collectors satisfied.

    Configuration:
        collectors: Non-empty list of collector configurations
    """

    type = "bool/and"

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        children = require_mapping_list(configuration, "collectors", self.type)
        return all(_satisfy_child(c, class_reference, class_map, factory) for c in children)

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        for child in require_mapping_list(configuration, "collectors", self.type):
            _check_child(child, factory)


class OrCollector(BaseCollector):
    """At least one nested collector satisfied.

    Configuration:
        collectors: Non-empty list of collector configurations
    """

    type = "bool/or"

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        children = require_mapping_list(configuration, "collectors", self.type)
        return any(_satisfy_child(c, class_reference, class_map, factory) for c in children)

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        for child in require_mapping_list(configuration, "collectors", self.type):
            _check_child(child, factory)


class NotCollector(BaseCollector):
    """Nested collector not satisfied.

    Configuration:
        collector: Single collector configuration
    """

    type = "bool/not"

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        child = require_mapping(configuration, "collector", self.type)
        return not _satisfy_child(child, class_reference, class_map, factory)

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        _check_child(require_mapping(configuration, "collector", self.type), factory)
