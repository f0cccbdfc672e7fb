"""Class name → layers resolution through collectors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deptracker.domain.exceptions import UnresolvedReferenceError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.layer import Layer
    from deptracker.domain.ports.collector import CollectorFactoryProtocol

logger = logging.getLogger(__name__)


class ClassNameLayerResolver:
    """Evaluates layer collectors for a class.

    Layers are checked in declaration order. A layer matches when at
    least one of its top-level collectors is satisfied.

    Every collector configuration is validated at construction, so a
    ConfigurationError surfaces before any class is resolved.
    """

    def __init__(
        self,
        layers: Sequence[Layer],
        class_map: ClassMap,
        collector_factory: CollectorFactoryProtocol,
    ) -> None:
        """Initialize resolver.

        Args:
            layers: Layer definitions in declaration order
            class_map: Parsed classes
            collector_factory: Factory for collector configurations

        Raises:
            ConfigurationError: If any collector configuration is invalid
        """
        self._layers = tuple(layers)
        self._class_map = class_map
        self._factory = collector_factory

        for layer in self._layers:
            for configuration in layer.collectors:
                collector = self._factory.create(configuration)
                collector.check_configuration(configuration, self._factory)

    def get_layers_by_class_name(self, class_name: str) -> tuple[str, ...]:
        """Get layers the class belongs to.

        Classes outside the class map are layerless.

        Args:
            class_name: Fully qualified class name

        Returns:
            Matching layer names in declaration order
        """
        try:
            class_reference = self._class_map.get_class_reference(class_name)
        except UnresolvedReferenceError:
            logger.debug("Class '%s' not in class map, no layer", class_name)
            return ()

        layers: list[str] = []
        for layer in self._layers:
            for configuration in layer.collectors:
                collector = self._factory.create(configuration)
                if collector.satisfy(configuration, class_reference, self._class_map, self._factory):
                    layers.append(layer.name)
                    break

        return tuple(layers)
