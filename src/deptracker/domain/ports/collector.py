"""Collector protocols for layer membership predicates.

A collector answers "does this class satisfy the condition described by
this configuration fragment?". Collectors are stateless: all parameters
come from the configuration mapping on each call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deptracker.domain.model.class_map import ClassMap, ClassReference


class CollectorProtocol(Protocol):
    """Contract for collectors.

    Users implement this Protocol to add custom collector types and
    register them with a CollectorFactory.

    Example:
        class AbstractNameCollector:
            type = "abstractName"

            def satisfy(self, configuration, class_reference, class_map, factory) -> bool:
                return "Abstract" in class_reference.name

            def check_configuration(self, configuration, factory) -> None:
                pass
    """

    type: str
    """Discriminator matched against the "type" configuration key."""

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        """Check whether the class satisfies the configured condition.

        Args:
            configuration: Collector configuration fragment
            class_reference: Class under test
            class_map: Whole class map (for structural checks)
            factory: Factory for nested collector configurations

        Returns:
            True if satisfied

        Raises:
            ConfigurationError: If required configuration is missing or malformed
        """
        ...

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        """Validate configuration without evaluating any class.

        Raises:
            ConfigurationError: If required configuration is missing or malformed
        """
        ...


class CollectorFactoryProtocol(Protocol):
    """Contract for collector factories."""

    def create(self, configuration: Mapping[str, object]) -> CollectorProtocol:
        """Get collector for configuration["type"].

        Raises:
            ConfigurationError: If "type" is missing
            UnknownCollectorTypeError: If type is not registered
        """
        ...
