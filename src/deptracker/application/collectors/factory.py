"""Collector factory: type discriminator → collector.

Closed registry built once at construction. Add collector kinds by
passing them to CollectorFactory, not by mutating a global.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from deptracker.application.collectors._base import BaseCollector
from deptracker.application.collectors.boolean import AndCollector, NotCollector, OrCollector
from deptracker.application.collectors.class_name import ClassNameCollector
from deptracker.application.collectors.directory import DirectoryCollector
from deptracker.application.collectors.inheritance import (
    ExtendsCollector,
    ImplementsCollector,
    InheritsCollector,
)
from deptracker.domain.exceptions import ConfigurationError, UnknownCollectorTypeError
from deptracker.domain.ports.collector import CollectorProtocol

# Registry - tuple for immutability
_BUILTIN_COLLECTORS: tuple[type[BaseCollector], ...] = (
    ClassNameCollector,
    DirectoryCollector,
    ExtendsCollector,
    ImplementsCollector,
    InheritsCollector,
    AndCollector,
    OrCollector,
    NotCollector,
)


class CollectorFactory:
    """Collector registry keyed by collector type.

    Collectors are stateless, so one instance per type is shared.
    """

    def __init__(self, collectors: Iterable[CollectorProtocol]) -> None:
        """Initialize registry.

        Args:
            collectors: Collector instances, one per type

        Raises:
            ValueError: If two collectors share a type
        """
        registry: dict[str, CollectorProtocol] = {}
        for collector in collectors:
            if not collector.type:
                raise ValueError(f"collector {collector!r} must have a non-empty type")
            if collector.type in registry:
                raise ValueError(f"collector type '{collector.type}' registered twice")
            registry[collector.type] = collector
        self._registry: Mapping[str, CollectorProtocol] = MappingProxyType(registry)

    def create(self, configuration: Mapping[str, object]) -> CollectorProtocol:
        """Get collector for configuration["type"].

        Args:
            configuration: Collector configuration fragment

        Returns:
            Registered collector

        Raises:
            ConfigurationError: If "type" is missing or not a string
            UnknownCollectorTypeError: If type is not registered
        """
        collector_type = configuration.get("type")
        if collector_type is None:
            raise ConfigurationError(
                "collector", f"missing required key 'type' in {dict(configuration)}"
            )
        if not isinstance(collector_type, str):
            raise ConfigurationError(
                "collector", f"'type' must be a string, got {collector_type!r}"
            )

        collector = self._registry.get(collector_type)
        if collector is None:
            raise UnknownCollectorTypeError(collector_type, self._registry)
        return collector

    @property
    def types(self) -> frozenset[str]:
        """Registered collector types."""
        return frozenset(self._registry)


def default_collector_factory() -> CollectorFactory:
    """Create factory with all built-in collectors."""
    return CollectorFactory(collector_cls() for collector_cls in _BUILTIN_COLLECTORS)
