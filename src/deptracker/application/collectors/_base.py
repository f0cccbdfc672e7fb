"""Base collector class.

Provides default implementation of CollectorProtocol.
Concrete collectors inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deptracker.domain.model.class_map import ClassMap, ClassReference
    from deptracker.domain.ports.collector import CollectorFactoryProtocol


class BaseCollector(ABC):
    """Base class for collectors implementing CollectorProtocol.

    Concrete collectors must:
    1. Set `type` class attribute
    2. Implement `satisfy()`
    3. Implement `check_configuration()` when they read configuration keys
    """

    type: str
    """Discriminator matched against the "type" configuration key."""

    @abstractmethod
    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        """Check whether the class satisfies the configured condition."""

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        """Validate configuration. Default: nothing to validate."""
