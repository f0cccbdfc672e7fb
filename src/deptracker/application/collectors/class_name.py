"""Class name collector."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.application.collectors._base import BaseCollector
from deptracker.application.collectors._config import require_pattern

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deptracker.domain.model.class_map import ClassMap, ClassReference
    from deptracker.domain.ports.collector import CollectorFactoryProtocol


class ClassNameCollector(BaseCollector):
    """Matches the fully qualified class name against a regex.

    Configuration:
        regex: Pattern, searched case-insensitive (not anchored)

    Example:
        {"type": "className", "regex": "^App\\\\Controller"}
    """

    type = "className"

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        pattern = require_pattern(configuration, "regex", self.type)
        return pattern.search(class_reference.name) is not None

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        require_pattern(configuration, "regex", self.type)
