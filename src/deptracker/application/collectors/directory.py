"""Directory collector."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.application.collectors._base import BaseCollector
from deptracker.application.collectors._config import require_pattern

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deptracker.domain.model.class_map import ClassMap, ClassReference
    from deptracker.domain.ports.collector import CollectorFactoryProtocol


class DirectoryCollector(BaseCollector):
    """Matches the declaring file path against a regex.

    Paths are compared in POSIX form so patterns work on every platform.
    A class without a recorded file never matches.

    Configuration:
        regex: Pattern, searched case-insensitive (not anchored)
    """

    type = "directory"

    def satisfy(
        self,
        configuration: Mapping[str, object],
        class_reference: ClassReference,
        class_map: ClassMap,
        factory: CollectorFactoryProtocol,
    ) -> bool:
        pattern = require_pattern(configuration, "regex", self.type)
        if class_reference.file is None:
            return False
        return pattern.search(class_reference.file.as_posix()) is not None

    def check_configuration(
        self,
        configuration: Mapping[str, object],
        factory: CollectorFactoryProtocol,
    ) -> None:
        require_pattern(configuration, "regex", self.type)
