"""Main facade for layer dependency analysis.

Analyzer runs the pipeline: emit → flatten → resolve → evaluate.
Composition-based: accepts factory, emitters, flattener and engine.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Self

from deptracker.application.collectors import default_collector_factory
from deptracker.application.emitters import default_emitters
from deptracker.application.flattener import DependencyInheritanceFlattener
from deptracker.application.resolvers import (
    ClassNameLayerResolver,
    ClassNameLayerResolverCacheDecorator,
)
from deptracker.application.ruleset_engine import RulesetEngine
from deptracker.domain.model.analysis_result import AnalysisResult
from deptracker.domain.model.dependency_result import DependencyResult

if TYPE_CHECKING:
    from deptracker.domain.model.class_map import ClassMap
    from deptracker.domain.model.configuration import Configuration
    from deptracker.domain.ports.collector import CollectorFactoryProtocol
    from deptracker.domain.ports.emitter import DependencyEmitterProtocol

logger = logging.getLogger(__name__)


class Analyzer:
    """Main facade for layer dependency analysis.

    Every call to analyze() owns a fresh DependencyResult and a fresh
    resolver cache; nothing is shared between runs.

    Example:
        class_map = load_class_map(Path("classmap.yml"))
        configuration = ConfigurationLoader(Path("depfile.yml")).load_configuration()
        result = Analyzer.with_defaults().analyze(class_map, configuration)
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        collector_factory: CollectorFactoryProtocol,
        *,
        emitters: Sequence[DependencyEmitterProtocol] = (),
        flattener: DependencyInheritanceFlattener | None = None,
        ruleset_engine: RulesetEngine | None = None,
    ) -> None:
        """Initialize analyzer with dependencies.

        Args:
            collector_factory: Factory for layer collectors
            emitters: Emitters to run, in order
            flattener: Inheritance flattener (default: new instance)
            ruleset_engine: Ruleset engine (default: new instance)
        """
        self._collector_factory = collector_factory
        self._emitters = tuple(emitters)
        self._flattener = flattener or DependencyInheritanceFlattener()
        self._ruleset_engine = ruleset_engine or RulesetEngine()

    @classmethod
    def with_defaults(cls) -> Self:
        """Create analyzer with built-in collectors and emitters."""
        return cls(default_collector_factory(), emitters=default_emitters())

    def analyze(self, class_map: ClassMap, configuration: Configuration) -> AnalysisResult:
        """Run analysis.

        The layer resolver is built before any dependency is emitted,
        so an invalid collector configuration fails the run early.

        Args:
            class_map: Parsed classes
            configuration: Layers, ruleset

        Returns:
            AnalysisResult with dependencies and violations

        Raises:
            ConfigurationError: If a collector configuration is invalid
        """
        layer_resolver = ClassNameLayerResolverCacheDecorator(
            ClassNameLayerResolver(configuration.layers, class_map, self._collector_factory)
        )

        dependency_result = DependencyResult()
        for emitter in self._emitters:
            logger.info('start emitting dependencies "%s"', emitter.name)
            emitter.apply_dependencies(class_map, dependency_result)
        logger.info("end emitting dependencies")

        logger.info("start flatten dependencies")
        self._flattener.flatten_dependencies(class_map, dependency_result)
        logger.info("end flatten dependencies")

        logger.info("collecting violations.")
        violations = self._ruleset_engine.get_violations(
            dependency_result, layer_resolver, configuration.ruleset
        )
        logger.info(
            "%d dependencies, %d inherit dependencies, %d violations",
            dependency_result.dependency_count,
            dependency_result.inherit_dependency_count,
            len(violations),
        )

        return AnalysisResult(
            violations=violations,
            dependency_result=dependency_result,
            class_count=len(class_map),
        )

    @property
    def emitter_count(self) -> int:
        """Number of configured emitters."""
        return len(self._emitters)
