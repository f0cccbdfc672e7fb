"""Application layer for layer dependency analysis.

Components:
- collectors: Layer membership predicates and their factory
- emitters: Dependency emission from the class map
- flattener: Inheritance flattening
- resolvers: Class name → layers (with cache decorator)
- ruleset_engine: Violation evaluation
- formatters: Output formatting (console, JSON)
- services: Main facade (Analyzer)
"""

from deptracker.application.collectors import (
    BaseCollector,
    CollectorFactory,
    default_collector_factory,
)
from deptracker.application.emitters import (
    BaseDependencyEmitter,
    BasicDependencyEmitter,
    InheritanceDependencyEmitter,
    default_emitters,
)
from deptracker.application.flattener import DependencyInheritanceFlattener
from deptracker.application.formatters import (
    BaseFormatter,
    ConsoleFormatter,
    JSONFormatter,
    formatter_by_name,
)
from deptracker.application.resolvers import (
    ClassNameLayerResolver,
    ClassNameLayerResolverCacheDecorator,
)
from deptracker.application.ruleset_engine import RulesetEngine
from deptracker.application.services import Analyzer

__all__ = [
    # Collectors
    "BaseCollector",
    "CollectorFactory",
    "default_collector_factory",
    # Emitters
    "BaseDependencyEmitter",
    "BasicDependencyEmitter",
    "InheritanceDependencyEmitter",
    "default_emitters",
    # Flattening
    "DependencyInheritanceFlattener",
    # Resolvers
    "ClassNameLayerResolver",
    "ClassNameLayerResolverCacheDecorator",
    # Rules
    "RulesetEngine",
    # Formatters
    "BaseFormatter",
    "ConsoleFormatter",
    "JSONFormatter",
    "formatter_by_name",
    # Services
    "Analyzer",
]
