"""deptracker domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc,
logging, warnings
"""

from deptracker.domain.exceptions import (
    ConfigurationError,
    CyclicInheritanceWarning,
    DepTrackerError,
    UnknownCollectorTypeError,
    UnresolvedReferenceError,
)
from deptracker.domain.model import (
    AnalysisResult,
    ClassMap,
    ClassReference,
    Configuration,
    Dependency,
    DependencyKind,
    DependencyReference,
    DependencyResult,
    InheritDependency,
    InheritKind,
    InheritPath,
    InheritRelation,
    InheritStep,
    Layer,
    Ruleset,
    RulesetViolation,
)
from deptracker.domain.ports import (
    CollectorFactoryProtocol,
    CollectorProtocol,
    DependencyEmitterProtocol,
    FormatterProtocol,
    LayerResolverProtocol,
)

__all__ = [
    # Exceptions
    "DepTrackerError",
    "ConfigurationError",
    "UnknownCollectorTypeError",
    "UnresolvedReferenceError",
    "CyclicInheritanceWarning",
    # Enums
    "InheritKind",
    "DependencyKind",
    # Class map
    "ClassMap",
    "ClassReference",
    "DependencyReference",
    "InheritRelation",
    "InheritStep",
    "InheritPath",
    # Dependencies
    "Dependency",
    "InheritDependency",
    "DependencyResult",
    # Configuration
    "Configuration",
    "Layer",
    "Ruleset",
    # Results
    "RulesetViolation",
    "AnalysisResult",
    # Ports
    "CollectorProtocol",
    "CollectorFactoryProtocol",
    "DependencyEmitterProtocol",
    "LayerResolverProtocol",
    "FormatterProtocol",
]
