"""Domain model entities."""

from deptracker.domain.model.analysis_result import AnalysisResult
from deptracker.domain.model.class_map import (
    ClassMap,
    ClassReference,
    DependencyReference,
    InheritRelation,
)
from deptracker.domain.model.configuration import DEFAULT_FORMATTER, Configuration
from deptracker.domain.model.dependency import AnyDependency, Dependency, InheritDependency
from deptracker.domain.model.dependency_result import DependencyResult
from deptracker.domain.model.enums import DependencyKind, InheritKind
from deptracker.domain.model.inherit_path import InheritPath, InheritStep
from deptracker.domain.model.layer import Layer
from deptracker.domain.model.ruleset import Ruleset
from deptracker.domain.model.violation import RulesetViolation

__all__ = [
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
    "AnyDependency",
    "Dependency",
    "InheritDependency",
    "DependencyResult",
    # Configuration
    "DEFAULT_FORMATTER",
    "Configuration",
    "Layer",
    "Ruleset",
    # Results
    "RulesetViolation",
    "AnalysisResult",
]
