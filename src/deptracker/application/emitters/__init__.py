"""Dependency emitters.

Emitters walk the class map and fill the shared DependencyResult:
- InheritanceDependencyEmitter: direct extends/implements edges
- BasicDependencyEmitter: class-name references
"""

from deptracker.application.emitters._base import BaseDependencyEmitter
from deptracker.application.emitters._registry import default_emitters
from deptracker.application.emitters.basic import BasicDependencyEmitter
from deptracker.application.emitters.inheritance import InheritanceDependencyEmitter

__all__ = [
    # Base
    "BaseDependencyEmitter",
    # Emitters
    "InheritanceDependencyEmitter",
    "BasicDependencyEmitter",
    # Factory functions
    "default_emitters",
]
