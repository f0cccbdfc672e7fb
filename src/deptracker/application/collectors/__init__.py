"""Layer membership collectors.

Built-in collector types:
- className: regex on the qualified class name
- directory: regex on the declaring file
- extends / implements / inherits: structural ancestry checks
- bool/and, bool/or, bool/not: composition of nested collectors
"""

from deptracker.application.collectors._base import BaseCollector
from deptracker.application.collectors.boolean import AndCollector, NotCollector, OrCollector
from deptracker.application.collectors.class_name import ClassNameCollector
from deptracker.application.collectors.directory import DirectoryCollector
from deptracker.application.collectors.factory import CollectorFactory, default_collector_factory
from deptracker.application.collectors.inheritance import (
    ExtendsCollector,
    ImplementsCollector,
    InheritsCollector,
)

__all__ = [
    # Base
    "BaseCollector",
    # Collectors
    "ClassNameCollector",
    "DirectoryCollector",
    "ExtendsCollector",
    "ImplementsCollector",
    "InheritsCollector",
    "AndCollector",
    "OrCollector",
    "NotCollector",
    # Factory
    "CollectorFactory",
    "default_collector_factory",
]
