"""Domain ports (interfaces/protocols)."""

from deptracker.domain.ports.collector import CollectorFactoryProtocol, CollectorProtocol
from deptracker.domain.ports.emitter import DependencyEmitterProtocol
from deptracker.domain.ports.formatter import FormatterProtocol
from deptracker.domain.ports.layer_resolver import LayerResolverProtocol

__all__ = [
    "CollectorProtocol",
    "CollectorFactoryProtocol",
    "DependencyEmitterProtocol",
    "LayerResolverProtocol",
    "FormatterProtocol",
]
