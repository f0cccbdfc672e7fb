"""Caching layer resolver.

Decorator pattern: wraps any LayerResolverProtocol with a per-name cache.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from deptracker.domain.ports.layer_resolver import LayerResolverProtocol


@dataclass
class ClassNameLayerResolverCacheDecorator:
    """Resolver with per-class-name memoization.

    First lookup of a name delegates to the wrapped resolver, later
    lookups return the stored result. Unbounded, never invalidated:
    the class universe and configuration are fixed for one run.

    In-memory only, one instance per analysis run.

    Attributes:
        _inner: Wrapped resolver
        _cache: Class name → layer names
    """

    _inner: LayerResolverProtocol
    _cache: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner resolver must not be None")

    def get_layers_by_class_name(self, class_name: str) -> tuple[str, ...]:
        """Get layers with cache lookup."""
        layers = self._cache.get(class_name)
        if layers is None:
            layers = self._inner.get_layers_by_class_name(class_name)
            self._cache[class_name] = layers
        return layers

    @property
    def cache_size(self) -> int:
        """Number of resolved class names."""
        return len(self._cache)
