"""Layer resolvers."""

from deptracker.application.resolvers.cache import ClassNameLayerResolverCacheDecorator
from deptracker.application.resolvers.class_name import ClassNameLayerResolver

__all__ = [
    "ClassNameLayerResolver",
    "ClassNameLayerResolverCacheDecorator",
]
