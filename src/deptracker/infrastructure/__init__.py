"""Infrastructure: file loaders for depfile and class map."""

from deptracker.infrastructure.class_map_loader import load_class_map, parse_class_map
from deptracker.infrastructure.config_loader import (
    DEFAULT_DEPFILE,
    DEFAULT_DEPFILE_NAME,
    ConfigurationLoader,
    parse_configuration,
)

__all__ = [
    "ConfigurationLoader",
    "DEFAULT_DEPFILE",
    "DEFAULT_DEPFILE_NAME",
    "parse_configuration",
    "load_class_map",
    "parse_class_map",
]
