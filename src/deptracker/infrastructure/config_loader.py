"""Depfile loader: YAML → Configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from deptracker.domain.exceptions import ConfigurationError
from deptracker.domain.model.configuration import DEFAULT_FORMATTER, Configuration
from deptracker.domain.model.layer import Layer
from deptracker.domain.model.ruleset import Ruleset

logger = logging.getLogger(__name__)

DEFAULT_DEPFILE_NAME = "depfile.yml"

DEFAULT_DEPFILE = """\
formatter: console
layers:
  - name: Controller
    collectors:
      - type: className
        regex: .*Controller.*
  - name: Repository
    collectors:
      - type: className
        regex: .*Repository.*
  - name: Service
    collectors:
      - type: className
        regex: .*Service.*
ruleset:
  Controller:
    - Service
  Service:
    - Repository
  Repository: []
"""


class ConfigurationLoader:
    """Loads the depfile for one analysis run.

    Format:
        formatter: console            # optional
        layers:
          - name: <layer>
            collectors: [{type: ..., ...}, ...]
        ruleset:
          <layer>: [<allowed layer>, ...]
    """

    def __init__(self, path: Path) -> None:
        """Initialize loader.

        Args:
            path: Depfile path
        """
        self._path = path

    @property
    def path(self) -> Path:
        """Depfile path."""
        return self._path

    def has_configuration(self) -> bool:
        """Check if the depfile exists."""
        return self._path.is_file()

    def load_configuration(self) -> Configuration:
        """Read and validate the depfile.

        Returns:
            Immutable Configuration

        Raises:
            OSError: If the file cannot be read
            ConfigurationError: If the document is malformed
        """
        logger.debug("Loading configuration from %s", self._path)
        text = self._path.read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(str(self._path), f"invalid YAML: {e}") from e
        return parse_configuration(data, str(self._path))

    def dump_default(self) -> bool:
        """Write the default depfile unless one exists.

        Returns:
            True if written, False if the file already existed
        """
        if self._path.exists():
            return False
        self._path.write_text(DEFAULT_DEPFILE, encoding="utf-8")
        return True


def parse_configuration(data: object, source: str = "depfile") -> Configuration:
    """Build Configuration from a decoded YAML document.

    Args:
        data: Decoded document
        source: Name used in error messages

    Raises:
        ConfigurationError: If the document is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(source, "document must be a mapping")

    layers = tuple(_parse_layer(item, source) for item in _as_list(data, "layers", source))

    ruleset_data = data.get("ruleset") or {}
    if not isinstance(ruleset_data, Mapping):
        raise ConfigurationError(source, "'ruleset' must be a mapping of layer → list of layers")
    for layer, targets in ruleset_data.items():
        if targets is not None and not isinstance(targets, list):
            raise ConfigurationError(source, f"ruleset entry '{layer}' must be a list of layers")
    ruleset = Ruleset.from_mapping(
        {str(layer): [str(t) for t in targets or ()] for layer, targets in ruleset_data.items()}
    )

    formatter = data.get("formatter", DEFAULT_FORMATTER)
    if not isinstance(formatter, str):
        raise ConfigurationError(source, "'formatter' must be a string")

    return Configuration(layers=layers, ruleset=ruleset, formatter=formatter)


def _parse_layer(item: object, source: str) -> Layer:
    if not isinstance(item, Mapping):
        raise ConfigurationError(source, "every layer must be a mapping")

    name = item.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigurationError(source, "every layer must have a non-empty 'name'")

    collectors = item.get("collectors") or []
    if not isinstance(collectors, list):
        raise ConfigurationError(name, "'collectors' must be a list")

    return Layer(name=name, collectors=tuple(collectors))


def _as_list(data: Mapping[str, object], key: str, source: str) -> list[object]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ConfigurationError(source, f"'{key}' must be a list")
    return value
