"""Class map loader: YAML/JSON document → ClassMap.

The document is produced by an external parser; this module only
decodes and validates it. JSON is read through the YAML loader.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from deptracker.domain.exceptions import ConfigurationError
from deptracker.domain.model.class_map import (
    ClassMap,
    ClassReference,
    DependencyReference,
    InheritRelation,
)
from deptracker.domain.model.enums import DependencyKind, InheritKind

logger = logging.getLogger(__name__)


def load_class_map(path: Path) -> ClassMap:
    """Read class map document.

    Format:
        classes:
          - name: App\\Controller\\UserController
            file: src/Controller/UserController.php   # optional
            line: 5
            dependencies: [{class: ..., line: 12, kind: parameter}]
            inherits: [{class: ..., line: 5, kind: extends}]

    Raises:
        OSError: If the file cannot be read
        ConfigurationError: If the document is malformed
    """
    logger.debug("Loading class map from %s", path)
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(str(path), f"invalid class map: {e}") from e

    class_map = parse_class_map(data, str(path))
    logger.info("Loaded %d classes from %s", len(class_map), path)
    return class_map


def parse_class_map(data: object, source: str = "class map") -> ClassMap:
    """Build ClassMap from a decoded document.

    Raises:
        ConfigurationError: If the document is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(source, "document must be a mapping")

    classes = data.get("classes") or []
    if not isinstance(classes, list):
        raise ConfigurationError(source, "'classes' must be a list")

    try:
        return ClassMap.from_references(_parse_class(item, source) for item in classes)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(source, str(e)) from e


def _parse_class(item: object, source: str) -> ClassReference:
    if not isinstance(item, Mapping):
        raise ConfigurationError(source, "every class must be a mapping")

    name = item.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigurationError(source, "every class must have a non-empty 'name'")

    return ClassReference(
        name=name,
        file=_file(item, name, source),
        line=_line(item, name, source),
        dependencies=tuple(
            DependencyReference(
                class_name=_class_name(entry, name, source),
                line=_line(entry, name, source),
                kind=_kind(DependencyKind, entry.get("kind", "other"), name, source),
            )
            for entry in _entries(item, "dependencies", name, source)
        ),
        inherits=tuple(
            InheritRelation(
                class_name=_class_name(entry, name, source),
                line=_line(entry, name, source),
                kind=_kind(InheritKind, entry.get("kind", "extends"), name, source),
            )
            for entry in _entries(item, "inherits", name, source)
        ),
    )


def _entries(
    item: Mapping[str, object], key: str, name: str, source: str
) -> list[Mapping[str, object]]:
    value = item.get(key) or []
    if not isinstance(value, list) or not all(isinstance(e, Mapping) for e in value):
        raise ConfigurationError(source, f"class '{name}': '{key}' must be a list of mappings")
    return value


def _file(item: Mapping[str, object], name: str, source: str) -> Path | None:
    value = item.get("file")
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigurationError(source, f"class '{name}': 'file' must be a non-empty string")
    return Path(value)


def _class_name(entry: Mapping[str, object], name: str, source: str) -> str:
    value = entry.get("class")
    if not isinstance(value, str) or not value:
        raise ConfigurationError(source, f"class '{name}': entry without 'class'")
    return value


def _line(entry: Mapping[str, object], name: str, source: str) -> int:
    value = entry.get("line", 1)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ConfigurationError(source, f"class '{name}': 'line' must be a positive integer")
    return value


def _kind[K: (DependencyKind, InheritKind)](
    kind_cls: type[K], value: object, name: str, source: str
) -> K:
    try:
        return kind_cls(value)
    except ValueError as e:
        allowed = [k.value for k in kind_cls]
        raise ConfigurationError(
            source, f"class '{name}': kind {value!r} must be one of {allowed}"
        ) from e
