"""Tests for infrastructure/class_map_loader.py."""

import json
from pathlib import Path

import pytest

from deptracker.domain.exceptions import ConfigurationError
from deptracker.domain.model.enums import DependencyKind, InheritKind
from deptracker.infrastructure.class_map_loader import load_class_map, parse_class_map

CLASS_MAP = """\
classes:
  - name: App\\UserController
    file: src/Controller/UserController.php
    line: 5
    dependencies:
      - {class: App\\UserService, line: 12, kind: parameter}
      - {class: App\\UserRepository, line: 20}
    inherits:
      - {class: App\\BaseController, line: 5}
  - name: App\\BaseController
    file: src/Controller/BaseController.php
"""


class TestLoadClassMap:
    """Tests for load_class_map()."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "classmap.yml"
        path.write_text(CLASS_MAP, encoding="utf-8")

        class_map = load_class_map(path)

        assert len(class_map) == 2
        controller = class_map.get_class_reference("App\\UserController")
        assert controller.file == Path("src/Controller/UserController.php")
        assert controller.line == 5
        assert [d.class_name for d in controller.dependencies] == [
            "App\\UserService",
            "App\\UserRepository",
        ]
        assert controller.dependencies[0].kind == DependencyKind.PARAMETER
        assert controller.dependencies[1].kind == DependencyKind.OTHER
        assert controller.inherits[0].kind == InheritKind.EXTENDS

    def test_load_json(self, tmp_path: Path) -> None:
        """JSON documents load through the same reader."""
        path = tmp_path / "classmap.json"
        path.write_text(
            json.dumps(
                {
                    "classes": [
                        {
                            "name": "Impl",
                            "inherits": [{"class": "Iface", "line": 2, "kind": "implements"}],
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )

        class_map = load_class_map(path)

        assert class_map.get_class_reference("Impl").inherits[0].kind == InheritKind.IMPLEMENTS

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "classmap.yml"
        path.write_text("classes: [\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid class map"):
            load_class_map(path)

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_class_map(tmp_path / "missing.yml")


class TestParseClassMap:
    """Tests for parse_class_map()."""

    def test_empty_document(self) -> None:
        assert len(parse_class_map({})) == 0

    def test_document_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            parse_class_map([])

    def test_classes_must_be_list(self) -> None:
        with pytest.raises(ConfigurationError, match="'classes' must be a list"):
            parse_class_map({"classes": {"name": "A"}})

    def test_class_without_name(self) -> None:
        with pytest.raises(ConfigurationError, match="non-empty 'name'"):
            parse_class_map({"classes": [{"file": "a.php"}]})

    def test_entry_without_class(self) -> None:
        with pytest.raises(ConfigurationError, match="entry without 'class'"):
            parse_class_map({"classes": [{"name": "A", "dependencies": [{"line": 3}]}]})

    @pytest.mark.parametrize("line", [0, -2, "3", True])
    def test_invalid_line(self, line: object) -> None:
        with pytest.raises(ConfigurationError, match="positive integer"):
            parse_class_map({"classes": [{"name": "A", "line": line}]})

    def test_unknown_kind(self) -> None:
        data = {"classes": [{"name": "A", "inherits": [{"class": "B", "kind": "mixes"}]}]}
        with pytest.raises(ConfigurationError, match="kind 'mixes' must be one of"):
            parse_class_map(data)

    def test_duplicate_class(self) -> None:
        with pytest.raises(ConfigurationError, match="declared twice"):
            parse_class_map({"classes": [{"name": "A"}, {"name": "A"}]})

    def test_self_inheritance_loads(self) -> None:
        """Self-inheritance is left to traversal, which warns and cuts it."""
        data = {"classes": [{"name": "A", "inherits": [{"class": "A"}]}]}
        class_map = parse_class_map(data)
        assert class_map.get_class_reference("A").inherits[0].class_name == "A"

    def test_missing_file_is_none(self) -> None:
        class_map = parse_class_map({"classes": [{"name": "A"}]})
        assert class_map.get_class_reference("A").file is None

    @pytest.mark.parametrize("file", ["", 3, ["a.php"]])
    def test_invalid_file(self, file: object) -> None:
        with pytest.raises(ConfigurationError, match="'file' must be a non-empty string"):
            parse_class_map({"classes": [{"name": "A", "file": file}]})

    def test_source_in_message(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_class_map([], "classmap.yml")
        assert exc_info.value.subject == "classmap.yml"
