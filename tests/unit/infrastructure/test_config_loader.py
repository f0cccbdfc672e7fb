"""Tests for infrastructure/config_loader.py."""

from pathlib import Path

import pytest
import yaml

from deptracker.domain.exceptions import ConfigurationError
from deptracker.infrastructure.config_loader import (
    DEFAULT_DEPFILE,
    ConfigurationLoader,
    parse_configuration,
)

DEPFILE = """\
formatter: json
layers:
  - name: Controller
    collectors:
      - type: className
        regex: .*Controller.*
  - name: Repository
    collectors:
      - type: directory
        regex: src/Repository/.*
ruleset:
  Controller:
    - Repository
  Repository:
"""


class TestConfigurationLoader:
    """Tests for ConfigurationLoader."""

    def test_load(self, tmp_path: Path) -> None:
        depfile = tmp_path / "depfile.yml"
        depfile.write_text(DEPFILE, encoding="utf-8")

        config = ConfigurationLoader(depfile).load_configuration()

        assert config.formatter == "json"
        assert config.layer_names == ("Controller", "Repository")
        assert config.get_layer("Repository").collectors == (  # type: ignore[union-attr]
            {"type": "directory", "regex": "src/Repository/.*"},
        )
        assert config.ruleset.is_allowed("Controller", "Repository")
        assert not config.ruleset.is_allowed("Repository", "Controller")

    def test_has_configuration(self, tmp_path: Path) -> None:
        loader = ConfigurationLoader(tmp_path / "depfile.yml")
        assert not loader.has_configuration()
        (tmp_path / "depfile.yml").write_text(DEPFILE, encoding="utf-8")
        assert loader.has_configuration()

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            ConfigurationLoader(tmp_path / "missing.yml").load_configuration()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        depfile = tmp_path / "depfile.yml"
        depfile.write_text("layers: [\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            ConfigurationLoader(depfile).load_configuration()

    def test_dump_default(self, tmp_path: Path) -> None:
        depfile = tmp_path / "depfile.yml"
        loader = ConfigurationLoader(depfile)

        assert loader.dump_default() is True
        assert depfile.read_text(encoding="utf-8") == DEFAULT_DEPFILE
        assert loader.dump_default() is False

    def test_dump_default_keeps_existing_file(self, tmp_path: Path) -> None:
        depfile = tmp_path / "depfile.yml"
        depfile.write_text(DEPFILE, encoding="utf-8")
        ConfigurationLoader(depfile).dump_default()
        assert depfile.read_text(encoding="utf-8") == DEPFILE

    def test_default_depfile_is_valid(self, tmp_path: Path) -> None:
        depfile = tmp_path / "depfile.yml"
        loader = ConfigurationLoader(depfile)
        loader.dump_default()

        config = loader.load_configuration()

        assert config.layer_names == ("Controller", "Repository", "Service")
        assert config.ruleset.is_allowed("Controller", "Service")
        assert config.ruleset.is_allowed("Service", "Repository")
        assert not config.ruleset.is_allowed("Controller", "Repository")


class TestParseConfiguration:
    """Tests for parse_configuration()."""

    def test_defaults(self) -> None:
        config = parse_configuration({})
        assert config.layers == ()
        assert config.formatter == "console"

    def test_document_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            parse_configuration(["layers"])

    def test_layers_must_be_list(self) -> None:
        with pytest.raises(ConfigurationError, match="'layers' must be a list"):
            parse_configuration({"layers": {"name": "Controller"}})

    def test_layer_without_name(self) -> None:
        with pytest.raises(ConfigurationError, match="non-empty 'name'"):
            parse_configuration({"layers": [{"collectors": []}]})

    def test_collectors_must_be_list(self) -> None:
        with pytest.raises(ConfigurationError, match="'collectors' must be a list"):
            parse_configuration({"layers": [{"name": "A", "collectors": {"type": "className"}}]})

    def test_ruleset_entry_must_be_list(self) -> None:
        data = yaml.safe_load("layers: [{name: A}, {name: B}]\nruleset: {A: B}")
        with pytest.raises(ConfigurationError, match="ruleset entry 'A'"):
            parse_configuration(data)

    def test_ruleset_unknown_layer(self) -> None:
        data = {"layers": [{"name": "A"}], "ruleset": {"A": ["B"]}}
        with pytest.raises(ConfigurationError, match="unknown layers"):
            parse_configuration(data)

    def test_duplicate_layer(self) -> None:
        data = {"layers": [{"name": "A"}, {"name": "A"}]}
        with pytest.raises(ConfigurationError, match="layer defined twice"):
            parse_configuration(data)

    def test_formatter_must_be_string(self) -> None:
        with pytest.raises(ConfigurationError, match="'formatter' must be a string"):
            parse_configuration({"formatter": 3})
