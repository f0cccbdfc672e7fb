"""Tests for domain/model/configuration.py."""

import pytest

from deptracker.domain.exceptions import ConfigurationError
from deptracker.domain.model.configuration import DEFAULT_FORMATTER, Configuration
from tests.factories import make_configuration, make_layer, make_ruleset


class TestConfiguration:
    """Tests for Configuration."""

    def test_defaults(self) -> None:
        config = Configuration()
        assert config.layers == ()
        assert config.formatter == DEFAULT_FORMATTER == "console"

    def test_layer_names_in_declaration_order(self) -> None:
        config = make_configuration((make_layer("B"), make_layer("A")))
        assert config.layer_names == ("B", "A")

    def test_get_layer(self) -> None:
        layer = make_layer("A")
        config = make_configuration((layer,))
        assert config.get_layer("A") is layer
        assert config.get_layer("Missing") is None

    def test_duplicate_layer_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="layer defined twice"):
            make_configuration((make_layer("A"), make_layer("A")))

    def test_ruleset_with_unknown_layer_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown layers"):
            make_configuration((make_layer("A"),), make_ruleset(A=["B"]))

    def test_empty_formatter_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="formatter"):
            make_configuration((make_layer("A"),), formatter="")
