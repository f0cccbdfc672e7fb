"""Tests for domain/exceptions/configuration.py and reference.py."""

import pytest

from deptracker.domain.exceptions import (
    ConfigurationError,
    UnknownCollectorTypeError,
    UnresolvedReferenceError,
)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_message_contains_subject_and_reason(self) -> None:
        err = ConfigurationError("className", "missing required key 'regex'")
        assert str(err) == "Invalid configuration for 'className': missing required key 'regex'"

    def test_attributes(self) -> None:
        err = ConfigurationError("ruleset", "unknown layers")
        assert err.subject == "ruleset"
        assert err.reason == "unknown layers"

    def test_empty_subject_raises(self) -> None:
        """FAIL-FIRST: empty subject is rejected."""
        with pytest.raises(ValueError, match="subject"):
            ConfigurationError("", "reason")

    def test_empty_reason_raises(self) -> None:
        """FAIL-FIRST: empty reason is rejected."""
        with pytest.raises(ValueError, match="reason"):
            ConfigurationError("subject", "")


class TestUnknownCollectorTypeError:
    """Tests for UnknownCollectorTypeError."""

    def test_is_configuration_error(self) -> None:
        """Callers catching ConfigurationError also catch unknown types."""
        assert issubclass(UnknownCollectorTypeError, ConfigurationError)

    def test_known_types_sorted(self) -> None:
        err = UnknownCollectorTypeError("regex", ["directory", "className", "bool/and"])
        assert err.known_types == ("bool/and", "className", "directory")
        assert err.collector_type == "regex"

    def test_message_lists_known_types(self) -> None:
        err = UnknownCollectorTypeError("regex", ["className"])
        assert "'regex'" in str(err)
        assert "['className']" in str(err)

    def test_empty_type_still_reported(self) -> None:
        err = UnknownCollectorTypeError("", ["className"])
        assert err.subject == "<empty>"


class TestUnresolvedReferenceError:
    """Tests for UnresolvedReferenceError."""

    def test_message(self) -> None:
        err = UnresolvedReferenceError("Vendor\\Foo")
        assert err.class_name == "Vendor\\Foo"
        assert "Vendor\\Foo" in str(err)

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="class_name"):
            UnresolvedReferenceError("")
