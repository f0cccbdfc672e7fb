"""Tests for domain/model/inherit_path.py."""

import pytest

from deptracker.domain.model.enums import InheritKind
from deptracker.domain.model.inherit_path import InheritPath, InheritStep
from tests.factories import make_path


class TestInheritStep:
    """Tests for InheritStep."""

    def test_str(self) -> None:
        assert str(InheritStep(class_name="Base", line=3)) == "Base::3"

    def test_default_kind_is_extends(self) -> None:
        assert InheritStep(class_name="Base", line=3).kind == InheritKind.EXTENDS

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="class_name"):
            InheritStep(class_name="", line=3)

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            InheritStep(class_name="Base", line=0)


class TestInheritPath:
    """Tests for InheritPath."""

    def test_empty_path_raises(self) -> None:
        """FAIL-FIRST: a path always reaches at least one ancestor."""
        with pytest.raises(ValueError, match="at least one step"):
            InheritPath(steps=())

    def test_first_and_ancestor(self) -> None:
        path = make_path(("Base", 3), ("Root", 7))
        assert path.first.class_name == "Base"
        assert path.ancestor.class_name == "Root"

    def test_single_step_first_is_ancestor(self) -> None:
        path = make_path(("Base", 3))
        assert path.first is path.ancestor

    def test_extend_returns_new_path(self) -> None:
        path = make_path(("Base", 3))
        longer = path.extend(InheritStep(class_name="Root", line=7))
        assert path.class_names == ("Base",)
        assert longer.class_names == ("Base", "Root")

    def test_iter_and_len(self) -> None:
        path = make_path(("B", 1), ("C", 2), ("D", 3))
        assert len(path) == 3
        assert [str(step) for step in path] == ["B::1", "C::2", "D::3"]

    def test_hashable(self) -> None:
        assert make_path(("B", 1)) == make_path(("B", 1))
        assert len({make_path(("B", 1)), make_path(("B", 1))}) == 1
