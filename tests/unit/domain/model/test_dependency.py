"""Tests for domain/model/dependency.py."""

import pytest

from deptracker.domain.model.dependency import Dependency, InheritDependency
from tests.factories import make_dependency, make_inherit_dependency, make_path


class TestDependency:
    """Tests for Dependency."""

    def test_fields(self) -> None:
        dep = make_dependency("A", "B", line=12)
        assert dep.class_a == "A"
        assert dep.class_a_line == 12
        assert dep.class_b == "B"

    def test_str(self) -> None:
        assert str(make_dependency("A", "B", line=12)) == "A::12 -> B"

    def test_equal_edges_are_equal(self) -> None:
        assert make_dependency("A", "B", 1) == make_dependency("A", "B", 1)
        assert make_dependency("A", "B", 1) != make_dependency("A", "B", 2)

    def test_empty_class_a_raises(self) -> None:
        with pytest.raises(ValueError, match="class_a"):
            Dependency(class_a="", class_a_line=1, class_b="B")

    def test_empty_class_b_raises(self) -> None:
        with pytest.raises(ValueError, match="class_b"):
            Dependency(class_a="A", class_a_line=1, class_b="")

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="class_a_line"):
            Dependency(class_a="A", class_a_line=0, class_b="B")


class TestInheritDependency:
    """Tests for InheritDependency."""

    def test_from_path(self) -> None:
        """class_a_line is the line of the subclass's own clause."""
        original = make_dependency("Base", "Repo", line=10)
        path = make_path(("Base", 3))

        dep = InheritDependency.from_path("Child", path, original)

        assert dep.class_a == "Child"
        assert dep.class_a_line == 3
        assert dep.class_b == "Repo"
        assert dep.path == path
        assert dep.original_dependency == original

    def test_from_longer_path_uses_first_step_line(self) -> None:
        original = make_dependency("Root", "Repo", line=10)
        dep = make_inherit_dependency("Child", make_path(("Base", 3), ("Root", 7)), original)
        assert dep.class_a_line == 3

    def test_class_b_mismatch_raises(self) -> None:
        original = make_dependency("Base", "Repo")
        with pytest.raises(ValueError, match="must match original"):
            InheritDependency(
                class_a="Child",
                class_a_line=3,
                class_b="Other",
                path=make_path(("Base", 3)),
                original_dependency=original,
            )

    def test_path_not_ending_at_original_raises(self) -> None:
        original = make_dependency("Base", "Repo")
        with pytest.raises(ValueError, match="path must end at 'Base'"):
            make_inherit_dependency("Child", make_path(("Other", 3)), original)

    def test_str(self) -> None:
        original = make_dependency("Root", "Repo")
        dep = make_inherit_dependency("Child", make_path(("Base", 3), ("Root", 7)), original)
        assert str(dep) == "Child -> Repo (via Base -> Root)"

    def test_never_equal_to_plain_dependency(self) -> None:
        original = make_dependency("Base", "Repo", line=3)
        dep = make_inherit_dependency("Child", make_path(("Base", 3)), original)
        assert dep != make_dependency("Child", "Repo", line=3)
