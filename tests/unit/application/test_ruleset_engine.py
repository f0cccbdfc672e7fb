"""Tests for RulesetEngine."""

from dataclasses import dataclass

from deptracker.application.ruleset_engine import RulesetEngine
from deptracker.domain.model.dependency_result import DependencyResult
from deptracker.domain.model.ruleset import Ruleset
from tests.factories import make_dependency, make_inherit_dependency, make_path, make_ruleset


@dataclass
class StaticResolver:
    """Resolver stub with a fixed class → layers table."""

    layers: dict[str, tuple[str, ...]]

    def get_layers_by_class_name(self, class_name: str) -> tuple[str, ...]:
        return self.layers.get(class_name, ())


def make_result(*dependencies: object) -> DependencyResult:
    """DependencyResult holding plain dependencies."""
    result = DependencyResult()
    for dependency in dependencies:
        result.add_dependency(dependency)  # type: ignore[arg-type]
    return result


class TestGetViolations:
    """Tests for get_violations()."""

    def test_forbidden_direction_only(self) -> None:
        """Controller may use Repository, not the other way round."""
        result = make_result(
            make_dependency("ClassA", "ClassB", 1),
            make_dependency("ClassB", "ClassA", 2),
        )
        resolver = StaticResolver({"ClassA": ("LayerA",), "ClassB": ("LayerB",)})

        violations = RulesetEngine().get_violations(
            result, resolver, make_ruleset(LayerA=["LayerB"], LayerB=[])
        )

        assert len(violations) == 1
        (violation,) = violations
        assert violation.dependency == make_dependency("ClassB", "ClassA", 2)
        assert violation.layer_a == "LayerB"
        assert violation.layer_b == "LayerA"

    def test_same_layer_never_violates(self) -> None:
        result = make_result(make_dependency("A1", "A2"))
        resolver = StaticResolver({"A1": ("LayerA",), "A2": ("LayerA",)})
        assert RulesetEngine().get_violations(result, resolver, Ruleset()) == ()

    def test_layerless_classes_ignored(self) -> None:
        result = make_result(make_dependency("A", "Vendor"), make_dependency("Util", "A"))
        resolver = StaticResolver({"A": ("LayerA",)})
        assert RulesetEngine().get_violations(result, resolver, Ruleset()) == ()

    def test_ambiguous_class_each_pair_checked(self) -> None:
        """A class in two layers is checked once per layer pair."""
        result = make_result(make_dependency("A", "B"))
        resolver = StaticResolver({"A": ("LayerA", "LayerC"), "B": ("LayerB", "LayerA")})
        ruleset = make_ruleset(LayerA=["LayerB"], LayerB=[], LayerC=[])

        violations = RulesetEngine().get_violations(result, resolver, ruleset)

        assert [(v.layer_a, v.layer_b) for v in violations] == [
            ("LayerC", "LayerB"),
            ("LayerC", "LayerA"),
        ]

    def test_inherited_violation_after_direct(self) -> None:
        result = DependencyResult()
        original = make_dependency("Base", "Repo", 10)
        inherited = make_inherit_dependency("Ctrl", make_path(("Base", 3)), original)
        result.add_inherit_dependency(inherited)
        result.add_dependency(make_dependency("Ctrl", "Repo", 5))
        resolver = StaticResolver({"Ctrl": ("Controller",), "Repo": ("Repository",)})

        violations = RulesetEngine().get_violations(result, resolver, Ruleset())

        assert [v.is_inherited for v in violations] == [False, True]
        assert violations[1].dependency is inherited

    def test_deterministic(self) -> None:
        result = make_result(
            make_dependency("A", "B", 1),
            make_dependency("A", "B", 2),
            make_dependency("B", "A", 3),
        )
        resolver = StaticResolver({"A": ("X",), "B": ("Y",)})
        engine = RulesetEngine()
        assert engine.get_violations(result, resolver, Ruleset()) == engine.get_violations(
            result, resolver, Ruleset()
        )
