"""Ruleset evaluation: dependency edges → violations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptracker.domain.model.violation import RulesetViolation

if TYPE_CHECKING:
    from deptracker.domain.model.dependency_result import DependencyResult
    from deptracker.domain.model.ruleset import Ruleset
    from deptracker.domain.ports.layer_resolver import LayerResolverProtocol


class RulesetEngine:
    """Checks every dependency edge against the ruleset.

    Stateless. One pass over all edges, O(edges × layer pairs) with
    layer lookups delegated to the (cached) resolver.
    """

    def get_violations(
        self,
        dependency_result: DependencyResult,
        layer_resolver: LayerResolverProtocol,
        ruleset: Ruleset,
    ) -> tuple[RulesetViolation, ...]:
        """Collect violations.

        Each (layer_a, layer_b) pair of an ambiguous class is checked
        on its own. Same-layer pairs are always allowed. Classes with
        no layer produce no pairs.

        Args:
            dependency_result: Emitted and flattened dependencies
            layer_resolver: Class name → layers
            ruleset: Allowed layer dependencies

        Returns:
            Violations: plain dependencies first, then inherited,
            each in insertion order
        """
        violations: list[RulesetViolation] = []

        for dependency in dependency_result.iter_all():
            layers_a = layer_resolver.get_layers_by_class_name(dependency.class_a)
            if not layers_a:
                continue
            layers_b = layer_resolver.get_layers_by_class_name(dependency.class_b)

            for layer_a in layers_a:
                for layer_b in layers_b:
                    if layer_a == layer_b:
                        continue
                    if ruleset.is_allowed(layer_a, layer_b):
                        continue
                    violations.append(
                        RulesetViolation(dependency=dependency, layer_a=layer_a, layer_b=layer_b)
                    )

        return tuple(violations)
