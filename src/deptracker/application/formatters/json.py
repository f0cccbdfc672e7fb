"""JSON formatter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from deptracker.application.formatters._base import BaseFormatter
from deptracker.domain.model.dependency import InheritDependency

if TYPE_CHECKING:
    from deptracker.domain.model.analysis_result import AnalysisResult
    from deptracker.domain.model.dependency import Dependency
    from deptracker.domain.model.violation import RulesetViolation


class JSONFormatter(BaseFormatter):
    """JSON formatter for CI/CD integration and parsing by other tools."""

    name = "json"

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize formatter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def finish(self, result: AnalysisResult) -> str:
        """Format analysis result as JSON document."""
        return json.dumps(self._result_to_dict(result), indent=self._indent)

    def _result_to_dict(self, result: AnalysisResult) -> dict[str, object]:
        dependency_result = result.dependency_result
        return {
            "passed": result.passed,
            "summary": {
                "class_count": result.class_count,
                "dependency_count": dependency_result.dependency_count,
                "inherit_dependency_count": dependency_result.inherit_dependency_count,
                "violation_count": result.violation_count,
                "inherited_violation_count": result.inherited_violation_count,
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: RulesetViolation) -> dict[str, object]:
        dependency = violation.dependency
        data: dict[str, object] = {
            "class_a": dependency.class_a,
            "class_a_line": dependency.class_a_line,
            "class_b": dependency.class_b,
            "layer_a": violation.layer_a,
            "layer_b": violation.layer_b,
            "inherited": violation.is_inherited,
        }
        if isinstance(dependency, InheritDependency):
            data["path"] = [
                {"class": step.class_name, "line": step.line, "kind": step.kind.value}
                for step in dependency.path
            ]
            data["original_dependency"] = self._dependency_to_dict(dependency.original_dependency)
        return data

    def _dependency_to_dict(self, dependency: Dependency) -> dict[str, object]:
        return {
            "class_a": dependency.class_a,
            "class_a_line": dependency.class_a_line,
            "class_b": dependency.class_b,
        }
