"""Analysis result aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field

from deptracker.domain.model.dependency_result import DependencyResult
from deptracker.domain.model.violation import RulesetViolation


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Result of one analysis run.

    Consumed by formatters and the CLI exit contract.

    Attributes:
        violations: All violations, in evaluation order
        dependency_result: Emitted and flattened dependencies
        class_count: Number of classes in the analyzed class map
    """

    violations: tuple[RulesetViolation, ...]
    dependency_result: DependencyResult = field(default_factory=DependencyResult)
    class_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.class_count < 0:
            raise ValueError(f"class_count must be >= 0, got {self.class_count}")

    @property
    def passed(self) -> bool:
        """Check if analysis passed (no violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def inherited_violation_count(self) -> int:
        """Number of violations caused through inheritance."""
        return sum(1 for v in self.violations if v.is_inherited)

    @classmethod
    def empty(cls) -> AnalysisResult:
        """Create empty result (passed, no violations)."""
        return cls(violations=())
