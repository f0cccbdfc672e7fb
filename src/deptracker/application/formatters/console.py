"""Console formatter: AnalysisResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from deptracker.application.formatters._base import BaseFormatter
from deptracker.domain.model.dependency import InheritDependency

if TYPE_CHECKING:
    from deptracker.domain.model.analysis_result import AnalysisResult
    from deptracker.domain.model.violation import RulesetViolation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console formatter.

    Attributes:
        color: Emit ANSI styles. False = plain text.
        width: Console width in characters.
        show_layer_summary: Show violations-per-layer-pair table.
    """

    color: bool = False
    width: int = 120
    show_layer_summary: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleFormatter(BaseFormatter):
    """Console formatter: one block per violation plus a summary.

    Direct violations take one line; inherited violations are followed
    by the ancestor trail, nearest ancestor first, ending at the
    original dependency site.
    """

    name = "console"

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize formatter.

        Args:
            config: Formatter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def finish(self, result: AnalysisResult) -> str:
        """Format analysis result as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
            highlight=False,
        )

        for violation in result.violations:
            self._render_violation(console, violation)

        if self._config.show_layer_summary and result.violations:
            self._render_layer_summary(console, result.violations)

        self._render_footer(console, result)
        return output.getvalue()

    def _render_violation(self, console: Console, violation: RulesetViolation) -> None:
        dependency = violation.dependency
        layers = f" ({violation.layer_a} on {violation.layer_b})"

        if isinstance(dependency, InheritDependency):
            console.print(
                Text.assemble(
                    (dependency.class_a, "green"),
                    " must not depend on ",
                    (dependency.class_b, "green"),
                    layers,
                )
            )
            trail = violation.inherit_trail
            for index, entry in enumerate(trail):
                suffix = " ->" if index < len(trail) - 1 else ""
                console.print(Text(f"    {entry}{suffix}", style="dim"))
        else:
            console.print(
                Text.assemble(
                    (dependency.class_a, "green"),
                    f"::{dependency.class_a_line} must not depend on ",
                    (dependency.class_b, "green"),
                    layers,
                )
            )

    def _render_layer_summary(
        self, console: Console, violations: tuple[RulesetViolation, ...]
    ) -> None:
        counts: dict[tuple[str, str], int] = {}
        for violation in violations:
            key = (violation.layer_a, violation.layer_b)
            counts[key] = counts.get(key, 0) + 1

        table = Table(title="Violations by layer")
        table.add_column("Layer", style="cyan")
        table.add_column("Must not depend on", style="cyan")
        table.add_column("Count", justify="right")
        for (layer_a, layer_b), count in sorted(counts.items()):
            table.add_row(layer_a, layer_b, str(count))

        console.print()
        console.print(table)

    def _render_footer(self, console: Console, result: AnalysisResult) -> None:
        console.print()
        style = "bold red" if result.violations else "bold green"
        console.print(Text(f"Found {result.violation_count} Violations", style=style))
