"""Console reporter: ValidationReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from packcheck.domain.model.report import CheckOutcome, ValidationReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_passed: List passing checks in the summary table.
        width: Console width in characters.
        force_terminal: Emit ANSI styles even when not writing to a tty.
    """

    show_passed: bool = True
    width: int = 120
    force_terminal: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, report: ValidationReport) -> str:
        """Format validation report as rich formatted string.

        Args:
            report: Validation report to format.

        Returns:
            Formatted string with a summary table and failure sections.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]PACKAGE VALIDATION[/bold]")
        console.print()

        self._render_summary(console, report)

        for outcome in report.failures:
            self._render_failure(console, outcome)

        status = "[bold green]PASSED[/bold green]" if report.passed else "[bold red]FAILED[/bold red]"
        console.print(f"Result: {status}")
        return output.getvalue()

    def _render_summary(self, console: Console, report: ValidationReport) -> None:
        """Render one row per check."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Check")
        table.add_column("Status")
        table.add_column("Failure kinds", style="dim")

        for outcome in report.outcomes:
            if outcome.result.ok and not self._config.show_passed:
                continue
            status = "[green]PASS[/green]" if outcome.result.ok else "[red]FAIL[/red]"
            kinds = ", ".join(sorted(kind.value for kind in outcome.kinds))
            table.add_row(outcome.title, status, kinds)

        console.print(table)
        console.print()

    def _render_failure(self, console: Console, outcome: CheckOutcome) -> None:
        """Render the error text of a failing check."""
        console.rule(f"[bold red]{outcome.title}[/bold red]", align="left")
        # Error text is user data: never interpret it as markup
        console.print(Text(outcome.result.error or ""))
        console.print()
