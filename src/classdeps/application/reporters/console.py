"""Console reporter: DependencySet / BatchResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from classdeps.domain.dependencies import ALL_CATEGORIES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from classdeps.application.services.batch import BatchResult
    from classdeps.domain.dependencies import DependencySet


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        show_empty: Show computed categories that found nothing.
        color: Emit terminal colors.
        width: Console width in columns.
    """

    show_empty: bool = True
    color: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


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

    def report(self, dependencies: DependencySet) -> str:
        """Format one class's dependencies as rich formatted string."""
        output = StringIO()
        console = self._console(output)
        self._render_class(console, dependencies)
        return output.getvalue()

    def report_batch(self, result: BatchResult) -> str:
        """Format batch result as rich formatted string."""
        output = StringIO()
        console = self._console(output)

        console.rule("[bold]DEPENDENCIES[/bold]")
        console.print(
            f"[bold]Classes:[/bold] {len(result.outcomes)}  "
            f"[green]ok:[/green] {len(result.succeeded)}  "
            f"[red]failed:[/red] {len(result.failed)}"
        )
        console.print()

        for dependencies in result.succeeded.values():
            self._render_class(console, dependencies)

        if result.failed:
            self._render_errors(console, result.failed)

        return output.getvalue()

    def _console(self, output: StringIO) -> Console:
        return Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            highlight=False,
            width=self._config.width,
        )

    def _render_class(self, console: Console, dependencies: DependencySet) -> None:
        """Render one class as a category table."""
        console.print(
            f"[bold cyan]{dependencies.class_name}[/bold cyan] "
            f"({len(dependencies.merged)} dependencies)"
        )

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Category", style="yellow")
        table.add_column("Type")

        for category in ALL_CATEGORIES:
            if category not in dependencies.categories:
                continue
            names = sorted(dependencies[category])
            if not names:
                if self._config.show_empty:
                    table.add_row(category.value, "[dim]-[/dim]")
                continue
            for index, name in enumerate(names):
                table.add_row(category.value if index == 0 else "", name)

        console.print(table)
        console.print()

    def _render_errors(self, console: Console, failed: Mapping[str, Exception]) -> None:
        """Render failed extractions."""
        console.print(f"[bold red]ERRORS[/bold red] ({len(failed)})")
        for class_name, error in failed.items():
            console.print(f"  {class_name}: {type(error).__name__}: {error}", markup=False)
        console.print()
