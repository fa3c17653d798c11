"""Console UI for terminal output using Rich."""

from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.table import Table

from litreview.models.material import MaterialRecord
from litreview.models.result import CanonicalResult
from litreview.services.views import TABLE_COLUMNS, summary_badges, table_rows


class ConsoleUI:
    """Rich-based console UI for materials, results and notifications."""

    def __init__(self, console: Console | None = None):
        """Initialize console."""
        self.console = console or Console()

    def info(self, message: str) -> None:
        """Print an info message."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """Print a success message in green."""
        self.console.print(f"[green]{message}[/green]")

    def warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message in red."""
        self.console.print(f"[red]Error:[/red] {message}")

    def display_materials(self, records: Iterable[MaterialRecord]) -> None:
        """Display ingested materials with their detected category."""
        records = list(records)
        table = Table(title=f"Research Materials ({len(records)})")
        table.add_column("#", justify="right")
        table.add_column("Type", width=8)
        table.add_column("Name", overflow="fold")

        for i, record in enumerate(records, 1):
            table.add_row(str(i), record.label, record.name)

        self.console.print(table)
        if not records:
            self.console.print("No materials.")

    def display_summary(self, result: CanonicalResult) -> None:
        """Print paper count, date, year range and top badges."""
        stats = result.summary_statistics
        badges = summary_badges(result)
        self.console.print(
            f"[bold]{result.total_papers}[/bold] papers analyzed • "
            f"{result.generated_date or 'N/A'}"
        )
        self.console.print(f"Year range: {stats.year_range or 'N/A'}")
        if badges.themes:
            self.console.print("Themes: " + ", ".join(badges.themes))
        if badges.methodologies:
            self.console.print("Methodologies: " + ", ".join(badges.methodologies))

    def display_comparative_table(self, result: CanonicalResult) -> None:
        """Render the comparative analysis table."""
        table = Table(title="Comparative Analysis")
        for column in TABLE_COLUMNS:
            table.add_column(column, overflow="fold")
        for row in table_rows(result):
            table.add_row(*row)
        self.console.print(table)

    def exported(self, paths: list[Path]) -> None:
        """Print export confirmation."""
        for path in paths:
            self.console.print(f"[green]Exported[/green]: {path}")
        if not paths:
            self.console.print("[yellow]Nothing to export.[/yellow]")
