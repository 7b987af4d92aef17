"""Rich terminal formatter for a11y-insight."""

import io

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..normalization.distribution import classify
from ..normalization.models import NormalizedResult
from .base import BaseFormatter

TOP_ENTITIES = 10

_BUCKET_STYLE = {"passing": "green", "warning": "yellow", "failing": "red"}


def _score_label(score: int) -> str:
    style = _BUCKET_STYLE[classify(score)]
    return f"[{style}]{score}[/{style}]"


class RichFormatter(BaseFormatter):
    """Summary panel plus the highest-priority entities."""

    def render(self, result: NormalizedResult) -> None:
        self._print(Console(), result)

    def format(self, result: NormalizedResult) -> str:
        buffer = io.StringIO()
        self._print(Console(file=buffer, width=100, color_system=None), result)
        return buffer.getvalue()

    def _print(self, console: Console, result: NormalizedResult) -> None:
        d = result.distribution
        summary = (
            f"[bold]Tier:[/bold] {result.tier}    [bold]Total:[/bold] {result.total}\n"
            f"[green]Passing: {d.passing}[/green]    "
            f"[yellow]Warning: {d.warning}[/yellow]    "
            f"[red]Failing: {d.failing}[/red]    "
            f"[bold]Issues:[/bold] {len(result.issues)}"
        )
        console.print(Panel(summary, title="[bold cyan]a11y-insight[/bold cyan]", expand=False))

        if not result.entities:
            console.print("[dim]No data.[/dim]")
            return

        table = Table(title="Fix first", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Entity")
        table.add_column("Kind")
        table.add_column("Score", justify="right")
        table.add_column("Issues", justify="right")
        table.add_column("Usage", justify="right")
        table.add_column("Points", justify="right", style="bold")

        for rank, entity in enumerate(result.entities[:TOP_ENTITIES], start=1):
            points = entity.issue_points
            table.add_row(
                str(rank),
                escape(entity.label),
                entity.kind.value,
                _score_label(entity.audit_score),
                str(entity.issue_count),
                str(entity.usage_count),
                str(points.total_points if points else 0),
            )
        console.print(table)

        if len(result.entities) > TOP_ENTITIES:
            console.print(f"[dim]... {len(result.entities) - TOP_ENTITIES} more[/dim]")
