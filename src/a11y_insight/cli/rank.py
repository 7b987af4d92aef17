"""Rank command: entities in fix-first order under one ranking strategy."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape
from rich.table import Table

from ..config import build_weight_cache
from ..exceptions import A11yInsightError
from ..normalization.ranking import STRATEGIES, get_strategy
from . import app
from ._common import console, err_console, load_settings, normalize_file


@app.command()
def rank(
    results: Path = typer.Argument(
        ...,
        help="Analyzer result file (JSON)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="issue-points (severity x reuse) or efficiency (unique severity per issue x reuse)",
        click_type=click.Choice(sorted(STRATEGIES)),
    ),
    limit: int = typer.Option(
        10,
        "--limit",
        "-n",
        help="Number of entities to show",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
):
    """
    Show which entities to fix first.

    Only entities with issues are listed. Defaults to the ranking set in
    configuration (issue-points unless overridden).
    """
    settings = load_settings(config, verbose, ranking=strategy)
    weights = build_weight_cache(settings)

    try:
        normalized = normalize_file(results, settings, weights)
    except A11yInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    ranking = get_strategy(settings.ranking, weights)
    ranked = ranking.rank(normalized.entities, limit)

    if not ranked:
        console.print("[green]No entities with issues.[/green]")
        return

    metric = "Points" if ranking.name == "issue-points" else "Priority"
    table = Table(title=f"Fix first ({ranking.name})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Entity")
    table.add_column("Kind")
    table.add_column("Score", justify="right")
    table.add_column("Issues", justify="right")
    table.add_column("Usage", justify="right")
    table.add_column(metric, justify="right", style="bold")

    for position, entity in enumerate(ranked, start=1):
        value = ranking.score(entity)
        table.add_row(
            str(position),
            escape(entity.label),
            entity.kind.value,
            str(entity.audit_score),
            str(entity.issue_count),
            str(entity.usage_count),
            f"{value:.2f}" if metric == "Priority" else str(int(value)),
        )
    console.print(table)
