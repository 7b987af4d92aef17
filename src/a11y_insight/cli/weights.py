"""Weights command: effective severity weight per check."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..config import build_weight_cache
from ..normalization.weights import WEIGHTS
from . import app
from ._common import console, load_settings


@app.command()
def weights(
    check: Optional[str] = typer.Option(
        None,
        "--check",
        help="Show the weight of a single check",
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
    """Show check weights (10 critical, 7 important, 5 moderate, 3 minor)."""
    settings = load_settings(config)
    cache = build_weight_cache(settings)

    if check is not None:
        source = "configured" if cache.known(check) else "default"
        console.print(f"{check}: [bold]{cache.get(check)}[/bold] ({source})")
        return

    table = Table(title="Check weights")
    table.add_column("Check")
    table.add_column("Weight", justify="right", style="bold")
    table.add_column("Source", style="dim")

    rows = sorted(cache.table().items(), key=lambda item: (-item[1], item[0]))
    for name, weight in rows:
        overridden = name in settings.weights and WEIGHTS.get(name) != weight
        table.add_row(name, str(weight), "override" if overridden else "built-in")
    console.print(table)
    console.print(f"[dim]Unlisted checks weigh {cache.default}.[/dim]")
