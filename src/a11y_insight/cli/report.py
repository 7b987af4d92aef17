"""Report command: normalize analyzer output and render it."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..exceptions import A11yInsightError
from ..formatters import FORMATTERS, get_formatter
from ..logging_config import get_logger
from . import app
from ._common import err_console, load_settings, normalize_file


@app.command()
def report(
    results: Path = typer.Argument(
        ...,
        help="Analyzer result file (JSON)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format",
        click_type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to a file instead of stdout",
        dir_okay=False,
    ),
    fail_under: Optional[int] = typer.Option(
        None,
        "--fail-under",
        help="Exit 1 if any entity scores below this (0-100)",
        min=0,
        max=100,
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
    Render analyzer results in a CI, dashboard, or terminal format.

    Entities are ordered by issue points (severity x reuse) and issues by
    check weight, most severe first.

    [bold cyan]Examples:[/bold cyan]

      a11y-insight report results.json

      a11y-insight report results.json -f github

      a11y-insight report results.json -f junit -o a11y-junit.xml --fail-under 90
    """
    settings = load_settings(config, verbose)
    logger = get_logger(__name__)

    try:
        normalized = normalize_file(results, settings)
        formatter = get_formatter(output_format.lower(), settings)

        if output is not None:
            output.write_text(formatter.format(normalized), encoding="utf-8")
            err_console.print(f"Report saved to: [bold green]{output}[/bold green]")
        else:
            formatter.render(normalized)
    except A11yInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        logger.debug("Writing report failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if fail_under is not None:
        below = [e for e in normalized.entities if e.audit_score < fail_under]
        if below:
            err_console.print(
                f"[red]{len(below)} of {len(normalized.entities)} entities "
                f"score below {fail_under}[/red]"
            )
            raise typer.Exit(1)
