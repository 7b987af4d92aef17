"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="a11y-insight",
    help="a11y-insight - Prioritized accessibility reports for Angular Material audits",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Normalize accessibility audit results and render them for CI, chat, or terminals.

    [bold cyan]Examples:[/bold cyan]

      a11y-insight report results.json

      a11y-insight report results.json --format sarif -o a11y.sarif

      a11y-insight rank results.json --strategy efficiency
    """
    if version:
        console.print(f"a11y-insight {__version__}")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
from .rank import rank as _rank  # noqa: F401, E402
from .weights import weights as _weights  # noqa: F401, E402
