"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import A11yConfig, build_weight_cache, load_config
from ..exceptions import A11yInsightError
from ..logging_config import setup_logging
from ..loader import load_results
from ..normalization import NormalizedResult, ResultNormalizer, WeightCache

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    **overrides,
) -> A11yConfig:
    """Build configuration from CLI options."""
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)


def load_settings(
    config: Optional[Path] = None,
    verbose: bool = False,
    **overrides,
) -> A11yConfig:
    """Resolve configuration and set up logging from it; exit 1 when either fails."""
    try:
        settings = resolve_config(config=config, verbose=verbose, **overrides)
        setup_logging(settings.verbosity, settings.log_file)
    except A11yInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] cannot open log file: {e}")
        raise typer.Exit(1)
    return settings


def normalize_file(
    path: Path, config: A11yConfig, weights: Optional[WeightCache] = None
) -> NormalizedResult:
    """Load an analyzer result file and normalize it.

    Pass ``weights`` when the caller keeps using the cache afterwards; one is
    built from ``config`` otherwise.
    """
    if weights is None:
        weights = build_weight_cache(config)
    normalizer = ResultNormalizer(weights, default_tier=config.default_tier)
    return normalizer.normalize(load_results(path))
