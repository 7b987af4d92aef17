"""Configuration loading and management for a11y-insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in A11yConfig)
    2. Global config (~/.a11y-insight.toml)
    3. Project config (./a11y-insight.toml)
    4. Explicit config file
    5. Environment variables (A11Y_INSIGHT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(ranking="efficiency", fail_threshold=80)
    >>> config.ranking
    'efficiency'

A ``[weights]`` table overrides individual check weights::

    ranking = "issue-points"
    default_weight = 5

    [weights]
    colorContrast = 10
    headingOrder = 5
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .normalization.ranking import STRATEGIES
from .normalization.weights import DEFAULT_WEIGHT, WeightCache, validate_weight

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "A11Y_INSIGHT_"


@dataclass(frozen=True)
class A11yConfig:
    """Configuration for normalization and report rendering.

    Attributes:
        Normalization:
            default_tier: Tier reported when the analyzer output names none
            default_weight: Weight for checks missing from the weight table
            weights: Per-check weight overrides (1-10)
            ranking: Entity ranking for the ``rank`` command
                ("issue-points" or "efficiency")

        Rendering:
            fail_threshold: Score below which an entity fails (JUnit, --fail-under default)
            max_annotations: Cap on GitHub annotations per run
            max_issues_per_test: Issues listed per JUnit failure

        Output control:
            verbosity: Logging verbosity level
            log_file: Also append log records (DEBUG included) to this file
    """

    default_tier: str = "material"
    default_weight: int = DEFAULT_WEIGHT
    weights: dict[str, int] = field(default_factory=dict)
    ranking: str = "issue-points"

    fail_threshold: int = 90
    max_annotations: int = 50
    max_issues_per_test: int = 10

    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.default_tier:
            raise InvalidConfigError("default_tier", self.default_tier, "must be non-empty")

        validate_weight("default_weight", self.default_weight)
        if not isinstance(self.weights, dict):
            raise InvalidConfigError("weights", self.weights, "must be a table of check = weight")
        for check, weight in self.weights.items():
            validate_weight(f"weights.{check}", weight)

        if self.ranking not in STRATEGIES:
            raise InvalidConfigError(
                "ranking", self.ranking, f"choose from: {', '.join(sorted(STRATEGIES))}"
            )

        if not 0 <= self.fail_threshold <= 100:
            raise InvalidConfigError("fail_threshold", self.fail_threshold, "must be 0-100")
        if self.max_annotations < 1:
            raise InvalidConfigError("max_annotations", self.max_annotations, "must be at least 1")
        if self.max_issues_per_test < 1:
            raise InvalidConfigError(
                "max_issues_per_test", self.max_issues_per_test, "must be at least 1"
            )

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")
        if self.log_file is not None and not (isinstance(self.log_file, str) and self.log_file):
            raise InvalidConfigError("log_file", self.log_file, "must be a non-empty path")


def build_weight_cache(config: A11yConfig) -> WeightCache:
    """The one weight cache a process shares across normalizations."""
    return WeightCache.with_overrides(config.weights, default=config.default_weight)


def load_config(config_file: Optional[Path] = None, **overrides) -> A11yConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated A11yConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".a11y-insight.toml"
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config), global_config)

    project_config = Path.cwd() / "a11y-insight.toml"
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config), project_config)

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_file(config_file), config_file)

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return A11yConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(merged: dict, data: dict, source: Path) -> None:
    """Layer one file over ``merged``; ``[weights]`` tables combine per check."""
    weights = data.pop("weights", None)
    if weights is not None:
        if not isinstance(weights, dict):
            raise ConfigurationError(f"Invalid [weights] in '{source}': expected a table")
        merged["weights"] = {**merged.get("weights", {}), **weights}
    merged.update(data)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from A11Y_INSIGHT_* environment variables.

    Supported environment variables:
        A11Y_INSIGHT_DEFAULT_TIER: str
        A11Y_INSIGHT_DEFAULT_WEIGHT: int
        A11Y_INSIGHT_RANKING: issue-points/efficiency
        A11Y_INSIGHT_FAIL_THRESHOLD: int
        A11Y_INSIGHT_MAX_ANNOTATIONS: int
        A11Y_INSIGHT_MAX_ISSUES_PER_TEST: int
        A11Y_INSIGHT_VERBOSITY: quiet/normal/verbose
        A11Y_INSIGHT_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(A11yConfig)
    result: dict[str, Any] = {}

    for field_name in A11yConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns:
        Parsed value, or None for types not settable from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] parses as X
    if origin is Union:
        args = [a for a in type_hint.__args__ if a is not type(None)]
        if len(args) == 1:
            return _parse_env_value(value, args[0])
        return None

    # Tables (weights) only come from TOML
    if origin is dict or type_hint is dict:
        return None

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            # Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")


default_config = A11yConfig()
