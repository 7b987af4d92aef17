"""Output formatters for a11y-insight."""

from ..config import A11yConfig, default_config
from .base import BaseFormatter
from .csv_formatter import CsvFormatter
from .github_formatter import GithubFormatter
from .json_formatter import JsonFormatter
from .junit_formatter import JunitFormatter
from .rich_formatter import RichFormatter
from .sarif_formatter import SarifFormatter

FORMATTERS = {
    "rich": RichFormatter,
    "json": JsonFormatter,
    "csv": CsvFormatter,
    "github": GithubFormatter,
    "junit": JunitFormatter,
    "sarif": SarifFormatter,
}


def get_formatter(name: str, config: A11yConfig = default_config) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "csv", "github", "junit", "sarif"
        config: Rendering limits and thresholds

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls(config)


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "GithubFormatter",
    "JunitFormatter",
    "SarifFormatter",
    "FORMATTERS",
    "get_formatter",
]
