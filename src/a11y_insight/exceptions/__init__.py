"""Exception hierarchy for a11y-insight."""

from .base import A11yInsightError
from .config import ConfigurationError, InvalidConfigError
from .input import InputError, ResultFileError

__all__ = [
    "A11yInsightError",
    "ConfigurationError",
    "InvalidConfigError",
    "InputError",
    "ResultFileError",
]
