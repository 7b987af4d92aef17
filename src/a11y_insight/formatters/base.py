"""Base formatter interface for a11y-insight output rendering."""

import re
from abc import ABC, abstractmethod
from typing import Optional

from ..config import A11yConfig, default_config
from ..normalization.models import NormalizedResult

_SEVERITY_PREFIX = re.compile(r"^\[(Error|Warning|Info)\]\s*")


def clean_message(message: str) -> str:
    """Strip the ``[Error]``/``[Warning]``/``[Info]`` prefix checks emit."""
    return _SEVERITY_PREFIX.sub("", message)


def message_severity(message: str) -> Optional[str]:
    """``"error"``, ``"warning"``, ``"info"`` from the prefix, else None."""
    match = _SEVERITY_PREFIX.match(message)
    return match.group(1).lower() if match else None


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, config: A11yConfig = default_config):
        self.config = config

    @abstractmethod
    def render(self, result: NormalizedResult) -> None:
        """Write the rendered result to stdout."""

    @abstractmethod
    def format(self, result: NormalizedResult) -> str:
        """Return formatted string representation of the result."""
