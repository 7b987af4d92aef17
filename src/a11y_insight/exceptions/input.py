"""Input exceptions: analyzer result files handed to the CLI."""

from pathlib import Path

from .base import A11yInsightError


class InputError(A11yInsightError):
    """Base class for errors reading analyzer output."""

    pass


class ResultFileError(InputError):
    """Raised when an analyzer result file cannot be read or decoded."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot load results: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
