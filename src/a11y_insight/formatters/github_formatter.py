"""GitHub Actions formatter: workflow annotations shown inline on PR diffs."""

from typing import List

from ..normalization.models import NormalizedResult
from .base import BaseFormatter, clean_message


def annotation_level(weight: int) -> str:
    if weight >= 7:
        return "error"
    if weight >= 4:
        return "warning"
    return "notice"


def escape_annotation(value: object) -> str:
    """Percent-encode characters GitHub treats as command syntax."""
    return (
        str(value)
        .replace("%", "%25")
        .replace("\r", "%0D")
        .replace("\n", "%0A")
        .replace(":", "%3A")
        .replace(",", "%2C")
    )


class GithubFormatter(BaseFormatter):
    """Output ``::error`` / ``::warning`` / ``::notice`` annotations.

    Issues arrive weight-sorted, so the cap keeps the most severe ones.
    """

    def render(self, result: NormalizedResult) -> None:
        print(self.format(result))

    def format(self, result: NormalizedResult) -> str:
        lines: List[str] = []
        for issue in result.issues[: self.config.max_annotations]:
            level = annotation_level(issue.weight or 0)
            message = escape_annotation(clean_message(issue.message))
            lines.append(
                f"::{level} file={issue.file},line={issue.line},"
                f"title={escape_annotation(issue.check)}::"
                f"{message} ({escape_annotation(issue.entity)})"
            )

        d = result.distribution
        summary = (
            f"Analyzed {result.total} ({result.tier}) - Passing: {d.passing}, "
            f"Warning: {d.warning}, Failing: {d.failing}"
        )
        lines.append(f"::notice title=a11y-insight Summary::{escape_annotation(summary)}")
        return "\n".join(lines)
