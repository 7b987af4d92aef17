"""CSV formatter for a11y-insight."""

import csv
import io

from ..normalization.models import NormalizedResult
from .base import BaseFormatter, clean_message


class CsvFormatter(BaseFormatter):
    """One row per issue, most severe first."""

    def render(self, result: NormalizedResult) -> None:
        print(self.format(result), end="")

    def format(self, result: NormalizedResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow([
            "weight", "check", "entity", "audit_score",
            "file", "line", "element", "message",
        ])
        for issue in result.issues:
            writer.writerow([
                issue.weight, issue.check, issue.entity, issue.audit_score,
                issue.file, issue.line, issue.element or "",
                clean_message(issue.message),
            ])
        return output.getvalue()
