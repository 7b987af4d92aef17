"""JSON formatter for a11y-insight."""

import json

from ..normalization.models import NormalizedResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the normalized result as JSON."""

    def render(self, result: NormalizedResult) -> None:
        print(self.format(result))

    def format(self, result: NormalizedResult) -> str:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
