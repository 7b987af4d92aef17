"""
a11y-insight - Accessibility Result Normalization and Prioritization

Reconciles the output shapes of Angular Material accessibility scans
(component, file, sitemap, and route audits) into one normalized result:
audit scores, passing/warning/failing distribution, entities ranked by
severity-weighted issue points, and a flat severity-sorted issue list that
every report format renders from.
"""

__version__ = "0.1.0"

from .normalization import (  # noqa: E402
    Entity,
    Issue,
    NormalizedResult,
    ResultNormalizer,
    WeightCache,
    normalize_results,
)

__all__ = [
    "normalize_results",  # Main entry point
    "ResultNormalizer",  # Reuse one weight cache across runs
    "WeightCache",
    "NormalizedResult",
    "Entity",
    "Issue",
]
