"""Result assembly: one normalized object for every renderer.

Pipeline::

    raw results -> detect shape -> extract entities (issues normalized,
    scores resolved) -> distribution -> issue points -> sort -> flatten

Malformed input never raises. Unknown shapes produce an empty, zeroed
result that renderers show as "no data".
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, Sequence

from ..logging_config import get_logger
from .distribution import resolve_distribution
from .extractors import extract_entities
from .issues import text_or_none
from .models import Entity, Issue, NormalizedResult
from .ranking import IssuePointsRanking
from .shapes import as_mapping, detect_kind, native_total
from .weights import WeightCache

logger = get_logger(__name__)

DEFAULT_TIER = "material"


def flatten_issues(entities: Sequence[Entity], weights: WeightCache) -> list[Issue]:
    """Every entity issue tagged with weight, owner label, and owner score.

    Sorted by weight descending; equal weights keep entity order.
    """
    flat = [
        replace(
            issue,
            weight=weights.get(issue.check),
            entity=entity.label,
            audit_score=entity.audit_score,
        )
        for entity in entities
        for issue in entity.issues
    ]
    flat.sort(key=lambda issue: issue.weight, reverse=True)
    return flat


class ResultNormalizer:
    """Normalizes analyzer output against one shared ``WeightCache``."""

    def __init__(self, weights: Optional[WeightCache] = None, default_tier: str = DEFAULT_TIER):
        self.weights = weights if weights is not None else WeightCache()
        self.default_tier = default_tier
        self._ranking = IssuePointsRanking(self.weights)

    def normalize(self, results: Any) -> NormalizedResult:
        kind = detect_kind(results)
        entities = extract_entities(results, kind)

        total = native_total(kind, results, entities)
        distribution = resolve_distribution(kind, results, entities)
        ranked = self._ranking.sort(entities)
        issues = flatten_issues(ranked, self.weights)

        tier = text_or_none(as_mapping(results).get("tier")) or self.default_tier
        logger.debug(
            f"Normalized {kind.value} result: {len(ranked)} entities, "
            f"{len(issues)} issues, total={total}"
        )
        return NormalizedResult(
            tier=tier,
            total=total,
            distribution=distribution,
            entities=tuple(ranked),
            issues=tuple(issues),
        )

    __call__ = normalize


def normalize_results(results: Any, weights: Optional[WeightCache] = None) -> NormalizedResult:
    """Normalize any supported analyzer output.

    Args:
        results: Sitemap, route, file, or component scan output.
        weights: Shared weight cache; a fresh default cache when omitted.

    Returns:
        NormalizedResult with entities sorted by issue points and a flat,
        weight-sorted issue list.

    Example:
        >>> normalize_results({"tier": "full", "totalComponentsScanned": 5,
        ...                    "componentCount": 0, "components": []}).distribution
        Distribution(passing=5, warning=0, failing=0)
    """
    return ResultNormalizer(weights).normalize(results)
