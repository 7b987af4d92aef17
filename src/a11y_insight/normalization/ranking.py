"""Severity-weighted entity prioritization.

Two strategies coexist:

Issue points (primary order of every normalized result)
    base  = sum of weight(check) over every issue instance, repeats included
    usage = max(1, number of pages/routes using the entity)
    total = base * usage

Efficiency / priority (opt-in for renderers that want "cheap fixes first")
    efficiency = sum of weight(check) over unique checks / issue count
    priority   = efficiency * usage

Both read weights from the same ``WeightCache``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from .models import ZERO_POINTS, Entity, IssuePoints
from .weights import WeightCache


def calculate_issue_points(entity: Entity, weights: WeightCache) -> IssuePoints:
    if not entity.issues:
        return ZERO_POINTS

    base = sum(weights.get(issue.check) for issue in entity.issues if issue.check)
    usage = entity.usage_count
    return IssuePoints(base_points=base, usage_count=usage, total_points=base * usage)


def _unique_check_weight(entity: Entity, weights: WeightCache) -> int:
    seen: set[str] = set()
    total = 0
    for issue in entity.issues:
        if issue.check and issue.check not in seen:
            seen.add(issue.check)
            total += weights.get(issue.check)
    return total


def calculate_efficiency(entity: Entity, weights: WeightCache) -> float:
    """Unique-check weight per issue; 0.0 for an entity without issues."""
    if not entity.issues:
        return 0.0
    return _unique_check_weight(entity, weights) / len(entity.issues)


def calculate_priority(entity: Entity, weights: WeightCache) -> float:
    return calculate_efficiency(entity, weights) * entity.usage_count


class RankingStrategy(ABC):
    """Orders entities by one priority metric, highest first.

    Sorting is stable: entities with equal scores keep their input order.
    """

    name: str

    def __init__(self, weights: WeightCache):
        self.weights = weights

    @abstractmethod
    def annotate(self, entity: Entity) -> Entity:
        """Copy of ``entity`` carrying this strategy's metric."""

    @abstractmethod
    def score(self, entity: Entity) -> float:
        """Sort key of an annotated entity."""

    def sort(self, entities: Iterable[Entity]) -> list[Entity]:
        annotated = [self.annotate(e) for e in entities]
        return sorted(annotated, key=self.score, reverse=True)

    def rank(self, entities: Iterable[Entity], limit: Optional[int] = None) -> list[Entity]:
        """Entities with at least one issue, best fix candidates first."""
        ranked = self.sort(e for e in entities if e.issues)
        return ranked if limit is None else ranked[:limit]


class IssuePointsRanking(RankingStrategy):
    name = "issue-points"

    def annotate(self, entity: Entity) -> Entity:
        return replace(entity, issue_points=calculate_issue_points(entity, self.weights))

    def score(self, entity: Entity) -> float:
        points = entity.issue_points or calculate_issue_points(entity, self.weights)
        return points.total_points


class EfficiencyRanking(RankingStrategy):
    name = "efficiency"

    def annotate(self, entity: Entity) -> Entity:
        return replace(entity, priority=calculate_priority(entity, self.weights))

    def score(self, entity: Entity) -> float:
        if entity.priority is None:
            return calculate_priority(entity, self.weights)
        return entity.priority


STRATEGIES: dict[str, type[RankingStrategy]] = {
    IssuePointsRanking.name: IssuePointsRanking,
    EfficiencyRanking.name: EfficiencyRanking,
}


def get_strategy(name: str, weights: WeightCache) -> RankingStrategy:
    """Get a ranking strategy instance by name.

    Raises:
        ValueError: If name is not recognized
    """
    cls = STRATEGIES.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown ranking strategy: {name!r}. Choose from: {', '.join(sorted(STRATEGIES))}"
        )
    return cls(weights)


def entities_by_issue_points(
    entities: Iterable[Entity], weights: WeightCache, limit: Optional[int] = None
) -> list[Entity]:
    return IssuePointsRanking(weights).rank(entities, limit)


def priority_entities(
    entities: Iterable[Entity], weights: WeightCache, limit: Optional[int] = None
) -> list[Entity]:
    return EfficiencyRanking(weights).rank(entities, limit)


def worst_entities(entities: Sequence[Entity], limit: int = 5) -> list[Entity]:
    """Lowest audit scores first."""
    return sorted(entities, key=lambda e: e.audit_score)[:limit]
