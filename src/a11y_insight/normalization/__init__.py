"""Result normalization and prioritization engine."""

from .assembler import ResultNormalizer, flatten_issues, normalize_results
from .distribution import classify, compute_distribution
from .extractors import extract_entities
from .issues import normalize_issue
from .models import (
    Distribution,
    Entity,
    EntityKind,
    Issue,
    IssuePoints,
    NormalizedResult,
    ResultKind,
)
from .ranking import (
    EfficiencyRanking,
    IssuePointsRanking,
    RankingStrategy,
    calculate_efficiency,
    calculate_issue_points,
    calculate_priority,
    entities_by_issue_points,
    get_strategy,
    priority_entities,
    worst_entities,
)
from .shapes import detect_kind
from .weights import DEFAULT_WEIGHT, WEIGHTS, WeightCache

__all__ = [
    "normalize_results",
    "ResultNormalizer",
    "flatten_issues",
    "NormalizedResult",
    "Entity",
    "EntityKind",
    "Issue",
    "IssuePoints",
    "Distribution",
    "ResultKind",
    "detect_kind",
    "extract_entities",
    "normalize_issue",
    "classify",
    "compute_distribution",
    "WeightCache",
    "WEIGHTS",
    "DEFAULT_WEIGHT",
    "RankingStrategy",
    "IssuePointsRanking",
    "EfficiencyRanking",
    "get_strategy",
    "calculate_issue_points",
    "calculate_efficiency",
    "calculate_priority",
    "entities_by_issue_points",
    "priority_entities",
    "worst_entities",
]
