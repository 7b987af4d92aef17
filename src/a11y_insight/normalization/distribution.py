"""Passing / warning / failing classification of entities."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..logging_config import get_logger
from .models import Distribution, Entity, ResultKind
from .scoring import coerce_count
from .shapes import as_mapping

logger = get_logger(__name__)

PASSING_THRESHOLD = 90
WARNING_THRESHOLD = 50


def classify(score: int) -> str:
    """Bucket name for a 0-100 audit score."""
    if score >= PASSING_THRESHOLD:
        return "passing"
    if score >= WARNING_THRESHOLD:
        return "warning"
    return "failing"


def compute_distribution(entities: Sequence[Entity], clean_not_listed: int = 0) -> Distribution:
    counts = {"passing": clean_not_listed, "warning": 0, "failing": 0}
    for entity in entities:
        counts[classify(entity.audit_score)] += 1
    return Distribution(**counts)


def component_distribution(entities: Sequence[Entity], scanned: int, listed: int) -> Distribution:
    """Distribution for component scans that enumerate only defective components.

    The scanner lists a component only when it has issues, so every scanned
    but unlisted component counts as passing. The engine cannot check this;
    it is the producer's contract.
    """
    clean_not_listed = max(0, scanned - listed)
    return compute_distribution(entities, clean_not_listed=clean_not_listed)


def coerce_distribution(raw: Any) -> Distribution | None:
    """Producer-supplied distribution, buckets forced numeric; None if absent."""
    if not isinstance(raw, Mapping):
        return None
    return Distribution(
        passing=coerce_count(raw.get("passing")) or 0,
        warning=coerce_count(raw.get("warning")) or 0,
        failing=coerce_count(raw.get("failing")) or 0,
    )


def resolve_distribution(
    kind: ResultKind, results: Any, entities: Sequence[Entity]
) -> Distribution:
    """Pick the distribution rule for a result shape.

    Component scans with a scanned count use clean-by-omission. Other shapes
    pass a supplied distribution through, else classify entity scores.
    """
    if kind is ResultKind.UNKNOWN:
        return Distribution()

    raw: Mapping[str, Any] = as_mapping(results)

    if kind is ResultKind.COMPONENT:
        scanned = coerce_count(raw.get("totalComponentsScanned"))
        if scanned is not None:
            listed = coerce_count(raw.get("componentCount"))
            return component_distribution(
                entities, scanned, len(entities) if listed is None else listed
            )

    supplied = coerce_distribution(raw.get("distribution"))
    if supplied is not None:
        return supplied

    logger.debug("No distribution supplied; classifying entity scores")
    return compute_distribution(entities)
