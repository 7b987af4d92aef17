"""Shape-specific adapters turning raw analyzer output into entities.

One adapter per ``ResultKind``. ``extract_entities`` runs the discriminator
once and dispatches; an unrecognized shape yields no entities.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..logging_config import get_logger
from .issues import UNKNOWN, normalize_issues, text_or_none
from .models import Entity, EntityKind, ResultKind
from .scoring import coerce_count, coerce_score, score_from_check_aggregates, score_from_issues
from .shapes import FILE_LABEL, as_mapping, detect_kind, is_list, page_label

logger = get_logger(__name__)


class Extractor(Protocol):
    """Adapters read one raw result shape and never raise."""

    kind: ResultKind

    def extract(self, results: Mapping[str, Any]) -> list[Entity]: ...


def _affected(component: Mapping[str, Any]) -> Optional[tuple[str, ...]]:
    urls = component.get("affectedUrls")
    if isinstance(urls, (set, frozenset)):
        return tuple(sorted(str(u) for u in urls))
    if is_list(urls):
        # set semantics: first occurrence wins
        return tuple(dict.fromkeys(str(u) for u in urls))

    affected = component.get("affected")
    if is_list(affected):
        return tuple(str(a) for a in affected)
    return None


class ComponentExtractor:
    """``{components: [{name, auditScore?, issues?, checkAggregates?, affected?}]}``"""

    kind = ResultKind.COMPONENT

    def extract(self, results: Mapping[str, Any]) -> list[Entity]:
        components = results.get("components")
        if not is_list(components):
            return []
        return [self._entity(as_mapping(raw)) for raw in components]

    def _entity(self, component: Mapping[str, Any]) -> Entity:
        issues = normalize_issues(component.get("issues"))
        counts = score_from_check_aggregates(component.get("checkAggregates"))

        score = coerce_score(component.get("auditScore"))
        if score is None:
            score = counts.audit_score if counts else score_from_issues(issues)

        if counts:
            audits_passed, audits_total = counts.audits_passed, counts.audits_total
        else:
            audits_passed = coerce_count(component.get("auditsPassed"))
            audits_total = coerce_count(component.get("auditsTotal"))

        return Entity(
            label=(
                text_or_none(component.get("name"))
                or text_or_none(component.get("className"))
                or UNKNOWN
            ),
            kind=EntityKind.COMPONENT,
            audit_score=score,
            issues=issues,
            audits_passed=audits_passed,
            audits_total=audits_total,
            affected=_affected(component),
        )


class FileExtractor:
    """``{summary: {issues: [...], auditScore?}}`` as one aggregated entity."""

    kind = ResultKind.FILE

    def extract(self, results: Mapping[str, Any]) -> list[Entity]:
        summary = as_mapping(results.get("summary"))
        issues = normalize_issues(summary.get("issues"))
        score = coerce_score(summary.get("auditScore"))
        return [
            Entity(
                label=FILE_LABEL,
                kind=EntityKind.FILE,
                audit_score=score_from_issues(issues) if score is None else score,
                issues=issues,
                audits_passed=coerce_count(summary.get("auditsPassed")),
                audits_total=coerce_count(summary.get("auditsTotal")),
            )
        ]


class PageExtractor:
    """One page entity per sitemap URL or route."""

    def __init__(self, kind: ResultKind, collection: str):
        self.kind = kind
        self.collection = collection

    def extract(self, results: Mapping[str, Any]) -> list[Entity]:
        pages = results.get(self.collection)
        if not is_list(pages):
            return []
        return [self._entity(as_mapping(raw)) for raw in pages]

    def _entity(self, page: Mapping[str, Any]) -> Entity:
        label = page_label(page)
        issues = normalize_issues(page.get("issues"), default_file=label)

        score = coerce_score(page.get("auditScore"))
        if score is None:
            score = coerce_score(page.get("score"))
        if score is None:
            score = score_from_issues(issues)

        return Entity(
            label=label,
            kind=EntityKind.PAGE,
            audit_score=score,
            issues=issues,
            audits_passed=coerce_count(page.get("auditsPassed")),
            audits_total=coerce_count(page.get("auditsTotal")),
        )


class _NoEntities:
    kind = ResultKind.UNKNOWN

    def extract(self, results: Mapping[str, Any]) -> list[Entity]:
        return []


EXTRACTORS: dict[ResultKind, Extractor] = {
    ResultKind.COMPONENT: ComponentExtractor(),
    ResultKind.FILE: FileExtractor(),
    ResultKind.SITEMAP: PageExtractor(ResultKind.SITEMAP, "urls"),
    ResultKind.ROUTES: PageExtractor(ResultKind.ROUTES, "routes"),
    ResultKind.UNKNOWN: _NoEntities(),
}

# every shape must have an adapter
assert set(EXTRACTORS) == set(ResultKind)


def extract_entities(results: Any, kind: Optional[ResultKind] = None) -> list[Entity]:
    """Entities for ``results`` in producer order.

    Args:
        results: Raw analyzer output (any JSON-shaped value).
        kind: Pre-computed shape; detected when omitted.
    """
    if kind is None:
        kind = detect_kind(results)
    entities = EXTRACTORS[kind].extract(as_mapping(results))
    logger.debug(f"Extracted {len(entities)} {kind.value} entities")
    return entities
