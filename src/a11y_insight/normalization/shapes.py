"""Shape discrimination for raw analyzer output.

Probe order is fixed; the first match wins:

    components[]      -> COMPONENT
    summary.issues[]  -> FILE
    urls[]            -> SITEMAP
    routes[]          -> ROUTES
    anything else     -> UNKNOWN
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..logging_config import get_logger
from .issues import UNKNOWN, text_or_none
from .models import ResultKind
from .scoring import coerce_count

logger = get_logger(__name__)

FILE_LABEL = "files"


def is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def detect_kind(results: Any) -> ResultKind:
    if not isinstance(results, Mapping):
        return ResultKind.UNKNOWN

    if is_list(results.get("components")):
        kind = ResultKind.COMPONENT
    elif is_list(as_mapping(results.get("summary")).get("issues")):
        kind = ResultKind.FILE
    elif is_list(results.get("urls")):
        kind = ResultKind.SITEMAP
    elif is_list(results.get("routes")):
        kind = ResultKind.ROUTES
    else:
        kind = ResultKind.UNKNOWN

    logger.debug(f"Detected {kind.value} result shape")
    return kind


def page_label(page: Mapping[str, Any]) -> str:
    """Route path, else URL, else ``"unknown"``."""
    return text_or_none(page.get("path")) or text_or_none(page.get("url")) or UNKNOWN


def native_total(kind: ResultKind, results: Any, entities: Sequence[Any]) -> int:
    """Entity total as the producer counted it.

    Component scans report how many components were scanned, which can
    exceed the number listed. Page scans report url/route counts. The file
    shape is always one aggregated entity.
    """
    raw = as_mapping(results)
    if kind is ResultKind.COMPONENT:
        count = coerce_count(raw.get("totalComponentsScanned"))
    elif kind is ResultKind.SITEMAP:
        count = coerce_count(raw.get("urlCount"))
    elif kind is ResultKind.ROUTES:
        count = coerce_count(raw.get("routeCount"))
    elif kind is ResultKind.FILE:
        return 1
    else:
        return 0
    return len(entities) if count is None else count
