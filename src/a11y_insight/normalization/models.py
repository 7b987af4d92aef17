"""Data models for the result normalization engine.

Every record here is frozen: entities and issues are derived once per
``normalize_results`` call and never mutated afterwards. ``to_dict`` emits
the camelCase field names renderers read (``auditScore``, ``issuePoints``,
``totalPoints``); optional fields that were never set are omitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class EntityKind(str, Enum):
    """What a normalized entity stands for."""

    COMPONENT = "component"
    FILE = "file"
    PAGE = "page"


class ResultKind(Enum):
    """Analyzer output shapes, discriminated once at the engine boundary."""

    COMPONENT = "component"  # {components: [...], totalComponentsScanned, componentCount}
    FILE = "file"  # {summary: {issues: [...], auditScore?}}
    SITEMAP = "sitemap"  # {urls: [...], urlCount, distribution?}
    ROUTES = "routes"  # {routes: [...], routeCount, distribution?}
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Issue:
    check: str  # "imageAlt", "matFormFieldLabel", ...
    message: str
    file: str
    line: int = 1  # always >= 1
    element: Optional[str] = None
    # Attached by the assembler on the flattened issue list only
    weight: Optional[int] = None
    entity: Optional[str] = None
    audit_score: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "check": self.check,
            "message": self.message,
            "file": self.file,
            "line": self.line,
        }
        if self.element is not None:
            data["element"] = self.element
        if self.weight is not None:
            data["weight"] = self.weight
        if self.entity is not None:
            data["entity"] = self.entity
        if self.audit_score is not None:
            data["auditScore"] = self.audit_score
        return data


@dataclass(frozen=True)
class IssuePoints:
    base_points: int = 0  # sum of weights over every issue instance
    usage_count: int = 1  # max(1, |affected|)
    total_points: int = 0  # base_points * usage_count

    def to_dict(self) -> dict[str, int]:
        return {
            "basePoints": self.base_points,
            "usageCount": self.usage_count,
            "totalPoints": self.total_points,
        }


ZERO_POINTS = IssuePoints()


@dataclass(frozen=True)
class Distribution:
    passing: int = 0  # score >= 90
    warning: int = 0  # 50 <= score < 90
    failing: int = 0  # score < 50

    @property
    def total(self) -> int:
        return self.passing + self.warning + self.failing

    def to_dict(self) -> dict[str, int]:
        return {"passing": self.passing, "warning": self.warning, "failing": self.failing}


@dataclass(frozen=True)
class Entity:
    label: str
    kind: EntityKind
    audit_score: int  # 0-100
    issues: tuple[Issue, ...] = ()
    audits_passed: Optional[int] = None
    audits_total: Optional[int] = None
    affected: Optional[tuple[str, ...]] = None  # pages/routes using a component
    issue_points: Optional[IssuePoints] = None
    priority: Optional[float] = None  # set by the efficiency ranking only

    @property
    def usage_count(self) -> int:
        return max(1, len(self.affected or ()))

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "label": self.label,
            "kind": self.kind.value,
            "auditScore": self.audit_score,
            "issues": [i.to_dict() for i in self.issues],
        }
        if self.audits_passed is not None:
            data["auditsPassed"] = self.audits_passed
        if self.audits_total is not None:
            data["auditsTotal"] = self.audits_total
        if self.affected is not None:
            data["affected"] = list(self.affected)
        if self.issue_points is not None:
            data["issuePoints"] = self.issue_points.to_dict()
        if self.priority is not None:
            data["priority"] = self.priority
        return data


@dataclass(frozen=True)
class NormalizedResult:
    tier: str
    total: int
    distribution: Distribution = field(default_factory=Distribution)
    entities: tuple[Entity, ...] = ()  # issue_points.total_points descending
    issues: tuple[Issue, ...] = ()  # weight descending, tagged with entity + audit_score

    def to_dict(self) -> dict[str, Any]:
        return {
            "tier": self.tier,
            "total": self.total,
            "distribution": self.distribution.to_dict(),
            "entities": [e.to_dict() for e in self.entities],
            "issues": [i.to_dict() for i in self.issues],
        }
