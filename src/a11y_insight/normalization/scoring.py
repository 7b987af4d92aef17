"""Audit score derivation for entities whose producer supplied no score.

Two strategies, chosen by what the adapter finds on the raw record:

1. Binary fallback: no issues -> 100, any issue -> 0.
2. Check aggregates: ``{check: {elementsFound, issues, errors, warnings}}``.
   A check is applicable when any counter is positive; it passes when it
   recorded no issues, errors, or warnings. Score is the rounded share of
   applicable checks that passed. No applicable checks scores 100.
   An issues/errors/warnings counter that cannot be read as a number
   makes its check applicable and failing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class AuditCounts:
    audit_score: int
    audits_passed: int
    audits_total: int


def is_number(value: Any) -> bool:
    """True for real ints/floats; bool and NaN are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def round_half_up(value: float) -> int:
    # round() is banker's rounding; 12.5 must become 13
    return int(math.floor(value + 0.5))


def coerce_score(value: Any) -> Optional[int]:
    """Producer-supplied score clamped to [0, 100], or None if unusable."""
    if not is_number(value):
        return None
    if isinstance(value, int):
        # arbitrarily large JSON integers never go through float
        return max(MIN_SCORE, min(MAX_SCORE, value))
    if math.isinf(value):
        return MAX_SCORE if value > 0 else MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(value)))


def coerce_count(value: Any) -> Optional[int]:
    """Non-negative integer counter, or None."""
    if not is_number(value):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if math.isinf(value) or value < 0:
        return None
    return int(value)


def score_from_issues(issues: Sequence[Any]) -> int:
    return MAX_SCORE if len(issues) == 0 else MIN_SCORE


def _counter(value: Any) -> Optional[float]:
    """Aggregate counter as a number; None when it is present but unreadable.

    Missing, empty and false values count as 0 and ``True`` as 1. Numeric
    strings are parsed.
    """
    if value is None or value is False:
        return 0
    if value is True:
        return 1
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            parsed = float(text)
        except ValueError:
            return None
        return None if math.isnan(parsed) else parsed
    return None


def score_from_check_aggregates(aggregates: Any) -> Optional[AuditCounts]:
    """Derive audit counts from per-check aggregates.

    Returns:
        AuditCounts, or None when ``aggregates`` is not a mapping (the caller
        then falls back to the binary rule).
    """
    if not isinstance(aggregates, Mapping):
        return None

    total = 0
    passed = 0
    for data in aggregates.values():
        if not isinstance(data, Mapping):
            continue

        elements = _counter(data.get("elementsFound"))
        findings = [_counter(data.get(key)) for key in ("issues", "errors", "warnings")]

        # an unreadable finding counter makes the check applicable and failing
        if any(f is None for f in findings):
            total += 1
            continue

        if not ((elements is not None and elements > 0) or any(f > 0 for f in findings)):
            continue

        total += 1
        if all(f == 0 for f in findings):
            passed += 1

    score = MAX_SCORE if total == 0 else round_half_up(100 * passed / total)
    return AuditCounts(audit_score=score, audits_passed=passed, audits_total=total)
