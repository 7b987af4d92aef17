"""Coerce raw issue records into canonical ``Issue`` values."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .models import Issue

UNKNOWN = "unknown"


def text_or_none(value: Any) -> Optional[str]:
    """Non-empty string or None."""
    if isinstance(value, str) and value:
        return value
    return None


def _line(value: Any) -> int:
    if isinstance(value, bool):
        return 1
    if isinstance(value, int) and value >= 1:
        return value
    if isinstance(value, float) and value.is_integer() and value >= 1:
        return int(value)
    return 1


def normalize_issue(raw: Any, default_file: Optional[str] = None) -> Issue:
    """Build an ``Issue`` from a bare string, partial mapping, or full record.

    Args:
        raw: Issue as emitted by a check. Checks sometimes emit plain message
            strings instead of objects.
        default_file: File to report when the record has none (page adapters
            pass the owning route).

    Returns:
        Issue with ``check``/``file`` defaulting to ``"unknown"`` and ``line``
        to 1. Never raises.
    """
    fallback_file = default_file or UNKNOWN

    if not isinstance(raw, Mapping):
        return Issue(
            check=UNKNOWN,
            message="" if raw is None else str(raw),
            file=fallback_file,
            line=1,
        )

    message = raw.get("message")
    if not isinstance(message, str):
        message = "" if message is None else str(message)

    return Issue(
        check=text_or_none(raw.get("check")) or UNKNOWN,
        message=message,
        file=text_or_none(raw.get("file")) or fallback_file,
        line=_line(raw.get("line")),
        element=text_or_none(raw.get("element")),
    )


def normalize_issues(raw: Any, default_file: Optional[str] = None) -> tuple[Issue, ...]:
    """Normalize an issue array; anything that is not a list yields ``()``."""
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(normalize_issue(item, default_file) for item in raw)
