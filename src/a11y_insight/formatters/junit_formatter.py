"""JUnit XML formatter for CI test reporting (Jenkins, GitLab, CircleCI, ...)."""

import socket
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from ..normalization.models import Entity, NormalizedResult
from .base import BaseFormatter, clean_message


def failure_type(score: int) -> str:
    if score < 50:
        return "CriticalAccessibilityError"
    if score < 70:
        return "SevereAccessibilityError"
    if score < 90:
        return "AccessibilityError"
    return "AccessibilityWarning"


class JunitFormatter(BaseFormatter):
    """One testcase per entity; entities scoring below ``fail_threshold`` fail."""

    suite_name = "a11y-insight"

    def render(self, result: NormalizedResult) -> None:
        print(self.format(result))

    def format(self, result: NormalizedResult) -> str:
        threshold = self.config.fail_threshold
        failures = sum(1 for e in result.entities if e.audit_score < threshold)

        root = ET.Element(
            "testsuites",
            name=self.suite_name,
            tests=str(len(result.entities)),
            failures=str(failures),
        )
        suite = ET.SubElement(
            root,
            "testsuite",
            name=f"{self.suite_name} ({result.tier})",
            tests=str(len(result.entities)),
            failures=str(failures),
            errors="0",
            skipped="0",
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            hostname=socket.gethostname(),
        )

        properties = ET.SubElement(suite, "properties")
        for name, value in (
            ("tier", result.tier),
            ("total", result.total),
            ("passing", result.distribution.passing),
            ("warning", result.distribution.warning),
            ("failing", result.distribution.failing),
        ):
            ET.SubElement(properties, "property", name=name, value=str(value))

        for entity in result.entities:
            self._testcase(suite, entity, threshold)

        ET.indent(root)
        return ET.tostring(root, encoding="unicode", xml_declaration=True)

    def _testcase(self, suite: ET.Element, entity: Entity, threshold: int) -> None:
        case = ET.SubElement(
            suite,
            "testcase",
            name=entity.label,
            classname=f"{self.suite_name}.{entity.kind.value}",
        )
        if entity.audit_score >= threshold:
            return

        limit = self.config.max_issues_per_test
        shown = entity.issues[:limit]
        lines = [
            f"[{issue.check}] {clean_message(issue.message)} ({issue.file}:{issue.line})"
            for issue in shown
        ]
        if len(entity.issues) > limit:
            lines.append(f"... and {len(entity.issues) - limit} more")

        failure = ET.SubElement(
            case,
            "failure",
            message=f"Audit score {entity.audit_score} is below {threshold}",
            type=failure_type(entity.audit_score),
        )
        failure.text = "\n".join(lines)
