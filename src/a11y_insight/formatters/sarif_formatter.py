"""SARIF 2.1.0 formatter for code scanning dashboards."""

import json
from typing import Any, Dict, List

from .. import __version__
from ..normalization.models import Issue, NormalizedResult
from .base import BaseFormatter, clean_message, message_severity

SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/"
    "Schemata/sarif-schema-2.1.0.json"
)


def sarif_level(issue: Issue) -> str:
    """Level from the message prefix, else from the check weight."""
    severity = message_severity(issue.message)
    if severity == "error":
        return "error"
    if severity == "warning":
        return "warning"
    if severity == "info":
        return "note"
    weight = issue.weight or 0
    if weight >= 7:
        return "error"
    return "warning" if weight >= 4 else "note"


class SarifFormatter(BaseFormatter):
    """One rule per check, one result per issue."""

    def render(self, result: NormalizedResult) -> None:
        print(self.format(result))

    def format(self, result: NormalizedResult) -> str:
        rules: Dict[str, Dict[str, Any]] = {}
        results: List[Dict[str, Any]] = []

        for issue in result.issues:
            if issue.check not in rules:
                rules[issue.check] = {
                    "id": issue.check,
                    "name": issue.check,
                    "shortDescription": {"text": f"Accessibility check: {issue.check}"},
                    "defaultConfiguration": {"level": sarif_level(issue)},
                    "properties": {
                        "weight": issue.weight,
                        "tags": ["accessibility", "a11y", "wcag"],
                    },
                }
            results.append(self._result(issue, list(rules).index(issue.check)))

        document = {
            "$schema": SARIF_SCHEMA,
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "a11y-insight",
                            "version": __version__,
                            "rules": list(rules.values()),
                        }
                    },
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "exitCode": 1 if result.distribution.failing > 0 else 0,
                            "properties": {
                                "tier": result.tier,
                                "total": result.total,
                                "distribution": result.distribution.to_dict(),
                            },
                        }
                    ],
                    "results": results,
                }
            ],
        }
        return json.dumps(document, indent=2, ensure_ascii=False)

    def _result(self, issue: Issue, rule_index: int) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "ruleId": issue.check,
            "ruleIndex": rule_index,
            "level": sarif_level(issue),
            "message": {"text": clean_message(issue.message)},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": issue.file, "uriBaseId": "%SRCROOT%"},
                        "region": {"startLine": issue.line, "startColumn": 1},
                    }
                }
            ],
            "properties": {
                "entity": issue.entity,
                "auditScore": issue.audit_score,
                "weight": issue.weight,
            },
        }
        if issue.element:
            entry["locations"][0]["physicalLocation"]["region"]["snippet"] = {
                "text": issue.element
            }
        return entry
