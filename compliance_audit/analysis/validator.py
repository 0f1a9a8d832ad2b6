"""Structural checks on the parsed AI reply.

Only the shape is enforced. Severity and opinion values and the count
fields are passed through as the model wrote them; counts are derived from
the findings when missing, not a finite number, or when reconciliation is
requested.
"""

import math
from collections.abc import Sequence
from typing import Any

from compliance_audit.analysis.exceptions import AuditResponseError
from compliance_audit.analysis.models import AuditFinding, AuditResult
from compliance_audit.logging.logger import Log

ADVERSE_HIGH_RISK_THRESHOLD = 3


def validate_and_build(data: dict[str, Any], reconcile_counts: bool = False) -> AuditResult:
    """Build an AuditResult from a parsed reply.

    Raises:
        AuditResponseError: if the findings sequence is missing or malformed.
    """
    findings = _build_findings(data.get("findings"))
    derived = count_by_severity(findings)

    def count(key: str) -> int:
        if reconcile_counts or data.get(key) is None:
            return derived[key]
        value = _as_count(data[key])
        if value is None:
            Log.warning(
                f"Ignoring non-numeric '{key}' {data[key]!r}; using {derived[key]} from findings"
            )
            return derived[key]
        return value

    opinion = data.get("opinion")
    return AuditResult(
        total_findings=count("totalFindings"),
        high_risk=count("highRisk"),
        medium_risk=count("mediumRisk"),
        compliant=count("compliant"),
        opinion=str(opinion) if opinion else derive_opinion(findings),  # type: ignore[arg-type]
        findings=findings,
    )


def count_by_severity(findings: Sequence[AuditFinding]) -> dict[str, int]:
    severities = [finding.severity for finding in findings]
    return {
        "totalFindings": len(findings),
        "highRisk": severities.count("high"),
        "mediumRisk": severities.count("medium"),
        "compliant": severities.count("compliant"),
    }


def derive_opinion(findings: Sequence[AuditFinding]) -> str:
    """Apply the opinion rule given to the model: clean, qualified or adverse."""
    counts = count_by_severity(findings)
    if counts["highRisk"] >= ADVERSE_HIGH_RISK_THRESHOLD:
        return "adverse"
    if counts["highRisk"] or counts["mediumRisk"]:
        return "qualified"
    return "clean"


def _build_findings(raw: Any) -> list[AuditFinding]:
    if not isinstance(raw, list):
        raise AuditResponseError("Invalid response format: missing findings array")
    return [_build_finding(item, index) for index, item in enumerate(raw)]


def _build_finding(raw: Any, index: int) -> AuditFinding:
    if not isinstance(raw, dict):
        raise AuditResponseError(f"Finding at index {index} must be an object")
    return AuditFinding(
        severity=_text(raw.get("severity")).lower(),  # type: ignore[arg-type]
        title=_text(raw.get("title")),
        regulation=_text(raw.get("regulation")),
        description=_text(raw.get("description")),
        evidence=_optional_text(raw.get("evidence")),
        recommendation=_optional_text(raw.get("recommendation")),
    )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text and text.lower() != "null" else None


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None
