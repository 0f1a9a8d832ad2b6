from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["high", "medium", "low", "compliant"]
Opinion = Literal["clean", "qualified", "adverse"]

SEVERITIES: tuple[str, ...] = ("high", "medium", "low", "compliant")
OPINIONS: tuple[str, ...] = ("clean", "qualified", "adverse")


@dataclass(frozen=True)
class AuditFinding:
    """One observation in the audit; compliant findings carry no recommendation."""

    severity: Severity
    title: str
    regulation: str
    description: str
    evidence: str | None = None
    recommendation: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "severity": self.severity,
            "title": self.title,
            "regulation": self.regulation,
            "description": self.description,
            "evidence": self.evidence,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class AuditResult:
    """Structured verdict handed to the report renderer.

    Counts are taken from the AI reply as-is; they are not guaranteed to
    match the findings list unless reconciliation was requested.
    """

    total_findings: int
    high_risk: int
    medium_risk: int
    compliant: int
    opinion: Opinion
    findings: list[AuditFinding] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Render the camelCase shape the report renderer consumes."""
        return {
            "totalFindings": self.total_findings,
            "highRisk": self.high_risk,
            "mediumRisk": self.medium_risk,
            "compliant": self.compliant,
            "opinion": self.opinion,
            "findings": [finding.to_dict() for finding in self.findings],
        }
