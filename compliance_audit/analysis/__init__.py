from compliance_audit.analysis.auditor import Auditor
from compliance_audit.analysis.factory import AuditorFactory
from compliance_audit.analysis.models import AuditFinding, AuditResult

__all__ = ["AuditFinding", "AuditResult", "Auditor", "AuditorFactory"]
