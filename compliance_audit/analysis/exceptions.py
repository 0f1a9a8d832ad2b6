class AnalysisError(Exception):
    """Raised when an analysis run fails; no partial result exists."""


class AuditServiceError(AnalysisError):
    """Raised when the AI provider could not be called or gave no answer."""


class AuditResponseError(AnalysisError):
    """Raised when the AI provider answered but the reply is unusable."""


class PromptTemplateError(AnalysisError):
    """Raised when the audit prompt template cannot be loaded or rendered."""
