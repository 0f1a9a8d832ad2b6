class ProcessorError(Exception):
    """Base exception for orchestration errors outside the AI step."""


class InvalidAnalysisRequestError(ProcessorError, ValueError):
    """Raised when a request has no subject documents or no categories."""


class FileReadError(ProcessorError):
    """Raised when a local file cannot be loaded as an upload."""
