class ExtractionError(Exception):
    """Raised by a handler when a document cannot be read."""


class MalformedContainerError(ExtractionError):
    """Raised when a zip-based document is not a readable archive."""
