from compliance_audit.extraction.dispatcher import select_extractor
from compliance_audit.extraction.extractor import DocumentExtractor
from compliance_audit.extraction.models import (
    ExtractedText,
    ExtractionFallback,
    ExtractionOutcome,
    FallbackReason,
    UploadedDocument,
)

__all__ = [
    "DocumentExtractor",
    "ExtractedText",
    "ExtractionFallback",
    "ExtractionOutcome",
    "FallbackReason",
    "UploadedDocument",
    "select_extractor",
]
