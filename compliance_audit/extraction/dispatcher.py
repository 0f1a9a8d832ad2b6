"""Routes an uploaded document to exactly one extraction handler.

Extensions are checked before MIME types. The MIME type is consulted only
when no handler claims the extension.
"""

from collections.abc import Sequence

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.models import UploadedDocument


def select_extractor(
    document: UploadedDocument,
    extractors: Sequence[BaseExtractor],
) -> BaseExtractor | None:
    """Return the first handler claiming the extension, else the MIME type."""
    extension = document.extension
    if extension:
        for extractor in extractors:
            if extension in extractor.extensions:
                return extractor
    mime_type = document.mime_type.split(";", 1)[0].strip().lower()
    if mime_type:
        for extractor in extractors:
            if mime_type in extractor.mime_types:
                return extractor
    return None


def supported_extensions(extractors: Sequence[BaseExtractor]) -> frozenset[str]:
    return frozenset().union(*(extractor.extensions for extractor in extractors))
