import asyncio
from collections.abc import Sequence

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.dispatcher import select_extractor
from compliance_audit.extraction.models import (
    ExtractedText,
    ExtractionFallback,
    ExtractionOutcome,
    FallbackReason,
    UploadedDocument,
)
from compliance_audit.logging.logger import Log
from compliance_audit.processor.progress import ProgressReporter

UNSUPPORTED_FORMAT_MESSAGE = (
    "Unsupported file format. Please convert to PDF or text for analysis."
)


class DocumentExtractor:
    """Per-file extraction boundary.

    Every document yields exactly one outcome. Handler failures and
    unsupported formats become fallbacks; nothing raised by a handler
    escapes ``extract``.
    """

    def __init__(
        self,
        extractors: Sequence[BaseExtractor],
        min_informative_chars: int = 100,
    ) -> None:
        self._extractors = tuple(extractors)
        self._min_informative_chars = min_informative_chars

    @property
    def extractors(self) -> tuple[BaseExtractor, ...]:
        return self._extractors

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> ExtractionOutcome:
        extractor = select_extractor(document, self._extractors)
        if extractor is None:
            Log.warning(
                f"No handler for {document.name} "
                f"(extension={document.extension!r}, mime={document.mime_type!r})"
            )
            return self._fallback(
                document, FallbackReason.UNSUPPORTED_FORMAT, UNSUPPORTED_FORMAT_MESSAGE
            )

        if progress is not None:
            progress.sub_stage(f"Extracting text from {document.name}...")
        try:
            text = await extractor.extract(document, progress)
        except Exception as exc:
            Log.warning(f"Extraction failed for {document.name} ({extractor.name}): {exc}")
            return self._fallback(
                document,
                FallbackReason.EXTRACTION_FAILED,
                f"Extraction failed: {str(exc) or type(exc).__name__}",
            )

        if len(text) < self._min_informative_chars:
            return self._fallback(
                document,
                FallbackReason.LIMITED_TEXT,
                f"Limited text extracted. Raw content: {text or 'No text found'}",
            )
        Log.debug(f"Extracted {len(text)} chars from {document.name} ({extractor.name})")
        return ExtractedText(document_name=document.name, content=text)

    async def extract_all(
        self,
        documents: Sequence[UploadedDocument],
        progress: ProgressReporter | None = None,
    ) -> list[ExtractionOutcome]:
        """Extract a file set concurrently; outcomes keep the input order."""
        return list(
            await asyncio.gather(*(self.extract(document, progress) for document in documents))
        )

    @staticmethod
    def _fallback(
        document: UploadedDocument,
        reason: FallbackReason,
        detail: str,
    ) -> ExtractionFallback:
        return ExtractionFallback(
            document_name=document.name,
            mime_type=document.mime_type,
            size_bytes=document.size_bytes,
            reason=reason,
            detail=detail,
        )
