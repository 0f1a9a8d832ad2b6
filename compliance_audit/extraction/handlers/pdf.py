import asyncio
import re
from typing import ClassVar

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.logging.logger import Log
from compliance_audit.pdf.base import BasePdfEngine
from compliance_audit.pdf.exceptions import PdfExtractionError
from compliance_audit.processor.progress import ProgressReporter

# Runs of printable text between PDF binary noise.
_PRINTABLE_RUN_RE = re.compile(r"[^\x00-\x1F\x7F-\xFF]{10,}")


class PdfTextExtractor(BaseExtractor):
    """PDF text layer through an optional engine, with a raw byte scan fallback."""

    name: ClassVar[str] = "pdf"
    extensions: ClassVar[frozenset[str]] = frozenset({".pdf"})
    mime_types: ClassVar[frozenset[str]] = frozenset({"application/pdf"})

    SCAN_BYTES: ClassVar[int] = 10_000
    MAX_SCAN_RUNS: ClassVar[int] = 20

    def __init__(self, engine: BasePdfEngine | None = None, max_pages: int = 30) -> None:
        self._engine = engine
        self._max_pages = max_pages

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        text = await self._extract_text_layer(document)
        if text:
            return text

        scanned = self.scan_binary(document.content)
        if scanned:
            return scanned

        return (
            f"[PDF file: {document.name} - No extractable text found. "
            f"File size: {document.size_kb}KB. "
            "This may be a scanned/image-based PDF.]"
        )

    async def _extract_text_layer(self, document: UploadedDocument) -> str:
        if self._engine is None or not self._engine.is_available():
            return ""
        try:
            pages = await asyncio.to_thread(
                self._engine.extract_pages, document.content, self._max_pages
            )
        except PdfExtractionError as exc:
            Log.warning(f"PDF engine failed on {document.name}: {exc}")
            return ""
        return "\n\n".join(
            f"--- Page {number} ---\n{text}"
            for number, text in enumerate(pages, start=1)
            if text.strip()
        )

    @classmethod
    def scan_binary(cls, content: bytes) -> str:
        """Best-effort text proxy from the first bytes of a PDF."""
        head = content[: cls.SCAN_BYTES].decode("utf-8", errors="replace")
        runs = _PRINTABLE_RUN_RE.findall(head)
        if not runs:
            return ""
        return f"[Extracted from PDF binary: {' '.join(runs[: cls.MAX_SCAN_RUNS])}]"
