import asyncio
from typing import ClassVar

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.logging.logger import Log
from compliance_audit.ocr.base import BaseOcrEngine
from compliance_audit.ocr.exceptions import OcrError
from compliance_audit.processor.progress import ProgressReporter


class ImageExtractor(BaseExtractor):
    """Raster images read through an optional OCR engine."""

    name: ClassVar[str] = "image"
    extensions: ClassVar[frozenset[str]] = frozenset({
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".webp",
    })
    mime_types: ClassVar[frozenset[str]] = frozenset({
        "image/jpeg", "image/png", "image/gif", "image/bmp", "image/tiff", "image/webp",
    })

    def __init__(self, ocr_engine: BaseOcrEngine | None = None) -> None:
        self._ocr_engine = ocr_engine

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        text = await self._recognize(document, progress)
        if text:
            return f"[OCR extracted text from {document.name}:\n{text}]"
        return (
            f"[Image file: {document.name} - Size: {document.size_kb}KB. "
            "For text extraction from images, please enable OCR or convert to PDF/text.]"
        )

    async def _recognize(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None,
    ) -> str:
        if self._ocr_engine is None or not self._ocr_engine.is_available():
            return ""
        if progress is not None:
            progress.sub_stage(f"Performing OCR on {document.name}...")
        try:
            text = await asyncio.to_thread(self._ocr_engine.recognize, document.content)
        except OcrError as exc:
            Log.warning(f"OCR failed on {document.name}: {exc}")
            return ""
        if progress is not None:
            progress.sub_stage(f"OCR complete for {document.name}")
        return text.strip()
