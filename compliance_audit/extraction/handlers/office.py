"""Word-processing and presentation documents stored as zipped XML parts."""

import asyncio
import io
import re
import zipfile
from typing import ClassVar

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.exceptions import MalformedContainerError
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.progress import ProgressReporter

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_SLIDE_PART_RE = re.compile(r"^ppt/slides/slide(\d+)\.xml$")


def strip_markup(xml: str) -> str:
    """Drop every tag and collapse whitespace runs to single spaces."""
    return _WHITESPACE_RE.sub(" ", _TAG_RE.sub(" ", xml)).strip()


def open_archive(content: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(content))
    except zipfile.BadZipFile as exc:
        raise MalformedContainerError(f"not a zip container: {exc}") from exc


class WordDocumentExtractor(BaseExtractor):
    name: ClassVar[str] = "word_document"
    extensions: ClassVar[frozenset[str]] = frozenset({".docx", ".doc"})
    mime_types: ClassVar[frozenset[str]] = frozenset({
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/msword",
    })

    BODY_PART: ClassVar[str] = "word/document.xml"

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        body = await asyncio.to_thread(self._read_body, document.content)
        if body is None:
            return f"[DOCX file: {document.name} - Invalid DOCX format]"
        return strip_markup(body) or f"[DOCX file: {document.name} - No text content found]"

    def _read_body(self, content: bytes) -> str | None:
        with open_archive(content) as archive:
            if self.BODY_PART not in archive.namelist():
                return None
            return archive.read(self.BODY_PART).decode("utf-8", errors="replace")


class PresentationExtractor(BaseExtractor):
    name: ClassVar[str] = "presentation"
    extensions: ClassVar[frozenset[str]] = frozenset({".pptx", ".ppt"})
    mime_types: ClassVar[frozenset[str]] = frozenset({
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "application/vnd.ms-powerpoint",
    })

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        slides = await asyncio.to_thread(self._read_slides, document.content)
        sections = [
            f"--- Slide {number} ---\n{text}" for number, text in slides if text
        ]
        if not sections:
            return f"[PPTX file: {document.name} - No text content found]"
        return "\n\n".join(sections)

    @staticmethod
    def _read_slides(content: bytes) -> list[tuple[int, str]]:
        with open_archive(content) as archive:
            numbered = []
            for part in archive.namelist():
                match = _SLIDE_PART_RE.match(part)
                if match:
                    numbered.append((int(match.group(1)), part))
            numbered.sort()
            return [
                (number, strip_markup(archive.read(part).decode("utf-8", errors="replace")))
                for number, part in numbered
            ]
