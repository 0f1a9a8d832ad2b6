import re
from typing import ClassVar

from striprtf.striprtf import rtf_to_text

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.progress import ProgressReporter

_WHITESPACE_RE = re.compile(r"\s+")


def rtf_plain_text(rtf: str) -> str:
    """Strip RTF markup with striprtf and collapse whitespace runs."""
    return _WHITESPACE_RE.sub(" ", rtf_to_text(rtf, errors="replace")).strip()


class RichTextExtractor(BaseExtractor):
    name: ClassVar[str] = "rich_text"
    extensions: ClassVar[frozenset[str]] = frozenset({".rtf"})
    mime_types: ClassVar[frozenset[str]] = frozenset({"application/rtf", "text/rtf"})

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        text = rtf_plain_text(document.content.decode("utf-8", errors="replace"))
        return text or f"[RTF file: {document.name} - No readable text found]"
