from abc import ABC, abstractmethod
from typing import ClassVar

from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.progress import ProgressReporter


class BaseExtractor(ABC):
    """Contract for all per-format extraction handlers."""

    name: ClassVar[str]
    extensions: ClassVar[frozenset[str]]
    mime_types: ClassVar[frozenset[str]] = frozenset()

    @abstractmethod
    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        """Turn one document into analyzable text.

        Args:
            document: The uploaded file; never modified.
            progress: Optional channel for sub-stage messages.

        Returns:
            Extracted text, or a bracketed descriptor when the format was
            recognized but nothing useful could be read.

        Raises:
            Exception: any failure; the extraction boundary converts it into
                a fallback outcome.
        """
