import asyncio
import zipfile
from typing import ClassVar

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.handlers.office import open_archive
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.logging.logger import Log
from compliance_audit.processor.progress import ProgressReporter


class ArchiveExtractor(BaseExtractor):
    """Text files packed in a zip archive, sampled up to a fixed number of entries."""

    name: ClassVar[str] = "archive"
    extensions: ClassVar[frozenset[str]] = frozenset({".zip"})
    mime_types: ClassVar[frozenset[str]] = frozenset({"application/zip"})

    TEXT_ENTRY_SUFFIXES: ClassVar[tuple[str, ...]] = (".txt", ".md", ".csv")
    MAX_ENTRIES: ClassVar[int] = 5
    MAX_ENTRY_CHARS: ClassVar[int] = 2000

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        entries, total = await asyncio.to_thread(self._read_entries, document.content)
        if not entries:
            return (
                f"[ZIP archive: {document.name} - Contains {total} files. "
                "Extract and upload relevant documents for analysis.]"
            )
        body = "\n\n".join(
            f"--- File in ZIP: {entry_name} ---\n{text}" for entry_name, text in entries
        )
        return f"[ZIP archive: {document.name} contains:\n{body}]"

    def _read_entries(self, content: bytes) -> tuple[list[tuple[str, str]], int]:
        with open_archive(content) as archive:
            infos = archive.infolist()
            entries: list[tuple[str, str]] = []
            for info in infos:
                if len(entries) >= self.MAX_ENTRIES:
                    break
                if info.is_dir() or not info.filename.lower().endswith(self.TEXT_ENTRY_SUFFIXES):
                    continue
                text = self._read_text(archive, info)
                if text is not None:
                    entries.append((info.filename, text[: self.MAX_ENTRY_CHARS]))
            return entries, len(infos)

    @staticmethod
    def _read_text(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> str | None:
        try:
            return archive.read(info).decode("utf-8")
        except (UnicodeDecodeError, RuntimeError, zipfile.BadZipFile) as exc:
            Log.debug(f"Skipping zip entry {info.filename}: {exc}")
            return None
