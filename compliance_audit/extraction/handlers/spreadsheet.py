import asyncio
from typing import ClassVar

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.progress import ProgressReporter
from compliance_audit.spreadsheet.base import BaseSpreadsheetReader


class SpreadsheetExtractor(BaseExtractor):
    """Workbooks rendered sheet by sheet as tab-separated text."""

    name: ClassVar[str] = "spreadsheet"
    extensions: ClassVar[frozenset[str]] = frozenset({".xlsx", ".xls", ".xlsm", ".xlsb"})
    mime_types: ClassVar[frozenset[str]] = frozenset({
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-excel",
    })

    def __init__(self, reader: BaseSpreadsheetReader | None = None) -> None:
        self._reader = reader

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        if self._reader is None or not self._reader.is_available():
            return (
                f"[Excel file: {document.name} - Spreadsheet reader not available. "
                "Export the workbook to CSV or PDF for analysis.]"
            )
        sheets = await asyncio.to_thread(self._reader.read_sheets, document.content)
        sections = [
            f"--- Sheet: {sheet_name} ---\n{text}"
            for sheet_name, text in sheets
            if text.strip()
        ]
        if not sections:
            return f"[Excel file: {document.name} - No data found]"
        return "\n\n".join(sections)
