import io

import openpyxl

from compliance_audit.spreadsheet.base import BaseSpreadsheetReader
from compliance_audit.spreadsheet.exceptions import SpreadsheetReadError


class OpenpyxlReader(BaseSpreadsheetReader):
    """Reads OOXML workbooks with openpyxl in read-only, cached-value mode."""

    def read_sheets(self, workbook_bytes: bytes) -> list[tuple[str, str]]:
        try:
            wb = openpyxl.load_workbook(
                io.BytesIO(workbook_bytes), read_only=True, data_only=True
            )
        except Exception as exc:
            raise SpreadsheetReadError(f"openpyxl could not open workbook: {exc}") from exc
        try:
            return [(ws.title, self._render(ws)) for ws in wb.worksheets]
        finally:
            wb.close()

    @staticmethod
    def _render(ws: object) -> str:
        lines: list[str] = []
        for row in ws.iter_rows(values_only=True):  # type: ignore[attr-defined]
            cells = ["" if value is None else str(value) for value in row]
            if any(cells):
                lines.append("\t".join(cells).rstrip("\t"))
        return "\n".join(lines)
