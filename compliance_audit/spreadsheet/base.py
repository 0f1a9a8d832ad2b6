from abc import ABC, abstractmethod


class BaseSpreadsheetReader(ABC):
    """Contract for workbook readers."""

    def is_available(self) -> bool:
        return True

    @abstractmethod
    def read_sheets(self, workbook_bytes: bytes) -> list[tuple[str, str]]:
        """Render every sheet of a workbook as flat text.

        Returns:
            ``(sheet_name, text)`` pairs in workbook order. Rows are joined
            with newlines and cells with tabs; an empty sheet yields ''.

        Raises:
            SpreadsheetReadError: if the workbook cannot be parsed.
        """
