class SpreadsheetReadError(Exception):
    """Raised when a workbook cannot be parsed."""
