from compliance_audit.extraction.handlers.archive import ArchiveExtractor
from compliance_audit.extraction.handlers.image import ImageExtractor
from compliance_audit.extraction.handlers.office import PresentationExtractor, WordDocumentExtractor
from compliance_audit.extraction.handlers.pdf import PdfTextExtractor
from compliance_audit.extraction.handlers.plain_text import PlainTextExtractor
from compliance_audit.extraction.handlers.rich_text import RichTextExtractor
from compliance_audit.extraction.handlers.spreadsheet import SpreadsheetExtractor

__all__ = [
    "ArchiveExtractor",
    "ImageExtractor",
    "PdfTextExtractor",
    "PlainTextExtractor",
    "PresentationExtractor",
    "RichTextExtractor",
    "SpreadsheetExtractor",
    "WordDocumentExtractor",
]
