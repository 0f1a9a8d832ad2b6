import pymupdf

from compliance_audit.pdf.base import BasePdfEngine
from compliance_audit.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfEngine):
    """Reads the PDF text layer with PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes, max_pages: int) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                page_count = min(doc.page_count, max_pages)
                return [doc.load_page(i).get_text().strip() for i in range(page_count)]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
