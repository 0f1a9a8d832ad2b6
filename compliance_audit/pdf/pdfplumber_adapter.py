import io

import pdfplumber

from compliance_audit.pdf.base import BasePdfEngine
from compliance_audit.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfEngine):
    """Reads the PDF text layer with pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes, max_pages: int) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [
                    (page.extract_text() or "").strip()
                    for page in pdf.pages[:max_pages]
                ]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
