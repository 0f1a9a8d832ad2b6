from abc import ABC, abstractmethod


class BasePdfEngine(ABC):
    """Contract for PDF text-layer engines."""

    def is_available(self) -> bool:
        """Report whether the engine can run in this environment."""
        return True

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes, max_pages: int) -> list[str]:
        """Extract the text layer of the first pages of a PDF.

        Args:
            pdf_bytes: Raw PDF file content.
            max_pages: Upper bound on the number of pages read.

        Returns:
            One string per page read, in page order. Pages without a text
            layer yield an empty string.

        Raises:
            PdfExtractionError: if the document cannot be opened or parsed.
        """
