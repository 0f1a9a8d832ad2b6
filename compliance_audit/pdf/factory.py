from compliance_audit.config.settings import Settings
from compliance_audit.pdf.base import BasePdfEngine
from compliance_audit.pdf.pdfplumber_adapter import PdfPlumberAdapter
from compliance_audit.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfEngineFactory:
    """Creates the PDF engine named in settings, or None when disabled."""

    ADAPTERS: dict[str, type[BasePdfEngine]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    DISABLED = "none"

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEngine | None:
        engine = settings.pdf_engine.lower()
        if engine == cls.DISABLED:
            return None
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. "
                f"Choose from: {[*cls.ADAPTERS, cls.DISABLED]}"
            )
        return adapter_cls()
