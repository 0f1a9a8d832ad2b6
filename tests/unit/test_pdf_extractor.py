from unittest.mock import MagicMock

from compliance_audit.extraction.handlers import PdfTextExtractor
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.pdf.base import BasePdfEngine
from compliance_audit.pdf.exceptions import PdfExtractionError
from compliance_audit.pdf.pdfplumber_adapter import PdfPlumberAdapter


class _StaticEngine(BasePdfEngine):
    def __init__(self, pages: list[str]) -> None:
        self.pages = pages
        self.calls: list[int] = []

    def extract_pages(self, pdf_bytes: bytes, max_pages: int) -> list[str]:
        self.calls.append(max_pages)
        return self.pages[:max_pages]


def _pdf_doc(content: bytes, name: str = "report.pdf") -> UploadedDocument:
    return UploadedDocument(name=name, content=content, mime_type="application/pdf")


class TestTextLayer:
    async def test_real_pdf_has_page_markers(self, multi_page_pdf_bytes: bytes) -> None:
        extractor = PdfTextExtractor(engine=PdfPlumberAdapter())
        text = await extractor.extract(_pdf_doc(multi_page_pdf_bytes))
        assert text.startswith("--- Page 1 ---\n")
        assert "Page one content" in text
        assert "--- Page 2 ---\nPage two content" in text

    async def test_blank_pages_are_skipped_but_keep_numbering(self) -> None:
        engine = _StaticEngine(["First", "", "Third"])
        text = await PdfTextExtractor(engine=engine).extract(_pdf_doc(b"%PDF"))
        assert text == "--- Page 1 ---\nFirst\n\n--- Page 3 ---\nThird"

    async def test_page_limit_is_passed_to_engine(self) -> None:
        engine = _StaticEngine([f"page {i}" for i in range(1, 41)])
        text = await PdfTextExtractor(engine=engine, max_pages=30).extract(_pdf_doc(b"%PDF"))
        assert engine.calls == [30]
        assert "--- Page 30 ---" in text
        assert "--- Page 31 ---" not in text


class TestFallbacks:
    async def test_engine_error_falls_back_to_binary_scan(self) -> None:
        engine = MagicMock(spec=BasePdfEngine)
        engine.is_available.return_value = True
        engine.extract_pages.side_effect = PdfExtractionError("bad xref")
        content = b"%PDF-1.4\x00\x01Quarterly financial statements\x00"

        text = await PdfTextExtractor(engine=engine).extract(_pdf_doc(content))

        assert text.startswith("[Extracted from PDF binary: ")
        assert "Quarterly financial statements" in text

    async def test_without_engine_uses_binary_scan(self) -> None:
        content = b"\x00\x00Annual Report 2024\x00"
        text = await PdfTextExtractor(engine=None).extract(_pdf_doc(content))
        assert text == "[Extracted from PDF binary: Annual Report 2024]"

    async def test_unavailable_engine_is_not_called(self) -> None:
        engine = MagicMock(spec=BasePdfEngine)
        engine.is_available.return_value = False
        await PdfTextExtractor(engine=engine).extract(_pdf_doc(b"\x00" * 8))
        engine.extract_pages.assert_not_called()

    async def test_nothing_readable_yields_scanned_descriptor(self) -> None:
        doc = _pdf_doc(b"\x00\x01\x02" * 1024, name="scan.pdf")
        text = await PdfTextExtractor(engine=_StaticEngine([""])).extract(doc)
        assert text == (
            "[PDF file: scan.pdf - No extractable text found. File size: 3.0KB. "
            "This may be a scanned/image-based PDF.]"
        )


class TestScanBinary:
    def test_keeps_runs_of_ten_or_more(self) -> None:
        content = b"\x00short\x00exactly10c\x00"
        assert PdfTextExtractor.scan_binary(content) == "[Extracted from PDF binary: exactly10c]"

    def test_caps_number_of_runs(self) -> None:
        content = b"\x00".join(b"run-number-%02d" % i for i in range(30))
        result = PdfTextExtractor.scan_binary(content)
        assert "run-number-19" in result
        assert "run-number-20" not in result

    def test_only_scans_leading_bytes(self) -> None:
        content = b"\x00" * PdfTextExtractor.SCAN_BYTES + b"late readable text"
        assert PdfTextExtractor.scan_binary(content) == ""
