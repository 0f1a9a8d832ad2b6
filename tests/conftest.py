import io
import zipfile

import openpyxl
import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

POLICY_SENTENCE = (
    "The accounting officer must keep full and proper records of the financial "
    "affairs of the department in accordance with prescribed norms and standards."
)


def _pdf(pages: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


def _zip(parts: dict[str, str | bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in parts.items():
            zf.writestr(name, data)
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with one known line of text."""
    return _pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _pdf(["Page one content", "Page two content"])


@pytest.fixture()
def policy_pdf_bytes() -> bytes:
    """Two-page PDF with enough text to pass the informativeness threshold."""
    return _pdf([POLICY_SENTENCE[:90], POLICY_SENTENCE[90:]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a blank page."""
    return _pdf([""])


@pytest.fixture()
def docx_bytes() -> bytes:
    body = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        "<w:body><w:p><w:r><w:t>Leave policy</w:t></w:r></w:p>"
        "<w:p><w:r><w:t>Employees   receive 21 days annual leave.</w:t></w:r></w:p>"
        "</w:body></w:document>"
    )
    return _zip({"[Content_Types].xml": "<Types/>", "word/document.xml": body})


@pytest.fixture()
def pptx_bytes() -> bytes:
    def slide(text: str) -> str:
        return f'<p:sld xmlns:p="p"><a:t xmlns:a="a">{text}</a:t></p:sld>'

    return _zip({
        "ppt/presentation.xml": "<p:presentation/>",
        "ppt/slides/slide10.xml": slide("Tenth slide"),
        "ppt/slides/slide2.xml": slide("Second slide"),
        "ppt/slides/slide1.xml": slide("First slide"),
        "ppt/slides/_rels/slide1.xml.rels": "<Relationships/>",
    })


@pytest.fixture()
def xlsx_bytes() -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Register"
    ws.append(["Asset", "Value"])
    ws.append(["Laptop", 1200])
    wb.create_sheet("Empty")
    other = wb.create_sheet("Notes")
    other.append(["Reviewed by internal audit"])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (64, 32), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def zip_bytes() -> bytes:
    return _zip({
        "docs/": "",
        "docs/readme.md": "# Procedures\nAll payments need two approvals.",
        "docs/logo.png": b"\x89PNG\r\n\x1a\n",
        "docs/ledger.csv": "date,amount\n2024-01-01,100\n",
    })


@pytest.fixture()
def make_zip():  # type: ignore[no-untyped-def]
    """Builder for ad-hoc zip containers: ``make_zip({"name": data})``."""
    return _zip
