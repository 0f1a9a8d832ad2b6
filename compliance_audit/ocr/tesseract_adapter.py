import io

import pytesseract
from PIL import Image

from compliance_audit.logging.logger import Log
from compliance_audit.ocr.base import BaseOcrEngine
from compliance_audit.ocr.exceptions import OcrError


class TesseractOcrAdapter(BaseOcrEngine):
    """Runs Tesseract through pytesseract."""

    def __init__(self, language: str = "eng") -> None:
        self._language = language
        self._available: bool | None = None

    def is_available(self) -> bool:
        if self._available is None:
            try:
                version = pytesseract.get_tesseract_version()
            except (pytesseract.TesseractNotFoundError, OSError) as exc:
                Log.warning(f"Tesseract binary not available: {exc}")
                self._available = False
            else:
                Log.debug(f"Tesseract {version} available")
                self._available = True
        return self._available

    def recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                img.load()
                if img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                return pytesseract.image_to_string(img, lang=self._language).strip()
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
