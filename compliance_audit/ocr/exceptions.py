class OcrError(Exception):
    """Raised when OCR cannot produce text for an image."""
