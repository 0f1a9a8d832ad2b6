from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for OCR engines used on raster images."""

    @abstractmethod
    def is_available(self) -> bool:
        """Report whether recognition can run in this environment."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Return the text recognized in an encoded image.

        Raises:
            OcrError: if the image cannot be decoded or recognition fails.
        """
