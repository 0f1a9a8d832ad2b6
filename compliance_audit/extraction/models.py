import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath


@dataclass(frozen=True)
class UploadedDocument:
    """A file selected by the user, as handed to the pipeline."""

    name: str
    content: bytes = field(repr=False)
    mime_type: str = ""
    size_bytes: int = -1
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        if self.size_bytes < 0:
            object.__setattr__(self, "size_bytes", len(self.content))

    @property
    def extension(self) -> str:
        """Lower-cased suffix including the dot, or '' when the name has none.

        A bare dotted name such as ".txt" counts as its own suffix.
        """
        name = PurePosixPath(self.name.replace("\\", "/")).name
        if name.startswith(".") and name.count(".") == 1:
            return name.lower()
        return PurePosixPath(name).suffix.lower()

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.1f}"


class FallbackReason(str, Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"
    LIMITED_TEXT = "limited_text"
    EXTRACTION_FAILED = "extraction_failed"


@dataclass(frozen=True)
class ExtractedText:
    """Text recovered from a document."""

    document_name: str
    content: str

    @property
    def text(self) -> str:
        return self.content


@dataclass(frozen=True)
class ExtractionFallback:
    """Synthetic stand-in for a document whose content could not be used."""

    document_name: str
    mime_type: str
    size_bytes: int
    reason: FallbackReason
    detail: str

    @property
    def text(self) -> str:
        size_kb = f"{self.size_bytes / 1024:.1f}"
        return (
            f"[File: {self.document_name}, Type: {self.mime_type or 'unknown'}, "
            f"Size: {size_kb}KB - {self.detail}]"
        )


ExtractionOutcome = ExtractedText | ExtractionFallback
