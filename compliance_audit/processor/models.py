from collections.abc import Sequence
from dataclasses import dataclass

from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.exceptions import InvalidAnalysisRequestError


@dataclass(frozen=True)
class AnalysisRequest:
    """One user-initiated analysis; consumed once and discarded."""

    regulation_documents: tuple[UploadedDocument, ...]
    subject_documents: tuple[UploadedDocument, ...]
    categories: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.subject_documents:
            raise InvalidAnalysisRequestError("At least one document to audit is required")
        if not any(category.strip() for category in self.categories):
            raise InvalidAnalysisRequestError("At least one audit category must be selected")

    @classmethod
    def create(
        cls,
        regulation_documents: Sequence[UploadedDocument],
        subject_documents: Sequence[UploadedDocument],
        categories: Sequence[str],
    ) -> "AnalysisRequest":
        return cls(
            regulation_documents=tuple(regulation_documents),
            subject_documents=tuple(subject_documents),
            categories=tuple(c.strip() for c in categories if c.strip()),
        )
