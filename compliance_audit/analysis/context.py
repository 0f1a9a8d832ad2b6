"""Builds the length-capped evidence blocks embedded in the audit prompt.

Each file's contribution is cut at a fixed number of characters before the
blocks are joined. The cut is a hard cutoff, not sentence-aware.
"""

from collections.abc import Sequence

from compliance_audit.extraction.models import ExtractionOutcome, UploadedDocument

REGULATION_CHAR_CAP = 8000
DOCUMENT_CHAR_CAP = 12000

REGULATION_LABEL = "Regulation File"
DOCUMENT_LABEL = "Document"

NO_REGULATIONS_INSTRUCTION = (
    "No regulation files uploaded. Use your knowledge of South African regulations."
)


def build_context_block(
    outcomes: Sequence[ExtractionOutcome],
    label: str,
    cap: int,
) -> str:
    return "\n\n".join(
        f"=== {label} {index}: {outcome.document_name} ===\n{outcome.text[:cap]}"
        for index, outcome in enumerate(outcomes, start=1)
    )


def build_regulation_context(
    outcomes: Sequence[ExtractionOutcome],
    cap: int = REGULATION_CHAR_CAP,
) -> str:
    if not outcomes:
        return NO_REGULATIONS_INSTRUCTION
    return build_context_block(outcomes, REGULATION_LABEL, cap)


def build_document_context(
    outcomes: Sequence[ExtractionOutcome],
    cap: int = DOCUMENT_CHAR_CAP,
) -> str:
    return build_context_block(outcomes, DOCUMENT_LABEL, cap)


def build_file_summary(
    regulations: Sequence[UploadedDocument],
    documents: Sequence[UploadedDocument],
) -> str:
    regulation_names = ", ".join(d.name for d in regulations) or "None"
    document_names = ", ".join(d.name for d in documents) or "None"
    return (
        "File Summary:\n"
        f"- Regulations: {regulation_names}\n"
        f"- Documents: {document_names}\n"
        f"- Total files: {len(regulations) + len(documents)}"
    )
