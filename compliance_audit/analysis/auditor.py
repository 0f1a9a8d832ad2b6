"""AI-backed compliance auditor: prompt rendering, one service call, reply parsing."""

import asyncio
from collections.abc import Sequence
from pathlib import Path

from compliance_audit.analysis.client_base import BaseAuditClient
from compliance_audit.analysis.context import (
    DOCUMENT_CHAR_CAP,
    REGULATION_CHAR_CAP,
    build_document_context,
    build_file_summary,
    build_regulation_context,
)
from compliance_audit.analysis.exceptions import AnalysisError, AuditServiceError
from compliance_audit.analysis.models import AuditResult
from compliance_audit.analysis.prompt_loader import load_prompt_template
from compliance_audit.analysis.response_parser import parse_audit_response
from compliance_audit.analysis.validator import validate_and_build
from compliance_audit.extraction.models import ExtractionOutcome, UploadedDocument
from compliance_audit.logging.logger import Log


class Auditor:
    """Turns extracted evidence into an AuditResult using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAuditClient,
        model: str,
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
        system_prompt: str = "",
        regulation_char_cap: int = REGULATION_CHAR_CAP,
        document_char_cap: int = DOCUMENT_CHAR_CAP,
        reconcile_counts: bool = False,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._regulation_char_cap = regulation_char_cap
        self._document_char_cap = document_char_cap
        self._reconcile_counts = reconcile_counts

    def build_prompt(
        self,
        *,
        categories: Sequence[str],
        regulation_documents: Sequence[UploadedDocument],
        subject_documents: Sequence[UploadedDocument],
        regulation_outcomes: Sequence[ExtractionOutcome],
        document_outcomes: Sequence[ExtractionOutcome],
    ) -> str:
        return self._prompt_template.format(
            file_summary=build_file_summary(regulation_documents, subject_documents),
            categories=", ".join(categories),
            regulation_context=build_regulation_context(
                regulation_outcomes, self._regulation_char_cap
            ),
            document_context=build_document_context(document_outcomes, self._document_char_cap),
        )

    async def request(self, prompt: str) -> str:
        """Send the prompt once; no retry, no streaming."""
        Log.debug(f"Audit prompt ({len(prompt)} chars):\n{prompt}")
        try:
            raw = await asyncio.to_thread(
                self._client.create_chat_completion,
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except AnalysisError:
            raise
        except Exception as exc:
            raise AuditServiceError(f"AI provider call failed: {exc}") from exc
        Log.debug(f"AI raw response:\n{raw}")
        return raw

    def parse(self, raw: str) -> AuditResult:
        result = validate_and_build(
            parse_audit_response(raw), reconcile_counts=self._reconcile_counts
        )
        Log.info(
            f"Audit parsed: {len(result.findings)} findings, opinion={result.opinion}"
        )
        return result
