from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from compliance_audit.analysis.models import AuditResult
from compliance_audit.extraction.models import ExtractionOutcome
from compliance_audit.processor.models import AnalysisRequest
from compliance_audit.processor.progress import ProgressReporter


class AnalysisStage(str, Enum):
    EXTRACTING_REGULATIONS = "extracting_regulations"
    EXTRACTING_DOCUMENTS = "extracting_documents"
    ASSEMBLING_CONTEXT = "assembling_context"
    AWAITING_MODEL = "awaiting_model"
    PARSING_RESPONSE = "parsing_response"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    request: AnalysisRequest
    progress: ProgressReporter
    stage: AnalysisStage = AnalysisStage.EXTRACTING_REGULATIONS
    regulation_outcomes: list[ExtractionOutcome] = field(default_factory=list)
    document_outcomes: list[ExtractionOutcome] = field(default_factory=list)
    prompt: str = ""
    raw_response: str = ""
    result: AuditResult | None = None
    error_message: str = ""


class PipelineStep(ABC):
    stage: AnalysisStage
    percent: int
    message: str

    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
