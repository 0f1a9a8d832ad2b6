from collections.abc import Sequence
from typing import cast

from compliance_audit.analysis.auditor import Auditor
from compliance_audit.analysis.exceptions import AnalysisError
from compliance_audit.analysis.factory import AuditorFactory
from compliance_audit.analysis.models import AuditResult
from compliance_audit.config.settings import Settings
from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.extractor import DocumentExtractor
from compliance_audit.extraction.handlers import (
    ArchiveExtractor,
    ImageExtractor,
    PdfTextExtractor,
    PlainTextExtractor,
    PresentationExtractor,
    RichTextExtractor,
    SpreadsheetExtractor,
    WordDocumentExtractor,
)
from compliance_audit.logging.logger import Log
from compliance_audit.ocr.tesseract_adapter import TesseractOcrAdapter
from compliance_audit.pdf.factory import PdfEngineFactory
from compliance_audit.processor.models import AnalysisRequest
from compliance_audit.processor.pipeline import AnalysisStage, PipelineContext, PipelineStep
from compliance_audit.processor.progress import ProgressCallback, ProgressReporter
from compliance_audit.processor.steps import (
    AssembleContextStep,
    ExtractDocumentsStep,
    ExtractRegulationsStep,
    InvokeModelStep,
    ParseResponseStep,
)
from compliance_audit.spreadsheet.openpyxl_adapter import OpenpyxlReader


class Processor:
    """Orchestrates one analysis run.

    Pipeline: extract regulations -> extract documents -> assemble context
    -> call AI -> parse reply. A run either returns a full AuditResult or
    raises AnalysisError; progress is only reported for stages reached.
    """

    COMPLETE_MESSAGE = "Analysis complete!"

    def __init__(self, extractor: DocumentExtractor, auditor: Auditor) -> None:
        self._steps: tuple[PipelineStep, ...] = (
            ExtractRegulationsStep(extractor),
            ExtractDocumentsStep(extractor),
            AssembleContextStep(auditor),
            InvokeModelStep(auditor),
            ParseResponseStep(auditor),
        )

    async def analyse(
        self,
        request: AnalysisRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> AuditResult:
        context = await self.run(request, progress_callback)
        return cast(AuditResult, context.result)

    async def run(
        self,
        request: AnalysisRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> PipelineContext:
        context = PipelineContext(request=request, progress=ProgressReporter(progress_callback))
        Log.info(
            f"Starting analysis: {len(request.regulation_documents)} regulation files, "
            f"{len(request.subject_documents)} documents, "
            f"categories={list(request.categories)}"
        )
        try:
            for step in self._steps:
                context.stage = step.stage
                context.progress.emit(step.message, step.percent)
                context = await step.run(context)
        except AnalysisError as exc:
            self._mark_failed(context, exc)
            raise
        except Exception as exc:
            self._mark_failed(context, exc)
            raise AnalysisError(f"AI analysis failed: {exc}") from exc

        if context.result is None:
            error = AnalysisError("AI analysis failed: no result produced")
            self._mark_failed(context, error)
            raise error

        context.stage = AnalysisStage.DONE
        context.progress.emit(self.COMPLETE_MESSAGE, 100)
        Log.info(f"Analysis complete: {context.result.total_findings} findings reported")
        return context

    @staticmethod
    def _mark_failed(context: PipelineContext, exc: Exception) -> None:
        Log.error(f"Analysis failed during {context.stage.value}: {exc}")
        context.error_message = str(exc)
        context.stage = AnalysisStage.FAILED


def build_extractors(settings: Settings) -> list[BaseExtractor]:
    """Handlers in dispatch order, with optional engines injected from settings."""
    ocr_engine = TesseractOcrAdapter(settings.ocr_language) if settings.ocr_enabled else None
    spreadsheet_reader = OpenpyxlReader() if settings.spreadsheet_enabled else None
    return [
        PlainTextExtractor(),
        PdfTextExtractor(PdfEngineFactory.create(settings), max_pages=settings.pdf_max_pages),
        WordDocumentExtractor(),
        SpreadsheetExtractor(spreadsheet_reader),
        PresentationExtractor(),
        RichTextExtractor(),
        ImageExtractor(ocr_engine),
        ArchiveExtractor(),
    ]


def build_processor(
    settings: Settings,
    extractors: Sequence[BaseExtractor] | None = None,
    auditor: Auditor | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    document_extractor = DocumentExtractor(
        extractors if extractors is not None else build_extractors(settings),
        min_informative_chars=settings.min_informative_chars,
    )
    return Processor(
        extractor=document_extractor,
        auditor=auditor if auditor is not None else AuditorFactory.create(settings),
    )
