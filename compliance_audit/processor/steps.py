from compliance_audit.analysis.auditor import Auditor
from compliance_audit.extraction.extractor import DocumentExtractor
from compliance_audit.logging.logger import Log
from compliance_audit.processor.pipeline import AnalysisStage, PipelineContext, PipelineStep


class ExtractRegulationsStep(PipelineStep):
    stage = AnalysisStage.EXTRACTING_REGULATIONS
    percent = 10
    message = "Extracting text from regulation files..."

    def __init__(self, extractor: DocumentExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        documents = context.request.regulation_documents
        context.regulation_outcomes = await self._extractor.extract_all(
            documents, context.progress
        )
        Log.info(f"Extracted {len(context.regulation_outcomes)} regulation files")
        return context


class ExtractDocumentsStep(PipelineStep):
    stage = AnalysisStage.EXTRACTING_DOCUMENTS
    percent = 30
    message = "Extracting text from audit documents..."

    def __init__(self, extractor: DocumentExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        documents = context.request.subject_documents
        context.document_outcomes = await self._extractor.extract_all(
            documents, context.progress
        )
        Log.info(f"Extracted {len(context.document_outcomes)} audit documents")
        return context


class AssembleContextStep(PipelineStep):
    stage = AnalysisStage.ASSEMBLING_CONTEXT
    percent = 50
    message = "Preparing analysis context..."

    def __init__(self, auditor: Auditor) -> None:
        self._auditor = auditor

    async def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        context.prompt = self._auditor.build_prompt(
            categories=request.categories,
            regulation_documents=request.regulation_documents,
            subject_documents=request.subject_documents,
            regulation_outcomes=context.regulation_outcomes,
            document_outcomes=context.document_outcomes,
        )
        Log.info(f"Assembled prompt of {len(context.prompt)} chars")
        return context


class InvokeModelStep(PipelineStep):
    stage = AnalysisStage.AWAITING_MODEL
    percent = 70
    message = "Sending to AI for compliance analysis..."

    def __init__(self, auditor: Auditor) -> None:
        self._auditor = auditor

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_response = await self._auditor.request(context.prompt)
        Log.info(f"Received AI response of {len(context.raw_response)} chars")
        return context


class ParseResponseStep(PipelineStep):
    stage = AnalysisStage.PARSING_RESPONSE
    percent = 90
    message = "Parsing AI results..."

    def __init__(self, auditor: Auditor) -> None:
        self._auditor = auditor

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.result = self._auditor.parse(context.raw_response)
        return context
