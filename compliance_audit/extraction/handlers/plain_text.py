from typing import ClassVar

from compliance_audit.extraction.base import BaseExtractor
from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.progress import ProgressReporter


class PlainTextExtractor(BaseExtractor):
    """Plain text, source code, markup and delimited data files."""

    name: ClassVar[str] = "plain_text"

    extensions: ClassVar[frozenset[str]] = frozenset({
        # plain text and shell
        ".txt", ".text", ".log", ".ini", ".cfg", ".conf", ".bat", ".sh", ".bash", ".zsh",
        # code and markup
        ".js", ".jsx", ".ts", ".tsx", ".html", ".htm", ".css", ".scss", ".less",
        ".php", ".py", ".java", ".cpp", ".c", ".h", ".cs", ".rb", ".go", ".rs",
        ".swift", ".kt", ".kts", ".json", ".xml", ".yaml", ".yml", ".toml",
        # documentation
        ".md", ".markdown", ".rst", ".tex", ".latex",
        # data
        ".csv", ".tsv",
    })
    mime_types: ClassVar[frozenset[str]] = frozenset({
        "text/plain",
        "application/javascript",
        "application/json",
        "text/html",
        "text/css",
        "application/xml",
        "text/x-python",
        "text/x-java",
        "text/x-c",
        "text/markdown",
        "text/x-rst",
        "text/csv",
        "text/tab-separated-values",
    })

    async def extract(
        self,
        document: UploadedDocument,
        progress: ProgressReporter | None = None,
    ) -> str:
        return document.content.decode("utf-8", errors="replace")
