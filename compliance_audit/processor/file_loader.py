import mimetypes
from pathlib import Path

from compliance_audit.extraction.models import UploadedDocument
from compliance_audit.processor.exceptions import FileReadError


class FileLoader:
    """Reads local files into UploadedDocument values."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    def load(self, path: Path | str) -> UploadedDocument:
        """Read a file and guess its MIME type from the name.

        Raises:
            FileReadError: if the path is not a readable file.
        """
        resolved = self._resolve_path(Path(path))
        if not resolved.is_file():
            raise FileReadError(f"File not found: {resolved}")
        try:
            content = resolved.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {resolved}: {exc}") from exc
        mime_type, _ = mimetypes.guess_type(resolved.name)
        return UploadedDocument(
            name=resolved.name,
            content=content,
            mime_type=mime_type or "",
            size_bytes=len(content),
        )

    def load_all(self, paths: list[Path] | list[str]) -> list[UploadedDocument]:
        return [self.load(path) for path in paths]

    def _resolve_path(self, path: Path) -> Path:
        if self._files_root is not None and not path.is_absolute():
            return self._files_root / path
        return path
