from pathlib import Path

from compliance_audit.analysis.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

REQUIRED_PLACEHOLDERS: tuple[str, ...] = (
    "{file_summary}",
    "{categories}",
    "{regulation_context}",
    "{document_context}",
)


def load_prompt_template(path: Path | None = None) -> str:
    """Load the audit prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled audit_prompt.txt.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        PromptTemplateError: if the file cannot be read or lacks a placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "audit_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt template: {exc}") from exc
    missing = [p for p in REQUIRED_PLACEHOLDERS if p not in template]
    if missing:
        raise PromptTemplateError(f"Prompt template {path} is missing placeholders: {missing}")
    return template
