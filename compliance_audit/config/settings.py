from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    pdf_max_pages: int = 30

    ocr_enabled: bool = True
    ocr_language: str = "eng"

    spreadsheet_enabled: bool = True

    min_informative_chars: int = 100
    regulation_char_cap: int = 8000
    document_char_cap: int = 12000

    audit_provider: str = "openai"
    audit_api_key: str = ""
    audit_model_name: str = ""
    audit_base_url: str = ""
    audit_timeout_seconds: int = 120
    audit_temperature: float = 0.2
    audit_json_mode: bool = False
    audit_reconcile_counts: bool = False
    audit_prompt_template_path: Path | None = None
