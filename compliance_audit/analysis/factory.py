from typing import ClassVar

from compliance_audit.analysis.auditor import Auditor
from compliance_audit.analysis.example_client_adapter import ExampleClientAdapter
from compliance_audit.analysis.openai_client_adapter import OpenAIClientAdapter
from compliance_audit.config.settings import Settings


class AuditorFactory:
    """Creates an Auditor for the configured AI provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> Auditor:
        provider = settings.audit_provider.lower()
        if provider == "example":
            client = ExampleClientAdapter()
            model = "example"
        else:
            client = OpenAIClientAdapter(
                api_key=settings.audit_api_key,
                timeout_seconds=settings.audit_timeout_seconds,
                base_url=cls._resolve_base_url(provider, settings),
                json_mode=settings.audit_json_mode,
            )
            model = cls._resolve_model_name(provider, settings)
        return Auditor(
            client=client,
            model=model,
            temperature=settings.audit_temperature,
            prompt_template_path=settings.audit_prompt_template_path,
            regulation_char_cap=settings.regulation_char_cap,
            document_char_cap=settings.document_char_cap,
            reconcile_counts=settings.audit_reconcile_counts,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.audit_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "audit_base_url is required for audit_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        raise ValueError(
            f"Unknown audit provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _resolve_model_name(provider: str, settings: Settings) -> str:
        model = settings.audit_model_name.strip()
        if not model:
            raise ValueError(f"audit_model_name is required for audit_provider={provider}")
        return model
