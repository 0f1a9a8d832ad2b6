from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from compliance_audit.analysis.auditor import Auditor
from compliance_audit.analysis.factory import AuditorFactory
from compliance_audit.config.settings import Settings


@pytest.fixture()
def openai_cls() -> Iterator[MagicMock]:
    with patch("compliance_audit.analysis.openai_client_adapter.openai.OpenAI") as cls:
        yield cls


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"audit_api_key": "k", "audit_model_name": "model-x", "audit_base_url": ""}
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


class TestAuditorFactory:
    def test_example_provider_needs_no_credentials(self) -> None:
        auditor = AuditorFactory.create(_settings(audit_provider="example", audit_model_name=""))
        assert isinstance(auditor, Auditor)

    def test_openai_uses_default_base_url(self, openai_cls: MagicMock) -> None:
        AuditorFactory.create(_settings(audit_provider="openai"))
        assert openai_cls.call_args.kwargs["base_url"] is None

    def test_openai_accepts_override(self, openai_cls: MagicMock) -> None:
        AuditorFactory.create(_settings(audit_provider="openai", audit_base_url="https://proxy/v1"))
        assert openai_cls.call_args.kwargs["base_url"] == "https://proxy/v1"

    @pytest.mark.parametrize("provider", sorted(AuditorFactory.OPENAI_COMPATIBLE_BASE_URLS))
    def test_known_compatible_providers(self, provider: str, openai_cls: MagicMock) -> None:
        AuditorFactory.create(_settings(audit_provider=provider))
        expected = AuditorFactory.OPENAI_COMPATIBLE_BASE_URLS[provider]
        assert openai_cls.call_args.kwargs["base_url"] == expected

    def test_provider_name_is_case_insensitive(self, openai_cls: MagicMock) -> None:
        AuditorFactory.create(_settings(audit_provider="Groq"))
        assert openai_cls.call_args.kwargs["base_url"] == "https://api.groq.com/openai/v1"

    def test_openai_compatible_requires_base_url(self, openai_cls: MagicMock) -> None:
        with pytest.raises(ValueError, match="audit_base_url is required"):
            AuditorFactory.create(_settings(audit_provider="openai_compatible"))

    def test_openai_compatible_with_base_url(self, openai_cls: MagicMock) -> None:
        AuditorFactory.create(
            _settings(audit_provider="openai_compatible", audit_base_url="http://llm:8000/v1")
        )
        assert openai_cls.call_args.kwargs["base_url"] == "http://llm:8000/v1"

    def test_model_name_is_required(self, openai_cls: MagicMock) -> None:
        with pytest.raises(ValueError, match="audit_model_name is required"):
            AuditorFactory.create(_settings(audit_provider="openai", audit_model_name="  "))

    def test_raises_for_unknown_provider(self, openai_cls: MagicMock) -> None:
        with pytest.raises(ValueError, match="Unknown audit provider"):
            AuditorFactory.create(_settings(audit_provider="unknown"))

    def test_timeout_is_forwarded(self, openai_cls: MagicMock) -> None:
        AuditorFactory.create(_settings(audit_provider="openai", audit_timeout_seconds=15))
        assert openai_cls.call_args.kwargs["timeout"] == 15

    def test_supported_providers(self) -> None:
        providers = AuditorFactory.supported_providers()
        assert providers[:3] == ["example", "openai", "openai_compatible"]
        assert "groq" in providers
