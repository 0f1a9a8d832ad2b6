from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from compliance_audit.analysis.exceptions import AuditServiceError
from compliance_audit.analysis.openai_client_adapter import OpenAIClientAdapter

_OPENAI_CLS = "compliance_audit.analysis.openai_client_adapter.openai.OpenAI"


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture()
def mock_client() -> Iterator[MagicMock]:
    client = MagicMock()
    with patch(_OPENAI_CLS, return_value=client):
        yield client


def _complete(adapter: OpenAIClientAdapter, system_prompt: str = "system") -> str:
    return adapter.create_chat_completion(
        model="m",
        temperature=0.2,
        system_prompt=system_prompt,
        user_prompt="user",
    )


class TestOpenAIClientAdapter:
    def test_returns_content(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response('{"findings": []}')
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
        assert _complete(adapter) == '{"findings": []}'

    def test_passes_base_url_and_timeout(self) -> None:
        with patch(_OPENAI_CLS) as openai_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=45, base_url="http://localhost:11434/v1")
        openai_cls.assert_called_once_with(
            api_key="k", timeout=45, base_url="http://localhost:11434/v1"
        )

    def test_sends_system_and_user_messages(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]
        assert kwargs["temperature"] == 0.2
        assert "response_format" not in kwargs

    def test_omits_empty_system_prompt(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30), system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "user"}]

    def test_json_mode_requests_json_object(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30, json_mode=True))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}

    def test_raises_error_for_empty_content(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(AuditServiceError, match="empty response"):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_error_for_no_choices(self, mock_client: MagicMock) -> None:
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(AuditServiceError, match="no choices"):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_network_error_on_connection_failure(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(AuditServiceError, match="network error"):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_network_error_on_timeout(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(AuditServiceError, match="network error"):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_api_error(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(AuditServiceError, match="API error"):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))
