import httpx
import openai

from compliance_audit.analysis.client_base import BaseAuditClient
from compliance_audit.analysis.exceptions import AuditServiceError


class OpenAIClientAdapter(BaseAuditClient):
    """Audit client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        json_mode: bool = False,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._json_mode = json_mode

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        extra: dict[str, object] = {}
        if self._json_mode:
            extra["response_format"] = {"type": "json_object"}

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
                **extra,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AuditServiceError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AuditServiceError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AuditServiceError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AuditServiceError("AI returned empty response")
        return content
