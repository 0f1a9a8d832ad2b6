from abc import ABC, abstractmethod


class BaseAuditClient(ABC):
    """Contract for provider-specific chat clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Send one prompt and return the reply as plain text.

        Raises:
            AuditServiceError: when the provider cannot be reached or
                returns no content.
        """
