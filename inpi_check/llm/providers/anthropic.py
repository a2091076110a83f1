"""Anthropic Claude provider implementation."""

import os

from inpi_check.config import LLMConfig
from inpi_check.llm.base import BaseLLMProvider


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude API provider.

    Requires ANTHROPIC_API_KEY environment variable or api_key in config.
    """

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self._client = None

    @property
    def name(self) -> str:
        return "anthropic"

    def _api_key(self) -> str | None:
        return self.config.api_key or os.environ.get("ANTHROPIC_API_KEY")

    def _get_client(self):
        """Lazy load Anthropic client."""
        if self._client is None:
            import anthropic

            self._client = anthropic.Anthropic(api_key=self._api_key())
        return self._client

    def is_available(self) -> bool:
        """Check if an Anthropic API key is configured."""
        return bool(self._api_key())

    def generate(self, user_prompt: str) -> str:
        """Generate response using Claude.

        Args:
            user_prompt: The user prompt to send

        Returns:
            The text response from Claude
        """
        client = self._get_client()

        response = client.messages.create(
            model=self.config.model,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            system=self.system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )

        return response.content[0].text
