"""OpenAI provider implementation."""

import os

from inpi_check.config import LLMConfig
from inpi_check.llm.base import BaseLLMProvider


class OpenAIProvider(BaseLLMProvider):
    """OpenAI API provider.

    Requires OPENAI_API_KEY environment variable or api_key in config.
    """

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self._client = None

    @property
    def name(self) -> str:
        return "openai"

    def _api_key(self) -> str | None:
        return self.config.api_key or os.environ.get("OPENAI_API_KEY")

    def _get_client(self):
        """Lazy load OpenAI client."""
        if self._client is None:
            from openai import OpenAI

            self._client = OpenAI(api_key=self._api_key(), base_url=self.config.api_base)
        return self._client

    def is_available(self) -> bool:
        """Check if an OpenAI API key is configured."""
        return bool(self._api_key())

    def generate(self, user_prompt: str) -> str:
        """Generate response using OpenAI chat completions."""
        client = self._get_client()

        response = client.chat.completions.create(
            model=self.config.model,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            messages=[
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )

        return response.choices[0].message.content or ""
