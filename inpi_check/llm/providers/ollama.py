"""Ollama provider implementation."""

import httpx

from inpi_check.config import LLMConfig
from inpi_check.llm.base import BaseLLMProvider


class OllamaProvider(BaseLLMProvider):
    """Ollama local LLM provider.

    Default endpoint: http://localhost:11434
    """

    DEFAULT_BASE_URL = "http://localhost:11434"

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self.base_url = config.api_base or self.DEFAULT_BASE_URL

    @property
    def name(self) -> str:
        return "ollama"

    def is_available(self) -> bool:
        """Check if Ollama server is running."""
        try:
            response = httpx.get(f"{self.base_url}/api/tags", timeout=5.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def generate(self, user_prompt: str) -> str:
        """Generate response using the Ollama chat endpoint."""
        response = httpx.post(
            f"{self.base_url}/api/chat",
            json={
                "model": self.config.model,
                "messages": [
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                "stream": False,
                "options": {
                    "temperature": self.config.temperature,
                    "num_predict": self.config.max_tokens,
                },
            },
            timeout=120.0,
        )

        response.raise_for_status()
        return response.json().get("message", {}).get("content", "")
