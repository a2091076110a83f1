"""LLM provider implementations."""

from .anthropic import AnthropicProvider
from .ollama import OllamaProvider
from .openai import OpenAIProvider

__all__ = [
    "AnthropicProvider",
    "OpenAIProvider",
    "OllamaProvider",
]
