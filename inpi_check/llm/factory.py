"""Factory for creating LLM providers."""

from inpi_check.config import LLMConfig
from inpi_check.llm.base import BaseLLMProvider
from inpi_check.llm.providers import AnthropicProvider, OllamaProvider, OpenAIProvider

# Registry of available providers
PROVIDERS: dict[str, type[BaseLLMProvider]] = {
    "anthropic": AnthropicProvider,
    "claude": AnthropicProvider,  # alias
    "openai": OpenAIProvider,
    "gpt": OpenAIProvider,  # alias
    "ollama": OllamaProvider,
}

# Default models for each provider
DEFAULT_MODELS: dict[str, str] = {
    "anthropic": "claude-sonnet-4-20250514",
    "openai": "gpt-4o",
    "ollama": "llama3.2",
}


def get_provider(config: LLMConfig) -> BaseLLMProvider:
    """Create an LLM provider based on configuration.

    Args:
        config: LLM configuration with provider name

    Returns:
        Initialized LLM provider

    Raises:
        ValueError: If provider is not supported
    """
    provider_name = config.provider.lower()

    if provider_name not in PROVIDERS:
        available = ", ".join(sorted(PROVIDERS))
        raise ValueError(
            f"Provedor desconhecido: '{provider_name}'. "
            f"Provedores disponíveis: {available}"
        )

    return PROVIDERS[provider_name](config)


def get_default_model(provider: str) -> str:
    """Get the default model for a provider (aliases resolved)."""
    provider_class = PROVIDERS.get(provider.lower())
    for name, model in DEFAULT_MODELS.items():
        if PROVIDERS[name] is provider_class:
            return model
    return "default"


def list_providers() -> list[str]:
    """List all available provider names (without aliases)."""
    return list(DEFAULT_MODELS)


def check_provider_availability(config: LLMConfig) -> tuple[bool, str]:
    """Check if a provider is available and configured.

    Returns:
        Tuple of (is_available, message)
    """
    try:
        provider = get_provider(config)
    except ValueError as e:
        return False, str(e)

    if provider.is_available():
        return True, f"Provedor '{config.provider}' disponível."
    return False, (
        f"Provedor '{config.provider}' não configurado "
        "(falta a chave de API ou o servidor não está rodando)."
    )
