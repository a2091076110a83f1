"""Tests for the LLM providers and legal advisor."""

from unittest.mock import MagicMock

import pytest

from inpi_check.broker import MockInfosimplesClient
from inpi_check.config import LLMConfig, Settings
from inpi_check.llm import (
    BaseLLMProvider,
    LegalAdvisor,
    check_provider_availability,
    get_default_model,
    get_provider,
    list_providers,
)
from inpi_check.llm.providers import AnthropicProvider, OllamaProvider, OpenAIProvider
from inpi_check.service import AvailabilityService


@pytest.fixture
def provider() -> MagicMock:
    """Fake provider returning canned advice."""
    provider = MagicMock(spec=BaseLLMProvider)
    provider.generate.return_value = "  A marca não está disponível.  \n"
    provider.is_available.return_value = True
    provider.name = "fake"
    return provider


def test_advise_unavailable(provider: MagicMock) -> None:
    """Test the prompt carries the verdict and the blocking process."""
    response = AvailabilityService(client=MockInfosimplesClient()).check("Túnel Crew")
    advisor = LegalAdvisor(Settings(), provider=provider)

    advice = advisor.advise(response)

    assert advice == "A marca não está disponível."
    prompt = provider.generate.call_args.args[0]
    assert "<decisao>INDISPONÍVEL</decisao>" in prompt
    assert "921004477" in prompt
    assert "Registro de marca em vigor" in prompt


def test_advise_available_without_evidence(provider: MagicMock) -> None:
    """Test an empty evidence list is stated explicitly."""
    response = AvailabilityService(client=MockInfosimplesClient()).check("XYZMINHAMARCA2025")

    LegalAdvisor(Settings(), provider=provider).advise(response)

    prompt = provider.generate.call_args.args[0]
    assert "<decisao>DISPONÍVEL</decisao>" in prompt
    assert "(nenhum)" in prompt


def test_advisor_builds_provider_from_settings() -> None:
    """Test the advisor creates the configured provider."""
    settings = Settings()
    settings.llm = LLMConfig(provider="ollama", model="llama3.2")

    advisor = LegalAdvisor(settings)

    assert isinstance(advisor.provider, OllamaProvider)
    assert advisor.provider_name == "ollama"


@pytest.mark.parametrize(
    "name, provider_cls",
    [
        ("anthropic", AnthropicProvider),
        ("claude", AnthropicProvider),
        ("OpenAI", OpenAIProvider),
        ("ollama", OllamaProvider),
    ],
)
def test_get_provider(name: str, provider_cls: type) -> None:
    """Test provider names and aliases resolve."""
    assert isinstance(get_provider(LLMConfig(provider=name)), provider_cls)


def test_get_provider_unknown() -> None:
    """Test unknown providers are rejected."""
    with pytest.raises(ValueError, match="Provedor desconhecido"):
        get_provider(LLMConfig(provider="skynet"))


def test_default_models() -> None:
    """Test default model lookup resolves aliases."""
    assert get_default_model("claude") == "claude-sonnet-4-20250514"
    assert get_default_model("gpt") == "gpt-4o"
    assert get_default_model("unknown") == "default"
    assert list_providers() == ["anthropic", "openai", "ollama"]


def test_provider_availability_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test a provider without API key is reported unavailable."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    ok, message = check_provider_availability(LLMConfig(provider="anthropic"))

    assert ok is False
    assert "anthropic" in message


def test_provider_availability_with_key() -> None:
    """Test a configured API key makes the provider available."""
    ok, _ = check_provider_availability(LLMConfig(provider="openai", api_key="sk-test"))
    assert ok is True


def test_system_prompt_loads() -> None:
    """Test the bundled system prompt is found."""
    prompt = AnthropicProvider(LLMConfig()).system_prompt
    assert "INPI" in prompt
