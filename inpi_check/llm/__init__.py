"""LLM module for plain-language availability advice."""

from .advisor import LegalAdvisor
from .base import BaseLLMProvider
from .factory import (
    check_provider_availability,
    get_default_model,
    get_provider,
    list_providers,
)

__all__ = [
    "BaseLLMProvider",
    "LegalAdvisor",
    "get_provider",
    "get_default_model",
    "list_providers",
    "check_provider_availability",
]
