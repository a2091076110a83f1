"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod
from pathlib import Path

from inpi_check.config import LLMConfig

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    All LLM providers must implement this interface to be used
    by the legal advisor.
    """

    prompt_name = "legal_advisor_system.txt"

    def __init__(self, config: LLMConfig):
        """Initialize provider with configuration.

        Args:
            config: LLM configuration
        """
        self.config = config
        self._system_prompt: str | None = None

    @property
    def system_prompt(self) -> str:
        """Load and cache system prompt."""
        if self._system_prompt is None:
            prompt_path = PROMPTS_DIR / self.prompt_name
            if prompt_path.exists():
                with open(prompt_path, encoding="utf-8") as f:
                    self._system_prompt = f.read()
            else:
                raise FileNotFoundError(f"System prompt not found: {prompt_path}")
        return self._system_prompt

    @abstractmethod
    def generate(self, user_prompt: str) -> str:
        """Generate a response from the LLM.

        Args:
            user_prompt: The user prompt to send

        Returns:
            The raw text response from the LLM
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is available and configured.

        Returns:
            True if provider can be used
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name."""
        pass
