"""Settings loader and configuration dataclass."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml


@dataclass
class LLMConfig:
    """LLM configuration for the optional legal advice.

    Supports multiple providers:
    - anthropic: Claude models (requires ANTHROPIC_API_KEY)
    - openai: GPT models (requires OPENAI_API_KEY)
    - ollama: Local models via Ollama (default: http://localhost:11434)
    """

    provider: str = "anthropic"
    model: str = "claude-sonnet-4-20250514"
    api_key: str | None = None  # Can also use env vars
    api_base: str | None = None  # For Ollama custom endpoints
    max_tokens: int = 1024
    temperature: float = 0.2


@dataclass
class InfosimplesConfig:
    """Infosimples broker configuration.

    The token can also come from the INFOSIMPLES_TOKEN env var.
    """

    token: str | None = None
    timeout_seconds: int = 20
    search_type: str = "exata"
    base_url: str | None = None
    max_pages: int = 50


@dataclass
class FamousMarksConfig:
    """Famous-mark pre-check configuration."""

    enabled: bool = False
    as_of: date | None = None
    names: list[str] = field(default_factory=list)


@dataclass
class AvailabilityConfig:
    """Availability decision configuration.

    Empty stem lists fall back to the built-in classification table.
    """

    match_policy: str = "loose"
    expose_evidence: bool = True
    table_version: str | None = None
    terminal_stems: list[str] = field(default_factory=list)
    blocking_stems: list[str] | None = None
    famous_marks: FamousMarksConfig = field(default_factory=FamousMarksConfig)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main settings container for inpi-check."""

    source_name: str = "INPI via Infosimples"
    availability: AvailabilityConfig = field(default_factory=AvailabilityConfig)
    infosimples: InfosimplesConfig = field(default_factory=InfosimplesConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        data = dict(data)
        availability_data = dict(data.pop("availability", None) or {})
        infosimples_data = data.pop("infosimples", None) or {}
        llm_data = data.pop("llm", None) or {}
        logging_data = data.pop("logging", None) or {}

        # Parse nested famous-marks config
        famous_data = availability_data.pop("famous_marks", None) or {}
        availability_config = AvailabilityConfig(
            famous_marks=FamousMarksConfig(**famous_data),
            **availability_data,
        )

        return cls(
            availability=availability_config,
            infosimples=InfosimplesConfig(**infosimples_data),
            llm=LLMConfig(**llm_data),
            logging=LoggingConfig(**logging_data),
            **data,
        )


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML configuration file.

    Args:
        config_path: Path to configuration file. If None, uses default config.yaml

    Returns:
        Settings object with loaded configuration
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        return Settings()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    return Settings.from_dict(data)
