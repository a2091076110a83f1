"""Tests for settings loading."""

from datetime import date
from pathlib import Path

from inpi_check.config import Settings, load_settings


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    """Test a missing config file yields default settings."""
    settings = load_settings(tmp_path / "missing.yaml")

    assert settings == Settings()
    assert settings.availability.match_policy == "loose"
    assert settings.availability.expose_evidence is True
    assert settings.infosimples.search_type == "exata"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """Test an empty config file yields default settings."""
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == Settings()


def test_load_yaml(tmp_path: Path) -> None:
    """Test nested sections are parsed from YAML."""
    path = tmp_path / "config.yaml"
    path.write_text(
        """
source_name: INPI (teste)
availability:
  match_policy: exact
  expose_evidence: false
  terminal_stems: [arquiv, indeferid]
  famous_marks:
    enabled: true
    as_of: 2025-01-15
    names: [Natura, Sadia]
infosimples:
  token: abc
  timeout_seconds: 5
  max_pages: 10
llm:
  provider: ollama
  model: llama3.2
logging:
  level: DEBUG
""",
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.source_name == "INPI (teste)"
    assert settings.availability.match_policy == "exact"
    assert settings.availability.expose_evidence is False
    assert settings.availability.terminal_stems == ["arquiv", "indeferid"]
    assert settings.availability.famous_marks.enabled is True
    assert settings.availability.famous_marks.as_of == date(2025, 1, 15)
    assert settings.availability.famous_marks.names == ["Natura", "Sadia"]
    assert settings.infosimples.token == "abc"
    assert settings.infosimples.timeout_seconds == 5
    assert settings.infosimples.max_pages == 10
    assert settings.llm.provider == "ollama"
    assert settings.logging.level == "DEBUG"


def test_from_dict_does_not_mutate_input() -> None:
    """Test parsing leaves the source dictionary untouched."""
    data = {"availability": {"famous_marks": {"enabled": True}}, "llm": {"provider": "openai"}}

    Settings.from_dict(data)

    assert data == {"availability": {"famous_marks": {"enabled": True}}, "llm": {"provider": "openai"}}


def test_repository_config_loads() -> None:
    """Test the shipped config.yaml parses."""
    settings = load_settings(Path(__file__).parent.parent / "config.yaml")

    assert settings.availability.famous_marks.enabled is False
    assert "Natura" in settings.availability.famous_marks.names
