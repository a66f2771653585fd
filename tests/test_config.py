"""Tests for ProviderSettings."""

from dim.config import DEFAULT_API_BASE, DEFAULT_API_KEY, DEFAULT_MODEL, ProviderSettings


def test_defaults_when_env_empty() -> None:
    settings = ProviderSettings.from_env({})

    assert settings.api_base == DEFAULT_API_BASE
    assert settings.api_key == DEFAULT_API_KEY
    assert settings.model == DEFAULT_MODEL


def test_dim_variables_take_precedence() -> None:
    settings = ProviderSettings.from_env(
        {
            "DIM_API_BASE": "https://api.example.com/v1/",
            "OLLAMA_API_BASE": "http://ollama:11434/v1",
            "DIM_API_KEY": "sk-test",
            "DIM_MODEL": "gpt-4o-mini",
        }
    )

    assert settings.api_base == "https://api.example.com/v1"
    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-4o-mini"


def test_ollama_base_used_as_fallback() -> None:
    settings = ProviderSettings.from_env({"OLLAMA_API_BASE": "http://ollama:11434/v1"})

    assert settings.api_base == "http://ollama:11434/v1"


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("DIM_MODEL", "from-process-env")
    monkeypatch.delenv("DIM_API_BASE", raising=False)

    assert ProviderSettings.from_env().model == "from-process-env"
