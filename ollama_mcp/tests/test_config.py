import os

import pytest
from pydantic import ValidationError

from ollama_mcp.core.config import OllamaSettings, env_file_candidates, get_settings
from ollama_mcp.core.exceptions import ConfigurationError

_OLLAMA_VARS = ("OLLAMA_BASE_URL", "OLLAMA_HOST", "OLLAMA_TIMEOUT_MS", "OLLAMA_TIMEOUT")


@pytest.fixture(autouse=True)
def _restore_env(monkeypatch):
    original = os.environ.copy()
    for name in _OLLAMA_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    os.environ.clear()
    os.environ.update(original)


def test_settings_defaults():
    settings = OllamaSettings(_env_file=None)

    assert settings.base_url == "http://localhost:11434"
    assert settings.ollama_timeout_ms == 300_000
    assert settings.timeout_seconds == 300.0
    assert [model.name for model in settings.known_models] == [
        "llama3.2",
        "qwen2.5",
        "deepseek-coder",
        "nomic-embed-text",
    ]


def test_settings_reads_env(monkeypatch):
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://gpu-box:11434/")
    monkeypatch.setenv("OLLAMA_TIMEOUT_MS", "1500")

    settings = OllamaSettings(_env_file=None)

    assert settings.base_url == "http://gpu-box:11434"
    assert settings.timeout_seconds == 1.5


def test_settings_accepts_ollama_host_alias(monkeypatch):
    monkeypatch.setenv("OLLAMA_HOST", "http://10.0.0.5:11434")
    monkeypatch.setenv("OLLAMA_TIMEOUT", "60000")

    settings = OllamaSettings(_env_file=None)

    assert settings.base_url == "http://10.0.0.5:11434"
    assert settings.ollama_timeout_ms == 60_000


def test_settings_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("OLLAMA_TIMEOUT_MS", "0")

    with pytest.raises(ValidationError):
        OllamaSettings(_env_file=None)


def test_known_model_matches_tagged_names():
    settings = OllamaSettings(_env_file=None)

    assert settings.known_model("llama3.2").name == "llama3.2"
    assert settings.known_model("llama3.2:1b").name == "llama3.2"
    assert settings.known_model("mistral") is None


def test_get_settings_wraps_invalid_configuration(monkeypatch):
    monkeypatch.setenv("OLLAMA_BASE_URL", "not a url")
    get_settings.cache_clear()
    try:
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            get_settings()
    finally:
        monkeypatch.delenv("OLLAMA_BASE_URL")
        get_settings.cache_clear()


def test_env_file_candidates_prefer_repo_root_then_cwd():
    candidates = env_file_candidates()

    assert len(candidates) == 3
    assert candidates[0].endswith(".env")
    assert candidates[-1] == ".env"
