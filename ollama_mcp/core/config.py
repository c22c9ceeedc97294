"""Configuration management for the Ollama MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, AnyHttpUrl, BaseModel, Field, PositiveInt, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo root first, then the package directory, then the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class KnownModel(BaseModel):
    """Informational descriptor for a model the server expects to be useful."""

    name: str
    capabilities: list[str] = Field(default_factory=list)
    description: str = ""


def _default_known_models() -> list[KnownModel]:
    return [
        KnownModel(
            name="llama3.2",
            capabilities=["text-generation", "chat", "reasoning"],
            description="General purpose text generation and reasoning",
        ),
        KnownModel(
            name="qwen2.5",
            capabilities=["text-generation", "chat", "coding"],
            description="High-quality text generation with strong coding abilities",
        ),
        KnownModel(
            name="deepseek-coder",
            capabilities=["coding", "text-generation"],
            description="Specialised code generation and programming assistance",
        ),
        KnownModel(
            name="nomic-embed-text",
            capabilities=["embeddings"],
            description="Text embedding generation for semantic similarity",
        ),
    ]


class OllamaSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Optional log file path; empty or unset keeps logging on stderr only",
    )

    server_name: str = Field("ollama-mcp-server", description="MCP server name")

    ollama_base_url: AnyHttpUrl = Field(
        "http://localhost:11434",
        description="Ollama REST base URL",
        validation_alias=AliasChoices("OLLAMA_BASE_URL", "OLLAMA_HOST"),
    )
    ollama_timeout_ms: PositiveInt = Field(
        300_000,
        description="Per-request timeout in milliseconds",
        validation_alias=AliasChoices("OLLAMA_TIMEOUT_MS", "OLLAMA_TIMEOUT"),
    )

    known_models: list[KnownModel] = Field(default_factory=_default_known_models)

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def base_url(self) -> str:
        return str(self.ollama_base_url).rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.ollama_timeout_ms / 1000

    def known_model(self, name: str) -> KnownModel | None:
        """Look up a known model by exact name or by its untagged base name."""

        base_name = name.split(":", 1)[0]
        for model in self.known_models:
            if model.name in (name, base_name):
                return model
        return None


@lru_cache
def get_settings() -> OllamaSettings:
    """Return a cached OllamaSettings instance."""

    try:
        return OllamaSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
