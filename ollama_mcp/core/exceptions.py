"""Custom exception hierarchy for the Ollama MCP server."""

from __future__ import annotations


class OllamaMCPError(Exception):
    """Base exception for server-level issues."""


class ConfigurationError(OllamaMCPError):
    """Raised when configuration is invalid or missing."""


class BackendError(OllamaMCPError):
    """Raised when Ollama is unreachable or responds with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ToolArgumentError(OllamaMCPError):
    """Raised when tool arguments fail validation before dispatch."""

    def __init__(self, tool: str, errors: list[tuple[str, str]]) -> None:
        self.tool = tool
        self.errors = errors
        details = "; ".join(f"{field}: {reason}" for field, reason in errors)
        super().__init__(f"Invalid arguments: {details}")


class UnknownToolError(OllamaMCPError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
