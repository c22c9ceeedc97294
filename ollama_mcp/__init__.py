"""MCP server exposing local Ollama models as tools."""

__version__ = "0.1.0"
