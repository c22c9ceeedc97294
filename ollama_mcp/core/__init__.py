"""Core infrastructure utilities."""

from .config import OllamaSettings, get_settings
from .exceptions import BackendError
from .logging_config import configure_logging, get_logger
from .types import BackendResult, ToolOutcome

__all__ = [
    "BackendError",
    "BackendResult",
    "OllamaSettings",
    "ToolOutcome",
    "configure_logging",
    "get_logger",
    "get_settings",
]
