"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .exceptions import BackendError

T = TypeVar("T")


@dataclass(slots=True)
class BackendResult(Generic[T]):
    """Success-or-error outcome of a single Ollama operation.

    The client never raises for backend failures; callers decide whether to
    unwrap (and propagate) or fall back.
    """

    value: T | None = None
    error: BackendError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> BackendResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: BackendError) -> BackendResult[T]:
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


@dataclass(slots=True)
class ToolOutcome:
    """Represents the result returned to the MCP session for a tool call."""

    content: list[str] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.content)
