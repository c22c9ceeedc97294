"""Shared helpers for MCP tool implementations."""

from __future__ import annotations

from collections.abc import Sequence

from ...core.types import ToolOutcome


def text_result(text: str) -> ToolOutcome:
    return ToolOutcome(content=[text])


def error_result(text: str) -> ToolOutcome:
    return ToolOutcome(content=[text], is_error=True)


def truncate(text: str, limit: int = 100) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""

    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def format_sample(values: Sequence[float], count: int = 5, digits: int = 4) -> str:
    """Render the leading values of a vector, e.g. ``[0.1234, -0.5000...]``."""

    sample = ", ".join(f"{value:.{digits}f}" for value in values[:count])
    return f"[{sample}...]"
