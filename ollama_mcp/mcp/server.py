"""FastMCP server configuration and tool dispatch."""

from __future__ import annotations

from typing import Any, Mapping

from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent

from ..core.config import get_settings
from ..core.logging_config import get_logger
from ..core.model_cache import model_cache
from ..core.ollama_client import OllamaClient, ollama_client
from ..core.types import ToolOutcome
from .registry import get_tool_spec, iter_tool_specs, mcp

# Import tool modules so the catalog is populated at import time.
from . import tools  # noqa: F401

logger = get_logger(__name__)


async def call_tool(name: str, arguments: Mapping[str, Any] | None) -> ToolOutcome:
    """Validate arguments, run the handler for ``name`` and never raise.

    Any failure, from an unknown tool name through invalid arguments to a
    backend error, comes back as an error-flagged outcome.
    """

    logger.debug("mcp_tool_call", name=name, arguments=arguments)
    try:
        spec = get_tool_spec(name)
        parsed = spec.parse(arguments or {})
        outcome = await spec.handler(ollama_client, parsed)
    except Exception as exc:  # noqa: BLE001 - reported to the session as an error result
        logger.warning(
            "tool_call_failed",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return ToolOutcome(content=[f"Error executing {name}: {exc}"], is_error=True)

    logger.info("tool_call_completed", tool=name, is_error=outcome.is_error)
    return outcome


class CatalogTool(Tool):
    """FastMCP tool whose execution is routed through :func:`call_tool`."""

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        outcome = await call_tool(self.name, arguments)
        if outcome.is_error:
            # FastMCP turns ToolError into an isError result carrying this text.
            raise ToolError(outcome.text)
        return ToolResult(
            content=[TextContent(type="text", text=block) for block in outcome.content]
        )


def _register_catalog() -> None:
    for spec in iter_tool_specs():
        mcp.add_tool(
            CatalogTool(
                name=spec.name,
                description=spec.description,
                parameters=spec.input_schema(),
            )
        )


async def list_tool_descriptors() -> list[dict[str, Any]]:
    """Return the catalog as MCP tool descriptors, in catalog order."""

    tools = await mcp.get_tools()
    descriptors: list[dict[str, Any]] = []

    for tool in tools.values():
        if not tool.enabled:
            continue

        mcp_tool = tool.to_mcp_tool()
        descriptors.append(
            {
                "name": mcp_tool.name,
                "description": mcp_tool.description or "",
                "inputSchema": mcp_tool.inputSchema or {"type": "object", "properties": {}},
            }
        )

    logger.debug("mcp_tools_listed", count=len(descriptors))
    return descriptors


async def check_backend(client: OllamaClient | None = None) -> bool:
    """Probe Ollama once at startup; failure is logged, not raised."""

    client = client or ollama_client
    result = await model_cache.refresh(client)
    if result.ok:
        logger.info("ollama_connected", base_url=client.base_url, models=len(result.value))
        return True

    logger.warning(
        "ollama_unreachable",
        base_url=client.base_url,
        error=str(result.error),
        hint="Make sure Ollama is running; start it with `ollama serve`",
    )
    return False


def server_info() -> dict[str, Any]:
    settings = get_settings()
    return {
        "server_name": settings.server_name,
        "ollama_base_url": settings.base_url,
        "timeout_ms": settings.ollama_timeout_ms,
        "known_models": [model.name for model in settings.known_models],
    }


_register_catalog()
