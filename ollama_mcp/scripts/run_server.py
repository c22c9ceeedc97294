"""Run the Ollama MCP server over stdio.

Startup probes Ollama once; an unreachable daemon is logged and the server
keeps serving, so the first tool call that needs it reports the failure.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
from types import FrameType

from ollama_mcp.core.logging_config import configure_logging, get_logger
from ollama_mcp.mcp.server import check_backend, list_tool_descriptors, mcp, server_info

logger = get_logger(__name__)

SHUTDOWN_NOTICE = "Shutting down Ollama MCP server"


def _handle_shutdown(signum: int, _frame: FrameType | None) -> None:
    logger.info("server_shutdown", signal=signal.Signals(signum).name)
    print(f"\n{SHUTDOWN_NOTICE}", file=sys.stderr, flush=True)
    logging.shutdown()
    # In-flight tool calls are abandoned.
    os._exit(0)


def install_signal_handlers() -> None:
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _handle_shutdown)


async def serve() -> None:
    logger.info("server_startup", **server_info())
    await check_backend()
    descriptors = await list_tool_descriptors()
    logger.info("mcp_tools_ready", tools=[descriptor["name"] for descriptor in descriptors])
    await mcp.run_async(transport="stdio")


def main() -> None:
    configure_logging()
    install_signal_handlers()
    try:
        asyncio.run(serve())
    except Exception:
        logger.exception("server_fatal_error")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
