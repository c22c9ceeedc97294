"""Model management tools."""

from __future__ import annotations

from pydantic import Field

from ...core.config import get_settings
from ...core.logging_config import get_logger
from ...core.model_cache import model_cache
from ...core.ollama_client import OllamaClient
from ...core.types import ToolOutcome
from ..registry import ToolArguments, catalog_tool
from .utils import error_result, text_result

logger = get_logger(__name__)

NO_MODELS_TEXT = "No models found. Try pulling a model first."


class ListModelsArguments(ToolArguments):
    pass


def _describe_model(name: str) -> str:
    known = get_settings().known_model(name)
    if known and known.capabilities:
        return f"• {name} ({', '.join(known.capabilities)})"
    return f"• {name}"


@catalog_tool(
    "list_models",
    description="List all available Ollama models on the local system",
    arguments=ListModelsArguments,
)
async def list_models(client: OllamaClient, args: ListModelsArguments) -> ToolOutcome:
    result = await model_cache.refresh(client)
    if not result.ok:
        logger.warning("list_models_backend_unavailable", error=str(result.error))

    names = result.unwrap_or([])
    listing = "\n".join(_describe_model(name) for name in names) if names else NO_MODELS_TEXT
    return text_result(f"**Available Ollama Models:**\n\n{listing}")


class PullModelArguments(ToolArguments):
    model: str = Field(
        ..., min_length=1, description="Model name to pull (e.g., llama3.2, qwen2.5:14b)"
    )


@catalog_tool(
    "pull_model",
    description="Download and install a new model to Ollama",
    arguments=PullModelArguments,
)
async def pull_model(client: OllamaClient, args: PullModelArguments) -> ToolOutcome:
    result = await client.pull_model(args.model)
    if result.unwrap_or(False):
        return text_result(f"Successfully pulled model: {args.model}")

    message = (
        f"Failed to pull model: {args.model}. "
        "Check if the model name is correct and Ollama is running."
    )
    if result.error is not None:
        message = f"{message}\nReason: {result.error}"
    return error_result(message)
