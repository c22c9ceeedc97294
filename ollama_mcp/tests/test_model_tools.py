import httpx
import pytest

from ollama_mcp.core.model_cache import model_cache
from ollama_mcp.mcp.server import call_tool


@pytest.mark.asyncio
async def test_list_models_renders_bullets_with_known_capabilities(stub_ollama):
    stub_ollama.reply(
        "/api/tags", {"models": [{"name": "llama3.2:latest"}, {"name": "mystery:7b"}]}
    )

    outcome = await call_tool("list_models", {})

    assert not outcome.is_error
    assert outcome.text == (
        "**Available Ollama Models:**\n\n"
        "• llama3.2:latest (text-generation, chat, reasoning)\n"
        "• mystery:7b"
    )
    assert model_cache.models == ["llama3.2:latest", "mystery:7b"]


@pytest.mark.asyncio
async def test_list_models_with_no_models(stub_ollama):
    stub_ollama.reply("/api/tags", {"models": []})

    outcome = await call_tool("list_models", None)

    assert not outcome.is_error
    assert "No models found. Try pulling a model first." in outcome.text


@pytest.mark.asyncio
async def test_list_models_backend_failure_is_not_an_error(stub_ollama):
    stub_ollama.fail("/api/tags", httpx.ConnectError("Connection refused"))

    outcome = await call_tool("list_models", {})

    assert not outcome.is_error
    assert "No models found." in outcome.text


@pytest.mark.asyncio
async def test_pull_model_success(stub_ollama):
    stub_ollama.reply("/api/pull", {"status": "success"})

    outcome = await call_tool("pull_model", {"model": "llama3.2:1b"})

    assert not outcome.is_error
    assert outcome.content == ["Successfully pulled model: llama3.2:1b"]


@pytest.mark.asyncio
async def test_pull_model_failure_names_model(stub_ollama):
    stub_ollama.reply(
        "/api/pull", {"error": "pull model manifest: file does not exist"}, status_code=500
    )

    outcome = await call_tool("pull_model", {"model": "llama3.2:1b"})

    assert outcome.is_error
    assert outcome.text.startswith(
        "Failed to pull model: llama3.2:1b. "
        "Check if the model name is correct and Ollama is running."
    )
    assert "file does not exist" in outcome.text


@pytest.mark.asyncio
async def test_pull_model_unreachable_backend(stub_ollama):
    stub_ollama.fail("/api/pull", httpx.ConnectError("Connection refused"))

    outcome = await call_tool("pull_model", {"model": "llama3.2:1b"})

    assert outcome.is_error
    assert "llama3.2:1b" in outcome.text


@pytest.mark.asyncio
async def test_pull_model_requires_model(stub_ollama):
    outcome = await call_tool("pull_model", {})

    assert outcome.is_error
    assert outcome.text == "Error executing pull_model: Invalid arguments: model: Field required"
