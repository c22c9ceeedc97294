"""Async Ollama REST client."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from .config import get_settings
from .exceptions import BackendError
from .http_client import async_http_client
from .logging_config import get_logger
from .types import BackendResult

logger = get_logger(__name__)

GENERATE_DEFAULT_OPTIONS: dict[str, Any] = {"temperature": 0.7, "top_p": 0.9, "top_k": 40}
CHAT_DEFAULT_OPTIONS: dict[str, Any] = {"temperature": 0.7, "top_p": 0.9}


def merge_options(defaults: Mapping[str, Any], options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Overlay caller options on the defaults, ignoring unset (None) values."""

    merged = dict(defaults)
    for key, value in (options or {}).items():
        if value is not None:
            merged[key] = value
    return merged


class OllamaClient:
    """Minimal async client for the Ollama REST API.

    Every operation returns a :class:`BackendResult`; nothing here raises for
    transport, HTTP or decoding failures.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout_seconds
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        operation: str,
    ) -> BackendResult[Any]:
        try:
            async with async_http_client(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(method.upper(), path, json=body)
        except httpx.TimeoutException as exc:
            return self._fail(
                operation, BackendError(f"Ollama {operation} timed out after {self.timeout:g}s: {exc}")
            )
        except httpx.HTTPError as exc:
            return self._fail(
                operation,
                BackendError(f"Ollama {operation} failed: cannot reach {self.base_url}: {exc}"),
            )

        if response.is_error:
            return self._fail(
                operation,
                BackendError(
                    f"Ollama {operation} failed: HTTP {response.status_code}: {_error_detail(response)}",
                    status_code=response.status_code,
                ),
            )

        try:
            payload = response.json()
        except ValueError as exc:
            return self._fail(
                operation,
                BackendError(f"Ollama {operation} failed: invalid JSON response: {exc}"),
            )

        if not isinstance(payload, dict):
            return self._fail(
                operation,
                BackendError(f"Ollama {operation} failed: unexpected payload {payload!r}"),
            )

        return BackendResult.success(payload)

    def _fail(self, operation: str, error: BackendError) -> BackendResult[Any]:
        logger.warning(
            "ollama_request_failed",
            operation=operation,
            base_url=self.base_url,
            status_code=error.status_code,
            error=str(error),
        )
        return BackendResult.failure(error)

    async def list_models(self) -> BackendResult[list[str]]:
        """Fetch the names of locally installed models."""

        result = await self._request("GET", "/api/tags", operation="model listing")
        if not result.ok:
            return BackendResult.failure(result.error)

        models = result.value.get("models") or []
        if not isinstance(models, list):
            return self._fail(
                "model listing",
                BackendError(f"Ollama model listing failed: unexpected models field {models!r}"),
            )
        names = [entry["name"] for entry in models if isinstance(entry, dict) and entry.get("name")]
        return BackendResult.success(names)

    async def generate_text(
        self,
        model: str,
        prompt: str,
        options: Mapping[str, Any] | None = None,
    ) -> BackendResult[str]:
        """Run a non-streaming completion and return the generated text."""

        logger.info("ollama_generate_request", model=model, prompt_chars=len(prompt))
        result = await self._request(
            "POST",
            "/api/generate",
            body={
                "model": model,
                "prompt": prompt,
                "stream": False,
                "options": merge_options(GENERATE_DEFAULT_OPTIONS, options),
            },
            operation="generation",
        )
        if not result.ok:
            return BackendResult.failure(result.error)
        return BackendResult.success(result.value.get("response") or "")

    async def chat_completion(
        self,
        model: str,
        messages: Sequence[Mapping[str, str]],
        options: Mapping[str, Any] | None = None,
    ) -> BackendResult[str]:
        """Run a non-streaming chat turn and return the assistant reply."""

        logger.info("ollama_chat_request", model=model, message_count=len(messages))
        result = await self._request(
            "POST",
            "/api/chat",
            body={
                "model": model,
                "messages": [dict(message) for message in messages],
                "stream": False,
                "options": merge_options(CHAT_DEFAULT_OPTIONS, options),
            },
            operation="chat completion",
        )
        if not result.ok:
            return BackendResult.failure(result.error)
        message = result.value.get("message") or {}
        if not isinstance(message, dict):
            return self._fail(
                "chat completion",
                BackendError(f"Ollama chat completion failed: unexpected message field {message!r}"),
            )
        return BackendResult.success(message.get("content") or "")

    async def generate_embedding(self, model: str, text: str) -> BackendResult[list[float]]:
        """Embed a single text and return the vector."""

        logger.info("ollama_embedding_request", model=model, text_chars=len(text))
        result = await self._request(
            "POST",
            "/api/embeddings",
            body={"model": model, "prompt": text},
            operation="embedding generation",
        )
        if not result.ok:
            return BackendResult.failure(result.error)
        embedding = result.value.get("embedding") or []
        if not isinstance(embedding, list) or not all(
            isinstance(value, (int, float)) for value in embedding
        ):
            return self._fail(
                "embedding generation",
                BackendError(
                    f"Ollama embedding generation failed: unexpected embedding field {embedding!r}"
                ),
            )
        return BackendResult.success([float(value) for value in embedding])

    async def pull_model(self, model: str) -> BackendResult[bool]:
        """Download a model; blocks until Ollama reports completion."""

        logger.info("ollama_pull_request", model=model)
        result = await self._request(
            "POST",
            "/api/pull",
            body={"name": model, "stream": False},
            operation="model pull",
        )
        if not result.ok:
            return BackendResult.failure(result.error)
        return BackendResult.success(True)


def _error_detail(response: httpx.Response) -> str:
    """Prefer Ollama's `{"error": ...}` body over the raw response text."""

    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return response.text or response.reason_phrase


ollama_client = OllamaClient()
