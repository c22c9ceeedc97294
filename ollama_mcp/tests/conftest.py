"""Shared fixtures: a stub Ollama backend behind httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from ollama_mcp.core.ollama_client import OllamaClient


@dataclass
class StubOllama:
    """Routes requests by path to canned replies and records every request."""

    replies: dict[str, tuple[int, Any] | Exception] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    client: OllamaClient | None = None

    def reply(self, path: str, payload: Any, status_code: int = 200) -> None:
        self.replies[path] = (status_code, payload)

    def fail(self, path: str, error: Exception) -> None:
        self.replies[path] = error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.get(request.url.path)
        if reply is None:
            return httpx.Response(404, json={"error": f"no stub for {request.url.path}"})
        if isinstance(reply, Exception):
            raise reply
        status_code, payload = reply
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)

    def json_body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def stub_ollama(monkeypatch) -> StubOllama:
    stub = StubOllama()
    stub.client = OllamaClient(
        base_url="http://ollama.test",
        timeout=5.0,
        transport=httpx.MockTransport(stub.handle),
    )
    monkeypatch.setattr("ollama_mcp.mcp.server.ollama_client", stub.client)
    return stub
