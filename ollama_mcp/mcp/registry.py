"""FastMCP instance and the static tool catalog."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.config import get_settings
from ..core.exceptions import ToolArgumentError, UnknownToolError
from ..core.ollama_client import OllamaClient
from ..core.types import ToolOutcome

mcp = FastMCP(name=get_settings().server_name)


class ToolArguments(BaseModel):
    """Base for per-tool argument models; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


Handler = Callable[[OllamaClient, Any], Awaitable[ToolOutcome]]


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    description: str
    arguments: type[ToolArguments]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.arguments.model_json_schema()

    def parse(self, arguments: Mapping[str, Any]) -> ToolArguments:
        try:
            return self.arguments.model_validate(dict(arguments))
        except ValidationError as exc:
            errors = [
                (".".join(str(part) for part in error["loc"]) or "arguments", error["msg"])
                for error in exc.errors()
            ]
            raise ToolArgumentError(self.name, errors) from exc


# Insertion order is the order clients see in tools/list.
_CATALOG: dict[str, ToolSpec] = {}


def catalog_tool(
    name: str, *, description: str, arguments: type[ToolArguments]
) -> Callable[[Handler], Handler]:
    """Record a handler in the catalog under ``name``."""

    def decorator(handler: Handler) -> Handler:
        if name in _CATALOG:
            raise ValueError(f"Tool {name!r} is already registered")
        _CATALOG[name] = ToolSpec(
            name=name, description=description, arguments=arguments, handler=handler
        )
        return handler

    return decorator


def get_tool_spec(name: str) -> ToolSpec:
    try:
        return _CATALOG[name]
    except KeyError:
        raise UnknownToolError(name) from None


def iter_tool_specs() -> Iterator[ToolSpec]:
    return iter(_CATALOG.values())
