"""Last-fetched model listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .logging_config import get_logger
from .ollama_client import OllamaClient
from .types import BackendResult

logger = get_logger(__name__)


@dataclass
class ModelCache:
    """Model names from the most recent successful listing.

    Nothing in the server depends on this being fresh, and overlapping
    refreshes may land out of order. Callers that care compare
    ``refreshed_at`` against their own tolerance and call :meth:`refresh`.
    """

    models: list[str] = field(default_factory=list)
    refreshed_at: datetime | None = None

    async def refresh(self, client: OllamaClient) -> BackendResult[list[str]]:
        """Force a listing; on failure the previous snapshot is kept."""

        result = await client.list_models()
        if result.ok:
            self.models = list(result.value)
            self.refreshed_at = datetime.now(tz=timezone.utc)
            logger.debug("model_cache_refreshed", count=len(self.models))
        return result


model_cache = ModelCache()
