"""
Supabase-backed research store.

The supabase-py client is synchronous; each call runs in a worker thread so
the event loop driving the workspace is never blocked.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client, create_client

from market_research.config import ConfigurationError, WorkspaceConfig
from market_research.models.research import ResearchEntry
from market_research.stores.base import ResearchStore, StoreError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_client(url: str, key: str) -> Client:
    """Process-wide client per (url, key); created on first use."""
    logger.info("Creating Supabase client for %s", url)
    return create_client(url, key)


class SupabaseResearchStore(ResearchStore):
    def __init__(self, client: Client, table_name: str = "market_research") -> None:
        self._client = client
        self._table_name = table_name

    @classmethod
    def from_config(cls, config: WorkspaceConfig) -> "SupabaseResearchStore":
        if not config.supabase_url or not config.supabase_key:
            raise ConfigurationError("SUPABASE_URL and SUPABASE_KEY must be set for the supabase backend.")
        return cls(get_client(config.supabase_url, config.supabase_key), config.table_name)

    def _table(self):
        return self._client.table(self._table_name)

    async def _execute(self, action: str, build) -> Optional[List[Dict[str, Any]]]:
        try:
            result = await asyncio.to_thread(lambda: build().execute())
        except Exception as exc:
            raise StoreError(f"Supabase {action} on '{self._table_name}' failed: {exc}") from exc
        return result.data

    async def list(self, project_id: str) -> List[ResearchEntry]:
        data = await self._execute(
            "select",
            lambda: self._table().select("*").eq("project_id", project_id).order("created_at", desc=True),
        )
        try:
            return [ResearchEntry.model_validate(row) for row in data or []]
        except ValidationError as exc:
            raise StoreError(f"Malformed market research row: {exc}") from exc

    async def insert(self, payload: Dict[str, Any]) -> ResearchEntry:
        data = await self._execute("insert", lambda: self._table().insert(payload))
        if not data:
            raise StoreError("Supabase insert returned no row")
        try:
            return ResearchEntry.model_validate(data[0])
        except ValidationError as exc:
            raise StoreError(f"Malformed market research row: {exc}") from exc

    async def update(self, research_id: str, payload: Dict[str, Any]) -> None:
        data = await self._execute("update", lambda: self._table().update(payload).eq("id", research_id))
        if not data:
            raise StoreError(f"No market research row with id {research_id} was updated")

    async def delete(self, research_id: str) -> None:
        data = await self._execute("delete", lambda: self._table().delete().eq("id", research_id))
        if not data:
            raise StoreError(f"No market research row with id {research_id} was deleted")
