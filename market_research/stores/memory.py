"""In-process research store, used by the demo, the console and the tests."""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from market_research.models.research import ResearchEntry
from market_research.stores.base import ResearchStore, StoreError

logger = logging.getLogger(__name__)


class InMemoryResearchStore(ResearchStore):
    """Keeps rows in a dict keyed by id; mirrors the remote store's contract."""

    def __init__(self, rows: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        self._rows: Dict[str, Dict[str, Any]] = {}
        self._sequence = count()
        self._order: Dict[str, int] = {}
        for row in rows or []:
            self._put(dict(row))

    def _put(self, row: Dict[str, Any]) -> Dict[str, Any]:
        row.setdefault("id", uuid4().hex)
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat(timespec="microseconds"))
        row["id"] = str(row["id"])
        self._rows[row["id"]] = row
        self._order.setdefault(row["id"], next(self._sequence))
        return row

    def _sort_key(self, row: Dict[str, Any]):
        # Rows created within the same clock tick keep insertion order
        return (str(row.get("created_at") or ""), self._order[row["id"]])

    @property
    def rows(self) -> List[Dict[str, Any]]:
        """Snapshot of the stored rows, for inspection."""
        return [copy.deepcopy(r) for r in self._rows.values()]

    async def list(self, project_id: str) -> List[ResearchEntry]:
        rows = [r for r in self._rows.values() if r.get("project_id") == project_id]
        rows.sort(key=self._sort_key, reverse=True)
        return [ResearchEntry.model_validate(copy.deepcopy(r)) for r in rows]

    async def insert(self, payload: Dict[str, Any]) -> ResearchEntry:
        if "id" in payload:
            raise StoreError("id is assigned by the store and cannot be inserted")
        row = self._put(copy.deepcopy(payload))
        logger.debug("Inserted market research row %s", row["id"])
        return ResearchEntry.model_validate(copy.deepcopy(row))

    async def update(self, research_id: str, payload: Dict[str, Any]) -> None:
        row = self._rows.get(str(research_id))
        if row is None:
            raise StoreError(f"No market research row with id {research_id}")
        row.update(copy.deepcopy(payload))

    async def delete(self, research_id: str) -> None:
        if self._rows.pop(str(research_id), None) is None:
            raise StoreError(f"No market research row with id {research_id}")
        self._order.pop(str(research_id), None)
