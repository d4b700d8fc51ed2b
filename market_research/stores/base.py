from abc import ABC, abstractmethod
from typing import List, Dict, Any

from market_research.models.research import ResearchEntry

class StoreError(Exception):
    """Any failure reported by the research store (transport, auth, query)"""
    pass

class ResearchStore(ABC):
    """Base class for the remote ``market_research`` collection"""

    @abstractmethod
    async def list(self, project_id: str) -> List[ResearchEntry]:
        """All entries of a project, newest ``created_at`` first."""
        pass

    @abstractmethod
    async def insert(self, payload: Dict[str, Any]) -> ResearchEntry:
        pass

    @abstractmethod
    async def update(self, research_id: str, payload: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    async def delete(self, research_id: str) -> None:
        pass
