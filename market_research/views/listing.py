from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from market_research.models.research import ResearchEntry
from market_research.views.cards import ResearchCard, ResearchCardView

LOADING_MESSAGE = "Loading..."
EMPTY_TITLE = "No market research entries found."
EMPTY_HINT = "Get started by creating a new research entry."

class ListState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    GRID = "grid"

class ResearchListView(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: ListState
    message: Optional[str] = None
    hint: Optional[str] = None
    cards: List[ResearchCardView] = []

class ResearchList:
    """Cards in the order received; loading wins over everything else."""

    def __init__(
        self,
        researches: Sequence[ResearchEntry],
        loading: bool,
        on_edit: Callable[[ResearchEntry], Any],
        on_delete: Callable[[str], Any],
    ):
        self.researches = list(researches)
        self.loading = loading
        self.on_edit = on_edit
        self.on_delete = on_delete

    def cards(self) -> List[ResearchCard]:
        if self.loading:
            return []
        return [ResearchCard(r, self.on_edit, self.on_delete) for r in self.researches]

    def render(self) -> ResearchListView:
        if self.loading:
            return ResearchListView(state=ListState.LOADING, message=LOADING_MESSAGE)
        if not self.researches:
            return ResearchListView(state=ListState.EMPTY, message=EMPTY_TITLE, hint=EMPTY_HINT)
        return ResearchListView(state=ListState.GRID, cards=[c.render() for c in self.cards()])
