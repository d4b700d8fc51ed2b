"""Summary card for a single research entry."""

from datetime import datetime
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, ConfigDict

from market_research.models.research import ResearchEntry

PREVIEW_LENGTH = 100

BADGE_TRENDS = "Market Trends"
BADGE_COMPETITORS = "Competitors"
BADGE_SEGMENTS = "Segments"

def format_date(value: Optional[datetime]) -> str:
    """Format as e.g. "Jan 5, 2024"; empty when the store gave no date."""
    if value is None:
        return ''
    return f"{value:%b} {value.day}, {value.year}"

def preview(text: Optional[str], length: int = PREVIEW_LENGTH) -> Optional[str]:
    if not text:
        return None
    return text[:length] + "..."

def segment_label(count: int) -> str:
    return f"{count} target segment{'' if count == 1 else 's'}"

class ResearchCardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    created_label: str
    market_size_preview: Optional[str] = None
    positioning_preview: Optional[str] = None
    segment_count: int
    segment_label: str
    badges: List[str]

class ResearchCard:
    """Read-only card; edit and delete are forwarded to the caller's callbacks."""

    def __init__(
        self,
        entry: ResearchEntry,
        on_edit: Callable[[ResearchEntry], Any],
        on_delete: Callable[[str], Any],
    ):
        self.entry = entry
        self.on_edit = on_edit
        self.on_delete = on_delete

    def render(self) -> ResearchCardView:
        entry = self.entry
        count = entry.segment_count
        badges = []
        if entry.market_trends_tracking:
            badges.append(BADGE_TRENDS)
        if entry.competitor_identification:
            badges.append(BADGE_COMPETITORS)
        if count > 0:
            badges.append(BADGE_SEGMENTS)
        return ResearchCardView(
            id=entry.id,
            title=entry.title,
            created_label=format_date(entry.created_at),
            market_size_preview=preview(entry.market_size_analysis),
            positioning_preview=preview(entry.positioning_strategy),
            segment_count=count,
            segment_label=segment_label(count),
            badges=badges,
        )

    def edit(self):
        return self.on_edit(self.entry)

    def delete(self):
        return self.on_delete(self.entry.id)
