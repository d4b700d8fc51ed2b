"""
Sample analytics shown on the dashboard and insights tabs.

None of this is persisted or derived from research entries; it is fixed
illustrative content.
"""

from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator

class Trend(str, Enum):
    UP = "up"
    DOWN = "down"

class InsightType(str, Enum):
    OPPORTUNITY = "opportunity"
    THREAT = "threat"
    TREND = "trend"

class MarketMetric(BaseModel):
    title: str
    value: str
    change: str
    trend: Trend
    icon: str
    color: str = Field(..., pattern="^(green|blue|yellow|purple)$")

class MarketInsight(BaseModel):
    id: int
    type: InsightType
    title: str
    description: str
    priority: str
    impact: str

    @field_validator('priority')
    @classmethod
    def validate_priority(cls, v):
        allowed = {"low", "medium", "high"}
        if v not in allowed:
            raise ValueError(f"Priority must be one of {allowed}")
        return v

    @property
    def priority_label(self) -> str:
        return f"{self.priority} priority"

class QuickAction(BaseModel):
    id: str
    label: str
    caption: str
    icon: str
    # Name of the workspace action this button triggers; None for display-only
    action: Optional[str] = None

SAMPLE_METRICS: List[MarketMetric] = [
    MarketMetric(title="Market Size", value="$2.4B", change="+12.5%",
                 trend=Trend.UP, icon="dollar-sign", color="green"),
    MarketMetric(title="Target Audience", value="1.2M", change="+8.3%",
                 trend=Trend.UP, icon="users", color="blue"),
    MarketMetric(title="Competition Level", value="Medium", change="-2.1%",
                 trend=Trend.DOWN, icon="target", color="yellow"),
    MarketMetric(title="Growth Rate", value="18.4%", change="+5.2%",
                 trend=Trend.UP, icon="trending-up", color="purple"),
]

SAMPLE_INSIGHTS: List[MarketInsight] = [
    MarketInsight(
        id=1,
        type=InsightType.OPPORTUNITY,
        title="Growing Market Segment",
        description="The premium segment shows 25% year-over-year growth with untapped potential.",
        priority="high",
        impact="$450K potential revenue",
    ),
    MarketInsight(
        id=2,
        type=InsightType.THREAT,
        title="New Competitor Entry",
        description="A major player entered your market last quarter with aggressive pricing.",
        priority="medium",
        impact="15% market share risk",
    ),
    MarketInsight(
        id=3,
        type=InsightType.TREND,
        title="Consumer Behavior Shift",
        description="Digital-first approach is becoming the preferred choice for 68% of customers.",
        priority="high",
        impact="Strategy pivot needed",
    ),
]

QUICK_ACTIONS: List[QuickAction] = [
    QuickAction(id="new_research", label="New Research", caption="Start market analysis",
                icon="search", action="new_research"),
    QuickAction(id="view_templates", label="View Templates", caption="Explore examples",
                icon="eye", action="open_templates"),
    QuickAction(id="export_data", label="Export Data", caption="Download insights",
                icon="download"),
]
