"""Dashboard and insights tabs, rendered from the fixed sample analytics."""

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from market_research.models.insights import MarketInsight, MarketMetric, QuickAction

class DashboardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    metrics: List[MarketMetric]
    insights_title: str = "AI Market Insights"
    insights: List[MarketInsight]
    quick_actions: List[QuickAction]

class InsightsView(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = "Market Insights"
    insights: List[MarketInsight]

def render_dashboard(
    metrics: Sequence[MarketMetric],
    insights: Sequence[MarketInsight],
    quick_actions: Sequence[QuickAction],
) -> DashboardView:
    return DashboardView(metrics=list(metrics), insights=list(insights), quick_actions=list(quick_actions))

def render_insights(insights: Sequence[MarketInsight]) -> InsightsView:
    return InsightsView(insights=list(insights))
