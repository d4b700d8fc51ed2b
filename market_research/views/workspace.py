"""
Top-level rendering of the workspace: the "select a project" screen, or the
header, tabs and whichever content currently takes precedence.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from market_research.core.state_machine import ViewMode
from market_research.core.workspace import ResearchWorkspace
from market_research.models.templates import MARKET_RESEARCH_TEMPLATE, ResearchTemplate
from market_research.views.dashboard import DashboardView, InsightsView, render_dashboard, render_insights
from market_research.views.form import FormView, render_form
from market_research.views.listing import ResearchList, ResearchListView

TAB_LABELS: Dict[ViewMode, str] = {
    ViewMode.DASHBOARD: "Analytics Dashboard",
    ViewMode.LIST: "Research Library",
    ViewMode.INSIGHTS: "Market Insights",
}

class SelectProjectView(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = "Select a Project"
    message: str = "Choose a project from the Projects tab to start your market research analysis."

class TabView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ViewMode
    label: str
    active: bool

class WorkspaceView(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = "Market Research"
    subtitle: str = "Analyze your market opportunity, competitive landscape, and consumer insights"
    project_name: str
    tabs: List[TabView]
    filters: Dict[str, str]
    content: Union[FormView, DashboardView, ResearchListView, InsightsView]
    template: Optional[ResearchTemplate] = None

def research_list(workspace: ResearchWorkspace) -> ResearchList:
    return ResearchList(workspace.researches, workspace.loading, workspace.edit, workspace.delete)

def render_workspace(workspace: ResearchWorkspace) -> Union[SelectProjectView, WorkspaceView]:
    if not workspace.has_project:
        return SelectProjectView()

    if workspace.form is not None:
        content = render_form(workspace.form)
    elif workspace.view == ViewMode.DASHBOARD:
        content = render_dashboard(workspace.metrics, workspace.insights, workspace.quick_actions)
    elif workspace.view == ViewMode.LIST:
        content = research_list(workspace).render()
    else:
        content = render_insights(workspace.insights)

    return WorkspaceView(
        project_name=workspace.project.name,
        tabs=[TabView(id=mode, label=TAB_LABELS[mode], active=mode == workspace.view) for mode in ViewMode],
        filters=dict(workspace.filters),
        content=content,
        template=MARKET_RESEARCH_TEMPLATE if workspace.templates_open else None,
    )
