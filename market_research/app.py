"""
Streamlit page for the Market Research workspace.

Keeps one ResearchWorkspace per browser session and renders its view models.
Streamlit cannot block on a modal, so the delete confirmation is a two-step
in-page prompt and save failures are queued as alerts for the next rerun.

Run with: streamlit run market_research/app.py
"""

from __future__ import annotations

import asyncio
import logging
from typing import List

import streamlit as st

from market_research.config import WorkspaceConfig
from market_research.core.state_machine import ViewMode
from market_research.core.workspace import DELETE_CONFIRM_MESSAGE, ResearchWorkspace
from market_research.main import configure_logging
from market_research.models.insights import InsightType
from market_research.models.research import Project, SegmentField, TextField
from market_research.models.templates import SEGMENT_PLACEHOLDERS
from market_research.models.validation import FormValidationError
from market_research.stores.base import ResearchStore
from market_research.stores.factory import build_store
from market_research.views.dashboard import DashboardView, InsightsView
from market_research.views.form import FormView
from market_research.views.listing import ListState, ResearchListView
from market_research.views.workspace import SelectProjectView, TAB_LABELS, render_workspace, research_list

LOGGER = logging.getLogger(__name__)

INSIGHT_STYLES = {
    InsightType.OPPORTUNITY: st.success,
    InsightType.THREAT: st.error,
    InsightType.TREND: st.info,
}


@st.cache_resource(show_spinner=False)
def _get_store() -> ResearchStore:
    """One store (and Supabase client) per Streamlit process."""
    config = WorkspaceConfig.from_env()
    configure_logging(config.log_level)
    return build_store(config)


async def _session_confirm(message: str) -> bool:
    # Set by the in-page "Confirm delete" button right before delete runs
    return bool(st.session_state.pop("delete_confirmed", False))


async def _session_notify(message: str) -> None:
    st.session_state.alerts.append(message)


def _init_session_state() -> ResearchWorkspace:
    if "alerts" not in st.session_state:
        st.session_state.alerts: List[str] = []
    if "workspace" not in st.session_state:
        st.session_state.workspace = ResearchWorkspace(
            _get_store(), confirm=_session_confirm, notify=_session_notify
        )
    return st.session_state.workspace


def _render_sidebar(workspace: ResearchWorkspace) -> None:
    with st.sidebar:
        st.header("Project")
        project_id = st.text_input("Project id", value=workspace.project.id if workspace.project else "")
        project_name = st.text_input("Project name", value=workspace.project.name if workspace.project else "")
        if st.button("Open project", use_container_width=True):
            project = Project(id=project_id, name=project_name or project_id) if project_id.strip() else None
            asyncio.run(workspace.set_project(project))
            st.rerun()
        if workspace.project and st.button("Refresh", use_container_width=True):
            asyncio.run(workspace.refresh())
            st.rerun()


def _render_pending_delete(workspace: ResearchWorkspace) -> None:
    research_id = st.session_state.get("pending_delete")
    if not research_id:
        return
    st.warning(DELETE_CONFIRM_MESSAGE)
    col_yes, col_no = st.columns(2)
    if col_yes.button("Confirm delete", type="primary"):
        st.session_state.delete_confirmed = True
        st.session_state.pop("pending_delete", None)
        asyncio.run(workspace.delete(research_id))
        st.rerun()
    if col_no.button("Keep entry"):
        st.session_state.pop("pending_delete", None)
        st.rerun()


def _render_form(workspace: ResearchWorkspace, view: FormView) -> None:
    form = workspace.form
    key = f"form-{id(form)}"
    st.subheader(view.heading)

    form.title = st.text_input("Research Title *", value=form.title, placeholder=view.title_placeholder,
                               key=f"{key}-title")

    for field_view in view.fields:
        label_col, toggle_col = st.columns([4, 1])
        label_col.markdown(f"**{field_view.label}**")
        if toggle_col.button(field_view.example_toggle_label, key=f"{key}-{field_view.field.value}-example"):
            form.toggle_example(field_view.field)
            st.rerun()
        if field_view.example:
            st.info(f"Example: {field_view.example}")
        form.set_text(field_view.field, st.text_area(
            field_view.label, value=field_view.value, placeholder=field_view.placeholder,
            height=28 * field_view.rows, key=f"{key}-{field_view.field.value}", label_visibility="collapsed",
        ))

    st.markdown("**Target Market Segments**")
    if st.button("+ Add Segment", key=f"{key}-add-segment"):
        form.segments.add_segment()
        st.rerun()
    if view.empty_segments_title:
        st.caption(f"{view.empty_segments_title}. {view.empty_segments_hint}")

    # Keys carry the list revision so widgets never outlive a shift of positions
    revision = form.segments.revision
    for row in form.segments.rows():
        seg_key = f"{key}-seg-{revision}-{row.index}"
        with st.container(border=True):
            head_col, remove_col = st.columns([4, 1])
            head_col.markdown(f"**{row.heading}**")
            if remove_col.button("Remove", key=f"{seg_key}-remove"):
                row.remove()
                st.rerun()
            name_col, size_col = st.columns(2)
            segment = row.segment
            for column, field in ((name_col, SegmentField.NAME), (size_col, SegmentField.SIZE)):
                value = column.text_input(field.value.title(), value=getattr(segment, field.value) or "",
                                          placeholder=SEGMENT_PLACEHOLDERS[field.value],
                                          key=f"{seg_key}-{field.value}")
                row.update(field, value)
            row.update(SegmentField.DESCRIPTION, st.text_area(
                "Description", value=segment.description or "",
                placeholder=SEGMENT_PLACEHOLDERS["description"], key=f"{seg_key}-description",
            ))

    cancel_col, save_col = st.columns(2)
    if cancel_col.button("Cancel", key=f"{key}-cancel"):
        asyncio.run(form.cancel())
        st.rerun()
    if save_col.button(view.submit_label, disabled=view.submit_disabled, type="primary", key=f"{key}-save"):
        try:
            asyncio.run(form.submit())
        except FormValidationError as exc:
            st.session_state.alerts.append(str(exc))
        st.rerun()


def _render_list(workspace: ResearchWorkspace, view: ResearchListView) -> None:
    if view.state != ListState.GRID:
        st.info(f"{view.message} {view.hint or ''}".strip())
        return
    columns = st.columns(3)
    for i, (card, card_view) in enumerate(zip(research_list(workspace).cards(), view.cards)):
        with columns[i % 3].container(border=True):
            st.caption(card_view.created_label)
            st.markdown(f"### {card_view.title}")
            if card_view.market_size_preview:
                st.write(card_view.market_size_preview)
            if card_view.positioning_preview:
                st.write(card_view.positioning_preview)
            st.caption(card_view.segment_label)
            if card_view.badges:
                st.markdown(" ".join(f"`{b}`" for b in card_view.badges))
            edit_col, delete_col = st.columns(2)
            if edit_col.button("Edit", key=f"edit-{card_view.id}"):
                card.edit()
                st.rerun()
            if delete_col.button("Delete", key=f"delete-{card_view.id}"):
                st.session_state.pending_delete = card_view.id
                st.rerun()


def _render_insights(insights) -> None:
    for insight in insights:
        INSIGHT_STYLES[insight.type](
            f"**{insight.title}** ({insight.priority_label})\n\n{insight.description}\n\n_{insight.impact}_"
        )


def _render_dashboard(workspace: ResearchWorkspace, view: DashboardView) -> None:
    for column, metric in zip(st.columns(len(view.metrics)), view.metrics):
        column.metric(metric.title, metric.value, metric.change)
    st.subheader(view.insights_title)
    _render_insights(view.insights)
    st.subheader("Quick Actions")
    for column, action in zip(st.columns(len(view.quick_actions)), view.quick_actions):
        if column.button(action.label, help=action.caption, key=f"quick-{action.id}", disabled=action.action is None):
            workspace.run_quick_action(action.action)
            st.rerun()


def main() -> None:
    st.set_page_config(page_title="Market Research", layout="wide")

    try:
        workspace = _init_session_state()
    except Exception as exc:  # pragma: no cover - surfaced to UI
        LOGGER.exception("Failed to initialize the market research store: %s", exc)
        st.error(f"Failed to initialize the research store. Check SUPABASE_URL and SUPABASE_KEY.\n\n{exc}")
        return

    _render_sidebar(workspace)
    while st.session_state.alerts:
        st.error(st.session_state.alerts.pop(0))

    view = render_workspace(workspace)
    if isinstance(view, SelectProjectView):
        st.title(view.title)
        st.caption(view.message)
        return

    st.title(view.title)
    st.caption(view.subtitle)
    st.markdown(f"**Project:** {view.project_name}")

    header_cols = st.columns([3, 1, 1])
    selected = header_cols[0].radio(
        "View", list(ViewMode), index=list(ViewMode).index(workspace.view),
        format_func=TAB_LABELS.get, horizontal=True, label_visibility="collapsed",
    )
    if selected != workspace.view:
        workspace.set_view(selected)
        st.rerun()
    if header_cols[1].button("Examples"):
        workspace.open_templates()
        st.rerun()
    if header_cols[2].button("New Research", type="primary"):
        workspace.new_research()
        st.rerun()

    _render_pending_delete(workspace)

    content = view.content
    if isinstance(content, FormView):
        _render_form(workspace, content)
    elif isinstance(content, DashboardView):
        _render_dashboard(workspace, content)
    elif isinstance(content, ResearchListView):
        _render_list(workspace, content)
    elif isinstance(content, InsightsView):
        st.subheader(content.title)
        _render_insights(content.insights)

    if view.template:
        with st.expander(f"Example template: {view.template.title}", expanded=True):
            for field in TextField:
                st.markdown(f"**{field.value.replace('_', ' ').title()}**")
                st.write(getattr(view.template, field.value))
            for i, segment in enumerate(view.template.target_segments, 1):
                st.markdown(f"**Segment {i}: {segment.name}** ({segment.size})")
                st.write(segment.description)
            if st.button("Close examples"):
                workspace.close_templates()
                st.rerun()


if __name__ == "__main__":
    main()
