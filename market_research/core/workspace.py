"""
Workspace orchestration: fetch lifecycle, view tabs, form open/close and
confirmed deletes for the market research of one active project.
"""

from typing import Awaitable, Callable, Dict, List, Optional, Any
import logging

from market_research.core.form import Notify, ResearchForm
from market_research.core.state_machine import ViewMode
from market_research.models.insights import SAMPLE_INSIGHTS, SAMPLE_METRICS, QUICK_ACTIONS
from market_research.models.research import Project, ResearchEntry
from market_research.stores.base import ResearchStore, StoreError

logger = logging.getLogger(__name__)

DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this market research entry?"

Confirm = Callable[[str], Awaitable[bool]]

async def _decline(message: str) -> bool:
    logger.warning("No confirmation prompt configured, declining: %s", message)
    return False

class ResearchWorkspace:
    """
    Owns the list of research entries for the active project and wires the
    list, form and delete actions together.

    Only the workspace reads from the store (``list``) and deletes; writes of
    entries go through the form it opens. ``confirm`` and ``notify`` are the
    blocking prompt and alert of the hosting UI, injected so a test or the
    console can script them.

    Example Usage:
        workspace = ResearchWorkspace(store, confirm=ask, notify=alert)
        await workspace.set_project(project)
        workspace.new_research()
        workspace.form.title = "Q1 Analysis"
        await workspace.form.submit()
    """

    def __init__(
        self,
        store: ResearchStore,
        confirm: Optional[Confirm] = None,
        notify: Optional[Notify] = None,
    ):
        self.store = store
        self.confirm = confirm or _decline
        self.notify = notify

        self.project: Optional[Project] = None
        self.researches: List[ResearchEntry] = []
        self.loading = False
        self.view = ViewMode.LIST
        self.form: Optional[ResearchForm] = None
        self.selected_entry: Optional[ResearchEntry] = None
        self.templates_open = False
        # Filter bar selections
        self.filters: Dict[str, str] = {'category': 'all', 'status': 'all', 'date_range': '30d'}

        self.metrics = SAMPLE_METRICS
        self.insights = SAMPLE_INSIGHTS
        self.quick_actions = QUICK_ACTIONS

        self._fetch_seq = 0
        self._applied_seq = 0

    @property
    def form_open(self) -> bool:
        return self.form is not None

    @property
    def has_project(self) -> bool:
        return self.project is not None

    async def set_project(self, project: Optional[Project]) -> None:
        """Switch the active project; a new project identity triggers a fetch."""
        previous = self.project
        self.project = project
        if project is None:
            self.researches = []
            self.loading = False
            self.form = None
            self.selected_entry = None
            return
        if self.form is not None:
            # New entries are created in whichever project is active at submit
            self.form.project = project
        if previous is not None and previous.id == project.id:
            return
        self.researches = []
        await self.refresh()

    async def refresh(self) -> bool:
        """
        Re-read all entries of the active project, newest first.

        A completion is applied only if its project is still the active one
        and no later fetch has already been applied; otherwise it is dropped.
        Store failures are logged and leave ``researches`` as it was.

        Returns:
            True if the result was applied to ``researches``
        """
        if self.project is None:
            return False

        project_id = self.project.id
        self._fetch_seq += 1
        seq = self._fetch_seq
        self.loading = True
        rows = None
        try:
            rows = await self.store.list(project_id)
        except StoreError as e:
            logger.error("Error fetching market research for project %s: %s", project_id, e)
        finally:
            if seq == self._fetch_seq:
                self.loading = False

        if self.project is None or self.project.id != project_id or seq < self._applied_seq:
            logger.info("Discarding stale market research fetch for project %s", project_id)
            return False
        if rows is None:
            return False

        self._applied_seq = seq
        self.researches = rows
        logger.info("Loaded %d market research entries for project %s", len(rows), project_id)
        return True

    def set_view(self, view) -> None:
        self.view = ViewMode(view)

    def new_research(self) -> ResearchForm:
        return self._open_form(None)

    def edit(self, entry: ResearchEntry) -> ResearchForm:
        return self._open_form(entry)

    def _open_form(self, entry: Optional[ResearchEntry]) -> ResearchForm:
        self.selected_entry = entry
        form = ResearchForm(self.project, self.store, existing_entry=entry, notify=self.notify)
        form.on_submit = lambda: self._handle_form_submit(form)
        form.on_cancel = lambda: self._handle_form_cancel(form)
        self.form = form
        return form

    def _close_form(self, form: ResearchForm) -> None:
        # A form that was replaced before its save finished must not close its successor
        if self.form is form:
            self.form = None
            self.selected_entry = None

    async def _handle_form_submit(self, form: ResearchForm) -> None:
        self._close_form(form)
        await self.refresh()

    async def _handle_form_cancel(self, form: ResearchForm) -> None:
        self._close_form(form)

    async def delete(self, research_id: str) -> bool:
        """
        Ask for confirmation, then delete by id and re-fetch.

        Every call prompts; nothing is removed locally until the re-fetch.
        A store failure is logged only.
        """
        if not await self.confirm(DELETE_CONFIRM_MESSAGE):
            logger.info("Delete of market research %s cancelled", research_id)
            return False
        try:
            await self.store.delete(research_id)
        except StoreError as e:
            logger.error("Error deleting market research %s: %s", research_id, e)
            return False
        logger.info("Deleted market research %s", research_id)
        await self.refresh()
        return True

    def open_templates(self) -> None:
        self.templates_open = True

    def close_templates(self) -> None:
        self.templates_open = False

    def run_quick_action(self, action: Optional[str]) -> None:
        if action == "new_research":
            self.new_research()
        elif action == "open_templates":
            self.open_templates()
        else:
            logger.debug("Quick action %r has no handler", action)

    def snapshot(self) -> Dict[str, Any]:
        """Current state for logging and debugging"""
        return {
            "project_id": self.project.id if self.project else None,
            "view": self.view.value,
            "loading": self.loading,
            "form_open": self.form_open,
            "selected_id": self.selected_entry.id if self.selected_entry else None,
            "research_count": len(self.researches),
            "templates_open": self.templates_open,
        }
