"""
Research form: scalar fields, example toggles, segment editing and the
create-or-update submission against the research store.
"""

import logging
from typing import Awaitable, Callable, Dict, Optional

from market_research.core.segments import SegmentEditor
from market_research.core.state_machine import InvalidTransitionError, StateTransition, SubmitState
from market_research.models.research import Project, ResearchDraft, ResearchEntry, TextField
from market_research.models.validation import FormValidationError, require_title
from market_research.stores.base import ResearchStore, StoreError

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save market research."

Callback = Callable[[], Awaitable[None]]
Notify = Callable[[str], Awaitable[None]]

class ResearchForm:
    """
    Form state for creating or editing one research entry.

    ``existing_entry`` selects the mode: ``None`` creates a new entry on
    submit, anything else updates that entry by id. Writes go straight to the
    injected store; the caller is told about a successful save through
    ``on_submit`` (no arguments) and about a cancel through ``on_cancel``.

    Example Usage:
        form = ResearchForm(project, store, on_submit=refresh, notify=alert)
        form.title = "Q1 Analysis"
        form.segments.add_segment().update("name", "SMBs")
        await form.submit()
    """

    def __init__(
        self,
        project: Optional[Project],
        store: ResearchStore,
        existing_entry: Optional[ResearchEntry] = None,
        on_submit: Optional[Callback] = None,
        on_cancel: Optional[Callback] = None,
        notify: Optional[Notify] = None,
    ):
        self.project = project
        self.store = store
        self.on_submit = on_submit
        self.on_cancel = on_cancel
        self.notify = notify
        self.state = SubmitState.IDLE

        self.existing_entry: Optional[ResearchEntry] = None
        self.title = ''
        self.text: Dict[TextField, str] = {f: '' for f in TextField}
        self.show_examples: Dict[TextField, bool] = {f: False for f in TextField}
        self.segments = SegmentEditor()
        self.load(existing_entry)

    @property
    def is_edit(self) -> bool:
        return self.existing_entry is not None

    @property
    def is_submitting(self) -> bool:
        return self.state == SubmitState.SUBMITTING

    @property
    def heading(self) -> str:
        return f"{'Edit' if self.is_edit else 'New'} Market Research"

    @property
    def submit_label(self) -> str:
        return "Saving..." if self.is_submitting else "Save Research"

    def load(self, entry: Optional[ResearchEntry]) -> None:
        """Reset every field from ``entry``, or to blanks when it is None."""
        self.existing_entry = entry
        if entry is None:
            self.title = ''
            self.text = {f: '' for f in TextField}
            self.segments.reset()
            return
        self.title = entry.title or ''
        self.text = {f: getattr(entry, f.value) or '' for f in TextField}
        self.segments.reset(entry.target_segments)

    def set_text(self, field, value: str) -> None:
        self.text[TextField(field)] = value

    def toggle_example(self, field) -> bool:
        field = TextField(field)
        self.show_examples[field] = not self.show_examples[field]
        return self.show_examples[field]

    def build_draft(self) -> ResearchDraft:
        if self.project is None:
            raise FormValidationError("A project must be selected before saving research")
        # An entry never leaves the project it was created in
        project_id = self.existing_entry.project_id if self.is_edit else self.project.id
        return ResearchDraft(
            project_id=project_id,
            title=self.title,
            target_segments=list(self.segments.segments),
            **{f.value: v for f, v in self.text.items()},
        )

    async def submit(self) -> bool:
        """
        Validate and write the form to the store.

        Returns True when the entry was saved, False when the call was
        ignored (a save is already in flight) or the store failed. A store
        failure is reported through ``notify`` and leaves the form untouched
        so the user can retry.

        Raises:
            FormValidationError: title missing or no project selected
        """
        if self.is_submitting:
            logger.warning("Ignoring submit: a save is already in flight")
            return False

        require_title(self.title)
        # Captured now: the save targets this project even if the active one changes meanwhile
        draft = self.build_draft()
        payload = draft.to_payload()
        editing = self.existing_entry

        if self.state == SubmitState.SUCCEEDED:
            self._transition_state(SubmitState.IDLE)
        self._transition_state(SubmitState.SUBMITTING)

        try:
            if editing is not None:
                logger.info("Updating market research %s for project %s", editing.id, draft.project_id)
                await self.store.update(editing.id, payload)
            else:
                logger.info("Creating market research for project %s", draft.project_id)
                await self.store.insert(payload)
        except StoreError as e:
            logger.error("Error saving market research: %s", e)
            self._transition_state(SubmitState.FAILED)
            if self.notify:
                await self.notify(SAVE_FAILED_MESSAGE)
            return False

        self._transition_state(SubmitState.SUCCEEDED)
        if self.on_submit:
            await self.on_submit()
        return True

    async def cancel(self) -> None:
        """Discard in-progress edits; nothing is written."""
        self.load(self.existing_entry)
        if self.on_cancel:
            await self.on_cancel()

    def _transition_state(self, new_state: SubmitState):
        if not StateTransition.is_valid(self.state, new_state):
            raise InvalidTransitionError(
                f"Invalid submit transition: {self.state} -> {new_state}"
            )
        logger.debug("Submit state: %s -> %s", self.state.name, new_state.name)
        self.state = new_state
