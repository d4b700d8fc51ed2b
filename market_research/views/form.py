from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from market_research.core.form import ResearchForm
from market_research.core.segments import SegmentEditor
from market_research.models.research import Segment, TextField
from market_research.models.templates import FIELD_GUIDES, TITLE_PLACEHOLDER

class TextFieldView(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: TextField
    label: str
    value: str
    placeholder: str
    rows: int
    example_toggle_label: str
    example: Optional[str] = None

class SegmentRowView(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    heading: str
    segment: Segment

class FormView(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    title: str
    title_placeholder: str = TITLE_PLACEHOLDER
    fields: List[TextFieldView]
    segments: List[SegmentRowView]
    empty_segments_title: Optional[str] = None
    empty_segments_hint: Optional[str] = None
    submit_label: str
    submit_disabled: bool

def render_form(form: ResearchForm) -> FormView:
    fields = []
    for field in TextField:
        guide = FIELD_GUIDES[field]
        shown = form.show_examples[field]
        fields.append(TextFieldView(
            field=field,
            label=guide.label,
            value=form.text[field],
            placeholder=guide.placeholder,
            rows=guide.rows,
            example_toggle_label=f"{'Hide' if shown else 'Show'} Example",
            example=guide.example if shown else None,
        ))

    rows = [SegmentRowView(index=r.index, heading=r.heading, segment=r.segment) for r in form.segments.rows()]
    empty = form.segments.is_empty
    return FormView(
        heading=form.heading,
        title=form.title,
        fields=fields,
        segments=rows,
        empty_segments_title=SegmentEditor.EMPTY_TITLE if empty else None,
        empty_segments_hint=SegmentEditor.EMPTY_HINT if empty else None,
        submit_label=form.submit_label,
        submit_disabled=form.is_submitting,
    )
