"""
Ordered, editable list of target segments held by a research form.

Segments live only in form state until the enclosing entry is saved. Rows
handed out by ``rows()`` carry the index they were rendered at; once the list
changes shape (add, remove, reset) those rows are stale and refuse to act, so
an index can never point at a segment other than the one that was shown.
"""

from typing import List, Optional, Sequence, Tuple, Union

from market_research.models.research import Segment, SegmentField

class StaleSegmentRowError(IndexError):
    """A segment row was used after the segment list changed shape"""
    pass

class SegmentRow:
    """One rendered segment, bound to its position at render time"""

    def __init__(self, editor: "SegmentEditor", index: int, revision: int):
        self._editor = editor
        self.index = index
        self._revision = revision

    @property
    def heading(self) -> str:
        return f"Segment {self.index + 1}"

    @property
    def segment(self) -> Segment:
        self._check_current()
        return self._editor.segments[self.index]

    @property
    def is_current(self) -> bool:
        return self._revision == self._editor.revision

    def update(self, field: Union[SegmentField, str], value: str) -> None:
        self._check_current()
        self._editor.update_segment(self.index, field, value)

    def remove(self) -> None:
        self._check_current()
        self._editor.remove_segment(self.index)

    def _check_current(self):
        if not self.is_current:
            raise StaleSegmentRowError(f"{self.heading} was rendered before the segment list changed")

class SegmentEditor:
    EMPTY_TITLE = "No target segments defined yet"
    EMPTY_HINT = 'Click "Add Segment" to define your target market segments'

    def __init__(self, segments: Optional[Sequence[Segment]] = None):
        self._segments: List[Segment] = []
        self.revision = 0
        self.reset(segments)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def is_empty(self) -> bool:
        return not self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def reset(self, segments: Optional[Sequence[Segment]] = None) -> None:
        self._segments = [s.model_copy(deep=True) for s in segments or []]
        self.revision += 1

    def rows(self) -> List[SegmentRow]:
        return [SegmentRow(self, i, self.revision) for i in range(len(self._segments))]

    def add_segment(self) -> SegmentRow:
        """Append a blank segment; there is no upper bound."""
        self._segments.append(Segment.blank())
        self.revision += 1
        return SegmentRow(self, len(self._segments) - 1, self.revision)

    def update_segment(self, index: int, field: Union[SegmentField, str], value: str) -> None:
        self._check_index(index)
        field = SegmentField(field)
        current = self._segments[index]
        self._segments[index] = current.model_copy(update={field.value: value})

    def remove_segment(self, index: int) -> None:
        """Drop the segment at ``index``; later segments shift down by one."""
        self._check_index(index)
        del self._segments[index]
        self.revision += 1

    def _check_index(self, index: int):
        # Negative indices are rejected too: positions are always render positions
        if not 0 <= index < len(self._segments):
            raise IndexError(f"Segment index {index} out of range for {len(self._segments)} segments")
