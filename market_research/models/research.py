"""
Pydantic models for market research entries and their target segments.
"""

from datetime import datetime
from typing import List, Optional, Dict, Any
from enum import Enum
from pydantic import BaseModel, Field, field_validator, ConfigDict

class SegmentField(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    SIZE = "size"
    CHARACTERISTICS = "characteristics"

class TextField(str, Enum):
    """Long-text fields of a research entry that carry an illustrative example"""
    MARKET_SIZE_ANALYSIS = "market_size_analysis"
    MARKET_TRENDS_TRACKING = "market_trends_tracking"
    COMPETITOR_IDENTIFICATION = "competitor_identification"
    POSITIONING_STRATEGY = "positioning_strategy"

class Project(BaseModel):
    """Parent project supplied by the project picker; read-only here"""
    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return str(v) if v is not None else v

class Segment(BaseModel):
    """
    One target market segment. Has no identity of its own: it is addressed
    by its position inside ResearchEntry.target_segments.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    size: Optional[str] = None
    characteristics: Optional[str] = None

    model_config = ConfigDict(extra='allow')

    @classmethod
    def blank(cls) -> "Segment":
        return cls(name='', description='', size='', characteristics='')

    def to_payload(self) -> Dict[str, str]:
        # Only the keys the segment actually carries, so an unedited segment
        # is written back exactly as it was read.
        return self.model_dump(exclude_none=True)

class ResearchEntry(BaseModel):
    """A persisted market research record, as returned by the store"""
    id: str
    project_id: str
    title: str
    market_size_analysis: Optional[str] = None
    market_trends_tracking: Optional[str] = None
    competitor_identification: Optional[str] = None
    positioning_strategy: Optional[str] = None
    target_segments: List[Segment] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = ConfigDict(extra='ignore')

    @field_validator('id', 'project_id', mode='before')
    @classmethod
    def coerce_identifier(cls, v):
        return str(v) if v is not None else v

    @field_validator('target_segments', mode='before')
    @classmethod
    def default_segments(cls, v):
        return [] if v is None else v

    @property
    def segment_count(self) -> int:
        return len(self.target_segments)

class ResearchDraft(BaseModel):
    """
    Editable fields of a research entry plus the owning project id.

    This is exactly what the form writes to the store: it never carries an
    ``id`` or ``created_at``, both of which the store assigns.
    """
    project_id: str
    title: str
    market_size_analysis: str = ''
    market_trends_tracking: str = ''
    competitor_identification: str = ''
    positioning_strategy: str = ''
    target_segments: List[Segment] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(exclude={'target_segments'})
        payload['target_segments'] = [s.to_payload() for s in self.target_segments]
        return payload
