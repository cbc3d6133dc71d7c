# api/schemas.py

from typing import List, Optional, Union
from pydantic import BaseModel, Field


class RangeSchema(BaseModel):
    start: int
    end: int
    text: str


class ReportSchema(BaseModel):
    line: int
    column: int
    start: int
    end: int
    words: int
    text: str


class HighlightRequest(BaseModel):
    text: str
    max_words: Optional[int] = Field(default=None, gt=0)
    highlight_color: Optional[str] = None


class HighlightResponse(BaseModel):
    ranges: List[RangeSchema]
    highlight_color: str
    max_words: int


class MarkRequest(HighlightRequest):
    marker: str = "=="


class MarkResponse(BaseModel):
    marked_text: str
    ranges: List[RangeSchema]


class ReportResponse(BaseModel):
    spans: List[ReportSchema]


class SettingsSchema(BaseModel):
    max_words: int
    highlight_color: str


class SettingsUpdate(BaseModel):
    max_words: Optional[Union[int, str]] = None
    highlight_color: Optional[str] = None
