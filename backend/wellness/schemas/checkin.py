"""
Pydantic schemas for CheckIn entity.
"""
import enum
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import date, datetime
from datetime import date as date_type


class SentimentLabel(str, enum.Enum):
    """Sentiment label enumeration."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys (storage and API format)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CheckIn(CamelModel):
    """One check-in per calendar date."""
    date: date
    mood_value: int
    note: str = ""
    sentiment_score: float
    sentiment_label: SentimentLabel
    created_at: datetime  # Last write, creation or edit


class CheckInBase(CamelModel):
    """Base check-in input schema."""
    mood_value: int = Field(0, ge=-2, le=2)  # -2 sad ... 0 neutral ... +2 happy
    note: str = ""


class CheckInCreate(CheckInBase):
    """Schema for check-in submission. Date defaults to today."""
    date: Optional[date_type] = None  # Field name shadows the type inside the class body


class CheckInUpdate(CheckInBase):
    """Schema for check-in update of a given date."""
    pass


class SentimentResult(CamelModel):
    """Schema for sentiment analysis result."""
    score: float
    label: SentimentLabel
