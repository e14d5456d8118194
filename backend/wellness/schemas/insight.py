"""
Pydantic schemas for trends, averages and recommendations.
"""
import enum
from typing import List, Optional
from datetime import date
from wellness.schemas.checkin import CamelModel, CheckIn


class UrgencyTier(str, enum.Enum):
    """Recommendation urgency enumeration."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recommendation(CamelModel):
    """Schema for recommendation response."""
    title: str
    description: str
    urgency: UrgencyTier


class TrendPoint(CamelModel):
    """One chart point; score is None on days without a check-in."""
    date: date
    score: Optional[float] = None


class TrendResponse(CamelModel):
    """Schema for trend series response."""
    days: int
    as_of: date
    points: List[TrendPoint]


class AverageResponse(CamelModel):
    """Schema for window average response."""
    days: int
    as_of: date
    average: Optional[float] = None


class SummaryResponse(CamelModel):
    """Schema for the dashboard summary."""
    as_of: date
    latest: Optional[CheckIn] = None
    week_average: Optional[float] = None  # 7-day window
    month_average: Optional[float] = None  # 30-day window
    recommendation: Recommendation
