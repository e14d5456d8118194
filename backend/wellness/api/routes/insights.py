"""
Insight routes for trend charts, averages and recommendations.
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional
from datetime import date
from wellness.core.clock import Clock
from wellness.core.config import settings
from wellness.schemas.checkin import CheckInBase, SentimentResult
from wellness.schemas.insight import (
    AverageResponse, Recommendation, SummaryResponse, TrendResponse
)
from wellness.services.checkin_service import CheckInAggregator
from wellness.services.recommendation_service import get_recommendation
from wellness.services.sentiment_service import analyze_sentiment
from wellness.api.dependencies import get_aggregator, get_clock

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/trend", response_model=TrendResponse)
async def get_trend(
    days: int = Query(settings.DEFAULT_TREND_DAYS, ge=1, le=settings.MAX_TREND_DAYS),
    as_of: Optional[date] = None,
    aggregator: CheckInAggregator = Depends(get_aggregator),
    clock: Clock = Depends(get_clock)
):
    """Get one sentiment point per day for the chart (null on days without a check-in)."""
    as_of = as_of or clock.today()
    return TrendResponse(
        days=days,
        as_of=as_of,
        points=aggregator.trend_series(days, as_of)
    )


@router.get("/average", response_model=AverageResponse)
async def get_average(
    days: int = Query(7, ge=1, le=settings.MAX_TREND_DAYS),
    as_of: Optional[date] = None,
    aggregator: CheckInAggregator = Depends(get_aggregator),
    clock: Clock = Depends(get_clock)
):
    """Get the average sentiment over the last N days (null when there is no data)."""
    as_of = as_of or clock.today()
    return AverageResponse(
        days=days,
        as_of=as_of,
        average=aggregator.average(days, as_of)
    )


@router.get("/recommendation", response_model=Recommendation)
async def get_latest_recommendation(aggregator: CheckInAggregator = Depends(get_aggregator)):
    """Get the recommendation for the latest check-in (neutral score when there is none)."""
    latest = aggregator.latest()
    return get_recommendation(latest.sentiment_score if latest else 0.0)


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(aggregator: CheckInAggregator = Depends(get_aggregator)):
    """Get latest check-in, 7/30-day averages and recommendation."""
    return aggregator.summary()


@router.post("/sentiment", response_model=SentimentResult)
async def preview_sentiment(checkin_data: CheckInBase):
    """Score a note and mood without saving anything."""
    return analyze_sentiment(checkin_data.note, checkin_data.mood_value)
