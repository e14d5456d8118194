"""
Check-in routes for daily mood and note submission.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from datetime import date
from wellness.core.clock import Clock
from wellness.core.utils import format_date_iso
from wellness.schemas.checkin import CheckIn, CheckInCreate, CheckInUpdate
from wellness.services.checkin_service import CheckInAggregator
from wellness.api.dependencies import get_aggregator, get_clock

router = APIRouter(prefix="/checkins", tags=["checkins"])


@router.get("", response_model=List[CheckIn])
async def list_checkins(aggregator: CheckInAggregator = Depends(get_aggregator)):
    """List all check-ins, oldest first."""
    return aggregator.list()


@router.post("", response_model=CheckIn, status_code=status.HTTP_201_CREATED)
async def submit_checkin(
    checkin_data: CheckInCreate,
    aggregator: CheckInAggregator = Depends(get_aggregator),
    clock: Clock = Depends(get_clock)
):
    """Save a check-in. Without a date it is filed under today, replacing any entry there."""
    entry_date = checkin_data.date or clock.today()
    return aggregator.upsert(entry_date, checkin_data.mood_value, checkin_data.note)


# Must come before the date-based routes
@router.get("/latest", response_model=CheckIn)
async def get_latest_checkin(aggregator: CheckInAggregator = Depends(get_aggregator)):
    """Get the check-in with the most recent date."""
    latest = aggregator.latest()
    if latest is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No check-ins yet"
        )
    return latest


@router.get("/{entry_date}", response_model=CheckIn)
async def get_checkin(
    entry_date: date,
    aggregator: CheckInAggregator = Depends(get_aggregator)
):
    """Get the check-in for a date."""
    checkin = aggregator.get(entry_date)
    if checkin is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No check-in for {format_date_iso(entry_date)}"
        )
    return checkin


@router.put("/{entry_date}", response_model=CheckIn)
async def update_checkin(
    entry_date: date,
    checkin_data: CheckInUpdate,
    aggregator: CheckInAggregator = Depends(get_aggregator)
):
    """Create or replace the check-in for a date."""
    return aggregator.upsert(entry_date, checkin_data.mood_value, checkin_data.note)


@router.delete("/{entry_date}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_checkin(
    entry_date: date,
    aggregator: CheckInAggregator = Depends(get_aggregator)
):
    """Delete the check-in for a date. Deleting a missing date is not an error."""
    aggregator.delete(entry_date)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
